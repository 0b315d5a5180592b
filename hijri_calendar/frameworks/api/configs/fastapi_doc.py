"""FastAPI configuration settings."""

from __future__ import annotations

from typing import Any, Dict, List

from hijri_calendar import __version__

api_prefix: str = "/api/v1"

fastapi_information: Dict[str, Any] = {
    "title": "Hijri Calendar API",
    "description": "Dual Gregorian/Hijri calendar with observances, countdowns, notes and prayer times",
    "version": __version__,
    "openapi_url": f"{api_prefix}/openapi.json",
    "docs_url": f"{api_prefix}/docs",
    "redoc_url": f"{api_prefix}/redoc",
}

fastapi_tags_metadata: List[Dict[str, str]] = [
    {
        "name": "Main",
        "description": "Service index",
    },
    {
        "name": "Calendar",
        "description": "Month, year and day views with observances and holidays",
    },
    {
        "name": "Countdown",
        "description": "Time left until the next Islamic event",
    },
    {
        "name": "Events",
        "description": "Personal notes anchored to Gregorian or Hijri dates",
    },
    {
        "name": "Settings",
        "description": "Stored user preferences",
    },
    {
        "name": "Prayer Times",
        "description": "Daily and monthly prayer timings",
    },
    {
        "name": "Reminders",
        "description": "Alarms and notifications due at a given minute",
    },
    {
        "name": "Health",
        "description": "Health check endpoints for monitoring service status",
    },
]
