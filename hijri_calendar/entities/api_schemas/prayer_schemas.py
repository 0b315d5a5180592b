"""API schema models for prayer time endpoints."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field

from hijri_calendar.entities.constants import PrayerName
from hijri_calendar.entities.prayer import NextPrayer


class PrayerTimesResponse(BaseModel):
    """Response model for today's prayer times.

    Args:
        location: Display name of the location, may be empty
        timings: HH:MM per prayer
        next_prayer: The next prayer after the request time
    """
    location: str = Field("", description="Display name of the location")
    timings: Dict[PrayerName, str] = Field(description="HH:MM per prayer")
    next_prayer: Optional[NextPrayer] = Field(None, description="Next prayer after now")
