"""Health check endpoint for API service."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from fastapi import APIRouter

from hijri_calendar import __version__
from hijri_calendar.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint


class HealthCheckEndpoint(ServiceAPIEndpointBluePrint):
    """Health check endpoint for API service status monitoring."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self.start_time = clock()

    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(prefix="/health", tags=["Health"])

        @api_route.get(
            "/",
            summary="Health check endpoint",
            description="Returns the current status of the API service",
        )
        async def health_check():
            now = self.clock()
            uptime = now - self.start_time
            hours, remainder = divmod(uptime.seconds, 3600)
            minutes, seconds = divmod(remainder, 60)

            return {
                "status": "ok",
                "version": __version__,
                "uptime": f"{uptime.days}d {hours}h {minutes}m {seconds}s",
                "timestamp": now.isoformat(),
            }

        @api_route.get(
            "/ping",
            summary="Simple ping endpoint",
            description="Returns a simple pong response to verify the service is running",
        )
        async def ping():
            return {"ping": "pong"}

        return api_route
