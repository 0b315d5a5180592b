"""Countdown API endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from fastapi import APIRouter, HTTPException

from hijri_calendar import LOGGER
from hijri_calendar.entities.api_schemas import CountdownResponse, CountdownTargetSchema
from hijri_calendar.entities.countdown import CountdownEvent, CountdownTarget
from hijri_calendar.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from hijri_calendar.use_cases.countdown_scheduler import CountdownScheduler, countdown
from hijri_calendar.utils.exceptions import HijriCalendarException


class CountdownEndpoint(ServiceAPIEndpointBluePrint):
    """Countdown to the next Islamic event.

    A target that cannot be resolved is answered with ``{"target": null}``.
    """

    def __init__(self, scheduler: CountdownScheduler, clock: Callable[[], datetime] = datetime.now):
        self.scheduler = scheduler
        self.clock = clock

    def _response(self, target: CountdownTarget, now: datetime) -> CountdownResponse:
        return CountdownResponse(
            target=CountdownTargetSchema.from_target(target, countdown(target, now))
        )

    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(prefix="/countdown", tags=["Countdown"])

        @api_route.get(
            "/next",
            summary="Next event",
            description="Countdown to the chronologically next event of the Hijri year",
            response_model=CountdownResponse,
        )
        async def get_next():
            now = self.clock()
            try:
                current = await self.scheduler.oracle.gregorian_to_hijri(now.date())
                target = await self.scheduler.get_next_countdown_target(current)
            except HijriCalendarException as e:
                LOGGER.warning(f"Countdown unavailable: {e}")
                return CountdownResponse()
            return self._response(target, now)

        @api_route.get(
            "/{event}",
            summary="Specific event",
            description="Countdown to the next occurrence of one event, e.g. ramadan or eid_al_adha",
            response_model=CountdownResponse,
        )
        async def get_event(event: str):
            try:
                selected = CountdownEvent[event.upper()]
            except KeyError:
                raise HTTPException(status_code=404, detail={"error": f"Unknown event {event!r}"})

            now = self.clock()
            try:
                current = await self.scheduler.oracle.gregorian_to_hijri(now.date())
                target = await self.scheduler.get_specific_countdown_target(selected, current)
            except HijriCalendarException as e:
                LOGGER.warning(f"Countdown to {selected.value} unavailable: {e}")
                return CountdownResponse()
            return self._response(target, now)

        return api_route
