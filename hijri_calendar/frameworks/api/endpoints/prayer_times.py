"""Prayer times API endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from fastapi import APIRouter, Path, Query

from hijri_calendar.entities.api_schemas import PrayerTimesResponse
from hijri_calendar.entities.prayer import MonthlyPrayerCalendar, NextPrayer
from hijri_calendar.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from hijri_calendar.use_cases.interfaces.custom_event_repository_interface import (
    UserSettingsRepositoryInterface,
)
from hijri_calendar.use_cases.prayer_schedule import PrayerSchedule, next_prayer
from hijri_calendar.utils.exceptions import PrayerTimesUnavailable


class PrayerTimesEndpoint(ServiceAPIEndpointBluePrint):
    """Prayer timings for the stored location, or for coordinates given on the request."""

    def __init__(
        self,
        prayer_schedule: PrayerSchedule,
        settings_repository: UserSettingsRepositoryInterface,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.prayer_schedule = prayer_schedule
        self.settings_repository = settings_repository
        self.clock = clock

    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(prefix="/prayer-times", tags=["Prayer Times"])

        @api_route.get(
            "/today",
            summary="Today's prayer times",
            response_model=PrayerTimesResponse,
        )
        async def get_today(
            latitude: Optional[float] = Query(None, ge=-90, le=90),
            longitude: Optional[float] = Query(None, ge=-180, le=180),
        ):
            now = self.clock()
            try:
                timings = await self.prayer_schedule.timings_for(
                    self.settings_repository.load(), now.date(), latitude, longitude
                )
            except PrayerTimesUnavailable as e:
                raise self.http_error(e, "fetching today's prayer times")
            return PrayerTimesResponse(
                location=timings.location,
                timings=timings.timings,
                next_prayer=next_prayer(timings, now),
            )

        @api_route.get("/next", summary="Next prayer", response_model=NextPrayer)
        async def get_next(
            latitude: Optional[float] = Query(None, ge=-90, le=90),
            longitude: Optional[float] = Query(None, ge=-180, le=180),
        ):
            try:
                return await self.prayer_schedule.next_prayer(
                    self.settings_repository.load(), self.clock(), latitude, longitude
                )
            except PrayerTimesUnavailable as e:
                raise self.http_error(e, "finding the next prayer")

        @api_route.get(
            "/month/{year}/{month}",
            summary="Monthly prayer calendar",
            description="Needs a manual city and country in the settings",
            response_model=MonthlyPrayerCalendar,
        )
        async def get_month(year: int, month: int = Path(..., ge=1, le=12)):
            try:
                return await self.prayer_schedule.monthly_calendar(
                    self.settings_repository.load(), year, month
                )
            except PrayerTimesUnavailable as e:
                raise self.http_error(e, f"fetching prayer calendar {year}-{month:02d}")

        return api_route
