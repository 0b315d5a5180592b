"""Calendar API endpoint."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Path, Query

from hijri_calendar import LOGGER
from hijri_calendar.entities.api_schemas import SearchResponse, SearchResultItem, YearResponse
from hijri_calendar.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from hijri_calendar.use_cases.calendar_assembly import CalendarAssembly, MonthView
from hijri_calendar.use_cases.calendar_search import CalendarSearch
from hijri_calendar.use_cases.day_detail import DayDetail
from hijri_calendar.use_cases.interfaces.custom_event_repository_interface import (
    UserSettingsRepositoryInterface,
)
from hijri_calendar.utils.exceptions import HijriCalendarException


class CalendarEndpoint(ServiceAPIEndpointBluePrint):
    """Month, year and day views.

    The holiday country and the visible layers come from the stored user
    settings; ``country`` on a request overrides the stored country.
    """

    def __init__(
        self,
        assembly: CalendarAssembly,
        search: CalendarSearch,
        settings_repository: UserSettingsRepositoryInterface,
    ):
        self.assembly = assembly
        self.search = search
        self.settings_repository = settings_repository

    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(prefix="/calendar", tags=["Calendar"])

        @api_route.get(
            "/month/{year}/{month}",
            summary="Month view",
            description="Every day of a Gregorian month with observances, holidays and notes",
            response_model=MonthView,
        )
        async def get_month(
            year: int,
            month: int = Path(..., ge=1, le=12),
            country: Optional[str] = Query(None, description="ISO country code for national holidays"),
        ):
            settings = self.settings_repository.load()
            try:
                view = await self.assembly.build_month_view(
                    year, month, country or settings.holiday_country, settings.filters
                )
            except HijriCalendarException as e:
                raise self.http_error(e, f"loading month {year}-{month:02d}")
            # becomes the current view unless a newer navigation already started
            await self.assembly.navigate_month(year, month)
            return view

        @api_route.get(
            "/year/{year}",
            summary="Year view",
            description="Twelve months; a month that failed to load is null",
            response_model=YearResponse,
        )
        async def get_year(year: int):
            months = await self.assembly.navigate_year(year)
            if months is None:
                months = await self.assembly.load_year(year)
            response = YearResponse(year=year, months=months)
            if response.failed_months:
                LOGGER.warning(f"Year {year} served without months {response.failed_months}")
            return response

        @api_route.get(
            "/day/{year}/{month}/{day}",
            summary="Day detail",
            description="Observance, fasting type, holidays and notes of a single day",
            response_model=DayDetail,
        )
        async def get_day(year: int, month: int, day: int, country: Optional[str] = Query(None)):
            try:
                value = date(year, month, day)
            except ValueError as e:
                raise HTTPException(status_code=422, detail={"error": str(e)})

            settings = self.settings_repository.load()
            try:
                detail = await self.assembly.describe(
                    value, country or settings.holiday_country, settings.filters
                )
            except HijriCalendarException as e:
                raise self.http_error(e, f"describing {value.isoformat()}")
            if detail is None:
                raise HTTPException(
                    status_code=404, detail={"error": f"{value.isoformat()} missing from the calendar"}
                )
            return detail

        @api_route.get(
            "/search",
            summary="Search the calendar",
            description="Case-insensitive search over holidays, notes and fasting types",
            response_model=SearchResponse,
        )
        async def search(
            q: str = Query(..., description="Text to look for"),
            year: int = Query(..., description="Gregorian year to search"),
            month: Optional[int] = Query(None, ge=1, le=12, description="Limit to one month"),
            country: Optional[str] = Query(None),
        ):
            settings = self.settings_repository.load()
            try:
                hits = await self.search.search(
                    q, year, month, country or settings.holiday_country, settings.filters
                )
            except HijriCalendarException as e:
                raise self.http_error(e, f"searching {year} for {q!r}")
            return SearchResponse(
                query=q, results=[SearchResultItem(day=hit.day, reason=hit.reason) for hit in hits]
            )

        return api_route
