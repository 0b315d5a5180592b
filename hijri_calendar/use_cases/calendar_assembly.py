"""Month and year loading on top of the calendar oracle.

Loaded months are cached for the lifetime of the assembly, keyed by
(year, month). Concurrent requests for the same month share one fetch.
Navigation calls are generation-counted so that a slow load finishing after
the user moved on is cached but never becomes the current view.
"""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Callable
from typing import Dict
from typing import List
from typing import Optional
from typing import Tuple

from pydantic import BaseModel

from hijri_calendar import LOGGER
from hijri_calendar.entities.calendar_day import CalendarDay
from hijri_calendar.entities.calendar_day import MonthCalendar
from hijri_calendar.entities.observance import ObservanceResult
from hijri_calendar.entities.user_settings import FilterSettings
from hijri_calendar.use_cases.custom_event_matcher import DayNotes
from hijri_calendar.use_cases.custom_event_matcher import match_day
from hijri_calendar.use_cases.day_detail import DayDetail
from hijri_calendar.use_cases.day_detail import describe_day
from hijri_calendar.use_cases.interfaces.calendar_oracle_interface import CalendarOracleInterface
from hijri_calendar.use_cases.interfaces.custom_event_repository_interface import (
    CustomEventRepositoryInterface,
    CustomHijriEventRepositoryInterface,
)
from hijri_calendar.use_cases.national_holidays import NationalHolidayService
from hijri_calendar.use_cases.observance_classifier import classify
from hijri_calendar.utils.exceptions import HijriCalendarException

MonthKey = Tuple[int, int]


class DayView(BaseModel):
    """One rendered calendar cell."""

    day: CalendarDay
    observance: ObservanceResult
    national_holiday: Optional[str] = None
    hijri_holiday: Optional[str] = None
    notes: DayNotes
    is_today: bool = False


class MonthView(BaseModel):
    calendar: MonthCalendar
    days: List[DayView]


class CalendarAssembly:
    def __init__(
        self,
        oracle: CalendarOracleInterface,
        holiday_service: NationalHolidayService,
        event_repository: CustomEventRepositoryInterface,
        hijri_event_repository: CustomHijriEventRepositoryInterface,
        clock: Callable[[], date] = date.today,
        parallel_year_fetch: bool = False,
    ):
        self.oracle = oracle
        self.holiday_service = holiday_service
        self.event_repository = event_repository
        self.hijri_event_repository = hijri_event_repository
        self.clock = clock
        self.parallel_year_fetch = parallel_year_fetch

        self._months: Dict[MonthKey, MonthCalendar] = {}
        self._in_flight: Dict[MonthKey, asyncio.Future] = {}
        self._hijri_holidays: Dict[int, Dict[str, str]] = {}

        self.today: Optional[CalendarDay] = None
        self._today_resolved = False

        self._generation = 0
        self.current_month: Optional[MonthCalendar] = None
        self.current_year: Optional[List[Optional[MonthCalendar]]] = None

    def cached_month(self, year: int, month: int) -> Optional[MonthCalendar]:
        return self._months.get((year, month))

    def _resolve_today(self, calendar: MonthCalendar) -> None:
        # only the first completed load decides "today"
        if self._today_resolved:
            return
        self._today_resolved = True
        self.today = calendar.find(self.clock())
        if self.today is not None:
            LOGGER.debug(f"Today is {self.today.gregorian.iso} / {self.today.hijri.key}")

    async def _fetch_month(self, year: int, month: int) -> MonthCalendar:
        days = await self.oracle.fetch_month(year, month)
        calendar = MonthCalendar.from_days(year, month, days)
        self._months[(year, month)] = calendar
        self._resolve_today(calendar)
        return calendar

    async def load_month(self, year: int, month: int) -> MonthCalendar:
        """
        Return the month from the cache or fetch it once.

        Raises:
            OracleUnavailable, OracleDataInvalid: the month could not be loaded
        """
        key = (year, month)
        if key in self._months:
            return self._months[key]

        task = self._in_flight.get(key)
        if task is None:
            LOGGER.info(f"Loading calendar month {year}-{month:02d}")
            task = asyncio.ensure_future(self._fetch_month(year, month))
            self._in_flight[key] = task
            task.add_done_callback(lambda _: self._in_flight.pop(key, None))
        # one waiter being cancelled must not cancel the shared fetch
        return await asyncio.shield(task)

    async def load_year(self, year: int) -> List[Optional[MonthCalendar]]:
        """Twelve entries, January first; a month that failed to load is None."""
        if self.parallel_year_fetch:
            results = await asyncio.gather(
                *(self.load_month(year, month) for month in range(1, 13)),
                return_exceptions=True,
            )
        else:
            results = []
            for month in range(1, 13):
                try:
                    results.append(await self.load_month(year, month))
                except HijriCalendarException as e:
                    results.append(e)

        months: List[Optional[MonthCalendar]] = []
        for month, result in enumerate(results, start=1):
            if isinstance(result, HijriCalendarException):
                LOGGER.error(f"Failed to load {year}-{month:02d}: {result}")
                months.append(None)
            elif isinstance(result, BaseException):
                raise result
            else:
                months.append(result)
        return months

    async def navigate_month(self, year: int, month: int) -> Optional[MonthCalendar]:
        """Load a month and make it the current view.

        Returns None when a newer navigation started while this one was
        loading; the loaded month stays cached.
        """
        self._generation += 1
        generation = self._generation
        calendar = await self.load_month(year, month)
        if generation != self._generation:
            LOGGER.debug(f"Discarding superseded view {year}-{month:02d}")
            return None
        self.current_month = calendar
        return calendar

    async def navigate_year(self, year: int) -> Optional[List[Optional[MonthCalendar]]]:
        self._generation += 1
        generation = self._generation
        months = await self.load_year(year)
        if generation != self._generation:
            LOGGER.debug(f"Discarding superseded year view {year}")
            return None
        self.current_year = months
        return months

    async def hijri_holidays(self, hijri_year: int) -> Dict[str, str]:
        """Official Islamic holidays of a Hijri year, best-effort."""
        if hijri_year in self._hijri_holidays:
            return self._hijri_holidays[hijri_year]
        try:
            holidays = await self.oracle.fetch_hijri_holidays(hijri_year)
        except HijriCalendarException as e:
            LOGGER.warning(f"Hijri holidays for {hijri_year} unavailable: {e}")
            return {}
        self._hijri_holidays[hijri_year] = holidays
        return holidays

    async def _hijri_holidays_for(self, days: List[CalendarDay]) -> Dict[str, str]:
        merged: Dict[str, str] = {}
        for hijri_year in sorted({day.hijri.year for day in days}):
            merged.update(await self.hijri_holidays(hijri_year))
        return merged

    @staticmethod
    def _hijri_holiday_name(day: CalendarDay, holidays: Dict[str, str]) -> Optional[str]:
        if day.hijri.key in holidays:
            return holidays[day.hijri.key]
        return day.hijri.holidays[0] if day.hijri.holidays else None

    async def build_month_view(
        self,
        year: int,
        month: int,
        country_code: Optional[str] = None,
        filters: Optional[FilterSettings] = None,
    ) -> MonthView:
        """Join a month with observances, holidays and notes."""
        filters = filters or FilterSettings()
        calendar = await self.load_month(year, month)

        national = {}
        if filters.show_national_holidays:
            national = await self.holiday_service.get_holidays(country_code, year)
        hijri_holidays = await self._hijri_holidays_for(calendar.days)
        events = self.event_repository.list_events()
        hijri_events = self.hijri_event_repository.list_events()

        views = []
        for day in calendar.days:
            holiday_name = national.get(day.gregorian.iso)
            views.append(
                DayView(
                    day=day,
                    observance=classify(day, holiday_name),
                    national_holiday=holiday_name,
                    hijri_holiday=self._hijri_holiday_name(day, hijri_holidays),
                    notes=match_day(day, events, hijri_events, filters),
                    is_today=self.today is not None and day == self.today,
                )
            )
        return MonthView(calendar=calendar, days=views)

    async def find_day(self, value: date) -> Optional[CalendarDay]:
        calendar = await self.load_month(value.year, value.month)
        return calendar.find(value)

    async def describe(
        self,
        value: date,
        country_code: Optional[str] = None,
        filters: Optional[FilterSettings] = None,
    ) -> Optional[DayDetail]:
        day = await self.find_day(value)
        if day is None:
            return None
        national = await self.holiday_service.get_holidays(country_code, value.year)
        hijri_holidays = await self.hijri_holidays(day.hijri.year)
        return describe_day(
            day,
            national_holiday=national.get(day.gregorian.iso),
            hijri_holiday=self._hijri_holiday_name(day, hijri_holidays),
            events=self.event_repository.list_events(),
            hijri_events=self.hijri_event_repository.list_events(),
            filters=filters,
        )
