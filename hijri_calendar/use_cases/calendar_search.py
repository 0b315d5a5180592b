from __future__ import annotations

from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional

from pydantic import BaseModel

from hijri_calendar.entities.calendar_day import CalendarDay
from hijri_calendar.entities.custom_event import CustomEvent
from hijri_calendar.entities.custom_event import CustomHijriEvent
from hijri_calendar.entities.user_settings import FilterSettings
from hijri_calendar.use_cases.calendar_assembly import CalendarAssembly
from hijri_calendar.use_cases.custom_event_matcher import match_day
from hijri_calendar.use_cases.day_detail import fasting_info

NOTE_PREFIX = "Note: "


class SearchHit(BaseModel):
    day: CalendarDay
    reasons: List[str]

    @property
    def reason(self) -> str:
        return ", ".join(self.reasons)


def search_days(
    days: Iterable[CalendarDay],
    query: str,
    national_holidays: Optional[Dict[str, str]] = None,
    hijri_holidays: Optional[Dict[str, str]] = None,
    events: Iterable[CustomEvent] = (),
    hijri_events: Iterable[CustomHijriEvent] = (),
    filters: Optional[FilterSettings] = None,
) -> List[SearchHit]:
    """Case-insensitive substring search over everything shown on each day.

    Holiday names, note texts and the fasting type are searched. Layers hidden
    by ``filters`` are skipped. A blank query finds nothing.
    """
    needle = query.strip().lower()
    if not needle:
        return []

    filters = filters or FilterSettings()
    national_holidays = national_holidays or {}
    hijri_holidays = hijri_holidays or {}
    events = list(events)
    hijri_events = list(hijri_events)

    hits = []
    for day in days:
        reasons = []
        if filters.show_national_holidays:
            name = national_holidays.get(day.gregorian.iso)
            if name and needle in name.lower():
                reasons.append(name)

        name = hijri_holidays.get(day.hijri.key)
        if name and needle in name.lower():
            reasons.append(name)

        notes = match_day(day, events, hijri_events, filters)
        reasons.extend(
            f"{NOTE_PREFIX}{event.text}" for event in notes.gregorian if needle in event.text.lower()
        )
        reasons.extend(
            f"{NOTE_PREFIX}{event.name}" for event in notes.hijri if needle in event.name.lower()
        )

        fasting = fasting_info(day)
        if fasting.is_fasting and needle in fasting.label.lower():
            reasons.append(fasting.label)

        if reasons:
            hits.append(SearchHit(day=day, reasons=reasons))
    return hits


class CalendarSearch:
    """Search over a loaded month, or over every loaded month of a year."""

    def __init__(self, assembly: CalendarAssembly):
        self.assembly = assembly

    async def search(
        self,
        query: str,
        year: int,
        month: Optional[int] = None,
        country_code: Optional[str] = None,
        filters: Optional[FilterSettings] = None,
    ) -> List[SearchHit]:
        if month is not None:
            calendars = [await self.assembly.load_month(year, month)]
        else:
            calendars = [c for c in await self.assembly.load_year(year) if c is not None]
        days = [day for calendar in calendars for day in calendar.days]

        national = await self.assembly.holiday_service.get_holidays(country_code, year)
        hijri_holidays: Dict[str, str] = {}
        for hijri_year in sorted({day.hijri.year for day in days}):
            hijri_holidays.update(await self.assembly.hijri_holidays(hijri_year))

        return search_days(
            days,
            query,
            national_holidays=national,
            hijri_holidays=hijri_holidays,
            events=self.assembly.event_repository.list_events(),
            hijri_events=self.assembly.hijri_event_repository.list_events(),
            filters=filters,
        )
