from __future__ import annotations

from typing import Iterable
from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import Field

from hijri_calendar.entities.calendar_day import CalendarDay
from hijri_calendar.entities.custom_event import CustomEvent
from hijri_calendar.entities.custom_event import CustomHijriEvent
from hijri_calendar.entities.user_settings import FilterSettings


class DayNotes(BaseModel):
    """Every note that falls on one day."""

    gregorian: List[CustomEvent] = Field(default_factory=list)
    hijri: List[CustomHijriEvent] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.gregorian or self.hijri)


def matches_gregorian(event: CustomEvent, day: CalendarDay) -> bool:
    return event.gregorian_date == day.gregorian.iso


def matches_hijri(event: CustomHijriEvent, day: CalendarDay) -> bool:
    # recurring notes ignore the year
    return (
        event.hijri_day == day.hijri.day
        and event.hijri_month == day.hijri.month
        and (event.is_recurring or event.hijri_year == day.hijri.year)
    )


def gregorian_notes_for(day: CalendarDay, events: Iterable[CustomEvent]) -> List[CustomEvent]:
    return [event for event in events if matches_gregorian(event, day)]


def hijri_notes_for(day: CalendarDay, events: Iterable[CustomHijriEvent]) -> List[CustomHijriEvent]:
    return [event for event in events if matches_hijri(event, day)]


def match_day(
    day: CalendarDay,
    events: Iterable[CustomEvent],
    hijri_events: Iterable[CustomHijriEvent],
    filters: Optional[FilterSettings] = None,
) -> DayNotes:
    """All notes for ``day``; a layer hidden by ``filters`` yields nothing."""
    filters = filters or FilterSettings()
    return DayNotes(
        gregorian=gregorian_notes_for(day, events) if filters.show_custom_events else [],
        hijri=hijri_notes_for(day, hijri_events) if filters.show_custom_hijri_events else [],
    )
