"""API schema models package."""

__all__ = [
    "CountdownResponse",
    "CountdownTargetSchema",
    "DueRemindersResponse",
    "PrayerTimesResponse",
    "SearchResponse",
    "SearchResultItem",
    "YearResponse",
]

from hijri_calendar.entities.api_schemas.calendar_schemas import (
    SearchResponse,
    SearchResultItem,
    YearResponse,
)
from hijri_calendar.entities.api_schemas.countdown_schemas import (
    CountdownResponse,
    CountdownTargetSchema,
)
from hijri_calendar.entities.api_schemas.prayer_schemas import PrayerTimesResponse
from hijri_calendar.entities.api_schemas.reminder_schemas import DueRemindersResponse
