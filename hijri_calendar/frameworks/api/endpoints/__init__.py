"""API endpoints package."""

__all__ = [
    "CalendarEndpoint",
    "CountdownEndpoint",
    "EventsEndpoint",
    "HealthCheckEndpoint",
    "PrayerTimesEndpoint",
    "RemindersEndpoint",
    "UserSettingsEndpoint",
]

from hijri_calendar.frameworks.api.endpoints.calendar import CalendarEndpoint
from hijri_calendar.frameworks.api.endpoints.countdown import CountdownEndpoint
from hijri_calendar.frameworks.api.endpoints.events import EventsEndpoint
from hijri_calendar.frameworks.api.endpoints.health_check import HealthCheckEndpoint
from hijri_calendar.frameworks.api.endpoints.prayer_times import PrayerTimesEndpoint
from hijri_calendar.frameworks.api.endpoints.reminders import RemindersEndpoint
from hijri_calendar.frameworks.api.endpoints.user_settings import UserSettingsEndpoint
