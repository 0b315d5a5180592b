from __future__ import annotations

from typing import Dict
from typing import Optional

from pydantic import BaseModel
from pydantic import Field

from hijri_calendar.entities.constants import (
    DEFAULT_ALARM_TIMES,
    DEFAULT_FASTING_NOTIFICATION_TIME,
    ClockAlarm,
    FastingNotificationKey,
    PrayerName,
)
from hijri_calendar.entities.custom_event import TIME_PATTERN


class ToggleAt(BaseModel):
    """An on/off switch with a clock time."""

    is_on: bool = False
    time: str = Field(default=DEFAULT_FASTING_NOTIFICATION_TIME, pattern=TIME_PATTERN)


class ManualLocation(BaseModel):
    city: str = ""
    country: str = ""

    @property
    def is_set(self) -> bool:
        return bool(self.city and self.country)


class FilterSettings(BaseModel):
    """Which note and holiday layers the calendar shows."""

    show_custom_events: bool = True
    show_national_holidays: bool = True
    show_custom_hijri_events: bool = True


def _default_alarms() -> Dict[ClockAlarm, ToggleAt]:
    return {alarm: ToggleAt(time=time) for alarm, time in DEFAULT_ALARM_TIMES.items()}


def _default_fasting_notifications() -> Dict[FastingNotificationKey, ToggleAt]:
    return {key: ToggleAt() for key in FastingNotificationKey}


class UserSettings(BaseModel):
    """User preferences persisted in the key-value store."""

    manual_location: ManualLocation = ManualLocation()
    prayer_method: Optional[int] = Field(default=20, description="Al-Adhan calculation method id")
    holiday_country: str = Field(default="ID", description="ISO 3166-1 alpha-2 code")
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    alarms: Dict[ClockAlarm, ToggleAt] = Field(default_factory=_default_alarms)
    five_daily_prayers_alarm: bool = False
    adhan_alarms: Dict[PrayerName, bool] = Field(default_factory=dict)
    sunnah_fasting_notifications: Dict[FastingNotificationKey, ToggleAt] = Field(
        default_factory=_default_fasting_notifications
    )
    filters: FilterSettings = FilterSettings()

    def alarm(self, alarm: ClockAlarm) -> ToggleAt:
        return self.alarms.get(alarm) or ToggleAt(time=DEFAULT_ALARM_TIMES[alarm])

    def fasting_notification(self, key: FastingNotificationKey) -> ToggleAt:
        return self.sunnah_fasting_notifications.get(key) or ToggleAt()
