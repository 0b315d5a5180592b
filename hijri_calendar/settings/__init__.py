from __future__ import annotations

from hijri_calendar import DEFAULT_PATH
from hijri_calendar.settings.aladhan_settings import AladhanSettings
from hijri_calendar.settings.calendar_settings import CalendarSettings
from hijri_calendar.settings.holiday_settings import HolidaySettings
from hijri_calendar.settings.storage_settings import StorageBackend
from hijri_calendar.settings.storage_settings import StorageSettings

ALADHAN_SETTINGS = AladhanSettings(_env_file=f"{DEFAULT_PATH}/.env")
HOLIDAY_SETTINGS = HolidaySettings(_env_file=f"{DEFAULT_PATH}/.env")
STORAGE_SETTINGS = StorageSettings(_env_file=f"{DEFAULT_PATH}/.env")
CALENDAR_SETTINGS = CalendarSettings(_env_file=f"{DEFAULT_PATH}/.env")

__all__ = [
    "ALADHAN_SETTINGS",
    "HOLIDAY_SETTINGS",
    "STORAGE_SETTINGS",
    "CALENDAR_SETTINGS",
    "AladhanSettings",
    "CalendarSettings",
    "HolidaySettings",
    "StorageBackend",
    "StorageSettings",
]
