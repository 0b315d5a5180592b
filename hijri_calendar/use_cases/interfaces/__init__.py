from hijri_calendar.use_cases.interfaces.calendar_oracle_interface import CalendarOracleInterface
from hijri_calendar.use_cases.interfaces.custom_event_repository_interface import (
    CustomEventRepositoryInterface,
    CustomHijriEventRepositoryInterface,
    UserSettingsRepositoryInterface,
)
from hijri_calendar.use_cases.interfaces.holiday_provider_interface import HolidayProviderInterface
from hijri_calendar.use_cases.interfaces.key_value_store_interface import KeyValueStoreInterface
from hijri_calendar.use_cases.interfaces.prayer_times_interface import (
    GeocoderInterface,
    PrayerTimesProviderInterface,
)

__all__ = [
    "CalendarOracleInterface",
    "CustomEventRepositoryInterface",
    "CustomHijriEventRepositoryInterface",
    "GeocoderInterface",
    "HolidayProviderInterface",
    "KeyValueStoreInterface",
    "PrayerTimesProviderInterface",
    "UserSettingsRepositoryInterface",
]
