"""Dependency injection configuration for the Hijri calendar service."""

from __future__ import annotations

from pathlib import Path

from lagom import Container, Singleton

from hijri_calendar import DEFAULT_PATH, LOGGER
from hijri_calendar.adapters.aladhan import AladhanCalendarOracle, AladhanPrayerTimes
from hijri_calendar.adapters.geocoding import BigDataCloudGeocoder
from hijri_calendar.adapters.nager import NagerHolidayProvider
from hijri_calendar.adapters.repositories.file_storage.json_key_value_store import JsonFileKeyValueStore
from hijri_calendar.adapters.repositories.key_value.custom_event_repository import (
    CustomEventRepository,
    CustomHijriEventRepository,
)
from hijri_calendar.adapters.repositories.key_value.user_settings_repository import UserSettingsRepository
from hijri_calendar.adapters.repositories.memory.in_memory_key_value_store import InMemoryKeyValueStore
from hijri_calendar.frameworks.api.registry import SubServiceEndpoints
from hijri_calendar.settings import (
    ALADHAN_SETTINGS,
    CALENDAR_SETTINGS,
    HOLIDAY_SETTINGS,
    STORAGE_SETTINGS,
    AladhanSettings,
    CalendarSettings,
    HolidaySettings,
    StorageBackend,
    StorageSettings,
)
from hijri_calendar.use_cases.calendar_assembly import CalendarAssembly
from hijri_calendar.use_cases.calendar_search import CalendarSearch
from hijri_calendar.use_cases.countdown_scheduler import CountdownScheduler
from hijri_calendar.use_cases.interfaces import (
    CalendarOracleInterface,
    CustomEventRepositoryInterface,
    CustomHijriEventRepositoryInterface,
    GeocoderInterface,
    HolidayProviderInterface,
    KeyValueStoreInterface,
    PrayerTimesProviderInterface,
    UserSettingsRepositoryInterface,
)
from hijri_calendar.use_cases.national_holidays import NationalHolidayService
from hijri_calendar.use_cases.prayer_schedule import PrayerSchedule
from hijri_calendar.use_cases.reminders import ReminderEngine


def create_key_value_store(settings: StorageSettings) -> KeyValueStoreInterface:
    """Build the store selected by ``settings.backend``.

    A relative ``file_path`` is resolved against the project root.
    """
    if settings.backend == StorageBackend.MEMORY:
        LOGGER.info("Using in-memory storage; notes and settings are lost on exit")
        return InMemoryKeyValueStore()

    path = Path(settings.file_path)
    if not path.is_absolute():
        path = DEFAULT_PATH / path
    LOGGER.info(f"Using JSON file storage at {path}")
    return JsonFileKeyValueStore(file_path=str(path))


def configure_container() -> Container:
    """Configure the dependency injection container.

    Returns:
        Configured Lagom container
    """
    container = Container()

    container[AladhanSettings] = ALADHAN_SETTINGS
    container[HolidaySettings] = HOLIDAY_SETTINGS
    container[StorageSettings] = STORAGE_SETTINGS
    container[CalendarSettings] = CALENDAR_SETTINGS

    # A) Bind INTERFACE -> ADAPTER
    container[KeyValueStoreInterface] = Singleton(
        lambda c: create_key_value_store(c[StorageSettings])
    )
    container[CustomEventRepositoryInterface] = Singleton(
        lambda c: CustomEventRepository(c[KeyValueStoreInterface])
    )
    container[CustomHijriEventRepositoryInterface] = Singleton(
        lambda c: CustomHijriEventRepository(c[KeyValueStoreInterface])
    )
    container[UserSettingsRepositoryInterface] = Singleton(
        lambda c: UserSettingsRepository(c[KeyValueStoreInterface])
    )

    container[CalendarOracleInterface] = Singleton(
        lambda c: AladhanCalendarOracle(c[AladhanSettings])
    )
    container[PrayerTimesProviderInterface] = Singleton(
        lambda c: AladhanPrayerTimes(c[AladhanSettings])
    )
    container[HolidayProviderInterface] = Singleton(
        lambda c: NagerHolidayProvider(c[HolidaySettings])
    )
    container[GeocoderInterface] = Singleton(
        lambda c: BigDataCloudGeocoder(c[HolidaySettings])
    )

    # B) Bind basic USE CASES
    container[NationalHolidayService] = Singleton(
        lambda c: NationalHolidayService(c[HolidayProviderInterface])
    )
    container[CalendarAssembly] = Singleton(
        lambda c: CalendarAssembly(
            oracle=c[CalendarOracleInterface],
            holiday_service=c[NationalHolidayService],
            event_repository=c[CustomEventRepositoryInterface],
            hijri_event_repository=c[CustomHijriEventRepositoryInterface],
            parallel_year_fetch=c[CalendarSettings].parallel_year_fetch,
        )
    )
    container[CalendarSearch] = Singleton(lambda c: CalendarSearch(c[CalendarAssembly]))
    container[CountdownScheduler] = Singleton(
        lambda c: CountdownScheduler(c[CalendarOracleInterface])
    )
    container[PrayerSchedule] = Singleton(
        lambda c: PrayerSchedule(
            c[PrayerTimesProviderInterface],
            geocoder=c[GeocoderInterface],
            settings=c[AladhanSettings],
        )
    )
    container[ReminderEngine] = Singleton(
        lambda c: ReminderEngine(
            refire_seconds=c[CalendarSettings].reminder_refire_seconds,
            prayer_lead_minutes=c[CalendarSettings].prayer_alarm_lead_minutes,
        )
    )

    container[SubServiceEndpoints] = Singleton(SubServiceEndpoints)

    return container
