"""Application container for the Hijri calendar service."""

from __future__ import annotations

from typing import Optional

from lagom import Container, Singleton
from lagom.integrations.fast_api import FastApiIntegration

from hijri_calendar import LOGGER
from hijri_calendar.config_dependency_injection import configure_container
from hijri_calendar.frameworks.api.endpoints import (
    CalendarEndpoint,
    CountdownEndpoint,
    EventsEndpoint,
    HealthCheckEndpoint,
    PrayerTimesEndpoint,
    RemindersEndpoint,
    UserSettingsEndpoint,
)
from hijri_calendar.frameworks.api.registry import SubServiceEndpoints
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
from hijri_calendar.use_cases.prayer_schedule import PrayerSchedule
from hijri_calendar.use_cases.reminders import DueRemindersUseCase, ReminderEngine

_container: Optional[Container] = None

# adapters holding an HTTP session
CLOSABLE_SERVICES = (
    CalendarOracleInterface,
    PrayerTimesProviderInterface,
    HolidayProviderInterface,
    GeocoderInterface,
)


def get_container() -> Container:
    """Get the global container instance.

    Returns:
        The configured container
    """
    global _container
    if _container is None:
        _container = setup_container()
    return _container


def setup_container() -> Container:
    """Set up and configure the application container.

    Returns:
        Fully configured container
    """
    container = configure_container()
    child_container = Container(container)

    child_container[DueRemindersUseCase] = Singleton(
        lambda c: DueRemindersUseCase(
            engine=c[ReminderEngine],
            settings_repository=c[UserSettingsRepositoryInterface],
            event_repository=c[CustomEventRepositoryInterface],
            hijri_event_repository=c[CustomHijriEventRepositoryInterface],
            assembly=c[CalendarAssembly],
            prayer_schedule=c[PrayerSchedule],
        )
    )

    child_container[HealthCheckEndpoint] = Singleton(lambda c: HealthCheckEndpoint())
    child_container[CalendarEndpoint] = Singleton(
        lambda c: CalendarEndpoint(
            c[CalendarAssembly], c[CalendarSearch], c[UserSettingsRepositoryInterface]
        )
    )
    child_container[CountdownEndpoint] = Singleton(
        lambda c: CountdownEndpoint(c[CountdownScheduler])
    )
    child_container[EventsEndpoint] = Singleton(
        lambda c: EventsEndpoint(
            c[CustomEventRepositoryInterface], c[CustomHijriEventRepositoryInterface]
        )
    )
    child_container[UserSettingsEndpoint] = Singleton(
        lambda c: UserSettingsEndpoint(c[UserSettingsRepositoryInterface])
    )
    child_container[PrayerTimesEndpoint] = Singleton(
        lambda c: PrayerTimesEndpoint(c[PrayerSchedule], c[UserSettingsRepositoryInterface])
    )
    child_container[RemindersEndpoint] = Singleton(
        lambda c: RemindersEndpoint(c[DueRemindersUseCase])
    )

    child_container[SubServiceEndpoints] = container[SubServiceEndpoints]
    registry = child_container.resolve(SubServiceEndpoints)
    for endpoint in (
        HealthCheckEndpoint,
        CalendarEndpoint,
        CountdownEndpoint,
        EventsEndpoint,
        UserSettingsEndpoint,
        PrayerTimesEndpoint,
        RemindersEndpoint,
    ):
        registry.register(child_container.resolve(endpoint))

    return child_container


def create_fastapi_integration() -> FastApiIntegration:
    """Create FastAPI integration with dependency injection.

    Returns:
        FastAPI integration for dependency injection
    """
    return FastApiIntegration(get_container())


async def startup() -> None:
    """Run startup tasks for the application."""
    LOGGER.info("Starting Hijri calendar service")
    container = get_container()
    try:
        for service_type in (KeyValueStoreInterface, CalendarAssembly):
            LOGGER.info(f"Initialized {container[service_type].__class__.__name__}")
    except Exception as e:
        LOGGER.error(f"Error during startup: {str(e)}")
        raise


async def shutdown() -> None:
    """Close the HTTP sessions held by the adapters."""
    LOGGER.info("Shutting down Hijri calendar service")
    container = get_container()
    for service_type in CLOSABLE_SERVICES:
        service = container[service_type]
        close = getattr(service, "close", None)
        if callable(close):
            await close()
            LOGGER.info(f"Closed {service.__class__.__name__}")
