from __future__ import annotations

from datetime import date
from datetime import datetime
from datetime import timedelta
from typing import Optional

from hijri_calendar import LOGGER
from hijri_calendar.entities.constants import NEXT_PRAYER_ORDER
from hijri_calendar.entities.constants import PrayerName
from hijri_calendar.entities.prayer import MonthlyPrayerCalendar
from hijri_calendar.entities.prayer import NextPrayer
from hijri_calendar.entities.prayer import PrayerTimes
from hijri_calendar.entities.user_settings import UserSettings
from hijri_calendar.settings import ALADHAN_SETTINGS
from hijri_calendar.settings.aladhan_settings import AladhanSettings
from hijri_calendar.use_cases.interfaces.prayer_times_interface import GeocoderInterface
from hijri_calendar.use_cases.interfaces.prayer_times_interface import PrayerTimesProviderInterface
from hijri_calendar.utils.exceptions import PrayerTimesUnavailable


def format_countdown(delta: timedelta) -> str:
    seconds = max(int(delta.total_seconds()), 0)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _method(user_settings: UserSettings, default: int) -> int:
    # method 0 is a valid Al-Adhan id
    return default if user_settings.prayer_method is None else user_settings.prayer_method


def next_prayer(timings: PrayerTimes, now: datetime) -> NextPrayer:
    """First prayer of the day strictly after ``now``, else tomorrow's Fajr.

    Today's Fajr time stands in for tomorrow's.
    """
    for prayer in NEXT_PRAYER_ORDER:
        clock = timings.clock(prayer)
        if clock is None:
            continue
        at = datetime.combine(now.date(), clock, tzinfo=now.tzinfo)
        if at > now:
            return NextPrayer(
                name=prayer, time=timings.timings[prayer], countdown=format_countdown(at - now)
            )

    fajr = timings.clock(PrayerName.FAJR)
    if fajr is None:
        return NextPrayer()
    at = datetime.combine(now.date() + timedelta(days=1), fajr, tzinfo=now.tzinfo)
    return NextPrayer(
        name=PrayerName.FAJR,
        time=timings.timings[PrayerName.FAJR],
        countdown=format_countdown(at - now),
    )


class PrayerSchedule:
    """
    Prayer timings for the user's location.

    A manual city and country take precedence over coordinates. The stored
    calculation method is used when set, otherwise the default of whichever
    lookup is made.
    """

    def __init__(
        self,
        provider: PrayerTimesProviderInterface,
        geocoder: Optional[GeocoderInterface] = None,
        settings: AladhanSettings = ALADHAN_SETTINGS,
    ):
        self.provider = provider
        self.geocoder = geocoder
        self.settings = settings

    async def timings_for(
        self,
        user_settings: UserSettings,
        day: date,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> PrayerTimes:
        """
        Raises:
            PrayerTimesUnavailable: no location is known or the lookup failed
        """
        location = user_settings.manual_location
        if location.is_set:
            method = _method(user_settings, self.settings.default_city_method)
            return await self.provider.timings_by_city(day, location.city, location.country, method)

        latitude = latitude if latitude is not None else user_settings.latitude
        longitude = longitude if longitude is not None else user_settings.longitude
        if latitude is None or longitude is None:
            raise PrayerTimesUnavailable("No location configured")

        method = _method(user_settings, self.settings.default_coordinates_method)
        timings = await self.provider.timings_by_coordinates(day, latitude, longitude, method)
        if self.geocoder is not None:
            timings.location = await self.geocoder.place_name(latitude, longitude)
            LOGGER.debug(f"Resolved ({latitude}, {longitude}) to {timings.location!r}")
        return timings

    async def next_prayer(
        self,
        user_settings: UserSettings,
        now: datetime,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> NextPrayer:
        timings = await self.timings_for(user_settings, now.date(), latitude, longitude)
        return next_prayer(timings, now)

    async def monthly_calendar(
        self, user_settings: UserSettings, year: int, month: int
    ) -> MonthlyPrayerCalendar:
        location = user_settings.manual_location
        if not location.is_set:
            raise PrayerTimesUnavailable("A manual city and country are needed for the monthly calendar")
        method = _method(user_settings, self.settings.default_city_method)
        return await self.provider.monthly_calendar_by_city(
            year, month, location.city, location.country, method
        )
