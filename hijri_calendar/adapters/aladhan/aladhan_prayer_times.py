from __future__ import annotations

import asyncio
from datetime import date
from typing import Any
from typing import Dict
from typing import Optional

import aiohttp

from hijri_calendar import LOGGER
from hijri_calendar.adapters.aladhan.aladhan_payloads import format_dmy
from hijri_calendar.adapters.aladhan.aladhan_payloads import parse_calendar_day
from hijri_calendar.adapters.http_json_client import HttpJsonClient
from hijri_calendar.entities.prayer import MonthlyPrayerCalendar
from hijri_calendar.entities.prayer import MonthlyPrayerDay
from hijri_calendar.entities.prayer import PrayerTimes
from hijri_calendar.settings import ALADHAN_SETTINGS
from hijri_calendar.settings.aladhan_settings import AladhanSettings
from hijri_calendar.use_cases.interfaces.prayer_times_interface import PrayerTimesProviderInterface
from hijri_calendar.utils.exceptions import PrayerTimesUnavailable
from hijri_calendar.utils.retry import RetryPolicy
from hijri_calendar.utils.retry import SleepFunc
from hijri_calendar.utils.retry import TransientHTTPError


class AladhanPrayerTimes(PrayerTimesProviderInterface):
    """
    Prayer timings from the Al-Adhan v1 API, by coordinates or by city.
    """

    def __init__(
        self,
        settings: AladhanSettings = ALADHAN_SETTINGS,
        client: Optional[HttpJsonClient] = None,
        sleep: SleepFunc = asyncio.sleep,
    ):
        self.settings = settings
        self.client = client or HttpJsonClient(
            timeout=settings.request_timeout,
            retry_policy=RetryPolicy(
                retries=settings.max_retries, initial_delay=settings.initial_backoff
            ),
            sleep=sleep,
        )

    async def _data(self, url: str, params: Dict[str, Any]) -> Any:
        try:
            status, payload = await self.client.get_json(url, params=params)
        except (TransientHTTPError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise PrayerTimesUnavailable(
                {"error": "Prayer time service unavailable", "url": url, "reason": str(e)}
            ) from e

        if status != 200 or not isinstance(payload, dict) or payload.get("code") != 200:
            raise PrayerTimesUnavailable(
                {"error": f"Failed to fetch prayer times. Status: {status}", "url": url}
            )
        data = payload.get("data")
        if not data:
            raise PrayerTimesUnavailable({"error": "No timings data returned", "url": url})
        return data

    async def _timings(self, url: str, params: Dict[str, Any], location: str) -> PrayerTimes:
        data = await self._data(url, params)
        timings = data.get("timings") if isinstance(data, dict) else None
        if not timings:
            raise PrayerTimesUnavailable({"error": "No timings data returned", "url": url})
        return PrayerTimes.from_payload(timings, location=location)

    async def timings_by_coordinates(
        self, day: date, latitude: float, longitude: float, method: int
    ) -> PrayerTimes:
        url = f"{self.settings.api_root}/timings/{format_dmy(day)}"
        params = {"latitude": latitude, "longitude": longitude, "method": method}
        return await self._timings(url, params, location="")

    async def timings_by_city(
        self, day: date, city: str, country: str, method: int
    ) -> PrayerTimes:
        url = f"{self.settings.api_root}/timingsByCity/{format_dmy(day)}"
        params = {"city": city, "country": country, "method": method}
        return await self._timings(url, params, location=f"{city}, {country}")

    async def monthly_calendar_by_city(
        self, year: int, month: int, city: str, country: str, method: int
    ) -> MonthlyPrayerCalendar:
        url = f"{self.settings.api_root}/calendarByCity/{year}/{month}"
        params = {"city": city, "country": country, "method": method}
        data = await self._data(url, params)

        location = f"{city}, {country}"
        days = []
        try:
            for item in data:
                days.append(
                    MonthlyPrayerDay(
                        day=parse_calendar_day(item["date"]),
                        prayer_times=PrayerTimes.from_payload(item["timings"], location=location),
                    )
                )
        except (KeyError, TypeError, ValueError) as e:
            LOGGER.error(f"Malformed monthly prayer calendar for {location}: {e}")
            raise PrayerTimesUnavailable(
                {"error": "Malformed monthly prayer calendar", "reason": str(e)}
            ) from e
        return MonthlyPrayerCalendar(year=year, month=month, days=days)

    async def close(self) -> None:
        await self.client.close()
