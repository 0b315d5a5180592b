from __future__ import annotations

import asyncio
from typing import Optional

import aiohttp

from hijri_calendar import LOGGER
from hijri_calendar.adapters.http_json_client import HttpJsonClient
from hijri_calendar.settings import HOLIDAY_SETTINGS
from hijri_calendar.settings.holiday_settings import HolidaySettings
from hijri_calendar.use_cases.interfaces.prayer_times_interface import GeocoderInterface
from hijri_calendar.utils.retry import RetryPolicy
from hijri_calendar.utils.retry import TransientHTTPError


class BigDataCloudGeocoder(GeocoderInterface):
    """Reverse geocoding for display only; any failure yields an empty name."""

    def __init__(
        self,
        settings: HolidaySettings = HOLIDAY_SETTINGS,
        client: Optional[HttpJsonClient] = None,
    ):
        self.settings = settings
        self.client = client or HttpJsonClient(
            timeout=settings.request_timeout, retry_policy=RetryPolicy(retries=0)
        )

    async def place_name(self, latitude: float, longitude: float) -> str:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "localityLanguage": self.settings.geocoding_language,
        }
        try:
            status, payload = await self.client.get_json(
                str(self.settings.geocoding_url), params=params, retry=False
            )
        except (TransientHTTPError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            LOGGER.warning(f"Could not fetch location name: {e}")
            return ""

        if status != 200 or not isinstance(payload, dict):
            return ""
        city = payload.get("city") or payload.get("locality") or ""
        country = payload.get("countryName") or ""
        if city and country:
            return f"{city}, {country}"
        return city or country

    async def close(self) -> None:
        await self.client.close()
