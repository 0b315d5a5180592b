from __future__ import annotations

import asyncio
from typing import Dict
from typing import Optional

import aiohttp

from hijri_calendar import LOGGER
from hijri_calendar.adapters.http_json_client import HttpJsonClient
from hijri_calendar.settings import HOLIDAY_SETTINGS
from hijri_calendar.settings.holiday_settings import HolidaySettings
from hijri_calendar.use_cases.interfaces.holiday_provider_interface import HolidayProviderInterface
from hijri_calendar.utils.exceptions import HolidayDataUnavailable
from hijri_calendar.utils.retry import RetryPolicy
from hijri_calendar.utils.retry import TransientHTTPError


class NagerHolidayProvider(HolidayProviderInterface):
    """
    National public holidays from the Nager.Date v3 API.
    """

    def __init__(
        self,
        settings: HolidaySettings = HOLIDAY_SETTINGS,
        client: Optional[HttpJsonClient] = None,
    ):
        self.settings = settings
        # holidays are best-effort, one attempt only
        self.client = client or HttpJsonClient(
            timeout=settings.request_timeout, retry_policy=RetryPolicy(retries=0)
        )

    async def fetch_holidays(self, country_code: str, year: int) -> Dict[str, str]:
        url = f"{self.settings.api_root}/PublicHolidays/{year}/{country_code.upper()}"
        try:
            status, payload = await self.client.get_json(url)
        except (TransientHTTPError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise HolidayDataUnavailable(
                {"error": "Holiday directory unavailable", "url": url, "reason": str(e)}
            ) from e

        if status == 404:
            LOGGER.info(f"No holiday data for country {country_code} in {year}")
            return {}
        if status != 200 or not isinstance(payload, list):
            raise HolidayDataUnavailable(
                {"error": f"Failed to fetch holidays. Status: {status}", "url": url}
            )

        return {
            item["date"]: item.get("localName") or item.get("name", "")
            for item in payload
            if isinstance(item, dict) and item.get("date")
        }

    async def close(self) -> None:
        await self.client.close()
