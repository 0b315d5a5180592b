from __future__ import annotations

import asyncio
from datetime import date
from typing import Any
from typing import Callable
from typing import Dict
from typing import List
from typing import Optional
from typing import TypeVar

import aiohttp

from hijri_calendar import LOGGER
from hijri_calendar.adapters.aladhan.aladhan_payloads import format_dmy
from hijri_calendar.adapters.aladhan.aladhan_payloads import parse_dmy
from hijri_calendar.adapters.aladhan.aladhan_payloads import parse_hijri
from hijri_calendar.adapters.aladhan.aladhan_payloads import parse_hijri_holidays
from hijri_calendar.adapters.aladhan.aladhan_payloads import parse_month
from hijri_calendar.adapters.http_json_client import HttpJsonClient
from hijri_calendar.entities.calendar_day import CalendarDay
from hijri_calendar.entities.calendar_day import HijriDate
from hijri_calendar.entities.calendar_day import Weekday
from hijri_calendar.settings import ALADHAN_SETTINGS
from hijri_calendar.settings.aladhan_settings import AladhanSettings
from hijri_calendar.use_cases.interfaces.calendar_oracle_interface import CalendarOracleInterface
from hijri_calendar.utils.exceptions import InvalidHijriDate
from hijri_calendar.utils.exceptions import OracleDataInvalid
from hijri_calendar.utils.exceptions import OracleUnavailable
from hijri_calendar.utils.retry import RetryPolicy
from hijri_calendar.utils.retry import SleepFunc
from hijri_calendar.utils.retry import TransientHTTPError

T = TypeVar("T")

NETWORK_ERRORS = (TransientHTTPError, aiohttp.ClientError, asyncio.TimeoutError)
PAYLOAD_ERRORS = (KeyError, TypeError, ValueError)


class AladhanCalendarOracle(CalendarOracleInterface):
    """
    Calendar oracle backed by the Al-Adhan v1 API.
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

    def _url(self, *parts: Any) -> str:
        return "/".join([self.settings.api_root, *(str(part) for part in parts)])

    async def _get(self, url: str, params: Optional[Dict[str, Any]] = None):
        try:
            return await self.client.get_json(url, params=params)
        except NETWORK_ERRORS as e:
            raise OracleUnavailable(
                {"error": "Calendar service unavailable", "url": url, "reason": str(e)}
            ) from e

    @staticmethod
    def _data(payload: Any) -> Any:
        if not isinstance(payload, dict):
            return None
        return payload.get("data")

    @staticmethod
    def _parse(parser: Callable[[Any], T], data: Any, what: str) -> T:
        try:
            return parser(data)
        except PAYLOAD_ERRORS as e:
            LOGGER.error(f"Malformed {what} payload: {e}")
            raise OracleDataInvalid({"error": f"Malformed {what} payload", "reason": str(e)}) from e

    async def fetch_month(self, year: int, month: int) -> List[CalendarDay]:
        url = self._url("gToHCalendar", month, year)
        status, payload = await self._get(url, {"calendarMethod": self.settings.calendar_method})
        if status != 200:
            raise OracleDataInvalid(
                {"error": f"Calendar request rejected with status {status}", "url": url}
            )

        data = self._data(payload)
        if not data:
            raise OracleDataInvalid(
                {"error": f"No calendar data for {year}-{month:02d}", "url": url}
            )

        days = self._parse(parse_month, data, "calendar")
        LOGGER.debug(f"Fetched {len(days)} days for {year}-{month:02d}")
        return days

    async def gregorian_to_hijri(self, value: date) -> HijriDate:
        url = self._url("gToH", format_dmy(value))
        status, payload = await self._get(url, {"calendarMethod": self.settings.calendar_method})
        data = self._data(payload)
        if status != 200 or not data or "hijri" not in data:
            raise OracleDataInvalid(
                {"error": f"Could not convert {value.isoformat()} to Hijri", "status": status}
            )
        return self._parse(
            lambda d: parse_hijri(d["hijri"], weekday=Weekday.from_date(value)),
            data,
            "gToH",
        )

    async def hijri_to_gregorian(self, day: int, month: int, year: int) -> date:
        triple = f"{day:02d}-{month:02d}-{year}"
        url = self._url("hToG", triple)
        status, payload = await self._get(url, {"calendarMethod": self.settings.calendar_method})
        body_code = payload.get("code") if isinstance(payload, dict) else None
        if status != 200 or body_code not in (None, 200):
            raise InvalidHijriDate(
                {"error": f"Invalid Hijri date {triple}", "status": status, "code": body_code}
            )

        data = self._data(payload)
        if not data or "gregorian" not in data:
            raise InvalidHijriDate({"error": f"No Gregorian date for Hijri {triple}"})
        return self._parse(lambda d: parse_dmy(d["gregorian"]["date"]), data, "hToG")

    async def fetch_hijri_holidays(self, hijri_year: int) -> Dict[str, str]:
        url = self._url("islamicHolidaysByHijriYear", hijri_year)
        status, payload = await self._get(url, {"calendarMethod": self.settings.calendar_method})
        data = self._data(payload)
        if status != 200 or not isinstance(data, list) or payload.get("code", 200) != 200:
            raise OracleDataInvalid(
                {"error": f"Invalid holiday data for Hijri year {hijri_year}", "status": status}
            )
        return self._parse(parse_hijri_holidays, data, "holiday")

    async def close(self) -> None:
        await self.client.close()
