from __future__ import annotations

from typing import Dict
from typing import Optional
from typing import Tuple

from hijri_calendar import LOGGER
from hijri_calendar.use_cases.interfaces.holiday_provider_interface import HolidayProviderInterface
from hijri_calendar.utils.exceptions import HolidayDataUnavailable


class NationalHolidayService:
    """
    Best-effort national holiday lookup.

    Successful lookups are cached per (country, year). Failures are logged,
    answered with an empty map and not cached, so a later call can recover.
    """

    def __init__(self, provider: HolidayProviderInterface):
        self.provider = provider
        self._cache: Dict[Tuple[str, int], Dict[str, str]] = {}

    async def get_holidays(self, country_code: Optional[str], year: Optional[int]) -> Dict[str, str]:
        if not country_code or not year:
            return {}

        key = (country_code.upper(), year)
        if key in self._cache:
            return self._cache[key]

        try:
            holidays = await self.provider.fetch_holidays(key[0], year)
        except HolidayDataUnavailable as e:
            LOGGER.warning(f"Holiday lookup for {key[0]} {year} failed, showing none: {e}")
            return {}

        self._cache[key] = holidays
        return holidays

    async def holiday_on(self, country_code: Optional[str], iso_date: str) -> Optional[str]:
        year = int(iso_date[:4])
        return (await self.get_holidays(country_code, year)).get(iso_date)
