"""Unit tests for NationalHolidayService."""

import unittest
from unittest.mock import AsyncMock

from hijri_calendar.use_cases.interfaces.holiday_provider_interface import HolidayProviderInterface
from hijri_calendar.use_cases.national_holidays import NationalHolidayService
from hijri_calendar.utils.exceptions import HolidayDataUnavailable


class TestNationalHolidayService(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.provider = AsyncMock(spec=HolidayProviderInterface)
        self.provider.fetch_holidays.return_value = {"2025-08-17": "Hari Kemerdekaan"}
        self.service = NationalHolidayService(self.provider)

    async def test_results_are_cached_per_country_and_year(self):
        await self.service.get_holidays("id", 2025)
        holidays = await self.service.get_holidays("ID", 2025)

        self.assertEqual(holidays, {"2025-08-17": "Hari Kemerdekaan"})
        self.provider.fetch_holidays.assert_awaited_once_with("ID", 2025)

    async def test_failure_yields_empty_map_and_is_not_cached(self):
        self.provider.fetch_holidays.side_effect = HolidayDataUnavailable("Holiday directory unavailable")

        self.assertEqual(await self.service.get_holidays("ID", 2025), {})

        self.provider.fetch_holidays.side_effect = None
        self.assertEqual(len(await self.service.get_holidays("ID", 2025)), 1)
        self.assertEqual(self.provider.fetch_holidays.await_count, 2)

    async def test_missing_country_or_year(self):
        self.assertEqual(await self.service.get_holidays(None, 2025), {})
        self.assertEqual(await self.service.get_holidays("", 2025), {})
        self.assertEqual(await self.service.get_holidays("ID", None), {})
        self.provider.fetch_holidays.assert_not_awaited()

    async def test_holiday_on(self):
        self.assertEqual(await self.service.holiday_on("ID", "2025-08-17"), "Hari Kemerdekaan")
        self.assertIsNone(await self.service.holiday_on("ID", "2025-08-18"))
