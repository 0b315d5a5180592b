import unittest
from unittest.mock import AsyncMock, MagicMock

import aiohttp

from hijri_calendar.adapters.nager.nager_holiday_provider import NagerHolidayProvider
from hijri_calendar.settings.holiday_settings import HolidaySettings
from hijri_calendar.utils.exceptions import HolidayDataUnavailable


class TestNagerHolidayProvider(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.client = MagicMock()
        self.client.get_json = AsyncMock()
        self.provider = NagerHolidayProvider(
            settings=HolidaySettings(base_url="https://date.nager.at/api/v3"), client=self.client
        )

    async def test_holidays_by_date(self):
        self.client.get_json.return_value = (
            200,
            [
                {"date": "2025-03-31", "localName": "Hari Raya Idul Fitri", "name": "Eid al-Fitr"},
                {"date": "2025-08-17", "localName": "", "name": "Independence Day"},
            ],
        )

        holidays = await self.provider.fetch_holidays("id", 2025)

        self.assertEqual(
            holidays,
            {"2025-03-31": "Hari Raya Idul Fitri", "2025-08-17": "Independence Day"},
        )
        self.assertEqual(
            self.client.get_json.await_args.args[0],
            "https://date.nager.at/api/v3/PublicHolidays/2025/ID",
        )

    async def test_unknown_country_has_no_holidays(self):
        self.client.get_json.return_value = (404, None)

        self.assertEqual(await self.provider.fetch_holidays("XX", 2025), {})

    async def test_server_error(self):
        self.client.get_json.return_value = (400, {"title": "Bad Request"})

        with self.assertRaises(HolidayDataUnavailable):
            await self.provider.fetch_holidays("ID", 2025)

    async def test_network_error(self):
        self.client.get_json.side_effect = aiohttp.ClientConnectionError("refused")

        with self.assertRaises(HolidayDataUnavailable):
            await self.provider.fetch_holidays("ID", 2025)
