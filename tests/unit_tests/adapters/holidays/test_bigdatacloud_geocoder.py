import unittest
from unittest.mock import AsyncMock, MagicMock

import aiohttp

from hijri_calendar.adapters.geocoding.bigdatacloud_geocoder import BigDataCloudGeocoder
from hijri_calendar.settings.holiday_settings import HolidaySettings


class TestBigDataCloudGeocoder(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.client = MagicMock()
        self.client.get_json = AsyncMock()
        self.geocoder = BigDataCloudGeocoder(settings=HolidaySettings(), client=self.client)

    async def test_city_and_country(self):
        self.client.get_json.return_value = (200, {"city": "Bandung", "countryName": "Indonesia"})

        self.assertEqual(await self.geocoder.place_name(-6.9, 107.6), "Bandung, Indonesia")
        self.assertEqual(self.client.get_json.await_args.kwargs["retry"], False)

    async def test_locality_fallback(self):
        self.client.get_json.return_value = (200, {"city": "", "locality": "Lembang", "countryName": ""})

        self.assertEqual(await self.geocoder.place_name(-6.8, 107.6), "Lembang")

    async def test_failures_give_an_empty_name(self):
        self.client.get_json.side_effect = aiohttp.ClientConnectionError()

        self.assertEqual(await self.geocoder.place_name(0.0, 0.0), "")

    async def test_error_status_gives_an_empty_name(self):
        self.client.get_json.return_value = (500, None)

        self.assertEqual(await self.geocoder.place_name(0.0, 0.0), "")
