import unittest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from hijri_calendar.adapters.aladhan.aladhan_prayer_times import AladhanPrayerTimes
from hijri_calendar.entities.constants import PrayerName
from hijri_calendar.settings.aladhan_settings import AladhanSettings
from hijri_calendar.utils.exceptions import PrayerTimesUnavailable
from hijri_calendar.utils.retry import TransientHTTPError
from tests.unit_tests.adapters.aladhan.payload_samples import day_payload

TIMINGS = {
    "Fajr": "04:37 (WIB)",
    "Sunrise": "05:50 (WIB)",
    "Dhuhr": "11:59 (WIB)",
    "Asr": "15:07 (WIB)",
    "Maghrib": "18:02 (WIB)",
    "Isha": "19:11 (WIB)",
}


class TestAladhanPrayerTimes(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.client = MagicMock()
        self.client.get_json = AsyncMock()
        self.provider = AladhanPrayerTimes(
            settings=AladhanSettings(base_url="https://api.aladhan.com/v1"), client=self.client
        )

    async def test_timings_by_city(self):
        self.client.get_json.return_value = (200, {"code": 200, "data": {"timings": TIMINGS}})

        timings = await self.provider.timings_by_city(date(2025, 3, 10), "Jakarta", "Indonesia", 20)

        self.assertEqual(timings.timings[PrayerName.FAJR], "04:37")
        self.assertEqual(timings.location, "Jakarta, Indonesia")
        url = self.client.get_json.await_args.args[0]
        self.assertEqual(url, "https://api.aladhan.com/v1/timingsByCity/10-03-2025")
        self.assertEqual(
            self.client.get_json.await_args.kwargs["params"],
            {"city": "Jakarta", "country": "Indonesia", "method": 20},
        )

    async def test_timings_by_coordinates(self):
        self.client.get_json.return_value = (200, {"code": 200, "data": {"timings": TIMINGS}})

        timings = await self.provider.timings_by_coordinates(date(2025, 3, 10), -6.2, 106.8, 3)

        self.assertEqual(timings.location, "")
        self.assertEqual(self.client.get_json.await_args.kwargs["params"]["method"], 3)

    async def test_error_status(self):
        self.client.get_json.return_value = (400, {"code": 400, "data": "bad city"})

        with self.assertRaises(PrayerTimesUnavailable):
            await self.provider.timings_by_city(date(2025, 3, 10), "Nowhere", "Nowhere", 20)

    async def test_unreachable(self):
        self.client.get_json.side_effect = TransientHTTPError(502)

        with self.assertRaises(PrayerTimesUnavailable):
            await self.provider.timings_by_coordinates(date(2025, 3, 10), 0.0, 0.0, 3)

    async def test_monthly_calendar_by_city(self):
        self.client.get_json.return_value = (
            200,
            {"code": 200, "data": [{"timings": TIMINGS, "date": day_payload()}]},
        )

        calendar = await self.provider.monthly_calendar_by_city(2025, 3, "Jakarta", "Indonesia", 20)

        self.assertEqual((calendar.year, calendar.month), (2025, 3))
        self.assertEqual(len(calendar.days), 1)
        self.assertEqual(calendar.days[0].day.hijri.key, "01-09-1446")
        self.assertEqual(calendar.days[0].prayer_times.timings[PrayerName.ISHA], "19:11")
