import unittest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from hijri_calendar.adapters.aladhan.aladhan_oracle import AladhanCalendarOracle
from hijri_calendar.entities.calendar_day import Weekday
from hijri_calendar.settings.aladhan_settings import AladhanSettings
from hijri_calendar.utils.exceptions import InvalidHijriDate, OracleDataInvalid, OracleUnavailable
from hijri_calendar.utils.retry import TransientHTTPError
from tests.unit_tests.adapters.aladhan.payload_samples import day_payload


class TestAladhanCalendarOracle(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.client = MagicMock()
        self.client.get_json = AsyncMock()
        self.client.close = AsyncMock()
        self.settings = AladhanSettings(base_url="https://api.aladhan.com/v1", calendar_method="HJCoSA")
        self.oracle = AladhanCalendarOracle(settings=self.settings, client=self.client)

    async def test_fetch_month(self):
        # Arrange
        self.client.get_json.return_value = (
            200,
            {
                "code": 200,
                "data": [
                    day_payload(),
                    day_payload("02-03-2025", "Sunday", "02-09-1446", "Al Ahad"),
                ],
            },
        )

        # Act
        days = await self.oracle.fetch_month(2025, 3)

        # Assert
        self.assertEqual([day.gregorian.iso for day in days], ["2025-03-01", "2025-03-02"])
        url = self.client.get_json.await_args.args[0]
        self.assertEqual(url, "https://api.aladhan.com/v1/gToHCalendar/3/2025")
        self.assertEqual(self.client.get_json.await_args.kwargs["params"], {"calendarMethod": "HJCoSA"})

    async def test_empty_month_is_invalid(self):
        self.client.get_json.return_value = (200, {"code": 200, "data": []})

        with self.assertRaises(OracleDataInvalid):
            await self.oracle.fetch_month(2025, 3)

    async def test_malformed_month_is_invalid(self):
        self.client.get_json.return_value = (200, {"code": 200, "data": [{"gregorian": {}}]})

        with self.assertRaises(OracleDataInvalid):
            await self.oracle.fetch_month(2025, 3)

    async def test_exhausted_retries_mean_unavailable(self):
        self.client.get_json.side_effect = TransientHTTPError(503, "https://api.aladhan.com")

        with self.assertRaises(OracleUnavailable) as ctx:
            await self.oracle.fetch_month(2025, 3)

        self.assertEqual(ctx.exception.status_code, 503)

    async def test_gregorian_to_hijri_uses_the_gregorian_weekday(self):
        self.client.get_json.return_value = (
            200,
            {"code": 200, "data": day_payload(hijri_weekday="unknown")},
        )

        hijri = await self.oracle.gregorian_to_hijri(date(2025, 3, 1))

        self.assertEqual((hijri.day, hijri.month, hijri.year), (1, 9, 1446))
        self.assertEqual(hijri.weekday_en, Weekday.SATURDAY)
        self.assertTrue(self.client.get_json.await_args.args[0].endswith("/gToH/01-03-2025"))

    async def test_hijri_to_gregorian(self):
        self.client.get_json.return_value = (
            200,
            {"code": 200, "data": day_payload("30-03-2025", "Sunday", "01-10-1446", "Al Ahad")},
        )

        result = await self.oracle.hijri_to_gregorian(1, 10, 1446)

        self.assertEqual(result, date(2025, 3, 30))
        self.assertIn("hToG/01-10-1446", self.client.get_json.await_args.args[0])

    async def test_rejected_hijri_triple(self):
        self.client.get_json.return_value = (400, {"code": 400, "data": "Invalid date"})

        with self.assertRaises(InvalidHijriDate):
            await self.oracle.hijri_to_gregorian(31, 13, 1446)

    async def test_fetch_hijri_holidays(self):
        self.client.get_json.return_value = (
            200,
            {"code": 200, "data": [{"name": "Ashura", "date": "10-01-1447"}]},
        )

        holidays = await self.oracle.fetch_hijri_holidays(1447)

        self.assertEqual(holidays, {"10-01-1447": "Ashura"})

    async def test_holiday_error_code(self):
        self.client.get_json.return_value = (200, {"code": 400, "data": []})

        with self.assertRaises(OracleDataInvalid):
            await self.oracle.fetch_hijri_holidays(1447)

    async def test_close(self):
        await self.oracle.close()

        self.client.close.assert_awaited_once()
