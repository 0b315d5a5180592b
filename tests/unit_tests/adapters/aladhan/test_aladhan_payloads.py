import unittest
from datetime import date

from hijri_calendar.adapters.aladhan.aladhan_payloads import (
    format_dmy,
    parse_calendar_day,
    parse_dmy,
    parse_hijri_holidays,
    parse_weekday,
)
from hijri_calendar.entities.calendar_day import Weekday
from tests.unit_tests.adapters.aladhan.payload_samples import day_payload


class TestAladhanPayloads(unittest.TestCase):
    def test_parse_weekday(self):
        self.assertEqual(parse_weekday("Monday"), Weekday.MONDAY)
        self.assertEqual(parse_weekday("Al Athnayn"), Weekday.MONDAY)
        self.assertEqual(parse_weekday(" al juma'a "), Weekday.FRIDAY)
        with self.assertRaises(ValueError):
            parse_weekday("Someday")

    def test_dmy(self):
        self.assertEqual(parse_dmy("09-03-2025"), date(2025, 3, 9))
        self.assertEqual(format_dmy(date(2025, 3, 9)), "09-03-2025")

    def test_parse_calendar_day(self):
        day = parse_calendar_day(day_payload(holidays=["1st Day of Ramadan"]))

        self.assertEqual(day.gregorian.iso, "2025-03-01")
        self.assertEqual(day.hijri.key, "01-09-1446")
        self.assertEqual(day.weekday, Weekday.SATURDAY)
        self.assertEqual(day.hijri.weekday_en, Weekday.SATURDAY)
        self.assertEqual(day.hijri.holidays, ["1st Day of Ramadan"])
        self.assertEqual(day.hijri.month_length, 29)

    def test_parse_hijri_holidays_flat_and_day_shapes(self):
        payload = [
            {"name": "Lailat-ul-Qadr", "date": "27-09-1446"},
            day_payload(hijri="01-10-1446", holidays=["Eid-ul-Fitr"]),
            {"name": "", "date": "02-10-1446"},
        ]

        self.assertEqual(
            parse_hijri_holidays(payload),
            {"27-09-1446": "Lailat-ul-Qadr", "01-10-1446": "Eid-ul-Fitr"},
        )
