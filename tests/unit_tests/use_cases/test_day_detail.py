"""Unit tests for the day detail helpers."""

import unittest

from hijri_calendar.entities.constants import (
    TASHREEQ_NO_FAST_MESSAGE,
    FastingNotificationKey,
    ObservanceLabel,
)
from hijri_calendar.entities.custom_event import CustomHijriEvent
from hijri_calendar.entities.observance import ObservanceCategory
from hijri_calendar.entities.user_settings import FilterSettings
from hijri_calendar.use_cases.day_detail import describe_day, fasting_info, major_holiday
from hijri_calendar.use_cases.observance_classifier import classify
from tests.unit_tests.factories import MONDAY, THURSDAY, TUESDAY, WEDNESDAY, make_day


class TestFastingInfo(unittest.TestCase):
    def test_fasting_types(self):
        cases = [
            (make_day(TUESDAY, 5, 9), ObservanceLabel.RAMADAN, None),
            (make_day(TUESDAY, 9, 12), ObservanceLabel.ARAFAH, FastingNotificationKey.ARAFAH),
            (make_day(TUESDAY, 9, 1), ObservanceLabel.TASUA, FastingNotificationKey.ASHURA),
            (make_day(TUESDAY, 11, 1), ObservanceLabel.ASHURA, FastingNotificationKey.ASHURA),
            (make_day(TUESDAY, 8, 10), ObservanceLabel.SHAWWAL, FastingNotificationKey.SHAWWAL),
            (make_day(TUESDAY, 14, 4), ObservanceLabel.AYYAMUL_BIDH, FastingNotificationKey.AYYAMUL_BIDH),
            (make_day(TUESDAY, 2, 12), ObservanceLabel.EARLY_DHU_AL_HIJJAH, None),
            (make_day(TUESDAY, 2, 8), ObservanceLabel.SHABAN, None),
            (make_day(MONDAY, 20, 4), ObservanceLabel.MONDAY_THURSDAY, FastingNotificationKey.MONDAY_THURSDAY),
        ]
        for day, label, notification_key in cases:
            with self.subTest(label=label.value):
                info = fasting_info(day)

                self.assertTrue(info.is_fasting)
                self.assertEqual(info.label, label.value)
                self.assertEqual(info.notification_key, notification_key)

    def test_detail_windows_are_wider_than_the_classifier(self):
        # 8 Shawwal and 11 Muharram are fasting days here but not highlighted
        for day in (make_day(TUESDAY, 8, 10), make_day(TUESDAY, 11, 1)):
            self.assertTrue(fasting_info(day).is_fasting)
            self.assertEqual(classify(day).category, ObservanceCategory.NONE)

    def test_no_fast(self):
        self.assertFalse(fasting_info(make_day(WEDNESDAY, 20, 4)).is_fasting)
        self.assertFalse(fasting_info(make_day(THURSDAY, 12, 12)).is_fasting)


class TestDescribeDay(unittest.TestCase):
    def test_third_day_of_tashreeq(self):
        detail = describe_day(make_day(TUESDAY, 13, 12))

        self.assertEqual(detail.fasting.label, TASHREEQ_NO_FAST_MESSAGE)
        self.assertEqual(detail.info_key, "hari-raya-idul-adha")

    def test_major_holiday(self):
        detail = describe_day(make_day(TUESDAY, 10, 12), national_holiday="Idul Adha")

        self.assertEqual(detail.major_holiday, ObservanceLabel.EID_AL_ADHA.value)
        self.assertEqual(detail.info_key, "hari-raya-idul-adha")
        self.assertEqual(detail.observance.label, "Idul Adha")
        self.assertEqual(major_holiday(make_day(TUESDAY, 2, 10)), ObservanceLabel.EID_AL_FITR)

    def test_hidden_national_holiday(self):
        detail = describe_day(
            make_day(WEDNESDAY, 20, 4),
            national_holiday="Labour Day",
            filters=FilterSettings(show_national_holidays=False),
        )

        self.assertIsNone(detail.national_holiday)
        self.assertEqual(detail.observance.category, ObservanceCategory.NONE)

    def test_notes_and_info_key(self):
        note = CustomHijriEvent(
            id="h1", hijri_day=14, hijri_month=4, hijri_year=1446, name="Family visit"
        )

        detail = describe_day(make_day(TUESDAY, 14, 4), hijri_events=[note])

        self.assertEqual(detail.info_key, "puasa-ayyamul-bidh")
        self.assertEqual(detail.notes.hijri[0].name, "Family visit")
