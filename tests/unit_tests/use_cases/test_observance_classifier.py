"""Unit tests for the observance classifier."""

import unittest
from datetime import date, timedelta

from hijri_calendar.entities.constants import ObservanceLabel
from hijri_calendar.entities.observance import ObservanceCategory
from hijri_calendar.use_cases.observance_classifier import classify, matching_rules
from tests.unit_tests.factories import MONDAY, THURSDAY, TUESDAY, WEDNESDAY, make_day


class TestObservanceClassifier(unittest.TestCase):
    """Test suite for classify."""

    def test_every_ramadan_day_is_ramadan(self):
        start = date(2025, 3, 1)
        for offset in range(30):
            with self.subTest(hijri_day=offset + 1):
                day = make_day(start + timedelta(days=offset), offset + 1, 9)

                self.assertEqual(classify(day).category, ObservanceCategory.RAMADAN)

    def test_third_day_of_tashreeq_is_never_ayyamul_bidh(self):
        for gregorian in (MONDAY, TUESDAY, WEDNESDAY, THURSDAY):
            with self.subTest(weekday=gregorian.strftime("%A")):
                result = classify(make_day(gregorian, 13, 12))

                self.assertNotEqual(result.category, ObservanceCategory.AYYAMUL_BIDH)
                self.assertEqual(result.category, ObservanceCategory.NONE)

    def test_ramadan_on_a_national_holiday_collides(self):
        result = classify(make_day(TUESDAY, 4, 9), "Nyepi")

        self.assertEqual(result.category, ObservanceCategory.RAMADAN)
        self.assertEqual(result.label, ObservanceLabel.RAMADAN.value)
        self.assertTrue(result.collision)

    def test_third_day_of_tashreeq_falls_back_to_national_holiday(self):
        result = classify(make_day(MONDAY, 13, 12), "Cuti Bersama")

        self.assertEqual(result.category, ObservanceCategory.NATIONAL_HOLIDAY)
        self.assertEqual(result.label, "Cuti Bersama")
        self.assertFalse(result.collision)

    def test_major_holiday_prefers_national_holiday_name(self):
        result = classify(make_day(MONDAY, 1, 10), "Hari Raya Idul Fitri")

        self.assertEqual(result.category, ObservanceCategory.MAJOR_ISLAMIC_HOLIDAY)
        self.assertEqual(result.label, "Hari Raya Idul Fitri")
        self.assertEqual(result.info_key, "hari-raya-idul-fitri")
        self.assertFalse(result.collision)

    def test_major_holiday_without_national_holiday(self):
        self.assertEqual(classify(make_day(TUESDAY, 2, 10)).label, ObservanceLabel.EID_AL_FITR.value)
        self.assertEqual(classify(make_day(TUESDAY, 10, 12)).label, ObservanceLabel.EID_AL_ADHA.value)
        self.assertEqual(classify(make_day(TUESDAY, 1, 1)).label, ObservanceLabel.HIJRI_NEW_YEAR.value)

    def test_ayyamul_bidh(self):
        result = classify(make_day(TUESDAY, 14, 5), "Some Holiday")

        self.assertEqual(result.category, ObservanceCategory.AYYAMUL_BIDH)
        self.assertTrue(result.collision)

    def test_ayyamul_bidh_beats_shaban_and_weekly(self):
        result = classify(make_day(MONDAY, 13, 8))

        self.assertEqual(result.category, ObservanceCategory.AYYAMUL_BIDH)

    def test_other_sunnah_fasts_in_order(self):
        cases = [
            ((9, 12), ObservanceLabel.ARAFAH),
            ((9, 1), ObservanceLabel.TASUA),
            ((10, 1), ObservanceLabel.ASHURA),
            ((5, 10), ObservanceLabel.SHAWWAL),
            ((3, 12), ObservanceLabel.EARLY_DHU_AL_HIJJAH),
            ((5, 8), ObservanceLabel.SHABAN),
        ]
        for (hijri_day, hijri_month), label in cases:
            with self.subTest(label=label.value):
                result = classify(make_day(TUESDAY, hijri_day, hijri_month))

                self.assertEqual(result.category, ObservanceCategory.OTHER_SUNNAH_FAST)
                self.assertEqual(result.label, label.value)

    def test_shawwal_window_ends_on_the_seventh(self):
        self.assertEqual(classify(make_day(TUESDAY, 7, 10)).label, ObservanceLabel.SHAWWAL.value)
        self.assertEqual(classify(make_day(TUESDAY, 8, 10)).category, ObservanceCategory.NONE)

    def test_weekly_sunnah_keeps_its_label_on_a_holiday(self):
        result = classify(make_day(THURSDAY, 20, 6), "Isra Mi'raj")

        self.assertEqual(result.category, ObservanceCategory.WEEKLY_SUNNAH)
        self.assertEqual(result.label, ObservanceLabel.MONDAY_THURSDAY.value)
        self.assertTrue(result.collision)

    def test_weekly_sunnah_is_skipped_during_tashreeq(self):
        self.assertEqual(classify(make_day(THURSDAY, 11, 12)).category, ObservanceCategory.NONE)

    def test_plain_day(self):
        result = classify(make_day(WEDNESDAY, 20, 6))

        self.assertEqual(result.category, ObservanceCategory.NONE)
        self.assertIsNone(result.label)
        self.assertFalse(result.collision)

    def test_national_holiday_alone(self):
        result = classify(make_day(WEDNESDAY, 20, 6), "Independence Day")

        self.assertEqual(result.category, ObservanceCategory.NATIONAL_HOLIDAY)
        self.assertEqual(result.label, "Independence Day")
        self.assertFalse(result.collision)

    def test_matching_rules_are_sorted_by_priority(self):
        # Ramadan 14 on a Monday: Ramadan, Ayyamul Bidh and the weekly fast all hold
        rules = matching_rules(make_day(MONDAY, 14, 9))

        self.assertEqual(
            [rule.category for rule in rules],
            [
                ObservanceCategory.RAMADAN,
                ObservanceCategory.AYYAMUL_BIDH,
                ObservanceCategory.WEEKLY_SUNNAH,
            ],
        )
