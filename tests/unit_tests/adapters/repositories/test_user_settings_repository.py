import unittest

from hijri_calendar.adapters.repositories.key_value.user_settings_repository import (
    USER_SETTINGS_KEY,
    UserSettingsRepository,
)
from hijri_calendar.adapters.repositories.memory.in_memory_key_value_store import InMemoryKeyValueStore
from hijri_calendar.entities.constants import ClockAlarm, PrayerName
from hijri_calendar.entities.user_settings import ManualLocation, ToggleAt, UserSettings


class TestUserSettingsRepository(unittest.TestCase):
    def setUp(self):
        self.store = InMemoryKeyValueStore()
        self.repository = UserSettingsRepository(self.store)

    def test_defaults_when_nothing_is_stored(self):
        self.assertEqual(self.repository.load(), UserSettings())

    def test_round_trip(self):
        settings = UserSettings(
            manual_location=ManualLocation(city="Surabaya", country="Indonesia"),
            prayer_method=11,
            holiday_country="ID",
            alarms={ClockAlarm.TAHAJUD: ToggleAt(is_on=True, time="03:00")},
            adhan_alarms={PrayerName.FAJR: True},
        )

        self.repository.save(settings)

        self.assertEqual(self.repository.load(), settings)
        self.assertEqual(self.store.get(USER_SETTINGS_KEY)["alarms"]["tahajud"]["time"], "03:00")

    def test_corrupt_settings_fall_back_to_defaults(self):
        self.store.set(USER_SETTINGS_KEY, {"prayer_method": "not a number"})

        self.assertEqual(self.repository.load(), UserSettings())
