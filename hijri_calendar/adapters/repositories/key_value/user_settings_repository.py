from __future__ import annotations

from pydantic import ValidationError

from hijri_calendar import LOGGER
from hijri_calendar.entities.user_settings import UserSettings
from hijri_calendar.use_cases.interfaces.custom_event_repository_interface import (
    UserSettingsRepositoryInterface,
)
from hijri_calendar.use_cases.interfaces.key_value_store_interface import KeyValueStoreInterface

USER_SETTINGS_KEY = "user_settings"


class UserSettingsRepository(UserSettingsRepositoryInterface):
    def __init__(self, store: KeyValueStoreInterface):
        self.store = store

    def load(self) -> UserSettings:
        raw = self.store.get(USER_SETTINGS_KEY)
        if raw is None:
            return UserSettings()
        try:
            return UserSettings.model_validate(raw)
        except ValidationError as e:
            LOGGER.error(f"Stored user settings are corrupt, using defaults: {e}")
            return UserSettings()

    def save(self, settings: UserSettings) -> None:
        self.store.set(USER_SETTINGS_KEY, settings.model_dump(mode="json"))
