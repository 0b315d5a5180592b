from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from hijri_calendar.utils.pydantic_advanced_settings import CustomizedSettings


class StorageBackend(Enum):
    JSON_FILE = "json_file"
    MEMORY = "memory"


class StorageSettings(CustomizedSettings):
    backend: StorageBackend = Field(
        default=StorageBackend.JSON_FILE,
        description="Where notes and preferences are kept",
    )
    file_path: str = Field(
        default="data/hijri_calendar_store.json",
        description="JSON document used by the json_file backend",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="storage_", extra="ignore"
    )
