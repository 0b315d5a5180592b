from __future__ import annotations

from pydantic import Field
from pydantic import HttpUrl
from pydantic_settings import SettingsConfigDict

from hijri_calendar.utils.pydantic_advanced_settings import CustomizedSettings


class HolidaySettings(CustomizedSettings):
    base_url: HttpUrl = Field(
        default="https://date.nager.at/api/v3",
        description="Base URL of the Nager.Date public holiday directory",
    )
    request_timeout: float = Field(default=15.0, description="Per-request timeout in seconds")
    geocoding_url: HttpUrl = Field(
        default="https://api.bigdatacloud.net/data/reverse-geocode-client",
        description="Reverse geocoding endpoint used to name a coordinate",
    )
    geocoding_language: str = Field(default="id", description="Locality language for place names")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="holiday_", extra="ignore"
    )

    @property
    def api_root(self) -> str:
        return str(self.base_url).rstrip("/")
