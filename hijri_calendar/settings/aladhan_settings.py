from __future__ import annotations

from pydantic import Field
from pydantic import HttpUrl
from pydantic_settings import SettingsConfigDict

from hijri_calendar.utils.pydantic_advanced_settings import CustomizedSettings


class AladhanSettings(CustomizedSettings):
    base_url: HttpUrl = Field(
        default="https://api.aladhan.com/v1",
        description="Base URL of the Al-Adhan calendrical and prayer-time API",
    )
    calendar_method: str = Field(
        default="HJCoSA",
        description="Hijri calendar method used for every conversion request",
    )
    request_timeout: float = Field(default=30.0, description="Per-request timeout in seconds")
    max_retries: int = Field(default=3, description="Retries after the first attempt on transient errors")
    initial_backoff: float = Field(default=1.0, description="First backoff delay in seconds")
    default_city_method: int = Field(
        default=20,
        description="Prayer calculation method when a manual city is configured",
    )
    default_coordinates_method: int = Field(
        default=3,
        description="Prayer calculation method when timings are requested by coordinates",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="aladhan_", extra="ignore"
    )

    @property
    def api_root(self) -> str:
        return str(self.base_url).rstrip("/")
