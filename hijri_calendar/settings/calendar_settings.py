from __future__ import annotations

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from hijri_calendar.utils.pydantic_advanced_settings import CustomizedSettings


class CalendarSettings(CustomizedSettings):
    parallel_year_fetch: bool = Field(
        default=False,
        description="Fetch the twelve months of a year concurrently instead of one by one",
    )
    reminder_refire_seconds: int = Field(
        default=60,
        description="Minimum seconds before the same reminder may fire again",
    )
    prayer_alarm_lead_minutes: int = Field(
        default=10,
        description="How many minutes before a prayer the five-daily-prayers alarm fires",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="calendar_", extra="ignore"
    )
