from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class ReminderPolicy(Enum):
    """When a note should remind its owner."""

    NONE = "none"
    ON_DAY = "on_day"
    ONE_DAY_BEFORE = "1_day_before"


class CustomEvent(BaseModel):
    """A user note anchored to a Gregorian date."""

    id: str
    gregorian_date: str = Field(description="YYYY-MM-DD", pattern=DATE_PATTERN)
    text: str
    reminder: ReminderPolicy = ReminderPolicy.NONE
    reminder_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)

    @field_validator("gregorian_date")
    @classmethod
    def _real_date(cls, value: str) -> str:
        date.fromisoformat(value)
        return value

    def as_date(self) -> date:
        return date.fromisoformat(self.gregorian_date)


class CustomHijriEvent(BaseModel):
    """A user note anchored to a Hijri date, optionally repeating every year."""

    id: str
    hijri_day: int = Field(ge=1, le=30)
    hijri_month: int = Field(ge=1, le=12)
    hijri_year: int
    is_recurring: bool = False
    name: str
    description: str = ""
    reminder: ReminderPolicy = ReminderPolicy.NONE
    reminder_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)


class CustomEventDraft(BaseModel):
    """Payload for creating or replacing a Gregorian note."""

    gregorian_date: str = Field(pattern=DATE_PATTERN)
    text: str
    reminder: ReminderPolicy = ReminderPolicy.NONE
    reminder_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)


class CustomHijriEventDraft(BaseModel):
    """Payload for creating or replacing a Hijri note."""

    hijri_day: int = Field(ge=1, le=30)
    hijri_month: int = Field(ge=1, le=12)
    hijri_year: int
    is_recurring: bool = False
    name: str
    description: str = ""
    reminder: ReminderPolicy = ReminderPolicy.NONE
    reminder_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
