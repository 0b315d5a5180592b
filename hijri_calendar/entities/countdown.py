from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional
from typing import Tuple

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class CountdownEvent(Enum):
    """The cyclical events the countdown can point at."""

    RAMADAN = "Ramadan"
    EID_AL_FITR = "Eid al-Fitr"
    ARAFAH = "Day of Arafah"
    EID_AL_ADHA = "Eid al-Adha"
    HIJRI_NEW_YEAR = "Hijri New Year"
    ASHURA = "Tasu'a & Ashura"


class HijriTriple(BaseModel):
    """A bare Hijri (day, month, year), ordered chronologically."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1, le=30)
    month: int = Field(ge=1, le=12)
    year: int

    @property
    def ordinal(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: "HijriTriple") -> bool:
        return self.ordinal < other.ordinal

    def __le__(self, other: "HijriTriple") -> bool:
        return self.ordinal <= other.ordinal

    def as_key(self) -> str:
        return f"{self.day}-{self.month}-{self.year}"


class CountdownTarget(BaseModel):
    """Next occurrence of a cyclical event and, once resolved, its Gregorian date."""

    model_config = ConfigDict(frozen=True)

    event: CountdownEvent
    target_hijri: HijriTriple
    resolved_gregorian: Optional[date] = None

    @property
    def hijri_date_string(self) -> str:
        return self.target_hijri.as_key()


class CountdownRemaining(BaseModel):
    """Time left until a countdown target, clamped at zero."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def is_due(self) -> bool:
        return not (self.days or self.hours or self.minutes or self.seconds)
