from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator


class Weekday(Enum):
    """English weekday names as returned by the calendrical service."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        # date.weekday() is Monday=0
        order = [
            cls.MONDAY,
            cls.TUESDAY,
            cls.WEDNESDAY,
            cls.THURSDAY,
            cls.FRIDAY,
            cls.SATURDAY,
            cls.SUNDAY,
        ]
        return order[value.weekday()]


class GregorianDate(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1, le=31)
    month: int = Field(ge=1, le=12)
    month_name_en: str
    year: int
    weekday_en: Weekday

    @property
    def iso(self) -> str:
        """``YYYY-MM-DD``, the key national holidays and Gregorian notes use."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)


class HijriDate(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1, le=30)
    month: int = Field(ge=1, le=12)
    month_name_en: str
    year: int
    weekday_en: Weekday
    holidays: List[str] = Field(default_factory=list)
    month_length: Optional[int] = Field(default=None, ge=29, le=30)

    @property
    def key(self) -> str:
        """``DD-MM-YYYY``, the key official Hijri holidays are indexed by."""
        return f"{self.day:02d}-{self.month:02d}-{self.year}"


class CalendarDay(BaseModel):
    """One physical day, dated in both calendars."""

    model_config = ConfigDict(frozen=True)

    gregorian: GregorianDate
    hijri: HijriDate

    @model_validator(mode="after")
    def _weekdays_agree(self) -> "CalendarDay":
        if self.gregorian.weekday_en != self.hijri.weekday_en:
            raise ValueError(
                f"weekday mismatch for {self.gregorian.iso}: "
                f"{self.gregorian.weekday_en.value} != {self.hijri.weekday_en.value}"
            )
        return self

    @property
    def weekday(self) -> Weekday:
        return self.gregorian.weekday_en

    def is_gregorian(self, value: date) -> bool:
        return (
            self.gregorian.day == value.day
            and self.gregorian.month == value.month
            and self.gregorian.year == value.year
        )


class MonthCalendar(BaseModel):
    """A Gregorian month of dual-dated days."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(ge=1, le=12)
    days: List[CalendarDay]
    hijri_month_name: str = "Unknown"
    hijri_year: Optional[int] = None
    gregorian_month_name: str = "Unknown"

    @classmethod
    def from_days(cls, year: int, month: int, days: List[CalendarDay]) -> "MonthCalendar":
        # the header follows the 16th of the month, which sits inside the
        # Hijri month covering most of the Gregorian one
        reference = days[15] if len(days) > 15 else days[len(days) // 2]
        return cls(
            year=year,
            month=month,
            days=days,
            hijri_month_name=reference.hijri.month_name_en,
            hijri_year=reference.hijri.year,
            gregorian_month_name=reference.gregorian.month_name_en,
        )

    def find(self, value: date) -> Optional[CalendarDay]:
        for day in self.days:
            if day.is_gregorian(value):
                return day
        return None
