from __future__ import annotations

from datetime import time
from typing import Dict
from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import Field

from hijri_calendar.entities.calendar_day import CalendarDay
from hijri_calendar.entities.constants import PrayerName


def parse_clock(value: str) -> time:
    """Parse the ``HH:MM`` prefix of a timing such as ``"04:31 (WIB)"``."""
    hours, minutes = value.strip().split(" ")[0].split(":")[:2]
    return time(int(hours), int(minutes))


class PrayerTimes(BaseModel):
    """Timings for one day, keyed by prayer name, as ``HH:MM`` strings."""

    timings: Dict[PrayerName, str] = Field(default_factory=dict)
    location: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, str], location: str = "") -> "PrayerTimes":
        known = {name.value: name for name in PrayerName}
        return cls(
            timings={
                known[key]: value.strip().split(" ")[0]
                for key, value in payload.items()
                if key in known
            },
            location=location,
        )

    def clock(self, prayer: PrayerName) -> Optional[time]:
        value = self.timings.get(prayer)
        return parse_clock(value) if value else None


class NextPrayer(BaseModel):
    name: Optional[PrayerName] = None
    time: Optional[str] = None
    countdown: str = ""


class MonthlyPrayerDay(BaseModel):
    """One day of a monthly prayer calendar."""

    day: CalendarDay
    prayer_times: PrayerTimes


class MonthlyPrayerCalendar(BaseModel):
    year: int
    month: int
    days: List[MonthlyPrayerDay]
