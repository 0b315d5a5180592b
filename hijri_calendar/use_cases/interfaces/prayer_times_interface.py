from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from datetime import date

from hijri_calendar.entities.prayer import MonthlyPrayerCalendar
from hijri_calendar.entities.prayer import PrayerTimes


class PrayerTimesProviderInterface(ABC):
    """External prayer-time computation."""

    @abstractmethod
    async def timings_by_coordinates(
        self, day: date, latitude: float, longitude: float, method: int
    ) -> PrayerTimes:
        pass

    @abstractmethod
    async def timings_by_city(
        self, day: date, city: str, country: str, method: int
    ) -> PrayerTimes:
        pass

    @abstractmethod
    async def monthly_calendar_by_city(
        self, year: int, month: int, city: str, country: str, method: int
    ) -> MonthlyPrayerCalendar:
        pass


class GeocoderInterface(ABC):
    """Turns coordinates into a display name."""

    @abstractmethod
    async def place_name(self, latitude: float, longitude: float) -> str:
        pass
