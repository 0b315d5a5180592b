from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from datetime import date
from typing import Dict
from typing import List

from hijri_calendar.entities.calendar_day import CalendarDay
from hijri_calendar.entities.calendar_day import HijriDate


class CalendarOracleInterface(ABC):
    """External source of dual-dated days and Hijri<->Gregorian conversion."""

    @abstractmethod
    async def fetch_month(self, year: int, month: int) -> List[CalendarDay]:
        """
        Fetch every day of a Gregorian month with its Hijri counterpart.

        Raises:
            OracleUnavailable: transient failures outlasted the retry budget
            OracleDataInvalid: the payload was empty or malformed
        """
        pass

    @abstractmethod
    async def gregorian_to_hijri(self, value: date) -> HijriDate:
        """Convert one Gregorian date."""
        pass

    @abstractmethod
    async def hijri_to_gregorian(self, day: int, month: int, year: int) -> date:
        """
        Convert one Hijri date.

        Raises:
            InvalidHijriDate: the upstream rejected the triple
        """
        pass

    @abstractmethod
    async def fetch_hijri_holidays(self, hijri_year: int) -> Dict[str, str]:
        """Official Islamic holiday names keyed by Hijri ``DD-MM-YYYY``."""
        pass
