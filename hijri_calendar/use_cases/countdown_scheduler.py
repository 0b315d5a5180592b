"""Next-occurrence arithmetic for the cyclical Islamic events."""

from __future__ import annotations

from datetime import datetime
from datetime import time
from typing import Dict
from typing import Tuple
from typing import Union

from hijri_calendar import LOGGER
from hijri_calendar.entities.calendar_day import HijriDate
from hijri_calendar.entities.constants import HijriMonth
from hijri_calendar.entities.countdown import CountdownEvent
from hijri_calendar.entities.countdown import CountdownRemaining
from hijri_calendar.entities.countdown import CountdownTarget
from hijri_calendar.entities.countdown import HijriTriple
from hijri_calendar.use_cases.interfaces.calendar_oracle_interface import CalendarOracleInterface

# (day, month) of the events that have a fixed anniversary
FIXED_EVENT_DATES: Dict[CountdownEvent, Tuple[int, int]] = {
    CountdownEvent.RAMADAN: (1, HijriMonth.RAMADAN.value),
    CountdownEvent.EID_AL_FITR: (1, HijriMonth.SHAWWAL.value),
    CountdownEvent.EID_AL_ADHA: (10, HijriMonth.DHU_AL_HIJJAH.value),
    CountdownEvent.HIJRI_NEW_YEAR: (1, HijriMonth.MUHARRAM.value),
}

HijriLike = Union[HijriDate, HijriTriple]


def _as_triple(current: HijriLike) -> HijriTriple:
    if isinstance(current, HijriTriple):
        return current
    return HijriTriple(day=current.day, month=current.month, year=current.year)


def next_target(current: HijriLike) -> Tuple[CountdownEvent, HijriTriple]:
    """Pick the chronologically next event of the yearly cycle.

    Muharram is checked first: before the 9th the next event is Tasu'a and
    Ashura, from the 9th on it is the Ramadan of the following Hijri year.
    """
    current = _as_triple(current)
    day, month, year = current.day, current.month, current.year

    if month == HijriMonth.MUHARRAM.value and day < 9:
        return CountdownEvent.ASHURA, HijriTriple(day=9, month=1, year=year)
    if month == HijriMonth.MUHARRAM.value:
        return CountdownEvent.RAMADAN, HijriTriple(day=1, month=9, year=year + 1)
    if month < HijriMonth.RAMADAN.value:
        return CountdownEvent.RAMADAN, HijriTriple(day=1, month=9, year=year)
    if month == HijriMonth.RAMADAN.value:
        return CountdownEvent.EID_AL_FITR, HijriTriple(day=1, month=10, year=year)
    if month in (10, 11) or (month == 12 and day < 9):
        return CountdownEvent.ARAFAH, HijriTriple(day=9, month=12, year=year)
    if day == 9:
        return CountdownEvent.EID_AL_ADHA, HijriTriple(day=10, month=12, year=year)
    return CountdownEvent.HIJRI_NEW_YEAR, HijriTriple(day=1, month=1, year=year + 1)


def specific_target(event: CountdownEvent, current: HijriLike) -> HijriTriple:
    """Next occurrence of ``event`` on or after tomorrow in Hijri order.

    Arafah and Ashura have no fixed entry here and use the yearly cycle.
    """
    current = _as_triple(current)
    if event not in FIXED_EVENT_DATES:
        return next_target(current)[1]

    day, month = FIXED_EVENT_DATES[event]
    year = current.year
    if (month, day) <= (current.month, current.day):
        year += 1
    return HijriTriple(day=day, month=month, year=year)


def countdown(target: CountdownTarget, now: datetime) -> CountdownRemaining:
    """Time left until local midnight of the resolved Gregorian date."""
    if target.resolved_gregorian is None:
        return CountdownRemaining()

    starts_at = datetime.combine(target.resolved_gregorian, time.min, tzinfo=now.tzinfo)
    seconds = int((starts_at - now).total_seconds())
    if seconds <= 0:
        return CountdownRemaining()

    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return CountdownRemaining(days=days, hours=hours, minutes=minutes, seconds=seconds)


class CountdownScheduler:
    """Resolves countdown targets to Gregorian dates through the oracle."""

    def __init__(self, oracle: CalendarOracleInterface):
        self.oracle = oracle

    async def _resolve(self, event: CountdownEvent, target: HijriTriple) -> CountdownTarget:
        resolved = await self.oracle.hijri_to_gregorian(target.day, target.month, target.year)
        LOGGER.debug(f"{event.value} {target.as_key()} falls on {resolved.isoformat()}")
        return CountdownTarget(event=event, target_hijri=target, resolved_gregorian=resolved)

    async def get_next_countdown_target(self, current: HijriLike) -> CountdownTarget:
        """
        Raises:
            InvalidHijriDate: the oracle rejected the target
            OracleUnavailable: the oracle could not be reached
        """
        event, target = next_target(current)
        return await self._resolve(event, target)

    async def get_specific_countdown_target(
        self, event: CountdownEvent, current: HijriLike
    ) -> CountdownTarget:
        return await self._resolve(event, specific_target(event, current))
