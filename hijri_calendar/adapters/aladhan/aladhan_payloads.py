"""Mapping between Al-Adhan JSON payloads and the calendar entities."""

from __future__ import annotations

from datetime import date
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from hijri_calendar.entities.calendar_day import CalendarDay
from hijri_calendar.entities.calendar_day import GregorianDate
from hijri_calendar.entities.calendar_day import HijriDate
from hijri_calendar.entities.calendar_day import Weekday

# Al-Adhan names Hijri weekdays by their Arabic transliteration
HIJRI_WEEKDAY_NAMES: Dict[str, Weekday] = {
    "al ahad": Weekday.SUNDAY,
    "al athnayn": Weekday.MONDAY,
    "al thalaata": Weekday.TUESDAY,
    "al arba'a": Weekday.WEDNESDAY,
    "al khamees": Weekday.THURSDAY,
    "al juma'a": Weekday.FRIDAY,
    "al sabt": Weekday.SATURDAY,
}


def parse_weekday(name: str) -> Weekday:
    cleaned = name.strip()
    try:
        return Weekday(cleaned.capitalize())
    except ValueError:
        pass
    try:
        return HIJRI_WEEKDAY_NAMES[cleaned.lower()]
    except KeyError:
        raise ValueError(f"unknown weekday name: {name!r}") from None


def parse_dmy(value: str) -> date:
    """Parse the ``DD-MM-YYYY`` strings Al-Adhan uses everywhere."""
    day, month, year = (int(part) for part in value.split("-"))
    return date(year, month, day)


def format_dmy(value: date) -> str:
    return f"{value.day:02d}-{value.month:02d}-{value.year}"


def parse_gregorian(payload: Dict[str, Any]) -> GregorianDate:
    return GregorianDate(
        day=int(payload["day"]),
        month=int(payload["month"]["number"]),
        month_name_en=payload["month"]["en"],
        year=int(payload["year"]),
        weekday_en=parse_weekday(payload["weekday"]["en"]),
    )


def parse_hijri(payload: Dict[str, Any], weekday: Optional[Weekday] = None) -> HijriDate:
    """Build a :class:`HijriDate`.

    ``weekday`` overrides the payload's own name when the Gregorian side of
    the same record is known.
    """
    month = payload["month"]
    return HijriDate(
        day=int(payload["day"]),
        month=int(month["number"]),
        month_name_en=month["en"],
        year=int(payload["year"]),
        weekday_en=weekday or parse_weekday(payload["weekday"]["en"]),
        holidays=list(payload.get("holidays") or []),
        month_length=month.get("days"),
    )


def parse_calendar_day(payload: Dict[str, Any]) -> CalendarDay:
    gregorian = parse_gregorian(payload["gregorian"])
    hijri = parse_hijri(payload["hijri"])
    return CalendarDay(gregorian=gregorian, hijri=hijri)


def parse_month(payload: List[Dict[str, Any]]) -> List[CalendarDay]:
    return [parse_calendar_day(item) for item in payload]


def parse_hijri_holidays(payload: List[Any]) -> Dict[str, str]:
    """Holiday names keyed by Hijri ``DD-MM-YYYY``.

    Both the flat ``{"name", "date"}`` shape and full day records carrying a
    ``hijri.holidays`` list are accepted.
    """
    holidays: Dict[str, str] = {}
    for item in payload:
        if "hijri" in item:
            hijri = item["hijri"]
            for name in hijri.get("holidays") or []:
                holidays.setdefault(hijri["date"], name)
        elif item.get("date") and item.get("name"):
            holidays[item["date"]] = item["name"]
    return holidays
