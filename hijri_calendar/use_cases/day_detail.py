"""Long-form description of a single day.

The fasting lookup here is not the calendar highlight. It answers "is this a
fasting day, and which one" for the detail view and for fasting notifications,
and its Shawwal and Ashura windows are wider than the classifier's.
"""

from __future__ import annotations

from typing import Dict
from typing import Iterable
from typing import Optional
from typing import Tuple

from pydantic import BaseModel

from hijri_calendar.entities.calendar_day import CalendarDay
from hijri_calendar.entities.constants import (
    ASHURA_DETAIL_DAYS,
    AYYAMUL_BIDH_DAYS,
    EARLY_DHU_AL_HIJJAH_DAYS,
    SHABAN_FAST_DAYS,
    SHAWWAL_DETAIL_DAYS,
    TASHREEQ_NO_FAST_MESSAGE,
    FastingNotificationKey,
    HijriMonth,
    InfoKey,
    ObservanceLabel,
)
from hijri_calendar.entities.custom_event import CustomEvent
from hijri_calendar.entities.custom_event import CustomHijriEvent
from hijri_calendar.entities.observance import ObservanceResult
from hijri_calendar.entities.user_settings import FilterSettings
from hijri_calendar.use_cases.custom_event_matcher import DayNotes
from hijri_calendar.use_cases.custom_event_matcher import match_day
from hijri_calendar.use_cases.observance_classifier import WEEKLY_FAST_DAYS
from hijri_calendar.use_cases.observance_classifier import classify
from hijri_calendar.use_cases.observance_classifier import in_range
from hijri_calendar.use_cases.observance_classifier import is_tashreeq
from hijri_calendar.use_cases.observance_classifier import is_tashreeq_third_day


class FastingInfo(BaseModel):
    is_fasting: bool = False
    label: str = ""
    info_key: Optional[str] = None
    notification_key: Optional[FastingNotificationKey] = None


class DayDetail(BaseModel):
    """Everything the detail view shows for one day."""

    day: CalendarDay
    observance: ObservanceResult
    fasting: FastingInfo
    info_key: Optional[str] = None
    major_holiday: Optional[str] = None
    national_holiday: Optional[str] = None
    hijri_holiday: Optional[str] = None
    notes: DayNotes


MAJOR_HOLIDAYS: Dict[Tuple[int, int], ObservanceLabel] = {
    (HijriMonth.MUHARRAM.value, 1): ObservanceLabel.HIJRI_NEW_YEAR,
    (HijriMonth.SHAWWAL.value, 1): ObservanceLabel.EID_AL_FITR,
    (HijriMonth.SHAWWAL.value, 2): ObservanceLabel.EID_AL_FITR,
    (HijriMonth.DHU_AL_HIJJAH.value, 10): ObservanceLabel.EID_AL_ADHA,
}

MAJOR_HOLIDAY_INFO_KEYS: Dict[ObservanceLabel, InfoKey] = {
    ObservanceLabel.HIJRI_NEW_YEAR: InfoKey.HIJRI_NEW_YEAR,
    ObservanceLabel.EID_AL_FITR: InfoKey.EID_AL_FITR,
    ObservanceLabel.EID_AL_ADHA: InfoKey.EID_AL_ADHA,
}


def _fast(
    label: ObservanceLabel,
    info_key: InfoKey,
    notification_key: Optional[FastingNotificationKey] = None,
) -> FastingInfo:
    return FastingInfo(
        is_fasting=True,
        label=label.value,
        info_key=info_key.value,
        notification_key=notification_key,
    )


def fasting_info(day: CalendarDay) -> FastingInfo:
    """Which fast, if any, is observed on ``day``."""
    hijri_day, month = day.hijri.day, day.hijri.month

    if month == HijriMonth.RAMADAN.value:
        return _fast(ObservanceLabel.RAMADAN, InfoKey.RAMADAN)
    if month == HijriMonth.DHU_AL_HIJJAH.value and hijri_day == 9:
        return _fast(ObservanceLabel.ARAFAH, InfoKey.ARAFAH, FastingNotificationKey.ARAFAH)
    if month == HijriMonth.MUHARRAM.value and hijri_day == 9:
        return _fast(ObservanceLabel.TASUA, InfoKey.TASUA, FastingNotificationKey.ASHURA)
    if month == HijriMonth.MUHARRAM.value and in_range(hijri_day, ASHURA_DETAIL_DAYS):
        return _fast(ObservanceLabel.ASHURA, InfoKey.ASHURA, FastingNotificationKey.ASHURA)
    if month == HijriMonth.SHAWWAL.value and in_range(hijri_day, SHAWWAL_DETAIL_DAYS):
        return _fast(ObservanceLabel.SHAWWAL, InfoKey.SHAWWAL, FastingNotificationKey.SHAWWAL)
    if in_range(hijri_day, AYYAMUL_BIDH_DAYS):
        return _fast(
            ObservanceLabel.AYYAMUL_BIDH, InfoKey.AYYAMUL_BIDH, FastingNotificationKey.AYYAMUL_BIDH
        )
    if month == HijriMonth.DHU_AL_HIJJAH.value and in_range(hijri_day, EARLY_DHU_AL_HIJJAH_DAYS):
        return _fast(ObservanceLabel.EARLY_DHU_AL_HIJJAH, InfoKey.EARLY_DHU_AL_HIJJAH)
    if month == HijriMonth.SHABAN.value and in_range(hijri_day, SHABAN_FAST_DAYS):
        return _fast(ObservanceLabel.SHABAN, InfoKey.SHABAN)
    if day.weekday in WEEKLY_FAST_DAYS and not is_tashreeq(day):
        return _fast(
            ObservanceLabel.MONDAY_THURSDAY,
            InfoKey.MONDAY_THURSDAY,
            FastingNotificationKey.MONDAY_THURSDAY,
        )
    return FastingInfo()


def major_holiday(day: CalendarDay) -> Optional[ObservanceLabel]:
    return MAJOR_HOLIDAYS.get((day.hijri.month, day.hijri.day))


def describe_day(
    day: CalendarDay,
    national_holiday: Optional[str] = None,
    hijri_holiday: Optional[str] = None,
    events: Iterable[CustomEvent] = (),
    hijri_events: Iterable[CustomHijriEvent] = (),
    filters: Optional[FilterSettings] = None,
) -> DayDetail:
    """Build the detail of ``day``.

    The third day of Tashreeq always reports that fasting is discouraged and
    links to the Eid al-Adha description, whatever the fasting lookup says.
    """
    filters = filters or FilterSettings()
    if not filters.show_national_holidays:
        national_holiday = None

    observance = classify(day, national_holiday)
    fasting = fasting_info(day)
    info_key = observance.info_key

    if is_tashreeq_third_day(day):
        fasting = FastingInfo(
            is_fasting=True,
            label=TASHREEQ_NO_FAST_MESSAGE,
            info_key=InfoKey.EID_AL_ADHA.value,
        )
        info_key = InfoKey.EID_AL_ADHA.value

    holiday = major_holiday(day)
    if holiday is not None:
        info_key = MAJOR_HOLIDAY_INFO_KEYS[holiday].value

    return DayDetail(
        day=day,
        observance=observance,
        fasting=fasting,
        info_key=info_key,
        major_holiday=holiday.value if holiday is not None else None,
        national_holiday=national_holiday,
        hijri_holiday=hijri_holiday,
        notes=match_day(day, events, hijri_events, filters),
    )
