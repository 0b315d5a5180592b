"""Classify a dual-dated day into a single highlighted observance.

Every rule lives in :data:`OBSERVANCE_RULES`. A day is matched against all of
them and the winner is the matching rule with the lowest category priority,
ties broken by table order. The national holiday name is not a rule of its
own: it is the provisional result when no Islamic rule matches, and otherwise
it either supplies the label (major holidays) or flags a collision (fasts).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
from typing import List
from typing import Optional
from typing import Tuple

from hijri_calendar.entities.calendar_day import CalendarDay
from hijri_calendar.entities.calendar_day import Weekday
from hijri_calendar.entities.constants import (
    AYYAMUL_BIDH_DAYS,
    EARLY_DHU_AL_HIJJAH_DAYS,
    SHABAN_FAST_DAYS,
    SHAWWAL_CLASSIFIER_DAYS,
    TASHREEQ_DAYS,
    TASHREEQ_THIRD_DAY,
    HijriMonth,
    InfoKey,
    ObservanceLabel,
)
from hijri_calendar.entities.observance import ObservanceCategory
from hijri_calendar.entities.observance import ObservanceResult

WEEKLY_FAST_DAYS = (Weekday.MONDAY, Weekday.THURSDAY)


def in_range(value: int, bounds: Tuple[int, int]) -> bool:
    return bounds[0] <= value <= bounds[1]


def is_tashreeq(day: CalendarDay) -> bool:
    return day.hijri.month == HijriMonth.DHU_AL_HIJJAH.value and in_range(
        day.hijri.day, TASHREEQ_DAYS
    )


def is_tashreeq_third_day(day: CalendarDay) -> bool:
    return (day.hijri.month, day.hijri.day) == TASHREEQ_THIRD_DAY


def _on(month: HijriMonth, *days: int) -> Callable[[CalendarDay], bool]:
    return lambda d: d.hijri.month == month.value and d.hijri.day in days


def _between(month: HijriMonth, bounds: Tuple[int, int]) -> Callable[[CalendarDay], bool]:
    return lambda d: d.hijri.month == month.value and in_range(d.hijri.day, bounds)


@dataclass(frozen=True)
class ObservanceRule:
    category: ObservanceCategory
    label: ObservanceLabel
    info_key: InfoKey
    matches: Callable[[CalendarDay], bool]


OBSERVANCE_RULES: List[ObservanceRule] = [
    ObservanceRule(
        ObservanceCategory.MAJOR_ISLAMIC_HOLIDAY,
        ObservanceLabel.HIJRI_NEW_YEAR,
        InfoKey.HIJRI_NEW_YEAR,
        _on(HijriMonth.MUHARRAM, 1),
    ),
    ObservanceRule(
        ObservanceCategory.MAJOR_ISLAMIC_HOLIDAY,
        ObservanceLabel.EID_AL_FITR,
        InfoKey.EID_AL_FITR,
        _on(HijriMonth.SHAWWAL, 1, 2),
    ),
    ObservanceRule(
        ObservanceCategory.MAJOR_ISLAMIC_HOLIDAY,
        ObservanceLabel.EID_AL_ADHA,
        InfoKey.EID_AL_ADHA,
        _on(HijriMonth.DHU_AL_HIJJAH, 10),
    ),
    ObservanceRule(
        ObservanceCategory.RAMADAN,
        ObservanceLabel.RAMADAN,
        InfoKey.RAMADAN,
        lambda d: d.hijri.month == HijriMonth.RAMADAN.value,
    ),
    ObservanceRule(
        ObservanceCategory.AYYAMUL_BIDH,
        ObservanceLabel.AYYAMUL_BIDH,
        InfoKey.AYYAMUL_BIDH,
        lambda d: in_range(d.hijri.day, AYYAMUL_BIDH_DAYS) and not is_tashreeq_third_day(d),
    ),
    ObservanceRule(
        ObservanceCategory.OTHER_SUNNAH_FAST,
        ObservanceLabel.ARAFAH,
        InfoKey.ARAFAH,
        _on(HijriMonth.DHU_AL_HIJJAH, 9),
    ),
    ObservanceRule(
        ObservanceCategory.OTHER_SUNNAH_FAST,
        ObservanceLabel.TASUA,
        InfoKey.TASUA,
        _on(HijriMonth.MUHARRAM, 9),
    ),
    ObservanceRule(
        ObservanceCategory.OTHER_SUNNAH_FAST,
        ObservanceLabel.ASHURA,
        InfoKey.ASHURA,
        _on(HijriMonth.MUHARRAM, 10),
    ),
    ObservanceRule(
        ObservanceCategory.OTHER_SUNNAH_FAST,
        ObservanceLabel.SHAWWAL,
        InfoKey.SHAWWAL,
        _between(HijriMonth.SHAWWAL, SHAWWAL_CLASSIFIER_DAYS),
    ),
    ObservanceRule(
        ObservanceCategory.OTHER_SUNNAH_FAST,
        ObservanceLabel.EARLY_DHU_AL_HIJJAH,
        InfoKey.EARLY_DHU_AL_HIJJAH,
        _between(HijriMonth.DHU_AL_HIJJAH, EARLY_DHU_AL_HIJJAH_DAYS),
    ),
    ObservanceRule(
        ObservanceCategory.OTHER_SUNNAH_FAST,
        ObservanceLabel.SHABAN,
        InfoKey.SHABAN,
        _between(HijriMonth.SHABAN, SHABAN_FAST_DAYS),
    ),
    ObservanceRule(
        ObservanceCategory.WEEKLY_SUNNAH,
        ObservanceLabel.MONDAY_THURSDAY,
        InfoKey.MONDAY_THURSDAY,
        lambda d: d.weekday in WEEKLY_FAST_DAYS and not is_tashreeq(d),
    ),
]


def matching_rules(day: CalendarDay) -> List[ObservanceRule]:
    """All rules that hold for ``day``, best first."""
    indexed = [
        (rule.category.priority, position, rule)
        for position, rule in enumerate(OBSERVANCE_RULES)
        if rule.matches(day)
    ]
    return [rule for _, _, rule in sorted(indexed, key=lambda item: item[:2])]


def classify(day: CalendarDay, national_holiday_name: Optional[str] = None) -> ObservanceResult:
    """Return the single highest-priority observance for ``day``.

    Args:
        day: the dual-dated day
        national_holiday_name: name of the national holiday on that Gregorian
            date, if any

    Returns:
        The winning category with its label and info key. ``collision`` is set
        when a fasting rule wins on a national holiday.
    """
    holiday = national_holiday_name or None
    rules = matching_rules(day)

    if not rules:
        if holiday:
            return ObservanceResult(
                category=ObservanceCategory.NATIONAL_HOLIDAY,
                label=holiday,
            )
        return ObservanceResult.none()

    winner = rules[0]
    if winner.category is ObservanceCategory.MAJOR_ISLAMIC_HOLIDAY:
        return ObservanceResult(
            category=winner.category,
            label=holiday or winner.label.value,
            info_key=winner.info_key.value,
        )

    return ObservanceResult(
        category=winner.category,
        label=winner.label.value,
        info_key=winner.info_key.value,
        collision=holiday is not None,
    )
