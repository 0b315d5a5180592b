from __future__ import annotations

from enum import Enum
from typing import Dict
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict


class ObservanceCategory(Enum):
    """Highlight categories a calendar day can fall into."""

    NATIONAL_HOLIDAY = "national_holiday"
    MAJOR_ISLAMIC_HOLIDAY = "major_islamic_holiday"
    RAMADAN = "ramadan"
    AYYAMUL_BIDH = "ayyamul_bidh"
    OTHER_SUNNAH_FAST = "other_sunnah_fast"
    WEEKLY_SUNNAH = "weekly_sunnah"
    NONE = "none"

    @property
    def priority(self) -> int:
        """Lower wins. NATIONAL_HOLIDAY is only a provisional base result."""
        return CATEGORY_PRIORITY[self]

    @property
    def is_fast(self) -> bool:
        return self in FASTING_CATEGORIES


CATEGORY_PRIORITY: Dict[ObservanceCategory, int] = {
    ObservanceCategory.MAJOR_ISLAMIC_HOLIDAY: 1,
    ObservanceCategory.RAMADAN: 2,
    ObservanceCategory.AYYAMUL_BIDH: 3,
    ObservanceCategory.OTHER_SUNNAH_FAST: 4,
    ObservanceCategory.WEEKLY_SUNNAH: 5,
    ObservanceCategory.NATIONAL_HOLIDAY: 6,
    ObservanceCategory.NONE: 7,
}

FASTING_CATEGORIES = frozenset(
    {
        ObservanceCategory.RAMADAN,
        ObservanceCategory.AYYAMUL_BIDH,
        ObservanceCategory.OTHER_SUNNAH_FAST,
        ObservanceCategory.WEEKLY_SUNNAH,
    }
)


class ObservanceResult(BaseModel):
    """Outcome of classifying one day; computed on demand, never stored."""

    model_config = ConfigDict(frozen=True)

    category: ObservanceCategory = ObservanceCategory.NONE
    label: Optional[str] = None
    info_key: Optional[str] = None
    collision: bool = False

    @classmethod
    def none(cls) -> "ObservanceResult":
        return cls()
