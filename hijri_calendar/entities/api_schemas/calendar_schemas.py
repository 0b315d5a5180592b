"""API schema models for calendar endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from hijri_calendar.entities.calendar_day import CalendarDay, MonthCalendar


class YearResponse(BaseModel):
    """Response model for the year view.

    Args:
        year: Gregorian year
        months: Twelve months, January first; a month that failed to load is null
    """
    year: int = Field(description="Gregorian year")
    months: List[Optional[MonthCalendar]] = Field(
        description="Twelve months, January first; null where a month failed to load"
    )

    @property
    def failed_months(self) -> List[int]:
        return [index for index, month in enumerate(self.months, start=1) if month is None]


class SearchResultItem(BaseModel):
    day: CalendarDay = Field(description="Matching day")
    reason: str = Field(description="Comma separated list of what matched")


class SearchResponse(BaseModel):
    """Response model for calendar search.

    Args:
        query: The searched text
        results: Matching days in calendar order
    """
    query: str = Field(description="The searched text")
    results: List[SearchResultItem] = Field(default_factory=list, description="Matching days")
