"""API schema models for countdown endpoints."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from hijri_calendar.entities.countdown import CountdownEvent, CountdownRemaining, CountdownTarget


class CountdownTargetSchema(BaseModel):
    event: CountdownEvent = Field(description="Event being counted down to")
    hijri_date: str = Field(description="Target Hijri date as D-M-YYYY")
    gregorian_date: Optional[date] = Field(None, description="Resolved Gregorian date")
    remaining: CountdownRemaining = Field(description="Time left until local midnight of the target")

    @classmethod
    def from_target(cls, target: CountdownTarget, remaining: CountdownRemaining) -> "CountdownTargetSchema":
        return cls(
            event=target.event,
            hijri_date=target.hijri_date_string,
            gregorian_date=target.resolved_gregorian,
            remaining=remaining,
        )


class CountdownResponse(BaseModel):
    """Response model for countdown endpoints.

    Args:
        target: The resolved target, or null when it could not be resolved
    """
    target: Optional[CountdownTargetSchema] = Field(
        None, description="Resolved target, null when resolution failed"
    )
