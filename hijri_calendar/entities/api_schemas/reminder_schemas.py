"""API schema models for reminder endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from hijri_calendar.entities.reminder import Reminder


class DueRemindersResponse(BaseModel):
    checked_at: datetime = Field(description="Tick time the reminders were evaluated for")
    reminders: List[Reminder] = Field(default_factory=list, description="Reminders due now")
