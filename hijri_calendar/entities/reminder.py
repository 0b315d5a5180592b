from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class ReminderKind(Enum):
    ALARM = "alarm"
    PRAYER = "prayer"
    ADHAN = "adhan"
    NOTE = "note"
    SUNNAH_FAST = "sunnah_fast"


class Reminder(BaseModel):
    """A reminder that is due now."""

    key: str
    kind: ReminderKind
    message: str
    due_at: datetime
