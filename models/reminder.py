"""
models/reminder.py
------------------
Domain model for per-user reminders.
"""

from dataclasses import dataclass
from datetime import time
from typing import Optional


@dataclass
class Reminder:
    """
    A reminder belonging to one user.

    Attributes:
        id: Database primary key (None for new records).
        user_id: Owning user's id.
        title: Text shown to the user.
        time: Time of day the reminder fires.
        type: Free-form kind, e.g. 'water', 'medication', 'exercise'.
        is_active: Whether the reminder is currently enabled.
    """
    user_id: int
    title: str
    time: time
    type: str
    is_active: bool = True
    id: Optional[int] = None

    def __str__(self) -> str:
        status = "on" if self.is_active else "off"
        return f"{self.time:%H:%M} {self.title} ({self.type}, {status})"
