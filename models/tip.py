"""
models/tip.py
-------------
Domain model for the shared tips catalog.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass
class Tip:
    """A tip shown to every user; tips have no owner."""
    title: str
    content: str
    category: str
    date: date = field(default_factory=date.today)
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"[{self.category}] {self.title} ({self.date})"
