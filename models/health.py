"""
models/health.py
----------------
Domain model for daily health measurements.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class HealthData:
    """
    One user's measurements for one calendar day.

    Attributes:
        date: The day the measurements belong to.
        steps: Step count.
        water_intake: Water drunk, in litres.
        sleep_hours: Hours slept.
        sleep_quality: Self-reported sleep quality score.
        user_id: Owning user's id, when selected.
        id: Database primary key, when selected.
    """
    date: date
    steps: int
    water_intake: float
    sleep_hours: float
    sleep_quality: int
    user_id: Optional[int] = None
    id: Optional[int] = None
