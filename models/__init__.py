"""
models/ - Domain Models
=======================
Plain dataclasses returned by the repositories in place of raw rows.
"""

from models.health import HealthData
from models.reminder import Reminder
from models.tip import Tip
from models.user import User

__all__ = ["HealthData", "Reminder", "Tip", "User"]
