"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories run their statements through a shared `db.Database` and
return domain model objects instead of raw rows.
"""

from repositories.errors import DuplicateEmailError, RepositoryError
from repositories.health_repo import HealthDataRepository
from repositories.reminder_repo import ReminderRepository
from repositories.tip_repo import TipRepository
from repositories.user_repo import UserRepository

__all__ = [
    "DuplicateEmailError",
    "HealthDataRepository",
    "ReminderRepository",
    "RepositoryError",
    "TipRepository",
    "UserRepository",
]
