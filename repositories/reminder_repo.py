"""
repositories/reminder_repo.py
-----------------------------
Data access layer for reminders.
Every mutation filters on both the reminder id and the owning user id,
so one user can never change or remove another user's reminder.
"""

from db.connection import Database
from models.reminder import Reminder
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, user_id, title, time, type, is_active"


class ReminderRepository:
    """Repository for CRUD operations on the reminders table."""

    def __init__(self, db: Database):
        self.db = db

    # ── CREATE ────────────────────────────────────────────

    def add(self, reminder: Reminder) -> Reminder:
        """
        Insert a new reminder for `reminder.user_id`.

        Returns:
            The stored reminder, with its `id` populated.
        """
        sql = f"""
            INSERT INTO reminders (user_id, title, time, type, is_active)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING {_COLUMNS};
        """
        is_active = True if reminder.is_active is None else reminder.is_active
        rows = self.db.query(sql, (
            reminder.user_id, reminder.title, reminder.time, reminder.type, is_active,
        ))
        stored = self._row_to_reminder(rows[0])
        logger.info(f"Added reminder '{stored.title}' #{stored.id} for user {stored.user_id}")
        return stored

    # ── READ ──────────────────────────────────────────────

    def get_all(self, user_id: int) -> list[Reminder]:
        """All of a user's reminders, earliest time of day first."""
        sql = f"SELECT {_COLUMNS} FROM reminders WHERE user_id = %s ORDER BY time ASC;"
        return [self._row_to_reminder(r) for r in self.db.query(sql, (user_id,))]

    # ── UPDATE ────────────────────────────────────────────

    def set_active(self, user_id: int, reminder_id: int, is_active: bool) -> bool:
        """Enable or disable a reminder. Returns False if the user has no such reminder."""
        sql = """
            UPDATE reminders
            SET is_active = %s
            WHERE id = %s AND user_id = %s
            RETURNING id;
        """
        return bool(self.db.query(sql, (is_active, reminder_id, user_id)))

    # ── DELETE ────────────────────────────────────────────

    def delete(self, user_id: int, reminder_id: int) -> bool:
        """Delete a reminder by ID, scoped to user."""
        sql = "DELETE FROM reminders WHERE id = %s AND user_id = %s RETURNING id;"
        deleted = bool(self.db.query(sql, (reminder_id, user_id)))
        if deleted:
            logger.info(f"Deleted reminder #{reminder_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_reminder(row: dict) -> Reminder:
        return Reminder(
            id=row["id"],
            user_id=row["user_id"],
            title=row["title"],
            time=row["time"],
            type=row["type"],
            is_active=row["is_active"],
        )
