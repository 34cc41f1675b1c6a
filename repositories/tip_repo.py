"""
repositories/tip_repo.py
------------------------
Data access layer for the tips catalog.
Tips are shared by all users, so no query here is scoped to a user.
"""

from typing import Optional

from db.connection import Database
from models.tip import Tip
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, title, content, category, date"


class TipRepository:
    """Repository for CRUD operations on the tips table."""

    def __init__(self, db: Database):
        self.db = db

    # ── CREATE ────────────────────────────────────────────

    def add(self, tip: Tip) -> Tip:
        """
        Insert a new tip.

        Returns:
            The stored tip, with its `id` populated.
        """
        sql = f"""
            INSERT INTO tips (title, content, category, date)
            VALUES (%s, %s, %s, %s)
            RETURNING {_COLUMNS};
        """
        rows = self.db.query(sql, (tip.title, tip.content, tip.category, tip.date))
        stored = self._row_to_tip(rows[0])
        logger.info(f"Added tip '{stored.title}' #{stored.id}")
        return stored

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[Tip]:
        """All tips, newest first."""
        sql = f"SELECT {_COLUMNS} FROM tips ORDER BY date DESC;"
        return [self._row_to_tip(r) for r in self.db.query(sql)]

    def get_by_id(self, tip_id: int) -> Optional[Tip]:
        sql = f"SELECT {_COLUMNS} FROM tips WHERE id = %s;"
        rows = self.db.query(sql, (tip_id,))
        return self._row_to_tip(rows[0]) if rows else None

    # ── UPDATE ────────────────────────────────────────────

    def update(self, tip_id: int, tip: Tip) -> Optional[Tip]:
        """
        Overwrite every field of an existing tip.

        Returns:
            The updated tip, or None if no tip has this id.
        """
        sql = f"""
            UPDATE tips
            SET title = %s, content = %s, category = %s, date = %s
            WHERE id = %s
            RETURNING {_COLUMNS};
        """
        rows = self.db.query(sql, (tip.title, tip.content, tip.category, tip.date, tip_id))
        return self._row_to_tip(rows[0]) if rows else None

    # ── DELETE ────────────────────────────────────────────

    def delete(self, tip_id: int) -> bool:
        """Delete a tip. Returns False if it did not exist."""
        sql = "DELETE FROM tips WHERE id = %s RETURNING id;"
        deleted = bool(self.db.query(sql, (tip_id,)))
        if deleted:
            logger.info(f"Deleted tip #{tip_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_tip(row: dict) -> Tip:
        """Convert a database row to a Tip domain object."""
        return Tip(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            category=row["category"],
            date=row["date"],
        )
