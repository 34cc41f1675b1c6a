"""
repositories/health_repo.py
---------------------------
Data access layer for daily health measurements.
The health_data table holds at most one row per (user_id, date).
"""

from datetime import date, datetime, timezone
from typing import Optional

from db.connection import Database
from models.health import HealthData

RECENT_DAYS = 7


class HealthDataRepository:
    """Repository for the health_data table."""

    def __init__(self, db: Database):
        self.db = db

    def upsert(
        self,
        user_id: int,
        steps: int,
        water_intake: float,
        sleep_hours: float,
        sleep_quality: int,
        day: Optional[date] = None,
    ) -> int:
        """
        Record a user's measurements for a day, replacing any earlier
        values for that same day.

        Args:
            user_id: Owning user's id.
            steps: Step count.
            water_intake: Water drunk, in litres.
            sleep_hours: Hours slept.
            sleep_quality: Sleep quality score.
            day: Day to record; defaults to today's UTC date.

        Returns:
            The id of the inserted or updated row.
        """
        sql = """
            INSERT INTO health_data (user_id, date, steps, water_intake, sleep_hours, sleep_quality)
            VALUES (%s, %s, %s, %s, %s, %s)
            ON CONFLICT (user_id, date) DO UPDATE SET
                steps = EXCLUDED.steps,
                water_intake = EXCLUDED.water_intake,
                sleep_hours = EXCLUDED.sleep_hours,
                sleep_quality = EXCLUDED.sleep_quality
            RETURNING id;
        """
        day = day or datetime.now(timezone.utc).date()
        rows = self.db.query(sql, (
            user_id, day, steps, water_intake, sleep_hours, sleep_quality,
        ))
        return rows[0]["id"]

    def get_recent(self, user_id: int, limit: int = RECENT_DAYS) -> list[HealthData]:
        """The user's most recent day-records, newest first."""
        sql = """
            SELECT id, user_id, date, steps, water_intake, sleep_hours, sleep_quality
            FROM health_data
            WHERE user_id = %s
            ORDER BY date DESC
            LIMIT %s;
        """
        return [self._row_to_health(r) for r in self.db.query(sql, (user_id, limit))]

    @staticmethod
    def _row_to_health(row: dict) -> HealthData:
        """Convert a database row to a HealthData domain object."""
        return HealthData(
            id=row["id"],
            user_id=row["user_id"],
            date=row["date"],
            steps=row["steps"],
            water_intake=float(row["water_intake"]),
            sleep_hours=float(row["sleep_hours"]),
            sleep_quality=row["sleep_quality"],
        )
