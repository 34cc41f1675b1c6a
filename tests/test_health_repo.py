"""
Tests for HealthDataRepository.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from repositories.health_repo import HealthDataRepository


@pytest.fixture
def repo(db):
    return HealthDataRepository(db)


def test_upsert_overwrites_all_measurements_on_conflict(repo, db, last_query):
    db.query.return_value = [{"id": 11}]

    row_id = repo.upsert(4, steps=8000, water_intake=2.5, sleep_hours=7.5,
                         sleep_quality=4, day=date(2024, 7, 1))

    assert row_id == 11
    sql, params = last_query()
    assert "ON CONFLICT (user_id, date) DO UPDATE SET" in sql
    for column in ("steps", "water_intake", "sleep_hours", "sleep_quality"):
        assert f"{column} = EXCLUDED.{column}" in sql
    assert params == (4, date(2024, 7, 1), 8000, 2.5, 7.5, 4)


def test_upsert_defaults_to_today_utc(repo, db, last_query):
    db.query.return_value = [{"id": 1}]

    before = datetime.now(timezone.utc).date()
    repo.upsert(4, steps=1, water_intake=0.5, sleep_hours=6, sleep_quality=3)
    after = datetime.now(timezone.utc).date()

    assert last_query()[1][1] in (before, after)


def test_get_recent_limits_to_seven_newest_first(repo, db, last_query):
    db.query.return_value = [
        {
            "id": 20 - n,
            "user_id": 4,
            "date": date(2024, 7, 10 - n),
            "steps": 5000 + n,
            "water_intake": Decimal("2.00"),
            "sleep_hours": Decimal("7.25"),
            "sleep_quality": 3,
        }
        for n in range(7)
    ]

    records = repo.get_recent(4)

    assert len(records) == 7
    assert records[0].date == date(2024, 7, 10)
    assert records[0].water_intake == 2.0
    assert records[0].sleep_hours == 7.25
    sql, params = last_query()
    assert "ORDER BY date DESC" in sql
    assert params == (4, 7)


def test_get_recent_no_data(repo):
    assert repo.get_recent(4) == []
