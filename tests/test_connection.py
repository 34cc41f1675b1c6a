"""
Tests for the Database query executor, with the psycopg2 pool patched out.
"""

import logging
from unittest.mock import MagicMock, patch

import psycopg2
import pytest

from db.connection import Database


@pytest.fixture
def fake_pool():
    with patch("db.connection.pool.SimpleConnectionPool") as pool_cls:
        conn = MagicMock()
        cursor = conn.cursor.return_value.__enter__.return_value
        cursor.description = [("id",)]
        cursor.fetchall.return_value = [{"id": 1}, {"id": 2}]
        pool_cls.return_value.getconn.return_value = conn
        yield pool_cls, conn, cursor


def test_query_before_connect_raises():
    with pytest.raises(RuntimeError):
        Database("postgresql://localhost/test").query("SELECT 1;")


def test_connect_is_idempotent(fake_pool):
    pool_cls, _, _ = fake_pool
    db = Database("postgresql://localhost/test", min_conn=1, max_conn=3)

    db.connect()
    db.connect()

    pool_cls.assert_called_once_with(1, 3, "postgresql://localhost/test")
    assert db.connected


def test_connect_failure_propagates():
    with patch("db.connection.pool.SimpleConnectionPool",
               side_effect=psycopg2.OperationalError("connection refused")):
        db = Database("postgresql://localhost/test")
        with pytest.raises(psycopg2.OperationalError):
            db.connect()
        assert not db.connected


def test_query_returns_rows_and_commits(fake_pool):
    pool_cls, conn, cursor = fake_pool
    db = Database("postgresql://localhost/test")
    db.connect()

    rows = db.query("SELECT id FROM tips WHERE category = %s;", ["sleep"])

    assert rows == [{"id": 1}, {"id": 2}]
    cursor.execute.assert_called_once_with(
        "SELECT id FROM tips WHERE category = %s;", ("sleep",)
    )
    conn.commit.assert_called_once()
    pool_cls.return_value.putconn.assert_called_once_with(conn)


def test_statement_without_result_set_returns_empty_list(fake_pool):
    _, _, cursor = fake_pool
    cursor.description = None
    db = Database("postgresql://localhost/test")
    db.connect()

    assert db.query("CREATE TABLE IF NOT EXISTS t (id INT);") == []
    cursor.fetchall.assert_not_called()


def test_failure_rolls_back_and_releases(fake_pool):
    pool_cls, conn, cursor = fake_pool
    cursor.execute.side_effect = psycopg2.errors.UniqueViolation("duplicate key")
    db = Database("postgresql://localhost/test")
    db.connect()

    with pytest.raises(psycopg2.errors.UniqueViolation):
        db.query("INSERT INTO users (email) VALUES (%s);", ["a@example.com"])

    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()
    pool_cls.return_value.putconn.assert_called_once_with(conn)


def test_context_manager_connects_and_closes(fake_pool):
    pool_cls, _, _ = fake_pool

    with Database("postgresql://localhost/test") as db:
        assert db.connected

    pool_cls.return_value.closeall.assert_called_once()
    assert not db.connected


def test_defaults_come_from_config(monkeypatch):
    monkeypatch.setattr("db.connection.DATABASE_URL", "postgresql://cfg/db")
    monkeypatch.setattr("db.connection.DB_POOL_MIN", 2)
    monkeypatch.setattr("db.connection.DB_POOL_MAX", 8)

    db = Database()

    assert (db.dsn, db.min_conn, db.max_conn) == ("postgresql://cfg/db", 2, 8)


def test_statement_without_params_skips_substitution(fake_pool):
    _, _, cursor = fake_pool
    db = Database("postgresql://localhost/test")
    db.connect()

    db.query("SELECT id FROM tips WHERE title LIKE 'a%';")

    cursor.execute.assert_called_once_with("SELECT id FROM tips WHERE title LIKE 'a%';", None)


def test_constraint_violation_not_logged_as_error(fake_pool, caplog):
    _, conn, cursor = fake_pool
    cursor.execute.side_effect = psycopg2.errors.UniqueViolation("duplicate key")
    db = Database("postgresql://localhost/test")
    db.connect()

    with caplog.at_level(logging.DEBUG, logger="db.connection"):
        with pytest.raises(psycopg2.errors.UniqueViolation):
            db.query("INSERT INTO users (email) VALUES (%s);", ["a@example.com"])

    conn.rollback.assert_called_once()
    records = [r for r in caplog.records if r.name == "db.connection"]
    assert records
    assert all(r.levelno == logging.DEBUG for r in records)


def test_other_failures_logged_as_error(fake_pool, caplog):
    _, _, cursor = fake_pool
    cursor.execute.side_effect = psycopg2.OperationalError("server closed the connection")
    db = Database("postgresql://localhost/test")
    db.connect()

    with caplog.at_level(logging.DEBUG, logger="db.connection"):
        with pytest.raises(psycopg2.OperationalError):
            db.query("SELECT 1;")

    assert any(r.levelno == logging.ERROR and r.name == "db.connection"
               for r in caplog.records)
