"""
Shared fixtures for the data layer test suite.

Repository tests run against a mocked `Database` so they need no server;
see test_integration_postgres.py for the tests that use a real PostgreSQL.
"""

from unittest.mock import MagicMock

import pytest

from db.connection import Database


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Use the minimum bcrypt cost so hashing stays fast in tests."""
    monkeypatch.setattr("security.passwords.BCRYPT_ROUNDS", 4)


@pytest.fixture
def db():
    """A Database stand-in whose query() returns no rows unless told otherwise."""
    mock = MagicMock(spec=Database)
    mock.query.return_value = []
    return mock


@pytest.fixture
def last_query(db):
    """Return (normalized sql, params) of the most recent db.query() call."""
    def _last():
        args = db.query.call_args.args
        sql = " ".join(args[0].split())
        params = tuple(args[1]) if len(args) > 1 else ()
        return sql, params
    return _last
