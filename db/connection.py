"""
db/connection.py
----------------
The query executor. `Database` owns a psycopg2 connection pool and runs
one parameterized statement per call, returning rows as plain dicts.

A single `Database` is constructed by the caller, connected once, and
handed to every repository:

    db = Database()
    db.connect()
    users = UserRepository(db)
"""

from typing import Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """Pooled PostgreSQL handle shared by all repositories."""

    def __init__(
        self,
        dsn: Optional[str] = None,
        min_conn: Optional[int] = None,
        max_conn: Optional[int] = None,
    ):
        self.dsn = dsn or DATABASE_URL
        self.min_conn = min_conn if min_conn is not None else DB_POOL_MIN
        self.max_conn = max_conn if max_conn is not None else DB_POOL_MAX
        self._pool: pool.SimpleConnectionPool | None = None

    @property
    def connected(self) -> bool:
        return self._pool is not None

    def connect(self) -> None:
        """
        Initialize the connection pool. Calling it again is a no-op.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.SimpleConnectionPool(self.min_conn, self.max_conn, self.dsn)
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

    def __enter__(self) -> "Database":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def query(self, sql: str, params: Optional[Sequence] = None) -> list[dict]:
        """
        Execute a single statement with positional ``%s`` parameters.

        Args:
            sql: The SQL statement.
            params: Values bound by position. Without params the statement
                is sent as-is, so a literal `%` needs no escaping.

        Returns:
            The result rows as dicts; an empty list when nothing matched
            or the statement returns no result set.

        Raises:
            RuntimeError: If `connect()` has not been called.
            psycopg2.Error: Any driver failure, after rollback.
        """
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call connect() first.")

        conn = self._pool.getconn()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, tuple(params) if params is not None else None)
                rows = cur.fetchall() if cur.description is not None else []
            conn.commit()
            return [dict(r) for r in rows]
        except psycopg2.IntegrityError as e:
            # Constraint violations are reported by the calling repository
            conn.rollback()
            logger.debug(f"Query rejected by constraint: {e}")
            raise
        except Exception as e:
            conn.rollback()
            logger.error(f"Query failed: {e}")
            raise
        finally:
            self._pool.putconn(conn)
