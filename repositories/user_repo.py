"""
repositories/user_repo.py
--------------------------
Data access layer for user accounts and password authentication.
"""

from typing import Optional

from psycopg2 import errors

from db.connection import Database
from models.user import User
from repositories.errors import DuplicateEmailError
from security.passwords import hash_password, verify_password
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def __init__(self, db: Database):
        self.db = db

    def create(self, email: str, password: str, name: str, role: str = "user") -> int:
        """
        Register a new user. Only the bcrypt hash of the password is stored.

        Args:
            email: Login email, unique across users.
            password: Plaintext password.
            name: Display name.
            role: Access role (default: 'user').

        Returns:
            The new user's id.

        Raises:
            DuplicateEmailError: If the email is already registered.
        """
        sql = """
            INSERT INTO users (email, password, name, role)
            VALUES (%s, %s, %s, %s)
            RETURNING id;
        """
        hashed = hash_password(password)
        try:
            rows = self.db.query(sql, (email, hashed, name, role or "user"))
        except errors.UniqueViolation as e:
            logger.warning(f"Registration rejected, email already in use: {email}")
            raise DuplicateEmailError(email) from e
        user_id = rows[0]["id"]
        logger.info(f"Created user #{user_id}")
        return user_id

    def verify(self, email: str, password: str) -> Optional[User]:
        """
        Check a user's credentials.

        An unknown email and a wrong password give the same result, so
        callers cannot tell which part was wrong.

        Returns:
            The User (without its password hash) or None.
        """
        sql = "SELECT id, email, password, name, role, created_at FROM users WHERE email = %s;"
        rows = self.db.query(sql, (email,))
        if not rows:
            return None

        row = rows[0]
        if not verify_password(password, row.pop("password")):
            return None
        return self._row_to_user(row)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Fetch a user by id, without the password hash."""
        sql = "SELECT id, email, name, role, created_at FROM users WHERE id = %s;"
        rows = self.db.query(sql, (user_id,))
        return self._row_to_user(rows[0]) if rows else None

    @staticmethod
    def _row_to_user(row: dict) -> User:
        return User(
            id=row["id"],
            email=row["email"],
            name=row["name"],
            role=row["role"],
            created_at=row["created_at"],
        )
