"""
models/user.py
--------------
Domain model for user accounts.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """
    A user account as exposed outside the data layer.

    The password hash is deliberately not a field: records built from
    the users table never carry it.

    Attributes:
        id: Database primary key.
        email: Unique login email.
        name: Display name.
        role: Access role (default: 'user').
        created_at: Timestamp when the account was created.
    """
    id: int
    email: str
    name: str
    role: str = "user"
    created_at: Optional[datetime] = None
