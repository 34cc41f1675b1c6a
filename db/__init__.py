"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool, schema initialization, and raw SQL execution.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""

from db.connection import Database
from db.init_db import create_tables

__all__ = ["Database", "create_tables"]
