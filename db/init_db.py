"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: accounts with bcrypt password hashes
CREATE TABLE IF NOT EXISTS users (
    id              SERIAL PRIMARY KEY,
    email           VARCHAR(255) UNIQUE NOT NULL,
    password        VARCHAR(255) NOT NULL,
    name            VARCHAR(100) NOT NULL,
    role            VARCHAR(20) NOT NULL DEFAULT 'user',
    created_at      TIMESTAMPTZ DEFAULT NOW()
);

-- Tips table: shared reference content, not owned by any user
CREATE TABLE IF NOT EXISTS tips (
    id              SERIAL PRIMARY KEY,
    title           VARCHAR(200) NOT NULL,
    content         TEXT NOT NULL,
    category        VARCHAR(50),
    date            DATE NOT NULL DEFAULT CURRENT_DATE
);

-- Reminders table: per-user reminders, toggled on and off
CREATE TABLE IF NOT EXISTS reminders (
    id              SERIAL PRIMARY KEY,
    user_id         INT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    title           VARCHAR(200) NOT NULL,
    time            TIME NOT NULL,
    type            VARCHAR(50) NOT NULL,
    is_active       BOOLEAN NOT NULL DEFAULT TRUE
);

-- Health data table: one row per user per calendar day
CREATE TABLE IF NOT EXISTS health_data (
    id              SERIAL PRIMARY KEY,
    user_id         INT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    date            DATE NOT NULL,
    steps           INT NOT NULL DEFAULT 0,
    water_intake    NUMERIC(6,2) NOT NULL DEFAULT 0,
    sleep_hours     NUMERIC(4,2) NOT NULL DEFAULT 0,
    sleep_quality   INT NOT NULL DEFAULT 0,
    UNIQUE(user_id, date)
);

-- Indexes for faster queries
CREATE INDEX IF NOT EXISTS idx_reminders_user_time ON reminders(user_id, time);
CREATE INDEX IF NOT EXISTS idx_tips_date ON tips(date);
"""


def create_tables(db: Database) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        db.query(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    with Database() as database:
        create_tables(database)
    print("Database schema created successfully.")
