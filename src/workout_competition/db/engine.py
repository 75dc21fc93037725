"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..config import get_data_dir

log = logging.getLogger(__name__)

DB_FILENAME = "workout_competition.db"


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Users known to the identity store
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                id TEXT PRIMARY KEY,
                email TEXT UNIQUE NOT NULL,
                created_at TIMESTAMP NOT NULL
            )
        """)

        # Signed-in sessions
        await db.execute("""
            CREATE TABLE IF NOT EXISTS sessions (
                token TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                created_at TIMESTAMP NOT NULL,
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
            )
        """)

        # Append-only workout log
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                pushups INTEGER NOT NULL CHECK (pushups >= 0),
                pullups INTEGER NOT NULL CHECK (pullups >= 0),
                situps INTEGER NOT NULL CHECK (situps >= 0),
                squats INTEGER NOT NULL CHECK (squats >= 0),
                created_at TIMESTAMP NOT NULL,
                FOREIGN KEY (user_id) REFERENCES users(id)
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_created
            ON workouts(created_at, id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_sessions_user
            ON sessions(user_id)
        """)

        await db.commit()

    log.info("Database schema ready at %s", db_path)
