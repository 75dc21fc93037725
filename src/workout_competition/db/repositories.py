"""Data access layer for workout-competition."""

import secrets
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

import aiosqlite

from ..models.user import AuthUser
from ..models.workout import WorkoutInput, WorkoutRecord
from .engine import get_db_path


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _row_to_user(row: aiosqlite.Row) -> AuthUser:
    """Convert a users row to an AuthUser."""
    return AuthUser(
        id=row["id"],
        email=row["email"],
        created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
    )


class UserRepository:
    """Repository for users."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, email: str) -> AuthUser:
        """Create a new user with a fresh opaque id."""
        user = AuthUser(id=str(uuid4()), email=email, created_at=_now())
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "INSERT INTO users (id, email, created_at) VALUES (?, ?, ?)",
                (user.id, user.email, user.created_at.isoformat()),
            )
            await db.commit()
        return user

    async def get_by_email(self, email: str) -> AuthUser | None:
        """Get a user by email."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM users WHERE email = ?", (email,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return _row_to_user(row)

    async def get_or_create(self, email: str) -> AuthUser:
        """Get the user for an email, creating it on first use."""
        existing = await self.get_by_email(email)
        if existing:
            return existing
        try:
            return await self.create(email)
        except aiosqlite.IntegrityError:
            # Created by a concurrent sign-in between the lookup and the insert
            existing = await self.get_by_email(email)
            if existing is None:
                raise
            return existing


class SessionRepository:
    """Repository for sign-in sessions."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, user_id: str) -> str:
        """Open a session for a user and return its token."""
        token = secrets.token_urlsafe(32)
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "INSERT INTO sessions (token, user_id, created_at) VALUES (?, ?, ?)",
                (token, user_id, _now().isoformat()),
            )
            await db.commit()
        return token

    async def get_user(self, token: str) -> AuthUser | None:
        """Get the user a session token belongs to."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT users.* FROM sessions
                JOIN users ON users.id = sessions.user_id
                WHERE sessions.token = ?
                """,
                (token,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return _row_to_user(row)

    async def delete(self, token: str) -> None:
        """Delete a session."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM sessions WHERE token = ?", (token,))
            await db.commit()


class WorkoutRepository:
    """Repository for the append-only workout log."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(
        self,
        user_id: str,
        workout: WorkoutInput,
        created_at: datetime | None = None,
    ) -> WorkoutRecord:
        """Append one workout for a user."""
        created_at = created_at or _now()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO workouts
                (user_id, pushups, pullups, situps, squats, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    user_id,
                    workout.pushups,
                    workout.pullups,
                    workout.situps,
                    workout.squats,
                    created_at.isoformat(),
                ),
            )
            await db.commit()
            record_id = cursor.lastrowid

        return WorkoutRecord(
            id=record_id,
            user_id=user_id,
            pushups=workout.pushups,
            pullups=workout.pullups,
            situps=workout.situps,
            squats=workout.squats,
            created_at=created_at,
        )

    async def list_all(self, ascending: bool = True) -> list[WorkoutRecord]:
        """Read every workout ordered by creation time.

        Equal timestamps fall back to insertion order.
        """
        direction = "ASC" if ascending else "DESC"
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                f"SELECT * FROM workouts ORDER BY created_at {direction}, id {direction}"
            )
            rows = await cursor.fetchall()
            return [self._row_to_record(row) for row in rows]

    async def count(self) -> int:
        """Count all stored workouts."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM workouts")
            row = await cursor.fetchone()
            return row[0]

    def _row_to_record(self, row: aiosqlite.Row) -> WorkoutRecord:
        """Convert a database row to a WorkoutRecord."""
        return WorkoutRecord(
            id=row["id"],
            user_id=row["user_id"],
            pushups=row["pushups"],
            pullups=row["pullups"],
            situps=row["situps"],
            squats=row["squats"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
