"""Database layer for workout-competition."""

from .engine import get_db_path, init_db
from .repositories import SessionRepository, UserRepository, WorkoutRepository

__all__ = [
    "get_db_path",
    "init_db",
    "SessionRepository",
    "UserRepository",
    "WorkoutRepository",
]
