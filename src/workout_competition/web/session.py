"""Request helpers shared by the routers."""

from pathlib import Path

from fastapi import Request

from ..auth.identity import SessionIdentity
from ..config import get_session_cookie_name
from ..db.repositories import WorkoutRepository
from ..models.user import AuthUser


def get_db_path(request: Request) -> Path:
    """Get the database path from app state."""
    return request.app.state.db_path


def get_identity(request: Request) -> SessionIdentity:
    """Build the identity collaborator from the session cookie."""
    token = request.cookies.get(get_session_cookie_name())
    return SessionIdentity(token, get_db_path(request))


async def get_current_user(request: Request) -> AuthUser | None:
    return await get_identity(request).get_current_user()


def get_workout_repository(request: Request) -> WorkoutRepository:
    return WorkoutRepository(get_db_path(request))
