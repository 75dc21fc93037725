"""Identity providers: who is the current user.

The workout services only need two things from identity: the current
user (or None) and a way to sign out. The providers here are a minimal
stand-in backed by the local users and sessions tables.
"""

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..db.repositories import SessionRepository, UserRepository
from ..models.user import AuthUser

log = logging.getLogger(__name__)


@runtime_checkable
class IdentityProvider(Protocol):
    """Protocol for identity collaborators."""

    async def get_current_user(self) -> AuthUser | None:
        """Return the authenticated user, or None."""
        ...

    async def sign_out(self) -> None:
        """End the current user's session."""
        ...


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address.

    Raises:
        ValueError: If the address is empty or has no "@".
    """
    normalized = email.strip().lower()
    if not normalized or "@" not in normalized:
        raise ValueError(f"Invalid email address: {email!r}")
    return normalized


async def sign_in(email: str, db_path: Path | None = None) -> tuple[AuthUser, str]:
    """Sign a user in by email, creating the user on first sign-in.

    Returns:
        The user and a new session token.
    """
    user = await UserRepository(db_path).get_or_create(normalize_email(email))
    token = await SessionRepository(db_path).create(user.id)
    log.info("Signed in user %s", user.id)
    return user, token


class SessionIdentity:
    """Identity resolved from a session token (web requests)."""

    def __init__(self, token: str | None, db_path: Path | None = None):
        self.token = token
        self._sessions = SessionRepository(db_path)

    async def get_current_user(self) -> AuthUser | None:
        if not self.token:
            return None
        return await self._sessions.get_user(self.token)

    async def sign_out(self) -> None:
        if self.token:
            await self._sessions.delete(self.token)
            log.info("Signed out session")
        self.token = None


class StaticIdentity:
    """Identity fixed to one user (CLI, where the user is named by --email)."""

    def __init__(self, user: AuthUser | None):
        self.user = user

    async def get_current_user(self) -> AuthUser | None:
        return self.user

    async def sign_out(self) -> None:
        self.user = None
