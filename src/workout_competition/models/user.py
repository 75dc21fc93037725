"""Authenticated user model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AuthUser:
    """A user known to the identity store."""

    id: str
    email: str
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
