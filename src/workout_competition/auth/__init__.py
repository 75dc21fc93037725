"""Identity collaborators."""

from .identity import (
    IdentityProvider,
    SessionIdentity,
    StaticIdentity,
    normalize_email,
    sign_in,
)

__all__ = [
    "IdentityProvider",
    "SessionIdentity",
    "StaticIdentity",
    "normalize_email",
    "sign_in",
]
