"""Web interface for workout-competition."""

from .app import create_app

__all__ = ["create_app"]
