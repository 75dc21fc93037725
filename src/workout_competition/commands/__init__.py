"""CLI commands for workout-competition."""

from .init import init
from .leaderboard import leaderboard
from .log_cmd import log_workout
from .serve import serve
from .stats import history, stats

__all__ = [
    "history",
    "init",
    "leaderboard",
    "log_workout",
    "serve",
    "stats",
]
