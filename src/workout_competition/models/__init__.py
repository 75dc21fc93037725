"""Data models for workout-competition."""

from .leaderboard import ExerciseStandings, Leaderboard, RankedUser
from .progress import PersonalStats, UserProgress, percent_increase
from .user import AuthUser
from .workout import Exercise, WorkoutInput, WorkoutRecord

__all__ = [
    "AuthUser",
    "Exercise",
    "ExerciseStandings",
    "Leaderboard",
    "PersonalStats",
    "RankedUser",
    "UserProgress",
    "WorkoutInput",
    "WorkoutRecord",
    "percent_increase",
]
