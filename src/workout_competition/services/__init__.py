"""Services for workout-competition."""

from .dashboard import Dashboard
from .events import RefreshNotifier, WorkoutLogged
from .intake import SubmissionResult, WorkoutIntake
from .leaderboard import compute_leaderboard, rank_exercise
from .progress import (
    boundary_pair,
    compute_personal_stats,
    partition_by_user,
    records_for_user,
)

__all__ = [
    "Dashboard",
    "RefreshNotifier",
    "SubmissionResult",
    "WorkoutIntake",
    "WorkoutLogged",
    "boundary_pair",
    "compute_leaderboard",
    "compute_personal_stats",
    "partition_by_user",
    "rank_exercise",
    "records_for_user",
]
