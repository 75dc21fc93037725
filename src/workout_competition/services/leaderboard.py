"""Leaderboard aggregation across all users."""

from collections.abc import Iterable

from ..models.leaderboard import (
    ExerciseStandings,
    Leaderboard,
    RankedUser,
    display_name_for,
)
from ..models.progress import UserProgress
from ..models.workout import Exercise, WorkoutRecord
from .progress import boundary_pair, partition_by_user


def rank_exercise(
    progresses: list[UserProgress],
    exercise: Exercise,
    current_user_id: str | None = None,
) -> ExerciseStandings:
    """Rank users by percent increase for one exercise, best first.

    The sort is stable, so users with equal increases keep the order in
    which they first appear in the history.
    """
    ordered = sorted(
        progresses,
        key=lambda progress: progress.percent_increase(exercise),
        reverse=True,
    )
    ranking = [
        RankedUser(
            rank=index + 1,
            user_id=progress.user_id,
            display_name=display_name_for(progress.user_id, current_user_id),
            percent_increase=progress.percent_increase(exercise),
            first=progress.first.count(exercise),
            latest=progress.latest.count(exercise),
        )
        for index, progress in enumerate(ordered)
    ]
    return ExerciseStandings(exercise=exercise, ranking=ranking)


def compute_leaderboard(
    records: Iterable[WorkoutRecord],
    current_user_id: str | None = None,
) -> Leaderboard | None:
    """Aggregate every user's history into per-exercise standings.

    Args:
        records: All workouts, ordered by creation time
        current_user_id: The requesting user, shown as "You"

    Returns:
        The leaderboard, or None when nobody has logged a workout
    """
    partitions = partition_by_user(records)
    if not partitions:
        return None

    progresses = [boundary_pair(history) for history in partitions.values()]
    standings = {
        exercise: rank_exercise(progresses, exercise, current_user_id)
        for exercise in Exercise
    }
    return Leaderboard(
        standings=standings,
        current_user_id=current_user_id,
        participant_count=len(progresses),
    )
