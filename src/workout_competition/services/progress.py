"""Personal progress aggregation."""

from collections.abc import Iterable, Sequence

from ..models.progress import PersonalStats, UserProgress
from ..models.workout import WorkoutRecord


def partition_by_user(records: Iterable[WorkoutRecord]) -> dict[str, list[WorkoutRecord]]:
    """Group records by user, keeping arrival order.

    Users appear in the order of their first record and each user's
    records keep their relative order.
    """
    partitions: dict[str, list[WorkoutRecord]] = {}
    for record in records:
        partitions.setdefault(record.user_id, []).append(record)
    return partitions


def records_for_user(records: Iterable[WorkoutRecord], user_id: str) -> list[WorkoutRecord]:
    """Get one user's records from the full history."""
    return [record for record in records if record.user_id == user_id]


def boundary_pair(history: Sequence[WorkoutRecord]) -> UserProgress:
    """Build the first/latest pair for one user's time-ordered history.

    Raises:
        ValueError: If the history is empty.
    """
    if not history:
        raise ValueError("Cannot build progress from an empty history")
    first = history[0]
    return UserProgress(
        user_id=first.user_id,
        first=first,
        latest=history[-1],
        record_count=len(history),
    )


def compute_personal_stats(history: Sequence[WorkoutRecord]) -> PersonalStats | None:
    """Aggregate one user's time-ordered history.

    Returns:
        The stats, or None when nothing has been logged yet
    """
    if not history:
        return None
    return PersonalStats(progress=boundary_pair(history))
