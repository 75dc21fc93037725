"""Progress models derived from workout history."""

from dataclasses import dataclass

from .workout import Exercise, WorkoutRecord


def percent_increase(first: int, latest: int) -> float:
    """Calculate the percentage change from first to latest.

    A zero baseline counts as no measurable increase and returns 0.0.
    """
    if first > 0:
        return (latest - first) / first * 100
    return 0.0


@dataclass(frozen=True)
class UserProgress:
    """A user's boundary pair: earliest and most recent workout."""

    user_id: str
    first: WorkoutRecord
    latest: WorkoutRecord
    record_count: int = 1

    def percent_increase(self, exercise: Exercise) -> float:
        """Percent increase from the first to the latest workout."""
        return percent_increase(self.first.count(exercise), self.latest.count(exercise))

    def increases(self) -> dict[Exercise, float]:
        return {exercise: self.percent_increase(exercise) for exercise in Exercise}


@dataclass(frozen=True)
class PersonalStats:
    """Current totals and first-vs-latest change for one user."""

    progress: UserProgress

    @property
    def total_workouts(self) -> int:
        return self.progress.record_count

    @property
    def first(self) -> WorkoutRecord:
        return self.progress.first

    @property
    def latest(self) -> WorkoutRecord:
        return self.progress.latest

    def latest_count(self, exercise: Exercise) -> int:
        return self.latest.count(exercise)

    def percent_increase(self, exercise: Exercise) -> float:
        return self.progress.percent_increase(exercise)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "total_workouts": self.total_workouts,
            "first_logged_at": self.first.created_at.isoformat(),
            "latest_logged_at": self.latest.created_at.isoformat(),
            "exercises": {
                exercise.value: {
                    "first": self.first.count(exercise),
                    "latest": self.latest_count(exercise),
                    "percent_increase": self.percent_increase(exercise),
                }
                for exercise in Exercise
            },
        }
