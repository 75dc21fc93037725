"""Leaderboard models."""

from dataclasses import dataclass, field

from .workout import Exercise

CURRENT_USER_DISPLAY_NAME = "You"
NO_COMPETITION_DATA = "No competition data yet."


def display_name_for(user_id: str, current_user_id: str | None) -> str:
    """Get the name shown for a user on the leaderboard.

    Emails of other users are not available, so they are masked to the
    first eight characters of their id.
    """
    if current_user_id is not None and user_id == current_user_id:
        return CURRENT_USER_DISPLAY_NAME
    return f"User {user_id[:8]}"


@dataclass(frozen=True)
class RankedUser:
    """One user's position in a single exercise ranking."""

    rank: int
    user_id: str
    display_name: str
    percent_increase: float
    first: int
    latest: int

    def to_dict(self) -> dict:
        return {
            "rank": self.rank,
            "user_id": self.user_id,
            "display_name": self.display_name,
            "percent_increase": self.percent_increase,
            "first": self.first,
            "latest": self.latest,
        }


@dataclass(frozen=True)
class ExerciseStandings:
    """Users ranked by percent increase for one exercise, best first."""

    exercise: Exercise
    ranking: list[RankedUser] = field(default_factory=list)

    @property
    def leader(self) -> RankedUser | None:
        return self.ranking[0] if self.ranking else None

    def rank_of(self, user_id: str | None) -> int | None:
        """Get the 1-based rank of a user, or None if unranked."""
        for entry in self.ranking:
            if entry.user_id == user_id:
                return entry.rank
        return None

    def to_dict(self) -> dict:
        leader = self.leader
        return {
            "exercise": self.exercise.value,
            "leader": leader.to_dict() if leader else None,
            "ranking": [entry.to_dict() for entry in self.ranking],
        }


@dataclass(frozen=True)
class Leaderboard:
    """Per-exercise standings plus the requesting user's ranks."""

    standings: dict[Exercise, ExerciseStandings]
    current_user_id: str | None = None
    participant_count: int = 0

    def leader(self, exercise: Exercise) -> RankedUser | None:
        return self.standings[exercise].leader

    def current_user_rank(self, exercise: Exercise) -> int | None:
        """Rank of the requesting user, None when they have no workouts."""
        if self.current_user_id is None:
            return None
        return self.standings[exercise].rank_of(self.current_user_id)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "participants": self.participant_count,
            "your_ranks": {
                exercise.value: self.current_user_rank(exercise) for exercise in Exercise
            },
            "standings": {
                exercise.value: standings.to_dict()
                for exercise, standings in self.standings.items()
            },
        }
