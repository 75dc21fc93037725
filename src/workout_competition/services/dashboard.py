"""Dashboard view: personal stats and leaderboard for one user."""

import logging

import aiosqlite

from ..db.repositories import WorkoutRepository
from ..models.leaderboard import NO_COMPETITION_DATA, Leaderboard
from ..models.progress import PersonalStats
from ..models.user import AuthUser
from .events import RefreshNotifier, WorkoutLogged
from .leaderboard import compute_leaderboard
from .progress import compute_personal_stats, records_for_user

log = logging.getLogger(__name__)

NO_WORKOUTS_YET = "No workouts logged yet. Start by logging your first workout!"


class Dashboard:
    """Holds the latest aggregation for one viewer.

    Both aggregations are recomputed from the full history on refresh().
    When a notifier is given, every WorkoutLogged event triggers a
    refresh.
    """

    def __init__(
        self,
        repository: WorkoutRepository,
        user: AuthUser | None = None,
        notifier: RefreshNotifier | None = None,
    ):
        self.repository = repository
        self.user = user
        self.personal: PersonalStats | None = None
        self.leaderboard: Leaderboard | None = None
        self.refresh_count = 0
        self._unsubscribe = notifier.subscribe(self._on_workout_logged) if notifier else None

    async def refresh(self) -> None:
        """Re-read all workouts and recompute both aggregations.

        A read failure is logged and leaves the view in its no-data state.
        """
        try:
            records = await self.repository.list_all(ascending=True)
        except aiosqlite.Error:
            log.exception("Error fetching workouts")
            records = []

        user_id = self.user.id if self.user else None
        history = records_for_user(records, user_id) if user_id else []

        self.personal = compute_personal_stats(history)
        self.leaderboard = compute_leaderboard(records, current_user_id=user_id)
        self.refresh_count += 1

    async def _on_workout_logged(self, event: WorkoutLogged) -> None:
        log.debug("Refreshing dashboard after workout %s", event.record.id)
        await self.refresh()

    def close(self) -> None:
        """Stop listening for refresh notifications."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def stats_dict(self) -> dict:
        if self.personal is None:
            return {"stats": None, "message": NO_WORKOUTS_YET}
        return {"stats": self.personal.to_dict()}

    def leaderboard_dict(self) -> dict:
        if self.leaderboard is None:
            return {"leaderboard": None, "message": NO_COMPETITION_DATA}
        return {"leaderboard": self.leaderboard.to_dict()}

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "user": self.user.to_dict() if self.user else None,
            "personal": self.stats_dict(),
            "competition": self.leaderboard_dict(),
        }
