"""Record intake: validate and store a new workout."""

import logging
from dataclasses import dataclass
from typing import Any

import aiosqlite
from pydantic import ValidationError

from ..auth.identity import IdentityProvider
from ..db.repositories import WorkoutRepository
from ..models.workout import WorkoutInput, WorkoutRecord, format_validation_error
from .events import RefreshNotifier, WorkoutLogged

log = logging.getLogger(__name__)

NOT_LOGGED_IN = "You must be logged in to submit workouts"


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a workout submission: the stored record or an error."""

    record: WorkoutRecord | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None and self.record is not None

    def to_dict(self) -> dict:
        if self.success:
            return {"status": "saved", "workout": self.record.to_dict()}
        return {"error": self.error}


class WorkoutIntake:
    """Accepts new workouts for the current user.

    Submissions are validated before storage is touched. Each stored
    workout is announced on the notifier so open views can re-read.
    """

    def __init__(
        self,
        identity: IdentityProvider,
        repository: WorkoutRepository,
        notifier: RefreshNotifier | None = None,
    ):
        self.identity = identity
        self.repository = repository
        self.notifier = notifier

    async def submit(
        self,
        pushups: Any,
        pullups: Any,
        situps: Any,
        squats: Any,
    ) -> SubmissionResult:
        """Validate, store and announce one workout.

        Args:
            pushups: Count (int or integral string)
            pullups: Count (int or integral string)
            situps: Count (int or integral string)
            squats: Count (int or integral string)

        Returns:
            SubmissionResult with the record, or the error message
        """
        try:
            workout = WorkoutInput(
                pushups=pushups,
                pullups=pullups,
                situps=situps,
                squats=squats,
            )
        except ValidationError as e:
            message = format_validation_error(e)
            log.info("Rejected workout submission: %s", message)
            return SubmissionResult(error=message)

        user = await self.identity.get_current_user()
        if user is None:
            return SubmissionResult(error=NOT_LOGGED_IN)

        try:
            record = await self.repository.create(user.id, workout)
        except aiosqlite.Error as e:
            # Storage message is surfaced unchanged, no retry
            log.warning("Failed to store workout for %s: %s", user.id, e)
            return SubmissionResult(error=str(e))

        log.info("Stored workout %s for user %s", record.id, user.id)

        if self.notifier is not None:
            await self.notifier.publish(WorkoutLogged(record=record))

        return SubmissionResult(record=record)
