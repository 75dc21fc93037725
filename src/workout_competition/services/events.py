"""Refresh notifications between the intake and the views that read history."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ..models.workout import WorkoutRecord

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkoutLogged:
    """Published after a workout has been stored."""

    record: WorkoutRecord


Listener = Callable[[WorkoutLogged], Awaitable[None]]


class RefreshNotifier:
    """Delivers WorkoutLogged events to subscribed listeners, in order."""

    def __init__(self):
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    async def publish(self, event: WorkoutLogged) -> None:
        """Await each listener. A failing listener does not stop the others."""
        for listener in list(self._listeners):
            try:
                await listener(event)
            except Exception:
                log.exception("Refresh listener failed for workout %s", event.record.id)
