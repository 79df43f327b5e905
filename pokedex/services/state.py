"""Observable holder for a client's published FetchState.

A publisher belongs to one client and is written only from the event loop that
runs that client's fetches.  Code running in another thread must hand its work
to that loop (``asyncio.run_coroutine_threadsafe``) instead of touching the
publisher directly.
"""

import logging
from typing import Callable, Generic, TypeVar

from pokedex.models.fetch_state import FetchState, FetchStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")

Subscriber = Callable[[FetchState[T]], None]


class StatePublisher(Generic[T]):
    """Current state of one client plus the callbacks watching it."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._state: FetchState[T] = FetchState.idle()
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> FetchState[T]:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for every future state; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, state: FetchState[T]) -> None:
        """Replace the current state and notify subscribers in registration order."""
        if state.status is FetchStatus.IDLE:
            raise ValueError("idle is only the initial state and cannot be published")
        self._state = state
        logger.debug("%s state -> %s", self.name, state.status.value)
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                logger.exception("Subscriber of %s state failed", self.name)
