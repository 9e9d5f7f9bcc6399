"""Single-writer cell holding the current snapshot, with undo/redo history.

Snapshots are immutable, so history keeps references rather than copies.
Publishing a snapshot to subscribers happens under the same lock as the swap,
so subscribers see snapshots in commit order.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable

from .actions import Action
from .reducer import reduce
from .state import AppState, make_initial_state

_LOGGER = logging.getLogger("harmonics.store")

Subscriber = Callable[[AppState], None]


class Store:
    def __init__(self, initial: AppState | None = None, *, history_limit: int = 100) -> None:
        if history_limit < 0:
            raise ValueError(f"history_limit must be >= 0, got {history_limit}")
        self._state = initial if initial is not None else make_initial_state()
        # Reentrant so a subscriber may dispatch or subscribe from its callback.
        self._lock = threading.RLock()
        self._undo: deque[AppState] = deque(maxlen=history_limit)
        self._redo: list[AppState] = []
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> AppState:
        return self._state

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for every published snapshot; returns an unsubscribe function."""
        with self._lock:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return _unsubscribe

    def dispatch(self, action: Action | object) -> AppState:
        with self._lock:
            previous = self._state
            # If the reducer raises, the current snapshot stays in place.
            current = reduce(previous, action)
            if current is previous:
                return current
            self._undo.append(previous)
            self._redo.clear()
            self._publish(current)
            _LOGGER.debug("Published snapshot after %s", type(action).__name__)
            return current

    def undo(self) -> AppState | None:
        with self._lock:
            if not self._undo:
                return None
            self._redo.append(self._state)
            self._publish(self._undo.pop())
            return self._state

    def redo(self) -> AppState | None:
        with self._lock:
            if not self._redo:
                return None
            self._undo.append(self._state)
            self._publish(self._redo.pop())
            return self._state

    def _publish(self, state: AppState) -> None:
        self._state = state
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception as exc:
                _LOGGER.warning("Subscriber %r failed: %s", callback, exc, exc_info=True)
