"""Load-status state machine for remote list views."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ListStatus(str, Enum):
    """Status of the last request issued by a list view."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


# Cache hits go straight to SUCCESS; a newer query may restart LOADING.
_ALLOWED_TRANSITIONS = {
    ListStatus.IDLE: {ListStatus.LOADING, ListStatus.SUCCESS},
    ListStatus.LOADING: {ListStatus.LOADING, ListStatus.SUCCESS, ListStatus.ERROR},
    ListStatus.SUCCESS: {ListStatus.LOADING, ListStatus.SUCCESS},
    ListStatus.ERROR: {ListStatus.LOADING, ListStatus.SUCCESS},
}

StatusCallback = Callable[[ListStatus, Optional[str]], None]


class ListStateMachine:
    """Status tracker for a single list view; not shared between views."""

    def __init__(self) -> None:
        self._state = ListStatus.IDLE
        self._reason: Optional[str] = None
        self._callbacks: list[StatusCallback] = []

    @property
    def state(self) -> ListStatus:
        return self._state

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def register_callback(self, callback: StatusCallback) -> None:
        """Register a callback invoked on every transition."""
        self._callbacks.append(callback)

    def transition(self, new_state: ListStatus, reason: Optional[str] = None) -> ListStatus:
        """Attempt a state transition; raise ValueError if invalid."""
        allowed = _ALLOWED_TRANSITIONS.get(self._state, set())
        if new_state not in allowed:
            raise ValueError(f"Invalid transition {self._state} -> {new_state}")
        self._state = new_state
        self._reason = reason
        for callback in list(self._callbacks):
            try:
                callback(self._state, self._reason)
            except Exception:
                logger.exception("List status callback failed")
        return self._state
