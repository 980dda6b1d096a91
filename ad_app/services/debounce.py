"""Trailing-edge debouncer with an explicit, cancellable timer handle."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Generic, TypeVar

from ad_app.services.interfaces import Scheduler, TimerHandle

T = TypeVar("T")


def loop_scheduler(delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
    """Schedule on the running asyncio loop."""
    return asyncio.get_running_loop().call_later(delay, callback, *args)


class Debouncer(Generic[T]):
    """Deliver only the last value received within a quiescence window."""

    def __init__(
        self,
        delay: float,
        callback: Callable[[T], None],
        *,
        scheduler: Scheduler | None = None,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._delay = delay
        self._callback = callback
        self._scheduler: Scheduler = scheduler or loop_scheduler
        self._handle: TimerHandle | None = None
        self._value: T | None = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def call(self, value: T) -> None:
        """Restart the window with *value* as the candidate."""
        self.cancel()
        self._value = value
        self._handle = self._scheduler(self._delay, self._fire, value)

    def cancel(self) -> None:
        handle, self._handle = self._handle, None
        self._value = None
        if handle is not None:
            handle.cancel()

    def flush(self) -> bool:
        """Deliver the pending value now; returns False if nothing was pending."""
        if self._handle is None:
            return False
        value = self._value
        self.cancel()
        self._callback(value)  # type: ignore[arg-type]
        return True

    def _fire(self, value: T) -> None:
        self._handle = None
        self._value = None
        self._callback(value)
