"""Periodic PLAY timer driven by an injected monotonic clock."""
from __future__ import annotations

import math
from typing import Callable


class PlayTimer:
    """Recurring timer. Fires every ``interval`` seconds while running.

    The host calls ``advance(now)`` once per frame.  Ticks that fall due
    between two calls are collapsed into a single ``on_fire(now)`` call, since
    listeners recompute everything from the start time anyway.
    """

    def __init__(self, interval: float, on_fire: Callable[[float], None] | None = None) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._on_fire = on_fire
        self._started_at: float | None = None
        self._tick_number = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._started_at is not None

    @property
    def started_at(self) -> float | None:
        return self._started_at

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def start(self, now: float) -> None:
        self._started_at = now
        self._tick_number = 0

    def cancel(self) -> None:
        self._started_at = None

    def elapsed(self, now: float) -> float:
        if self._started_at is None:
            return 0.0
        return max(0.0, now - self._started_at)

    def advance(self, now: float) -> int:
        """Fire if one or more ticks are due. Returns how many were due."""
        if self._started_at is None:
            return 0
        due = math.floor(self.elapsed(now) / self._interval + 1e-9)
        fired = due - self._tick_number
        if fired <= 0:
            return 0
        self._tick_number = due
        if self._on_fire is not None:
            self._on_fire(now)
        return fired
