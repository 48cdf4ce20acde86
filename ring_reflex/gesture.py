"""Long-press recognizer over raw pointer events."""
from __future__ import annotations

import math
from enum import Enum

from ring_reflex.events import LongPressEvent, PointerEvent, PointerKind


class GesturePhase(Enum):
    IDLE = "idle"
    PRESSED = "pressed"


class GestureTranslator:
    """Mealy machine: one raw pointer event in, at most one long-press out.

    IDLE --down--> PRESSED (anchor recorded)
    PRESSED --move beyond move_threshold--> IDLE
    PRESSED --up--> IDLE, emitting a LongPressEvent if held >= hold_threshold_ms
    """

    def __init__(self, hold_threshold_ms: float = 1000, move_threshold: float = 10) -> None:
        self.hold_threshold_ms = hold_threshold_ms
        self.move_threshold = move_threshold
        self._phase = GesturePhase.IDLE
        self._anchor_x = 0.0
        self._anchor_y = 0.0
        self._pressed_at = 0.0

    @property
    def phase(self) -> GesturePhase:
        return self._phase

    def reset(self) -> None:
        self._phase = GesturePhase.IDLE

    def feed(self, event: PointerEvent) -> LongPressEvent | None:
        if self._phase is GesturePhase.IDLE:
            if event.kind is PointerKind.DOWN:
                self._phase = GesturePhase.PRESSED
                self._anchor_x = event.x
                self._anchor_y = event.y
                self._pressed_at = event.timestamp
            return None

        if event.kind is PointerKind.MOVE:
            travelled = math.hypot(event.x - self._anchor_x, event.y - self._anchor_y)
            if travelled > self.move_threshold:
                self._phase = GesturePhase.IDLE
            return None

        if event.kind is PointerKind.UP:
            self._phase = GesturePhase.IDLE
            held = event.timestamp - self._pressed_at
            if held >= self.hold_threshold_ms:
                return LongPressEvent(x=event.x, y=event.y, timestamp=event.timestamp)
        return None
