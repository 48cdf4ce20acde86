"""Host-facing event value types."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PointerKind(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    CLICK = "click"


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Raw pointer input. ``timestamp`` is in milliseconds."""

    kind: PointerKind
    x: float
    y: float
    timestamp: float = 0.0


@dataclass(frozen=True, slots=True)
class LongPressEvent:
    """Synthesized by the gesture translator; carries the release point."""

    x: float
    y: float
    timestamp: float


@dataclass(frozen=True, slots=True)
class KeyEvent:
    key: str


@dataclass(frozen=True, slots=True)
class ResizeEvent:
    width: int
    height: int


HostEvent = PointerEvent | KeyEvent | ResizeEvent
