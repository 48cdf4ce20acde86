"""Shared types for the ring-reflex game core."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GameMode(Enum):
    SETUP = "setup"
    PLAY = "play"
    END = "end"


class DilationFn(Enum):
    SINE = "sine"
    COSINE = "cosine"


@dataclass
class Node:
    """A clickable target on the ring.

    ``id`` is the click order; the node's index in the session's node list is
    its array slot and is never stored here.  ``base_angle``, ``base_radius``,
    ``dilation`` and ``phase`` are fixed at generation.  ``x``, ``y`` and
    ``radius`` are the derived pose for the most recent frame.
    """

    id: int
    base_angle: float
    base_radius: float
    dilation: DilationFn
    phase: float = 0.0
    active: bool = False
    resolved: bool = False
    hue: int | None = None
    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0


@dataclass(frozen=True, slots=True)
class Ring:
    center_x: float
    center_y: float
    radius: float


@dataclass(frozen=True, slots=True)
class Pose:
    x: float
    y: float
    radius: float


class InvalidTransitionError(RuntimeError):
    """Raised when the session is asked to move between unconnected modes."""

    def __init__(self, old: GameMode, new: GameMode) -> None:
        self.old = old
        self.new = new
        super().__init__(f"Cannot transition from {old.name} to {new.name}")
