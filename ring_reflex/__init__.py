"""ring-reflex - click the pulsing targets of a rotating ring in order, fast."""

from ring_reflex.clock import PlayTimer
from ring_reflex.config import GameConfig
from ring_reflex.effects import ClickBurst
from ring_reflex.events import KeyEvent, LongPressEvent, PointerEvent, PointerKind, ResizeEvent
from ring_reflex.geometry import GeometryEngine
from ring_reflex.gesture import GesturePhase, GestureTranslator
from ring_reflex.hittest import hit_test
from ring_reflex.router import InputRouter
from ring_reflex.session import GameSession, format_seconds
from ring_reflex.types import DilationFn, GameMode, InvalidTransitionError, Node, Pose, Ring

__all__ = [
    "GameSession",
    "GameMode",
    "GameConfig",
    "GeometryEngine",
    "GestureTranslator",
    "GesturePhase",
    "InputRouter",
    "PlayTimer",
    "ClickBurst",
    "Node",
    "Pose",
    "Ring",
    "DilationFn",
    "PointerEvent",
    "PointerKind",
    "KeyEvent",
    "ResizeEvent",
    "LongPressEvent",
    "InvalidTransitionError",
    "hit_test",
    "format_seconds",
]
