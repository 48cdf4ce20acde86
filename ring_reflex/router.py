"""InputRouter - maps host events onto the session and transient visuals."""
from __future__ import annotations

import logging

from ring_reflex.effects import ClickBurst
from ring_reflex.events import (
    HostEvent,
    KeyEvent,
    LongPressEvent,
    PointerEvent,
    PointerKind,
    ResizeEvent,
)
from ring_reflex.gesture import GestureTranslator
from ring_reflex.hittest import hit_test
from ring_reflex.session import GameSession
from ring_reflex.types import GameMode

logger = logging.getLogger(__name__)

KEY_SPACE = " "
KEY_CHEAT = "c"
KEY_FEWER_NODES = "["
KEY_MORE_NODES = "]"
KEY_SLOWER = "{"
KEY_FASTER = "}"


class InputRouter:
    """Owns the hover, click-burst and wrong-target flash state.

    Every raw pointer event is fed through the gesture translator before it is
    dispatched; a synthesized long-press is dispatched right after the raw
    event that produced it. The click the host synthesizes for that same
    release is swallowed, so it never lands on the layout the long-press
    may have just rebuilt.
    """

    def __init__(self, session: GameSession, translator: GestureTranslator | None = None) -> None:
        cfg = session.config
        self.session = session
        self.translator = translator or GestureTranslator(
            hold_threshold_ms=cfg.hold_threshold_ms,
            move_threshold=cfg.move_threshold,
        )
        self.hovered_index: int | None = None
        self.incorrect = False
        self.burst: ClickBurst | None = None
        self._swallow_click = False
        session.on_transition(self._on_transition)

    def handle(self, event: HostEvent, now: float) -> None:
        if isinstance(event, ResizeEvent):
            self.session.resize(event.width, event.height)
        elif isinstance(event, KeyEvent):
            self._on_key(event.key, now)
        elif isinstance(event, PointerEvent):
            if event.kind is PointerKind.CLICK:
                if self._swallow_click:
                    self._swallow_click = False
                    return
                self._on_pointer(event, now)
                return
            if event.kind is PointerKind.DOWN:
                self._swallow_click = False
            long_press = self.translator.feed(event)
            self._on_pointer(event, now)
            if long_press is not None:
                self._swallow_click = True
                self._on_long_press(long_press, now)

    def update(self, now: float) -> None:
        """Per-frame housekeeping: PLAY timer and click-burst expiry."""
        self.session.update(now)
        if self.burst is not None and not self.burst.update(now):
            self.burst = None

    def _on_pointer(self, event: PointerEvent, now: float) -> None:
        session = self.session
        if event.kind is PointerKind.MOVE:
            self.hovered_index = hit_test(session.nodes, event.x, event.y)
        elif event.kind is PointerKind.DOWN:
            index = hit_test(session.nodes, event.x, event.y)
            if not session.is_active_target(index):
                self.incorrect = True
        elif event.kind is PointerKind.UP:
            self.incorrect = False
        elif event.kind is PointerKind.CLICK:
            self._on_click(event.x, event.y, now)

    def _on_click(self, x: float, y: float, now: float) -> None:
        session = self.session
        index = hit_test(session.nodes, x, y)

        if session.mode is not GameMode.END and session.is_active_target(index):
            node = session.nodes[index]
            cfg = session.config
            self.burst = ClickBurst(
                x=node.x,
                y=node.y,
                started_at=now,
                duration=cfg.burst_duration,
                start_radius=cfg.burst_start_radius,
                end_radius=cfg.burst_end_radius,
            )

        if session.mode is GameMode.SETUP and index == 0:
            session.start(now)

        if session.mode is GameMode.PLAY:
            session.click(index, now)

    def _on_long_press(self, event: LongPressEvent, now: float) -> None:
        logger.debug("long press at (%.0f, %.0f)", event.x, event.y)
        if self.session.mode is GameMode.PLAY:
            self.session.abort(now)

    def _on_key(self, key: str, now: float) -> None:
        session = self.session
        if key == KEY_SPACE:
            if session.mode is GameMode.SETUP:
                session.reshuffle()
            elif session.mode is GameMode.END:
                session.restart()
        elif key == KEY_CHEAT:
            session.resolve_active(now)
        elif key == KEY_FEWER_NODES:
            session.adjust_node_count(-1)
        elif key == KEY_MORE_NODES:
            session.adjust_node_count(1)
        elif key == KEY_SLOWER:
            session.adjust_rotation_speed(-1)
        elif key == KEY_FASTER:
            session.adjust_rotation_speed(1)

    def _on_transition(self, old: GameMode, new: GameMode) -> None:
        if new is GameMode.SETUP:
            self.translator.reset()
            self.burst = None
            self.hovered_index = None
            self.incorrect = False
