"""GameSession - the SETUP/PLAY/END state machine, scoring, and timing."""
from __future__ import annotations

import logging
import math
import os
import random
from typing import Callable

from ring_reflex.clock import PlayTimer
from ring_reflex.config import GameConfig
from ring_reflex.geometry import GeometryEngine
from ring_reflex.types import GameMode, InvalidTransitionError, Node, Ring

logger = logging.getLogger(__name__)

SETUP_HEADER = "click target 1 to begin"

# SETUP -> PLAY on the first hit, PLAY -> END on finish or abort, END -> SETUP on restart.
_TRANSITIONS: dict[GameMode, frozenset[GameMode]] = {
    GameMode.SETUP: frozenset({GameMode.PLAY}),
    GameMode.PLAY: frozenset({GameMode.END}),
    GameMode.END: frozenset({GameMode.SETUP}),
}

TransitionHook = Callable[[GameMode, GameMode], None]


def format_seconds(seconds: float) -> str:
    """Seconds truncated to tenths, e.g. 12.34 -> '12.3'."""
    tenths = math.floor(round(max(0.0, seconds) * 10, 6))
    return f"{tenths // 10}.{tenths % 10}"


class GameSession:
    """One player's game: the node ring, the click sequence and the clock.

    All time-dependent methods take ``now`` in monotonic seconds.  Operations
    that are not valid in the current mode do nothing and return False.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        self._config = config or GameConfig()
        self._geometry = GeometryEngine(self._config)

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._timer = PlayTimer(self._config.tick_interval, on_fire=self._on_tick)
        self._transition_hooks: list[TransitionHook] = []

        self._mode = GameMode.SETUP
        self._node_count = self._config.default_node_count
        self._rotation_speed = self._config.default_rotation_speed
        self._current_target_id = 1
        self._elapsed = 0.0
        self._best: float | None = None
        self._last_was_best = False
        self._header_text = SETUP_HEADER

        self._ring = self._geometry.ring_for(0, 0)
        self._nodes: list[Node] = []
        self.regenerate()

    # -- read-only state ---------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def geometry(self) -> GeometryEngine:
        return self._geometry

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def nodes(self) -> list[Node]:
        return self._nodes

    @property
    def ring(self) -> Ring:
        return self._ring

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def rotation_speed(self) -> float:
        return self._rotation_speed

    @property
    def current_target_id(self) -> int:
        return self._current_target_id

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def best(self) -> float | None:
        return self._best

    @property
    def last_was_best(self) -> bool:
        """Whether the most recent completed run set a new best."""
        return self._last_was_best

    @property
    def header_text(self) -> str:
        return self._header_text

    @property
    def timer(self) -> PlayTimer:
        return self._timer

    @property
    def active_index(self) -> int | None:
        for index, node in enumerate(self._nodes):
            if node.active:
                return index
        return None

    def is_active_target(self, index: int | None) -> bool:
        return index is not None and self._nodes[index].active

    def on_transition(self, hook: TransitionHook) -> None:
        """Register ``hook(old_mode, new_mode)``, called after every transition."""
        self._transition_hooks.append(hook)

    # -- layout ------------------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            logger.debug("ignoring degenerate resize to %sx%s", width, height)
            return
        self._ring = self._geometry.ring_for(width, height)
        logger.debug("resized to %sx%s, ring r=%.1f", width, height, self._ring.radius)
        self.refresh_poses()

    def regenerate(self) -> None:
        self._nodes = self._geometry.generate(self._node_count, self._ring, self._rng)
        first = self._node_by_id(self._current_target_id)
        if first is not None:
            first.active = True
        self.refresh_poses()

    def refresh_poses(self) -> None:
        """Recompute every node's pose for the current elapsed time."""
        self._geometry.apply_poses(
            self._nodes,
            self._ring,
            elapsed=self._elapsed,
            speed=self._rotation_speed,
            dilating=self._mode is not GameMode.SETUP,
        )

    def reshuffle(self) -> bool:
        if self._mode is not GameMode.SETUP:
            return False
        self.regenerate()
        return True

    def adjust_node_count(self, delta: int) -> bool:
        if self._mode is not GameMode.SETUP:
            return False
        count = self._config.clamp_node_count(self._node_count + delta)
        if count == self._node_count:
            return False
        self._node_count = count
        self.regenerate()
        return True

    def adjust_rotation_speed(self, delta: float) -> bool:
        if self._mode is not GameMode.SETUP:
            return False
        speed = self._config.clamp_rotation_speed(self._rotation_speed + delta)
        if speed == self._rotation_speed:
            return False
        self._rotation_speed = speed
        return True

    # -- lifecycle ---------------------------------------------------------

    def start(self, now: float) -> bool:
        if self._mode is not GameMode.SETUP:
            return False
        self._transition(GameMode.PLAY)
        self._elapsed = 0.0
        self._timer.start(now)
        self._header_text = format_seconds(0.0)
        logger.info("game started with %d nodes at %s deg/s", self._node_count, self._rotation_speed)
        return True

    def update(self, now: float) -> int:
        """Advance the PLAY timer. Returns the number of ticks that fell due."""
        return self._timer.advance(now)

    def click(self, index: int | None, now: float) -> bool:
        """Resolve a click on array slot ``index``. True if it hit the active target.

        Clicking the last array slot ends the game whether or not that node is
        the active target.
        """
        if self._mode is not GameMode.PLAY:
            return False

        if index is not None and index == len(self._nodes) - 1:
            self._stop(now)

        if not self.is_active_target(index):
            return False

        node = self._nodes[index]
        node.active = False
        node.resolved = True
        node.hue = self._rng.randrange(360)

        self._current_target_id += 1
        next_node = self._node_by_id(self._current_target_id)
        if next_node is not None:
            next_node.active = True
        else:
            if self._mode is GameMode.PLAY:
                self._stop(now)
            self._record_finish()
        return True

    def resolve_active(self, now: float) -> bool:
        """Resolve the current active target as if it had been clicked."""
        if self._mode is not GameMode.PLAY:
            return False
        index = self.active_index
        if index is None:
            return False
        return self.click(index, now)

    def abort(self, now: float) -> bool:
        """Force-end a running game and go straight back to SETUP."""
        if self._mode is not GameMode.PLAY:
            return False
        self._stop(now)
        logger.info("game aborted after %ss", format_seconds(self._elapsed))
        self._reset()
        return True

    def restart(self) -> bool:
        if self._mode is not GameMode.END:
            return False
        self._reset()
        return True

    # -- internals ---------------------------------------------------------

    def _transition(self, new: GameMode) -> None:
        old = self._mode
        if new not in _TRANSITIONS[old]:
            raise InvalidTransitionError(old, new)
        self._mode = new
        logger.debug("mode %s -> %s", old.name, new.name)
        for hook in self._transition_hooks:
            hook(old, new)

    def _stop(self, now: float) -> None:
        self._elapsed = self._timer.elapsed(now)
        self._timer.cancel()
        self._transition(GameMode.END)
        self.refresh_poses()

    def _reset(self) -> None:
        self._transition(GameMode.SETUP)
        self._header_text = SETUP_HEADER
        self._current_target_id = 1
        self._elapsed = 0.0
        self.regenerate()

    def _record_finish(self) -> None:
        finish = self._elapsed
        if self._best is None or finish < self._best:
            self._best = finish
            self._last_was_best = True
            self._header_text = f"{format_seconds(finish)} (new best!)"
        else:
            self._last_was_best = False
            self._header_text = (
                f"{format_seconds(finish)} (best: {format_seconds(self._best)})"
            )
        logger.info("finished in %ss (best %ss)", format_seconds(finish), format_seconds(self._best))

    def _on_tick(self, now: float) -> None:
        self._elapsed = self._timer.elapsed(now)
        self._header_text = format_seconds(self._elapsed)

    def _node_by_id(self, node_id: int) -> Node | None:
        for node in self._nodes:
            if node.id == node_id:
                return node
        return None
