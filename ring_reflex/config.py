"""Game tunables."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable game configuration.

    Attributes:
        header_height: Height in pixels of the status strip above the ring.
        min_node_radius: Smallest rendered node radius.
        max_node_radius: Largest rendered node radius.
        default_node_count: Node count for a fresh session.
        min_node_count: Lower bound for node-count adjustments.
        max_node_count: Upper bound for node-count adjustments.
        default_rotation_speed: Ring rotation in degrees per second.
        min_rotation_speed: Lower bound for speed adjustments.
        max_rotation_speed: Upper bound for speed adjustments.
        dilation_period: Seconds per full radius oscillation.
        tick_interval: Seconds between PLAY timer ticks.
        burst_duration: Seconds the click-burst ring takes to expand.
        burst_start_radius: Click-burst ring radius at start.
        burst_end_radius: Click-burst ring radius at end.
        hold_threshold_ms: Minimum press duration for a long-press.
        move_threshold: Pointer travel in pixels that cancels a long-press.
    """

    header_height: float = 50
    min_node_radius: float = 15
    max_node_radius: float = 45
    default_node_count: int = 6
    min_node_count: int = 3
    max_node_count: int = 8
    default_rotation_speed: float = 5
    min_rotation_speed: float = 1
    max_rotation_speed: float = 10
    dilation_period: float = 3.6
    tick_interval: float = 0.1
    burst_duration: float = 1 / 3
    burst_start_radius: float = 15
    burst_end_radius: float = 45
    hold_threshold_ms: float = 1000
    move_threshold: float = 10

    def __post_init__(self) -> None:
        if self.header_height < 0:
            raise ValueError(f"header_height must be >= 0, got {self.header_height}")
        if not 0 < self.min_node_radius < self.max_node_radius:
            raise ValueError(
                "node radius bounds must satisfy 0 < min < max, "
                f"got {self.min_node_radius}..{self.max_node_radius}"
            )
        if not 1 <= self.min_node_count <= self.default_node_count <= self.max_node_count:
            raise ValueError(
                "node counts must satisfy 1 <= min <= default <= max, got "
                f"{self.min_node_count}/{self.default_node_count}/{self.max_node_count}"
            )
        if not (
            self.min_rotation_speed
            <= self.default_rotation_speed
            <= self.max_rotation_speed
        ):
            raise ValueError(
                "rotation speeds must satisfy min <= default <= max, got "
                f"{self.min_rotation_speed}/{self.default_rotation_speed}/"
                f"{self.max_rotation_speed}"
            )
        if self.dilation_period <= 0:
            raise ValueError(f"dilation_period must be > 0, got {self.dilation_period}")
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be > 0, got {self.tick_interval}")
        if self.burst_duration <= 0:
            raise ValueError(f"burst_duration must be > 0, got {self.burst_duration}")
        if self.hold_threshold_ms < 0:
            raise ValueError(
                f"hold_threshold_ms must be >= 0, got {self.hold_threshold_ms}"
            )
        if self.move_threshold < 0:
            raise ValueError(f"move_threshold must be >= 0, got {self.move_threshold}")

    def clamp_node_count(self, count: int) -> int:
        return max(self.min_node_count, min(self.max_node_count, count))

    def clamp_rotation_speed(self, speed: float) -> float:
        return max(self.min_rotation_speed, min(self.max_rotation_speed, speed))
