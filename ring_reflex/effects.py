"""Click-burst animation."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ClickBurst:
    """Expanding ring anchored where a correct click landed.

    Runs on wall-clock seconds and is independent of the game mode.
    ``active`` clears itself once ``duration`` has passed.
    """

    x: float
    y: float
    started_at: float
    duration: float
    start_radius: float
    end_radius: float
    active: bool = True

    def progress(self, now: float) -> float:
        return max(0.0, min((now - self.started_at) / self.duration, 1.0))

    def radius_at(self, now: float) -> float:
        t = self.progress(now)
        return self.start_radius + (self.end_radius - self.start_radius) * t

    def update(self, now: float) -> bool:
        """Expire the burst when its time is up. Returns whether it is still live."""
        if self.active and now - self.started_at >= self.duration:
            self.active = False
        return self.active
