"""Click-burst overlay."""
from __future__ import annotations

import pygame

from ring_reflex.effects import ClickBurst
from ring_reflex.ui.constants import BURST_COLOR, BURST_LINE_W


def draw_burst(surface: pygame.Surface, burst: ClickBurst | None, now: float) -> None:
    if burst is None or not burst.active:
        return
    radius = max(BURST_LINE_W, round(burst.radius_at(now)))
    pygame.draw.circle(
        surface, BURST_COLOR, (round(burst.x), round(burst.y)), radius, BURST_LINE_W
    )
