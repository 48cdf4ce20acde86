"""Background fill and the header strip."""
from __future__ import annotations

import pygame

from ring_reflex.ui.constants import (
    BG_COLOR,
    BG_INCORRECT,
    HEADER_LINE,
    HEADER_LINE_W,
    HEADER_TEXT,
)


def draw_background(surface: pygame.Surface, incorrect: bool) -> None:
    surface.fill(BG_INCORRECT if incorrect else BG_COLOR)


def draw_header(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    header_h: float,
) -> None:
    """Draw the separator line and the centered status text above it."""
    w = surface.get_width()
    y = int(header_h)
    pygame.draw.line(surface, HEADER_LINE, (0, y), (w, y), HEADER_LINE_W)

    label = font.render(text, True, HEADER_TEXT)
    surface.blit(label, label.get_rect(center=(w // 2, y // 2)))
