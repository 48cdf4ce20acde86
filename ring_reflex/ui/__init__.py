"""pygame rendering for ring-reflex."""
from __future__ import annotations

from dataclasses import dataclass

import pygame

from ring_reflex.router import InputRouter
from ring_reflex.ui.constants import HEADER_FONT_SIZE, LABEL_FONT_SIZE
from ring_reflex.ui.effects import draw_burst
from ring_reflex.ui.header import draw_background, draw_header
from ring_reflex.ui.ring import draw_nodes


@dataclass
class Fonts:
    header: pygame.font.Font
    label: pygame.font.Font


def load_fonts() -> Fonts:
    """Load pygame's bundled default font. Requires ``pygame.font.init()``."""
    return Fonts(
        header=pygame.font.Font(None, HEADER_FONT_SIZE),
        label=pygame.font.Font(None, LABEL_FONT_SIZE),
    )


def draw_frame(
    surface: pygame.Surface, router: InputRouter, fonts: Fonts, now: float
) -> None:
    """Render one frame: background, header, nodes + hover, click burst.

    Reads the session and router state only; node poses are expected to be
    current (``session.refresh_poses()``).
    """
    session = router.session
    draw_background(surface, router.incorrect)
    draw_header(surface, fonts.header, session.header_text, session.config.header_height)
    draw_nodes(
        surface,
        session.nodes,
        fonts.label,
        session.current_target_id,
        router.hovered_index,
    )
    draw_burst(surface, router.burst, now)


__all__ = ["Fonts", "load_fonts", "draw_frame"]
