"""Node disk renderer."""
from __future__ import annotations

import pygame

from ring_reflex.types import Node
from ring_reflex.ui.constants import (
    HOVER_LINE_W,
    HOVER_OUTLINE,
    NODE_ACTIVE,
    NODE_INACTIVE,
    NODE_LABEL,
)


def node_fill(node: Node) -> pygame.Color:
    """Active nodes are white, resolved ones take their random hue, the rest grey."""
    if node.active:
        return pygame.Color(NODE_ACTIVE)
    if node.resolved and node.hue is not None:
        color = pygame.Color(0, 0, 0)
        color.hsla = (node.hue, 100, 50, 100)
        return color
    return pygame.Color(NODE_INACTIVE)


def draw_nodes(
    surface: pygame.Surface,
    nodes: list[Node],
    font: pygame.font.Font,
    current_target_id: int,
    hovered_index: int | None,
) -> None:
    """Draw every node at its current pose, labelling the already revealed ids."""
    for index, node in enumerate(nodes):
        center = (round(node.x), round(node.y))
        radius = max(1, round(node.radius))
        pygame.draw.circle(surface, node_fill(node), center, radius)

        if node.id <= current_target_id:
            label = font.render(str(node.id), True, NODE_LABEL)
            surface.blit(label, label.get_rect(center=center))

        if index == hovered_index:
            pygame.draw.circle(surface, HOVER_OUTLINE, center, radius, HOVER_LINE_W)
