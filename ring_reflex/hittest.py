"""Pointer hit-testing against the current node poses. Pure functions."""
from __future__ import annotations

from typing import Sequence

from ring_reflex.types import Node


def point_in_square(
    px: float, py: float, cx: float, cy: float, half: float
) -> bool:
    """Axis-aligned square test, edges inclusive."""
    return abs(px - cx) <= half and abs(py - cy) <= half


def hit_test(nodes: Sequence[Node], x: float, y: float) -> int | None:
    """Index of the first node whose bounding square contains (x, y), else None.

    The square is centred on the node's current position with half-width equal
    to its current animated radius.  Lower indices win on overlap.
    """
    for index, node in enumerate(nodes):
        if point_in_square(x, y, node.x, node.y, node.radius):
            return index
    return None
