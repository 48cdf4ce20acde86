"""Ring layout and per-frame node pose."""
from __future__ import annotations

import logging
import math
import random
from typing import Iterable

from ring_reflex.config import GameConfig
from ring_reflex.types import DilationFn, Node, Pose, Ring

logger = logging.getLogger(__name__)


class GeometryEngine:
    """Computes where nodes sit on the ring and how large they are.

    Nothing here owns nodes.  ``generate`` builds a fresh list; the other
    methods only read the fixed fields of the nodes they are handed and, in
    ``apply_poses``, write the derived ``x``/``y``/``radius`` fields.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig()
        cfg = self._config
        self._amplitude = (cfg.max_node_radius - cfg.min_node_radius) / 2
        self._vshift = (cfg.min_node_radius + cfg.max_node_radius) / 2
        self._omega = 2 * math.pi / cfg.dilation_period

    @property
    def config(self) -> GameConfig:
        return self._config

    def ring_for(self, width: float, height: float) -> Ring:
        header = self._config.header_height
        radius = max(0.0, min(width, height - header) / 3)
        return Ring(center_x=width / 2, center_y=(height + header) / 2, radius=radius)

    def phase_shift(self, dilation: DilationFn, base_radius: float) -> float:
        """Time offset that makes the waveform pass through ``base_radius`` at t=0."""
        ratio = (base_radius - self._vshift) / self._amplitude
        ratio = max(-1.0, min(1.0, ratio))
        if dilation is DilationFn.SINE:
            return -math.asin(ratio) / self._omega
        return -math.acos(ratio) / self._omega

    def generate(self, count: int, ring: Ring, rng: random.Random) -> list[Node]:
        """Build ``count`` nodes with ids 1..count on shuffled ring slots."""
        cfg = self._config
        step = 360 / count
        slots = list(range(count))
        rng.shuffle(slots)

        nodes = []
        for index, slot in enumerate(slots):
            base_radius = rng.uniform(cfg.min_node_radius, cfg.max_node_radius)
            dilation = rng.choice((DilationFn.SINE, DilationFn.COSINE))
            node = Node(
                id=index + 1,
                base_angle=slot * step,
                base_radius=base_radius,
                dilation=dilation,
                phase=self.phase_shift(dilation, base_radius),
            )
            nodes.append(node)

        self.apply_poses(nodes, ring, elapsed=0.0, speed=0.0, dilating=False)
        logger.debug("generated %d nodes on ring r=%.1f", count, ring.radius)
        return nodes

    def angle_at(self, node: Node, elapsed: float, speed: float) -> float:
        return (node.base_angle + elapsed * speed) % 360

    def dilated_radius(self, node: Node, elapsed: float) -> float:
        cfg = self._config
        arg = self._omega * (elapsed - node.phase)
        wave = math.sin(arg) if node.dilation is DilationFn.SINE else math.cos(arg)
        radius = self._amplitude * wave + self._vshift
        return max(cfg.min_node_radius, min(cfg.max_node_radius, radius))

    def pose(
        self, node: Node, ring: Ring, elapsed: float, speed: float, dilating: bool
    ) -> Pose:
        rad = math.radians(self.angle_at(node, elapsed, speed))
        radius = self.dilated_radius(node, elapsed) if dilating else node.base_radius
        return Pose(
            x=ring.center_x + ring.radius * math.cos(rad),
            y=ring.center_y + ring.radius * math.sin(rad),
            radius=radius,
        )

    def apply_poses(
        self,
        nodes: Iterable[Node],
        ring: Ring,
        elapsed: float,
        speed: float,
        dilating: bool,
    ) -> None:
        """Write each node's derived pose. Same inputs, same result."""
        for node in nodes:
            pose = self.pose(node, ring, elapsed, speed, dilating)
            node.x = pose.x
            node.y = pose.y
            node.radius = pose.radius
