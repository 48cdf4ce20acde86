"""Tests for GeometryEngine layout, pose, and dilation."""
import math
import random

import pytest

from ring_reflex import DilationFn, GameConfig, GeometryEngine, Node


def make_node(**kwargs) -> Node:
    defaults = dict(id=1, base_angle=0.0, base_radius=30.0, dilation=DilationFn.SINE)
    defaults.update(kwargs)
    return Node(**defaults)


class TestRing:
    def test_center_and_radius(self):
        geo = GeometryEngine()
        ring = geo.ring_for(800, 650)
        assert ring.center_x == 400
        assert ring.center_y == 350
        assert ring.radius == 200

    def test_radius_uses_smaller_side(self):
        geo = GeometryEngine()
        ring = geo.ring_for(300, 1000)
        assert ring.radius == 100

    def test_degenerate_size_gives_zero_radius(self):
        """Height below the header would give a negative radius; it floors at 0."""
        geo = GeometryEngine()
        assert geo.ring_for(0, 0).radius == 0.0
        assert geo.ring_for(800, 20).radius == 0.0


class TestGenerate:
    @pytest.mark.parametrize("count", range(3, 9))
    def test_ids_and_angle_slots(self, count):
        """n nodes, ids 1..n, angles a permutation of evenly spaced slots."""
        geo = GeometryEngine()
        nodes = geo.generate(count, geo.ring_for(800, 650), random.Random(count))

        assert len(nodes) == count
        assert [n.id for n in nodes] == list(range(1, count + 1))
        angles = sorted(n.base_angle for n in nodes)
        assert angles == pytest.approx([k * 360 / count for k in range(count)])

    def test_base_radius_in_range(self):
        geo = GeometryEngine()
        cfg = geo.config
        for seed in range(20):
            for node in geo.generate(8, geo.ring_for(800, 650), random.Random(seed)):
                assert cfg.min_node_radius <= node.base_radius <= cfg.max_node_radius

    def test_both_dilation_functions_appear(self):
        geo = GeometryEngine()
        seen = set()
        for seed in range(20):
            for node in geo.generate(8, geo.ring_for(800, 650), random.Random(seed)):
                seen.add(node.dilation)
        assert seen == {DilationFn.SINE, DilationFn.COSINE}

    def test_same_seed_same_layout(self):
        geo = GeometryEngine()
        ring = geo.ring_for(800, 650)
        a = geo.generate(6, ring, random.Random(7))
        b = geo.generate(6, ring, random.Random(7))
        assert [(n.base_angle, n.base_radius, n.dilation) for n in a] == [
            (n.base_angle, n.base_radius, n.dilation) for n in b
        ]

    def test_generated_nodes_are_posed(self):
        """Nodes come back sitting on the ring at their base angle and radius."""
        geo = GeometryEngine()
        ring = geo.ring_for(800, 650)
        for node in geo.generate(5, ring, random.Random(3)):
            rad = math.radians(node.base_angle)
            assert node.x == pytest.approx(400 + 200 * math.cos(rad))
            assert node.y == pytest.approx(350 + 200 * math.sin(rad))
            assert node.radius == node.base_radius

    def test_no_node_starts_active(self):
        geo = GeometryEngine()
        nodes = geo.generate(4, geo.ring_for(800, 650), random.Random(1))
        assert not any(n.active or n.resolved for n in nodes)


class TestDilation:
    @pytest.mark.parametrize("dilation", [DilationFn.SINE, DilationFn.COSINE])
    @pytest.mark.parametrize("base_radius", [15.0, 20.0, 30.0, 37.5, 45.0])
    def test_continuity_at_time_zero(self, dilation, base_radius):
        """The waveform passes through the base radius at t=0."""
        geo = GeometryEngine()
        node = make_node(
            base_radius=base_radius,
            dilation=dilation,
            phase=geo.phase_shift(dilation, base_radius),
        )
        assert geo.dilated_radius(node, 0.0) == pytest.approx(base_radius, abs=1e-9)

    def test_continuity_for_generated_nodes(self):
        geo = GeometryEngine()
        for seed in range(10):
            for node in geo.generate(8, geo.ring_for(800, 650), random.Random(seed)):
                assert geo.dilated_radius(node, 0.0) == pytest.approx(
                    node.base_radius, abs=1e-9
                )

    def test_stays_within_bounds(self):
        geo = GeometryEngine()
        node = make_node(base_radius=22.0, phase=geo.phase_shift(DilationFn.SINE, 22.0))
        for step in range(100):
            radius = geo.dilated_radius(node, step * 0.05)
            assert 15 <= radius <= 45

    def test_full_period_returns_to_base(self):
        geo = GeometryEngine()
        node = make_node(
            base_radius=40.0,
            dilation=DilationFn.COSINE,
            phase=geo.phase_shift(DilationFn.COSINE, 40.0),
        )
        assert geo.dilated_radius(node, 3.6) == pytest.approx(40.0)

    def test_custom_period(self):
        geo = GeometryEngine(GameConfig(dilation_period=2.0))
        node = make_node(base_radius=30.0, phase=geo.phase_shift(DilationFn.SINE, 30.0))
        # Midpoint start: a quarter period later the sine peaks.
        assert geo.dilated_radius(node, 0.5) == pytest.approx(45.0)


class TestPose:
    def test_rotation(self):
        geo = GeometryEngine()
        ring = geo.ring_for(800, 650)
        node = make_node(base_angle=0.0)
        pose = geo.pose(node, ring, elapsed=2.0, speed=5.0, dilating=False)
        assert pose.x == pytest.approx(400 + 200 * math.cos(math.radians(10)))
        assert pose.y == pytest.approx(350 + 200 * math.sin(math.radians(10)))

    def test_angle_wraps(self):
        geo = GeometryEngine()
        node = make_node(base_angle=350.0)
        assert geo.angle_at(node, elapsed=4.0, speed=5.0) == pytest.approx(10.0)

    def test_no_dilation_uses_base_radius(self):
        geo = GeometryEngine()
        node = make_node(base_radius=21.0, phase=geo.phase_shift(DilationFn.SINE, 21.0))
        pose = geo.pose(node, geo.ring_for(800, 650), elapsed=1.3, speed=5.0, dilating=False)
        assert pose.radius == 21.0

    def test_pose_does_not_mutate_node(self):
        geo = GeometryEngine()
        node = make_node(x=1.0, y=2.0, radius=3.0)
        geo.pose(node, geo.ring_for(800, 650), elapsed=1.0, speed=5.0, dilating=True)
        assert (node.x, node.y, node.radius) == (1.0, 2.0, 3.0)

    def test_apply_poses_is_idempotent(self):
        geo = GeometryEngine()
        ring = geo.ring_for(800, 650)
        nodes = geo.generate(6, ring, random.Random(11))

        geo.apply_poses(nodes, ring, elapsed=1.7, speed=5.0, dilating=True)
        first = [(n.x, n.y, n.radius) for n in nodes]
        geo.apply_poses(nodes, ring, elapsed=1.7, speed=5.0, dilating=True)
        second = [(n.x, n.y, n.radius) for n in nodes]

        assert first == second

    def test_zero_ring_puts_nodes_on_center(self):
        geo = GeometryEngine()
        ring = geo.ring_for(0, 0)
        nodes = geo.generate(3, ring, random.Random(0))
        assert {(n.x, n.y) for n in nodes} == {(ring.center_x, ring.center_y)}
