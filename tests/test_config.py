"""Tests for GameConfig validation and clamping."""
import dataclasses

import pytest

from ring_reflex import GameConfig


class TestGameConfigDefaults:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.header_height == 50
        assert (cfg.min_node_radius, cfg.max_node_radius) == (15, 45)
        assert (cfg.min_node_count, cfg.default_node_count, cfg.max_node_count) == (3, 6, 8)
        assert (cfg.min_rotation_speed, cfg.default_rotation_speed, cfg.max_rotation_speed) == (1, 5, 10)
        assert cfg.dilation_period == 3.6
        assert cfg.tick_interval == 0.1
        assert cfg.hold_threshold_ms == 1000
        assert cfg.move_threshold == 10

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.header_height = 10  # type: ignore[misc]


class TestGameConfigValidation:
    def test_radius_bounds_inverted(self):
        with pytest.raises(ValueError, match="radius"):
            GameConfig(min_node_radius=50, max_node_radius=20)

    def test_zero_min_radius(self):
        with pytest.raises(ValueError):
            GameConfig(min_node_radius=0)

    def test_default_count_out_of_range(self):
        with pytest.raises(ValueError, match="node counts"):
            GameConfig(default_node_count=9)

    def test_default_speed_out_of_range(self):
        with pytest.raises(ValueError, match="rotation speeds"):
            GameConfig(default_rotation_speed=0.5)

    @pytest.mark.parametrize(
        "field", ["dilation_period", "tick_interval", "burst_duration"]
    )
    def test_non_positive_durations(self, field):
        with pytest.raises(ValueError, match=field):
            GameConfig(**{field: 0})

    def test_negative_thresholds(self):
        with pytest.raises(ValueError, match="hold_threshold_ms"):
            GameConfig(hold_threshold_ms=-1)
        with pytest.raises(ValueError, match="move_threshold"):
            GameConfig(move_threshold=-1)


class TestClamping:
    def test_clamp_node_count(self):
        cfg = GameConfig()
        assert cfg.clamp_node_count(1) == 3
        assert cfg.clamp_node_count(5) == 5
        assert cfg.clamp_node_count(20) == 8

    def test_clamp_rotation_speed(self):
        cfg = GameConfig()
        assert cfg.clamp_rotation_speed(0) == 1
        assert cfg.clamp_rotation_speed(7) == 7
        assert cfg.clamp_rotation_speed(11) == 10
