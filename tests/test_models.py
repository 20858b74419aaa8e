"""
Tests for core.models -- pure dataclasses and enums.

Tests cover:
- RGB hex formatting and parsing
- DiscGeometry derivation from control size, offset, degeneracy
- ArcInstruction derived values
- SimpleRingConfig defaults and validation
- PointerAction filtering
"""

import unittest
from dataclasses import FrozenInstanceError

from ringpick.core.models import (
    RGB,
    ArcInstruction,
    ConfigError,
    DiscGeometry,
    GridCell,
    PointerAction,
    PointerSample,
    SimpleRingConfig,
)


class TestRGB(unittest.TestCase):

    def test_to_hex(self):
        self.assertEqual(RGB(255, 0, 0).to_hex(), 'FF0000')
        self.assertEqual(RGB(0, 153, 10).to_hex(), '00990A')

    def test_from_hex(self):
        self.assertEqual(RGB.from_hex('8000ff'), RGB(128, 0, 255))
        self.assertEqual(RGB.from_hex('#00990A'), RGB(0, 153, 10))

    def test_from_hex_invalid(self):
        for bad in ('', 'fff', 'zzzzzz', '#1234567'):
            with self.assertRaises(ValueError):
                RGB.from_hex(bad)

    def test_frozen(self):
        with self.assertRaises(FrozenInstanceError):
            RGB(1, 2, 3).r = 4

    def test_as_tuple(self):
        self.assertEqual(RGB(1, 2, 3).as_tuple(), (1, 2, 3))


class TestDiscGeometry(unittest.TestCase):

    def test_from_size(self):
        g = DiscGeometry.from_size(280, 280, 20.0, 5, 24)
        self.assertEqual(g, DiscGeometry(140.0, 20.0, 5, 24))

    def test_width_is_authoritative(self):
        g = DiscGeometry.from_size(200, 300, 20.0, 5, 24)
        self.assertEqual(g.radius, 100.0)

    def test_negative_size_clamped(self):
        self.assertEqual(DiscGeometry.from_size(-10, -10, 20.0, 5, 24).radius, 0.0)

    def test_offset(self):
        self.assertEqual(DiscGeometry(140.0, 20.0, 5, 24).offset, 40.0)

    def test_degenerate(self):
        self.assertFalse(DiscGeometry(140.0, 20.0, 5, 24).is_degenerate)
        self.assertTrue(DiscGeometry(100.0, 20.0, 5, 24).is_degenerate)

    def test_sector_sweep(self):
        self.assertEqual(DiscGeometry(140.0, 20.0, 5, 24).sector_sweep, 15.0)
        self.assertEqual(DiscGeometry(140.0, 20.0, 5, 0).sector_sweep, 360.0)

    def test_cell_count(self):
        self.assertEqual(DiscGeometry(140.0, 20.0, 5, 24).cell_count, 120)
        self.assertEqual(DiscGeometry(140.0, 20.0, -1, 24).cell_count, 0)

    def test_hashable(self):
        self.assertEqual(len({DiscGeometry(1, 1, 1, 1), DiscGeometry(1, 1, 1, 1)}), 1)


class TestArcInstruction(unittest.TestCase):

    def test_derived_values(self):
        arc = ArcInstruction(GridCell(0, 1), RGB(0, 0, 0), -7.5, 15.0, 110.0, 130.0)
        self.assertEqual(arc.stroke_width, 20.0)
        self.assertEqual(arc.center_radius, 120.0)
        self.assertEqual(arc.bounding_box(140.0), (20.0, 20.0, 240.0, 240.0))


class TestSimpleRingConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = SimpleRingConfig()
        self.assertEqual(cfg.color_track_width, 20.0)
        self.assertEqual(cfg.tracks_count, 5)
        self.assertEqual(cfg.sectors_count, 24)
        self.assertEqual(cfg.ring_width, 100.0)

    def test_validate_returns_self(self):
        cfg = SimpleRingConfig()
        self.assertIs(cfg.validate(), cfg)

    def test_validate_rejects(self):
        for kwargs in ({'tracks_count': 0}, {'sectors_count': -1},
                       {'color_track_width': 0.0}):
            with self.assertRaises(ConfigError):
                SimpleRingConfig(**kwargs).validate()

    def test_config_error_is_value_error(self):
        self.assertTrue(issubclass(ConfigError, ValueError))

    def test_geometry(self):
        g = SimpleRingConfig(10.0, 3, 12).geometry(100, 100)
        self.assertEqual(g, DiscGeometry(50.0, 10.0, 3, 12))


class TestPointer(unittest.TestCase):

    def test_picks(self):
        self.assertTrue(PointerAction.DOWN.picks)
        self.assertTrue(PointerAction.MOVE.picks)
        self.assertFalse(PointerAction.UP.picks)
        self.assertFalse(PointerAction.CANCEL.picks)

    def test_sample_default_action(self):
        self.assertEqual(PointerSample(1.0, 2.0).action, PointerAction.DOWN)
