"""
Tests for services.layout -- arc draw instructions.

Tests cover:
- arc_instructions() count, order, spans and track bands
- Consistency: the color picked at a point equals the color of the arc
  drawn under that point
"""

import math
import unittest

from ringpick.core.models import DiscGeometry, GridCell
from ringpick.services.layout import arc_instructions, cell_at, sector_span, track_bounds
from ringpick.services.locator import locate_in
from ringpick.services.palette import resolve_cell

GEOMETRY = DiscGeometry(radius=140.0, color_track_width=20.0, tracks_count=5, sectors_count=24)


def _point(geometry, radius, degrees):
    a = math.radians(degrees)
    return (geometry.radius + radius * math.cos(a),
            geometry.radius + radius * math.sin(a))


class TestArcInstructions(unittest.TestCase):

    def test_one_arc_per_cell(self):
        arcs = arc_instructions(GEOMETRY)
        self.assertEqual(len(arcs), 5 * 24)
        self.assertEqual(len({a.cell for a in arcs}), 5 * 24)

    def test_track_major_order(self):
        arcs = arc_instructions(GEOMETRY)
        self.assertEqual(arcs[0].cell, GridCell(0, 0))
        self.assertEqual(arcs[1].cell, GridCell(1, 0))
        self.assertEqual(arcs[24].cell, GridCell(0, 1))

    def test_sector_span_centered_on_index(self):
        self.assertEqual(sector_span(GEOMETRY, 0), (-7.5, 15.0))
        self.assertEqual(sector_span(GEOMETRY, 6), (82.5, 15.0))

    def test_spans_cover_full_turn(self):
        arcs = [a for a in arc_instructions(GEOMETRY) if a.cell.track == 0]
        self.assertAlmostEqual(sum(a.sweep_angle for a in arcs), 360.0)

    def test_track_bands(self):
        self.assertEqual(track_bounds(GEOMETRY, 0), (130.0, 140.0))
        self.assertEqual(track_bounds(GEOMETRY, 1), (110.0, 130.0))
        self.assertEqual(track_bounds(GEOMETRY, 4), (50.0, 70.0))

    def test_bands_clamped_at_zero(self):
        small = DiscGeometry(30.0, 20.0, 5, 24)
        inner, outer = track_bounds(small, 4)
        self.assertEqual((inner, outer), (0.0, 0.0))

    def test_arc_colors_come_from_resolver(self):
        for arc in arc_instructions(GEOMETRY):
            self.assertEqual(arc.color, resolve_cell(arc.cell, GEOMETRY))

    def test_bounding_box(self):
        arc = arc_instructions(GEOMETRY)[0]
        self.assertEqual(arc.stroke_width, 10.0)
        self.assertEqual(arc.bounding_box(GEOMETRY.radius), (5.0, 5.0, 270.0, 270.0))

    def test_empty_geometry(self):
        self.assertEqual(arc_instructions(DiscGeometry(140.0, 20.0, 0, 24)), [])


class TestPickRenderConsistency(unittest.TestCase):
    """resolve(locate(p)) equals the color of the arc drawn at p."""

    def _check(self, geometry):
        for arc in arc_instructions(geometry):
            # a few points well inside the arc's band and span
            for frac_r in (0.25, 0.5, 0.75):
                r = arc.inner_radius + frac_r * arc.stroke_width
                for frac_a in (0.1, 0.5, 0.9):
                    deg = arc.start_angle + frac_a * arc.sweep_angle
                    x, y = _point(geometry, r, deg)
                    cell = locate_in(geometry, x, y)
                    self.assertEqual(cell.sector % geometry.sectors_count, arc.cell.sector)
                    self.assertEqual(cell.track, arc.cell.track)
                    self.assertEqual(resolve_cell(cell, geometry), arc.color,
                                     f"{arc.cell} at ({x:.2f}, {y:.2f})")

    def test_default_ring(self):
        self._check(GEOMETRY)

    def test_odd_counts(self):
        self._check(DiscGeometry(radius=200.0, color_track_width=17.0,
                                 tracks_count=7, sectors_count=13))

    def test_wraparound_point_picks_sector_zero_color(self):
        x, y = _point(GEOMETRY, 120, -5)
        cell = cell_at(GEOMETRY, x, y)
        self.assertEqual(cell.sector, 24)
        drawn = arc_instructions(GEOMETRY)[24 * cell.track]
        self.assertEqual(drawn.cell, GridCell(0, cell.track))
        self.assertEqual(resolve_cell(cell, GEOMETRY), drawn.color)
