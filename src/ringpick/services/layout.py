"""Arc layout: draw instructions for one render pass of the ring.

Pure Python, no Qt dependencies. Each instruction covers exactly the
region the locator maps to its cell, so the color under a pointer is
the color the pointer picks:

- sector ``s`` spans [(s - 0.5) * step, (s + 0.5) * step) degrees
- track ``t`` spans radii (R - (t + 0.5) * w, R - (t - 0.5) * w],
  clipped to R on the outside
"""
from __future__ import annotations

import logging
from typing import List

from ..core.models import ArcInstruction, DiscGeometry, GridCell
from .locator import locate_in
from .palette import resolve_color

log = logging.getLogger(__name__)


def track_bounds(geometry: DiscGeometry, track: int) -> tuple[float, float]:
    """(inner_radius, outer_radius) of a track band, clamped at 0."""
    w = geometry.color_track_width
    outer = min(geometry.radius, geometry.radius - (track - 0.5) * w)
    inner = geometry.radius - (track + 0.5) * w
    return max(0.0, inner), max(0.0, outer)


def sector_span(geometry: DiscGeometry, sector: int) -> tuple[float, float]:
    """(start_angle, sweep_angle) in degrees for a sector."""
    step = geometry.sector_sweep
    return (sector - 0.5) * step, step


def arc_instructions(geometry: DiscGeometry) -> List[ArcInstruction]:
    """One instruction per cell, track-major, outer track first."""
    arcs: List[ArcInstruction] = []
    for track in range(geometry.tracks_count):
        inner, outer = track_bounds(geometry, track)
        for sector in range(geometry.sectors_count):
            start, sweep = sector_span(geometry, sector)
            arcs.append(ArcInstruction(
                cell=GridCell(sector, track),
                color=resolve_color(sector, track,
                                    geometry.sectors_count, geometry.tracks_count),
                start_angle=start,
                sweep_angle=sweep,
                inner_radius=inner,
                outer_radius=outer,
            ))
    if geometry.is_degenerate:
        log.debug("Degenerate geometry %s: inner tracks collapse", geometry)
    return arcs


def cell_at(geometry: DiscGeometry, x: float, y: float) -> GridCell:
    """Cell drawn under (x, y); identical to the locator's answer."""
    return locate_in(geometry, x, y)
