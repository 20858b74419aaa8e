"""Polar locator: pointer coordinate to (sector, track) cell.

Pure Python, no Qt dependencies. The disc center is at
(radius, radius): the control is a square circumscribing the disc.
Angles grow clockwise on screen because y points down.
"""
from __future__ import annotations

import math

from ..core.models import DiscGeometry, GridCell
from .palette import round_half_up


def _clamp(value, low, high):
    return max(low, min(high, value))


def distance_from_center(x: float, y: float, radius: float) -> float:
    """Euclidean distance from (x, y) to the disc center."""
    dx = x - radius
    dy = y - radius
    return math.sqrt(dx * dx + dy * dy)


def angle_progress(x: float, y: float, radius: float) -> float:
    """Angle of (x, y) around the center as a fraction in [0, 1).

    0 is the +x axis; argument order matches atan2(dy, dx).
    """
    degrees = math.degrees(math.atan2(y - radius, x - radius))
    return ((degrees + 360.0) % 360.0) / 360.0


def track_progress(length: float, radius: float, tracks_count: int,
                   color_track_width: float) -> float:
    """Radial position in [0, 1]: 1 at the outer edge, 0 at the inner edge.

    Zero total track width has no inner edge; treat it as the inner edge.
    """
    offset = radius - color_track_width * tracks_count
    span = radius - offset
    if span <= 0:
        return 0.0
    return _clamp((length - offset) / span, 0.0, 1.0)


def locate(x: float, y: float, radius: float, tracks_count: int,
           sectors_count: int, color_track_width: float) -> GridCell:
    """Map a pointer sample to the grid cell under it.

    Never raises: every result is clamped. The sector bound is inclusive
    of ``sectors_count`` (clamped, not wrapped).
    """
    length = distance_from_center(x, y, radius)
    depth = track_progress(length, radius, tracks_count, color_track_width)
    angle = angle_progress(x, y, radius)

    if sectors_count > 0:
        sector = _clamp(round_half_up(sectors_count * angle), 0, sectors_count)
    else:
        sector = 0
    track = _clamp(round_half_up(tracks_count * (1.0 - depth)),
                   0, max(tracks_count - 1, 0))
    return GridCell(sector=sector, track=track)


def locate_in(geometry: DiscGeometry, x: float, y: float) -> GridCell:
    """locate() using a DiscGeometry value."""
    return locate(x, y, geometry.radius, geometry.tracks_count,
                  geometry.sectors_count, geometry.color_track_width)
