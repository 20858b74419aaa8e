"""Hue/shade resolver: (sector, track) cell to RGB.

Pure Python, no Qt dependencies. Shared by the pointer path
(controllers), the arc layout and the raster renderer so that the
picked color and the drawn color always come from the same function.
"""
from __future__ import annotations

import logging
import math
from typing import List, Tuple

from ..core.models import RGB, ColorRange, DiscGeometry, GridCell

log = logging.getLogger(__name__)

# Upper bounds of the first five hue segments; anything else is PURPLE_TO_RED.
_RANGE_BOUNDS: Tuple[Tuple[float, ColorRange], ...] = (
    (1 / 6, ColorRange.RED_TO_YELLOW),
    (2 / 6, ColorRange.YELLOW_TO_GREEN),
    (3 / 6, ColorRange.GREEN_TO_CYAN),
    (4 / 6, ColorRange.CYAN_TO_BLUE),
    (5 / 6, ColorRange.BLUE_TO_PURPLE),
)

# Darkening at the innermost depth (depth_progress == 1).
MAX_DARKNESS = 0.5


def round_half_up(value: float) -> int:
    """Round to nearest integer, ties away from -inf (0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def range_progress(progress: float) -> Tuple[float, ColorRange]:
    """Split an angular progress into (progress within segment, segment).

    Six equal segments of width 1/6. Progress 1.0 falls into
    PURPLE_TO_RED with an in-segment progress of 1.0.
    """
    for index, (bound, color_range) in enumerate(_RANGE_BOUNDS):
        if progress < bound:
            return progress * 6 - index, color_range
    return progress * 6 - 5, ColorRange.PURPLE_TO_RED


def darken(channel: int, darkness: float) -> int:
    """Linear fade toward black: round(c - c * darkness)."""
    return round_half_up(channel - channel * darkness)


def resolve_color(sector: int, track: int, sectors_count: int, tracks_count: int) -> RGB:
    """Color of the cell at (sector, track).

    Sector picks the hue around the wheel, track picks the depth: track 0
    is the outer, full-brightness ring and deeper tracks fade toward 50%.
    Non-positive counts resolve as progress 0 on that axis.
    """
    angle = sector / sectors_count if sectors_count > 0 else 0.0
    depth = _clamp(track / tracks_count, 0.0, 1.0) if tracks_count > 0 else 0.0

    p, color_range = range_progress(angle)
    darkness = MAX_DARKNESS * depth
    r, g, b = (
        int(_clamp(darken(round_half_up(c), darkness), 0, 255))
        for c in color_range.channels(p)
    )
    return RGB(r, g, b)


def resolve_cell(cell: GridCell, geometry: DiscGeometry) -> RGB:
    """resolve_color() for a located cell on the given disc."""
    return resolve_color(cell.sector, cell.track,
                         geometry.sectors_count, geometry.tracks_count)


def palette(sectors_count: int, tracks_count: int) -> List[List[RGB]]:
    """Full color table, one row per track, one column per sector.

    Covers sectors 0..sectors_count-1; sector ``sectors_count`` aliases
    column 0.
    """
    table = [
        [resolve_color(s, t, sectors_count, tracks_count) for s in range(sectors_count)]
        for t in range(tracks_count)
    ]
    log.debug("Built palette %dx%d", tracks_count, sectors_count)
    return table
