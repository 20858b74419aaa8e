"""
ringpick Models - Pure data classes with no GUI dependencies.

These models can be used by any GUI framework (PySide6, a raster
renderer, the CLI, etc.)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# =============================================================================
# Errors
# =============================================================================


class ConfigError(ValueError):
    """Invalid picker configuration (non-positive counts or width)."""


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True)
class RGB:
    """8-bit color value reported to callers and drawn by renderers."""
    r: int
    g: int
    b: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Upper-case 'RRGGBB' without a leading '#'."""
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"

    @classmethod
    def from_hex(cls, text: str) -> 'RGB':
        """Parse 'RRGGBB' or '#RRGGBB'. Raises ValueError on bad input."""
        value = text.strip().lstrip('#')
        if len(value) != 6:
            raise ValueError(f"Invalid hex color: {text!r}")
        try:
            return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
        except ValueError:
            raise ValueError(f"Invalid hex color: {text!r}") from None


class ColorRange(Enum):
    """Six hue segments of the ring, in wheel order starting at red.

    Each member owns the channel formula for its segment. ``p`` is the
    progress inside the segment, 0.0 at its start and 1.0 at its end.
    """
    RED_TO_YELLOW = 0
    YELLOW_TO_GREEN = 1
    GREEN_TO_CYAN = 2
    CYAN_TO_BLUE = 3
    BLUE_TO_PURPLE = 4
    PURPLE_TO_RED = 5

    def channels(self, p: float) -> Tuple[float, float, float]:
        """Unrounded (r, g, b) for progress ``p`` within this segment."""
        up = 255.0 * p
        down = 255.0 * (1.0 - p)
        if self is ColorRange.RED_TO_YELLOW:
            return (255.0, up, 0.0)
        if self is ColorRange.YELLOW_TO_GREEN:
            return (down, 255.0, 0.0)
        if self is ColorRange.GREEN_TO_CYAN:
            return (0.0, 255.0, up)
        if self is ColorRange.CYAN_TO_BLUE:
            return (0.0, down, 255.0)
        if self is ColorRange.BLUE_TO_PURPLE:
            return (up, 0.0, 255.0)
        if self is ColorRange.PURPLE_TO_RED:
            return (255.0, 0.0, down)
        raise AssertionError(f"unhandled color range: {self!r}")


# =============================================================================
# Geometry
# =============================================================================


@dataclass(frozen=True)
class DiscGeometry:
    """Immutable per-render configuration of the ring disc.

    The control's bounding box is a square circumscribing the disc, so
    the center sits at (radius, radius) in local coordinates. Recompute
    on every resize; never mutate.
    """
    radius: float
    color_track_width: float
    tracks_count: int
    sectors_count: int

    @classmethod
    def from_size(cls, width: float, height: float, color_track_width: float,
                  tracks_count: int, sectors_count: int) -> 'DiscGeometry':
        """Derive geometry from the control's pixel size.

        Width is authoritative; ``height`` is accepted so callers can pass
        a size pair straight from a resize event.
        """
        return cls(
            radius=max(0.0, width / 2.0),
            color_track_width=color_track_width,
            tracks_count=tracks_count,
            sectors_count=sectors_count,
        )

    @property
    def offset(self) -> float:
        """Radius at which the innermost track ends."""
        return self.radius - self.color_track_width * self.tracks_count

    @property
    def is_degenerate(self) -> bool:
        """Tracks do not fit inside the radius; output is clamped."""
        return self.radius <= self.color_track_width * self.tracks_count

    @property
    def sector_sweep(self) -> float:
        """Angular width of one sector in degrees."""
        if self.sectors_count <= 0:
            return 360.0
        return 360.0 / self.sectors_count

    @property
    def cell_count(self) -> int:
        return max(0, self.tracks_count) * max(0, self.sectors_count)


@dataclass(frozen=True)
class GridCell:
    """Discrete (sector, track) position on the disc.

    ``sector`` may equal ``sectors_count`` when derived from a pointer
    just below the +x axis; its hue equals sector 0.
    """
    sector: int
    track: int


# =============================================================================
# Pointer input
# =============================================================================


class PointerAction(Enum):
    """Low-level pointer event types. Only DOWN and MOVE pick a color."""
    DOWN = 0
    MOVE = 1
    UP = 2
    CANCEL = 3

    @property
    def picks(self) -> bool:
        return self in (PointerAction.DOWN, PointerAction.MOVE)


@dataclass(frozen=True)
class PointerSample:
    """One pointer coordinate in the control's local space."""
    x: float
    y: float
    action: PointerAction = PointerAction.DOWN


# =============================================================================
# Rendering
# =============================================================================


@dataclass(frozen=True)
class ArcInstruction:
    """One colored cell of a render pass.

    Angles are degrees measured clockwise (screen coordinates, y down)
    from the +x axis, the same orientation the locator uses.
    """
    cell: GridCell
    color: RGB
    start_angle: float
    sweep_angle: float
    inner_radius: float
    outer_radius: float

    @property
    def stroke_width(self) -> float:
        return self.outer_radius - self.inner_radius

    @property
    def center_radius(self) -> float:
        """Radius of the stroke's center line."""
        return (self.outer_radius + self.inner_radius) / 2.0

    def bounding_box(self, radius: float) -> Tuple[float, float, float, float]:
        """(left, top, width, height) of the stroke-center circle.

        ``radius`` is the disc radius, i.e. the center coordinate.
        """
        r = self.center_radius
        return (radius - r, radius - r, 2.0 * r, 2.0 * r)


# =============================================================================
# Picker configuration
# =============================================================================


@dataclass
class SimpleRingConfig:
    """Settings of the segmented ring picker.

    Defaults: 20px tracks, 5 tracks, 24 sectors.
    """
    color_track_width: float = 20.0
    tracks_count: int = 5
    sectors_count: int = 24

    def validate(self) -> 'SimpleRingConfig':
        """Raise ConfigError for unusable values, else return self."""
        if self.tracks_count <= 0:
            raise ConfigError(f"tracks_count must be positive, got {self.tracks_count}")
        if self.sectors_count <= 0:
            raise ConfigError(f"sectors_count must be positive, got {self.sectors_count}")
        if self.color_track_width <= 0:
            raise ConfigError(
                f"color_track_width must be positive, got {self.color_track_width}")
        return self

    @property
    def ring_width(self) -> float:
        """Total radial width of all tracks."""
        return self.color_track_width * self.tracks_count

    def geometry(self, width: float, height: float) -> DiscGeometry:
        return DiscGeometry.from_size(
            width, height,
            self.color_track_width, self.tracks_count, self.sectors_count,
        )
