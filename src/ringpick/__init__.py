"""
ringpick - Segmented ring color picker

Geometry and color core for a ring of concentric tracks split into
sectors: a pointer inside the disc picks the color of the cell under
it, and renderers draw every cell with the same resolver.

Usage:
    # As a library
    from ringpick import DiscGeometry, locate_in, resolve_cell
    geometry = DiscGeometry(radius=140, color_track_width=20,
                            tracks_count=5, sectors_count=24)
    color = resolve_cell(locate_in(geometry, 140, 0), geometry)

    # Command line
    ringpick pick 140 0     # Color under a pointer
    ringpick render out.png # Render the disc
    ringpick gui            # Open the picker window
"""

from ringpick.__version__ import __version__

# Core exports
from ringpick.core.controllers import SimpleRingController
from ringpick.core.models import (
    RGB,
    ArcInstruction,
    ColorRange,
    ConfigError,
    DiscGeometry,
    GridCell,
    PointerAction,
    PointerSample,
    SimpleRingConfig,
)
from ringpick.services.image import ImageService
from ringpick.services.layout import arc_instructions
from ringpick.services.locator import locate, locate_in
from ringpick.services.palette import palette, resolve_cell, resolve_color

__all__ = [
    # Version
    "__version__",
    # Models
    "RGB",
    "ArcInstruction",
    "ColorRange",
    "ConfigError",
    "DiscGeometry",
    "GridCell",
    "PointerAction",
    "PointerSample",
    "SimpleRingConfig",
    # Controller
    "SimpleRingController",
    # Services
    "ImageService",
    "arc_instructions",
    "locate",
    "locate_in",
    "palette",
    "resolve_cell",
    "resolve_color",
]
