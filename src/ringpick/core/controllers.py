"""
ringpick Controllers - Coordinate models and services for views.

Controllers are GUI-framework independent. They:
1. Own the current geometry and last picked color
2. Provide methods that views call for user actions
3. Emit callbacks that views subscribe to for updates
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..services.layout import arc_instructions
from ..services.locator import locate_in
from ..services.palette import resolve_cell
from .models import (
    RGB,
    ArcInstruction,
    DiscGeometry,
    GridCell,
    PointerAction,
    PointerSample,
    SimpleRingConfig,
)

log = logging.getLogger(__name__)


class SimpleRingController:
    """Controller for the segmented ring picker.

    Geometry is recomputed on resize and cached as an immutable value;
    every pointer DOWN/MOVE is located and resolved against it and
    reported through ``on_picked_color`` exactly once.
    """

    def __init__(self, config: Optional[SimpleRingConfig] = None):
        self.config = (config or SimpleRingConfig()).validate()
        self.geometry: Optional[DiscGeometry] = None
        self.picked_cell: Optional[GridCell] = None
        self.picked_color: Optional[RGB] = None

        # View callbacks
        self.on_picked_color: Optional[Callable[[RGB], None]] = None
        self.on_geometry_changed: Optional[Callable[[DiscGeometry], None]] = None

    def resize(self, width: float, height: float) -> DiscGeometry:
        """Recompute geometry for a new control size."""
        geometry = self.config.geometry(width, height)
        if geometry != self.geometry:
            self.geometry = geometry
            log.debug("Geometry changed: %s", geometry)
            if geometry.is_degenerate:
                log.warning("Ring of %.1fpx does not fit radius %.1f",
                            self.config.ring_width, geometry.radius)
            if self.on_geometry_changed:
                self.on_geometry_changed(geometry)
        return self.geometry

    def handle_pointer(self, action: PointerAction, x: float, y: float) -> Optional[RGB]:
        """Process one pointer event. Returns the picked color, if any."""
        if not action.picks:
            return None
        if self.geometry is None:
            log.debug("Pointer %s before first resize, ignored", action.name)
            return None

        cell = locate_in(self.geometry, x, y)
        color = resolve_cell(cell, self.geometry)
        self.picked_cell = cell
        self.picked_color = color
        log.debug("Pointer %s at (%.1f, %.1f) -> %s #%s",
                  action.name, x, y, cell, color.to_hex())

        if self.on_picked_color:
            self.on_picked_color(color)
        return color

    def handle_sample(self, sample: PointerSample) -> Optional[RGB]:
        return self.handle_pointer(sample.action, sample.x, sample.y)

    def arcs(self) -> List[ArcInstruction]:
        """Draw instructions for the current geometry (empty before resize)."""
        if self.geometry is None:
            return []
        return arc_instructions(self.geometry)
