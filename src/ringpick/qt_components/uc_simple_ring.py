"""
Segmented ring color picker widget.

Paints ``tracks x sectors`` colored arcs with QPainter. Click/drag on
the disc picks the color of the cell under the pointer and emits
``color_picked``. A white circle marks the picked cell.

All geometry and color math lives in the controller and services; the
widget only translates Qt events and paints arc instructions.
"""

from __future__ import annotations

import math
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QPainter, QPen
from PySide6.QtWidgets import QWidget

from ..core.controllers import SimpleRingController
from ..core.models import RGB, PointerAction, SimpleRingConfig
from ..services.layout import sector_span, track_bounds


class UCSimpleRing(QWidget):
    """Ring of discrete color cells with click/drag selection.

    Attributes:
        color_picked: Emitted with (R, G, B) for every press/drag sample.
    """

    color_picked = Signal(int, int, int)

    DEFAULT_SIZE = 280
    SELECTOR_RADIUS = 6

    def __init__(self, config: Optional[SimpleRingConfig] = None, parent=None):
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setMinimumSize(self.DEFAULT_SIZE, self.DEFAULT_SIZE)
        self._dragging = False

        self.controller = SimpleRingController(config)
        self.controller.on_picked_color = self._on_picked_color
        self.resize(self.DEFAULT_SIZE, self.DEFAULT_SIZE)
        self.controller.resize(self.DEFAULT_SIZE, self.DEFAULT_SIZE)

    # ----------------------------------------------------------------
    # Public API
    # ----------------------------------------------------------------

    @property
    def picked_color(self) -> Optional[RGB]:
        return self.controller.picked_color

    # ----------------------------------------------------------------
    # Painting
    # ----------------------------------------------------------------

    def resizeEvent(self, event):
        size = event.size()
        self.controller.resize(size.width(), size.height())
        super().resizeEvent(event)

    def paintEvent(self, event):
        geometry = self.controller.geometry
        if geometry is None:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # Qt arcs run counter-clockwise in 1/16 degree; the layout is clockwise
        for arc in self.controller.arcs():
            left, top, w, h = arc.bounding_box(geometry.radius)
            pen = QPen(QColor(*arc.color.as_tuple()), arc.stroke_width)
            pen.setCapStyle(Qt.PenCapStyle.FlatCap)
            painter.setPen(pen)
            painter.drawArc(
                QRectF(left, top, w, h),
                int(round(-arc.start_angle * 16)),
                int(round(-arc.sweep_angle * 16)),
            )

        cell = self.controller.picked_cell
        if cell is not None:
            inner, outer = track_bounds(geometry, cell.track)
            start, sweep = sector_span(geometry, cell.sector)
            angle = math.radians(start + sweep / 2.0)
            mid_r = (inner + outer) / 2.0
            sx = geometry.radius + mid_r * math.cos(angle)
            sy = geometry.radius + mid_r * math.sin(angle)

            painter.setPen(QPen(QColor(255, 255, 255), 2))
            painter.setBrush(QBrush(QColor(*self.controller.picked_color.as_tuple())))
            painter.drawEllipse(QPointF(sx, sy), self.SELECTOR_RADIUS, self.SELECTOR_RADIUS)

        painter.end()

    # ----------------------------------------------------------------
    # Mouse interaction
    # ----------------------------------------------------------------

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = True
            pos = event.position()
            self.controller.handle_pointer(PointerAction.DOWN, pos.x(), pos.y())

    def mouseMoveEvent(self, event):
        if self._dragging:
            pos = event.position()
            self.controller.handle_pointer(PointerAction.MOVE, pos.x(), pos.y())

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = False
            pos = event.position()
            self.controller.handle_pointer(PointerAction.UP, pos.x(), pos.y())

    def _on_picked_color(self, color: RGB) -> None:
        self.update()
        self.color_picked.emit(color.r, color.g, color.b)
