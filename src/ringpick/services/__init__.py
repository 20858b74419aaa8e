"""ringpick Services: Core hexagon (pure Python, no Qt/CLI).

Geometry and color logic shared by all driving adapters:
- core/controllers.py (pointer events, view callbacks)
- qt_components (PySide6 widget)
- cli.py (argparse CLI)
"""

from .image import ImageService
from .layout import arc_instructions, cell_at
from .locator import locate, locate_in
from .palette import palette, range_progress, resolve_cell, resolve_color

__all__ = [
    'ImageService',
    'arc_instructions',
    'cell_at',
    'locate',
    'locate_in',
    'palette',
    'range_progress',
    'resolve_cell',
    'resolve_color',
]
