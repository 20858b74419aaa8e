"""ringpick core: pure models and the GUI-independent controller."""

from .controllers import SimpleRingController
from .models import (
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

__all__ = [
    'RGB',
    'ArcInstruction',
    'ColorRange',
    'ConfigError',
    'DiscGeometry',
    'GridCell',
    'PointerAction',
    'PointerSample',
    'SimpleRingConfig',
    'SimpleRingController',
]
