"""PySide6 GUI components for ringpick."""

from .uc_simple_ring import UCSimpleRing

__all__ = [
    'UCSimpleRing',
]
