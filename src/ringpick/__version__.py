"""ringpick version information."""

__version__ = "1.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 1.0.0 - Initial release: polar locator, hue/shade resolver, PySide6 ring widget
# 1.1.0 - Arc layout derived from the locator partition (drawn cell == picked
#         cell), numpy raster renderer, config persistence, CLI
