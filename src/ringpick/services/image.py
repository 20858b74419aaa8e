"""Image service: raster rendering of the ring disc, color swatches.

Pure Python (PIL + numpy), no Qt or GUI dependencies.
Pixels are classified with a vectorised copy of the locator evaluated
at pixel centres, then colored from the shared palette, so a pixel's
color is always the color a pointer at that pixel would pick.
"""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Tuple, Union

import numpy as np
from PIL import Image as PILImage

from ..core.models import RGB, DiscGeometry
from .palette import palette

log = logging.getLogger(__name__)

TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)


class ImageService:
    """Stateless raster utilities."""

    @staticmethod
    def disc_size(geometry: DiscGeometry) -> int:
        """Side length in pixels of the square image holding the disc."""
        return max(1, int(math.ceil(2.0 * geometry.radius)))

    @staticmethod
    def cell_maps(geometry: DiscGeometry, size: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Per-pixel (sector, track, inside) arrays for a size x size raster.

        ``sector`` is already folded into 0..sectors_count-1 (the
        inclusive upper sector aliases sector 0). ``inside`` masks pixels
        that belong to a drawn track band.
        """
        radius = geometry.radius
        tracks = geometry.tracks_count
        sectors = geometry.sectors_count
        width = geometry.color_track_width

        coords = np.arange(size, dtype=np.float64) + 0.5
        xs, ys = np.meshgrid(coords, coords)
        dx = xs - radius
        dy = ys - radius

        length = np.sqrt(dx * dx + dy * dy)
        angle = ((np.degrees(np.arctan2(dy, dx)) + 360.0) % 360.0) / 360.0

        offset = radius - width * tracks
        span = radius - offset
        if span > 0:
            depth = np.clip((length - offset) / span, 0.0, 1.0)
        else:
            depth = np.zeros_like(length)

        sector = np.clip(np.floor(sectors * angle + 0.5), 0, sectors).astype(np.int64)
        track = np.clip(np.floor(tracks * (1.0 - depth) + 0.5),
                        0, max(tracks - 1, 0)).astype(np.int64)
        sector %= max(sectors, 1)

        inner_edge = max(0.0, radius - (tracks - 0.5) * width)
        inside = (length <= radius) & (length > inner_edge)
        return sector, track, inside

    @staticmethod
    def render_disc(geometry: DiscGeometry,
                    background: Tuple[int, int, int, int] = TRANSPARENT) -> Any:
        """Render the whole ring to an RGBA PIL Image.

        Pixels outside the disc and inside the innermost band are filled
        with ``background``.
        """
        size = ImageService.disc_size(geometry)
        if geometry.tracks_count <= 0 or geometry.sectors_count <= 0:
            log.debug("Nothing to render for %s", geometry)
            return PILImage.new('RGBA', (size, size), background)

        table = np.array(
            [[c.as_tuple() for c in row]
             for row in palette(geometry.sectors_count, geometry.tracks_count)],
            dtype=np.uint8,
        )
        sector, track, inside = ImageService.cell_maps(geometry, size)

        rgba = np.empty((size, size, 4), dtype=np.uint8)
        rgba[...] = np.array(background, dtype=np.uint8)
        rgba[inside, :3] = table[track[inside], sector[inside]]
        rgba[inside, 3] = 255

        log.debug("Rendered %dx%d disc (%d tracks, %d sectors)",
                  size, size, geometry.tracks_count, geometry.sectors_count)
        return PILImage.fromarray(rgba)

    @staticmethod
    def swatch(color: RGB, w: int = 50, h: int = 30) -> Any:
        """Solid-color preview image of a picked color."""
        return PILImage.new('RGB', (w, h), color.as_tuple())

    @staticmethod
    def save(image: Any, path: Union[str, Path]) -> Path:
        """Write an image, creating parent directories."""
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        image.save(out)
        log.info("Saved %s", out)
        return out
