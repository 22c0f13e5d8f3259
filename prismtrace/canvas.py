"""
Pixel buffer and image output.

The canvas stores 8-bit RGB in row-major order (height, width, 3), the
layout expected by PPM and by PIL. Colors are converted on write by
rounding 255 * c and clamping to 0-255.
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Union
import logging

import numpy as np

from .color import Color
from .errors import PixelOutOfBoundsError

logger = logging.getLogger(__name__)

PPM_VALUES_PER_LINE = 15


class Canvas:
    """A width x height grid of 8-bit RGB pixels, initially black."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelOutOfBoundsError(
                f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas"
            )

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Store a color at column x, row y."""
        self._check_bounds(x, y)
        self.pixels[y, x] = color.to_rgb8()

    def pixel_at(self, x: int, y: int) -> Color:
        """Read back a pixel as a 0-1 color."""
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return Color(r / 255.0, g / 255.0, b / 255.0)

    def to_bytes(self) -> bytes:
        """Row-major RGB bytes, 3 per pixel."""
        return self.pixels.tobytes()

    def to_ppm(self) -> str:
        """Encode as plain-text PPM (P3)."""
        lines: List[str] = ['P3', f'{self.width} {self.height}', '255']
        values = [str(v) for v in self.pixels.reshape(-1)]
        for start in range(0, len(values), PPM_VALUES_PER_LINE):
            lines.append(' '.join(values[start:start + PPM_VALUES_PER_LINE]))
        return '\n'.join(lines) + '\n'

    def save(self, filename: Union[str, Path]) -> None:
        """Save image to file.

        Args:
            filename: Output filename; .ppm is written as plain-text PPM,
                any other extension is handed to PIL
        """
        path = Path(filename)
        if path.suffix.lower() == '.ppm':
            path.write_text(self.to_ppm())
        else:
            from PIL import Image as PILImage

            PILImage.fromarray(self.pixels).save(path)
        logger.info("Saved %dx%d image to %s", self.width, self.height, path)

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"
