"""
Renderer module - drives the per-pixel loop.

Implements:
- Sequential rendering, row by row
- Multi-threaded rendering over contiguous row bands

Each band writes only its own rows of the canvas and shading never
mutates the world or camera, so bands need no locking and the output
does not depend on the order in which they finish.
"""

from __future__ import annotations
import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .camera import Camera
from .canvas import Canvas
from .constants import DEFAULT_MAX_DEPTH
from .world import World

logger = logging.getLogger(__name__)

Band = Tuple[int, int]


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    max_depth: int = DEFAULT_MAX_DEPTH
    num_threads: int = 0  # 0 = auto-detect
    band_height: int = 16

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.band_height < 1:
            raise ValueError(f"band_height must be >= 1, got {self.band_height}")
        if self.num_threads < 0:
            raise ValueError(f"num_threads must be >= 0, got {self.num_threads}")
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


class Renderer:
    """Ray tracing renderer with row-band multi-threading."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, camera: Camera, world: World) -> Canvas:
        """Render every pixel on the calling thread.

        Args:
            camera: The camera to render from
            world: The scene to render

        Returns:
            Canvas of camera.hsize x camera.vsize pixels
        """
        canvas = Canvas(camera.hsize, camera.vsize)
        bands = self._generate_bands(camera.vsize)

        logger.info("Rendering %dx%d sequentially", camera.hsize, camera.vsize)
        start = time.perf_counter()

        for done, band in enumerate(bands, start=1):
            self._render_band(band, camera, world, canvas)
            self._report_progress(done, len(bands))

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return canvas

    def render_parallel(self, camera: Camera, world: World) -> Canvas:
        """Render row bands concurrently; output matches `render`.

        Args:
            camera: The camera to render from
            world: The scene to render

        Returns:
            Canvas of camera.hsize x camera.vsize pixels
        """
        canvas = Canvas(camera.hsize, camera.vsize)
        bands = self._generate_bands(camera.vsize)
        workers = min(self.settings.num_threads, len(bands))

        logger.info(
            "Rendering %dx%d in %d bands on %d threads",
            camera.hsize, camera.vsize, len(bands), workers,
        )
        start = time.perf_counter()

        def render_band(band: Band) -> Band:
            self._render_band(band, camera, world, canvas)
            return band

        with ThreadPoolExecutor(max_workers=workers) as executor:
            # Results come back on this thread, so progress needs no lock.
            for done, band in enumerate(executor.map(render_band, bands), start=1):
                logger.debug("Band rows %d-%d done", band[0], band[1] - 1)
                self._report_progress(done, len(bands))

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return canvas

    def _render_band(self, band: Band, camera: Camera, world: World, canvas: Canvas) -> None:
        """Shade rows [y0, y1) into the canvas."""
        y0, y1 = band
        max_depth = self.settings.max_depth
        for y in range(y0, y1):
            for x in range(camera.hsize):
                ray = camera.ray_for_pixel(x, y)
                canvas.write_pixel(x, y, world.color_at(ray, max_depth))

    def _generate_bands(self, height: int) -> List[Band]:
        """Split the rows into contiguous, non-overlapping [y0, y1) bands."""
        band_height = self.settings.band_height
        return [(y, min(y + band_height, height)) for y in range(0, height, band_height)]

    def _report_progress(self, done: int, total: int) -> None:
        if self._progress_callback:
            self._progress_callback(done / total)


def render(camera: Camera, world: World, max_depth: int = DEFAULT_MAX_DEPTH) -> Canvas:
    """Convenience function for a sequential render."""
    return Renderer(RenderSettings(max_depth=max_depth)).render(camera, world)


def render_parallel(camera: Camera, world: World, max_depth: int = DEFAULT_MAX_DEPTH,
                    num_threads: int = 0) -> Canvas:
    """Convenience function for a row-parallel render."""
    settings = RenderSettings(max_depth=max_depth, num_threads=num_threads)
    return Renderer(settings).render_parallel(camera, world)
