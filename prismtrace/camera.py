"""
Camera module for generating primary rays.

The camera sits at the origin of its own space looking down -z at a
canvas one unit away. Its transform maps world space into camera space
(see `transforms.view_transform`).
"""

from __future__ import annotations
import math
from typing import Optional

from .matrix import Matrix, identity
from .ray import Ray
from .vec3 import point


class Camera:
    """A pinhole camera with a given canvas size and field of view."""

    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Optional[Matrix] = None):
        """Create a camera.

        Args:
            hsize: Horizontal size of the canvas in pixels
            vsize: Vertical size of the canvas in pixels
            field_of_view: Angle the camera can see, in radians
            transform: World-to-camera transform (identity if None)
        """
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else identity()

        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        inverse = value.inverse()
        self._transform = value
        self._inverse = inverse

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Build the world-space ray through the center of a pixel.

        Args:
            px: Column, 0 at the left
            py: Row, 0 at the top

        Returns:
            A ray from the camera through the pixel center
        """
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left.
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel = self._inverse * point(world_x, world_y, -1.0)
        origin = self._inverse * point(0.0, 0.0, 0.0)
        direction = (pixel - origin).normalize()

        return Ray(origin, direction)

    def __repr__(self) -> str:
        return f"Camera({self.hsize}x{self.vsize}, fov={self.field_of_view:.4f})"
