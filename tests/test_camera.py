"""Tests for Camera class."""

import math

import pytest

from prismtrace.camera import Camera
from prismtrace.errors import NoInverseError
from prismtrace.matrix import identity
from prismtrace.transforms import rotation_y, scaling, translation
from prismtrace.vec3 import point, vector


class TestCameraCreation:
    """Test Camera construction."""

    def test_stores_parameters(self):
        c = Camera(160, 120, math.pi / 2)
        assert c.hsize == 160
        assert c.vsize == 120
        assert c.field_of_view == pytest.approx(math.pi / 2)
        assert c.transform == identity()

    def test_pixel_size_horizontal_canvas(self):
        assert Camera(200, 125, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_pixel_size_vertical_canvas(self):
        assert Camera(125, 200, math.pi / 2).pixel_size == pytest.approx(0.01)

    @pytest.mark.parametrize("hsize, vsize", [(0, 10), (10, 0), (-1, 5)])
    def test_rejects_empty_canvas(self, hsize, vsize):
        with pytest.raises(ValueError):
            Camera(hsize, vsize, math.pi / 2)

    def test_rejects_singular_transform(self):
        with pytest.raises(NoInverseError):
            Camera(10, 10, math.pi / 2, scaling(0, 0, 0))


class TestRayForPixel:
    """Test primary ray generation."""

    def test_through_center(self):
        c = Camera(201, 101, math.pi / 2)
        ray = c.ray_for_pixel(100, 50)
        assert ray.origin == point(0, 0, 0)
        assert ray.direction == vector(0, 0, -1)

    def test_through_corner(self):
        c = Camera(201, 101, math.pi / 2)
        ray = c.ray_for_pixel(0, 0)
        assert ray.origin == point(0, 0, 0)
        assert ray.direction == vector(0.66519, 0.33259, -0.66851)

    def test_transformed_camera(self):
        c = Camera(201, 101, math.pi / 2, rotation_y(math.pi / 4) @ translation(0, -2, 5))
        ray = c.ray_for_pixel(100, 50)
        assert ray.origin == point(0, 2, -5)
        assert ray.direction == vector(math.sqrt(2) / 2, 0, -math.sqrt(2) / 2)

    def test_direction_is_normalized(self):
        c = Camera(20, 10, math.pi / 3)
        assert c.ray_for_pixel(3, 7).direction.magnitude() == pytest.approx(1.0)

    def test_assigning_transform(self):
        c = Camera(201, 101, math.pi / 2)
        c.transform = translation(0, 0, -3)
        assert c.ray_for_pixel(100, 50).origin == point(0, 0, 3)
