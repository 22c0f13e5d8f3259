"""Tests for point lights and Phong lighting."""

import math

import pytest

from prismtrace.color import BLACK, WHITE, Color
from prismtrace.lights import PointLight, lighting
from prismtrace.materials import Material
from prismtrace.patterns import StripePattern
from prismtrace.shapes import Sphere
from prismtrace.vec3 import point, vector

HALF_SQRT2 = math.sqrt(2) / 2


class TestPointLight:
    """Test PointLight construction."""

    def test_position_and_intensity(self):
        light = PointLight(point(0, 0, 0), Color(1, 1, 1))
        assert light.position == point(0, 0, 0)
        assert light.intensity == Color(1, 1, 1)


class TestLighting:
    """Test the Phong reflection model."""

    @pytest.fixture
    def material(self):
        return Material()

    @pytest.fixture
    def shape(self):
        return Sphere()

    def test_eye_between_light_and_surface(self, material, shape):
        light = PointLight(point(0, 0, -10), WHITE)
        result = lighting(material, shape, light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
        assert result == Color(1.9, 1.9, 1.9)

    def test_eye_offset_45_degrees(self, material, shape):
        light = PointLight(point(0, 0, -10), WHITE)
        eyev = vector(0, HALF_SQRT2, -HALF_SQRT2)
        result = lighting(material, shape, light, point(0, 0, 0), eyev, vector(0, 0, -1))
        assert result == Color(1.0, 1.0, 1.0)

    def test_light_offset_45_degrees(self, material, shape):
        light = PointLight(point(0, 10, -10), WHITE)
        result = lighting(material, shape, light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
        assert result.r == pytest.approx(0.7364, abs=1e-4)
        assert result.g == pytest.approx(0.7364, abs=1e-4)
        assert result.b == pytest.approx(0.7364, abs=1e-4)

    def test_eye_in_reflection_path(self, material, shape):
        light = PointLight(point(0, 10, -10), WHITE)
        eyev = vector(0, -HALF_SQRT2, -HALF_SQRT2)
        result = lighting(material, shape, light, point(0, 0, 0), eyev, vector(0, 0, -1))
        assert result.r == pytest.approx(1.6364, abs=1e-4)
        assert result.g == pytest.approx(1.6364, abs=1e-4)
        assert result.b == pytest.approx(1.6364, abs=1e-4)

    def test_light_behind_surface(self, material, shape):
        light = PointLight(point(0, 0, 10), WHITE)
        result = lighting(material, shape, light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
        assert result == Color(0.1, 0.1, 0.1)

    def test_surface_in_shadow(self, material, shape):
        light = PointLight(point(0, 0, -10), WHITE)
        result = lighting(
            material, shape, light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1), in_shadow=True
        )
        assert result == Color(0.1, 0.1, 0.1)

    def test_light_intensity_scales_result(self, material, shape):
        light = PointLight(point(0, 0, -10), Color(0.5, 0.5, 0.5))
        result = lighting(material, shape, light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
        assert result == Color(0.95, 0.95, 0.95)

    def test_pattern_replaces_color(self, shape):
        m = Material(
            pattern=StripePattern(WHITE, BLACK),
            ambient=1.0, diffuse=0.0, specular=0.0,
        )
        eyev = vector(0, 0, -1)
        normalv = vector(0, 0, -1)
        light = PointLight(point(0, 0, -10), WHITE)
        c1 = lighting(m, shape, light, point(0.9, 0, 0), eyev, normalv)
        c2 = lighting(m, shape, light, point(1.1, 0, 0), eyev, normalv)
        assert c1 == WHITE
        assert c2 == BLACK
