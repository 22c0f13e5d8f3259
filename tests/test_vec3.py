"""Tests for the tagged Vec3 class."""

import math

import numpy as np
import pytest

from prismtrace.constants import EPSILON
from prismtrace.errors import TupleTypeError
from prismtrace.vec3 import Vec3, VecKind, point, vector


class TestVec3Creation:
    """Test Vec3 construction and tagging."""

    def test_point_has_w_one(self):
        p = point(4.3, -4.2, 3.1)
        assert p.x == pytest.approx(4.3)
        assert p.y == pytest.approx(-4.2)
        assert p.z == pytest.approx(3.1)
        assert p.w == 1.0
        assert p.is_point()
        assert not p.is_vector()

    def test_vector_has_w_zero(self):
        v = vector(4.3, -4.2, 3.1)
        assert v.w == 0.0
        assert v.is_vector()
        assert not v.is_point()

    def test_default_is_zero_vector(self):
        v = Vec3()
        assert v == vector(0, 0, 0)

    def test_from_homogeneous_point(self):
        p = Vec3.from_homogeneous(np.array([1.0, 2.0, 3.0, 1.0]))
        assert p.is_point()
        assert p == point(1, 2, 3)

    def test_from_homogeneous_tolerates_rounding(self):
        p = Vec3.from_homogeneous(np.array([1.0, 2.0, 3.0, 1.0 - EPSILON / 10]))
        assert p.is_point()
        v = Vec3.from_homogeneous(np.array([1.0, 2.0, 3.0, 1e-12]))
        assert v.is_vector()

    def test_to_homogeneous(self):
        assert list(point(1, 2, 3).to_homogeneous()) == [1.0, 2.0, 3.0, 1.0]
        assert list(vector(1, 2, 3).to_homogeneous()) == [1.0, 2.0, 3.0, 0.0]

    def test_repr_names_kind(self):
        assert repr(point(1, 2, 3)).startswith("point(")
        assert repr(vector(1, 2, 3)).startswith("vector(")

    def test_iteration_and_indexing(self):
        v = vector(1, 2, 3)
        assert list(v) == [1.0, 2.0, 3.0]
        assert v[2] == 3.0


class TestVec3Equality:
    """Test epsilon equality."""

    def test_approximate_equality(self):
        assert point(1, 2, 3) == point(1 + EPSILON / 2, 2, 3)

    def test_difference_beyond_epsilon(self):
        assert point(1, 2, 3) != point(1 + 2 * EPSILON, 2, 3)

    def test_point_never_equals_vector(self):
        assert point(1, 2, 3) != vector(1, 2, 3)

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(vector(1, 2, 3))


class TestVec3Arithmetic:
    """Test tag-aware arithmetic."""

    def test_point_plus_vector(self):
        result = point(3, -2, 5) + vector(-2, 3, 1)
        assert result == point(1, 1, 6)

    def test_vector_plus_vector(self):
        result = vector(3, -2, 5) + vector(-2, 3, 1)
        assert result == vector(1, 1, 6)

    def test_point_plus_point_raises(self):
        with pytest.raises(TupleTypeError):
            point(1, 2, 3) + point(1, 2, 3)

    def test_point_minus_point(self):
        assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)

    def test_point_minus_vector(self):
        assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)

    def test_vector_minus_vector(self):
        assert vector(3, 2, 1) - vector(5, 6, 7) == vector(-2, -4, -6)

    def test_vector_minus_point_raises(self):
        with pytest.raises(TupleTypeError):
            vector(3, 2, 1) - point(5, 6, 7)

    def test_type_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            point(1, 2, 3) + point(1, 2, 3)

    def test_negate(self):
        assert -vector(1, -2, 3) == vector(-1, 2, -3)

    def test_multiply_by_scalar(self):
        assert vector(1, -2, 3) * 3.5 == vector(3.5, -7, 10.5)

    def test_multiply_by_fraction(self):
        assert vector(1, -2, 3) * 0.5 == vector(0.5, -1, 1.5)

    def test_reflected_multiply(self):
        assert 2 * vector(1, 2, 3) == vector(2, 4, 6)

    def test_numpy_scalar_multiply(self):
        result = np.float64(2.0) * vector(1, 2, 3)
        assert isinstance(result, Vec3)
        assert result == vector(2, 4, 6)

    def test_divide_by_scalar(self):
        assert vector(1, -2, 3) / 2 == vector(0.5, -1, 1.5)

    def test_scaling_keeps_kind(self):
        assert (point(1, 2, 3) * 2).is_point()


class TestVec3Operations:
    """Test vector-only operations."""

    @pytest.mark.parametrize("v, expected", [
        (vector(1, 0, 0), 1.0),
        (vector(0, 1, 0), 1.0),
        (vector(0, 0, 1), 1.0),
        (vector(1, 2, 3), math.sqrt(14)),
        (vector(-1, -2, -3), math.sqrt(14)),
    ])
    def test_magnitude(self, v, expected):
        assert v.magnitude() == pytest.approx(expected)

    def test_normalize_axis(self):
        assert vector(4, 0, 0).normalize() == vector(1, 0, 0)

    def test_normalize(self):
        s = math.sqrt(14)
        assert vector(1, 2, 3).normalize() == vector(1 / s, 2 / s, 3 / s)

    def test_normalized_has_unit_length(self):
        assert vector(1, 2, 3).normalize().magnitude() == pytest.approx(1.0)

    def test_normalize_zero_vector_raises(self):
        with pytest.raises(ZeroDivisionError):
            vector(0, 0, 0).normalize()

    def test_dot(self):
        assert vector(1, 2, 3).dot(vector(2, 3, 4)) == pytest.approx(20.0)

    def test_cross(self):
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert a.cross(b) == vector(-1, 2, -1)
        assert b.cross(a) == vector(1, -2, 1)

    def test_reflect_at_45_degrees(self):
        v = vector(1, -1, 0)
        n = vector(0, 1, 0)
        assert v.reflect(n) == vector(1, 1, 0)

    def test_reflect_off_slanted_surface(self):
        v = vector(0, -1, 0)
        n = vector(math.sqrt(2) / 2, math.sqrt(2) / 2, 0)
        assert v.reflect(n) == vector(1, 0, 0)

    @pytest.mark.parametrize("operation", [
        lambda p: p.magnitude(),
        lambda p: p.normalize(),
        lambda p: p.dot(vector(1, 0, 0)),
        lambda p: vector(1, 0, 0).dot(p),
        lambda p: p.cross(vector(1, 0, 0)),
        lambda p: vector(1, 0, 0).reflect(p),
    ])
    def test_points_rejected(self, operation):
        with pytest.raises(TupleTypeError):
            operation(point(1, 2, 3))

    def test_as_vector(self):
        v = point(1, 2, 3).as_vector()
        assert v.kind is VecKind.VECTOR
        assert v == vector(1, 2, 3)
