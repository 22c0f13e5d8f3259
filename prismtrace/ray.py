"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .errors import TupleTypeError
from .vec3 import Vec3

if TYPE_CHECKING:
    from .matrix import Matrix


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Vec3, direction: Vec3):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray
            direction: The direction vector (not required to be normalized;
                object-space rays are deliberately left unnormalized)
        """
        if not origin.is_point():
            raise TupleTypeError(f"Ray origin must be a point, got {origin!r}")
        if not direction.is_vector():
            raise TupleTypeError(f"Ray direction must be a vector, got {direction!r}")
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Vec3:
        """Get the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray with origin and direction mapped by the matrix."""
        return Ray(matrix * self.origin, matrix * self.direction)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
