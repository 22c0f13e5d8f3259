"""
Procedural color patterns.

A pattern is evaluated in its own coordinate space: the world point is
taken into object space by the shape's inverse transform, then into
pattern space by the pattern's inverse transform.

Implements:
- Stripes (alternating along x)
- Linear gradient (along x)
- Rings (concentric in the xz plane)
- 3D checkers
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import math
from typing import TYPE_CHECKING

from .color import Color
from .matrix import Matrix, identity
from .vec3 import Vec3

if TYPE_CHECKING:
    from .shapes import Shape


class Pattern(ABC):
    """Abstract base class for patterns.

    Subclasses only implement `at_point`.
    """

    def __init__(self, transform: Matrix = None):
        self.transform = transform if transform is not None else identity()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        # Raises NoInverseError before anything is stored.
        inverse = value.inverse()
        self._transform = value
        self._inverse = inverse

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    @abstractmethod
    def at_point(self, pattern_point: Vec3) -> Color:
        """Get the pattern color at a point in pattern space."""
        pass

    def at_object(self, shape: Shape, world_point: Vec3) -> Color:
        """Get the pattern color at a world-space point on the given shape."""
        object_point = shape.inverse * world_point
        pattern_point = self._inverse * object_point
        return self.at_point(pattern_point)


class TwoColorPattern(Pattern):
    """Base for patterns that alternate or blend between two colors."""

    def __init__(self, a: Color, b: Color, transform: Matrix = None):
        super().__init__(transform)
        self.a = a
        self.b = b

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={self.a}, b={self.b})"


class StripePattern(TwoColorPattern):
    """Alternates a and b every unit of x."""

    def at_point(self, pattern_point: Vec3) -> Color:
        if math.floor(pattern_point.x) % 2 == 0:
            return self.a
        return self.b


class GradientPattern(TwoColorPattern):
    """Blends linearly from a to b over each unit of x."""

    def at_point(self, pattern_point: Vec3) -> Color:
        fraction = pattern_point.x - math.floor(pattern_point.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(TwoColorPattern):
    """Concentric rings around the y axis."""

    def at_point(self, pattern_point: Vec3) -> Color:
        distance = math.sqrt(pattern_point.x ** 2 + pattern_point.z ** 2)
        if math.floor(distance) % 2 == 0:
            return self.a
        return self.b


class CheckerPattern(TwoColorPattern):
    """3D checkers keyed on the summed distance from the pattern axes."""

    def at_point(self, pattern_point: Vec3) -> Color:
        total = abs(pattern_point.x) + abs(pattern_point.y) + abs(pattern_point.z)
        if math.floor(total) % 2 == 0:
            return self.a
        return self.b


class PositionPattern(Pattern):
    """Returns the pattern-space coordinates as a color.

    Useful for checking how points are mapped into pattern space.
    """

    def at_point(self, pattern_point: Vec3) -> Color:
        return Color(pattern_point.x, pattern_point.y, pattern_point.z)
