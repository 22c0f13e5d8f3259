"""
Geometric shapes for the ray tracer.

Every shape lives in its own object space and carries a transform into
world space. Subclasses implement only the object-space geometry:
`local_intersect` and `local_normal_at`. The world-space entry points
on `Shape` take care of the transforms, so new primitives plug in
without touching the world or the shading code.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import itertools
import math
from typing import List, Optional

from .constants import EPSILON
from .intersection import Intersection, Intersections
from .materials import GLASS, Material
from .matrix import Matrix, identity
from .ray import Ray
from .vec3 import ORIGIN, Vec3, vector

_next_id = itertools.count(1)


class Shape(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    def __init__(self, transform: Optional[Matrix] = None, material: Optional[Material] = None):
        """Create a shape.

        Args:
            transform: Object-to-world transform (identity if None)
            material: Surface material (default material if None)
        """
        self.id = next(_next_id)
        self.transform = transform if transform is not None else identity()
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        # A singular transform is rejected here rather than mid-render.
        inverse = value.inverse()
        self._transform = value
        self._inverse = inverse
        self._inverse_transpose = inverse.transpose()

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a world-space ray with this shape.

        Returns:
            Intersections sorted by t, each referring to this shape
        """
        local_ray = ray.transform(self._inverse)
        return Intersections(self.local_intersect(local_ray))

    def normal_at(self, world_point: Vec3) -> Vec3:
        """Return the unit surface normal at a world-space point."""
        local_point = self._inverse * world_point
        local_normal = self.local_normal_at(local_point)
        world_normal = self._inverse_transpose * local_normal
        # The transpose carries the translation into w; drop it.
        return world_normal.as_vector().normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> List[Intersection]:
        """Intersect an object-space ray, returning ascending intersections."""
        pass

    @abstractmethod
    def local_normal_at(self, local_point: Vec3) -> Vec3:
        """Return the object-space normal at an object-space point."""
        pass

    def copy(self) -> Shape:
        """Duplicate the shape with a fresh id and its own material copy."""
        return type(self)(self._transform, self.material.copy())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"


class Sphere(Shape):
    """The unit sphere centered on the object-space origin."""

    def local_intersect(self, local_ray: Ray) -> List[Intersection]:
        """Solve |O + tD|^2 = 1 for t.

        Expands to a*t^2 + b*t + c = 0 with a = D.D, b = 2 D.(O - C),
        c = (O - C).(O - C) - 1.
        """
        sphere_to_ray = local_ray.origin - ORIGIN
        direction = local_ray.direction

        a = direction.dot(direction)
        b = 2.0 * direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0:
            return []

        sqrtd = math.sqrt(discriminant)
        t1 = (-b - sqrtd) / (2.0 * a)
        t2 = (-b + sqrtd) / (2.0 * a)
        if t1 > t2:
            t1, t2 = t2, t1
        return [Intersection(t1, self), Intersection(t2, self)]

    def local_normal_at(self, local_point: Vec3) -> Vec3:
        return local_point - ORIGIN


class Plane(Shape):
    """The infinite object-space xz plane, facing +y."""

    def local_intersect(self, local_ray: Ray) -> List[Intersection]:
        # Parallel and coplanar rays never register a hit.
        if abs(local_ray.direction.y) < EPSILON:
            return []
        t = -local_ray.origin.y / local_ray.direction.y
        return [Intersection(t, self)]

    def local_normal_at(self, local_point: Vec3) -> Vec3:
        return vector(0.0, 1.0, 0.0)


def glass_sphere() -> Sphere:
    """A unit sphere made of clear glass."""
    return Sphere(material=Material(transparency=1.0, refractive_index=GLASS))
