"""
The scene: one point light and a collection of shapes.

World owns the recursive shading pipeline:
- color_at traces a ray and shades the hit
- shade_hit combines direct lighting with reflected and refracted light
- reflected_color / refracted_color spawn secondary rays, each spending
  one unit of the remaining recursion budget
"""

from __future__ import annotations
import math
from typing import Iterator, List, Optional

from .color import BLACK, Color
from .computations import Computations, prepare_computations, schlick
from .constants import DEFAULT_MAX_DEPTH
from .errors import MissingLightError
from .intersection import Intersection, Intersections
from .lights import PointLight, lighting
from .materials import Material
from .ray import Ray
from .shapes import Shape, Sphere
from .transforms import scaling
from .vec3 import Vec3, point


class World:
    """A light and the shapes it illuminates."""

    def __init__(self, light: Optional[PointLight] = None, objects: Optional[List[Shape]] = None):
        self.light = light
        self.objects: List[Shape] = list(objects) if objects is not None else []

    def add(self, obj: Shape) -> None:
        """Add an object to the world."""
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.objects)

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a ray with every object, sorted by t."""
        hits: List[Intersection] = []
        for obj in self.objects:
            hits.extend(obj.intersect(ray))
        return Intersections(hits)

    def is_shadowed(self, point: Vec3) -> bool:
        """True if something lies between the point and the light."""
        if self.light is None:
            raise MissingLightError("World has no light to shade or cast shadows with")
        to_light = self.light.position - point
        distance = to_light.magnitude()
        ray = Ray(point, to_light.normalize())

        hit = self.intersect(ray).hit()
        return hit is not None and hit.t < distance

    def shade_hit(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Color at a precomputed hit: surface + reflected + refracted."""
        shadowed = self.is_shadowed(comps.over_point)
        material = comps.object.material

        surface = lighting(
            material,
            comps.object,
            self.light,
            comps.over_point,
            comps.eyev,
            comps.normalv,
            shadowed,
        )
        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0 and material.transparency > 0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)

        return surface + reflected + refracted

    def color_at(self, ray: Ray, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Trace a ray into the world; black if it hits nothing."""
        xs = self.intersect(ray)
        hit = xs.hit()
        if hit is None:
            return BLACK

        comps = prepare_computations(hit, ray, xs)
        return self.shade_hit(comps, remaining)

    def reflected_color(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Light arriving along the reflection vector, scaled by reflectivity."""
        reflective = comps.object.material.reflective
        if remaining <= 0 or reflective == 0:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Light arriving through the surface, scaled by transparency."""
        transparency = comps.object.material.transparency
        if remaining <= 0 or transparency == 0:
            return BLACK

        # Snell's law
        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            # Total internal reflection
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio

        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def __repr__(self) -> str:
        return f"World(light={self.light}, objects={len(self.objects)})"


def default_world() -> World:
    """Reference world: a white light and two concentric spheres."""
    light = PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))

    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))

    return World(light, [outer, inner])
