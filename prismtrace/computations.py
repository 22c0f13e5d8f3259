"""
Per-hit state shared by the shading steps.

`prepare_computations` turns an intersection into everything the shading
pipeline needs: the hit point, eye and normal vectors, the offset points
used to launch secondary rays, the reflection vector, and the refractive
indices on either side of the surface.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import List, Optional, Sequence

from .constants import EPSILON
from .intersection import Intersection
from .ray import Ray
from .shapes import Shape
from .vec3 import Vec3


@dataclass
class Computations:
    """Precomputed values for shading one intersection.

    Attributes:
        t: Ray parameter of the hit
        object: Shape that was hit
        point: World-space hit point
        eyev: Unit vector back toward the ray origin
        normalv: Unit normal, flipped to face the eye
        inside: True if the normal was flipped (ray started inside)
        over_point: Point nudged above the surface, for shadow/reflection rays
        under_point: Point nudged below the surface, for refraction rays
        reflectv: Ray direction reflected about the normal
        n1: Refractive index of the medium being left
        n2: Refractive index of the medium being entered
    """
    t: float
    object: Shape
    point: Vec3
    eyev: Vec3
    normalv: Vec3
    inside: bool
    over_point: Vec3
    under_point: Vec3
    reflectv: Vec3
    n1: float = 1.0
    n2: float = 1.0


def _refractive_indices(hit: Intersection, xs: Sequence[Intersection]) -> tuple[float, float]:
    """Find n1/n2 by tracking which objects the ray is inside at the hit.

    Walking the sorted list, an object is entered the first time it shows
    up and left the second time, so nested and overlapping volumes work.
    """
    containers: List[Shape] = []
    n1 = n2 = 1.0

    for i in xs:
        if i is hit:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        if i.object in containers:
            containers.remove(i.object)
        else:
            containers.append(i.object)

        if i is hit:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return n1, n2


def prepare_computations(
    hit: Intersection,
    ray: Ray,
    xs: Optional[Sequence[Intersection]] = None,
) -> Computations:
    """Precompute shading state for an intersection.

    Args:
        hit: The intersection being shaded
        ray: The ray that produced it
        xs: All intersections along the ray, sorted by t; needed to work
            out refractive indices (defaults to just the hit)

    Returns:
        A Computations record
    """
    point = ray.position(hit.t)
    eyev = -ray.direction
    normalv = hit.object.normal_at(point)

    inside = normalv.dot(eyev) < 0
    if inside:
        normalv = -normalv

    n1, n2 = _refractive_indices(hit, xs if xs is not None else [hit])

    return Computations(
        t=hit.t,
        object=hit.object,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        over_point=point + normalv * EPSILON,
        under_point=point - normalv * EPSILON,
        reflectv=ray.direction.reflect(normalv),
        n1=n1,
        n2=n2,
    )


def schlick(comps: Computations) -> float:
    """Schlick's approximation of the Fresnel reflectance.

    Returns:
        Fraction of light reflected, 1.0 under total internal reflection
    """
    cos = comps.eyev.dot(comps.normalv)

    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
