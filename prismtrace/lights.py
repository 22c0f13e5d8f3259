"""
Light sources and the Phong reflection model.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .color import BLACK, Color
from .vec3 import Vec3

if TYPE_CHECKING:
    from .materials import Material
    from .shapes import Shape


@dataclass
class PointLight:
    """A light with no size, emitting equally in every direction.

    Point lights produce hard shadows and do not fall off with distance.
    """
    position: Vec3
    intensity: Color


def lighting(
    material: Material,
    shape: Shape,
    light: PointLight,
    point: Vec3,
    eyev: Vec3,
    normalv: Vec3,
    in_shadow: bool = False,
) -> Color:
    """Shade a surface point with the Phong model.

    Args:
        material: Surface material
        shape: Shape being shaded (used to sample its pattern)
        light: The light source
        point: World-space point being shaded
        eyev: Unit vector from the point toward the eye
        normalv: Unit surface normal at the point
        in_shadow: If True only the ambient term contributes

    Returns:
        ambient + diffuse + specular
    """
    if material.pattern is not None:
        surface_color = material.pattern.at_object(shape, point)
    else:
        surface_color = material.color

    effective_color = surface_color * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    lightv = (light.position - point).normalize()
    light_dot_normal = lightv.dot(normalv)

    # Light on the other side of the surface.
    if light_dot_normal <= 0:
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    reflectv = (-lightv).reflect(normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0:
        specular = BLACK
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
