"""
Builders for 4x4 affine transforms.

Rotations take radians and follow the right-hand rule. Compose with
`@` (or `*`): in `a @ b` the transform `b` is applied first.
"""

from __future__ import annotations
import math

from .matrix import Matrix
from .vec3 import Vec3


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [1.0, 0.0, 0.0, x],
        [0.0, 1.0, 0.0, y],
        [0.0, 0.0, 1.0, z],
        [0.0, 0.0, 0.0, 1.0],
    ])


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [x, 0.0, 0.0, 0.0],
        [0.0, y, 0.0, 0.0],
        [0.0, 0.0, z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_x(r: float) -> Matrix:
    c, s = math.cos(r), math.sin(r)
    return Matrix([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, -s, 0.0],
        [0.0, s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_y(r: float) -> Matrix:
    c, s = math.cos(r), math.sin(r)
    return Matrix([
        [c, 0.0, s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_z(r: float) -> Matrix:
    c, s = math.cos(r), math.sin(r)
    return Matrix([
        [c, -s, 0.0, 0.0],
        [s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each axis in proportion to the other two.

    Args:
        xy: x moved in proportion to y
        xz: x moved in proportion to z
        yx: y moved in proportion to x
        yz: y moved in proportion to z
        zx: z moved in proportion to x
        zy: z moved in proportion to y
    """
    return Matrix([
        [1.0, xy, xz, 0.0],
        [yx, 1.0, yz, 0.0],
        [zx, zy, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def view_transform(from_point: Vec3, to: Vec3, up: Vec3) -> Matrix:
    """Build the world-to-camera transform for an eye looking at a target.

    Args:
        from_point: Eye position
        to: Point the eye looks at
        up: Approximate up direction (need not be orthogonal to the view)

    Returns:
        Orientation matrix composed with a translation by -from_point
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
