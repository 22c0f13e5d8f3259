"""
Vector3 class for 3D math operations.

Every Vec3 carries a kind tag that says whether it is a position
(a point) or a displacement (a vector):
- point - point = vector
- point + vector = point
- vector + vector = vector
- point + point is undefined and raises TupleTypeError

Only vectors have a magnitude, a direction, dot and cross products.
"""

from __future__ import annotations
import math
from enum import Enum
from typing import Sequence
import numpy as np

from .constants import EPSILON
from .errors import TupleTypeError


class VecKind(Enum):
    """Discriminant tag of a Vec3."""
    POINT = 1.0
    VECTOR = 0.0


class Vec3:
    """A tagged 3D tuple backed by a numpy array.

    Instances are immutable: every operation returns a new Vec3.
    """

    __slots__ = ('_data', '_kind')

    # Make numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 kind: VecKind = VecKind.VECTOR):
        self._data = np.array([x, y, z], dtype=np.float64)
        self._kind = kind

    @classmethod
    def from_array(cls, arr: Sequence[float], kind: VecKind) -> Vec3:
        """Create Vec3 from the first three entries of an array."""
        v = cls.__new__(cls)
        v._data = np.asarray(arr, dtype=np.float64)[:3].copy()
        v._kind = kind
        return v

    @classmethod
    def from_homogeneous(cls, arr: Sequence[float]) -> Vec3:
        """Create Vec3 from a 4-component column, deriving the tag from w.

        Affine transforms leave w at exactly 0 or 1 up to rounding, so
        anything close to 1 is a point and everything else a vector.
        """
        w = float(arr[3])
        kind = VecKind.POINT if w > 1.0 - EPSILON else VecKind.VECTOR
        return cls.from_array(arr, kind)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return self._kind.value

    @property
    def kind(self) -> VecKind:
        return self._kind

    def is_point(self) -> bool:
        return self._kind is VecKind.POINT

    def is_vector(self) -> bool:
        return self._kind is VecKind.VECTOR

    def __repr__(self) -> str:
        name = 'point' if self.is_point() else 'vector'
        return f"{name}({self.x:.5f}, {self.y:.5f}, {self.z:.5f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return (self._kind is other._kind
                and np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON))

    __hash__ = None

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data, self._kind)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        if self.is_point() and other.is_point():
            raise TupleTypeError("Two points cannot be added")
        kind = VecKind.POINT if (self.is_point() or other.is_point()) else VecKind.VECTOR
        return Vec3.from_array(self._data + other._data, kind)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        if self.is_vector() and other.is_point():
            raise TupleTypeError("Cannot subtract a point from a vector")
        if self.is_point() and other.is_vector():
            kind = VecKind.POINT
        else:
            kind = VecKind.VECTOR
        return Vec3.from_array(self._data - other._data, kind)

    def __mul__(self, scalar: float) -> Vec3:
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3.from_array(self._data * scalar, self._kind)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec3:
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3.from_array(self._data / scalar, self._kind)

    def _require_vector(self, operation: str, other: Vec3 = None) -> None:
        if self.is_point() or (other is not None and other.is_point()):
            raise TupleTypeError(f"{operation} can only be applied to vectors")

    def magnitude(self) -> float:
        """Return the length of the vector."""
        self._require_vector("Magnitude")
        return float(math.sqrt(np.dot(self._data, self._data)))

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction."""
        self._require_vector("Normalize")
        length = self.magnitude()
        if length == 0.0:
            raise ZeroDivisionError("Cannot normalize a zero-length vector")
        return Vec3.from_array(self._data / length, VecKind.VECTOR)

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        self._require_vector("Dot product", other)
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vec3) -> Vec3:
        """Compute cross product with another vector."""
        self._require_vector("Cross product", other)
        return Vec3.from_array(np.cross(self._data, other._data), VecKind.VECTOR)

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect this vector around the given normal."""
        self._require_vector("Reflection", normal)
        return self - normal * 2 * self.dot(normal)

    def as_vector(self) -> Vec3:
        """Return the same components tagged as a vector."""
        return Vec3.from_array(self._data, VecKind.VECTOR)

    def to_homogeneous(self) -> np.ndarray:
        """Return the 4-component column (w=1 for points, w=0 for vectors)."""
        return np.append(self._data, self.w)


def point(x: float, y: float, z: float) -> Vec3:
    return Vec3(x, y, z, VecKind.POINT)


def vector(x: float, y: float, z: float) -> Vec3:
    return Vec3(x, y, z, VecKind.VECTOR)


ORIGIN = point(0.0, 0.0, 0.0)
