"""
Matrix class for affine transforms.

Matrices are stored as numpy float64 arrays. The determinant and inverse
use cofactor expansion rather than LU decomposition; transforms are
always 4x4, so the recursion stays shallow.
"""

from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np

from .constants import EPSILON
from .errors import NoInverseError
from .vec3 import Vec3


class Matrix:
    """A rows x cols matrix of floats."""

    __slots__ = ('_data',)

    __array_ufunc__ = None

    def __init__(self, rows: Sequence[Sequence[float]]):
        self._data = np.array(rows, dtype=np.float64)
        if self._data.ndim != 2:
            raise ValueError(f"Matrix needs a 2D array, got shape {self._data.shape}")

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Matrix:
        m = cls.__new__(cls)
        m._data = np.asarray(arr, dtype=np.float64)
        return m

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls.from_array(np.zeros((rows, cols)))

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        return cls.from_array(np.identity(size))

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    def __getitem__(self, index: Union[int, Tuple[int, int]]):
        if isinstance(index, tuple):
            return float(self._data[index])
        return tuple(float(v) for v in self._data[index])

    def __repr__(self) -> str:
        rows = ', '.join('[' + ', '.join(f'{v:.5f}' for v in row) + ']' for row in self._data)
        return f"Matrix([{rows}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON)

    __hash__ = None

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape[1] != other.shape[0]:
            raise ValueError(f"Cannot multiply {self.shape} by {other.shape}")
        return Matrix.from_array(self._data @ other._data)

    def __mul__(self, other: Union[Matrix, Vec3]):
        """Multiply by another matrix or apply the transform to a Vec3.

        A Vec3 is treated as a homogeneous column; the result's point or
        vector tag is re-derived from the resulting w component.
        """
        if isinstance(other, Matrix):
            return self @ other
        if isinstance(other, Vec3):
            if self.shape != (4, 4):
                raise ValueError(f"Only 4x4 matrices transform tuples, got {self.shape}")
            return Vec3.from_homogeneous(self._data @ other.to_homogeneous())
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix.from_array(self._data.T.copy())

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        data = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix.from_array(data)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Closed form for 2x2, cofactor expansion along the first row otherwise."""
        rows, cols = self.shape
        if rows != cols:
            raise ValueError(f"Determinant needs a square matrix, got {self.shape}")
        if rows == 1:
            return float(self._data[0, 0])
        if rows == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(float(self._data[0, col]) * self.cofactor(0, col) for col in range(cols))

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Invert via the adjugate.

        Raises:
            NoInverseError: if the determinant is zero
        """
        determinant = self.determinant()
        if determinant == 0.0:
            raise NoInverseError(f"Matrix is not invertible: {self!r}")

        rows, cols = self.shape
        result = np.zeros((cols, rows))
        for row in range(rows):
            for col in range(cols):
                result[col, row] = self.cofactor(row, col) / determinant
        return Matrix.from_array(result)

    # Fluent builders: each step is applied after the ones before it, so
    # identity().rotate_x(a).scale(...).translate(...) reads in order.

    def rotate_x(self, radians: float) -> Matrix:
        from .transforms import rotation_x
        return rotation_x(radians) @ self

    def rotate_y(self, radians: float) -> Matrix:
        from .transforms import rotation_y
        return rotation_y(radians) @ self

    def rotate_z(self, radians: float) -> Matrix:
        from .transforms import rotation_z
        return rotation_z(radians) @ self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        from .transforms import scaling
        return scaling(x, y, z) @ self

    def translate(self, x: float, y: float, z: float) -> Matrix:
        from .transforms import translation
        return translation(x, y, z) @ self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        from .transforms import shearing
        return shearing(xy, xz, yx, yz, zx, zy) @ self

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


def identity() -> Matrix:
    return Matrix.identity(4)
