"""
RGB color values.

Colors are linear floats where 0.0-1.0 is the displayable range; lighting
can push components above 1.0 and they are only clamped when written to
a canvas.
"""

from __future__ import annotations
from typing import Tuple, Union
import numpy as np

from .constants import EPSILON


class Color:
    """An RGB triple supporting addition, scaling and the Hadamard product."""

    __slots__ = ('_data',)

    __array_ufunc__ = None

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0):
        self._data = np.array([r, g, b], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Color:
        """Create Color from numpy array."""
        c = cls.__new__(cls)
        c._data = np.asarray(arr, dtype=np.float64)
        return c

    @property
    def r(self) -> float:
        return float(self._data[0])

    @property
    def g(self) -> float:
        return float(self._data[1])

    @property
    def b(self) -> float:
        return float(self._data[2])

    def __repr__(self) -> str:
        return f"Color({self.r:.5f}, {self.g:.5f}, {self.b:.5f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON)

    __hash__ = None

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._data + other._data)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._data - other._data)

    def __mul__(self, other: Union[Color, float]) -> Color:
        if isinstance(other, Color):
            return Color.from_array(self._data * other._data)
        return Color.from_array(self._data * other)

    def __rmul__(self, other: float) -> Color:
        return Color.from_array(other * self._data)

    def clamp(self, min_val: float = 0.0, max_val: float = 1.0) -> Color:
        """Clamp all components to the given range."""
        return Color.from_array(np.clip(self._data, min_val, max_val))

    def to_rgb8(self) -> Tuple[int, int, int]:
        """Convert to 0-255 integers, rounding half up and clamping."""
        scaled = np.floor(self._data * 255.0 + 0.5)
        r, g, b = np.clip(scaled, 0, 255).astype(np.uint8)
        return int(r), int(g), int(b)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
