"""
Intersection records and ordered intersection lists.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, TYPE_CHECKING

from .constants import EPSILON

if TYPE_CHECKING:
    from .shapes import Shape


@dataclass(eq=False)
class Intersection:
    """A ray parameter t at which a ray meets a shape.

    Attributes:
        t: Distance along the ray (in units of the ray's direction)
        object: The world-space shape that was hit
    """
    t: float
    object: Shape

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return abs(self.t - other.t) < EPSILON and self.object.id == other.object.id

    __hash__ = None


class Intersections:
    """An ascending-by-t sequence of intersections."""

    def __init__(self, items: Optional[Iterable[Intersection]] = None):
        # sorted() is stable, so equal t values keep their input order.
        self._items: List[Intersection] = sorted(items or [], key=lambda i: i.t)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Intersections({self._items!r})"

    def hit(self) -> Optional[Intersection]:
        """Return the intersection with the smallest positive t.

        Returns:
            The hit, or None when the ray misses everything in front of it
        """
        for intersection in self._items:
            if intersection.t > 0:
                return intersection
        return None


def intersections(*items: Intersection) -> Intersections:
    return Intersections(items)
