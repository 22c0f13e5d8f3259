"""Tests for intersections and hit selection."""

from prismtrace.intersection import Intersection, Intersections, intersections
from prismtrace.shapes import Sphere


class TestIntersection:
    """Test Intersection records."""

    def test_stores_t_and_object(self):
        s = Sphere()
        i = Intersection(3.5, s)
        assert i.t == 3.5
        assert i.object is s

    def test_equality_by_t_and_object(self):
        s = Sphere()
        assert Intersection(1.0, s) == Intersection(1.0, s)
        assert Intersection(1.0, s) != Intersection(2.0, s)
        assert Intersection(1.0, s) != Intersection(1.0, Sphere())


class TestIntersections:
    """Test ordering and hit()."""

    def test_aggregates(self):
        s = Sphere()
        xs = intersections(Intersection(1, s), Intersection(2, s))
        assert len(xs) == 2
        assert xs[0].t == 1
        assert xs[1].t == 2

    def test_sorted_by_t(self):
        s = Sphere()
        xs = Intersections([Intersection(5, s), Intersection(-3, s), Intersection(2, s)])
        assert [i.t for i in xs] == [-3, 2, 5]

    def test_sort_is_stable(self):
        a, b = Sphere(), Sphere()
        xs = Intersections([Intersection(1, a), Intersection(1, b)])
        assert xs[0].object is a
        assert xs[1].object is b

    def test_hit_all_positive(self):
        s = Sphere()
        i1 = Intersection(1, s)
        xs = intersections(Intersection(2, s), i1)
        assert xs.hit() == i1

    def test_hit_some_negative(self):
        s = Sphere()
        i2 = Intersection(1, s)
        xs = intersections(i2, Intersection(-1, s))
        assert xs.hit() == i2

    def test_hit_all_negative(self):
        s = Sphere()
        xs = intersections(Intersection(-2, s), Intersection(-1, s))
        assert xs.hit() is None

    def test_hit_is_lowest_nonnegative(self):
        s = Sphere()
        i4 = Intersection(2, s)
        xs = intersections(Intersection(5, s), Intersection(7, s), Intersection(-3, s), i4)
        assert xs.hit() == i4

    def test_hit_skips_zero(self):
        s = Sphere()
        xs = intersections(Intersection(0, s), Intersection(3, s))
        assert xs.hit().t == 3

    def test_empty(self):
        assert Intersections().hit() is None
        assert len(intersections()) == 0
