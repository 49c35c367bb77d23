"""Unit tests for intersection records and hit selection.

Tests cover:
- Intersection fields and identity-based equality
- Sorting by ascending t with stable ties
- Hit selection (smallest non-negative t)
- Concatenating intersection sets
"""

import pytest

from src.coal.geometry.intersection import Intersection, Intersections, hit
from src.coal.geometry.sphere import Sphere


@pytest.fixture
def sphere():
    """A unit sphere to tag intersections with."""
    return Sphere()


class TestIntersection:
    """Tests for a single Intersection."""

    def test_fields(self, sphere):
        """Test t and shape are stored."""
        i = Intersection(3.5, sphere)
        assert i.t == 3.5
        assert i.shape is sphere

    def test_equality_uses_shape_identity(self, sphere):
        """Test equal but distinct shapes make unequal intersections."""
        assert Intersection(1, sphere) == Intersection(1, sphere)
        assert Intersection(1, sphere) != Intersection(1, Sphere())


class TestIntersections:
    """Tests for ordered intersection sets."""

    def test_sorted_by_t(self, sphere):
        """Test intersections are kept in ascending t."""
        xs = Intersections([Intersection(t, sphere) for t in (5, 7, -3, 2)])
        assert [i.t for i in xs] == [-3, 2, 5, 7]
        assert len(xs) == 4

    def test_ties_keep_encounter_order(self):
        """Test equal t values are not reordered."""
        first, second = Sphere(), Sphere()
        xs = Intersections([Intersection(1, first), Intersection(1, second)])
        assert xs[0].shape is first
        assert xs[1].shape is second

    def test_concatenation_resorts(self, sphere):
        """Test adding two sets yields one sorted set."""
        xs = Intersections([Intersection(4, sphere)]) + [Intersection(1, sphere)]
        assert isinstance(xs, Intersections)
        assert [i.t for i in xs] == [1, 4]


class TestHit:
    """Tests for hit selection."""

    def test_all_positive(self, sphere):
        """Test the smallest positive t wins."""
        i1, i2 = Intersection(1, sphere), Intersection(2, sphere)
        assert hit([i2, i1]) is i1

    def test_some_negative(self, sphere):
        """Test negative t values are skipped."""
        i1, i2 = Intersection(-1, sphere), Intersection(1, sphere)
        assert hit([i2, i1]) is i2

    def test_all_negative(self, sphere):
        """Test no hit when everything is behind the origin."""
        assert hit([Intersection(-2, sphere), Intersection(-1, sphere)]) is None

    def test_lowest_non_negative(self, sphere):
        """Test the hit from an unordered set."""
        i3 = Intersection(2, sphere)
        xs = Intersections(
            [Intersection(5, sphere), Intersection(7, sphere), Intersection(-3, sphere), i3]
        )
        assert xs.hit() is i3

    def test_zero_counts_as_hit(self, sphere):
        """Test t == 0 is a hit."""
        i = Intersection(0, sphere)
        assert hit([i]) is i

    def test_empty(self):
        """Test an empty set has no hit."""
        assert Intersections().hit() is None
