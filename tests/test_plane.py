"""Unit tests for the Plane primitive.

Tests cover:
- Constant normal
- Parallel and coplanar rays
- Rays from above and below
"""

import pytest

from src.coal.core.tuples import Point, Vector
from src.coal.geometry.plane import Plane


class TestPlane:
    """Tests for Plane intersection and normals."""

    @pytest.mark.parametrize("point", [Point(0, 0, 0), Point(10, 0, -10), Point(-5, 0, 150)])
    def test_normal_is_constant(self, point):
        """Test the normal is +y everywhere."""
        assert Plane().normal_at(point) == Vector(0, 1, 0)

    def test_parallel_ray_misses(self, make_ray):
        """Test a ray parallel to the plane."""
        assert len(Plane().intersect(make_ray((0, 10, 0), (0, 0, 1)))) == 0

    def test_coplanar_ray_misses(self, make_ray):
        """Test a ray lying in the plane."""
        assert len(Plane().intersect(make_ray((0, 0, 0), (0, 0, 1)))) == 0

    def test_ray_from_above(self, make_ray):
        """Test a ray coming down onto the plane."""
        p = Plane()
        xs = p.intersect(make_ray((0, 1, 0), (0, -1, 0)))
        assert len(xs) == 1
        assert xs[0].t == pytest.approx(1.0)
        assert xs[0].shape is p

    def test_ray_from_below(self, make_ray):
        """Test a ray coming up onto the plane."""
        xs = Plane().intersect(make_ray((0, -1, 0), (0, 1, 0)))
        assert [i.t for i in xs] == pytest.approx([1.0])

    def test_transformed_plane(self, make_ray):
        """Test a translated plane."""
        p = Plane().set_transform(translation=(0, -1, 0))
        xs = p.intersect(make_ray((0, 1, 0), (0, -1, 0)))
        assert [i.t for i in xs] == pytest.approx([2.0])
