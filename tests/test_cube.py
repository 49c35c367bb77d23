"""Unit tests for the Cube primitive.

Tests cover:
- Intersections through each face
- A ray starting inside the cube
- Misses, including rays parallel to a slab
- Face normals, including edges and corners
"""

import pytest

from src.coal.core.tuples import Point, Vector
from src.coal.geometry.cube import Cube


class TestCubeIntersection:
    """Tests for the slab intersection."""

    @pytest.mark.parametrize(
        "origin,direction,t1,t2",
        [
            ((5, 0.5, 0), (-1, 0, 0), 4, 6),
            ((-5, 0.5, 0), (1, 0, 0), 4, 6),
            ((0.5, 5, 0), (0, -1, 0), 4, 6),
            ((0.5, -5, 0), (0, 1, 0), 4, 6),
            ((0.5, 0, 5), (0, 0, -1), 4, 6),
            ((0.5, 0, -5), (0, 0, 1), 4, 6),
            ((0, 0.5, 0), (0, 0, 1), -1, 1),
        ],
    )
    def test_ray_hits_cube(self, make_ray, origin, direction, t1, t2):
        """Test each face and a ray from inside."""
        xs = Cube().intersect(make_ray(origin, direction))
        assert [i.t for i in xs] == pytest.approx([t1, t2])

    @pytest.mark.parametrize(
        "origin,direction",
        [
            ((-2, 0, 0), (0.2673, 0.5345, 0.8018)),
            ((0, -2, 0), (0.8018, 0.2673, 0.5345)),
            ((0, 0, -2), (0.5345, 0.8018, 0.2673)),
            ((2, 0, 2), (0, 0, -1)),
            ((0, 2, 2), (0, -1, 0)),
            ((2, 2, 0), (-1, 0, 0)),
        ],
    )
    def test_ray_misses_cube(self, make_ray, origin, direction):
        """Test rays that pass beside the cube."""
        assert len(Cube().intersect(make_ray(origin, direction))) == 0


class TestCubeNormals:
    """Tests for Cube.normal_at."""

    @pytest.mark.parametrize(
        "point,expected",
        [
            (Point(1, 0.5, -0.8), Vector(1, 0, 0)),
            (Point(-1, -0.2, 0.9), Vector(-1, 0, 0)),
            (Point(-0.4, 1, -0.1), Vector(0, 1, 0)),
            (Point(0.3, -1, -0.7), Vector(0, -1, 0)),
            (Point(-0.6, 0.3, 1), Vector(0, 0, 1)),
            (Point(0.4, 0.4, -1), Vector(0, 0, -1)),
            (Point(1, 1, 1), Vector(1, 0, 0)),
            (Point(-1, -1, -1), Vector(-1, 0, 0)),
        ],
    )
    def test_normal(self, point, expected):
        """Test the normal follows the dominant axis."""
        assert Cube().normal_at(point) == expected
