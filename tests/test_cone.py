"""Unit tests for the Cone primitive.

Tests cover:
- Wall intersections, including a ray parallel to one nappe
- Closed caps
- Wall normals and the apex normal
- Shading a ray that passes through the apex
"""

import math

import pytest

from src.coal.core.integrator import shade
from src.coal.core.tuples import WHITE, Point, Vector
from src.coal.geometry.cone import Cone
from src.coal.scene.light import PointLight
from src.coal.scene.world import World


def _ray(make_ray, origin, direction):
    return make_ray(origin, Vector(*direction).normalize().to_list())


class TestConeIntersection:
    """Tests for Cone.intersect."""

    @pytest.mark.parametrize(
        "origin,direction,t0,t1",
        [
            ((0, 0, -5), (0, 0, 1), 5, 5),
            ((0, 0, -5), (1, 1, 1), 8.66025, 8.66025),
            ((1, 1, -5), (-0.5, -1, 1), 4.55006, 49.44994),
        ],
    )
    def test_ray_hits(self, make_ray, origin, direction, t0, t1):
        """Test rays meeting the cone wall."""
        xs = Cone().intersect(_ray(make_ray, origin, direction))
        assert [i.t for i in xs] == pytest.approx([t0, t1], abs=1e-4)

    def test_ray_parallel_to_one_half(self, make_ray):
        """Test a ray parallel to a nappe has a single intersection."""
        xs = Cone().intersect(_ray(make_ray, (0, 0, -1), (0, 1, 1)))
        assert [i.t for i in xs] == pytest.approx([0.35355], abs=1e-4)

    @pytest.mark.parametrize(
        "origin,direction,count",
        [
            ((0, 0, -5), (0, 1, 0), 0),
            ((0, 0, -0.25), (0, 1, 1), 2),
            ((0, 0, -0.25), (0, 1, 0), 4),
        ],
    )
    def test_closed_caps(self, make_ray, origin, direction, count):
        """Test caps of a cone truncated to -0.5 < y < 0.5."""
        cone = Cone(minimum=-0.5, maximum=0.5, closed=True)
        assert len(cone.intersect(_ray(make_ray, origin, direction))) == count


class TestConeNormals:
    """Tests for Cone.normal_at."""

    @pytest.mark.parametrize(
        "point,local",
        [
            (Point(1, 1, 1), Vector(1, -math.sqrt(2), 1)),
            (Point(-1, -1, 0), Vector(-1, 1, 0)),
        ],
    )
    def test_wall_normal(self, point, local):
        """Test normals on the wall are unit world-space vectors."""
        cone = Cone()
        assert cone.local_normal_at(point) == local
        assert cone.normal_at(point) == local.normalize()

    def test_apex_normal_follows_axis(self):
        """Test the apex normal falls back to the unit y axis."""
        assert Cone().local_normal_at(Point(0, 0, 0)) == Vector(0, 1, 0)
        assert Cone().normal_at(Point(0, 0, 0)) == Vector(0, 1, 0)

    def test_ray_through_apex_shades(self, make_ray):
        """Test a ray hitting the apex head-on is shaded instead of failing."""
        world = World([Cone()], [PointLight(Point(-10, 10, -10), WHITE)])
        xs = world.intersect(make_ray((0, 0, -5), (0, 0, 1)))
        assert xs.hit().t == pytest.approx(5.0)
        color = shade(make_ray((0, 0, -5), (0, 0, 1)), world)
        assert all(math.isfinite(channel) for channel in color)
