"""Axis-aligned unit cube primitive.

The cube spans [-1, 1] on every object-space axis. Intersection uses the slab
method: the ray enters the cube at the largest of the per-axis entry
distances and leaves at the smallest of the exit distances.
"""

from __future__ import annotations

import math

from src.coal.core.ray import Ray
from src.coal.core.tuples import EPSILON, Point, Vector
from src.coal.geometry.shape import Shape


def _check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Return the (entry, exit) distances of one slab [-1, 1].

    Args:
        origin: Ray origin component on the axis.
        direction: Ray direction component on the axis.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Shape):
    """An axis-aligned cube centered at the origin with half-extent 1."""

    variant_tag = "cube"

    def local_intersect(self, ray: Ray) -> list[float]:
        xtmin, xtmax = _check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = _check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = _check_axis(ray.origin.z, ray.direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        if tmin > tmax:
            return []
        return [tmin, tmax]

    def local_normal_at(self, point: Point) -> Vector:
        """Return the normal of the face whose axis dominates the point."""
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(ax, ay, az)

        if maxc == ax:
            return Vector(point.x, 0.0, 0.0)
        if maxc == ay:
            return Vector(0.0, point.y, 0.0)
        return Vector(0.0, 0.0, point.z)
