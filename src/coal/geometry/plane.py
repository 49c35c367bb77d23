"""Infinite plane primitive (the object-space xz plane)."""

from __future__ import annotations

from src.coal.core.ray import Ray
from src.coal.core.tuples import EPSILON, Point, Vector
from src.coal.geometry.shape import Shape

PLANE_NORMAL = Vector(0.0, 1.0, 0.0)


class Plane(Shape):
    """The xz plane through the origin, with normal +y everywhere."""

    variant_tag = "plane"

    def local_intersect(self, ray: Ray) -> list[float]:
        # Parallel or coplanar rays never register a hit
        if abs(ray.direction.y) < EPSILON:
            return []
        return [-ray.origin.y / ray.direction.y]

    def local_normal_at(self, point: Point) -> Vector:
        return PLANE_NORMAL
