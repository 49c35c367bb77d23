"""Cylinder primitive, plus truncation and caps shared with cones.

The object-space cylinder has radius 1 around the y axis. It may be
truncated to minimum < y < maximum (both exclusive) and, when truncated,
optionally closed with flat caps.
"""

from __future__ import annotations

import math
from typing import Any

from src.coal.core.matrix import Matrix4
from src.coal.core.ray import Ray
from src.coal.core.transform import Transform
from src.coal.core.tuples import EPSILON, Point, Vector
from src.coal.geometry.shape import Shape
from src.coal.materials.material import Material


class BoundedShape(Shape):
    """Base for quadrics of revolution around y with optional end caps.

    Attributes:
        minimum: Lower y bound (exclusive), -inf when unbounded.
        maximum: Upper y bound (exclusive), +inf when unbounded.
        closed: Whether the truncated ends are capped.
    """

    def __init__(self, minimum: float = -math.inf, maximum: float = math.inf,
                 closed: bool = False, transform: Matrix4 | Transform | None = None,
                 material: Material | None = None) -> None:
        super().__init__(transform=transform, material=material)
        self.minimum = float(minimum)
        self.maximum = float(maximum)
        self.closed = closed

    def geometry_params(self) -> dict[str, Any]:
        return {"minimum": self.minimum, "maximum": self.maximum, "closed": self.closed}

    def cap_radius(self, y: float) -> float:
        """Radius of the cross-section at height y."""
        raise NotImplementedError

    def wall_coefficients(self, ray: Ray) -> tuple[float, float, float]:
        """Quadratic coefficients (a, b, c) of the side wall for a ray."""
        raise NotImplementedError

    def local_intersect(self, ray: Ray) -> list[float]:
        xs = self._intersect_walls(ray)
        xs.extend(self._intersect_caps(ray))
        return xs

    def _intersect_walls(self, ray: Ray) -> list[float]:
        a, b, c = self.wall_coefficients(ray)

        if abs(a) < EPSILON:
            # Parallel to the wall (cylinder) or to one nappe (cone)
            if abs(b) < EPSILON:
                return []
            candidates = [-c / (2.0 * b)]
        else:
            discriminant = b * b - 4.0 * a * c
            if discriminant < -EPSILON:
                return []
            # Tangent rays can round to a tiny negative discriminant
            sqrt_disc = math.sqrt(max(discriminant, 0.0))
            t0 = (-b - sqrt_disc) / (2.0 * a)
            t1 = (-b + sqrt_disc) / (2.0 * a)
            candidates = sorted((t0, t1))

        xs = []
        for t in candidates:
            y = ray.origin.y + t * ray.direction.y
            if self.minimum < y < self.maximum:
                xs.append(t)
        return xs

    def _check_cap(self, ray: Ray, t: float, y: float) -> bool:
        x = ray.origin.x + t * ray.direction.x
        z = ray.origin.z + t * ray.direction.z
        radius = self.cap_radius(y)
        return x * x + z * z <= radius * radius + EPSILON

    def _intersect_caps(self, ray: Ray) -> list[float]:
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return []

        xs = []
        for y in (self.minimum, self.maximum):
            if math.isinf(y):
                continue
            t = (y - ray.origin.y) / ray.direction.y
            if self._check_cap(ray, t, y):
                xs.append(t)
        return xs

    def _cap_normal(self, point: Point) -> Vector | None:
        """Normal of the cap containing point, or None if on the wall."""
        dist = point.x * point.x + point.z * point.z
        if self.closed:
            if point.y >= self.maximum - EPSILON and dist < self.cap_radius(self.maximum) ** 2:
                return Vector(0.0, 1.0, 0.0)
            if point.y <= self.minimum + EPSILON and dist < self.cap_radius(self.minimum) ** 2:
                return Vector(0.0, -1.0, 0.0)
        return None


class Cylinder(BoundedShape):
    """A cylinder of radius 1 around the object-space y axis."""

    variant_tag = "cylinder"

    def cap_radius(self, y: float) -> float:
        return 1.0

    def wall_coefficients(self, ray: Ray) -> tuple[float, float, float]:
        o, d = ray.origin, ray.direction
        a = d.x * d.x + d.z * d.z
        b = 2.0 * o.x * d.x + 2.0 * o.z * d.z
        c = o.x * o.x + o.z * o.z - 1.0
        return a, b, c

    def local_normal_at(self, point: Point) -> Vector:
        cap = self._cap_normal(point)
        if cap is not None:
            return cap
        return Vector(point.x, 0.0, point.z)
