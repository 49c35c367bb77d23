"""Double-napped cone primitive.

The object-space cone is x^2 + z^2 = y^2: two nappes meeting at the origin,
opening along +y and -y. Truncation and caps work as for cylinders, with the
cap radius equal to |y| at the cap height.
"""

from __future__ import annotations

import math

from src.coal.core.ray import Ray
from src.coal.core.tuples import EPSILON, Point, Vector
from src.coal.geometry.cylinder import BoundedShape


class Cone(BoundedShape):
    """A double-napped cone around the object-space y axis."""

    variant_tag = "cone"

    def cap_radius(self, y: float) -> float:
        return abs(y)

    def wall_coefficients(self, ray: Ray) -> tuple[float, float, float]:
        o, d = ray.origin, ray.direction
        a = d.x * d.x - d.y * d.y + d.z * d.z
        b = 2.0 * o.x * d.x - 2.0 * o.y * d.y + 2.0 * o.z * d.z
        c = o.x * o.x - o.y * o.y + o.z * o.z
        return a, b, c

    def local_normal_at(self, point: Point) -> Vector:
        """Return the object-space normal.

        The wall normal vanishes at the apex, where the axis direction +y is
        used instead. Shading flips it toward the eye as for any surface.
        """
        cap = self._cap_normal(point)
        if cap is not None:
            return cap
        y = math.sqrt(point.x * point.x + point.z * point.z)
        if y < EPSILON and abs(point.y) < EPSILON:
            return Vector(0.0, 1.0, 0.0)
        if point.y > 0.0:
            y = -y
        return Vector(point.x, y, point.z)
