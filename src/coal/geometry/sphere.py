"""Unit sphere primitive.

In object space the sphere is centered at the origin with radius 1. Ray
intersection solves the quadratic |O + tD|^2 = 1 for t.

Key cases:
    - Negative discriminant: the ray misses, no intersections.
    - Tangent ray: two equal roots are reported.
    - Origin inside the sphere: one negative and one positive root; the hit
      selection then picks the positive one.
    - Both roots negative: the sphere lies entirely behind the ray origin and
      no intersections are reported.
"""

from __future__ import annotations

import math

from src.coal.core.ray import Ray
from src.coal.core.tuples import ORIGIN, Point, Vector
from src.coal.geometry.shape import Shape
from src.coal.materials.material import Material


class Sphere(Shape):
    """A unit sphere centered at the object-space origin."""

    variant_tag = "sphere"

    def local_intersect(self, ray: Ray) -> list[float]:
        """Solve |O + tD|^2 = 1 for an object-space ray.

        Args:
            ray: The ray in object space.

        Returns:
            The roots in ascending order, or an empty list if the ray misses
            or the sphere is entirely behind the ray origin.
        """
        sphere_to_ray = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)

        if t2 < 0.0:
            return []
        return [t1, t2]

    def local_normal_at(self, point: Point) -> Vector:
        """The object-space normal is the vector from the center to the point."""
        return point - ORIGIN


def glass_sphere() -> Sphere:
    """Create a unit sphere made of glass (transparency 1, refractive index 1.5)."""
    return Sphere(material=Material(transparency=1.0, refractive_index=1.5))
