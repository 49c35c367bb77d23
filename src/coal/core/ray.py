"""Ray data structure and the optics helpers used by the shading engine.

A ray is an origin point plus a direction vector. The direction is not
required to be unit length; parametric distances t are measured in units of
the direction's length, which keeps t meaningful after a ray is mapped into
a shape's object space.

Example:
    >>> from src.coal.core.ray import Ray
    >>> from src.coal.core.tuples import Point, Vector
    >>> ray = Ray(Point(2.0, 3.0, 4.0), Vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5)
    Point(x=4.5, y=3.0, z=4.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.coal.core.matrix import Matrix4
from src.coal.core.tuples import Point, Vector


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray.
    """

    origin: Point
    direction: Vector

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + direction * t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix4) -> Ray:
        """Return a new ray with origin and direction multiplied by matrix."""
        return Ray(matrix @ self.origin, matrix @ self.direction)


# =============================================================================
# Optics helpers
# =============================================================================


def refract(eyev: Vector, normal: Vector, n1: float, n2: float) -> Vector | None:
    """Refract a view direction through a surface using Snell's law.

    Args:
        eyev: Unit vector from the surface toward the eye.
        normal: Unit surface normal on the eye side.
        n1: Refractive index of the medium being exited.
        n2: Refractive index of the medium being entered.

    Returns:
        The refracted direction continuing away from the eye, or None on
        total internal reflection.
    """
    n_ratio = n1 / n2
    cos_i = eyev.dot(normal)
    sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
    if sin2_t > 1.0:
        return None
    cos_t = math.sqrt(1.0 - sin2_t)
    return normal * (n_ratio * cos_i - cos_t) - eyev * n_ratio


def schlick(cos_i: float, n1: float, n2: float) -> float:
    """Compute Fresnel reflectance using Schlick's approximation.

    Args:
        cos_i: Cosine of the angle between the eye vector and the normal.
        n1: Refractive index of the medium being exited.
        n2: Refractive index of the medium being entered.

    Returns:
        The fraction of light reflected, in [0, 1]. Returns 1.0 under total
        internal reflection.
    """
    cos = cos_i
    if n1 > n2:
        n_ratio = n1 / n2
        sin2_t = n_ratio * n_ratio * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        # Use the transmitted angle when leaving the denser medium
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((n1 - n2) / (n1 + n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
