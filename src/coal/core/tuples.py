"""Points, vectors and colors.

Points and vectors share one representation distinguished by the homogeneous
w coordinate (1 for points, 0 for vectors), so that the result type of an
arithmetic operation follows from the w of the operands and matrix products
treat translation correctly. Colors are floating RGB triples on the 0-1
convention.

All equality comparisons are approximate within EPSILON.

Example:
    >>> from src.coal.core.tuples import Point, Vector
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(0.0, 0.0, 1.0)
    >>> p + v
    Point(x=1.0, y=2.0, z=4.0)
    >>> p - Point(0.0, 0.0, 0.0)
    Vector(x=1.0, y=2.0, z=3.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from src.coal.core.errors import DegenerateGeometryError

# Tolerance for approximate comparisons across the core
EPSILON = 1e-6


def approx_equal(a: float, b: float) -> bool:
    """Check whether two floats are equal within EPSILON."""
    return abs(a - b) <= EPSILON


@dataclass(frozen=True, eq=False)
class HomogeneousTuple:
    """Shared base for Point and Vector.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
    """

    x: float
    y: float
    z: float

    W: ClassVar[int] = 0

    @property
    def w(self) -> int:
        """The homogeneous coordinate (1 for points, 0 for vectors)."""
        return self.W

    @staticmethod
    def from_w(x: float, y: float, z: float, w: float) -> HomogeneousTuple:
        """Build a Point or a Vector depending on the homogeneous coordinate.

        Raises:
            TypeError: If w is neither 0 nor 1 (e.g. point + point).
        """
        if w == 1:
            return Point(x, y, z)
        if w == 0:
            return Vector(x, y, z)
        raise TypeError(f"Operation yields w={w}, which is neither a point nor a vector")

    def __add__(self, other: HomogeneousTuple) -> HomogeneousTuple:
        if not isinstance(other, HomogeneousTuple):
            return NotImplemented
        return self.from_w(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: HomogeneousTuple) -> HomogeneousTuple:
        if not isinstance(other, HomogeneousTuple):
            return NotImplemented
        return self.from_w(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HomogeneousTuple):
            return NotImplemented
        if self.w != other.w:
            return False
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def to_list(self) -> list[float]:
        """Return the three spatial components as a list."""
        return [self.x, self.y, self.z]

    def to_homogeneous(self) -> tuple[float, float, float, float]:
        """Return (x, y, z, w) for matrix multiplication."""
        return (self.x, self.y, self.z, float(self.w))


@dataclass(frozen=True, eq=False)
class Point(HomogeneousTuple):
    """A position in space (w = 1)."""

    W: ClassVar[int] = 1


@dataclass(frozen=True, eq=False)
class Vector(HomogeneousTuple):
    """A direction with magnitude (w = 0)."""

    W: ClassVar[int] = 0

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vector) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Compute the cross product self x other."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Compute the Euclidean length of the vector."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector:
        """Return a unit vector in the same direction.

        Raises:
            DegenerateGeometryError: If the vector has (near) zero length.
        """
        length = self.magnitude()
        if length < EPSILON:
            raise DegenerateGeometryError(f"Cannot normalize zero-length vector {self!r}")
        return Vector(self.x / length, self.y / length, self.z / length)

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this vector about a normal.

        Args:
            normal: The surface normal (should be unit length).

        Returns:
            The reflected vector, self - 2 * (self . normal) * normal.
        """
        return self - normal * (2.0 * self.dot(normal))


@dataclass(frozen=True, eq=False)
class Color:
    """An RGB color with floating channels, nominally in [0, 1].

    Channels are not clamped: shading sums may exceed 1 and clamping happens
    when an image is written, outside the core.
    """

    r: float
    g: float
    b: float

    def __add__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        if isinstance(other, (int, float)):
            return Color(self.r + other, self.g + other, self.b + other)
        return NotImplemented

    def __radd__(self, other: float) -> Color:
        # Also lets sum() start from 0
        if isinstance(other, (int, float)):
            return Color(other + self.r, other + self.g, other + self.b)
        return NotImplemented

    def __sub__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.r - other.r, self.g - other.g, self.b - other.b)
        if isinstance(other, (int, float)):
            return Color(self.r - other, self.g - other, self.b - other)
        return NotImplemented

    def __rsub__(self, other: float) -> Color:
        if isinstance(other, (int, float)):
            return Color(other - self.r, other - self.g, other - self.b)
        return NotImplemented

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Color:
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_equal(self.r, other.r)
            and approx_equal(self.g, other.g)
            and approx_equal(self.b, other.b)
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def to_list(self) -> list[float]:
        """Return the channels as [r, g, b]."""
        return [self.r, self.g, self.b]


BLACK = Color(0.0, 0.0, 0.0)
DARK_GREY = Color(0.2, 0.2, 0.2)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
PURPLE = Color(1.0, 0.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0)

ORIGIN = Point(0.0, 0.0, 0.0)
