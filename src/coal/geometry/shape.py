"""Shape abstraction shared by every primitive.

Each concrete shape implements its geometry once, in its own unit object
space:

    local_intersect(local_ray) -> list of t values
    local_normal_at(local_point) -> object-space normal (not necessarily unit)

The base class owns the transform and applies it around those two calls, so
new variants never touch the world/object space logic. Subclasses declare a
``variant_tag`` and are registered under it for deserialization.

Example:
    >>> from src.coal.core.ray import Ray
    >>> from src.coal.core.tuples import Point, Vector
    >>> from src.coal.geometry.sphere import Sphere
    >>> s = Sphere().set_transform(scale=(2, 2, 2))
    >>> [i.t for i in s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))]
    [3.0, 7.0]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

from src.coal.core.errors import UnknownVariantError
from src.coal.core.matrix import Matrix4
from src.coal.core.ray import Ray
from src.coal.core.transform import UNIT_TRIPLE, ZERO_TRIPLE, Transform
from src.coal.core.tuples import Point, Vector
from src.coal.geometry.intersection import Intersection, Intersections
from src.coal.materials.material import Material

# Registry of concrete shape classes keyed by variant tag
_SHAPE_TYPES: dict[str, type[Shape]] = {}


def shape_class_for(tag: str) -> type[Shape]:
    """Look up a registered shape class by its variant tag.

    Raises:
        UnknownVariantError: If no shape is registered under tag.
    """
    try:
        return _SHAPE_TYPES[tag]
    except KeyError:
        raise UnknownVariantError(
            f"Unknown shape type {tag!r}; expected one of {sorted(_SHAPE_TYPES)}"
        ) from None


def registered_shape_tags() -> list[str]:
    """Return the sorted list of registered shape variant tags."""
    return sorted(_SHAPE_TYPES)


class Shape(ABC):
    """A transformable surface with a material.

    Shapes start with the identity transform and the default material.
    Assigning a material stores a shallow copy, so each shape owns its
    material while patterns stay shared between materials.

    Attributes:
        variant_tag: Name used in serialized records.
    """

    variant_tag: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.variant_tag:
            _SHAPE_TYPES[cls.variant_tag] = cls

    def __init__(self, transform: Matrix4 | Transform | None = None,
                 material: Material | None = None) -> None:
        self._transform = Transform.identity()
        self._material = Material()
        if transform is not None:
            self.transform = transform
        if material is not None:
            self.material = material

    # =========================================================================
    # Transform
    # =========================================================================

    @property
    def transform(self) -> Matrix4:
        """Object-to-world matrix."""
        return self._transform.matrix

    @transform.setter
    def transform(self, value: Matrix4 | Transform) -> None:
        # Building the Transform recomputes the cached inverse and inverse-transpose
        self._transform = value if isinstance(value, Transform) else Transform(value)

    @property
    def inverse_transform(self) -> Matrix4:
        """World-to-object matrix (cached)."""
        return self._transform.inverse

    @property
    def normal_transform(self) -> Matrix4:
        """Inverse-transpose of the transform (cached)."""
        return self._transform.normal_matrix

    @property
    def transform_components(self) -> tuple[tuple[float, float, float], ...] | None:
        """(translation, rotation, scale) if the transform was composed from them."""
        return self._transform.components

    def set_transform(self, translation: Sequence[float] = ZERO_TRIPLE,
                      rotation: Sequence[float] = ZERO_TRIPLE,
                      scale: Sequence[float] = UNIT_TRIPLE) -> Shape:
        """Set the transform to translation @ rotation @ scale.

        Returns:
            The shape itself, for chaining.
        """
        self._transform = Transform.compose(translation, rotation, scale)
        return self

    def world_to_object(self, point: Point) -> Point:
        """Map a world-space point into this shape's object space."""
        return self._transform.to_object_space(point)

    # =========================================================================
    # Material
    # =========================================================================

    @property
    def material(self) -> Material:
        """The material owned by this shape."""
        return self._material

    @material.setter
    def material(self, value: Material) -> None:
        self._material = value.copy()

    # =========================================================================
    # Intersection and normals
    # =========================================================================

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a world-space ray with this shape.

        The ray is mapped into object space with the cached inverse before
        delegating to local_intersect.
        """
        local_ray = self._transform.ray_to_object_space(ray)
        return Intersections(Intersection(t, self) for t in self.local_intersect(local_ray))

    def normal_at(self, world_point: Point) -> Vector:
        """Compute the unit world-space normal at a point on the surface.

        Raises:
            DegenerateGeometryError: If the surface has no defined normal
                at the point.
        """
        local_point = self._transform.to_object_space(world_point)
        local_normal = self.local_normal_at(local_point)
        return self._transform.normal_to_world(local_normal)

    @abstractmethod
    def local_intersect(self, ray: Ray) -> list[float]:
        """Return the t values where an object-space ray meets the surface."""

    @abstractmethod
    def local_normal_at(self, point: Point) -> Vector:
        """Return the object-space normal at an object-space point."""

    # =========================================================================
    # Equality
    # =========================================================================

    def geometry_params(self) -> dict[str, Any]:
        """Variant-specific parameters, compared for equality and serialized."""
        return {}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._transform == other._transform
            and self.geometry_params() == other.geometry_params()
            and self._material == other._material
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._transform!r})"


def normal_at(shape: Shape, world_point: Point) -> Vector:
    """Compute the world-space unit normal of shape at world_point."""
    return shape.normal_at(world_point)
