"""Geometry module for shape primitives and intersection sets.

This module provides geometric primitives and intersection records:

Components:
    intersection: Intersection records, ordered sets and hit selection
    shape: Shape base class applying the object/world transform once
    sphere: Unit sphere (quadratic intersection)
    plane: Infinite xz plane
    cube: Axis-aligned unit cube (slab method)
    cylinder: Truncatable, cappable cylinder around y
    cone: Truncatable, cappable double-napped cone around y

Every primitive implements local_intersect and local_normal_at in its own
object space; Shape maps rays and normals between world and object space.
Importing this package registers every variant tag for deserialization.
"""

from .cone import Cone
from .cube import Cube
from .cylinder import BoundedShape, Cylinder
from .intersection import Intersection, Intersections, hit
from .plane import Plane
from .shape import Shape, normal_at, registered_shape_tags, shape_class_for
from .sphere import Sphere, glass_sphere

__all__ = [
    "Intersection",
    "Intersections",
    "hit",
    "Shape",
    "normal_at",
    "shape_class_for",
    "registered_shape_tags",
    "Sphere",
    "glass_sphere",
    "Plane",
    "Cube",
    "BoundedShape",
    "Cylinder",
    "Cone",
]
