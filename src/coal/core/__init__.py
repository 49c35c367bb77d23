"""Core module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuples: Points, vectors and colors (homogeneous w distinguishes them)
    matrix: Immutable 4x4 matrices and transform factories
    transform: Composed object transforms with cached inverses
    ray: Ray data structure, refraction and Schlick helpers
    errors: Exception hierarchy
    config: Process-wide settings read from the environment
    logging_config: Optional console logging setup
    integrator: Recursive shading (local lighting, reflection, refraction)
"""

from .errors import (
    CoalError,
    DegenerateGeometryError,
    SerializationError,
    SingularMatrixError,
    UnknownVariantError,
)
from .matrix import IDENTITY, Matrix4
from .ray import Ray, refract, schlick
from .transform import Transform
from .tuples import (
    BLACK,
    EPSILON,
    ORIGIN,
    WHITE,
    Color,
    Point,
    Vector,
)

# Note: integrator is NOT imported here to avoid circular imports (it depends on
# the scene package). Import directly from src.coal.core.integrator when needed.

__all__ = [
    "EPSILON",
    "Point",
    "Vector",
    "Color",
    "BLACK",
    "WHITE",
    "ORIGIN",
    "Matrix4",
    "IDENTITY",
    "Transform",
    "Ray",
    "refract",
    "schlick",
    "CoalError",
    "DegenerateGeometryError",
    "SingularMatrixError",
    "UnknownVariantError",
    "SerializationError",
]
