"""Per-object transform with cached inverse and inverse-transpose.

Shapes and patterns both own a Transform. It maps rays and points from world
space into object space with the cached inverse, and maps object-space
normals back to world space with the inverse-transpose.

Composition order is fixed: ``matrix = T @ R @ S`` so a point is scaled
first, then rotated, then translated. ``R = Rz @ Ry @ Rx`` applies the x
rotation first. Angles are in radians.

Example:
    >>> import math
    >>> from src.coal.core.transform import Transform
    >>> t = Transform.compose(translation=(0, 1, 0), rotation=(0, math.pi / 4, 0),
    ...                       scale=(2, 2, 2))
    >>> t.components
    ((0.0, 1.0, 0.0), (0.0, 0.7853981633974483, 0.0), (2.0, 2.0, 2.0))
"""

from __future__ import annotations

from collections.abc import Sequence

from src.coal.core.matrix import IDENTITY, Matrix4
from src.coal.core.ray import Ray
from src.coal.core.tuples import HomogeneousTuple, Vector

Triple = tuple[float, float, float]

ZERO_TRIPLE: Triple = (0.0, 0.0, 0.0)
UNIT_TRIPLE: Triple = (1.0, 1.0, 1.0)


def _as_triple(values: Sequence[float], name: str) -> Triple:
    if len(values) != 3:
        raise ValueError(f"{name} must have exactly three components, got {len(values)}")
    return (float(values[0]), float(values[1]), float(values[2]))


def compose_matrix(translation: Sequence[float], rotation: Sequence[float],
                   scale: Sequence[float]) -> Matrix4:
    """Build ``T @ Rz @ Ry @ Rx @ S`` from component triples."""
    tx, ty, tz = translation
    rx, ry, rz = rotation
    sx, sy, sz = scale
    return (
        Matrix4.translation(tx, ty, tz)
        @ Matrix4.rotation_z(rz)
        @ Matrix4.rotation_y(ry)
        @ Matrix4.rotation_x(rx)
        @ Matrix4.scaling(sx, sy, sz)
    )


class Transform:
    """An immutable affine transform and its cached derived matrices.

    Attributes:
        matrix: Object-to-world matrix.
        inverse: World-to-object matrix.
        normal_matrix: Inverse-transpose, for mapping normals to world space.
        components: (translation, rotation, scale) triples when the transform
            was composed from them, otherwise None.

    Raises:
        SingularMatrixError: On construction, if the matrix is not invertible
            (for example a zero scale on some axis).
    """

    __slots__ = ("matrix", "inverse", "normal_matrix", "components")

    def __init__(self, matrix: Matrix4 = IDENTITY,
                 components: tuple[Triple, Triple, Triple] | None = None) -> None:
        self.matrix = matrix
        self.inverse = matrix.inverse()
        self.normal_matrix = self.inverse.transpose()
        self.components = components

    @classmethod
    def identity(cls) -> Transform:
        """Return the identity transform."""
        return cls(IDENTITY, (ZERO_TRIPLE, ZERO_TRIPLE, UNIT_TRIPLE))

    @classmethod
    def compose(cls, translation: Sequence[float] = ZERO_TRIPLE,
                rotation: Sequence[float] = ZERO_TRIPLE,
                scale: Sequence[float] = UNIT_TRIPLE) -> Transform:
        """Build a transform from translation, rotation and scale triples."""
        components = (
            _as_triple(translation, "translation"),
            _as_triple(rotation, "rotation"),
            _as_triple(scale, "scale"),
        )
        return cls(compose_matrix(*components), components)

    def to_object_space(self, value: HomogeneousTuple) -> HomogeneousTuple:
        """Map a world-space point or vector into object space."""
        return self.inverse @ value

    def ray_to_object_space(self, ray: Ray) -> Ray:
        """Map a world-space ray into object space."""
        return ray.transform(self.inverse)

    def normal_to_world(self, normal: Vector) -> Vector:
        """Map an object-space normal into world space and renormalize.

        The inverse-transpose is not length preserving, so the result is
        normalized. Any translation leaking into w is discarded, since a
        Vector operand always yields a Vector.
        """
        return (self.normal_matrix @ normal).normalize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return self.matrix == other.matrix

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.components is not None:
            t, r, s = self.components
            return f"Transform(translation={t}, rotation={r}, scale={s})"
        return f"Transform({self.matrix!r})"
