"""4x4 matrices for affine transforms.

Matrix4 wraps a read-only numpy array. Products with points and vectors use
homogeneous coordinates, so translations move points but leave vectors
unchanged.

Example:
    >>> from src.coal.core.matrix import Matrix4
    >>> from src.coal.core.tuples import Point
    >>> m = Matrix4.translation(5.0, -3.0, 2.0)
    >>> m @ Point(-3.0, 4.0, 5.0)
    Point(x=2.0, y=1.0, z=7.0)
    >>> (m.inverse() @ m).is_identity()
    True
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import overload

import numpy as np
import numpy.typing as npt

from src.coal.core.errors import SingularMatrixError
from src.coal.core.tuples import EPSILON, HomogeneousTuple, Point, Vector


class Matrix4:
    """An immutable 4x4 real-valued matrix.

    Attributes:
        data: The underlying (4, 4) float64 numpy array. It is marked
            read-only; derive new matrices instead of editing it.
    """

    __slots__ = ("data",)

    def __init__(self, rows: Sequence[Sequence[float]] | npt.ArrayLike) -> None:
        """Create a matrix from a nested sequence or an array.

        Args:
            rows: Four rows of four numbers each.

        Raises:
            ValueError: If the input is not 4x4.
        """
        data = np.array(rows, dtype=np.float64)
        if data.shape != (4, 4):
            raise ValueError(f"Matrix4 requires a 4x4 input, got shape {data.shape}")
        data.setflags(write=False)
        self.data = data

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def identity(cls) -> Matrix4:
        """Return the 4x4 identity matrix."""
        return cls(np.identity(4))

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix4:
        """Return a matrix translating points by (x, y, z)."""
        m = np.identity(4)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return cls(m)

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix4:
        """Return a matrix scaling by (x, y, z) about the origin."""
        return cls(np.diag([x, y, z, 1.0]))

    @classmethod
    def rotation_x(cls, radians: float) -> Matrix4:
        """Return a left-handed rotation about the x axis."""
        c, s = math.cos(radians), math.sin(radians)
        return cls([[1, 0, 0, 0], [0, c, -s, 0], [0, s, c, 0], [0, 0, 0, 1]])

    @classmethod
    def rotation_y(cls, radians: float) -> Matrix4:
        """Return a left-handed rotation about the y axis."""
        c, s = math.cos(radians), math.sin(radians)
        return cls([[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1]])

    @classmethod
    def rotation_z(cls, radians: float) -> Matrix4:
        """Return a left-handed rotation about the z axis."""
        c, s = math.cos(radians), math.sin(radians)
        return cls([[c, -s, 0, 0], [s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])

    @classmethod
    def shearing(
        cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> Matrix4:
        """Return a shearing matrix.

        Each argument moves one component in proportion to another, e.g. xy
        moves x in proportion to y.
        """
        return cls([[1, xy, xz, 0], [yx, 1, yz, 0], [zx, zy, 1, 0], [0, 0, 0, 1]])

    @classmethod
    def chain(cls, matrices: Iterable[Matrix4]) -> Matrix4:
        """Compose matrices in the order they are applied to a point.

        chain([A, B, C]) returns C @ B @ A.
        """
        result = np.identity(4)
        for m in matrices:
            result = m.data @ result
        return cls(result)

    # =========================================================================
    # Algebra
    # =========================================================================

    @overload
    def __matmul__(self, other: Matrix4) -> Matrix4: ...

    @overload
    def __matmul__(self, other: Point) -> Point: ...

    @overload
    def __matmul__(self, other: Vector) -> Vector: ...

    def __matmul__(self, other):
        if isinstance(other, Matrix4):
            return Matrix4(self.data @ other.data)
        if isinstance(other, HomogeneousTuple):
            x, y, z, _ = self.data @ np.array(other.to_homogeneous())
            # Affine matrices preserve w, so the operand type is kept
            return type(other)(float(x), float(y), float(z))
        return NotImplemented

    def transpose(self) -> Matrix4:
        """Return the transposed matrix."""
        return Matrix4(self.data.T)

    def determinant(self) -> float:
        """Return the determinant."""
        return float(np.linalg.det(self.data))

    def is_invertible(self) -> bool:
        """Check whether the matrix has full rank.

        The rank tolerance is relative to the largest singular value, so a
        small uniform scale such as 0.005 (determinant 1.25e-7) still counts
        as invertible while a zero scale on any axis does not.
        """
        return int(np.linalg.matrix_rank(self.data)) == 4

    def inverse(self) -> Matrix4:
        """Return the inverse matrix.

        Raises:
            SingularMatrixError: If the matrix is rank deficient.
        """
        if not self.is_invertible():
            raise SingularMatrixError(
                f"Matrix is not invertible (determinant {self.determinant():g})"
            )
        return Matrix4(np.linalg.inv(self.data))

    def is_identity(self) -> bool:
        """Check whether the matrix equals identity within EPSILON."""
        return bool(np.allclose(self.data, np.identity(4), rtol=0.0, atol=EPSILON))

    # =========================================================================
    # Access and comparison
    # =========================================================================

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self.data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.allclose(self.data, other.data, rtol=0.0, atol=EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix4({self.to_list()!r})"

    def to_list(self) -> list[list[float]]:
        """Return the matrix as four lists of four floats."""
        return self.data.tolist()


IDENTITY = Matrix4.identity()
