"""Unit tests for the per-object Transform.

Tests cover:
- Composition order (scale, then rotate, then translate)
- Cached inverse and inverse-transpose
- Singular transforms
- Mapping rays, points and normals between spaces
"""

import math

import pytest

from src.coal.core.errors import SingularMatrixError
from src.coal.core.matrix import IDENTITY, Matrix4
from src.coal.core.ray import Ray
from src.coal.core.transform import Transform, compose_matrix
from src.coal.core.tuples import Point, Vector


class TestCompose:
    """Tests for building transforms from component triples."""

    def test_identity(self):
        """Test the identity transform has identity matrices."""
        t = Transform.identity()
        assert t.matrix == IDENTITY
        assert t.inverse == IDENTITY
        assert t.normal_matrix == IDENTITY

    def test_scale_then_rotate_then_translate(self):
        """Test composed components apply in T @ R @ S order."""
        t = Transform.compose(
            translation=(10, 5, 7), rotation=(math.pi / 2, 0, 0), scale=(5, 5, 5)
        )
        assert t.matrix @ Point(1, 0, 1) == Point(15, 0, 7)

    def test_rotation_applies_x_first(self):
        """Test R = Rz @ Ry @ Rx."""
        matrix = compose_matrix((0, 0, 0), (0.3, 0.5, 0.7), (1, 1, 1))
        expected = Matrix4.rotation_z(0.7) @ Matrix4.rotation_y(0.5) @ Matrix4.rotation_x(0.3)
        assert matrix == expected

    def test_components_are_remembered(self):
        """Test composed transforms keep their triples."""
        t = Transform.compose(translation=(1, 2, 3))
        assert t.components == ((1.0, 2.0, 3.0), (0.0, 0.0, 0.0), (1.0, 1.0, 1.0))

    def test_raw_matrix_has_no_components(self):
        """Test a transform built from a matrix has no triples."""
        assert Transform(Matrix4.shearing(1, 0, 0, 0, 0, 0)).components is None

    def test_wrong_length_triple_rejected(self):
        """Test component triples must have three values."""
        with pytest.raises(ValueError):
            Transform.compose(scale=(1, 2))

    def test_zero_scale_fails_at_set_time(self):
        """Test a singular transform is rejected when it is built."""
        with pytest.raises(SingularMatrixError):
            Transform.compose(scale=(1, 0, 1))

    def test_inverse_is_cached_and_correct(self):
        """Test the inverse undoes the matrix."""
        t = Transform.compose(translation=(1, -2, 3), rotation=(0.1, 0.2, 0.3), scale=(2, 3, 4))
        assert (t.inverse @ t.matrix).is_identity()
        assert t.normal_matrix == t.inverse.transpose()


class TestSpaceMapping:
    """Tests for moving values between world and object space."""

    def test_point_to_object_space(self):
        """Test world points are mapped with the inverse."""
        t = Transform.compose(translation=(5, 0, 0))
        assert t.to_object_space(Point(6, 0, 0)) == Point(1, 0, 0)

    def test_ray_to_object_space(self):
        """Test rays are mapped with the inverse, direction unnormalized."""
        t = Transform.compose(scale=(2, 2, 2))
        ray = t.ray_to_object_space(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert ray.origin == Point(0, 0, -2.5)
        assert ray.direction == Vector(0, 0, 0.5)

    def test_normal_to_world_translated(self):
        """Test translation does not affect normals."""
        t = Transform.compose(translation=(0, 1, 0))
        normal = Vector(0, 1, -1).normalize()
        assert t.normal_to_world(normal) == normal

    def test_normal_to_world_non_uniform_scale(self):
        """Test the inverse-transpose keeps normals perpendicular and unit length."""
        t = Transform.compose(scale=(1, 0.5, 1))
        normal = t.normal_to_world(Vector(0, math.sqrt(2) / 2, -math.sqrt(2) / 2))
        assert normal.magnitude() == pytest.approx(1.0)
        assert normal == Vector(0, 2, -1).normalize()

    def test_equality_compares_matrices(self):
        """Test transforms built differently but with equal matrices compare equal."""
        composed = Transform.compose(translation=(1, 2, 3))
        raw = Transform(Matrix4.translation(1, 2, 3))
        assert composed == raw
        assert composed != Transform.identity()
