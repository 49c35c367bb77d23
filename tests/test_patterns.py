"""Unit tests for procedural patterns.

Tests cover:
- Solid, stripe, gradient, ring and checker evaluation in pattern space
- Object and pattern transforms applied when sampling on a shape
- Immutability of with_transform
- Variant registry lookup
"""

import pytest

from src.coal.core.errors import UnknownVariantError
from src.coal.core.matrix import IDENTITY, Matrix4
from src.coal.core.tuples import BLACK, WHITE, Color, Point
from src.coal.geometry.sphere import Sphere
from src.coal.patterns import (
    CheckerPattern,
    GradientPattern,
    RingPattern,
    SolidPattern,
    StripePattern,
    pattern_class_for,
)


class TestSolidPattern:
    """Tests for SolidPattern."""

    def test_same_color_everywhere(self):
        """Test a solid pattern ignores the point."""
        red = Color(1, 0, 0)
        pattern = SolidPattern(red)
        for point in (Point(0, 0, 0), Point(10, -3, 2.5)):
            assert pattern.local_color_at(point) == red


class TestStripePattern:
    """Tests for StripePattern."""

    def test_defaults(self):
        """Test the stripe colors default to white then black."""
        pattern = StripePattern()
        assert pattern.first == WHITE
        assert pattern.second == BLACK
        assert pattern.transform == IDENTITY

    @pytest.mark.parametrize("point", [Point(0, 0, 0), Point(0, 1, 0), Point(0, 2, 0)])
    def test_constant_in_y(self, point):
        """Test stripes do not vary along y."""
        assert StripePattern(WHITE, BLACK).local_color_at(point) == WHITE

    @pytest.mark.parametrize("point", [Point(0, 0, 0), Point(0, 0, 1), Point(0, 0, 2)])
    def test_constant_in_z(self, point):
        """Test stripes do not vary along z."""
        assert StripePattern(WHITE, BLACK).local_color_at(point) == WHITE

    @pytest.mark.parametrize(
        "x,expected",
        [(0, WHITE), (0.9, WHITE), (1, BLACK), (-0.1, BLACK), (-1, BLACK), (-1.1, WHITE)],
    )
    def test_alternates_in_x(self, x, expected):
        """Test stripes alternate every unit of x, including negative x."""
        assert StripePattern(WHITE, BLACK).local_color_at(Point(x, 0, 0)) == expected

    def test_object_transform(self):
        """Test sampling accounts for the shape's transform."""
        shape = Sphere().set_transform(scale=(2, 2, 2))
        assert StripePattern(WHITE, BLACK).color_at(shape, Point(1.5, 0, 0)) == WHITE

    def test_pattern_transform(self):
        """Test sampling accounts for the pattern's transform."""
        pattern = StripePattern(WHITE, BLACK).with_transform(scale=(2, 2, 2))
        assert pattern.color_at(Sphere(), Point(1.5, 0, 0)) == WHITE

    def test_object_and_pattern_transform(self):
        """Test both transforms apply, object first."""
        shape = Sphere().set_transform(scale=(2, 2, 2))
        pattern = StripePattern(WHITE, BLACK).with_transform(translation=(0.5, 0, 0))
        assert pattern.color_at(shape, Point(2.5, 0, 0)) == WHITE


class TestGradientPattern:
    """Tests for GradientPattern."""

    @pytest.mark.parametrize(
        "x,expected",
        [
            (0, WHITE),
            (0.25, Color(0.75, 0.75, 0.75)),
            (0.5, Color(0.5, 0.5, 0.5)),
            (0.75, Color(0.25, 0.25, 0.25)),
        ],
    )
    def test_linear_interpolation(self, x, expected):
        """Test the gradient blends linearly over one unit of x."""
        assert GradientPattern(WHITE, BLACK).local_color_at(Point(x, 0, 0)) == expected

    def test_repeats_every_unit(self):
        """Test only the fractional part of x is used."""
        pattern = GradientPattern(WHITE, BLACK)
        assert pattern.local_color_at(Point(1.25, 0, 0)) == Color(0.75, 0.75, 0.75)


class TestRingPattern:
    """Tests for RingPattern."""

    @pytest.mark.parametrize(
        "point,expected",
        [
            (Point(0, 0, 0), WHITE),
            (Point(1, 0, 0), BLACK),
            (Point(0, 0, 1), BLACK),
            (Point(0.708, 0, 0.708), BLACK),
            (Point(2, 5, 0), WHITE),
        ],
    )
    def test_rings_in_x_and_z(self, point, expected):
        """Test rings alternate with distance from the y axis."""
        assert RingPattern(WHITE, BLACK).local_color_at(point) == expected


class TestCheckerPattern:
    """Tests for CheckerPattern."""

    @pytest.mark.parametrize(
        "point,expected",
        [
            (Point(0, 0, 0), WHITE),
            (Point(0.99, 0, 0), WHITE),
            (Point(1.01, 0, 0), BLACK),
            (Point(0, 0.99, 0), WHITE),
            (Point(0, 1.01, 0), BLACK),
            (Point(0, 0, 0.99), WHITE),
            (Point(0, 0, 1.01), BLACK),
            (Point(1.01, 1.01, 0), WHITE),
        ],
    )
    def test_repeats_in_each_dimension(self, point, expected):
        """Test checkers alternate on every axis."""
        assert CheckerPattern(WHITE, BLACK).local_color_at(point) == expected


class TestPatternBehavior:
    """Tests for behavior shared by all patterns."""

    def test_echo_pattern_with_object_transform(self, echo_pattern):
        """Test the point is mapped into object space."""
        shape = Sphere().set_transform(scale=(2, 2, 2))
        assert echo_pattern.color_at(shape, Point(2, 3, 4)) == Color(1, 1.5, 2)

    def test_echo_pattern_with_pattern_transform(self, echo_pattern):
        """Test the point is mapped into pattern space."""
        pattern = echo_pattern.with_transform(scale=(2, 2, 2))
        assert pattern.color_at(Sphere(), Point(2, 3, 4)) == Color(1, 1.5, 2)

    def test_echo_pattern_with_both_transforms(self, echo_pattern):
        """Test object then pattern transforms are both inverted."""
        shape = Sphere().set_transform(scale=(2, 2, 2))
        pattern = echo_pattern.with_transform(translation=(0.5, 1, 1.5))
        assert pattern.color_at(shape, Point(2.5, 3, 3.5)) == Color(0.75, 0.5, 0.25)

    def test_with_transform_returns_new_pattern(self):
        """Test the original pattern keeps its transform."""
        original = StripePattern(WHITE, BLACK)
        moved = original.with_transform(Matrix4.translation(1, 2, 3))
        assert moved is not original
        assert original.transform == IDENTITY
        assert moved.transform == Matrix4.translation(1, 2, 3)
        assert moved.colors == original.colors

    def test_equality(self):
        """Test patterns compare by type, colors and transform."""
        assert StripePattern(WHITE, BLACK) == StripePattern(WHITE, BLACK)
        assert StripePattern(WHITE, BLACK) != StripePattern(BLACK, WHITE)
        assert StripePattern(WHITE, BLACK) != CheckerPattern(WHITE, BLACK)
        assert StripePattern() != StripePattern().with_transform(scale=(2, 1, 1))

    def test_registry(self):
        """Test variant tags resolve to classes and unknown tags fail."""
        assert pattern_class_for("stripe") is StripePattern
        assert pattern_class_for("checker") is CheckerPattern
        with pytest.raises(UnknownVariantError):
            pattern_class_for("perlin")
