"""Pattern abstraction: procedural colors over pattern space.

A pattern owns its own transform, independent of the shape it is applied
to. Sampling a pattern on a shape maps the world point into the shape's
object space, then into pattern space, and finally evaluates the variant's
local_color_at. Scaling or rotating a pattern therefore changes its look
without touching the object's geometry.

Patterns are logically immutable: one instance may be shared by several
materials, so "changing" a pattern means building a new one with
with_transform().

Example:
    >>> from src.coal.core.tuples import Point, WHITE, BLACK
    >>> from src.coal.geometry.sphere import Sphere
    >>> from src.coal.patterns.stripe import StripePattern
    >>> pattern = StripePattern(WHITE, BLACK).with_transform(scale=(2, 2, 2))
    >>> pattern.color_at(Sphere(), Point(1.5, 0, 0)) == WHITE
    True
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, ClassVar

from src.coal.core.errors import UnknownVariantError
from src.coal.core.matrix import Matrix4
from src.coal.core.transform import UNIT_TRIPLE, ZERO_TRIPLE, Transform
from src.coal.core.tuples import BLACK, WHITE, Color, Point

if TYPE_CHECKING:
    from src.coal.geometry.shape import Shape

# Registry of concrete pattern classes keyed by variant tag
_PATTERN_TYPES: dict[str, type[Pattern]] = {}


def pattern_class_for(tag: str) -> type[Pattern]:
    """Look up a registered pattern class by its variant tag.

    Raises:
        UnknownVariantError: If no pattern is registered under tag.
    """
    try:
        return _PATTERN_TYPES[tag]
    except KeyError:
        raise UnknownVariantError(
            f"Unknown pattern type {tag!r}; expected one of {sorted(_PATTERN_TYPES)}"
        ) from None


class Pattern(ABC):
    """Base class for all patterns.

    Attributes:
        colors: The reference colors of the pattern, in order.
        variant_tag: Name used in serialized records.
    """

    variant_tag: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.variant_tag:
            _PATTERN_TYPES[cls.variant_tag] = cls

    def __init__(self, *colors: Color, transform: Matrix4 | Transform | None = None) -> None:
        self._colors: tuple[Color, ...] = colors
        if transform is None:
            self._transform = Transform.identity()
        elif isinstance(transform, Transform):
            self._transform = transform
        else:
            self._transform = Transform(transform)

    @property
    def colors(self) -> tuple[Color, ...]:
        return self._colors

    @property
    def transform(self) -> Matrix4:
        """Pattern-to-object matrix."""
        return self._transform.matrix

    @property
    def inverse_transform(self) -> Matrix4:
        return self._transform.inverse

    @property
    def transform_components(self) -> tuple[tuple[float, float, float], ...] | None:
        return self._transform.components

    def with_transform(self, matrix: Matrix4 | None = None, *,
                       translation: Sequence[float] = ZERO_TRIPLE,
                       rotation: Sequence[float] = ZERO_TRIPLE,
                       scale: Sequence[float] = UNIT_TRIPLE) -> Pattern:
        """Return a copy of this pattern with a different transform.

        Args:
            matrix: A raw transform matrix. When given, the component
                keywords are ignored.
            translation: Translation triple, used when matrix is None.
            rotation: Rotation triple in radians, used when matrix is None.
            scale: Scale triple, used when matrix is None.
        """
        if matrix is not None:
            transform = Transform(matrix)
        else:
            transform = Transform.compose(translation, rotation, scale)
        return type(self)(*self._colors, transform=transform)

    def color_at(self, shape: Shape, world_point: Point) -> Color:
        """Sample the pattern on a shape at a world-space point."""
        object_point = shape.world_to_object(world_point)
        pattern_point = self._transform.to_object_space(object_point)
        return self.local_color_at(pattern_point)

    @abstractmethod
    def local_color_at(self, point: Point) -> Color:
        """Evaluate the pattern at a pattern-space point."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._colors == other._colors
            and self._transform == other._transform
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        colors = ", ".join(repr(c) for c in self._colors)
        return f"{type(self).__name__}({colors})"


class TwoColorPattern(Pattern):
    """A pattern alternating or blending between two colors."""

    def __init__(self, first: Color = WHITE, second: Color = BLACK, *,
                 transform: Matrix4 | Transform | None = None) -> None:
        super().__init__(first, second, transform=transform)

    @property
    def first(self) -> Color:
        return self._colors[0]

    @property
    def second(self) -> Color:
        return self._colors[1]


class SolidPattern(Pattern):
    """A single flat color; useful as a nested default."""

    variant_tag = "solid"

    def __init__(self, color: Color = WHITE, *,
                 transform: Matrix4 | Transform | None = None) -> None:
        super().__init__(color, transform=transform)

    def local_color_at(self, point: Point) -> Color:
        return self._colors[0]
