"""Intersection records and ordered intersection sets.

An Intersection tags a parametric distance t with the shape that produced it.
Intersections keeps a ray's intersections sorted by ascending t (stable, so
equal t values keep their encounter order) and selects the hit: the first
intersection with t >= 0.

Example:
    >>> from src.coal.geometry.intersection import Intersection, Intersections
    >>> from src.coal.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> xs = Intersections([Intersection(5, s), Intersection(-3, s), Intersection(2, s)])
    >>> xs.hit().t
    2
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from src.coal.geometry.shape import Shape


@dataclass(frozen=True, eq=False)
class Intersection:
    """A single ray-shape intersection.

    Attributes:
        t: Parametric distance along the ray.
        shape: The intersected shape.
    """

    t: float
    shape: Shape

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.shape is other.shape

    __hash__ = None  # type: ignore[assignment]


class Intersections(Sequence[Intersection]):
    """An immutable collection of intersections sorted by ascending t."""

    __slots__ = ("_items",)

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        # sorted() is stable, ties keep encounter order
        self._items: tuple[Intersection, ...] = tuple(sorted(intersections, key=lambda i: i.t))

    @overload
    def __getitem__(self, index: int) -> Intersection: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Intersection, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __add__(self, other: Iterable[Intersection]) -> Intersections:
        return Intersections((*self._items, *other))

    def __repr__(self) -> str:
        return f"Intersections({list(self._items)!r})"

    def hit(self) -> Intersection | None:
        """Return the nearest intersection with t >= 0, or None."""
        for intersection in self._items:
            if intersection.t >= 0:
                return intersection
        return None


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """Select the hit from an arbitrary iterable of intersections.

    Args:
        intersections: Intersections in any order.

    Returns:
        The intersection with the smallest non-negative t (the earliest one
        on ties), or None if every t is negative.
    """
    if not isinstance(intersections, Intersections):
        intersections = Intersections(intersections)
    return intersections.hit()
