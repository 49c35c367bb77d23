"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass

from src.coal.core.tuples import Color, Point


@dataclass(frozen=True)
class PointLight:
    """A light with no size, emitting from a single point.

    Lights are inputs to shading only; shapes do not own them.

    Attributes:
        position: World-space position of the light.
        intensity: Color and brightness of the emitted light.
    """

    position: Point
    intensity: Color
