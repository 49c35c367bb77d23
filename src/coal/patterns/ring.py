"""Ring pattern: concentric rings in the xz plane."""

from __future__ import annotations

import math

from src.coal.core.tuples import Color, Point
from src.coal.patterns.pattern import TwoColorPattern


class RingPattern(TwoColorPattern):
    """Alternates colors by the floor of the distance from the y axis."""

    variant_tag = "ring"

    def local_color_at(self, point: Point) -> Color:
        radius = math.sqrt(point.x * point.x + point.z * point.z)
        if math.floor(radius) % 2 == 0:
            return self.first
        return self.second
