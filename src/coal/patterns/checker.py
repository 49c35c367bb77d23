"""Checker pattern: alternating unit cubes in three dimensions."""

from __future__ import annotations

import math

from src.coal.core.tuples import Color, Point
from src.coal.patterns.pattern import TwoColorPattern


class CheckerPattern(TwoColorPattern):
    """Alternates colors by the parity of floor(x) + floor(y) + floor(z)."""

    variant_tag = "checker"

    def local_color_at(self, point: Point) -> Color:
        total = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
        if total % 2 == 0:
            return self.first
        return self.second
