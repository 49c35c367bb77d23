"""Gradient pattern: linear blend between two colors along x."""

from __future__ import annotations

import math

from src.coal.core.tuples import Color, Point
from src.coal.patterns.pattern import TwoColorPattern


class GradientPattern(TwoColorPattern):
    """Blends from the first to the second color over each unit of x.

    Only the fractional part of x is used, so the gradient repeats.
    """

    variant_tag = "gradient"

    def local_color_at(self, point: Point) -> Color:
        distance = self.second - self.first
        fraction = point.x - math.floor(point.x)
        return self.first + distance * fraction
