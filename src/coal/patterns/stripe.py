"""Stripe pattern: alternates two colors along x."""

from __future__ import annotations

import math

from src.coal.core.tuples import Color, Point
from src.coal.patterns.pattern import TwoColorPattern


class StripePattern(TwoColorPattern):
    """Alternates the two colors every unit of x, independent of y and z.

    The first color covers x in [0, 1), the second x in [1, 2), and so on in
    both directions.
    """

    variant_tag = "stripe"

    def local_color_at(self, point: Point) -> Color:
        if math.floor(point.x) % 2 == 0:
            return self.first
        return self.second
