"""Pytest configuration for ray tracing core tests.

This module provides shared fixtures for all test modules: the reference
world, a pattern that reports its sampling point as a color, and a helper
for building rays.
"""

import math

import pytest

from src.coal.core.ray import Ray
from src.coal.core.tuples import Color, Point, Vector
from src.coal.patterns.pattern import Pattern
from src.coal.scene.world import default_world

SQRT2_2 = math.sqrt(2.0) / 2.0


class EchoPattern(Pattern):
    """Pattern returning the pattern-space point as a color.

    Lets tests observe which point a pattern was sampled at. It declares no
    variant tag, so it is not registered for deserialization.
    """

    def __init__(self, *colors, transform=None):
        super().__init__(transform=transform)

    def local_color_at(self, point):
        return Color(point.x, point.y, point.z)


@pytest.fixture
def world():
    """The reference world: two concentric spheres lit from (-10, 10, -10)."""
    return default_world()


@pytest.fixture
def echo_pattern():
    """A pattern that returns its sampling point as a color."""
    return EchoPattern()


@pytest.fixture
def make_ray():
    """Build a ray from two coordinate triples."""

    def _make_ray(origin, direction):
        return Ray(Point(*origin), Vector(*direction))

    return _make_ray
