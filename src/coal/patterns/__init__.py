"""Procedural patterns applied to materials.

Components:
    pattern: Pattern base class, two-color base and the solid pattern
    stripe: Stripes alternating along x
    gradient: Linear blend along x
    ring: Concentric rings around the y axis
    checker: Three-dimensional checkerboard

Importing this package registers every variant for deserialization.
"""

from .checker import CheckerPattern
from .gradient import GradientPattern
from .pattern import Pattern, SolidPattern, TwoColorPattern, pattern_class_for
from .ring import RingPattern
from .stripe import StripePattern

__all__ = [
    "Pattern",
    "TwoColorPattern",
    "SolidPattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckerPattern",
    "pattern_class_for",
]
