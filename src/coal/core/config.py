"""Process-wide configuration read once at import.

Values come from environment variables. The core never consults this module
implicitly: callers read RenderSettings here (typically at startup) and pass
``max_depth`` or the settings object explicitly into the shading engine.

Environment variables:
    COAL_MAX_DEPTH: Recursion limit for reflection/refraction (default 5).
    COAL_WORKERS: Thread count for parallel ray evaluation (default: CPU count).
    COAL_LOG_LEVEL: Logging level name (default WARNING).
    COAL_LOG_FORMAT: logging.Formatter format string.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from src.coal.core.tuples import BLACK, Color

DEFAULT_MAX_DEPTH = 5

MAX_DEPTH = int(os.getenv("COAL_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
WORKERS = int(os.getenv("COAL_WORKERS", "0")) or (os.cpu_count() or 1)

LOG_LEVEL = os.getenv("COAL_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("COAL_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


@dataclass(frozen=True)
class RenderSettings:
    """Settings passed explicitly into the shading engine.

    Attributes:
        max_depth: Maximum recursion depth for reflected and refracted rays.
            0 disables recursion (local lighting only).
        workers: Number of threads used by shade_rays.
        background: Color returned for rays that hit nothing.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    workers: int = 1
    background: Color = field(default_factory=lambda: BLACK)

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @classmethod
    def from_env(cls) -> RenderSettings:
        """Build settings from the values read at import time."""
        return cls(max_depth=MAX_DEPTH, workers=WORKERS)
