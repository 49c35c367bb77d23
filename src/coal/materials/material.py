"""Surface material and the Phong local lighting model.

A Material holds the shading parameters of one shape plus an optional,
possibly shared, Pattern. Fields are validated on construction and on
assignment:

    - ambient, diffuse, specular must lie in [0, 1] and shininess must be
      non-negative. Out-of-range values are rejected: the previous value is
      kept and a validation failure is logged at WARNING level.
    - reflectiveness is clamped into [0, 1].
    - transparency and refractive_index are clamped to >= 0.

Defaults: white, ambient 0.1, diffuse 0.9, specular 0.9, shininess 200,
reflectiveness 0, transparency 0, refractive index 1 (vacuum).

Example:
    >>> from src.coal.materials.material import Material
    >>> m = Material()
    >>> m.diffuse = 1.5  # logged, ignored
    >>> m.diffuse
    0.9
    >>> m.reflectiveness = 3.0  # clamped
    >>> m.reflectiveness
    1.0
"""

from __future__ import annotations

import copy
import logging
import math
from typing import TYPE_CHECKING

from src.coal.core.tuples import BLACK, WHITE, Color, Point, Vector

if TYPE_CHECKING:
    from src.coal.geometry.shape import Shape
    from src.coal.patterns.pattern import Pattern
    from src.coal.scene.light import PointLight

logger = logging.getLogger(__name__)

DEFAULT_AMBIENT = 0.1
DEFAULT_DIFFUSE = 0.9
DEFAULT_SPECULAR = 0.9
DEFAULT_SHININESS = 200.0
DEFAULT_REFLECTIVENESS = 0.0
DEFAULT_TRANSPARENCY = 0.0
DEFAULT_REFRACTIVE_INDEX = 1.0

# Fields compared by __eq__ and written by the serializer, in record order
SCALAR_FIELDS = (
    "ambient",
    "diffuse",
    "specular",
    "shininess",
    "reflectiveness",
    "transparency",
    "refractive_index",
)


def _in_unit_range(value: float) -> bool:
    return 0.0 <= value <= 1.0


class Material:
    """Shading parameters of a surface.

    Attributes:
        color: Flat surface color, used when no pattern is attached.
        pattern: Optional pattern overriding the flat color. May be shared
            with other materials.
        ambient: Ambient reflection coefficient in [0, 1].
        diffuse: Diffuse reflection coefficient in [0, 1].
        specular: Specular reflection coefficient in [0, 1].
        shininess: Specular exponent, >= 0.
        reflectiveness: Mirror reflection weight in [0, 1] (clamped, NaN rejected).
        transparency: Refraction weight, >= 0 (clamped, NaN rejected).
        refractive_index: Index of refraction, >= 0 (clamped, NaN rejected).
    """

    def __init__(
        self,
        color: Color = WHITE,
        ambient: float = DEFAULT_AMBIENT,
        diffuse: float = DEFAULT_DIFFUSE,
        specular: float = DEFAULT_SPECULAR,
        shininess: float = DEFAULT_SHININESS,
        reflectiveness: float = DEFAULT_REFLECTIVENESS,
        transparency: float = DEFAULT_TRANSPARENCY,
        refractive_index: float = DEFAULT_REFRACTIVE_INDEX,
        pattern: Pattern | None = None,
    ) -> None:
        # Start from the defaults so a rejected argument leaves a valid value
        self._color = WHITE
        self._ambient = DEFAULT_AMBIENT
        self._diffuse = DEFAULT_DIFFUSE
        self._specular = DEFAULT_SPECULAR
        self._shininess = DEFAULT_SHININESS
        self._reflectiveness = DEFAULT_REFLECTIVENESS
        self._transparency = DEFAULT_TRANSPARENCY
        self._refractive_index = DEFAULT_REFRACTIVE_INDEX

        self.color = color
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.reflectiveness = reflectiveness
        self.transparency = transparency
        self.refractive_index = refractive_index
        self.pattern = pattern

    @staticmethod
    def _reject(field: str, value: object, constraint: str) -> None:
        logger.warning("Invalid %s %r rejected (must be %s); keeping previous value",
                       field, value, constraint)

    # =========================================================================
    # Validated fields
    # =========================================================================

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color) -> None:
        if not all(channel >= 0.0 for channel in value):
            self._reject("color", value, "non-negative in every channel")
            return
        self._color = value

    @property
    def ambient(self) -> float:
        return self._ambient

    @ambient.setter
    def ambient(self, value: float) -> None:
        if not _in_unit_range(value):
            self._reject("ambient", value, "in [0, 1]")
            return
        self._ambient = float(value)

    @property
    def diffuse(self) -> float:
        return self._diffuse

    @diffuse.setter
    def diffuse(self, value: float) -> None:
        if not _in_unit_range(value):
            self._reject("diffuse", value, "in [0, 1]")
            return
        self._diffuse = float(value)

    @property
    def specular(self) -> float:
        return self._specular

    @specular.setter
    def specular(self, value: float) -> None:
        if not _in_unit_range(value):
            self._reject("specular", value, "in [0, 1]")
            return
        self._specular = float(value)

    @property
    def shininess(self) -> float:
        return self._shininess

    @shininess.setter
    def shininess(self, value: float) -> None:
        if not value >= 0.0:
            self._reject("shininess", value, ">= 0")
            return
        self._shininess = float(value)

    @property
    def reflectiveness(self) -> float:
        return self._reflectiveness

    @reflectiveness.setter
    def reflectiveness(self, value: float) -> None:
        if math.isnan(value):
            self._reject("reflectiveness", value, "a number")
            return
        self._reflectiveness = min(max(float(value), 0.0), 1.0)

    @property
    def transparency(self) -> float:
        return self._transparency

    @transparency.setter
    def transparency(self, value: float) -> None:
        if math.isnan(value):
            self._reject("transparency", value, "a number")
            return
        self._transparency = max(float(value), 0.0)

    @property
    def refractive_index(self) -> float:
        return self._refractive_index

    @refractive_index.setter
    def refractive_index(self, value: float) -> None:
        if math.isnan(value):
            self._reject("refractive_index", value, "a number")
            return
        self._refractive_index = max(float(value), 0.0)

    # =========================================================================
    # Lighting
    # =========================================================================

    def surface_color(self, shape: Shape, point: Point) -> Color:
        """Resolve the effective color at a world point: pattern or flat color."""
        if self.pattern is not None:
            return self.pattern.color_at(shape, point)
        return self._color

    def lighting(
        self,
        light: PointLight,
        shape: Shape,
        point: Point,
        eyev: Vector,
        normalv: Vector,
        in_shadow: bool = False,
    ) -> Color:
        """Compute the Phong shading of a point lit by one light.

        Args:
            light: The point light.
            shape: The shape being shaded, used to sample the pattern.
            point: The world-space point being shaded.
            eyev: Unit vector from the point toward the eye.
            normalv: Unit surface normal at the point.
            in_shadow: Whether the point is occluded from the light.

        Returns:
            ambient + diffuse + specular, not clamped.
        """
        effective_color = self.surface_color(shape, point) * light.intensity
        ambient = effective_color * self._ambient

        if in_shadow:
            return ambient

        lightv = (light.position - point).normalize()
        light_dot_normal = lightv.dot(normalv)
        if light_dot_normal < 0.0:
            # Light is on the other side of the surface
            return ambient

        diffuse = effective_color * (self._diffuse * light_dot_normal)

        reflectv = (-lightv).reflect(normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            factor = math.pow(reflect_dot_eye, self._shininess)
            specular = light.intensity * (self._specular * factor)

        return ambient + diffuse + specular

    # =========================================================================
    # Value semantics
    # =========================================================================

    def copy(self) -> Material:
        """Return a copy sharing the same pattern instance."""
        return copy.copy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (
            self._color == other._color
            and all(getattr(self, f) == getattr(other, f) for f in SCALAR_FIELDS)
            and self.pattern == other.pattern
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{f}={getattr(self, f)!r}" for f in SCALAR_FIELDS)
        return f"Material(color={self._color!r}, {fields}, pattern={self.pattern!r})"
