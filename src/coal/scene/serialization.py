"""Conversion of shapes, materials, patterns, lights and worlds to and from
field-keyed records.

Records are plain dictionaries that round-trip through JSON. A shape record
carries its variant tag, its transform as translation/rotation/scale
triples (or a raw "transform" matrix when it was not composed from
components) and a nested material record, which may nest a pattern record:

    {
        "type": "sphere",
        "translation": [0, 1, 0],
        "rotation": [0, 0, 0],
        "scale": [1, 1, 1],
        "material": {
            "color": [1, 1, 1],
            "ambient": 0.1, "diffuse": 0.9, "specular": 0.9,
            "shininess": 200, "reflectiveness": 0, "transparency": 0,
            "refractive_index": 1,
            "pattern": {"type": "stripe", "colors": [[1, 1, 1], [0, 0, 0]],
                        "translation": [0, 0, 0], "rotation": [0, 0, 0],
                        "scale": [1, 1, 1]}
        }
    }

Deserialization rebuilds transforms by re-applying translate, rotate and
scale in that fixed order, and raises UnknownVariantError for unknown shape
or pattern tags instead of guessing.

Example:
    >>> from src.coal.geometry.sphere import Sphere
    >>> from src.coal.scene.serialization import shape_from_dict, shape_to_dict
    >>> s = Sphere().set_transform(translation=(0, 1, 0))
    >>> shape_from_dict(shape_to_dict(s)) == s
    True
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from src.coal.core.errors import SerializationError
from src.coal.core.matrix import Matrix4
from src.coal.core.transform import UNIT_TRIPLE, ZERO_TRIPLE, Transform
from src.coal.core.tuples import Color, Point

# Importing the variant packages registers every shape and pattern tag
from src.coal.geometry import Shape, shape_class_for
from src.coal.materials.material import SCALAR_FIELDS, Material
from src.coal.patterns import Pattern, pattern_class_for
from src.coal.scene.light import PointLight
from src.coal.scene.world import World

logger = logging.getLogger(__name__)


# =============================================================================
# Field helpers
# =============================================================================


def _require(record: Mapping[str, Any], key: str, kind: str) -> Any:
    try:
        return record[key]
    except KeyError:
        raise SerializationError(f"{kind} record is missing required field {key!r}") from None


def _triple(value: Any, name: str) -> tuple[float, float, float]:
    if not isinstance(value, Sequence) or isinstance(value, str) or len(value) != 3:
        raise SerializationError(f"Field {name!r} must be a list of three numbers, got {value!r}")
    try:
        return (float(value[0]), float(value[1]), float(value[2]))
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Field {name!r} must contain numbers, got {value!r}") from exc


def _color(value: Any, name: str = "color") -> Color:
    return Color(*_triple(value, name))


def _bound(value: float) -> float | None:
    # JSON has no infinity; unbounded ends are written as null
    return None if math.isinf(value) else value


def _transform_to_dict(transform_components: tuple | None, matrix: Matrix4) -> dict[str, Any]:
    if transform_components is None:
        return {"transform": matrix.to_list()}
    translation, rotation, scale = transform_components
    return {
        "translation": list(translation),
        "rotation": list(rotation),
        "scale": list(scale),
    }


def _transform_from_dict(record: Mapping[str, Any]) -> Transform:
    if "transform" in record:
        try:
            matrix = Matrix4(record["transform"])
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Invalid transform matrix: {exc}") from exc
        return Transform(matrix)
    return Transform.compose(
        translation=_triple(record.get("translation", ZERO_TRIPLE), "translation"),
        rotation=_triple(record.get("rotation", ZERO_TRIPLE), "rotation"),
        scale=_triple(record.get("scale", UNIT_TRIPLE), "scale"),
    )


# =============================================================================
# Patterns
# =============================================================================


def pattern_to_dict(pattern: Pattern) -> dict[str, Any]:
    """Export a pattern to a record."""
    return {
        "type": pattern.variant_tag,
        "colors": [color.to_list() for color in pattern.colors],
        **_transform_to_dict(pattern.transform_components, pattern.transform),
    }


def pattern_from_dict(record: Mapping[str, Any]) -> Pattern:
    """Build a pattern from a record.

    Raises:
        UnknownVariantError: If the pattern type is not registered.
        SerializationError: If a field is missing or malformed.
    """
    pattern_class = pattern_class_for(_require(record, "type", "Pattern"))
    colors = [_color(c, "colors") for c in _require(record, "colors", "Pattern")]
    try:
        return pattern_class(*colors, transform=_transform_from_dict(record))
    except TypeError as exc:
        raise SerializationError(
            f"Wrong number of colors for pattern {pattern_class.variant_tag!r}: {len(colors)}"
        ) from exc


# =============================================================================
# Materials
# =============================================================================


def material_to_dict(material: Material) -> dict[str, Any]:
    """Export a material (and its pattern, if any) to a record."""
    record: dict[str, Any] = {"color": material.color.to_list()}
    for name in SCALAR_FIELDS:
        record[name] = getattr(material, name)
    record["pattern"] = None if material.pattern is None else pattern_to_dict(material.pattern)
    return record


def material_from_dict(record: Mapping[str, Any]) -> Material:
    """Build a material from a record.

    Missing scalar fields take their defaults. Out-of-range values go through
    the usual material validation (logged and ignored, or clamped).
    """
    kwargs: dict[str, Any] = {}
    if "color" in record:
        kwargs["color"] = _color(record["color"])
    for name in SCALAR_FIELDS:
        if name in record:
            try:
                kwargs[name] = float(record[name])
            except (TypeError, ValueError) as exc:
                raise SerializationError(
                    f"Material field {name!r} must be a number, got {record[name]!r}"
                ) from exc
    pattern_record = record.get("pattern")
    if pattern_record is not None:
        kwargs["pattern"] = pattern_from_dict(pattern_record)
    return Material(**kwargs)


# =============================================================================
# Shapes
# =============================================================================


def shape_to_dict(shape: Shape) -> dict[str, Any]:
    """Export a shape to a record."""
    record: dict[str, Any] = {"type": shape.variant_tag}
    record.update(_transform_to_dict(shape.transform_components, shape.transform))
    for name, value in shape.geometry_params().items():
        record[name] = _bound(value) if isinstance(value, float) else value
    record["material"] = material_to_dict(shape.material)
    return record


def shape_from_dict(record: Mapping[str, Any]) -> Shape:
    """Build a shape from a record.

    Raises:
        UnknownVariantError: If the shape type is not registered.
        SerializationError: If a field is missing or malformed.
    """
    shape_class = shape_class_for(_require(record, "type", "Shape"))

    kwargs: dict[str, Any] = {}
    if "minimum" in record or "maximum" in record or "closed" in record:
        minimum = record.get("minimum")
        maximum = record.get("maximum")
        kwargs["minimum"] = -math.inf if minimum is None else float(minimum)
        kwargs["maximum"] = math.inf if maximum is None else float(maximum)
        kwargs["closed"] = bool(record.get("closed", False))

    try:
        shape = shape_class(**kwargs)
    except TypeError as exc:
        raise SerializationError(
            f"Shape type {shape_class.variant_tag!r} does not accept {sorted(kwargs)}"
        ) from exc

    shape.transform = _transform_from_dict(record)
    if "material" in record:
        shape.material = material_from_dict(record["material"])
    return shape


# =============================================================================
# Lights and worlds
# =============================================================================


def light_to_dict(light: PointLight) -> dict[str, Any]:
    """Export a point light to a record."""
    return {"position": light.position.to_list(), "intensity": light.intensity.to_list()}


def light_from_dict(record: Mapping[str, Any]) -> PointLight:
    """Build a point light from a record."""
    position = _triple(_require(record, "position", "Light"), "position")
    intensity = _color(_require(record, "intensity", "Light"), "intensity")
    return PointLight(Point(*position), intensity)


def world_to_dict(world: World) -> dict[str, Any]:
    """Export a world to a record with "shapes" and "lights" lists."""
    return {
        "shapes": [shape_to_dict(shape) for shape in world.shapes],
        "lights": [light_to_dict(light) for light in world.lights],
    }


def world_from_dict(record: Mapping[str, Any]) -> World:
    """Build a world from a record with "shapes" and "lights" lists."""
    shapes = [shape_from_dict(r) for r in record.get("shapes", [])]
    lights = [light_from_dict(r) for r in record.get("lights", [])]
    logger.debug("Loaded world with %d shapes and %d lights", len(shapes), len(lights))
    return World(shapes, lights)


def dumps(world: World, **kwargs: Any) -> str:
    """Serialize a world to JSON text. Extra arguments go to json.dumps."""
    return json.dumps(world_to_dict(world), **kwargs)


def loads(text: str) -> World:
    """Deserialize a world from JSON text.

    Raises:
        SerializationError: If the text is not valid JSON or a record is
            malformed.
        UnknownVariantError: If a shape or pattern type is not registered.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid scene JSON: {exc}") from exc
    if not isinstance(data, Mapping):
        raise SerializationError("Scene JSON must be an object with 'shapes' and 'lights'")
    return world_from_dict(data)
