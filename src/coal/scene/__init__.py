"""Scene module: world container, lights, hit preparation and records.

Components:
    light: Point light source
    world: Ordered shapes and lights, shadow queries, the default scene
    intersection: Scene-level intersection and hit computations
        (eye/normal vectors, surface offsets, refractive indices)
    serialization: Field-keyed records and JSON for shapes, materials,
        patterns, lights and worlds
"""

from .intersection import (
    SURFACE_OFFSET,
    HitComputations,
    intersect_scene,
    prepare_computations,
    refractive_indices,
)
from .light import PointLight
from .serialization import (
    dumps,
    light_from_dict,
    light_to_dict,
    loads,
    material_from_dict,
    material_to_dict,
    pattern_from_dict,
    pattern_to_dict,
    shape_from_dict,
    shape_to_dict,
    world_from_dict,
    world_to_dict,
)
from .world import World, default_world

__all__ = [
    # Intersection module
    "HitComputations",
    "intersect_scene",
    "prepare_computations",
    "refractive_indices",
    "SURFACE_OFFSET",
    # Lights and world
    "PointLight",
    "World",
    "default_world",
    # Serialization module
    "shape_to_dict",
    "shape_from_dict",
    "material_to_dict",
    "material_from_dict",
    "pattern_to_dict",
    "pattern_from_dict",
    "light_to_dict",
    "light_from_dict",
    "world_to_dict",
    "world_from_dict",
    "dumps",
    "loads",
]
