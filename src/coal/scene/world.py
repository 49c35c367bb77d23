"""World: the ordered collection of shapes and lights a ray is traced against.

The shading engine only reads a World. Editing it (adding shapes, changing
materials) must happen before or after a render pass, never during one,
which is what lets rays be evaluated in parallel without locking.

Example:
    >>> from src.coal.core.tuples import Point, WHITE
    >>> from src.coal.geometry.sphere import Sphere
    >>> from src.coal.scene.light import PointLight
    >>> world = World()
    >>> world.add(Sphere())
    >>> world.add_light(PointLight(Point(-10, 10, -10), WHITE))
    >>> len(world.shapes), len(world.lights)
    (1, 1)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.coal.core.ray import Ray
from src.coal.core.tuples import EPSILON, WHITE, Color, Point
from src.coal.geometry.intersection import Intersections
from src.coal.geometry.shape import Shape
from src.coal.geometry.sphere import Sphere
from src.coal.materials.material import Material
from src.coal.scene.intersection import intersect_scene
from src.coal.scene.light import PointLight

logger = logging.getLogger(__name__)


class World:
    """An ordered collection of shapes and a collection of lights.

    Attributes:
        shapes: Shapes in insertion order. The order breaks ties between
            intersections at equal t.
        lights: Point lights illuminating the scene.
    """

    def __init__(self, shapes: Iterable[Shape] = (),
                 lights: Iterable[PointLight] = ()) -> None:
        self.shapes: list[Shape] = list(shapes)
        self.lights: list[PointLight] = list(lights)

    def add(self, *shapes: Shape) -> None:
        """Append shapes to the world."""
        self.shapes.extend(shapes)

    def add_light(self, light: PointLight) -> None:
        """Append a light to the world."""
        self.lights.append(light)

    def clear(self) -> None:
        """Remove all shapes and lights."""
        self.shapes.clear()
        self.lights.clear()

    def __contains__(self, shape: object) -> bool:
        return any(shape == existing for existing in self.shapes)

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a ray with every shape, sorted by ascending t."""
        return intersect_scene(ray, self)

    def is_shadowed(self, point: Point, light: PointLight) -> bool:
        """Check whether any shape lies strictly between point and light.

        Args:
            point: World-space point, already nudged off its surface.
            light: The light to test visibility of.
        """
        to_light = light.position - point
        distance = to_light.magnitude()
        if distance < EPSILON:
            # Light sits on the point; nothing can lie between them
            return False
        shadow_ray = Ray(point, to_light.normalize())

        hit = self.intersect(shadow_ray).hit()
        return hit is not None and hit.t < distance

    def __repr__(self) -> str:
        return f"World(shapes={len(self.shapes)}, lights={len(self.lights)})"


def default_world() -> World:
    """Build the reference scene: two concentric spheres and one light.

    The outer unit sphere is greenish with diffuse 0.7 and specular 0.2; the
    inner sphere is scaled by 0.5 with the default material. The light is
    white at (-10, 10, -10).
    """
    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere().set_transform(scale=(0.5, 0.5, 0.5))
    light = PointLight(Point(-10.0, 10.0, -10.0), WHITE)
    logger.debug("Built default world")
    return World([outer, inner], [light])
