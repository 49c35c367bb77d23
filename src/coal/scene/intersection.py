"""Scene-level intersection testing and hit preparation.

intersect_scene collects every shape's intersections with a ray into one
ordered Intersections set. prepare_computations turns the hit of that set
into the precomputed state the shading engine needs: the surface point, the
eye and normal vectors, points nudged off the surface, and the refractive
indices on both sides of the surface.

Refractive indices come from an explicit containment list: walking the
ray's intersections in order, each one toggles its shape in or out of the
list of shapes the ray is currently inside. The list is rebuilt per ray from
that ray's own intersections, so the computation is a pure function of its
inputs and no state is carried between rays.

Example:
    >>> from src.coal.core.ray import Ray
    >>> from src.coal.core.tuples import Point, Vector
    >>> from src.coal.scene.world import default_world
    >>> world = default_world()
    >>> xs = intersect_scene(Ray(Point(0, 0, -5), Vector(0, 0, 1)), world)
    >>> [round(i.t, 6) for i in xs]
    [4.0, 4.5, 5.5, 6.0]
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.coal.core.ray import Ray
from src.coal.core.tuples import Point, Vector
from src.coal.geometry.intersection import Intersection, Intersections
from src.coal.geometry.shape import Shape

if TYPE_CHECKING:
    from src.coal.scene.world import World

# Distance a hit point is pushed along the normal to avoid self-intersection
SURFACE_OFFSET = 1e-5

# Refractive index of the medium outside every shape
VACUUM_INDEX = 1.0


def intersect_scene(ray: Ray, world: World) -> Intersections:
    """Intersect a ray with every shape in the world.

    Args:
        ray: The world-space ray.
        world: The scene to test against.

    Returns:
        All intersections, sorted by ascending t. Equal t values keep the
        order of the shapes in the world.
    """
    found: list[Intersection] = []
    for shape in world.shapes:
        found.extend(shape.intersect(ray))
    return Intersections(found)


@dataclass(frozen=True)
class HitComputations:
    """Precomputed state at a ray's hit, consumed by the shading engine.

    Attributes:
        t: Parametric distance of the hit.
        shape: The shape that was hit.
        point: World-space hit point.
        eyev: Unit vector from the point back toward the ray origin.
        normalv: Unit surface normal, flipped to face the eye.
        inside: Whether the ray origin was inside the shape.
        over_point: Point nudged along the normal, for shadow and reflection rays.
        under_point: Point nudged against the normal, for refraction rays.
        reflectv: Ray direction reflected about the normal.
        n1: Refractive index of the medium being exited.
        n2: Refractive index of the medium being entered.
    """

    t: float
    shape: Shape
    point: Point
    eyev: Vector
    normalv: Vector
    inside: bool
    over_point: Point
    under_point: Point
    reflectv: Vector
    n1: float
    n2: float


def refractive_indices(hit: Intersection,
                       intersections: Sequence[Intersection]) -> tuple[float, float]:
    """Compute (n1, n2) at a hit from the ray's ordered intersections.

    Shapes are tracked by identity, so two distinct but equal shapes are
    still entered and exited independently.

    Args:
        hit: The intersection being shaded. Must be one of intersections.
        intersections: All of the ray's intersections in ascending t.

    Returns:
        The refractive index on the incoming side and on the outgoing side.
    """
    containers: list[Shape] = []
    n1 = n2 = VACUUM_INDEX

    for intersection in intersections:
        is_hit = intersection is hit
        if is_hit:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        for index, shape in enumerate(containers):
            if shape is intersection.shape:
                del containers[index]
                break
        else:
            containers.append(intersection.shape)

        if is_hit:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            break

    return n1, n2


def prepare_computations(hit: Intersection, ray: Ray,
                         intersections: Sequence[Intersection] | None = None) -> HitComputations:
    """Precompute the shading state at a hit.

    Args:
        hit: The intersection to shade.
        ray: The ray that produced it.
        intersections: All of the ray's intersections, used for refractive
            indices. Defaults to just the hit.

    Returns:
        The HitComputations for the hit.
    """
    if intersections is None:
        intersections = (hit,)

    point = ray.position(hit.t)
    eyev = -ray.direction.normalize()
    normalv = hit.shape.normal_at(point)

    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    n1, n2 = refractive_indices(hit, intersections)

    offset = normalv * SURFACE_OFFSET
    return HitComputations(
        t=hit.t,
        shape=hit.shape,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        over_point=point + offset,
        under_point=point - offset,
        reflectv=(-eyev).reflect(normalv),
        n1=n1,
        n2=n2,
    )
