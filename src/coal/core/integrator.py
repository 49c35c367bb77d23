"""Whitted-style light transport: local Phong lighting plus recursive
reflection and refraction.

Given a ray and a world, shade() finds the hit, sums the Phong contribution
of every light (with shadow rays cast from a point nudged off the surface),
and, while recursion depth remains, adds mirror reflection and Snell's-law
refraction. When a material is both reflective and transparent the two are
blended with the Schlick approximation of the Fresnel reflectance.

Termination:
    - Every recursive call decrements the remaining depth; at 0 the
      reflected and refracted terms are black.
    - Materials with (near) zero reflectiveness or transparency skip the
      corresponding recursive call.
    - Total internal reflection contributes black refraction.

Every function here is pure in its inputs. Rays can be shaded in parallel
as long as the world is not edited during the render pass (see shade_rays).

Note: this module imports the scene package, so it is not re-exported from
src.coal.core. Import it directly:
    from src.coal.core.integrator import shade

Example:
    >>> from src.coal.core.integrator import shade
    >>> from src.coal.core.ray import Ray
    >>> from src.coal.core.tuples import Point, Vector
    >>> from src.coal.scene.world import default_world
    >>> color = shade(Ray(Point(0, 0, -5), Vector(0, 0, 1)), default_world())
    >>> [round(c, 5) for c in color]
    [0.38066, 0.47583, 0.2855]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from src.coal.core.config import DEFAULT_MAX_DEPTH, RenderSettings
from src.coal.core.ray import Ray, refract
from src.coal.core.ray import schlick as schlick_reflectance
from src.coal.core.tuples import BLACK, EPSILON, Color
from src.coal.scene.intersection import HitComputations, prepare_computations
from src.coal.scene.light import PointLight
from src.coal.scene.world import World

logger = logging.getLogger(__name__)


def _resolve_lights(world: World, lights: Sequence[PointLight] | None) -> Sequence[PointLight]:
    return world.lights if lights is None else lights


# =============================================================================
# Shading
# =============================================================================


def shade(
    ray: Ray,
    world: World,
    lights: Sequence[PointLight] | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    background: Color = BLACK,
) -> Color:
    """Compute the color seen along a ray.

    Args:
        ray: The world-space ray.
        world: The scene.
        lights: Lights to shade with. Defaults to the world's lights.
        max_depth: Remaining recursion depth for reflection and refraction.
            0 yields local lighting only.
        background: Color for rays that hit nothing.

    Returns:
        The (unclamped) color along the ray.
    """
    intersections = world.intersect(ray)
    hit = intersections.hit()
    if hit is None:
        return background

    comps = prepare_computations(hit, ray, intersections)
    return shade_hit(world, comps, lights, max_depth, background)


def shade_hit(
    world: World,
    comps: HitComputations,
    lights: Sequence[PointLight] | None = None,
    remaining: int = DEFAULT_MAX_DEPTH,
    background: Color = BLACK,
) -> Color:
    """Shade a prepared hit: local lighting plus recursive terms.

    Args:
        world: The scene.
        comps: Precomputed hit state.
        lights: Lights to shade with. Defaults to the world's lights.
        remaining: Remaining recursion depth.
        background: Color for recursive rays that hit nothing.
    """
    lights = _resolve_lights(world, lights)
    material = comps.shape.material

    surface = BLACK
    for light in lights:
        in_shadow = world.is_shadowed(comps.over_point, light)
        surface = surface + material.lighting(
            light, comps.shape, comps.over_point, comps.eyev, comps.normalv, in_shadow
        )

    reflected = reflected_color(world, comps, lights, remaining, background)
    refracted = refracted_color(world, comps, lights, remaining, background)

    if material.reflectiveness > EPSILON and material.transparency > EPSILON:
        reflectance = schlick(comps)
        return surface + reflected * reflectance + refracted * (1.0 - reflectance)

    return surface + reflected + refracted


def reflected_color(
    world: World,
    comps: HitComputations,
    lights: Sequence[PointLight] | None = None,
    remaining: int = DEFAULT_MAX_DEPTH,
    background: Color = BLACK,
) -> Color:
    """Color contributed by mirror reflection, weighted by reflectiveness.

    Returns black at zero remaining depth or for non-reflective materials.
    """
    reflectiveness = comps.shape.material.reflectiveness
    if remaining <= 0 or reflectiveness < EPSILON:
        return BLACK

    reflect_ray = Ray(comps.over_point, comps.reflectv)
    color = shade(reflect_ray, world, lights, remaining - 1, background)
    return color * reflectiveness


def refracted_color(
    world: World,
    comps: HitComputations,
    lights: Sequence[PointLight] | None = None,
    remaining: int = DEFAULT_MAX_DEPTH,
    background: Color = BLACK,
) -> Color:
    """Color contributed by refraction, weighted by transparency.

    Returns black at zero remaining depth, for opaque materials and under
    total internal reflection.
    """
    transparency = comps.shape.material.transparency
    if remaining <= 0 or transparency < EPSILON:
        return BLACK

    direction = refract(comps.eyev, comps.normalv, comps.n1, comps.n2)
    if direction is None:
        return BLACK

    refract_ray = Ray(comps.under_point, direction)
    color = shade(refract_ray, world, lights, remaining - 1, background)
    return color * transparency


def schlick(comps: HitComputations) -> float:
    """Fresnel reflectance at a prepared hit (Schlick approximation)."""
    return schlick_reflectance(comps.eyev.dot(comps.normalv), comps.n1, comps.n2)


# =============================================================================
# Parallel evaluation
# =============================================================================


def shade_rays(
    rays: Iterable[Ray],
    world: World,
    lights: Sequence[PointLight] | None = None,
    settings: RenderSettings | None = None,
) -> list[Color]:
    """Shade independent rays, in parallel when settings allow it.

    The world must not be modified while this runs. Results are returned in
    the order of the input rays.

    Args:
        rays: Rays to shade.
        world: The scene.
        lights: Lights to shade with. Defaults to the world's lights.
        settings: Depth, background and worker count. Defaults to
            RenderSettings() (single worker).
    """
    settings = settings or RenderSettings()
    lights = _resolve_lights(world, lights)
    rays = list(rays)

    def _shade_one(ray: Ray) -> Color:
        return shade(ray, world, lights, settings.max_depth, settings.background)

    logger.debug("Shading %d rays with %d worker(s), max depth %d",
                 len(rays), settings.workers, settings.max_depth)

    if settings.workers == 1 or len(rays) < 2:
        return [_shade_one(ray) for ray in rays]

    with ThreadPoolExecutor(max_workers=settings.workers) as executor:
        return list(executor.map(_shade_one, rays))
