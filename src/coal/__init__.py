"""Whitted-style ray tracing core.

Given a ray and a scene of transformable shapes, the core finds what the ray
hits and computes the observed color from materials, procedural patterns,
point lights, shadows and recursive reflection/refraction.

Subpackages:
    core: Linear algebra, transforms, rays, configuration and the shading engine
    geometry: Shape primitives and intersection sets
    patterns: Procedural color patterns
    materials: Material parameters and Phong lighting
    scene: World container, lights, hit preparation and serialization
"""

__version__ = "0.1.0"
