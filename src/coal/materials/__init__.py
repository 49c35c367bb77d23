"""Materials module: surface parameters and the Phong lighting model.

Components:
    material: Validated shading parameters, optional shared pattern and
        the local lighting function
"""

from .material import (
    DEFAULT_AMBIENT,
    DEFAULT_DIFFUSE,
    DEFAULT_REFLECTIVENESS,
    DEFAULT_REFRACTIVE_INDEX,
    DEFAULT_SHININESS,
    DEFAULT_SPECULAR,
    DEFAULT_TRANSPARENCY,
    SCALAR_FIELDS,
    Material,
)

__all__ = [
    "Material",
    "SCALAR_FIELDS",
    "DEFAULT_AMBIENT",
    "DEFAULT_DIFFUSE",
    "DEFAULT_SPECULAR",
    "DEFAULT_SHININESS",
    "DEFAULT_REFLECTIVENESS",
    "DEFAULT_TRANSPARENCY",
    "DEFAULT_REFRACTIVE_INDEX",
]
