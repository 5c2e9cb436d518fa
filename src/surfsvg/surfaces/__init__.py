"""
Surface functions.

Closed set of elevation formulas sampled by the renderer:

- ripple: sin(r)/r, undefined at the origin
- eggbox: (sin x + sin y)/10
- moguls: tilted plane with a cosine bump pattern
- saddle: hyperbolic paraboloid
- flat: z = 0 everywhere
"""

from .functions import (
    Surface,
    surface_from_name,
    corner,
    elevation,
    surface_corner,
)

__all__ = [
    "Surface",
    "surface_from_name",
    "corner",
    "elevation",
    "surface_corner",
]
