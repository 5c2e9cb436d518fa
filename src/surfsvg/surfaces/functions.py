"""
Surface functions.

Each surface maps a world point (x, y) to an elevation z. Grid corners
(i, j) are mapped to world coordinates over the symmetric range
[-xyrange/2, xyrange/2]:

    x = xyrange · (i/cells - 0.5)
    y = xyrange · (j/cells - 0.5)

The set of surfaces is closed; `elevation` dispatches over the `Surface`
enum. All functions accept scalars or numpy arrays.

License: BSD-3-Clause
"""

import math
from enum import Enum

import numpy as np


class Surface(str, Enum):
    """Available surface functions."""

    RIPPLE = "ripple"
    EGGBOX = "eggbox"
    MOGULS = "moguls"
    SADDLE = "saddle"
    FLAT = "flat"


# Accepted names besides the enum values
ALIASES = {"sin": Surface.RIPPLE}

# eggbox
EGGBOX_DIVISOR = 10.0
# moguls: z = -a·x - b·cos(p·x)·cos(q·y)
MOGULS_A = 0.01
MOGULS_B = 0.01
MOGULS_P = 2 * math.pi / 10.0
MOGULS_Q = 2 * math.pi / 4.0
# saddle: z = (a·x)² - (b·y)²
SADDLE_A = 0.1
SADDLE_B = 0.05


def surface_from_name(name: str) -> Surface:
    """
    Look up a surface function by name.

    Parameters
    ----------
    name : str
        One of the `Surface` values, or an alias such as "sin".

    Returns
    -------
    surface : Surface

    Raises
    ------
    ValueError
        If the name does not denote a known surface.
    """
    if isinstance(name, Surface):
        return name
    key = str(name).strip().lower()
    if key in ALIASES:
        return ALIASES[key]
    try:
        return Surface(key)
    except ValueError:
        raise ValueError(f"Unknown surface function {name!r}") from None


def corner(
    i: int | np.ndarray,
    j: int | np.ndarray,
    cells: int,
    xyrange: float,
) -> tuple[float | np.ndarray, float | np.ndarray]:
    """Find the world point (x, y) at corner (i, j) of the lattice."""
    x = xyrange * (np.divide(i, cells) - 0.5)
    y = xyrange * (np.divide(j, cells) - 0.5)
    return x, y


def elevation(
    surface: Surface,
    x: float | np.ndarray,
    y: float | np.ndarray,
) -> float | np.ndarray:
    """
    Evaluate the elevation of a surface at world point(s) (x, y).

    Parameters
    ----------
    surface : Surface
        Surface function to evaluate.
    x, y : float or ndarray
        World coordinates. Arrays must broadcast together.

    Returns
    -------
    z : float or ndarray
        Elevation. Ripple is undefined at the origin (0/0) and returns NaN
        there; every other surface is finite for finite input.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    if surface is Surface.RIPPLE:
        r = np.hypot(x, y)  # distance from (0, 0)
        with np.errstate(divide="ignore", invalid="ignore"):
            z = np.sin(r) / r
    elif surface is Surface.EGGBOX:
        z = (np.sin(x) + np.sin(y)) / EGGBOX_DIVISOR
    elif surface is Surface.MOGULS:
        z = -MOGULS_A * x - MOGULS_B * np.cos(MOGULS_P * x) * np.cos(MOGULS_Q * y)
    elif surface is Surface.SADDLE:
        z = (SADDLE_A * x) ** 2 - (SADDLE_B * y) ** 2
    elif surface is Surface.FLAT:
        z = np.zeros(np.broadcast(x, y).shape)
    else:
        raise ValueError(f"Unknown surface function {surface!r}")

    if z.ndim == 0:
        return float(z)
    return z


def surface_corner(
    surface: Surface,
    i: int | np.ndarray,
    j: int | np.ndarray,
    cells: int,
    xyrange: float,
):
    """Return the world point (x, y, z) of `surface` at lattice corner (i, j)."""
    x, y = corner(i, j, cells, xyrange)
    return x, y, elevation(surface, x, y)
