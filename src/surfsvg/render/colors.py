"""
Elevation color mapping.

A cell's mean elevation z is normalized against the observed range
[zmin, zmax] and used to blend the two endpoint colors channel by channel:

    t = (z - zmin) / (zmax - zmin)
    channel = peak · (1 - t) + valley · t

so t = 0 reproduces the peak color and t = 1 the valley color. Blended
channels are truncated to integers. When the range is collapsed
(zmax == zmin) or was never observed (no valid cells), t falls back to 0
and every cell takes the peak color.

License: BSD-3-Clause
"""

import re
from typing import NamedTuple

import numpy as np

_HEX_RE = re.compile(r"[0-9a-fA-F]{1,6}")


class Color(NamedTuple):
    """RGBA color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


WHITE = Color(255, 255, 255, 255)


def parse_hex_color(text: str) -> Color:
    """
    Parse a hexadecimal RGB string such as "ff8000".

    The value is read as a 24-bit big-endian integer (top byte red, low
    byte blue), so shorter strings are zero-padded on the left: "ff" is
    pure blue. Parsed colors are opaque.

    Raises
    ------
    ValueError
        If `text` is not 1 to 6 hexadecimal digits.
    """
    if not isinstance(text, str) or not _HEX_RE.fullmatch(text):
        raise ValueError(f"Expected 1 to 6 hexadecimal digits, got {text!r}")
    value = int(text, 16)
    return Color(value >> 16, (value >> 8) & 0xFF, value & 0xFF)


def format_hex_color(color) -> str:
    """Format the RGB channels of `color` as "#rrggbb"."""
    r, g, b = (int(c) for c in tuple(color)[:3])
    return f"#{r:02x}{g:02x}{b:02x}"


def elevation_fraction(
    z: float | np.ndarray,
    zmin: float,
    zmax: float,
) -> float | np.ndarray:
    """
    Position of elevation(s) `z` within [zmin, zmax].

    Returns 0 for every input when the range is empty, collapsed or
    non-finite.
    """
    span = zmax - zmin
    collapsed = not (np.isfinite(span) and span > 0)
    if np.ndim(z) == 0:
        return 0.0 if collapsed else (float(z) - zmin) / span
    z = np.asarray(z, dtype=float)
    if collapsed:
        return np.zeros_like(z)
    return (z - zmin) / span


def interpolate_color(t: float, peak: Color, valley: Color) -> Color:
    """Blend `peak` (t = 0) into `valley` (t = 1), keeping the peak alpha."""
    def channel(a, b):
        return int(a * (1 - t) + b * t)

    return Color(
        channel(peak.r, valley.r),
        channel(peak.g, valley.g),
        channel(peak.b, valley.b),
        peak.a,
    )


def zcolor(z: float, zmin: float, zmax: float, peak: Color, valley: Color) -> Color:
    """Color of a single cell with mean elevation `z`."""
    return interpolate_color(elevation_fraction(z, zmin, zmax), peak, valley)


def elevation_colors(
    z: np.ndarray,
    zmin: float,
    zmax: float,
    peak: Color,
    valley: Color,
) -> np.ndarray:
    """
    Vectorized `zcolor` over an array of mean elevations.

    Returns
    -------
    rgb : ndarray of uint8
        Array of shape (len(z), 3).
    """
    t = elevation_fraction(np.asarray(z, dtype=float).reshape(-1), zmin, zmax)[:, None]
    high = np.array(peak[:3], dtype=float)
    low = np.array(valley[:3], dtype=float)
    rgb = np.trunc(high * (1 - t) + low * t)
    return np.clip(rgb, 0, 255).astype(np.uint8)
