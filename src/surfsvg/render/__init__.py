"""
Surface-to-image pipeline.

This module turns a sampled surface into an SVG document:

- Grid sampling with non-finite cell rejection
- Isometric projection onto the canvas
- Elevation-based color gradient
- Incremental SVG emission
"""

from .colors import (
    Color,
    WHITE,
    parse_hex_color,
    format_hex_color,
    elevation_fraction,
    interpolate_color,
    zcolor,
    elevation_colors,
)
from .projection import SIN30, COS30, project
from .sampler import Cell, SampledSurface, sample_surface
from .svg import MIME_TYPE, iter_svg, write_svg, render_svg

__all__ = [
    # Colors
    "Color",
    "WHITE",
    "parse_hex_color",
    "format_hex_color",
    "elevation_fraction",
    "interpolate_color",
    "zcolor",
    "elevation_colors",
    # Projection
    "SIN30",
    "COS30",
    "project",
    # Sampling
    "Cell",
    "SampledSurface",
    "sample_surface",
    # SVG
    "MIME_TYPE",
    "iter_svg",
    "write_svg",
    "render_svg",
]
