"""
surfsvg - Isometric SVG rendering of 3-D surface functions.

A Python package that samples a scalar surface z = f(x, y) over a square
grid, projects every grid cell isometrically onto a 2-D canvas and writes
the result as an SVG mesh of quadrilaterals shaded by elevation.

Features
--------
- Ripple, eggbox, moguls, saddle and flat surfaces
- Per-render canvas size, grid resolution and axis range
- Two-color elevation gradient
- Streaming SVG output
- Small Flask service and command line tool

Quick Start
-----------
>>> from surfsvg import RenderConfig, render_svg, parse_hex_color
>>> config = RenderConfig(surface="eggbox", peak=parse_hex_color("ff0000"))
>>> svg = render_svg(config)

License
-------
BSD-3-Clause
"""

__version__ = "0.1.0"

# Surfaces
from .surfaces import (
    Surface,
    surface_from_name,
    corner,
    elevation,
    surface_corner,
)

# Rendering
from .render import (
    Color,
    WHITE,
    parse_hex_color,
    format_hex_color,
    elevation_fraction,
    interpolate_color,
    zcolor,
    elevation_colors,
    project,
    Cell,
    SampledSurface,
    sample_surface,
    iter_svg,
    write_svg,
    render_svg,
)

from .config import RenderConfig

__all__ = [
    # Version
    "__version__",
    # Configuration
    "RenderConfig",
    # Surfaces
    "Surface",
    "surface_from_name",
    "corner",
    "elevation",
    "surface_corner",
    # Colors
    "Color",
    "WHITE",
    "parse_hex_color",
    "format_hex_color",
    "elevation_fraction",
    "interpolate_color",
    "zcolor",
    "elevation_colors",
    # Pipeline
    "project",
    "Cell",
    "SampledSurface",
    "sample_surface",
    "iter_svg",
    "write_svg",
    "render_svg",
]
