"""
SVG emission.

The document is produced incrementally: the root element, then one
polygon per valid cell in row-major order, then the closing tag. Each
polygon lists its four projected corners as eight fixed-point numbers
and is filled with the elevation color of the cell. Coordinates outside
the canvas are written as they are.

License: BSD-3-Clause
"""

import io
from typing import Iterator, TextIO

from .colors import elevation_colors, format_hex_color
from .sampler import sample_surface

MIME_TYPE = "image/svg+xml"
PRECISION = 6

SVG_HEADER = (
    "<svg xmlns='http://www.w3.org/2000/svg' "
    "style='stroke: grey; fill: white; stroke-width: 0.7' "
    "width='{width}' height='{height}'>"
)
SVG_FOOTER = "</svg>"
POLYGON = "<polygon points='{points}' fill='{fill}'/>\n"


def format_points(points) -> str:
    """Format (4, 2) screen corners as "x0, y0, x1, y1, ..."."""
    return ", ".join(f"{float(v):.{PRECISION}f}" for v in points.reshape(-1))


def iter_svg(config, verbose: bool = False) -> Iterator[str]:
    """
    Render `config` as a sequence of SVG text chunks.

    Sampling and coloring happen before the first chunk is yielded, since
    the color of each cell depends on the elevation range of the whole
    surface.
    """
    sampled = sample_surface(config, verbose=verbose)
    colors = elevation_colors(sampled.elevation, sampled.zmin, sampled.zmax, config.peak, config.valley)

    yield SVG_HEADER.format(width=config.width, height=config.height)
    for points, rgb in zip(sampled.points, colors):
        yield POLYGON.format(points=format_points(points), fill=format_hex_color(rgb))
    yield SVG_FOOTER


def write_svg(out: TextIO, config, verbose: bool = False) -> None:
    """Stream the SVG rendering of `config` to the text file `out`."""
    for chunk in iter_svg(config, verbose=verbose):
        out.write(chunk)


def render_svg(config, verbose: bool = False) -> str:
    """Return the SVG rendering of `config` as a string."""
    buf = io.StringIO()
    write_svg(buf, config, verbose=verbose)
    return buf.getvalue()
