"""
Render configuration.

All geometry of one render is derived from a single immutable
`RenderConfig`: canvas size, grid resolution, axis range, the chosen
surface and the two endpoint colors. Scale factors are computed from the
effective width/height of each config, never from process-wide values.

License: BSD-3-Clause
"""

import math
from dataclasses import dataclass, field

from .render.colors import Color, WHITE
from .surfaces import Surface, surface_from_name

WIDTH, HEIGHT = 600, 320  # canvas size in pixels
CELLS = 100  # number of grid cells per axis
XYRANGE = 30.0  # axis range (-xyrange/2 .. +xyrange/2)
ZSCALE_FACTOR = 0.4  # pixels per z unit, as a fraction of the height
MAX_CELLS = 500
MAX_SIZE = 10000  # largest canvas side in pixels


@dataclass(frozen=True)
class RenderConfig:
    """
    Read-only input to a single render.

    Parameters
    ----------
    surface : Surface or str, optional
        Surface function to sample. Default is ripple.
    width, height : int, optional
        Canvas size in pixels (1 to MAX_SIZE). Default is 600x320.
    cells : int, optional
        Number of grid cells along each axis (0 to MAX_CELLS). Default is 100.
    xyrange : float, optional
        Extent of the x and y axes in world units. Default is 30.0.
    peak, valley : Color, optional
        Endpoint colors of the elevation gradient. Default is opaque white.

    Raises
    ------
    ValueError
        If any parameter is outside its valid range.
    """

    surface: Surface = Surface.RIPPLE
    width: int = WIDTH
    height: int = HEIGHT
    cells: int = CELLS
    xyrange: float = XYRANGE
    peak: Color = field(default=WHITE)
    valley: Color = field(default=WHITE)

    def __post_init__(self):
        if not isinstance(self.surface, Surface):
            object.__setattr__(self, "surface", surface_from_name(self.surface))
        if not (0 < self.width <= MAX_SIZE and 0 < self.height <= MAX_SIZE):
            raise ValueError(
                f"Canvas size must be in [1, {MAX_SIZE}] on each side, got {self.width}x{self.height}"
            )
        if not 0 <= self.cells <= MAX_CELLS:
            raise ValueError(f"Number of cells must be in [0, {MAX_CELLS}], got {self.cells}")
        if not (math.isfinite(self.xyrange) and self.xyrange > 0):
            raise ValueError(f"Axis range must be a positive finite number, got {self.xyrange}")
        if not math.isfinite(self.width / 2 / self.xyrange):
            raise ValueError(f"Axis range {self.xyrange} is too small for a {self.width} pixel canvas")

    @property
    def xyscale(self) -> float:
        """Pixels per x or y unit."""
        return self.width / 2 / self.xyrange

    @property
    def zscale(self) -> float:
        """Pixels per z unit."""
        return self.height * ZSCALE_FACTOR
