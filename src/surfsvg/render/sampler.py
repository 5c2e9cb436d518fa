"""
Grid sampling of a surface function.

The cells x cells lattice is walked in row-major order. Cell (i, j) owns
the corners

    a = (i+1, j),  b = (i, j),  c = (i, j+1),  d = (i+1, j+1)

in that order, which projects to a simple (non self-intersecting)
quadrilateral. A cell is valid only if the sum of its four corner
elevations is finite; invalid cells are dropped entirely and take no part
in the elevation range.

License: BSD-3-Clause
"""

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from ..surfaces import surface_corner
from .projection import project

# Lattice offsets (di, dj) of the corners a, b, c, d
CORNER_OFFSETS = ((1, 0), (0, 0), (0, 1), (1, 1))


@dataclass(frozen=True)
class Cell:
    """One valid grid cell."""

    i: int
    j: int
    corners: np.ndarray  # (4, 3) world points
    points: np.ndarray  # (4, 2) screen points
    elevation: float  # mean of the four corner z-values


@dataclass
class SampledSurface:
    """
    Valid cells of one render, in row-major order.

    Attributes
    ----------
    indices : ndarray
        (M, 2) lattice indices (i, j) of the valid cells.
    corners : ndarray
        (M, 4, 3) world corners (x, y, z).
    points : ndarray
        (M, 4, 2) projected screen corners (sx, sy).
    elevation : ndarray
        (M,) mean corner elevation per cell.
    zmin, zmax : float
        Range of the corner elevations over all valid cells. Stays at
        (+inf, -inf) when there is no valid cell.
    dropped : int
        Number of cells discarded for non-finite elevation.
    """

    indices: np.ndarray
    corners: np.ndarray
    points: np.ndarray
    elevation: np.ndarray
    zmin: float
    zmax: float
    dropped: int = 0

    def __len__(self) -> int:
        return len(self.elevation)

    def __iter__(self) -> Iterator[Cell]:
        for k in range(len(self)):
            i, j = self.indices[k]
            yield Cell(int(i), int(j), self.corners[k], self.points[k], float(self.elevation[k]))


def _empty(dropped: int = 0) -> SampledSurface:
    return SampledSurface(
        indices=np.zeros((0, 2), dtype=int),
        corners=np.zeros((0, 4, 3)),
        points=np.zeros((0, 4, 2)),
        elevation=np.zeros(0),
        zmin=np.inf,
        zmax=-np.inf,
        dropped=dropped,
    )


def sample_surface(config, verbose: bool = False) -> SampledSurface:
    """
    Sample the configured surface over the grid and project valid cells.

    Parameters
    ----------
    config : RenderConfig
        Surface, grid resolution, axis range and canvas size.
    verbose : bool, optional
        If True, print sampling parameters and a summary. Default is False.

    Returns
    -------
    sampled : SampledSurface
    """
    N = config.cells

    if verbose:
        print(f"Surface sampling ({config.surface.value}):")
        print(f"    cells = {N}")
        print(f"    xyrange = {config.xyrange}")
        print(f"    canvas = {config.width}x{config.height}")

    if N == 0:
        return _empty()

    # Corner lattice, shape (N+1, N+1)
    i, j = np.meshgrid(np.arange(N + 1), np.arange(N + 1), indexing="ij")
    x, y, z = surface_corner(config.surface, i, j, N, config.xyrange)
    lattice = np.stack([x, y, z], axis=-1)

    # Corners of every cell, shape (N, N, 4, 3)
    corners = np.stack(
        [lattice[di:di + N, dj:dj + N] for di, dj in CORNER_OFFSETS],
        axis=2,
    )

    # Skip a cell if its elevation sum is NaN or Inf
    zsum = corners[..., 2].sum(axis=-1)
    valid = np.isfinite(zsum)
    dropped = int(valid.size - np.count_nonzero(valid))

    # Row-major cell order
    ci, cj = np.nonzero(valid)
    if ci.size == 0:
        if verbose:
            print(f"    valid = 0, dropped = {dropped}")
        return _empty(dropped)

    corners = corners[ci, cj]
    cz = corners[..., 2]
    sx, sy = project(corners[..., 0], corners[..., 1], cz, config)

    sampled = SampledSurface(
        indices=np.stack([ci, cj], axis=-1),
        corners=corners,
        points=np.stack([sx, sy], axis=-1),
        elevation=cz.mean(axis=-1),
        zmin=float(cz.min()),
        zmax=float(cz.max()),
        dropped=dropped,
    )

    if verbose:
        print(f"    valid = {len(sampled)}, dropped = {dropped}")
        print(f"    z range = [{sampled.zmin:.6g}, {sampled.zmax:.6g}]")

    return sampled
