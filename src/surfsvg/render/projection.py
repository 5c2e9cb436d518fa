"""Isometric projection of world points onto the SVG canvas."""

import math

import numpy as np

ANGLE = math.pi / 6  # angle of x, y axes (30 degrees)
SIN30, COS30 = math.sin(ANGLE), math.cos(ANGLE)


def project(x, y, z, config):
    """
    Project (x, y, z) isometrically onto the 2-D canvas (sx, sy).

        sx = W/2 + (x - y)·cos30·xyscale
        sy = H/2 + (x + y)·sin30·xyscale - z·zscale

    Works on scalars or broadcastable arrays. Non-finite input propagates
    to the output; callers filter it out beforehand.
    """
    xyscale = config.xyscale
    sx = config.width / 2 + (np.subtract(x, y)) * COS30 * xyscale
    sy = config.height / 2 + (np.add(x, y)) * SIN30 * xyscale - np.multiply(z, config.zscale)
    return sx, sy
