#
# Copyright (c) 2024–2025, Daily
#
# SPDX-License-Identifier: BSD 2-Clause License
#

"""Natural cubic spline evaluation over a 4-sample window.

The window ``(y0, y1, y2, y3)`` is treated as control points at abscissas
``xi, xi + 1, xi + 2, xi + 3``. The outer moments (second derivatives at
``y0`` and ``y3``) are fixed at zero, which leaves a 2x2 system for the
interior moments that is solved in closed form below. The constants only
hold for this window size and unit spacing.

Every function broadcasts with numpy, so a ``(4, N)`` array of windows can
be evaluated in one call. Scalar input gives a scalar result.
"""

import numpy as np


def spline_c1(yi):
    """Right-hand side of the moment system at ``y1``."""
    y0, y1, y2 = yi[0], yi[1], yi[2]
    return 3 * ((y2 - y1) - (y1 - y0))


def spline_c2(yi):
    """Right-hand side of the moment system at ``y2``."""
    y1, y2, y3 = yi[1], yi[2], yi[3]
    return 3 * ((y3 - y2) - (y2 - y1))


def spline_m1(c1, c2):
    """Moment at ``y1``."""
    return (c1 * 2 - c2 / 2) / 3.75


def spline_m2(c1, c2):
    """Moment at ``y2``."""
    return (c1 / 2 - c2 * 2) / -7.75


def spline_z0(m1, h0, x0, x1, y0, y1, x):
    """Cubic on ``[x0, x1]`` with a zero moment at ``x0``."""
    v1 = (x - x0) * (x - x0) * (x - x0) * m1 / (6 * h0)
    v2 = -1.0 * y0 * (x - x1) / h0
    v3 = (y1 - h0 * h0 * m1 / 6) * (x - x0) / h0
    return v1 + v2 + v3


def spline_z1(m1, m2, h1, x1, x2, y1, y2, x):
    """Cubic on ``(x1, x2]`` between the two interior moments."""
    v0 = -1.0 * (x - x2) * (x - x2) * (x - x2) * m1 / (6 * h1)
    v1 = (x - x1) * (x - x1) * (x - x1) * m2 / (6 * h1)
    v2 = -1.0 * (y1 - h1 * h1 * m1 / 6) * (x - x2) / h1
    v3 = (y2 - h1 * h1 * m2 / 6) * (x - x1) / h1
    return v0 + v1 + v2 + v3


def spline_z2(m2, h2, x2, x3, y2, y3, x):
    """Cubic on ``(x2, x3]`` with a zero moment at ``x3``."""
    v0 = -1.0 * (x - x3) * (x - x3) * (x - x3) * m2 / (6 * h2)
    v2 = -1.0 * (y2 - h2 * h2 * m2 / 6) * (x - x3) / h2
    v3 = y3 * (x - x2) / h2
    return v0 + v2 + v3


def spline(xi, yi, xo):
    """Interpolate a 4-sample window at a query position.

    Args:
        xi: Abscissa of the first sample in the window (the base index).
        yi: The four window samples, either a sequence of scalars or a
            ``(4, N)`` array holding ``N`` windows.
        xo: Query position(s), relative to the same origin as ``xi``.

    Returns:
        The interpolated value, a float for scalar input or an array of
        ``N`` values otherwise.
    """
    y0, y1, y2, y3 = yi[0], yi[1], yi[2], yi[3]
    c1, c2 = spline_c1(yi), spline_c2(yi)
    m1, m2 = spline_m1(c1, c2), spline_m2(c1, c2)  # m0 = m3 = 0

    z0 = spline_z0(m1, 1, xi, xi + 1, y0, y1, xo)
    z1 = spline_z1(m1, m2, 1, xi + 1, xi + 2, y1, y2, xo)
    z2 = spline_z2(m2, 1, xi + 2, xi + 3, y2, y3, xo)

    result = np.where(xo <= xi + 1, z0, np.where(xo <= xi + 2, z1, z2))
    if np.ndim(result) == 0:
        return float(result)
    return result
