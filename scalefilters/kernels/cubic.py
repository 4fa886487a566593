# -*- coding: utf-8 -*-
"""
Cubic B/C Kernels - Mitchell-Netravali family of piecewise cubics.

A single two-parameter formula reproduces the classical cubic resampling
filters:

- ``(B, C) = (0, 0)`` — Hermite, support 1 (the outer piece vanishes)
- ``(B, C) = (0, 1/2)`` — Catmull-Rom (interpolating, cubic precision)
- ``(B, C) = (1/3, 1/3)`` — Mitchell
- ``(B, C) = (1, 0)`` — cubic B-spline (non-interpolating, smooth)

Reference
---------
D. P. Mitchell and A. N. Netravali, "Reconstruction filters in
computer graphics," Computer Graphics (Proc. SIGGRAPH 88), vol. 22,
no. 4, pp. 221-228, 1988.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
from typing import Tuple

# Third-party
import numpy as np

# ScaleFilters internal
from scalefilters.kernels.base import ArrayLike, Kernel, as_distance

HERMITE_BC: Tuple[float, float] = (0.0, 0.0)
CATROM_BC: Tuple[float, float] = (0.0, 0.5)
MITCHELL_BC: Tuple[float, float] = (1.0 / 3.0, 1.0 / 3.0)
BSPLINE_BC: Tuple[float, float] = (1.0, 0.0)

HERMITE_SUPPORT = 1.0
CUBIC_SUPPORT = 2.0


def cubic_bc(b: float, c: float, x: ArrayLike) -> np.ndarray:
    """Evaluate the Mitchell-Netravali cubic with parameters ``(b, c)``.

    Parameters
    ----------
    b, c : float
        Family parameters.
    x : float or np.ndarray
        Signed normalized distance.

    Returns
    -------
    np.ndarray
        Kernel weights; zero for ``|x| >= 2``.
    """
    a = as_distance(x)
    a2 = a * a
    a3 = a2 * a
    inner = (
        (12.0 - 9.0 * b - 6.0 * c) * a3
        + (-18.0 + 12.0 * b + 6.0 * c) * a2
        + (6.0 - 2.0 * b)
    )
    outer = (
        (-b - 6.0 * c) * a3
        + (6.0 * b + 30.0 * c) * a2
        + (-12.0 * b - 48.0 * c) * a
        + (8.0 * b + 24.0 * c)
    )
    k = np.where(a < 1.0, inner, np.where(a < 2.0, outer, 0.0))
    return k / 6.0


def cubic_kernel(
    b: float,
    c: float,
    name: str,
    support: float = CUBIC_SUPPORT,
) -> Kernel:
    """Build a :class:`Kernel` with ``(b, c)`` fixed.

    Parameters
    ----------
    b, c : float
        Family parameters, bound into the evaluator.
    name : str
        Kernel name.
    support : float
        Support radius. Default is 2.0; Hermite uses 1.0.

    Returns
    -------
    Kernel
    """
    def evaluate(x: ArrayLike) -> np.ndarray:
        return cubic_bc(b, c, x)

    return Kernel(name=name, evaluate=evaluate, support=support)
