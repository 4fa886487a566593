# -*- coding: utf-8 -*-
"""
Elementary Kernels - Box, triangle, and Gaussian.

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
import math

# Third-party
import numpy as np

# ScaleFilters internal
from scalefilters.kernels.base import ArrayLike, as_distance

BOX_SUPPORT = 0.5
TRIANGLE_SUPPORT = 1.0
GAUSSIAN_SIGMA = 0.5
GAUSSIAN_SUPPORT = 3.0


def box(x: ArrayLike) -> np.ndarray:
    """Box kernel: 1 for ``|x| <= 0.5``, else 0."""
    return np.where(as_distance(x) <= BOX_SUPPORT, 1.0, 0.0)


def triangle(x: ArrayLike) -> np.ndarray:
    """Triangle (tent) kernel: ``max(0, 1 - |x|)``."""
    return np.clip(1.0 - as_distance(x), 0.0, None)


def gaussian(
    x: ArrayLike,
    sigma: float = GAUSSIAN_SIGMA,
    support: float = GAUSSIAN_SUPPORT,
) -> np.ndarray:
    """Gaussian ``exp(-x^2 / (2 sigma^2)) / (sqrt(2 pi) sigma)``.

    The tail is cut to zero past ``support``. The peak is not 1; the
    resampler normalizes weights.

    Parameters
    ----------
    x : float or np.ndarray
        Signed normalized distance.
    sigma : float
        Standard deviation in samples. Default 0.5.
    support : float
        Truncation radius. Default 3.0 (six sigma).

    Returns
    -------
    np.ndarray
        Kernel weights.
    """
    a = as_distance(x)
    weights = np.exp(-(a * a) / (2.0 * sigma * sigma)) / (
        math.sqrt(2.0 * math.pi) * sigma
    )
    return np.where(a <= support, weights, 0.0)
