# -*- coding: utf-8 -*-
"""
Windowed Sinc Kernels - Hamming, Hann, and Lanczos.

Each kernel truncates the ideal ``sinc(pi x)`` with a window. Hamming
and Hann use a raised cosine over a one-sample radius; Lanczos windows
with a stretched sinc over ``a`` lobes.

Hamming and Hann are masked to zero past their radius: the raw
``sinc * cosine`` product does not vanish there.

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

# Third-party
import numpy as np

# ScaleFilters internal
from scalefilters.kernels.base import ArrayLike, as_distance, sinc

RAISED_COSINE_SUPPORT = 1.0
LANCZOS3_LOBES = 3


def _raised_cosine_sinc(x: ArrayLike, a0: float) -> np.ndarray:
    a = as_distance(x)
    px = np.pi * a
    weights = sinc(px) * (a0 + (1.0 - a0) * np.cos(px))
    return np.where(a <= RAISED_COSINE_SUPPORT, weights, 0.0)


def hamming(x: ArrayLike) -> np.ndarray:
    """Hamming-windowed sinc: ``sinc(pi x) * (0.54 + 0.46 cos(pi x))``."""
    return _raised_cosine_sinc(x, 0.54)


def hann(x: ArrayLike) -> np.ndarray:
    """Hann-windowed sinc: ``sinc(pi x) * (0.5 + 0.5 cos(pi x))``."""
    return _raised_cosine_sinc(x, 0.5)


def lanczos(x: ArrayLike, a: int = LANCZOS3_LOBES) -> np.ndarray:
    """Lanczos kernel ``sinc(pi x) * sinc(pi x / a)`` for ``|x| < a``.

    Parameters
    ----------
    x : float or np.ndarray
        Signed normalized distance.
    a : int
        Number of lobes, which is also the support radius. Default 3.

    Returns
    -------
    np.ndarray
        Kernel weights; zero for ``|x| >= a``.
    """
    d = as_distance(x)
    px = np.pi * d
    weights = sinc(px) * sinc(px / a)
    return np.where(d < a, weights, 0.0)
