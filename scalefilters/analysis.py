# -*- coding: utf-8 -*-
"""
Kernel Analysis - Numerical properties of resampling kernels.

Diagnostics that characterize a :class:`~scalefilters.kernels.base.Kernel`
independently of any resampler: its integral, whether it interpolates
(passes through the samples), how far it is from a partition of unity,
and a tabulation over its support for plotting.

Dependencies
------------
scipy

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
from typing import Tuple

# Third-party
import numpy as np
from scipy import integrate

# ScaleFilters internal
from scalefilters.exceptions import ValidationError
from scalefilters.kernels.base import Kernel


def _require_kernel(kernel: object) -> Kernel:
    if not isinstance(kernel, Kernel):
        raise ValidationError(
            f"expected a weighted Kernel, got {type(kernel).__name__}"
        )
    return kernel


def _breakpoints(support: float) -> np.ndarray:
    """Integer and half-integer offsets strictly inside the support."""
    steps = np.arange(-2.0 * math.ceil(support), 2.0 * math.ceil(support) + 1)
    points = steps / 2.0
    return points[np.abs(points) < support]


def kernel_integral(kernel: Kernel) -> float:
    """Integrate the kernel over ``[-support, support]``.

    Piecewise kernels have their pieces joined at integer or
    half-integer offsets; those are passed to ``scipy.integrate.quad``
    as breakpoints.

    Parameters
    ----------
    kernel : Kernel

    Returns
    -------
    float
        Integral of the kernel. Close to 1 for kernels with unit DC
        gain.
    """
    kernel = _require_kernel(kernel)
    s = kernel.support
    value, _ = integrate.quad(
        kernel, -s, s, points=_breakpoints(s), limit=200,
    )
    return float(value)


def is_interpolating(kernel: Kernel, atol: float = 1e-6) -> bool:
    """Whether the kernel reproduces the input samples exactly.

    True when ``k(0) == 1`` and ``k(i) == 0`` for every nonzero integer
    ``|i| <= support``, within ``atol``.

    Parameters
    ----------
    kernel : Kernel
    atol : float
        Absolute tolerance. Default 1e-6.

    Returns
    -------
    bool
    """
    kernel = _require_kernel(kernel)
    if abs(kernel(0.0) - 1.0) > atol:
        return False
    n = int(math.floor(kernel.support))
    if n == 0:
        return True
    offsets = np.arange(1, n + 1, dtype=np.float64)
    offsets = np.concatenate([-offsets, offsets])
    return bool(np.all(np.abs(kernel(offsets)) <= atol))


def partition_of_unity_error(kernel: Kernel, samples: int = 65) -> float:
    """Relative ripple of the kernel's sum over integer shifts.

    Evaluates ``S(t) = sum_i k(t - i)`` for ``t`` in ``[0, 1)`` and
    returns ``max |S(t) - mean(S)| / |mean(S)|``. Zero for kernels that
    reproduce a constant signal exactly (triangle, every cubic B/C).

    Parameters
    ----------
    kernel : Kernel
    samples : int
        Number of fractional offsets ``t``. Must be >= 1. Default 65.

    Returns
    -------
    float
    """
    kernel = _require_kernel(kernel)
    if samples < 1:
        raise ValidationError(f"samples must be >= 1, got {samples}")
    reach = int(math.ceil(kernel.support)) + 1
    shifts = np.arange(-reach, reach + 1, dtype=np.float64)
    t = np.linspace(0.0, 1.0, samples, endpoint=False)
    sums = np.sum(kernel(t[:, np.newaxis] - shifts[np.newaxis, :]), axis=1)
    mean = float(np.mean(sums))
    if mean == 0.0:
        raise ValidationError(
            f"kernel {kernel.name!r} sums to zero over integer shifts"
        )
    return float(np.max(np.abs(sums - mean)) / abs(mean))


def sample_kernel(
    kernel: Kernel,
    num: int = 257,
) -> Tuple[np.ndarray, np.ndarray]:
    """Tabulate the kernel on a uniform grid spanning its support.

    Parameters
    ----------
    kernel : Kernel
    num : int
        Number of samples, >= 2. Default 257.

    Returns
    -------
    x : np.ndarray
        Distances from ``-support`` to ``+support``, shape ``(num,)``.
    w : np.ndarray
        Kernel weights at ``x``, shape ``(num,)``.
    """
    kernel = _require_kernel(kernel)
    if num < 2:
        raise ValidationError(f"num must be >= 2, got {num}")
    x = np.linspace(-kernel.support, kernel.support, num)
    return x, kernel(x)
