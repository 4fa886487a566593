# -*- coding: utf-8 -*-
"""
Lagrange Kernel - Classical Lagrange interpolation basis as a
resampling kernel.

For a kernel of support ``s`` the polynomial order is ``floor(2 s)``.
At distance ``a = |x|`` the weight is

    w(a) = prod_{i=0}^{order-1} (d_i - a) / d_i,   d_i = floor(s + a) - i

with any factor whose ``d_i == 0`` skipped (it contributes 1). This is
the Lagrange basis polynomial of the sample at offset 0, evaluated at a
fractional offset, and reduces to the familiar 4-tap cubic for
``s = 2``.

Reference
---------
T. I. Laakso, V. Valimaki, M. Karjalainen, and U. K. Laine,
"Splitting the Unit Delay — Tools for fractional delay filter design,"
IEEE Signal Processing Magazine, vol. 13, no. 1, pp. 30-60, Jan. 1996.

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
from scalefilters.exceptions import ValidationError
from scalefilters.kernels.base import ArrayLike, Kernel, as_distance

LAGRANGE_SUPPORT = 2.0


def lagrange(x: ArrayLike, support: float = LAGRANGE_SUPPORT) -> np.ndarray:
    """Evaluate the Lagrange kernel of the given support.

    Parameters
    ----------
    x : float or np.ndarray
        Signed normalized distance.
    support : float
        Support radius. The polynomial order is ``floor(2 * support)``.
        Default is 2.0 (cubic).

    Returns
    -------
    np.ndarray
        Kernel weights; zero for ``|x| > support``.
    """
    a = as_distance(x)
    order = int(2.0 * support)
    n = np.floor(support + a)

    weights = np.ones_like(a)
    for i in range(order):
        d = n - i
        # The sample at distance 0 contributes a factor of 1.
        nonzero = d != 0.0
        safe_d = np.where(nonzero, d, 1.0)
        weights *= np.where(nonzero, (d - a) / safe_d, 1.0)

    return np.where(a > support, 0.0, weights)


def lagrange_kernel(support: float = LAGRANGE_SUPPORT) -> Kernel:
    """Build a Lagrange :class:`Kernel` with ``support`` fixed.

    Parameters
    ----------
    support : float
        Support radius, >= 0.5 so that the order is at least 1.
        Default is 2.0.

    Returns
    -------
    Kernel

    Raises
    ------
    ValidationError
        If ``support < 0.5``.
    """
    if support < 0.5:
        raise ValidationError(
            f"support must be >= 0.5, got {support}"
        )

    def evaluate(x: ArrayLike) -> np.ndarray:
        return lagrange(x, support)

    return Kernel(name='lagrange', evaluate=evaluate, support=support)
