# -*- coding: utf-8 -*-
"""
Magic Kernel Sharp - Piecewise quadratic kernels tuned for sharp
resizing.

``mks2013`` (support 2.5) and ``mks2021`` (support 4.5) are the
"Magic Kernel" convolved with its sharpening step, as published by
John Costella and adopted by ImageMagick. The coefficients are exact
rationals; changing them visibly changes the sharpening response, so
they are kept as literal fractions.

Reference
---------
J. P. Costella, "Solving the mystery of Magic Kernel Sharp," 2021.

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
from scalefilters.kernels.base import ArrayLike, as_distance

MKS2013_SUPPORT = 2.5
MKS2021_SUPPORT = 4.5


def mks2013(x: ArrayLike) -> np.ndarray:
    """Magic Kernel Sharp 2013, breakpoints at 0.5, 1.5, 2.5."""
    a = as_distance(x)
    return np.select(
        [a < 0.5, a < 1.5, a < 2.5],
        [
            0.625 + 1.75 * (0.5 - a) * (0.5 + a),
            (1.0 - a) * (1.75 - a),
            -0.125 * (2.5 - a) * (2.5 - a),
        ],
        default=0.0,
    )


def mks2021(x: ArrayLike) -> np.ndarray:
    """Magic Kernel Sharp 2021, breakpoints at 0.5, 1.5, ..., 4.5."""
    a = as_distance(x)
    return np.select(
        [a < 0.5, a < 1.5, a < 2.5, a < 3.5, a < 4.5],
        [
            577.0 / 576.0 - 239.0 / 144.0 * a * a,
            (35.0 / 36.0) * (a - 1.0) * (a - 239.0 / 140.0),
            (1.0 / 6.0) * (a - 2.0) * (65.0 / 24.0 - a),
            (1.0 / 36.0) * (a - 3.0) * (a - 3.75),
            -(1.0 / 288.0) * (a - 4.5) * (a - 4.5),
        ],
        default=0.0,
    )
