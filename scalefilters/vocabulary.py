# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical filter identities for ScaleFilters.

Defines ``FilterKind``, the closed set of resampling filter families the
catalog knows about. Values are lowercase strings so that a selection can
be stored in configuration and rebuilt with ``FilterKind(value)``.

Author
------
Steven Siebert

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

from enum import Enum


class FilterKind(Enum):
    """Resampling filter families.

    ``NEAREST`` is point sampling and has no weighting function. Every
    other member resolves to a :class:`~scalefilters.kernels.base.Kernel`.
    """

    NEAREST = "nearest"
    BOX = "box"
    LINEAR = "linear"
    HERMITE = "hermite"
    CUBIC_CATROM = "catrom"
    CUBIC_MITCHELL = "mitchell"
    CUBIC_BSPLINE = "bspline"
    HAMMING = "hamming"
    HANN = "hann"
    LANCZOS3 = "lanczos3"
    LAGRANGE = "lagrange"
    GAUSS = "gauss"
    MKS2013 = "mks2013"
    MKS2021 = "mks2021"
