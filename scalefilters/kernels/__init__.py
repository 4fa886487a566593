# -*- coding: utf-8 -*-
"""
Kernels - Closed-form resampling filter kernels.

Every formula is an even function of normalized distance, vectorized
over numpy arrays, that returns exactly zero outside its support.

Available formulas:

- ``box``, ``triangle``, ``gaussian`` — elementary kernels.
- ``cubic_bc`` — Mitchell-Netravali cubic family (Hermite, Catmull-Rom,
  Mitchell, B-spline).
- ``hamming``, ``hann``, ``lanczos`` — windowed sinc kernels.
- ``lagrange`` — Lagrange interpolation basis.
- ``mks2013``, ``mks2021`` — Magic Kernel Sharp.

Types:

- ``Kernel`` — evaluator plus support radius.
- ``PointSampling`` — nearest-neighbour strategy (no weighting function).

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

from scalefilters.kernels.base import Kernel, PointSampling, sinc
from scalefilters.kernels.elementary import box, triangle, gaussian
from scalefilters.kernels.cubic import (
    HERMITE_BC,
    CATROM_BC,
    MITCHELL_BC,
    BSPLINE_BC,
    cubic_bc,
    cubic_kernel,
)
from scalefilters.kernels.windowed_sinc import hamming, hann, lanczos
from scalefilters.kernels.lagrange import lagrange, lagrange_kernel
from scalefilters.kernels.magic import mks2013, mks2021

__all__ = [
    'Kernel',
    'PointSampling',
    'sinc',
    'box',
    'triangle',
    'gaussian',
    'HERMITE_BC',
    'CATROM_BC',
    'MITCHELL_BC',
    'BSPLINE_BC',
    'cubic_bc',
    'cubic_kernel',
    'hamming',
    'hann',
    'lanczos',
    'lagrange',
    'lagrange_kernel',
    'mks2013',
    'mks2021',
]
