# -*- coding: utf-8 -*-
"""
ScaleFilters - Resampling filter kernels for separable image scaling.

A closed catalog of one-dimensional filter kernels (box, linear,
Hermite, cubic B/C splines, Hamming, Hann, Lanczos, Lagrange, Gaussian,
Magic Kernel Sharp) and the adapter that resolves a ``FilterKind``
selection into the ``(evaluate, support)`` pair a resampling engine
consumes.

Dependencies
------------
numpy
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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from scalefilters.exceptions import (
    ScaleFiltersError,
    ValidationError,
    ProviderError,
    KernelError,
)
from scalefilters.vocabulary import FilterKind
from scalefilters.kernels import Kernel, PointSampling
from scalefilters.native import KernelProvider, NativeKernels
from scalefilters.resolve import resolve, is_delegated
from scalefilters.analysis import (
    kernel_integral,
    is_interpolating,
    partition_of_unity_error,
    sample_kernel,
)

__all__ = [
    'ScaleFiltersError',
    'ValidationError',
    'ProviderError',
    'KernelError',
    'FilterKind',
    'Kernel',
    'PointSampling',
    'KernelProvider',
    'NativeKernels',
    'resolve',
    'is_delegated',
    'kernel_integral',
    'is_interpolating',
    'partition_of_unity_error',
    'sample_kernel',
]
