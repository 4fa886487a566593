# -*- coding: utf-8 -*-
"""
Kernel Providers - The seam between the catalog and a host resampler.

A resampling engine usually ships its own tested implementations of the
standard kernels (nearest, triangle, the three named cubics, Lanczos-3,
Gaussian). ``KernelProvider`` names exactly those built-ins so that
:func:`~scalefilters.resolve.resolve` can delegate to them instead of
reimplementing them. ``NativeKernels`` is the first-party provider used
when no host provider is supplied.

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
from abc import ABC, abstractmethod

# Third-party
import numpy as np

# ScaleFilters internal
from scalefilters.kernels.base import ArrayLike, Kernel, PointSampling
from scalefilters.kernels.cubic import (
    BSPLINE_BC,
    CATROM_BC,
    MITCHELL_BC,
    cubic_kernel,
)
from scalefilters.kernels.elementary import (
    GAUSSIAN_SUPPORT,
    TRIANGLE_SUPPORT,
    gaussian,
    triangle,
)
from scalefilters.kernels.windowed_sinc import LANCZOS3_LOBES, lanczos


class KernelProvider(ABC):
    """Abstract source of a resampler's built-in kernels.

    Implementations return a :class:`Kernel` (or :class:`PointSampling`
    from :meth:`point`). Each method is called once per resolution and
    must be side-effect free.
    """

    @abstractmethod
    def point(self) -> PointSampling:
        """Nearest-neighbour selection."""
        ...

    @abstractmethod
    def triangle(self) -> Kernel:
        """Linear (tent) kernel, support 1."""
        ...

    @abstractmethod
    def catrom(self) -> Kernel:
        """Catmull-Rom cubic, support 2."""
        ...

    @abstractmethod
    def mitchell(self) -> Kernel:
        """Mitchell cubic, support 2."""
        ...

    @abstractmethod
    def bspline(self) -> Kernel:
        """Cubic B-spline, support 2."""
        ...

    @abstractmethod
    def lanczos3(self) -> Kernel:
        """Three-lobe Lanczos, support 3."""
        ...

    @abstractmethod
    def gaussian(self) -> Kernel:
        """Gaussian kernel."""
        ...


class NativeKernels(KernelProvider):
    """First-party implementations of the standard resampler kernels.

    The Gaussian uses ``sigma = 0.5`` truncated at radius 3.0.
    """

    def point(self) -> PointSampling:
        return PointSampling()

    def triangle(self) -> Kernel:
        return Kernel(name='triangle', evaluate=triangle,
                      support=TRIANGLE_SUPPORT)

    def catrom(self) -> Kernel:
        return cubic_kernel(*CATROM_BC, name='catrom')

    def mitchell(self) -> Kernel:
        return cubic_kernel(*MITCHELL_BC, name='mitchell')

    def bspline(self) -> Kernel:
        return cubic_kernel(*BSPLINE_BC, name='bspline')

    def lanczos3(self) -> Kernel:
        def evaluate(x: ArrayLike) -> np.ndarray:
            return lanczos(x, LANCZOS3_LOBES)

        return Kernel(name='lanczos3', evaluate=evaluate,
                      support=float(LANCZOS3_LOBES))

    def gaussian(self) -> Kernel:
        return Kernel(name='gaussian', evaluate=gaussian,
                      support=GAUSSIAN_SUPPORT)
