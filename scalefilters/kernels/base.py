# -*- coding: utf-8 -*-
"""
Kernel Base Types - Resolved kernel and point-sampling strategy.

Defines ``Kernel``, the runtime form a resampler consumes: an even
weighting function of normalized distance paired with a support radius
beyond which the weight is zero. ``PointSampling`` is the separate
non-weighted strategy used for nearest-neighbour selection. Also hosts
the shared ``sinc`` helper and the array plumbing every formula uses.

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
from dataclasses import dataclass
from typing import Callable, Union

# Third-party
import numpy as np

# ScaleFilters internal
from scalefilters.exceptions import KernelError, ValidationError

ArrayLike = Union[float, np.ndarray]


def as_distance(x: ArrayLike) -> np.ndarray:
    """Convert ``x`` to a float64 array of absolute distances."""
    return np.abs(np.asarray(x, dtype=np.float64))


def sinc(x: ArrayLike) -> np.ndarray:
    """Unnormalized sinc: ``sin(x) / x`` with value 1 at ``x == 0``.

    Note this is *not* ``np.sinc`` (which is ``sin(pi x) / (pi x)``);
    callers pass ``pi * x`` explicitly.

    Parameters
    ----------
    x : float or np.ndarray
        Argument in radians.

    Returns
    -------
    np.ndarray
        ``sin(x) / x``, exactly 1.0 where ``x == 0``.
    """
    x = np.asarray(x, dtype=np.float64)
    zero = x == 0.0
    safe = np.where(zero, 1.0, x)
    return np.where(zero, 1.0, np.sin(safe) / safe)


@dataclass(frozen=True)
class Kernel:
    """A resampling filter kernel.

    Parameters
    ----------
    name : str
        Human-readable kernel name (e.g. ``'mitchell'``).
    evaluate : Callable
        Weighting function of signed normalized distance. Must be even
        and return 0 for ``|x| > support``. Accepts a scalar or an
        array and returns an array of the same shape.
    support : float
        Support radius, > 0.

    Examples
    --------
    >>> k = resolve(FilterKind.CUBIC_MITCHELL)
    >>> k.support
    2.0
    >>> k(0.0)
    0.888...
    """

    name: str
    evaluate: Callable[[ArrayLike], np.ndarray]
    support: float

    #: Kernels are weighted; see :class:`PointSampling`.
    weighted = True

    def __post_init__(self) -> None:
        if not callable(self.evaluate):
            raise ValidationError(
                f"evaluate must be callable, got "
                f"{type(self.evaluate).__name__}"
            )
        support = float(self.support)
        if not support > 0.0:
            raise ValidationError(
                f"support must be > 0, got {self.support}"
            )
        object.__setattr__(self, 'support', support)

    def __call__(self, x: ArrayLike) -> ArrayLike:
        """Evaluate the kernel weight at distance ``x``.

        Returns a float for scalar input and an ``np.ndarray`` for
        array input.
        """
        weights = self.evaluate(x)
        if np.ndim(x) == 0:
            return float(weights)
        return np.asarray(weights, dtype=np.float64)


@dataclass(frozen=True)
class PointSampling:
    """Nearest-neighbour selection.

    Point sampling has no continuous weighting function, so it is kept
    apart from :class:`Kernel`; a resampler receiving this value picks
    the source sample nearest to each destination position.
    """

    name: str = 'nearest'
    support: float = 0.0

    weighted = False

    def __call__(self, x: ArrayLike) -> ArrayLike:
        raise KernelError(
            "point sampling has no weighting function; "
            "select the nearest source sample instead"
        )
