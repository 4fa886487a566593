# -*- coding: utf-8 -*-
"""
Kernel Resolution - Map a ``FilterKind`` to the kernel a resampler uses.

``resolve`` is a pure, total function: every ``FilterKind`` maps to
exactly one ``Kernel`` (or to ``PointSampling`` for ``NEAREST``). Kinds
that correspond to standard resampler built-ins are delegated to a
:class:`~scalefilters.native.KernelProvider`; the remaining kinds are
built here as closures over the catalog formulas.

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
import logging
from typing import Callable, Dict, Optional, Union

# ScaleFilters internal
from scalefilters.exceptions import KernelError, ProviderError, ValidationError
from scalefilters.kernels.base import Kernel, PointSampling
from scalefilters.kernels.cubic import HERMITE_BC, HERMITE_SUPPORT, cubic_kernel
from scalefilters.kernels.elementary import BOX_SUPPORT, box
from scalefilters.kernels.lagrange import LAGRANGE_SUPPORT, lagrange_kernel
from scalefilters.kernels.magic import (
    MKS2013_SUPPORT,
    MKS2021_SUPPORT,
    mks2013,
    mks2021,
)
from scalefilters.kernels.windowed_sinc import (
    RAISED_COSINE_SUPPORT,
    hamming,
    hann,
)
from scalefilters.native import KernelProvider, NativeKernels
from scalefilters.vocabulary import FilterKind

logger = logging.getLogger(__name__)

Resolved = Union[Kernel, PointSampling]

# Kinds answered by the provider, keyed to the provider method name.
_DELEGATED: Dict[FilterKind, str] = {
    FilterKind.NEAREST: 'point',
    FilterKind.LINEAR: 'triangle',
    FilterKind.CUBIC_CATROM: 'catrom',
    FilterKind.CUBIC_MITCHELL: 'mitchell',
    FilterKind.CUBIC_BSPLINE: 'bspline',
    FilterKind.LANCZOS3: 'lanczos3',
    FilterKind.GAUSS: 'gaussian',
}

_CUSTOM: Dict[FilterKind, Callable[[], Kernel]] = {
    FilterKind.BOX: lambda: Kernel(
        name='box', evaluate=box, support=BOX_SUPPORT,
    ),
    FilterKind.HERMITE: lambda: cubic_kernel(
        *HERMITE_BC, name='hermite', support=HERMITE_SUPPORT,
    ),
    FilterKind.HAMMING: lambda: Kernel(
        name='hamming', evaluate=hamming, support=RAISED_COSINE_SUPPORT,
    ),
    FilterKind.HANN: lambda: Kernel(
        name='hann', evaluate=hann, support=RAISED_COSINE_SUPPORT,
    ),
    FilterKind.LAGRANGE: lambda: lagrange_kernel(LAGRANGE_SUPPORT),
    FilterKind.MKS2013: lambda: Kernel(
        name='mks2013', evaluate=mks2013, support=MKS2013_SUPPORT,
    ),
    FilterKind.MKS2021: lambda: Kernel(
        name='mks2021', evaluate=mks2021, support=MKS2021_SUPPORT,
    ),
}

_missing = set(FilterKind) - set(_DELEGATED) - set(_CUSTOM)
if _missing:
    raise KernelError(
        f"no resolver entry for {sorted(k.name for k in _missing)}"
    )


def is_delegated(kind: FilterKind) -> bool:
    """Whether ``kind`` is answered by the kernel provider."""
    return kind in _DELEGATED


def _coerce_kind(kind: Union[FilterKind, str]) -> FilterKind:
    if isinstance(kind, FilterKind):
        return kind
    if isinstance(kind, str):
        try:
            return FilterKind(kind.lower())
        except ValueError:
            choices = [k.value for k in FilterKind]
            raise ValidationError(
                f"kind must be one of {choices}, got {kind!r}"
            ) from None
    raise ValidationError(
        f"kind must be a FilterKind or str, got {type(kind).__name__}"
    )


def resolve(
    kind: Union[FilterKind, str],
    provider: Optional[KernelProvider] = None,
) -> Resolved:
    """Resolve a filter selection to its kernel.

    Parameters
    ----------
    kind : FilterKind or str
        Filter selection, or its string value (e.g. ``'mitchell'``).
    provider : KernelProvider, optional
        Source of the standard built-in kernels. Defaults to
        :class:`~scalefilters.native.NativeKernels`.

    Returns
    -------
    Kernel or PointSampling
        ``PointSampling`` for ``FilterKind.NEAREST``, otherwise a
        ``Kernel`` with ``evaluate`` and ``support``.

    Raises
    ------
    ValidationError
        If ``kind`` is not a ``FilterKind`` or a known string value.
    ProviderError
        If ``provider`` returns something other than a kernel.

    Examples
    --------
    >>> k = resolve(FilterKind.CUBIC_MITCHELL)
    >>> k.support
    2.0
    """
    kind = _coerce_kind(kind)

    if kind in _DELEGATED:
        if provider is None:
            provider = NativeKernels()
        method = _DELEGATED[kind]
        resolved = getattr(provider, method)()
        expected = PointSampling if kind is FilterKind.NEAREST else Kernel
        if not isinstance(resolved, expected):
            raise ProviderError(
                f"{type(provider).__name__}.{method}() must return "
                f"{expected.__name__}, got {type(resolved).__name__}"
            )
        logger.debug(
            "Resolved %s via %s.%s (support=%s)",
            kind.name, type(provider).__name__, method, resolved.support,
        )
        return resolved

    kernel = _CUSTOM[kind]()
    logger.debug("Resolved %s to custom kernel (support=%s)",
                 kind.name, kernel.support)
    return kernel
