# -*- coding: utf-8 -*-
"""
ScaleFilters Exception Hierarchy - Domain-specific exceptions.

Lets callers (typically a resampling engine selecting a kernel from
configuration) catch ScaleFilters errors distinctly from Python built-in
exceptions. Every exception subclasses both ``ScaleFiltersError`` and the
matching built-in exception for backward compatibility.

Kernel formulas themselves never raise; these exceptions only cover
misuse of the adapter layer.

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


class ScaleFiltersError(Exception):
    """Base exception for all ScaleFilters errors."""


class ValidationError(ScaleFiltersError, ValueError):
    """Invalid input, parameter, or filter selection.

    Raised for unknown filter names, non-positive support radii, and
    non-callable evaluators.
    """


class ProviderError(ScaleFiltersError, TypeError):
    """A kernel provider returned something other than a kernel.

    Raised by :func:`~scalefilters.resolve.resolve` when a custom
    :class:`~scalefilters.native.KernelProvider` breaks its contract.
    """


class KernelError(ScaleFiltersError, RuntimeError):
    """Inconsistent kernel catalog or invalid kernel use.

    Raised when a ``FilterKind`` has no resolver entry, or when the
    point-sampling strategy is evaluated as if it were a weighting
    function.
    """
