# -*- coding: utf-8 -*-
"""
Tests for FilterKind resolution and the kernel provider seam.

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
from concurrent.futures import ThreadPoolExecutor

# Third-party
import numpy as np
import pytest

# ScaleFilters internal
from scalefilters import (
    FilterKind,
    Kernel,
    KernelProvider,
    NativeKernels,
    PointSampling,
    ProviderError,
    ValidationError,
    is_delegated,
    resolve,
)
from scalefilters.kernels import cubic_kernel, lanczos


WEIGHTED_KINDS = [k for k in FilterKind if k is not FilterKind.NEAREST]

EXPECTED_SUPPORT = {
    FilterKind.BOX: 0.5,
    FilterKind.LINEAR: 1.0,
    FilterKind.HERMITE: 1.0,
    FilterKind.CUBIC_CATROM: 2.0,
    FilterKind.CUBIC_MITCHELL: 2.0,
    FilterKind.CUBIC_BSPLINE: 2.0,
    FilterKind.HAMMING: 1.0,
    FilterKind.HANN: 1.0,
    FilterKind.LANCZOS3: 3.0,
    FilterKind.LAGRANGE: 2.0,
    FilterKind.GAUSS: 3.0,
    FilterKind.MKS2013: 2.5,
    FilterKind.MKS2021: 4.5,
}


# ── Vocabulary ──────────────────────────────────────────────────────────


class TestFilterKind:
    """Test the FilterKind enumeration."""

    def test_member_count(self):
        assert len(FilterKind) == 14

    def test_round_trip_from_value(self):
        for kind in FilterKind:
            assert FilterKind(kind.value) is kind

    def test_hashable(self):
        table = {kind: kind.value for kind in FilterKind}
        assert table[FilterKind.MKS2021] == 'mks2021'


# ── Totality and supports ───────────────────────────────────────────────


class TestResolveTotal:
    """Every kind resolves to exactly one kernel."""

    @pytest.mark.parametrize("kind", list(FilterKind))
    def test_every_kind_resolves(self, kind):
        resolved = resolve(kind)
        assert isinstance(resolved, (Kernel, PointSampling))

    def test_nearest_is_point_sampling(self):
        resolved = resolve(FilterKind.NEAREST)
        assert isinstance(resolved, PointSampling)
        assert resolved.weighted is False

    @pytest.mark.parametrize("kind", WEIGHTED_KINDS)
    def test_support(self, kind):
        assert resolve(kind).support == EXPECTED_SUPPORT[kind]


# ── Kernel contract ─────────────────────────────────────────────────────


class TestKernelContract:
    """Support and symmetry hold for every resolved kernel."""

    @pytest.mark.parametrize("kind", WEIGHTED_KINDS)
    def test_zero_outside_support(self, kind):
        kernel = resolve(kind)
        beyond = kernel.support + np.array([1e-9, 1e-3, 0.25, 1.0, 10.0])
        np.testing.assert_array_equal(kernel(beyond), 0.0)
        np.testing.assert_array_equal(kernel(-beyond), 0.0)

    @pytest.mark.parametrize("kind", WEIGHTED_KINDS)
    def test_even_symmetry(self, kind):
        kernel = resolve(kind)
        x = np.linspace(0.0, 6.0, 241)
        np.testing.assert_allclose(kernel(x), kernel(-x), atol=1e-6)

    @pytest.mark.parametrize("kind", WEIGHTED_KINDS)
    def test_finite_everywhere(self, kind):
        kernel = resolve(kind)
        x = np.linspace(-6.0, 6.0, 1201)
        assert np.all(np.isfinite(kernel(x)))

    @pytest.mark.parametrize("kind, expected", [
        (FilterKind.BOX, 1.0),
        (FilterKind.LINEAR, 1.0),
        (FilterKind.HERMITE, 1.0),
        (FilterKind.CUBIC_CATROM, 1.0),
        (FilterKind.CUBIC_MITCHELL, 8.0 / 9.0),
        (FilterKind.CUBIC_BSPLINE, 2.0 / 3.0),
        (FilterKind.HAMMING, 1.0),
        (FilterKind.HANN, 1.0),
        (FilterKind.LANCZOS3, 1.0),
        (FilterKind.LAGRANGE, 1.0),
        (FilterKind.MKS2013, 1.0625),
        (FilterKind.MKS2021, 577.0 / 576.0),
    ])
    def test_center_value(self, kind, expected):
        assert resolve(kind)(0.0) == pytest.approx(expected)

    def test_hermite_values(self):
        kernel = resolve(FilterKind.HERMITE)
        x = np.array([0.0, 0.5, 1.0, 1.5, 2.0])
        np.testing.assert_allclose(kernel(x), [1.0, 0.5, 0.0, 0.0, 0.0],
                                   atol=1e-12)

    def test_lagrange_edge(self):
        kernel = resolve(FilterKind.LAGRANGE)
        assert kernel(0.0) == pytest.approx(1.0)
        assert kernel(2.0 + 1e-6) == 0.0
        assert kernel(1.0) == 0.0


# ── End to end ──────────────────────────────────────────────────────────


class TestMitchellScenario:
    """Resolve Mitchell and check the literal weight at distance 1."""

    def test_mitchell(self):
        kernel = resolve(FilterKind.CUBIC_MITCHELL)
        assert kernel.support == 2.0

        b = c = 1.0 / 3.0
        expected = (
            (-b - 6 * c) + (6 * b + 30 * c) + (-12 * b - 48 * c)
            + (8 * b + 24 * c)
        ) / 6.0
        assert expected == pytest.approx(1.0 / 18.0)
        assert kernel(1.0) == pytest.approx(expected, abs=1e-6)
        assert kernel(-1.0) == pytest.approx(expected, abs=1e-6)


# ── Determinism / sharing ───────────────────────────────────────────────


class TestDeterminism:
    """Resolution is a pure function."""

    @pytest.mark.parametrize("kind", WEIGHTED_KINDS)
    def test_resolve_twice_agrees(self, kind):
        x = np.linspace(-5.0, 5.0, 401)
        np.testing.assert_array_equal(resolve(kind)(x), resolve(kind)(x))

    def test_shared_across_threads(self):
        kernel = resolve(FilterKind.MKS2021)
        x = np.linspace(-5.0, 5.0, 1001)
        expected = kernel(x)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(kernel, [x] * 8))
        for result in results:
            np.testing.assert_array_equal(result, expected)


# ── String selection ────────────────────────────────────────────────────


class TestResolveFromValue:
    """Resolution from configuration strings."""

    def test_string_value(self):
        kernel = resolve('mitchell')
        assert kernel.name == 'mitchell'
        assert kernel.support == 2.0

    def test_case_insensitive(self):
        assert resolve('MKS2013').support == 2.5

    def test_unknown_name(self):
        with pytest.raises(ValidationError, match="kind must be one of"):
            resolve('bicubic')

    def test_unknown_name_is_value_error(self):
        with pytest.raises(ValueError):
            resolve('bicubic')

    def test_wrong_type(self):
        with pytest.raises(ValidationError, match="FilterKind or str"):
            resolve(3)


# ── Provider seam ───────────────────────────────────────────────────────


class _RecordingProvider(NativeKernels):
    """Native provider that records which built-ins were requested."""

    def __init__(self):
        self.calls = []

    def mitchell(self):
        self.calls.append('mitchell')
        return cubic_kernel(1.0 / 3.0, 1.0 / 3.0, name='host-mitchell')

    def lanczos3(self):
        self.calls.append('lanczos3')
        return Kernel(name='host-lanczos3', evaluate=lanczos, support=3.0)


class _BrokenProvider(NativeKernels):

    def triangle(self):
        return lambda x: 1.0 - abs(x)


class TestProviderSeam:
    """Delegated kinds go through the provider, others never do."""

    @pytest.mark.parametrize("kind, delegated", [
        (FilterKind.NEAREST, True),
        (FilterKind.LINEAR, True),
        (FilterKind.CUBIC_CATROM, True),
        (FilterKind.CUBIC_MITCHELL, True),
        (FilterKind.CUBIC_BSPLINE, True),
        (FilterKind.LANCZOS3, True),
        (FilterKind.GAUSS, True),
        (FilterKind.BOX, False),
        (FilterKind.HERMITE, False),
        (FilterKind.HAMMING, False),
        (FilterKind.HANN, False),
        (FilterKind.LAGRANGE, False),
        (FilterKind.MKS2013, False),
        (FilterKind.MKS2021, False),
    ])
    def test_is_delegated(self, kind, delegated):
        assert is_delegated(kind) is delegated

    def test_custom_provider_used(self):
        provider = _RecordingProvider()
        kernel = resolve(FilterKind.CUBIC_MITCHELL, provider)
        assert kernel.name == 'host-mitchell'
        assert provider.calls == ['mitchell']

    def test_custom_provider_not_consulted_for_custom_kinds(self):
        provider = _RecordingProvider()
        for kind in (FilterKind.MKS2013, FilterKind.HERMITE,
                     FilterKind.LAGRANGE):
            resolve(kind, provider)
        assert provider.calls == []

    def test_broken_provider(self):
        with pytest.raises(ProviderError, match="must return Kernel"):
            resolve(FilterKind.LINEAR, _BrokenProvider())

    def test_broken_provider_is_type_error(self):
        with pytest.raises(TypeError):
            resolve(FilterKind.LINEAR, _BrokenProvider())

    def test_provider_is_abstract(self):
        with pytest.raises(TypeError):
            KernelProvider()

    def test_native_matches_default(self):
        x = np.linspace(-3.5, 3.5, 141)
        for kind in (FilterKind.LINEAR, FilterKind.LANCZOS3,
                     FilterKind.GAUSS):
            np.testing.assert_array_equal(
                resolve(kind, NativeKernels())(x), resolve(kind)(x),
            )


# ── Logging ─────────────────────────────────────────────────────────────


class TestLogging:
    """Resolution emits debug records."""

    def test_debug_record(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='scalefilters.resolve'):
            resolve(FilterKind.CUBIC_CATROM)
            resolve(FilterKind.MKS2013)
        messages = [r.getMessage() for r in caplog.records]
        assert any('CUBIC_CATROM via NativeKernels.catrom' in m
                   for m in messages)
        assert any('MKS2013 to custom kernel' in m for m in messages)
