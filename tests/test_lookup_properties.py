# -*- coding: utf-8 -*-
"""
Property tests shared by all four weight table generators.

Sweeps orders, axis lengths and coordinates to check prefix lengths,
partition of unity, the nearest-sample shortcut, interpolation at sample
points, derivative consistency and denominator cache transparency.

Author
------
Resamplut Developers

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
import pytest

# Resamplut internal
from resamplut.lookup import (
    DenominatorCache,
    default_cache,
    poly_grad_lookup,
    poly_lookup,
    sinc_grad_lookup,
    sinc_lookup,
)
from resamplut.lookup.span import raw_bounds


def _coords(dim, step=0.37):
    """Coordinates covering ``[0.5, dim + 0.5]``, endpoints included."""
    return np.append(np.arange(0.5, dim + 0.5, step), dim + 0.5)


def _near_integer(coord):
    return abs(coord - round(coord)) < 1e-5


def _expected_length(coord, q, dim):
    d1, d2 = raw_bounds(coord, q)
    return max(0, min(d2, dim) - max(d1, 1) + 1)


# ── Prefix length ───────────────────────────────────────────────────────


class TestPrefixLength:
    """Written length equals the clamped span for every generator."""

    @pytest.mark.parametrize("q", range(1, 17))
    def test_gradient_variants(self, q):
        table = np.empty(q)
        dtable = np.empty(q)
        for dim in range(1, 33):
            for coord in _coords(dim):
                expected = _expected_length(coord, q, dim)
                lut = poly_grad_lookup(coord, q, dim, table, dtable)
                assert lut.length == expected
                assert lut.derivatives.shape == (expected,)
                lut = sinc_grad_lookup(coord, q, dim, table, dtable)
                assert lut.length == expected

    @pytest.mark.parametrize("q", range(1, 17))
    def test_plain_variants(self, q):
        table = np.empty(q)
        for dim in range(1, 33):
            for coord in _coords(dim):
                if _near_integer(coord):
                    continue
                expected = _expected_length(coord, q, dim)
                assert poly_lookup(coord, q, dim, table).length == expected
                assert sinc_lookup(coord, q, dim, table).length == expected

    @pytest.mark.parametrize("q", [1, 2, 5, 8])
    def test_indices_inside_axis(self, q):
        for dim in (1, 3, 9):
            for coord in np.linspace(-3.0, dim + 3.0, 97):
                for lut in (poly_lookup(coord, q, dim),
                            sinc_lookup(coord, q, dim),
                            poly_grad_lookup(coord, q, dim),
                            sinc_grad_lookup(coord, q, dim)):
                    if lut.is_empty:
                        assert lut.end < 0
                    else:
                        assert lut.d1 >= 1
                        assert lut.d2 <= dim


# ── Partition of unity ──────────────────────────────────────────────────


class TestPartitionOfUnity:
    """Interior Lagrange tables and all sinc tables sum to one."""

    @pytest.mark.parametrize("q", range(1, 17))
    def test_polynomial_interior(self, q):
        dim = 40
        for coord in np.arange(15.1, 25.0, 0.23):
            d1, d2 = raw_bounds(coord, q)
            assert d1 >= 1 and d2 <= dim
            if _near_integer(coord):
                continue
            lut = poly_lookup(coord, q, dim)
            assert lut.weights.sum() == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize("q", range(1, 17))
    def test_sinc_any_input(self, q):
        for dim in (1, 2, 7, 20):
            for coord in _coords(dim, step=0.29):
                lut = sinc_lookup(coord, q, dim)
                if not lut.is_empty:
                    assert lut.weights.sum() == pytest.approx(1.0, abs=1e-12)
                lut = sinc_grad_lookup(coord, q, dim)
                if not lut.is_empty:
                    assert lut.weights.sum() == pytest.approx(1.0, abs=1e-12)


# ── Nearest sample ──────────────────────────────────────────────────────


class TestNearestSample:
    """Near-integer coordinates give one unit weight (plain variants)."""

    @pytest.mark.parametrize("generator", [poly_lookup, sinc_lookup])
    @pytest.mark.parametrize("offset", [0.0, 3e-6, -3e-6, 9.9e-6])
    def test_unit_weight(self, generator, offset):
        dim = 12
        for q in (1, 2, 3, 4, 7, 10):
            for sample in range(1, dim + 1):
                lut = generator(sample + offset, q, dim)
                assert lut.d1 == sample
                assert lut.length == 1
                assert lut.weights[0] == 1.0


class TestSamplePoints:
    """Lagrange weights at a sample are the unit vector."""

    @pytest.mark.parametrize("q", range(1, 9))
    def test_unit_vector(self, q):
        dim = 12
        for sample in range(1, dim + 1):
            lut = poly_grad_lookup(float(sample), q, dim)
            expected = (lut.indices == sample).astype(np.float64)
            np.testing.assert_allclose(lut.weights, expected, atol=1e-9)


# ── Derivative consistency ──────────────────────────────────────────────


class TestDerivativeConsistency:
    """Lagrange derivatives agree with a central difference of weights."""

    @pytest.mark.parametrize("q", range(2, 9))
    @pytest.mark.parametrize("coord", [4.3, 5.7, 6.25, 7.9])
    def test_central_difference(self, q, coord):
        dim = 12
        h = 1e-4
        lut = poly_grad_lookup(coord, q, dim)
        lo = poly_lookup(coord - h, q, dim)
        hi = poly_lookup(coord + h, q, dim)
        assert lo.d1 == hi.d1 == lut.d1
        central = (hi.weights - lo.weights) / (2 * h)
        np.testing.assert_allclose(lut.derivatives, central, atol=1e-3)


# ── Denominator cache ───────────────────────────────────────────────────


class TestCacheTransparency:
    """Outputs do not depend on cache state."""

    def test_reused_and_fresh_caches_agree(self):
        shared = DenominatorCache()
        first = poly_lookup(4.3, 5, 10, cache=shared).weights.copy()
        second = poly_lookup(6.1, 5, 10, cache=shared).weights.copy()

        np.testing.assert_array_equal(
            poly_lookup(4.3, 5, 10, cache=DenominatorCache()).weights, first,
        )
        np.testing.assert_array_equal(
            poly_lookup(6.1, 5, 10, cache=DenominatorCache()).weights, second,
        )

    def test_cleared_default_cache(self):
        before = poly_lookup(4.3, 6, 10).weights.copy()
        default_cache().clear()
        after = poly_lookup(4.3, 6, 10).weights.copy()
        np.testing.assert_array_equal(before, after)

    def test_interleaved_orders(self):
        cache = DenominatorCache()
        reference = poly_grad_lookup(4.3, 4, 10, cache=cache)
        weights = reference.weights.copy()
        derivatives = reference.derivatives.copy()
        poly_lookup(4.3, 7, 10, cache=cache)
        again = poly_grad_lookup(4.3, 4, 10, cache=cache)
        np.testing.assert_array_equal(again.weights, weights)
        np.testing.assert_array_equal(again.derivatives, derivatives)


# ── End-to-end scenarios ────────────────────────────────────────────────


class TestScenarios:
    """Reference scenarios across the four generators."""

    def test_poly_exact_sample(self):
        lut = poly_lookup(3.0, 4, 10)
        assert (lut.d1, lut.length) == (3, 1)
        assert lut.weights[0] == 1.0

    def test_poly_midpoint(self):
        lut = poly_lookup(3.5, 4, 10)
        assert (lut.d1, lut.length) == (2, 4)
        assert lut.weights.sum() == pytest.approx(1.0, abs=1e-12)
        assert lut.weights[0] == pytest.approx(lut.weights[3], abs=1e-14)
        assert lut.weights[1] == pytest.approx(lut.weights[2], abs=1e-14)

    def test_poly_left_clamped(self):
        lut = poly_lookup(0.7, 4, 10)
        assert (lut.d1, lut.length) == (1, 2)
        assert lut.weights.sum() != pytest.approx(1.0, abs=1e-3)

    def test_poly_outside(self):
        lut = poly_lookup(12.0, 4, 10)
        assert lut.d1 == 12
        assert lut.end < 0

    def test_sinc_midpoint(self):
        lut = sinc_lookup(5.5, 6, 10)
        assert (lut.d1, lut.d2) == (3, 8)
        assert lut.weights.sum() == pytest.approx(1.0, abs=1e-12)

    def test_sinc_grad_at_sample(self):
        lut = sinc_grad_lookup(4.0, 6, 10)
        assert (lut.d1, lut.d2) == (2, 7)
        assert lut.weights[4 - lut.d1] == pytest.approx(1.0, abs=1e-9)
        assert np.all(np.isfinite(lut.derivatives))
