# -*- coding: utf-8 -*-
"""
Lagrange Lookup Tables - Polynomial resampling weights along one axis.

Builds the weights of the degree ``q - 1`` Lagrange polynomial through
the ``q`` samples around a target coordinate:

    w_k(x) = prod_{m != k} (x - m) / prod_{m != k} (k - m)

with ``x`` the coordinate relative to the anchor sample and ``k``, ``m``
ranging over the kernel span. The denominators come from a
``DenominatorCache``; the numerators are updated by the recurrence

    num_{k+1} = num_k * (x - k) / (x - (k + 1))

so a table costs O(q) rather than O(q^2).

The gradient variant adds the forward difference
``(w(x + 1e-5) - w(x)) / 1e-5``. The step and the formula are part of
the output contract and must not be replaced by an analytical
derivative.

Reference
---------
A. K. Jain, "Fundamentals of Digital Image Processing",
Prentice Hall, 1989, p. 98.

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

# Standard library
from typing import Optional

# Third-party
import numpy as np

# Resamplut internal
from resamplut.lookup.base import (
    LookupGenerator,
    LookupTable,
    allocate,
    near_sample,
    nearest_neighbour,
)
from resamplut.lookup.denominators import (
    DenominatorCache,
    DenominatorTable,
    default_cache,
)
from resamplut.lookup.span import anchor

# Forward-difference step of the derivative table.
GRAD_STEP = 0.00001

# Below this |x| the recurrence can divide by a vanishing x - k.
SLOW_PATH_LIMIT = 0.0001


def _clamped_span(coord: float, q: int, dim: int,
                  denom: DenominatorTable):
    """Anchor, first offset, denominator cursor, d1 and d2 after clamping.

    Offsets that would land on indices below 1 are skipped by advancing
    both the first offset and the denominator cursor.
    """
    k0, k1 = denom.span
    fcoord = anchor(coord, q)
    d1 = fcoord + k0
    if d1 >= 1:
        cursor = 0
    else:
        cursor = 1 - d1
        d1 = 1
    d2 = min(fcoord + k1, dim)
    return fcoord, k0 + cursor, cursor, d1, d2


def poly_lookup(
    coord: float,
    q: int,
    dim: int,
    table: Optional[np.ndarray] = None,
    cache: Optional[DenominatorCache] = None,
) -> LookupTable:
    """Lagrange interpolation weights for ``coord``.

    Coordinates within 1e-5 of a sample return that sample alone with
    weight 1.0.

    Parameters
    ----------
    coord : float
        Target position along the axis, 1-indexed.
    q : int
        Kernel order, ``1 <= q <= 255``. Not checked.
    dim : int
        Number of samples along the axis. Not checked.
    table : np.ndarray, optional
        Float64 buffer of at least ``q`` elements. Allocated when omitted.
    cache : DenominatorCache, optional
        Denominator cache to use. Defaults to the calling thread's cache.

    Returns
    -------
    LookupTable
        First sample index and a view over the written weights. Empty
        when the kernel lies entirely outside ``[1, dim]``.
    """
    coord = float(coord)
    table = allocate(table, q)
    if cache is None:
        cache = default_cache()
    denom = cache.get(q)

    if near_sample(coord):
        return nearest_neighbour(coord, dim, table)

    fcoord, k, cursor, d1, d2 = _clamped_span(coord, q, dim, denom)
    n = d2 - d1 + 1
    if n <= 0:
        return LookupTable(d1, table[:0])

    k0, k1 = denom.span
    x = coord - fcoord

    num = 1.0
    for m in range(k0, k):
        num = num * (x - m)
    for m in range(k + 1, k1 + 1):
        num = num * (x - m)
    table[0] = num / denom[cursor]

    for i in range(1, n):
        k += 1
        num = num * (x - k + 1) / (x - k)
        table[i] = num / denom[cursor + i]

    return LookupTable(d1, table[:n])


def poly_grad_lookup(
    coord: float,
    q: int,
    dim: int,
    table: Optional[np.ndarray] = None,
    dtable: Optional[np.ndarray] = None,
    cache: Optional[DenominatorCache] = None,
) -> LookupTable:
    """Lagrange interpolation weights and their derivatives for ``coord``.

    There is no nearest-sample shortcut: at a sample the weights come
    out as the exact unit vector and the derivatives stay defined.

    Parameters
    ----------
    coord : float
        Target position along the axis, 1-indexed.
    q : int
        Kernel order, ``1 <= q <= 255``. Not checked.
    dim : int
        Number of samples along the axis. Not checked.
    table : np.ndarray, optional
        Float64 weight buffer of at least ``q`` elements.
    dtable : np.ndarray, optional
        Float64 derivative buffer of at least ``q`` elements.
    cache : DenominatorCache, optional
        Denominator cache to use. Defaults to the calling thread's cache.

    Returns
    -------
    LookupTable
        First sample index with views over the written weights and
        derivatives (d weight / d coord).
    """
    coord = float(coord)
    table = allocate(table, q)
    dtable = allocate(dtable, q)
    if cache is None:
        cache = default_cache()
    denom = cache.get(q)

    fcoord, k, cursor, d1, d2 = _clamped_span(coord, q, dim, denom)
    n = d2 - d1 + 1
    if n <= 0:
        return LookupTable(d1, table[:0], dtable[:0])

    k0, k1 = denom.span
    x = coord - fcoord
    dx = x + GRAD_STEP

    if abs(x) > SLOW_PATH_LIMIT:
        num = 1.0
        dnum = 1.0
        for m in range(k0, k):
            num = num * (x - m)
            dnum = dnum * (dx - m)
        for m in range(k + 1, k1 + 1):
            num = num * (x - m)
            dnum = dnum * (dx - m)
        v = denom[cursor]
        table[0] = num / v
        dtable[0] = (dnum - num) / GRAD_STEP / v

        for i in range(1, n):
            k += 1
            num = num * (x - k + 1) / (x - k)
            dnum = dnum * (dx - k + 1) / (dx - k)
            v = denom[cursor + i]
            table[i] = num / v
            dtable[i] = (dnum - num) / GRAD_STEP / v
    else:
        # Full products per offset; x - k may be zero.
        for i in range(n):
            num = 1.0
            dnum = 1.0
            for m in range(k0, k):
                num = num * (x - m)
                dnum = dnum * (dx - m)
            for m in range(k + 1, k1 + 1):
                num = num * (x - m)
                dnum = dnum * (dx - m)
            v = denom[cursor + i]
            table[i] = num / v
            dtable[i] = (dnum - num) / GRAD_STEP / v
            k += 1

    return LookupTable(d1, table[:n], dtable[:n])


class PolynomialLookup(LookupGenerator):
    """Lagrange weight table generator for one order and axis length.

    Owns a private ``DenominatorCache``, so instances share no state
    with each other or with the module-level functions.

    Parameters
    ----------
    order : int
        Kernel order ``q``: the polynomial has degree ``q - 1`` and uses
        ``q`` samples. Common values:

        - 2 — linear
        - 4 — cubic
        - 6 — quintic

    dim : int
        Number of samples along the axis.
    gradient : bool
        Also produce d weight / d coord. Default False.

    Examples
    --------
    >>> lut = PolynomialLookup(order=4, dim=10)(3.5)
    >>> lut.d1, lut.length
    (2, 4)
    """

    def __init__(self, order: int, dim: int, gradient: bool = False) -> None:
        super().__init__(order, dim, gradient=gradient)
        self._cache = DenominatorCache()

    def _generate(self, coord, table, dtable) -> LookupTable:
        if self.gradient:
            return poly_grad_lookup(coord, self.order, self.dim,
                                    table, dtable, cache=self._cache)
        return poly_lookup(coord, self.order, self.dim, table,
                           cache=self._cache)


def polynomial_generator(
    order: int,
    dim: int,
    gradient: bool = False,
) -> PolynomialLookup:
    """Create a Lagrange weight table generator.

    Convenience factory function. See :class:`PolynomialLookup` for
    full documentation.

    Returns
    -------
    PolynomialLookup
        Callable generator.
    """
    return PolynomialLookup(order=order, dim=dim, gradient=gradient)
