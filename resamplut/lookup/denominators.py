# -*- coding: utf-8 -*-
"""
Lagrange Denominators - Per-order product table and its cache.

The Lagrange basis weight for offset k of a span ``[k0, k1]`` is

    l_k(x) = prod_{m != k} (x - m) / prod_{m != k} (k - m)

The denominator depends only on the kernel order, never on the target
coordinate, so it is computed once per order and reused for every
resampling that keeps the same order. ``DenominatorCache`` holds one
table and rebuilds it lazily whenever a different order is requested.

A default cache exists per thread (``default_cache``). Callers that want
no shared state pass their own ``DenominatorCache``; outputs are the same
either way.

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
import logging
import threading
from typing import List, Optional

# Third-party
import numpy as np

# Resamplut internal
from resamplut.lookup.span import kernel_span

logger = logging.getLogger(__name__)


class DenominatorTable:
    """Lagrange denominators ``prod_{m != k} (k - m)`` for one order.

    Parameters
    ----------
    q : int
        Kernel order.

    Attributes
    ----------
    order : int
    span : KernelSpan
    """

    def __init__(self, q: int) -> None:
        self.order = q
        self.span = kernel_span(q)
        k0, k1 = self.span
        products = []
        for k in range(k0, k1 + 1):
            v = 1.0
            # m < k and m > k as separate runs so that m != k
            for m in range(k0, k):
                v = v * (k - m)
            for m in range(k + 1, k1 + 1):
                v = v * (k - m)
            products.append(v)
        self._products: List[float] = products

    def __len__(self) -> int:
        return len(self._products)

    def __getitem__(self, i: int) -> float:
        """Denominator at cursor position ``i`` (offset ``k0 + i``)."""
        return self._products[i]

    @property
    def values(self) -> np.ndarray:
        """Copy of the denominators as a float64 array, offsets k0..k1."""
        return np.array(self._products, dtype=np.float64)


class DenominatorCache:
    """Lazily rebuilt denominator table keyed by kernel order.

    Holds at most one ``DenominatorTable``. Requesting the cached order
    returns the same table; any other order replaces it.

    Not locked: share an instance across threads only with external
    synchronisation.
    """

    def __init__(self) -> None:
        self._table: Optional[DenominatorTable] = None

    @property
    def order(self) -> Optional[int]:
        """Order of the cached table, or None when empty."""
        return None if self._table is None else self._table.order

    def get(self, q: int) -> DenominatorTable:
        """Denominator table for order ``q``, rebuilding on an order change.

        Parameters
        ----------
        q : int
            Kernel order, ``1 <= q <= 255``.

        Returns
        -------
        DenominatorTable
        """
        table = self._table
        if table is None or table.order != q:
            logger.debug("Building Lagrange denominators for q=%d", q)
            table = DenominatorTable(q)
            self._table = table
        return table

    def clear(self) -> None:
        """Forget the cached table."""
        self._table = None


_local = threading.local()


def default_cache() -> DenominatorCache:
    """The calling thread's shared denominator cache."""
    cache = getattr(_local, 'cache', None)
    if cache is None:
        cache = DenominatorCache()
        _local.cache = cache
    return cache
