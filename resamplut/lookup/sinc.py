# -*- coding: utf-8 -*-
"""
Windowed Sinc Lookup Tables - Hanning-windowed sinc resampling weights.

Kernel for a sample at distance ``delta = coord - index``:

    w(delta) = sin(pi delta) / (pi delta) * 0.5 (1 + cos(2 pi delta / q))

The Hanning envelope reaches zero at ``|delta| = q / 2``. Emitted weights
are divided by their sum so every table integrates to unity, including
tables truncated at either end of the axis.

The gradient variant is a forward difference of the normalised kernel
with step 1e-6, normalising the shifted column separately. The
analytical derivative of the unnormalised kernel is not used.

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
import math
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
from resamplut.lookup.span import raw_bounds

# Reference tables were generated with this value of pi.
PI = 3.14159265358979

# Forward-difference step of the derivative table.
SINC_GRAD_STEP = 0.000001

# Distances at or below this take the kernel's limit value 1.0.
SINC_LIMIT = 1e-12


def _clamped_bounds(coord: float, q: int, dim: int):
    d1, d2 = raw_bounds(coord, q)
    return max(d1, 1), min(d2, dim)


def _hanning_sinc(arg: float, q: int) -> float:
    """Windowed sinc at ``arg = pi * delta``; ``arg`` must be non-zero."""
    return math.sin(arg) / arg * 0.5 * (1.0 + math.cos(2 * arg / q))


def _hanning_sinc_limit(delta: float, q: int) -> float:
    if abs(delta) > SINC_LIMIT:
        return _hanning_sinc(PI * delta, q)
    return 1.0


def _normalise(column: np.ndarray, total: float) -> None:
    if total == 0.0:
        # Only a lone sample on a zero of the envelope sums to zero; its
        # normalised weight is 1 by continuity.
        column[:] = 1.0
    else:
        column /= total


def sinc_lookup(
    coord: float,
    q: int,
    dim: int,
    table: Optional[np.ndarray] = None,
) -> LookupTable:
    """Hanning-windowed sinc weights for ``coord``, summing to one.

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

    Returns
    -------
    LookupTable
        First sample index and a view over the normalised weights.
    """
    coord = float(coord)
    table = allocate(table, q)

    if near_sample(coord):
        return nearest_neighbour(coord, dim, table)

    d1, d2 = _clamped_bounds(coord, q, dim)
    n = d2 - d1 + 1
    if n <= 0:
        return LookupTable(d1, table[:0])

    sm = 0.0
    for i in range(n):
        w = _hanning_sinc(PI * (coord - (d1 + i)), q)
        table[i] = w
        sm += w

    weights = table[:n]
    _normalise(weights, sm)
    return LookupTable(d1, weights)


def sinc_grad_lookup(
    coord: float,
    q: int,
    dim: int,
    table: Optional[np.ndarray] = None,
    dtable: Optional[np.ndarray] = None,
) -> LookupTable:
    """Hanning-windowed sinc weights and their derivatives for ``coord``.

    No nearest-sample shortcut; a sample at distance 1e-12 or less
    takes the kernel's limit value 1.0 before normalisation.

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

    Returns
    -------
    LookupTable
        First sample index with views over the normalised weights and
        their derivatives (d weight / d coord).
    """
    coord = float(coord)
    table = allocate(table, q)
    dtable = allocate(dtable, q)

    d1, d2 = _clamped_bounds(coord, q, dim)
    n = d2 - d1 + 1
    if n <= 0:
        return LookupTable(d1, table[:0], dtable[:0])

    sm = 0.0
    sm1 = 0.0
    for i in range(n):
        d = d1 + i
        w = _hanning_sinc_limit(coord - d, q)
        table[i] = w
        sm += w
        w = _hanning_sinc_limit(coord - d + SINC_GRAD_STEP, q)
        dtable[i] = w
        sm1 += w

    weights = table[:n]
    derivatives = dtable[:n]
    _normalise(weights, sm)
    _normalise(derivatives, sm1)
    derivatives -= weights
    derivatives /= SINC_GRAD_STEP
    return LookupTable(d1, weights, derivatives)


class SincLookup(LookupGenerator):
    """Hanning-windowed sinc weight table generator.

    Parameters
    ----------
    order : int
        Kernel width ``q`` in samples; the Hanning envelope reaches zero
        at a distance of ``q / 2``.
    dim : int
        Number of samples along the axis.
    gradient : bool
        Also produce d weight / d coord. Default False.

    Examples
    --------
    >>> lut = SincLookup(order=6, dim=10)(5.5)
    >>> lut.d1, lut.d2
    (3, 8)
    """

    def _generate(self, coord, table, dtable) -> LookupTable:
        if self.gradient:
            return sinc_grad_lookup(coord, self.order, self.dim,
                                    table, dtable)
        return sinc_lookup(coord, self.order, self.dim, table)


def sinc_generator(
    order: int,
    dim: int,
    gradient: bool = False,
) -> SincLookup:
    """Create a Hanning-windowed sinc weight table generator.

    Convenience factory function. See :class:`SincLookup` for full
    documentation.

    Returns
    -------
    SincLookup
        Callable generator.
    """
    return SincLookup(order=order, dim=dim, gradient=gradient)
