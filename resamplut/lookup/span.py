# -*- coding: utf-8 -*-
"""
Kernel Span - Signed offset range and anchor sample for a kernel order.

A kernel of order q touches exactly q neighbouring samples. The offsets
of those samples relative to the anchor sample form the span
``[k0, k1]``:

- odd q:  ``k0 = -(q - 1) / 2``, ``k1 = (q - 1) / 2`` (symmetric)
- even q: ``k0 = -(q - 2) / 2``, ``k1 = q / 2`` (biased by +1/2)

The anchor is the nearest sample for odd q and the sample at or left of
the coordinate for even q, so the even-order span straddles the target.

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
from typing import NamedTuple


class KernelSpan(NamedTuple):
    """Signed offset range ``[k0, k1]`` of a kernel, inclusive."""

    k0: int
    k1: int


def kernel_span(q: int) -> KernelSpan:
    """Offset range for a kernel of order ``q``.

    Parameters
    ----------
    q : int
        Kernel support width in samples, ``1 <= q <= 255``.

    Returns
    -------
    KernelSpan
        ``(k0, k1)`` holding exactly ``q`` integers.
    """
    if q % 2:
        return KernelSpan(-((q - 1) // 2), (q - 1) // 2)
    return KernelSpan(-((q - 2) // 2), q // 2)


def anchor(coord: float, q: int) -> int:
    """Integer sample that offset 0 of the span refers to.

    Parameters
    ----------
    coord : float
        Target position along the axis, 1-indexed.
    q : int
        Kernel order.

    Returns
    -------
    int
        ``floor(coord + 0.5)`` for odd ``q``, ``floor(coord)`` for even.
    """
    return math.floor(coord + 0.5 if q % 2 else coord)


def raw_bounds(coord: float, q: int) -> tuple:
    """Unclamped first and last sample indices a kernel would touch.

    Returns
    -------
    tuple of int
        ``(anchor + k0, anchor + k1)`` before any boundary clamping.
    """
    k0, k1 = kernel_span(q)
    fcoord = anchor(coord, q)
    return fcoord + k0, fcoord + k1
