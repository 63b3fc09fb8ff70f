# -*- coding: utf-8 -*-
"""
Byte Order - Fixed-width byte reversal for foreign-endian headers.

Image headers written on a machine of the other endianness read back
with their multi-byte fields reversed. These helpers flip the bytes of
2-byte integers, 4-byte integers, 4-byte floats and 8-byte floats.

Each accepts a scalar or an array-like (returning an ndarray of the
same dtype). Integer scalars come back as Python ints; float scalars
come back as numpy scalars of the swapped dtype, since widening to a
Python float quietens a signalling NaN. Swapping twice restores the
original bit pattern.

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


def _swap(x, dtype: np.dtype):
    swapped = np.asarray(x, dtype=dtype).byteswap()
    if swapped.ndim:
        return swapped
    if dtype.kind == 'f':
        return swapped[()]
    return swapped.item()


def swap_short(x):
    """Reverse the two bytes of a 16-bit signed integer."""
    return _swap(x, np.dtype(np.int16))


def swap_int(x):
    """Reverse the four bytes of a 32-bit signed integer."""
    return _swap(x, np.dtype(np.int32))


def swap_float(x):
    """Reverse the four bytes of a 32-bit float.

    The result reinterprets the reversed bytes as float32 and may be a
    NaN or a denormal.
    """
    return _swap(x, np.dtype(np.float32))


def swap_double(x):
    """Reverse the eight bytes of a 64-bit float."""
    return _swap(x, np.dtype(np.float64))
