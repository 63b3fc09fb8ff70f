# -*- coding: utf-8 -*-
"""
Lookup - One-dimensional resampling weight tables.

Given a sub-pixel target coordinate, a kernel order and an axis length,
each generator returns the first sample index and the weight every
neighbouring sample contributes, optionally with the derivatives of
those weights with respect to the coordinate.

Table functions (unchecked, for inner loops):

- ``poly_lookup`` / ``poly_grad_lookup`` — Lagrange polynomial of
  degree ``q - 1`` through ``q`` samples, with a cached denominator
  table per order.
- ``sinc_lookup`` / ``sinc_grad_lookup`` — Hanning-windowed sinc,
  normalised to unit sum.

Bound generators (validated once, then called per coordinate):

- ``PolynomialLookup`` / ``polynomial_generator``
- ``SincLookup`` / ``sinc_generator``

Supporting types:

- ``LookupTable`` — first index plus views over the written prefix.
- ``LookupGenerator`` — ABC for bound generators.
- ``KernelSpan`` / ``kernel_span`` — signed offset range of a kernel.
- ``DenominatorCache`` — per-order Lagrange denominator table.

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

from resamplut.lookup.span import KernelSpan, kernel_span, anchor
from resamplut.lookup.denominators import (
    DenominatorCache,
    DenominatorTable,
    default_cache,
)
from resamplut.lookup.base import LookupGenerator, LookupTable
from resamplut.lookup.polynomial import (
    PolynomialLookup,
    poly_grad_lookup,
    poly_lookup,
    polynomial_generator,
)
from resamplut.lookup.sinc import (
    SincLookup,
    sinc_generator,
    sinc_grad_lookup,
    sinc_lookup,
)

__all__ = [
    'KernelSpan',
    'kernel_span',
    'anchor',
    'DenominatorCache',
    'DenominatorTable',
    'default_cache',
    'LookupGenerator',
    'LookupTable',
    'PolynomialLookup',
    'poly_lookup',
    'poly_grad_lookup',
    'polynomial_generator',
    'SincLookup',
    'sinc_lookup',
    'sinc_grad_lookup',
    'sinc_generator',
]
