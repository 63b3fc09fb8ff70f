# -*- coding: utf-8 -*-
"""
Resamplut Exception Hierarchy - Domain-specific exceptions.

Lets consumers catch resamplut errors distinctly from Python built-in
exceptions. Every resamplut exception subclasses both ``ResamplutError``
and the appropriate built-in exception for backward compatibility.

The weight-table generators themselves never raise; validation happens
once, where a consumer binds an order and an axis length.

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


class ResamplutError(Exception):
    """Base exception for all resamplut errors."""


class ValidationError(ResamplutError, ValueError):
    """Invalid input data, parameters, or buffers.

    Raised for out-of-range kernel orders, non-positive axis lengths,
    undersized or mistyped output buffers, and sample vectors that do
    not cover the indices of a lookup table.
    """
