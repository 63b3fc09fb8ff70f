# -*- coding: utf-8 -*-
"""
Resamplut - Per-axis resampling weight tables.

Generates the one-dimensional weight tables used to evaluate an image at
an arbitrary real-valued coordinate along one axis: Lagrange polynomial
and Hanning-windowed sinc kernels, each optionally paired with a table
of numerical weight derivatives.

Dependencies
------------
numpy

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

__version__ = "0.1.0"

from resamplut.exceptions import ResamplutError, ValidationError

__all__ = [
    'ResamplutError',
    'ValidationError',
]
