# -*- coding: utf-8 -*-
"""
Lookup Base Classes - Weight table result and generator ABC.

Defines ``LookupTable`` (the first sample index plus bounded views over
the written prefix of the caller's buffers) and ``LookupGenerator``, the
template for generators bound to one kernel order and one axis length.
Bound generators validate their configuration once and then call the
unchecked module-level table functions for every coordinate.

Indices are 1-based throughout: weight ``i`` of a table applies to
sample ``d1 + i``, which is ``samples[d1 + i - 1]`` in a numpy vector.

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
from abc import ABC, abstractmethod
from typing import Optional

# Third-party
import numpy as np

# Resamplut internal
from resamplut.exceptions import ValidationError
from resamplut.lookup._validation import (
    validate_buffer,
    validate_dim,
    validate_order,
    validate_samples,
)

logger = logging.getLogger(__name__)

# Coordinates closer than this to a sample use that sample alone.
NEAREST_TOLERANCE = 1e-5


class LookupTable:
    """Weights (and optional derivatives) for one target coordinate.

    Parameters
    ----------
    d1 : int
        1-based index of the sample the first weight applies to. For an
        empty table this is the index the kernel would have started at.
    weights : np.ndarray
        View over the written prefix of the weight buffer.
    derivatives : np.ndarray, optional
        View over the written prefix of the derivative buffer, present
        for the gradient variants only.

    Attributes
    ----------
    d1 : int
    weights : np.ndarray
    derivatives : np.ndarray or None
    """

    def __init__(
        self,
        d1: int,
        weights: np.ndarray,
        derivatives: Optional[np.ndarray] = None,
    ) -> None:
        self.d1 = d1
        self.weights = weights
        self.derivatives = derivatives

    @property
    def length(self) -> int:
        """Number of weights written."""
        return self.weights.shape[0]

    @property
    def end(self) -> int:
        """Inclusive end position in the buffer; -1 when empty."""
        return self.length - 1

    @property
    def d2(self) -> int:
        """1-based index of the sample the last weight applies to."""
        return self.d1 + self.length - 1

    @property
    def is_empty(self) -> bool:
        """Whether the kernel lies entirely outside the axis."""
        return self.length == 0

    @property
    def indices(self) -> np.ndarray:
        """1-based sample indices ``d1 .. d2``."""
        return np.arange(self.d1, self.d1 + self.length)

    def apply(self, samples: np.ndarray):
        """Weighted sum of ``samples`` over the table's indices.

        Parameters
        ----------
        samples : np.ndarray
            1-D sample vector along the axis, real or complex. Sample
            index ``d`` is ``samples[d - 1]``.

        Returns
        -------
        scalar
            Interpolated value; zero for an empty table.

        Raises
        ------
        ValidationError
            If ``samples`` is not 1-D or does not reach index ``d2``.
        """
        samples = validate_samples(samples, self._reach)
        return _weighted_sum(self.weights, samples, self.d1)

    def apply_gradient(self, samples: np.ndarray):
        """Derivative of the interpolated value with respect to coord.

        Raises
        ------
        ValidationError
            If the table carries no derivatives, or ``samples`` is not
            1-D or does not reach index ``d2``.
        """
        if self.derivatives is None:
            raise ValidationError(
                "lookup table has no derivatives; use a gradient variant"
            )
        samples = validate_samples(samples, self._reach)
        return _weighted_sum(self.derivatives, samples, self.d1)

    @property
    def _reach(self) -> int:
        return 0 if self.is_empty else self.d2

    def __repr__(self) -> str:
        return (
            f"LookupTable(d1={self.d1}, length={self.length}, "
            f"gradient={self.derivatives is not None})"
        )


def _weighted_sum(weights: np.ndarray, samples: np.ndarray, d1: int):
    n = weights.shape[0]
    if n == 0:
        return np.result_type(samples.dtype, np.float64).type(0)
    return np.dot(weights, samples[d1 - 1:d1 - 1 + n])


def allocate(buffer: Optional[np.ndarray], q: int) -> np.ndarray:
    """Return ``buffer``, or a fresh float64 buffer of ``q`` elements."""
    if buffer is None:
        return np.empty(q, dtype=np.float64)
    return buffer


def near_sample(coord: float) -> bool:
    """Whether ``coord`` is within ``NEAREST_TOLERANCE`` of an integer."""
    return abs(coord - round(coord)) < NEAREST_TOLERANCE


def nearest_neighbour(coord: float, dim: int,
                      table: np.ndarray) -> LookupTable:
    """Single unit weight at the sample nearest ``coord``.

    Empty when that sample lies outside ``[1, dim]``.
    """
    d1 = round(coord)
    if d1 < 1 or d1 > dim:
        return LookupTable(d1, table[:0])
    table[0] = 1.0
    return LookupTable(d1, table[:1])


class LookupGenerator(ABC):
    """Weight table generator bound to a kernel order and axis length.

    Validates ``order`` and ``dim`` once at construction; every call
    then goes straight to the unchecked table function. Subclasses only
    implement :meth:`_generate`.

    Parameters
    ----------
    order : int
        Kernel support width in samples, ``1 <= order <= 255``.
    dim : int
        Number of samples along the axis, ``>= 1``.
    gradient : bool
        Also produce the derivative table. Default False.
    """

    def __init__(self, order: int, dim: int, gradient: bool = False) -> None:
        validate_order(order)
        validate_dim(dim)
        self.order = int(order)
        self.dim = int(dim)
        self.gradient = bool(gradient)
        logger.debug(
            "Instantiating %s(order=%d, dim=%d, gradient=%s)",
            type(self).__qualname__, self.order, self.dim, self.gradient,
        )

    @abstractmethod
    def _generate(
        self,
        coord: float,
        table: Optional[np.ndarray],
        dtable: Optional[np.ndarray],
    ) -> LookupTable:
        """Build the table for ``coord`` into the given buffers.

        Parameters
        ----------
        coord : float
            Target position along the axis, 1-indexed.
        table : np.ndarray or None
            Weight buffer; allocated when None.
        dtable : np.ndarray or None
            Derivative buffer for gradient generators; allocated when
            None. Ignored otherwise.

        Returns
        -------
        LookupTable
        """
        ...

    def __call__(
        self,
        coord: float,
        table: Optional[np.ndarray] = None,
        dtable: Optional[np.ndarray] = None,
    ) -> LookupTable:
        """Weight table for ``coord``.

        Parameters
        ----------
        coord : float
            Target position along the axis, 1-indexed.
        table : np.ndarray, optional
            Caller-owned float64 weight buffer of at least ``order``
            elements. Allocated per call when omitted.
        dtable : np.ndarray, optional
            Caller-owned derivative buffer, gradient generators only.

        Returns
        -------
        LookupTable
            Views over the written prefix of the buffers.

        Raises
        ------
        ValidationError
            If a buffer is unsuitable, or ``dtable`` is given to a
            generator built without ``gradient``.
        """
        if table is not None:
            validate_buffer(table, self.order, 'table')
        if dtable is not None:
            if not self.gradient:
                raise ValidationError(
                    "dtable given to a generator built with gradient=False"
                )
            validate_buffer(dtable, self.order, 'dtable')
            if table is not None and np.shares_memory(table, dtable):
                raise ValidationError("table and dtable must not overlap")
        return self._generate(float(coord), table, dtable)

    def resample(self, samples: np.ndarray, coords) -> np.ndarray:
        """Evaluate a 1-D sample vector at each of ``coords``.

        Parameters
        ----------
        samples : np.ndarray
            Sample values along the axis, shape ``(dim,)``; real or
            complex. Sample index ``d`` is ``samples[d - 1]``.
        coords : array_like
            Target positions, 1-indexed, any shape.

        Returns
        -------
        np.ndarray
            Interpolated values, shape of ``coords``. Targets whose
            kernel lies entirely outside the axis are 0.

        Notes
        -----
        A convenience path: one table is built per coordinate in a
        Python loop, reusing a single pair of buffers. Each output equals
        ``self(coord).apply(samples)`` bit for bit.
        """
        return self._resample(samples, coords, derivative=False)

    def resample_gradient(self, samples: np.ndarray, coords) -> np.ndarray:
        """Derivative of :meth:`resample` with respect to each coord.

        Raises
        ------
        ValidationError
            If the generator was built with ``gradient=False``.
        """
        if not self.gradient:
            raise ValidationError(
                "resample_gradient requires a generator built with "
                "gradient=True"
            )
        return self._resample(samples, coords, derivative=True)

    def _resample(self, samples, coords, derivative: bool) -> np.ndarray:
        samples = validate_samples(samples, self.dim)
        coords = np.asarray(coords, dtype=np.float64)
        out_dtype = np.result_type(samples.dtype, np.float64)
        result = np.zeros(coords.size, dtype=out_dtype)

        table = np.empty(self.order, dtype=np.float64)
        dtable = None
        if self.gradient:
            dtable = np.empty(self.order, dtype=np.float64)

        for i, coord in enumerate(coords.ravel()):
            lut = self._generate(float(coord), table, dtable)
            column = lut.derivatives if derivative else lut.weights
            result[i] = _weighted_sum(column, samples, lut.d1)

        return result.reshape(coords.shape)
