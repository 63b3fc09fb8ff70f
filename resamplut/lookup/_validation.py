# -*- coding: utf-8 -*-
"""
Lookup Validation Helpers - Shared order, axis length and buffer checks.

The four table generators never validate their inputs; these helpers are
called once by the bound generator classes so a consumer validates per
image rather than per sample.

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

# Resamplut internal
from resamplut.exceptions import ValidationError


MAX_ORDER = 255


def validate_order(order: int, name: str = 'order') -> None:
    """Validate that a kernel order is an integer in ``[1, MAX_ORDER]``.

    Parameters
    ----------
    order : int
        Kernel support width in samples.
    name : str
        Parameter name for error messages. Default ``'order'``.

    Raises
    ------
    ValidationError
        If ``order`` is not an integer or lies outside ``[1, 255]``.
    """
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise ValidationError(
            f"{name} must be an integer, got {type(order).__name__}"
        )
    if order < 1 or order > MAX_ORDER:
        raise ValidationError(
            f"{name} must be in [1, {MAX_ORDER}], got {order}"
        )


def validate_dim(dim: int, name: str = 'dim') -> None:
    """Validate that an axis length is an integer >= 1.

    Raises
    ------
    ValidationError
        If ``dim`` is not an integer or is less than 1.
    """
    if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)):
        raise ValidationError(
            f"{name} must be an integer, got {type(dim).__name__}"
        )
    if dim < 1:
        raise ValidationError(f"{name} must be >= 1, got {dim}")


def validate_buffer(buffer: np.ndarray, capacity: int,
                    name: str = 'table') -> None:
    """Validate a caller-supplied output buffer.

    Parameters
    ----------
    buffer : np.ndarray
        Output buffer the generator will write into.
    capacity : int
        Minimum number of elements required (the kernel order).
    name : str
        Parameter name for error messages. Default ``'table'``.

    Raises
    ------
    ValidationError
        If ``buffer`` is not a writeable 1-D float64 ndarray holding at
        least ``capacity`` elements.
    """
    if not isinstance(buffer, np.ndarray):
        raise ValidationError(
            f"{name} must be a numpy array, got {type(buffer).__name__}"
        )
    if buffer.ndim != 1:
        raise ValidationError(
            f"{name} must be 1-D, got shape {buffer.shape}"
        )
    if buffer.dtype != np.float64:
        raise ValidationError(
            f"{name} must have dtype float64, got {buffer.dtype}"
        )
    if not buffer.flags.writeable:
        raise ValidationError(f"{name} must be writeable")
    if buffer.shape[0] < capacity:
        raise ValidationError(
            f"{name} must hold at least {capacity} elements, "
            f"got {buffer.shape[0]}"
        )


def validate_samples(samples: np.ndarray, dim: int) -> np.ndarray:
    """Validate a 1-D sample vector along one axis.

    Parameters
    ----------
    samples : np.ndarray
        Sample values, shape ``(dim,)``; real or complex.
    dim : int
        Number of valid samples along the axis.

    Returns
    -------
    np.ndarray
        ``samples`` as an ndarray.

    Raises
    ------
    ValidationError
        If ``samples`` is not 1-D or holds fewer than ``dim`` values.
    """
    samples = np.asarray(samples)
    if samples.ndim != 1:
        raise ValidationError(
            f"samples must be 1-D, got shape {samples.shape}"
        )
    if samples.shape[0] < dim:
        raise ValidationError(
            f"samples must hold at least {dim} values, "
            f"got {samples.shape[0]}"
        )
    return samples
