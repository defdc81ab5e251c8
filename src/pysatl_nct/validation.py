"""
Parameter Validation
====================

Type and shape checks for the scalar and parallel-array inputs of the
entry points.

All checks run before any per-element work so that a malformed call fails as
a whole and never produces partial output.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_nct.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Sequence, Sized

    from pysatl_nct.types import ArrayLike, FloatArray


def validate_equal_length(*arrays: Sized, names: Sequence[str] | None = None) -> None:
    """
    Check that all sequences have the same length.

    Parameters
    ----------
    *arrays : Sized
        Two or more sequences intended to be iterated in lock-step.
    names : Sequence[str], optional
        Names of the sequences, used in the error message.

    Raises
    ------
    InvalidArgumentError
        If fewer than two sequences are given or their lengths differ.

    Notes
    -----
    Zero-length inputs are valid; they simply yield empty results downstream.
    """
    if len(arrays) < 2:
        raise InvalidArgumentError("At least two sequences are required for a length check.")
    if names is not None and len(names) != len(arrays):
        raise InvalidArgumentError(
            f"Got {len(names)} names for {len(arrays)} sequences in a length check."
        )

    lengths = [len(a) for a in arrays]
    if len(set(lengths)) == 1:
        return

    labels = names if names is not None else [f"#{i}" for i in range(len(arrays))]
    described = ", ".join(f"{label}={n}" for label, n in zip(labels, lengths, strict=True))
    raise InvalidArgumentError(f"Input vectors must have the same length (got {described}).")


def as_float(value: object, name: str = "value") -> float:
    """
    Convert a scalar argument to ``float``.

    Raises
    ------
    InvalidArgumentError
        If ``value`` is not a real number.
    """
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"'{name}' must be a number, got {value!r}.") from exc


def as_float_vector(values: ArrayLike, name: str = "values") -> FloatArray:
    """
    Convert caller input into a fresh one-dimensional ``float64`` array.

    Parameters
    ----------
    values : ArrayLike
        Scalar, sequence or array of numbers. A scalar becomes a vector of
        length one.
    name : str, default "values"
        Argument name used in error messages.

    Returns
    -------
    FloatArray
        A copy of the input; later changes to ``values`` do not affect it.

    Raises
    ------
    InvalidArgumentError
        If the input is not numeric or has more than one dimension.
    """
    try:
        arr = np.array(values, dtype=np.float64, copy=True)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"'{name}' must contain only numbers.") from exc

    if arr.ndim == 0:
        return arr.reshape(1)
    if arr.ndim != 1:
        raise InvalidArgumentError(
            f"'{name}' must be one-dimensional, got an array of shape {arr.shape}."
        )
    return arr


__all__ = [
    "as_float",
    "as_float_vector",
    "validate_equal_length",
]
