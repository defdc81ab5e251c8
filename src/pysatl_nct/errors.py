"""
Error Taxonomy
==============

Exceptions raised by the evaluation engine.

- :class:`InvalidArgumentError` — the caller's input is malformed (length
  mismatch, wrong shape, unknown characteristic). Raised before any
  computation starts.
- :class:`ComputationError` — the mathematics could not be evaluated for the
  given parameter values (constraint violation, domain error, non-convergence).

Both derive from :class:`NctError` and from the closest builtin exception, so
callers may catch either the library type or ``ValueError`` /
``ArithmeticError``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

type ErrorIndex = int | tuple[int | None, int] | None


class NctError(Exception):
    """Base class for all errors raised by pysatl-nct."""


class InvalidArgumentError(NctError, ValueError):
    """Malformed input detected before any computation."""


class ComputationError(NctError, ArithmeticError):
    """
    Failure of the underlying distribution mathematics.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    index : int or tuple[int | None, int] or None, optional
        Position of the failing element: an ``int`` for element-wise
        calls, a ``(row, column)`` pair for matrix evaluation (``row`` is
        ``None`` when the whole column is invalid), ``None`` for scalar calls.
    """

    def __init__(self, message: str, index: ErrorIndex = None) -> None:
        super().__init__(message)
        self.index = index

    def at(self, index: ErrorIndex) -> ComputationError:
        """Return a copy of this error relocated to ``index``."""
        return ComputationError(f"{self} (at index {index})", index=index)


__all__ = [
    "ComputationError",
    "ErrorIndex",
    "InvalidArgumentError",
    "NctError",
]
