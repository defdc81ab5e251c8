"""
Sampling Interfaces
===================

This module defines the protocol and the array-backed implementation of the
sample containers returned by :meth:`DistributionHandle.sample`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_nct.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import Any

    import numpy.typing as npt


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container of shape ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    InvalidArgumentError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise InvalidArgumentError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)


def inverse_transform_sample(
    ppf: Callable[[npt.NDArray[np.float64]], npt.NDArray[np.float64]],
    n: int,
    seed: int | np.random.Generator | None = None,
) -> ArraySample:
    """
    Draw ``n`` univariate variates by pushing uniforms through ``ppf``.

    Parameters
    ----------
    ppf : Callable
        Vectorized quantile function.
    n : int
        Number of observations, ``n >= 0``.
    seed : int or numpy.random.Generator or None, optional
        Seed or generator for the uniform variates.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """
    if n < 0:
        raise InvalidArgumentError(f"Sample size must be non-negative, got {n}")
    rng = np.random.default_rng(seed)
    u = rng.random(n)
    vals = np.asarray(ppf(u), dtype=np.float64).reshape(n, 1)
    return ArraySample(vals)
