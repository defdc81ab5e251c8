"""
Distribution Collections
========================

An ordered, immutable collection of :class:`DistributionHandle` objects used
by the two-phase "build once, evaluate many points" pattern.

The collection stores its handles by value in a tuple. Handles are themselves
immutable, so nothing the caller does to the arrays used for construction can
invalidate a collection later.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

import numpy as np

from pysatl_nct.families.builtins import noncentral_t
from pysatl_nct.families.distribution import DistributionHandle
from pysatl_nct.validation import as_float_vector, validate_equal_length

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pysatl_nct.types import ArrayLike, FloatArray


@dataclass(frozen=True, slots=True)
class DistributionCollection(Sequence[DistributionHandle]):
    """
    Ordered collection of distribution handles, indexed ``0..n-1``.

    Parameters
    ----------
    handles : tuple[DistributionHandle, ...]
        Handles owned by the collection.

    Notes
    -----
    Evaluation APIs refer to members by position, not by value: two equal
    handles at different positions are two separate columns of a result.
    """

    handles: tuple[DistributionHandle, ...]

    def __post_init__(self) -> None:
        # Accept any iterable of handles but always own a tuple.
        object.__setattr__(self, "handles", tuple(self.handles))

    @classmethod
    def from_handles(cls, handles: Iterable[DistributionHandle]) -> DistributionCollection:
        """Build a collection from existing handles."""
        return cls(tuple(handles))

    @classmethod
    def from_parameters(cls, df: ArrayLike, ncp: ArrayLike) -> DistributionCollection:
        """
        Build one non-central t handle per index of ``df`` and ``ncp``.

        Parameters
        ----------
        df : ArrayLike
            Degrees of freedom, one per distribution.
        ncp : ArrayLike
            Non-centrality parameters, same length as ``df``.

        Returns
        -------
        DistributionCollection
            Collection whose ``i``-th member is ``NoncentralT(df[i], ncp[i])``.

        Raises
        ------
        InvalidArgumentError
            If the inputs are malformed or their lengths differ.
        """
        df_arr = as_float_vector(df, "df")
        ncp_arr = as_float_vector(ncp, "ncp")
        validate_equal_length(df_arr, ncp_arr, names=("df", "ncp"))
        return cls(tuple(noncentral_t(d, c) for d, c in zip(df_arr, ncp_arr, strict=True)))

    @overload
    def __getitem__(self, index: int) -> DistributionHandle: ...
    @overload
    def __getitem__(self, index: slice) -> DistributionCollection: ...

    def __getitem__(self, index: int | slice) -> DistributionHandle | DistributionCollection:
        if isinstance(index, slice):
            return DistributionCollection(self.handles[index])
        return self.handles[index]

    def __len__(self) -> int:
        return len(self.handles)

    def __iter__(self) -> Iterator[DistributionHandle]:
        return iter(self.handles)

    @property
    def degrees_of_freedom(self) -> FloatArray:
        """Degrees of freedom of every member, as a fresh array."""
        return np.array([h.df for h in self.handles], dtype=np.float64)

    @property
    def non_centrality(self) -> FloatArray:
        """Non-centrality parameters of every member, as a fresh array."""
        return np.array([h.ncp for h in self.handles], dtype=np.float64)
