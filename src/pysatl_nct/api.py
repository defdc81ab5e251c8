"""
Public Entry Points
===================

Function-style API over a shared default :class:`~pysatl_nct.evaluator.Evaluator`.

- ``dnct`` / ``pnct`` / ``qnct``: scalar density, CDF and quantile;
- ``dnct_vector`` / ``pnct_vector`` / ``qnct_vector``: element-wise over
  equal-length ``values``, ``df`` and ``ncp`` arrays;
- ``build_distribution_collection``: one handle per ``(df[i], ncp[i])``;
- ``evaluate_distributions``: matrix of shape ``(len(x), len(collection))``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_nct.evaluator import Evaluator
from pysatl_nct.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_nct.distributions.collection import DistributionCollection
    from pysatl_nct.types import ArrayLike, FloatArray, GenericCharacteristicName

_default_evaluator: Evaluator | None = None


def get_default_evaluator() -> Evaluator:
    """Return the evaluator used by the module-level functions."""
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = Evaluator()
    return _default_evaluator


def set_default_evaluator(evaluator: Evaluator | None) -> None:
    """
    Replace the evaluator used by the module-level functions.

    Parameters
    ----------
    evaluator : Evaluator or None
        New default; ``None`` restores a serial evaluator.
    """
    global _default_evaluator
    _default_evaluator = evaluator


def dnct(x: float, df: float, ncp: float) -> float:
    """Density of the non-central t distribution at ``x``."""
    return get_default_evaluator().density(x, df, ncp)


def pnct(q: float, df: float, ncp: float) -> float:
    """Cumulative distribution function of the non-central t distribution at ``q``."""
    return get_default_evaluator().cumulative(q, df, ncp)


def qnct(p: float, df: float, ncp: float) -> float:
    """Quantile function of the non-central t distribution at probability ``p``."""
    return get_default_evaluator().quantile(p, df, ncp)


def dnct_vector(x: ArrayLike, df: ArrayLike, ncp: ArrayLike) -> FloatArray:
    """
    Element-wise density over equal-length ``x``, ``df`` and ``ncp``.

    Raises
    ------
    InvalidArgumentError
        If the lengths differ.
    ComputationError
        If any element fails; ``index`` gives its position.
    """
    return get_default_evaluator().density_vector(x, df, ncp)


def pnct_vector(q: ArrayLike, df: ArrayLike, ncp: ArrayLike) -> FloatArray:
    """Element-wise CDF over equal-length ``q``, ``df`` and ``ncp``."""
    return get_default_evaluator().cumulative_vector(q, df, ncp)


def qnct_vector(p: ArrayLike, df: ArrayLike, ncp: ArrayLike) -> FloatArray:
    """Element-wise quantile over equal-length ``p``, ``df`` and ``ncp``."""
    return get_default_evaluator().quantile_vector(p, df, ncp)


def build_distribution_collection(df: ArrayLike, ncp: ArrayLike) -> DistributionCollection:
    """
    Build a collection of non-central t distributions, one per index.

    The collection keeps its own copies of the parameters.
    """
    return get_default_evaluator().build_collection(df, ncp)


def evaluate_distributions(
    collection: DistributionCollection,
    x: ArrayLike,
    characteristic: GenericCharacteristicName = CharacteristicName.PDF,
) -> FloatArray:
    """
    Evaluate every distribution of ``collection`` at every point of ``x``.

    Returns
    -------
    FloatArray
        Matrix of shape ``(len(x), len(collection))``; cell ``(j, i)`` is the
        characteristic of ``collection[i]`` at ``x[j]``.
    """
    return get_default_evaluator().evaluate_collection(collection, x, characteristic)


__all__ = [
    "build_distribution_collection",
    "dnct",
    "dnct_vector",
    "evaluate_distributions",
    "get_default_evaluator",
    "pnct",
    "pnct_vector",
    "qnct",
    "qnct_vector",
    "set_default_evaluator",
]
