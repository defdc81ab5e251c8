"""
Evaluation Engine
=================

:class:`Evaluator` computes characteristics (``pdf``, ``cdf``, ``ppf``) of the
non-central t-distribution in three calling modes:

- scalar: one point, one parameter pair;
- element-wise: parallel arrays ``values[i]``, ``df[i]``, ``ncp[i]``, one
  freshly created handle per index;
- collection: a prebuilt :class:`DistributionCollection` evaluated against a
  vector of query points, producing a ``(len(x), len(collection))`` matrix.

Notes
-----
- Input shapes are checked before any computation. A failing element or cell
  fails the whole call; results are never partially returned.
- With ``EvaluatorConfig.max_workers > 1`` large batches are split into
  disjoint chunks evaluated on a thread pool. Every output slot is written by
  exactly one task and the buffer is returned only after all tasks finished.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

import numpy as np

from pysatl_nct.config import EvaluatorConfig
from pysatl_nct.distributions.collection import DistributionCollection
from pysatl_nct.errors import ComputationError, InvalidArgumentError
from pysatl_nct.families.builtins import noncentral_t
from pysatl_nct.types import CharacteristicName
from pysatl_nct.validation import as_float, as_float_vector, validate_equal_length

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from concurrent.futures import Future

    from pysatl_nct.types import ArrayLike, FloatArray, GenericCharacteristicName

logger = logging.getLogger(__name__)

_POINTWISE = frozenset({CharacteristicName.PDF, CharacteristicName.CDF, CharacteristicName.PPF})


def _check_characteristic(characteristic: GenericCharacteristicName) -> CharacteristicName:
    try:
        name = CharacteristicName(characteristic)
    except ValueError:
        name = None
    if name not in _POINTWISE:
        raise InvalidArgumentError(
            f"Unsupported characteristic '{characteristic}', "
            f"expected one of {sorted(str(c) for c in _POINTWISE)}."
        )
    return name


class Evaluator:
    """
    Evaluate characteristics of non-central t distributions.

    Parameters
    ----------
    config : EvaluatorConfig, optional
        Scheduling configuration; defaults to serial evaluation.

    Examples
    --------
    >>> ev = Evaluator()
    >>> ev.density(0.0, 5.0, 0.0)  # doctest: +ELLIPSIS
    0.3796...
    """

    def __init__(self, config: EvaluatorConfig | None = None) -> None:
        self.config = EvaluatorConfig() if config is None else config

    # ------------------------------------------------------------------
    # Mode A: scalar
    # ------------------------------------------------------------------

    def evaluate(
        self,
        characteristic: GenericCharacteristicName,
        value: float,
        df: float,
        ncp: float,
    ) -> float:
        """
        Evaluate one characteristic at one point for one parameter pair.

        Raises
        ------
        InvalidArgumentError
            If ``characteristic`` is not ``pdf``, ``cdf`` or ``ppf``,
            or an argument is not a number.
        ComputationError
            If the parameters are invalid or the computation fails.
        """
        name = _check_characteristic(characteristic)
        point = as_float(value, "x")
        handle = noncentral_t(as_float(df, "df"), as_float(ncp, "ncp"))
        return float(handle.calculate_characteristic(name, point))

    def density(self, x: float, df: float, ncp: float) -> float:
        """Density of NoncentralT(df, ncp) at ``x``."""
        return self.evaluate(CharacteristicName.PDF, x, df, ncp)

    def cumulative(self, q: float, df: float, ncp: float) -> float:
        """Cumulative probability of NoncentralT(df, ncp) at ``q``."""
        return self.evaluate(CharacteristicName.CDF, q, df, ncp)

    def quantile(self, p: float, df: float, ncp: float) -> float:
        """
        Quantile of NoncentralT(df, ncp) for probability ``p``.

        ``p`` is not checked here; values outside ``[0, 1]`` are rejected by
        the family's ``ppf`` with :class:`ComputationError`.
        """
        return self.evaluate(CharacteristicName.PPF, p, df, ncp)

    # ------------------------------------------------------------------
    # Mode B: element-wise
    # ------------------------------------------------------------------

    def evaluate_vector(
        self,
        characteristic: GenericCharacteristicName,
        values: ArrayLike,
        df: ArrayLike,
        ncp: ArrayLike,
    ) -> FloatArray:
        """
        Evaluate ``characteristic`` element-wise over parallel arrays.

        Parameters
        ----------
        characteristic : str
            ``"pdf"``, ``"cdf"`` or ``"ppf"``.
        values : ArrayLike
            Evaluation points (probabilities for ``ppf``).
        df : ArrayLike
            Degrees of freedom, same length as ``values``.
        ncp : ArrayLike
            Non-centrality parameters, same length as ``values``.

        Returns
        -------
        FloatArray
            ``result[i]`` is the characteristic of ``NoncentralT(df[i], ncp[i])``
            at ``values[i]``.

        Raises
        ------
        InvalidArgumentError
            If inputs are malformed or their lengths differ. Raised before
            any element is computed.
        ComputationError
            If any element fails; ``index`` is the lowest failing position.
        """
        name = _check_characteristic(characteristic)
        v = as_float_vector(values, "x")
        d = as_float_vector(df, "df")
        c = as_float_vector(ncp, "ncp")
        validate_equal_length(v, d, c, names=("x", "df", "ncp"))

        n = len(v)
        result = np.empty(n, dtype=np.float64)

        def run(start: int, stop: int) -> None:
            for i in range(start, stop):
                try:
                    result[i] = noncentral_t(d[i], c[i]).calculate_characteristic(name, v[i])
                except ComputationError as exc:
                    raise exc.at(i) from exc

        self._run_chunks(run, self._split(n), n_cells=n)
        return result

    def density_vector(self, x: ArrayLike, df: ArrayLike, ncp: ArrayLike) -> FloatArray:
        """Element-wise density; see :meth:`evaluate_vector`."""
        return self.evaluate_vector(CharacteristicName.PDF, x, df, ncp)

    def cumulative_vector(self, q: ArrayLike, df: ArrayLike, ncp: ArrayLike) -> FloatArray:
        """Element-wise cumulative probability; see :meth:`evaluate_vector`."""
        return self.evaluate_vector(CharacteristicName.CDF, q, df, ncp)

    def quantile_vector(self, p: ArrayLike, df: ArrayLike, ncp: ArrayLike) -> FloatArray:
        """Element-wise quantile; see :meth:`evaluate_vector`."""
        return self.evaluate_vector(CharacteristicName.PPF, p, df, ncp)

    # ------------------------------------------------------------------
    # Mode C: two-phase collection
    # ------------------------------------------------------------------

    def build_collection(self, df: ArrayLike, ncp: ArrayLike) -> DistributionCollection:
        """
        Build one distribution handle per index of ``df`` and ``ncp``.

        Raises
        ------
        InvalidArgumentError
            If the inputs are malformed or their lengths differ.
        """
        return DistributionCollection.from_parameters(df, ncp)

    def evaluate_collection(
        self,
        collection: DistributionCollection,
        x: ArrayLike,
        characteristic: GenericCharacteristicName = CharacteristicName.PDF,
    ) -> FloatArray:
        """
        Evaluate every distribution of ``collection`` at every point of ``x``.

        Parameters
        ----------
        collection : DistributionCollection
            Distributions, one per output column.
        x : ArrayLike
            Query points, one per output row.
        characteristic : str, default "pdf"
            ``"pdf"``, ``"cdf"`` or ``"ppf"``.

        Returns
        -------
        FloatArray
            Matrix of shape ``(len(x), len(collection))`` where cell
            ``(j, i)`` is the characteristic of ``collection[i]`` at ``x[j]``.

        Raises
        ------
        InvalidArgumentError
            If ``collection`` is not a :class:`DistributionCollection` or
            ``x`` is malformed.
        ComputationError
            If a cell fails; ``index`` is ``(j, i)``, or ``(None, i)`` when
            distribution ``i`` is invalid as a whole.
        """
        if not isinstance(collection, DistributionCollection):
            raise InvalidArgumentError(
                f"Expected a DistributionCollection, got {type(collection).__name__}."
            )
        name = _check_characteristic(characteristic)
        points = as_float_vector(x, "x")

        n_points, n_dist = len(points), len(collection)
        result = np.empty((n_points, n_dist), dtype=np.float64)
        if n_points == 0 or n_dist == 0:
            return result

        def run(start: int, stop: int) -> None:
            for i in range(start, stop):
                try:
                    result[:, i] = collection[i].calculate_characteristic(name, points)
                except ComputationError as exc:
                    raise exc.at((exc.index, i)) from exc

        self._run_chunks(run, self._split(n_dist), n_cells=n_points * n_dist)
        return result

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def _split(self, n: int) -> list[tuple[int, int]]:
        """Split ``range(n)`` into at most ``max_workers`` contiguous chunks."""
        if n == 0:
            return []
        n_chunks = min(self.config.max_workers, n)
        bounds = np.linspace(0, n, n_chunks + 1, dtype=np.int64)
        return [(int(a), int(b)) for a, b in zip(bounds[:-1], bounds[1:], strict=True) if b > a]

    def _run_chunks(
        self,
        run: Callable[[int, int], None],
        chunks: Sequence[tuple[int, int]],
        n_cells: int,
    ) -> None:
        """
        Run ``run(start, stop)`` for every chunk, serially or on a pool.

        Chunks are disjoint, so tasks never write the same slot. Errors are
        re-raised in chunk order, which yields the lowest failing index.
        """
        if not chunks:
            return

        if len(chunks) == 1 or not self.config.should_parallelize(n_cells):
            for start, stop in chunks:
                run(start, stop)
            return

        logger.debug(
            "Evaluating %d cells in %d chunks on %d workers",
            n_cells,
            len(chunks),
            self.config.max_workers,
        )
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
            futures: list[Future[None]] = [pool.submit(run, a, b) for a, b in chunks]
            try:
                for future in futures:
                    future.result()
            except BaseException:
                for future in futures:
                    future.cancel()
                raise


__all__ = [
    "Evaluator",
]
