"""
Evaluator Configuration
=======================

Settings controlling how batch evaluations are scheduled.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass

from pysatl_nct.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class EvaluatorConfig:
    """
    Configuration of an :class:`~pysatl_nct.evaluator.Evaluator`.

    Parameters
    ----------
    max_workers : int, default 1
        Number of worker threads used by element-wise and matrix evaluation.
        ``1`` keeps every call synchronous on the calling thread.
    parallel_threshold : int, default 4096
        Minimum number of output cells before a batch is split across the
        worker pool. Smaller batches are always evaluated serially.

    Raises
    ------
    InvalidArgumentError
        If ``max_workers < 1`` or ``parallel_threshold < 0``.

    Notes
    -----
    Each output cell is written by exactly one task, so enabling workers does
    not change results, only wall time.
    """

    max_workers: int = 1
    parallel_threshold: int = 4096

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_workers < 1:
            raise InvalidArgumentError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.parallel_threshold < 0:
            raise InvalidArgumentError(
                f"parallel_threshold must be >= 0, got {self.parallel_threshold}"
            )

    @property
    def is_parallel(self) -> bool:
        """Whether a worker pool may be used at all."""
        return self.max_workers > 1

    def should_parallelize(self, n_cells: int) -> bool:
        """Decide whether a batch of ``n_cells`` outputs goes to the pool."""
        return self.is_parallel and n_cells >= max(self.parallel_threshold, 2)


__all__ = [
    "EvaluatorConfig",
]
