"""
Distributions subpackage

Building blocks shared by the families and the evaluator:

- analytical computation callables (:mod:`.computation`);
- sample containers and inverse-transform sampling (:mod:`.sampling`);
- owning collections of distribution handles (:mod:`.collection`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation, Computation
from .sampling import ArraySample, Sample

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    # sampling
    "Sample",
    "ArraySample",
]
