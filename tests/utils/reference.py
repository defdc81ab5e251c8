"""
Reference values shared by the test suites.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math


def central_t_density_at_zero(df: float) -> float:
    """Closed form of Student's t density at 0: Γ((ν+1)/2) / (√(νπ) Γ(ν/2))."""
    return math.exp(math.lgamma((df + 1) / 2) - math.lgamma(df / 2)) / math.sqrt(df * math.pi)


# Γ(3) / (√(5π) Γ(5/2)) = 8 / (3π√5)
T5_DENSITY_AT_ZERO = 8 / (3 * math.pi * math.sqrt(5))
