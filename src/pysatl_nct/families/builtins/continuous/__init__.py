"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_nct.families.builtins.continuous.noncentral_t import (
    configure_noncentral_t_family,
    noncentral_t,
)

__all__ = [
    "configure_noncentral_t_family",
    "noncentral_t",
]
