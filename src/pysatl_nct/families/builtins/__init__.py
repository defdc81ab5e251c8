"""
Built-in distribution families for pysatl-nct.

This package contains the statistical distribution families that are
available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_nct.families.builtins.continuous import (
    configure_noncentral_t_family,
    noncentral_t,
)

__all__ = [
    "configure_noncentral_t_family",
    "noncentral_t",
]
