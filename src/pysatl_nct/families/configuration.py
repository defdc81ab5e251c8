"""
Distribution Families Configuration
====================================

This module registers the built-in parametric distribution families:

- :class:`NoncentralT Family` — non-central Student's t-distribution with
  ``standard`` (df, ncp) and ``sampleEffect`` (n, effect) parameterizations.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Configuration is idempotent, cached and serialized by a lock, so the
  first evaluation may safely happen on worker threads.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from functools import lru_cache

from pysatl_nct.families.builtins import configure_noncentral_t_family
from pysatl_nct.families.registry import ParametricFamilyRegister

_configure_lock = threading.Lock()


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    with _configure_lock:
        configure_noncentral_t_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    with _configure_lock:
        configure_families_register.cache_clear()
        ParametricFamilyRegister._reset()
