"""
Parametric Families module for working with statistical distribution families.

This package provides the framework for defining and managing parametric
families of statistical distributions and the immutable handles bound to
concrete parameter values.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import noncentral_t
from .configuration import configure_families_register, reset_families_register
from .distribution import DistributionHandle
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "DistributionHandle",
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
    "noncentral_t",
]
