"""
Core Type Definitions
=====================

Fundamental types and names shared by the families, distributions and
evaluator layers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for ``float64`` arrays produced by the evaluator."""

ArrayLike = Number | Sequence[Number] | NumericArray
"""Type alias for caller input accepted by the vectorized entry points."""

type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

type ParametrizationName = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Enumeration of distribution characteristics known to the evaluator.

    Attributes
    ----------
    PDF : str
        Probability density function.
    CDF : str
        Cumulative distribution function.
    PPF : str
        Percent point function (quantile, inverse CDF).
    MEAN : str
        Expectation.
    VAR : str
        Variance.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    NONCENTRAL_T = "NoncentralT"


__all__ = [
    "ArrayLike",
    "CharacteristicName",
    "FamilyName",
    "FloatArray",
    "GenericCharacteristicName",
    "Number",
    "NumPyNumber",
    "NumericArray",
    "ParametrizationName",
]
