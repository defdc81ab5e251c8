"""
PySATL NCT
==========

Evaluation engine for the non-central t-distribution: scalar, element-wise
and collection-based density, cumulative distribution and quantile
computations built on parametric families and SciPy.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .api import *
from .api import __all__ as _api_all
from .config import EvaluatorConfig
from .distributions import *
from .distributions import __all__ as _distr_all
from .distributions.collection import DistributionCollection
from .errors import *
from .errors import __all__ as _errors_all
from .evaluator import Evaluator
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all
from .validation import as_float, as_float_vector, validate_equal_length

__version__ = version("pysatl-nct")
__all__ = [
    "__version__",
    "DistributionCollection",
    "Evaluator",
    "EvaluatorConfig",
    "as_float",
    "as_float_vector",
    "validate_equal_length",
    *_api_all,
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _api_all
del _distr_all
del _errors_all
del _family_all
del _types_all
