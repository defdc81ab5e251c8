"""
Computation Primitives
======================

This module defines the callable used to evaluate a single characteristic of a
distribution:

- :class:`Computation` — protocol for a characteristic callable.
- :class:`AnalyticalComputation` — an analytical callable bound to concrete
  parameter values by a parametric family.

Notes
-----
- Callables accept scalars or one-dimensional arrays; a scalar input yields a
  scalar output.
- ``**options`` are forwarded unchanged to the underlying function.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from pysatl_nct.types import GenericCharacteristicName


@runtime_checkable
class Computation[In, Out](Protocol):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : str
        The characteristic name this computation represents.

    Methods
    -------
    __call__(data, **options)
        Evaluate the characteristic at ``data``.
    """

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by a parametric family.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable with the distribution parameters already bound.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)
