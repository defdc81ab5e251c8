"""
Concrete distribution instances with specific parameter values.

This module provides :class:`DistributionHandle`, the immutable value object
binding one parametric family to one set of parameter values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_nct.distributions.sampling import inverse_transform_sample
from pysatl_nct.errors import InvalidArgumentError
from pysatl_nct.families.registry import ParametricFamilyRegister
from pysatl_nct.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_nct.distributions.computation import AnalyticalComputation
    from pysatl_nct.distributions.sampling import ArraySample
    from pysatl_nct.families.parametric_family import ParametricFamily
    from pysatl_nct.families.parametrizations import Parametrization
    from pysatl_nct.types import GenericCharacteristicName, Number, NumericArray


_OWN_ATTRIBUTES = frozenset(
    {"family_name", "parameters", "family", "base_parameters", "analytical_computations"}
)


@dataclass(frozen=True)
class DistributionHandle:
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    parameters : Parametrization
        Parameter values for this distribution.

    Notes
    -----
    Handles are immutable values: two handles with equal parameters compare
    and hash equal. Constructing a handle never fails on parameter values;
    constraints are checked by :meth:`validate`, which every evaluation runs
    first.
    """

    family_name: str
    parameters: Parametrization

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        if not ParametricFamilyRegister.contains(self.family_name):
            from pysatl_nct.families.configuration import configure_families_register

            configure_families_register()
        return ParametricFamilyRegister.get(self.family_name)

    @cached_property
    def base_parameters(self) -> Parametrization:
        """Parameters converted to the family's base parametrization."""
        return self.family.to_base(self.parameters)

    @cached_property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Built on first access and cached for the handle's lifetime, which is
        safe because parameters never change.
        """
        return self.family._build_analytical_computations(self.parameters)

    def __getattr__(self, name: str) -> Any:
        # Expose base parameters (e.g. ``handle.df``) as attributes.
        if name.startswith("_") or name in _OWN_ATTRIBUTES:
            raise AttributeError(name)
        base = self.base_parameters.parameters
        if name in base:
            return base[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def validate(self) -> None:
        """
        Check the parameter constraints of this distribution.

        Raises
        ------
        ComputationError
            If a constraint of the given or the base parametrization fails.
        """
        self.parameters.validate()
        base = self.base_parameters
        if base is not self.parameters:
            base.validate()

    def calculate_characteristic(
        self,
        characteristic_name: GenericCharacteristicName,
        value: Number | NumericArray | None = None,
        **options: Any,
    ) -> Any:
        """
        Evaluate a characteristic of this distribution.

        Parameters
        ----------
        characteristic_name : str
            Characteristic to evaluate (e.g. ``"pdf"``).
        value : Number or NumericArray, optional
            Point(s) of evaluation; ignored by moment characteristics.
        **options
            Forwarded to the analytical function.

        Returns
        -------
        Any
            ``float`` for scalar input, array for array input.

        Raises
        ------
        InvalidArgumentError
            If the family has no such characteristic.
        ComputationError
            If parameters violate a constraint or the computation fails.
        """
        if characteristic_name not in self.family.characteristics:
            raise InvalidArgumentError(
                f"Family '{self.family_name}' has no characteristic '{characteristic_name}'."
            )
        self.validate()
        method = self.analytical_computations[characteristic_name]
        return method(value, **options)

    def pdf(self, x: Number | NumericArray) -> Any:
        """Probability density at ``x``."""
        return self.calculate_characteristic(CharacteristicName.PDF, x)

    def cdf(self, q: Number | NumericArray) -> Any:
        """Cumulative probability at ``q``."""
        return self.calculate_characteristic(CharacteristicName.CDF, q)

    def ppf(self, p: Number | NumericArray) -> Any:
        """Quantile for probability ``p``."""
        return self.calculate_characteristic(CharacteristicName.PPF, p)

    def sample(self, n: int, seed: int | np.random.Generator | None = None) -> ArraySample:
        """
        Generate samples from this distribution by inverse transform.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        seed : int or numpy.random.Generator or None, optional
            Seed or generator for reproducible draws.

        Returns
        -------
        ArraySample
            Sample of shape ``(n, 1)``.
        """
        self.validate()
        return inverse_transform_sample(self.ppf, n, seed=seed)
