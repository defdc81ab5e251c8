from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import numpy as np
import pytest

from pysatl_nct.errors import ComputationError, InvalidArgumentError
from pysatl_nct.families import DistributionHandle, ParametricFamilyRegister
from pysatl_nct.types import CharacteristicName
from tests.unit.families.test_basic import TestBaseFamily


class TestDistributionHandle(TestBaseFamily):
    def _registered_family(self):
        family = self.make_default_family()
        ParametricFamilyRegister.register(family)
        return family

    def test_construction_never_validates(self) -> None:
        family = self._registered_family()

        handle = family.distribution(value=-3.0)

        assert isinstance(handle, DistributionHandle)
        assert handle.value == -3.0
        with pytest.raises(ComputationError, match="value > 0"):
            handle.calculate_characteristic(CharacteristicName.PDF, 1.0)

    def test_handles_are_immutable_values(self) -> None:
        family = self._registered_family()

        a = family(value=2.0)
        b = family(value=2.0)

        assert a == b
        assert hash(a) == hash(b)
        assert a is not b
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.parameters = family.parametrizations["base"](value=5.0)  # type: ignore[misc, call-arg]

    def test_analytical_computations_are_cached(self) -> None:
        family = self._registered_family()
        handle = family.distribution("alt", value=2.0)

        first = handle.analytical_computations
        assert first is handle.analytical_computations
        assert set(first) == {self.PDF, self.CDF, self.MEAN}

    def test_fallback_to_base_for_missing_form(self) -> None:
        family = self.make_default_family(
            distr_characteristics={
                self.PDF: {"base": lambda params, x: params.value},
                self.CDF: {"base": lambda params, x: params.value},
            }
        )
        ParametricFamilyRegister.register(family)

        handle = family.distribution("alt", value=2.0)

        assert handle.pdf(1.23) == pytest.approx(2.0)
        assert handle.cdf(0.5) == pytest.approx(2.0)
        assert handle.base_parameters.name == "base"

    def test_base_parameters_are_exposed_as_attributes(self) -> None:
        family = self._registered_family()
        handle = family.distribution("alt", value=4.0)

        assert handle.value == 4.0
        with pytest.raises(AttributeError):
            _ = handle.missing

    def test_unknown_characteristic(self) -> None:
        family = self._registered_family()

        with pytest.raises(InvalidArgumentError, match="no characteristic 'ppf'"):
            family(value=1.0).ppf(0.5)

    def test_array_input_passes_through(self) -> None:
        family = self._registered_family()
        x = np.array([0.5, 1.5])

        np.testing.assert_array_equal(family(value=1.0).pdf(x), x)
