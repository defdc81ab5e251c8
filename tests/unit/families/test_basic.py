from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_nct.families import ParametricFamily, Parametrization, constraint
from pysatl_nct.types import GenericCharacteristicName


class TestBaseFamily:
    PDF: GenericCharacteristicName = "pdf"
    CDF: GenericCharacteristicName = "cdf"
    MEAN: GenericCharacteristicName = "mean"

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, dict[str, object]] | None = None,
        name: str = "Default",
    ) -> ParametricFamily:
        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: {"base": lambda p, x: x},
                self.CDF: {"alt": lambda p, x: x, "base": lambda p, x: x},
                self.MEAN: {"base": lambda p, x: p.value},
            }
        fam = ParametricFamily(
            name=name,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,  # type: ignore[arg-type]
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value > 0")
            def check_value_positive(self) -> bool:
                return self.value > 0

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            value: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=self.value)  # type: ignore[call-arg]

        return fam
