from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from concurrent.futures import ThreadPoolExecutor

import pytest

from pysatl_nct.families import (
    ParametricFamilyRegister,
    configure_families_register,
    reset_families_register,
)
from pysatl_nct.types import FamilyName
from tests.unit.families.test_basic import TestBaseFamily


class TestFamiliesRegister(TestBaseFamily):
    def test_register_is_singleton(self) -> None:
        assert ParametricFamilyRegister() is ParametricFamilyRegister()

    def test_configure_registers_builtins_once(self) -> None:
        registry = configure_families_register()
        assert registry is configure_families_register()
        assert ParametricFamilyRegister.contains(FamilyName.NONCENTRAL_T)
        assert ParametricFamilyRegister.names() == [FamilyName.NONCENTRAL_T]

    def test_register_and_get_custom_family(self) -> None:
        family = self.make_default_family(name="Custom")
        ParametricFamilyRegister.register(family)

        assert ParametricFamilyRegister.get("Custom") is family
        with pytest.raises(ValueError, match="already found"):
            ParametricFamilyRegister.register(family)

    def test_get_unknown_family(self) -> None:
        with pytest.raises(ValueError, match="No family"):
            ParametricFamilyRegister.get("Missing")

    def test_reset_clears_families(self) -> None:
        configure_families_register()
        reset_families_register()
        assert not ParametricFamilyRegister.contains(FamilyName.NONCENTRAL_T)
        configure_families_register()
        assert ParametricFamilyRegister.contains(FamilyName.NONCENTRAL_T)

    def test_concurrent_configuration_registers_once(self) -> None:
        for _ in range(20):
            reset_families_register()
            with ThreadPoolExecutor(max_workers=8) as pool:
                registries = list(pool.map(lambda _: configure_families_register(), range(16)))

            assert all(r is ParametricFamilyRegister() for r in registries)
            assert ParametricFamilyRegister.names() == [FamilyName.NONCENTRAL_T]

    def test_concurrent_singleton_creation(self) -> None:
        reset_families_register()
        with ThreadPoolExecutor(max_workers=8) as pool:
            instances = list(pool.map(lambda _: ParametricFamilyRegister(), range(32)))

        assert all(instance is instances[0] for instance in instances)
