from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import numpy as np
import pytest

from pysatl_nct.distributions.collection import DistributionCollection
from pysatl_nct.errors import InvalidArgumentError
from pysatl_nct.families import DistributionHandle, noncentral_t


class TestDistributionCollection:
    def test_from_parameters_builds_one_handle_per_index(self) -> None:
        coll = DistributionCollection.from_parameters([5, 10], [0, 1])

        assert len(coll) == 2
        assert all(isinstance(h, DistributionHandle) for h in coll)
        assert coll[0] == noncentral_t(5.0, 0.0)
        assert coll[1] == noncentral_t(10.0, 1.0)
        np.testing.assert_array_equal(coll.degrees_of_freedom, [5.0, 10.0])
        np.testing.assert_array_equal(coll.non_centrality, [0.0, 1.0])

    def test_length_mismatch(self) -> None:
        with pytest.raises(InvalidArgumentError, match="df=3, ncp=2"):
            DistributionCollection.from_parameters([1, 2, 3], [0, 0])

    def test_empty_collection(self) -> None:
        coll = DistributionCollection.from_parameters([], [])

        assert len(coll) == 0
        assert list(coll) == []

    def test_owns_independent_copies(self) -> None:
        df = np.array([5.0, 10.0])
        ncp = [0.0, 1.0]
        coll = DistributionCollection.from_parameters(df, ncp)

        df[:] = -1.0
        ncp.clear()
        del df, ncp

        np.testing.assert_array_equal(coll.degrees_of_freedom, [5.0, 10.0])
        assert coll[1].pdf(0.0) > 0

    def test_collection_is_immutable(self) -> None:
        coll = DistributionCollection.from_parameters([5], [0])

        with pytest.raises(dataclasses.FrozenInstanceError):
            coll.handles = ()  # type: ignore[misc]
        assert isinstance(coll.handles, tuple)

    def test_from_handles_and_slicing(self) -> None:
        handles = [noncentral_t(d, 0.0) for d in (2, 3, 4)]
        coll = DistributionCollection.from_handles(iter(handles))

        sub = coll[1:]
        assert isinstance(sub, DistributionCollection)
        assert [h.df for h in sub] == [3.0, 4.0]

    def test_positional_identity_keeps_duplicates(self) -> None:
        coll = DistributionCollection.from_parameters([5, 5], [1, 1])

        assert len(coll) == 2
        assert coll[0] == coll[1]

    def test_invalid_parameters_are_accepted_at_build_time(self) -> None:
        coll = DistributionCollection.from_parameters([-1.0], [0.0])

        assert coll[0].df == -1.0
