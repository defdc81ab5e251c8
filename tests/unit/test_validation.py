from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_nct.errors import InvalidArgumentError
from pysatl_nct.validation import as_float, as_float_vector, validate_equal_length


class TestValidateEqualLength:
    def test_equal_lengths_pass(self) -> None:
        validate_equal_length([1, 2], (3, 4), np.array([5.0, 6.0]))

    def test_empty_inputs_pass(self) -> None:
        validate_equal_length([], [], [])

    def test_mismatch_names_lengths(self) -> None:
        with pytest.raises(InvalidArgumentError, match="x=2, df=1, ncp=1"):
            validate_equal_length([1, 2], [5], [0], names=("x", "df", "ncp"))

    def test_mismatch_without_names(self) -> None:
        with pytest.raises(InvalidArgumentError, match="#0=1, #1=0"):
            validate_equal_length([1], [])

    def test_requires_two_sequences(self) -> None:
        with pytest.raises(InvalidArgumentError, match="At least two"):
            validate_equal_length([1, 2])

    def test_names_must_match_arrays(self) -> None:
        with pytest.raises(InvalidArgumentError, match="names"):
            validate_equal_length([1], [2], names=("x",))

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_equal_length([1], [1, 2])


class TestAsFloatVector:
    def test_scalar_becomes_length_one(self) -> None:
        np.testing.assert_array_equal(as_float_vector(3), [3.0])

    def test_returns_copy(self) -> None:
        source = np.array([1.0, 2.0])
        result = as_float_vector(source)
        source[0] = 9.0

        assert result[0] == 1.0
        assert result.dtype == np.float64

    def test_rejects_matrix(self) -> None:
        with pytest.raises(InvalidArgumentError, match="one-dimensional"):
            as_float_vector([[1.0, 2.0]], "x")

    def test_rejects_non_numeric(self) -> None:
        with pytest.raises(InvalidArgumentError, match="'df' must contain only numbers"):
            as_float_vector(["a", "b"], "df")


class TestAsFloat:
    @pytest.mark.parametrize("value", [3, 2.5, np.float32(1.5), np.int64(7)])
    def test_numbers_pass(self, value: object) -> None:
        result = as_float(value)

        assert isinstance(result, float)
        assert result == float(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["abc", None, [1.0, 2.0], object()])
    def test_non_numbers_rejected(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError, match="'df' must be a number"):
            as_float(value, "df")
