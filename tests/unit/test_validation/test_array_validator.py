"""Unit tests for array and row validation."""

import pytest
import numpy as np

from pyinterplib.core.exceptions import NotEnoughInputDataError
from pyinterplib.parsing.validation.array_validator import is_monotonic, validate_point_rows


class TestIsMonotonic:
    """Test cases for is_monotonic."""
    def test_strictly_increasing(self):
        assert is_monotonic(np.array([1.0, 2.0, 3.0]))

    def test_violation_raises(self):
        with pytest.raises(ValueError, match="not strictly increasing at index 2"):
            is_monotonic(np.array([1.0, 2.0, 2.0]), name="x")

    def test_violation_without_raise(self):
        assert not is_monotonic(np.array([3.0, 2.0]), raise_error=False)

    def test_other_modes(self):
        assert is_monotonic(np.array([1.0, 1.0, 2.0]), mode="non_decreasing")
        assert is_monotonic(np.array([3.0, 2.0, 1.0]), mode="strictly_decreasing")
        assert is_monotonic(np.array([3.0, 3.0, 1.0]), mode="non_increasing")


class TestValidatePointRows:
    """Test cases for validate_point_rows."""
    def test_converts_to_float_array(self):
        data = validate_point_rows([[0, 1], [2, 3]])
        assert data.dtype == np.float64
        np.testing.assert_array_equal(data, [[0.0, 1.0], [2.0, 3.0]])

    def test_numpy_input(self):
        data = validate_point_rows(np.array([[0.0, 1.0, 2.0]]), derivative_order=1)
        assert data.shape == (1, 3)

    def test_ragged_rows_truncated(self):
        data = validate_point_rows([[0.0, 1.0, 2.0, 3.0], [1.0, 2.0, 3.0]])
        assert data.shape == (2, 3)

    def test_empty(self):
        with pytest.raises(NotEnoughInputDataError, match="no points"):
            validate_point_rows([])

    def test_short_row(self):
        with pytest.raises(NotEnoughInputDataError, match="Row 0 has 1 fields"):
            validate_point_rows([[0.0]])

    def test_infinite(self):
        with pytest.raises(ValueError, match=r"rows \[1\]"):
            validate_point_rows([[0.0, 1.0], [1.0, np.inf]])
