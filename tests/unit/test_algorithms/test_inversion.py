"""Unit tests for function inversion and root bracketing."""

import pytest
import numpy as np

from pyinterplib.algorithms.inversion import RootBracket, bracket_root, invert_points
from pyinterplib.core.exceptions import (CannotInvertFunctionError, InvalidDerivativeOrderError,
                                         NoRootInIntervalError, NotEnoughInputDataError)


class TestInvertPoints:
    """Test cases for invert_points."""
    def test_swaps_columns(self):
        points = np.array([[0.0, 1.0], [1.0, 3.0]])
        np.testing.assert_array_equal(invert_points(points), [[1.0, 0.0], [3.0, 1.0]])

    def test_derivatives(self):
        """Test x' = 1/y' and x'' = -y''/y'**3."""
        points = np.array([[1.0, 1.0, 2.0, 2.0]])
        np.testing.assert_allclose(invert_points(points), [[1.0, 1.0, 0.5, -0.25]])

    def test_double_inversion_is_identity(self, root_points):
        points = np.array(root_points)
        np.testing.assert_allclose(invert_points(invert_points(points)), points)

    def test_input_unchanged(self):
        points = np.array([[0.0, 1.0, 2.0]])
        invert_points(points)
        np.testing.assert_array_equal(points, [[0.0, 1.0, 2.0]])

    def test_flat_tangent(self):
        points = np.array([[0.0, 1.0, 1.0], [1.0, 2.0, 1e-9]])
        with pytest.raises(CannotInvertFunctionError, match="x=1.0"):
            invert_points(points)

    def test_too_many_derivatives(self):
        with pytest.raises(InvalidDerivativeOrderError):
            invert_points(np.array([[0.0, 1.0, 1.0, 1.0, 1.0]]))

    def test_single_column(self):
        with pytest.raises(NotEnoughInputDataError):
            invert_points(np.array([[0.0], [1.0]]))


class TestBracketRoot:
    """Test cases for bracket_root."""
    def test_sign_change(self):
        bracket = bracket_root(np.array([[0.0, -2.0], [1.0, -1.0], [2.0, 2.0], [3.0, 7.0]]))
        assert bracket == RootBracket(anchor=2)
        assert not bracket.is_exact

    def test_exact_zero(self):
        bracket = bracket_root(np.array([[-1.0, -1.0], [0.0, 0.0], [1.0, 1.0]]))
        assert bracket.is_exact
        assert bracket.exact_root == 0.0

    def test_zero_within_tolerance(self):
        bracket = bracket_root(np.array([[0.0, 1e-9], [1.0, 1.0]]))
        assert bracket.exact_root == 0.0

    def test_first_sign_change_wins(self):
        points = np.array([[0.0, 1.0], [1.0, -1.0], [2.0, 1.0]])
        assert bracket_root(points).anchor == 1

    def test_no_root(self):
        with pytest.raises(NoRootInIntervalError):
            bracket_root(np.array([[0.0, 1.0], [1.0, 0.5], [2.0, 0.25]]))

    def test_single_row_without_zero(self):
        with pytest.raises(NoRootInIntervalError):
            bracket_root(np.array([[0.0, 1.0]]))
