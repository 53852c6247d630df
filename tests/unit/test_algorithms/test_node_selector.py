"""Unit tests for nearest-node selection."""

import pytest
import numpy as np

from pyinterplib.algorithms.node_selector import insertion_index, select_nodes
from pyinterplib.core.exceptions import NotEnoughInputDataError


@pytest.fixture
def grid():
    return np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 4.0], [3.0, 9.0], [4.0, 16.0]])


class TestInsertionIndex:
    """Test cases for insertion_index."""
    def test_between_nodes(self, grid):
        assert insertion_index(grid[:, 0], 1.5) == 2

    def test_on_node(self, grid):
        """Test that an exact node match points at the node itself."""
        assert insertion_index(grid[:, 0], 2.0) == 2

    def test_outside(self, grid):
        assert insertion_index(grid[:, 0], -1.0) == 0
        assert insertion_index(grid[:, 0], 10.0) == 5


class TestSelectNodes:
    """Test cases for select_nodes."""
    def test_closest_nodes_in_order(self, grid):
        """Test that the closest nodes are returned in ascending order."""
        selected = select_nodes(grid, 2.9, 3)
        np.testing.assert_array_equal(selected[:, 0], [2.0, 3.0, 4.0])

    def test_tie_prefers_right(self, grid):
        """Test that equal distances take the right node first."""
        selected = select_nodes(grid, 1.5, 1)
        np.testing.assert_array_equal(selected[:, 0], [2.0])

    def test_left_edge(self, grid):
        """Test selection when x lies left of every node."""
        selected = select_nodes(grid, -3.0, 3)
        np.testing.assert_array_equal(selected[:, 0], [0.0, 1.0, 2.0])

    def test_right_edge(self, grid):
        """Test selection when x lies right of every node."""
        selected = select_nodes(grid, 7.0, 2)
        np.testing.assert_array_equal(selected[:, 0], [3.0, 4.0])

    def test_all_nodes(self, grid):
        selected = select_nodes(grid, 2.2, 5)
        np.testing.assert_array_equal(selected, grid)

    def test_copies(self, grid):
        """Test that every chosen node is repeated consecutively."""
        selected = select_nodes(grid, 0.9, 4, copies=2)
        np.testing.assert_array_equal(selected[:, 0], [0.0, 0.0, 1.0, 1.0])

    def test_copies_capped_by_quota(self, grid):
        """Test that the last node group is cut to the remaining quota."""
        selected = select_nodes(grid, 0.9, 4, copies=3)
        np.testing.assert_array_equal(selected[:, 0], [0.0, 1.0, 1.0, 1.0])

    def test_explicit_anchor(self, grid):
        """Test that the anchor replaces the insertion index as the start of the scan."""
        selected = select_nodes(grid, 3.4, 2, anchor=1)
        np.testing.assert_array_equal(selected[:, 0], [1.0, 2.0])

    def test_not_enough_nodes(self, grid):
        with pytest.raises(NotEnoughInputDataError):
            select_nodes(grid, 1.0, 6)

    def test_invalid_copies(self, grid):
        with pytest.raises(ValueError, match="at least 1"):
            select_nodes(grid, 1.0, 2, copies=0)
