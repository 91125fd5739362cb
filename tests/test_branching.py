"""Tests for effective branching factor estimation."""

import pytest

from informed_search.core.errors import BranchingFactorError
from informed_search.search.branching import estimate_branching_factor, tree_size


class TestTreeSize:
    """Test the uniform tree size polynomial."""

    def test_depth_zero(self):
        assert tree_size(5.0, 0) == 1.0

    def test_binary_tree(self):
        assert tree_size(2.0, 3) == 15.0

    def test_fractional_branching(self):
        assert tree_size(0.5, 2) == pytest.approx(1.75)

    def test_zero_branching(self):
        assert tree_size(0.0, 4) == 1.0


class TestEstimateBranchingFactor:
    """Test the numerical root finder."""

    def test_degenerate_case(self):
        """Test zero nodes at depth zero gives zero."""
        assert estimate_branching_factor(0, 0) == 0.0

    def test_depth_zero_with_nodes(self):
        """Test no branching factor explains nodes at depth zero."""
        with pytest.raises(BranchingFactorError):
            estimate_branching_factor(5, 0)

    @pytest.mark.parametrize("n_nodes,depth", [
        (1, 1),
        (2, 1),
        (14, 3),
        (20, 2),
        (100, 4),
        (1000, 8),
        (52, 5),
        (3, 10),
    ])
    def test_within_tolerance(self, n_nodes, depth):
        """Test the estimate reproduces n_nodes + 1 within 0.01."""
        b = estimate_branching_factor(n_nodes, depth)

        assert b >= 0.0
        assert abs(tree_size(b, depth) - (n_nodes + 1)) <= 0.01

    def test_exact_binary_tree(self):
        b = estimate_branching_factor(14, 3)
        assert b == pytest.approx(2.0, abs=0.01)

    def test_one_node_per_level(self):
        b = estimate_branching_factor(6, 6)
        assert b == pytest.approx(1.0, abs=0.01)

    def test_no_nodes_at_depth(self):
        """Test zero nodes at positive depth gives zero."""
        assert estimate_branching_factor(0, 3) == 0.0

    def test_custom_tolerance(self):
        b = estimate_branching_factor(500, 6, max_error=0.0001, delta=0.1)
        assert abs(tree_size(b, 6) - 501) <= 0.0001

    @pytest.mark.parametrize("kwargs", [
        {"n_nodes": -1, "depth": 2},
        {"n_nodes": 5, "depth": -1},
        {"n_nodes": 5, "depth": 2, "max_error": 0},
        {"n_nodes": 5, "depth": 2, "delta": -0.5},
    ])
    def test_invalid_arguments(self, kwargs):
        with pytest.raises(ValueError):
            estimate_branching_factor(**kwargs)

    @pytest.mark.parametrize("n_nodes,depth", [(20000, 1), (5000, 2)])
    def test_large_branching_factor(self, n_nodes, depth):
        """Test wide shallow searches converge without an iteration cap."""
        b = estimate_branching_factor(n_nodes, depth)

        assert abs(tree_size(b, depth) - (n_nodes + 1)) <= 0.01

    @pytest.mark.parametrize("max_iterations", [0, -3])
    def test_non_positive_iteration_budget(self, max_iterations):
        with pytest.raises(ValueError):
            estimate_branching_factor(5, 2, max_iterations=max_iterations)

    def test_iteration_budget(self):
        """Test a walk that cannot converge in time is reported."""
        with pytest.raises(BranchingFactorError):
            estimate_branching_factor(10000, 2, max_iterations=10)


if __name__ == "__main__":
    pytest.main([__file__])
