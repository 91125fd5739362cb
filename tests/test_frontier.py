"""Tests for frontier implementations."""

import pytest
import numpy as np

from informed_search.core.errors import EmptyFrontier
from informed_search.problems.graph import StateGraph
from informed_search.search.frontier import (
    ExactPriorityFrontier, FIFOFrontier, PriorityFrontier
)
from informed_search.search.node import SearchNode


@pytest.fixture
def nodes():
    """Twenty distinct root nodes over a graph of named states."""
    graph = StateGraph.from_edges([], goals=set())
    return [SearchNode.root(graph.state(f"n{i}")) for i in range(20)]


class TestPriorityFrontier:
    """Test the bucketed priority frontier."""

    def test_empty_frontier(self):
        """Test a new frontier is empty and refuses to pop."""
        frontier = PriorityFrontier()

        assert len(frontier) == 0
        assert not frontier
        with pytest.raises(EmptyFrontier):
            frontier.pop_min()

    def test_pop_smallest_priority(self, nodes):
        """Test the smallest priority leaves first regardless of insertion order."""
        frontier = PriorityFrontier()
        frontier.insert(5, nodes[0])
        frontier.insert(2, nodes[1])
        frontier.insert(9, nodes[2])

        assert frontier.pop_min() is nodes[1]
        assert frontier.pop_min() is nodes[0]
        assert frontier.pop_min() is nodes[2]

    def test_fifo_within_priority(self, nodes):
        """Test nodes sharing a priority pop in insertion order."""
        frontier = PriorityFrontier()
        for node in nodes[:5]:
            frontier.insert(3, node)

        assert len(frontier) == 5
        assert [frontier.pop_min() for _ in range(5)] == nodes[:5]

    def test_random_order_is_non_decreasing_and_stable(self, nodes):
        """Test popped priorities never decrease and ties keep insertion order."""
        rng = np.random.default_rng(42)
        priorities = [int(p) for p in rng.integers(0, 5, size=len(nodes))]

        frontier = PriorityFrontier()
        for priority, node in zip(priorities, nodes):
            frontier.insert(priority, node)

        popped = []
        while frontier:
            node = frontier.pop_min()
            popped.append((priorities[nodes.index(node)], nodes.index(node)))

        assert [p for p, _ in popped] == sorted(p for p, _ in popped)
        for priority in set(priorities):
            order = [i for p, i in popped if p == priority]
            assert order == sorted(order)

    def test_empty_bucket_removed(self, nodes):
        """Test a priority disappears once its last node is popped."""
        frontier = PriorityFrontier()
        frontier.insert(1, nodes[0])
        frontier.insert(4, nodes[1])

        frontier.pop_min()

        assert len(frontier) == 1
        frontier.insert(2, nodes[2])
        assert frontier.pop_min() is nodes[2]
        assert frontier.pop_min() is nodes[1]

    def test_reinsert_after_bucket_removed(self, nodes):
        """Test a removed priority can be opened again."""
        frontier = PriorityFrontier()
        frontier.insert(1, nodes[0])
        frontier.pop_min()
        frontier.insert(1, nodes[1])
        frontier.insert(0, nodes[2])

        assert frontier.pop_min() is nodes[2]
        assert frontier.pop_min() is nodes[1]
        assert not frontier

    @pytest.mark.parametrize("priority", [1.5, "1", True, None])
    def test_rejects_non_integer_priority(self, nodes, priority):
        """Test only integer priorities are accepted."""
        frontier = PriorityFrontier()
        with pytest.raises(TypeError):
            frontier.insert(priority, nodes[0])
        assert len(frontier) == 0

    def test_pop_after_drain(self, nodes):
        """Test popping a drained frontier fails."""
        frontier = PriorityFrontier()
        frontier.insert(0, nodes[0])
        frontier.pop_min()

        with pytest.raises(EmptyFrontier):
            frontier.pop_min()


class TestFIFOFrontier:
    """Test the breadth-first queue."""

    def test_priority_ignored(self, nodes):
        """Test nodes leave in insertion order whatever their priority."""
        frontier = FIFOFrontier()
        for priority, node in zip([9, 1, 5], nodes):
            frontier.insert(priority, node)

        assert [frontier.pop_min() for _ in range(3)] == nodes[:3]

    def test_empty(self):
        frontier = FIFOFrontier()
        assert not frontier
        with pytest.raises(EmptyFrontier):
            frontier.pop_min()


class TestExactPriorityFrontier:
    """Test the real-valued priority frontier."""

    def test_real_valued_order(self, nodes):
        """Test fractional priorities are compared without truncation."""
        frontier = ExactPriorityFrontier()
        frontier.insert(1.9, nodes[0])
        frontier.insert(1.0, nodes[1])
        frontier.insert(1.5, nodes[2])

        assert [frontier.pop_min() for _ in range(3)] == [nodes[1], nodes[2], nodes[0]]

    def test_fifo_ties(self, nodes):
        """Test equal priorities keep insertion order."""
        frontier = ExactPriorityFrontier()
        for node in nodes[:4]:
            frontier.insert(2.25, node)

        assert [frontier.pop_min() for _ in range(4)] == nodes[:4]

    def test_empty(self):
        frontier = ExactPriorityFrontier()
        assert len(frontier) == 0
        with pytest.raises(EmptyFrontier):
            frontier.pop_min()


if __name__ == "__main__":
    pytest.main([__file__])
