"""Tests for the explicit state graph problem."""

import pytest

from informed_search.problems.graph import GraphState, StateGraph


class TestStateGraph:
    """Test graph construction and the State contract."""

    @pytest.fixture
    def graph(self):
        return StateGraph.from_edges(
            [
                ("Arad", "to_sibiu", "Sibiu", 140),
                ("Arad", "to_timisoara", "Timisoara", 118),
                ("Sibiu", "to_fagaras", "Fagaras", 99),
                ("Fagaras", "to_bucharest", "Bucharest", 211),
            ],
            goals={"Bucharest"},
            heuristics={1: {"Arad": 366, "Sibiu": 253, "Fagaras": 176, "Bucharest": 0}}
        )

    def test_successor_order(self, graph):
        """Test successors follow edge insertion order."""
        pairs = graph.state("Arad").successor()

        assert [action for action, _ in pairs] == ["to_sibiu", "to_timisoara"]
        assert [state.name for _, state in pairs] == ["Sibiu", "Timisoara"]

    def test_targets_registered(self, graph):
        """Test edge targets become states without successors."""
        assert graph.state("Timisoara").successor() == []

    def test_goal(self, graph):
        assert graph.state("Bucharest").goal()
        assert not graph.state("Arad").goal()

    def test_pathcost(self, graph):
        assert graph.state("Arad").pathcost("to_timisoara") == 118

    def test_pathcost_unknown_action(self, graph):
        with pytest.raises(KeyError):
            graph.state("Arad").pathcost("to_zerind")

    def test_heuristic_table(self, graph):
        assert graph.state("Sibiu").heuristic(1) == 253
        assert graph.state("Timisoara").heuristic(1) == 0

    def test_missing_heuristic(self, graph):
        with pytest.raises(NotImplementedError):
            graph.state("Arad").heuristic(2)

    def test_equality(self, graph):
        """Test states compare by graph and name."""
        other = StateGraph.from_edges([("Arad", "x", "Sibiu", 1)], goals=set())

        assert graph.state("Arad") == graph.state("Arad")
        assert hash(graph.state("Arad")) == hash(graph.state("Arad"))
        assert graph.state("Arad") != graph.state("Sibiu")
        assert graph.state("Arad") != other.state("Arad")

    def test_duplicate_action(self, graph):
        with pytest.raises(ValueError):
            graph.add_edge("Arad", "to_sibiu", "Fagaras", 1)

    def test_repr(self, graph):
        assert repr(graph.state("Arad")) == "GraphState('Arad')"
        assert isinstance(graph.state("Arad"), GraphState)


if __name__ == "__main__":
    pytest.main([__file__])
