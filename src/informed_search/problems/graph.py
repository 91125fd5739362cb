"""Explicit weighted state graph.

Small problems written out edge by edge: each vertex is a state, each edge an
action with a step cost. Heuristic tables are keyed by estimator index or name.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Set, Tuple

from informed_search.core.state import HeuristicIndex, State, Successor


@dataclass
class StateGraph:
    """Directed graph of named states with labelled, weighted edges."""
    edges: Dict[Hashable, List[Tuple[Any, Hashable, float]]] = field(default_factory=dict)
    goals: Set[Hashable] = field(default_factory=set)
    heuristics: Dict[HeuristicIndex, Mapping[Hashable, float]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls,
                   edges: Iterable[Tuple[Hashable, Any, Hashable, float]],
                   goals: Iterable[Hashable],
                   heuristics: Optional[Dict[HeuristicIndex, Mapping[Hashable, float]]] = None
                   ) -> 'StateGraph':
        """Build a graph from ``(source, action, target, cost)`` tuples.

        Edge order is kept and becomes the successor order of each state.
        """
        graph = cls(goals=set(goals), heuristics=dict(heuristics or {}))
        for source, action, target, cost in edges:
            graph.add_edge(source, action, target, cost)
        return graph

    def add_edge(self, source: Hashable, action: Any, target: Hashable, cost: float = 1.0) -> None:
        if any(existing == action for existing, _, _ in self.edges.get(source, [])):
            raise ValueError(f"Duplicate action {action!r} from {source!r}")
        self.edges.setdefault(source, []).append((action, target, cost))
        self.edges.setdefault(target, [])

    def state(self, name: Hashable) -> 'GraphState':
        return GraphState(self, name)


class GraphState(State):
    """A vertex of a :class:`StateGraph`."""

    def __init__(self, graph: StateGraph, name: Hashable):
        self.graph = graph
        self.name = name

    def goal(self) -> bool:
        return self.name in self.graph.goals

    def successor(self) -> List[Successor]:
        return [
            Successor(action, GraphState(self.graph, target))
            for action, target, _ in self.graph.edges.get(self.name, [])
        ]

    def pathcost(self, action: Any) -> float:
        for candidate, _, cost in self.graph.edges.get(self.name, []):
            if candidate == action:
                return cost
        raise KeyError(f"No action {action!r} from state {self.name!r}")

    def heuristic(self, index: HeuristicIndex) -> float:
        try:
            table = self.graph.heuristics[index]
        except KeyError:
            raise NotImplementedError(f"Graph has no heuristic {index!r}") from None
        return table.get(self.name, 0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GraphState):
            return NotImplemented
        return self.graph is other.graph and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"GraphState({self.name!r})"
