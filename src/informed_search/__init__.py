"""Informed state-space search engine.

Breadth-first, greedy best-first and A* search over any problem that
implements the :class:`~informed_search.core.state.State` contract, plus the
effective branching factor metric used to compare heuristics.
"""

__version__ = "0.1.0"

from .core.errors import (
    SearchError, NoSolution, ContractViolation, EmptyFrontier,
    SearchLimitExceeded, BranchingFactorError
)
from .core.state import State, Action, Successor
from .search import (
    SearchNode, PriorityFrontier, BreadthFirst, Greedy, AStar,
    SearchEngine, SearchConfig, SearchResult, search, estimate_branching_factor
)

__all__ = [
    'SearchError',
    'NoSolution',
    'ContractViolation',
    'EmptyFrontier',
    'SearchLimitExceeded',
    'BranchingFactorError',
    'State',
    'Action',
    'Successor',
    'SearchNode',
    'PriorityFrontier',
    'BreadthFirst',
    'Greedy',
    'AStar',
    'SearchEngine',
    'SearchConfig',
    'SearchResult',
    'search',
    'estimate_branching_factor'
]
