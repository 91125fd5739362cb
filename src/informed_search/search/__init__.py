"""Search algorithms.

Search tree nodes, frontiers, the breadth-first / greedy / A* strategies, the
shared search driver and the effective branching factor estimator.
"""

from .node import SearchNode
from .frontier import FIFOFrontier, PriorityFrontier, ExactPriorityFrontier
from .strategies import (
    Strategy, BreadthFirst, Greedy, AStar, create_strategy, resolve_heuristic
)
from .engine import (
    SearchEngine, SearchConfig, SearchResult, SearchStatistics,
    RepeatedStateFilter, create_search_engine, search
)
from .branching import estimate_branching_factor, tree_size

__all__ = [
    'SearchNode',
    'FIFOFrontier',
    'PriorityFrontier',
    'ExactPriorityFrontier',
    'Strategy',
    'BreadthFirst',
    'Greedy',
    'AStar',
    'create_strategy',
    'resolve_heuristic',
    'SearchEngine',
    'SearchConfig',
    'SearchResult',
    'SearchStatistics',
    'RepeatedStateFilter',
    'create_search_engine',
    'search',
    'estimate_branching_factor',
    'tree_size'
]
