"""Search driver.

One loop serves every strategy: test the current node for the goal, expand it,
push each child into the frontier under the strategy's priority, then pop the
next current node. Greedy search additionally skips popped nodes whose state
was already selected earlier.

Every generated node stays reachable from the frontier or from a descendant
until the search returns, since the solution path is rebuilt by walking parent
links. Memory therefore grows with the number of generated nodes.
"""

import time
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from informed_search.core.errors import (
    BranchingFactorError, ContractViolation, NoSolution, SearchLimitExceeded
)
from informed_search.core.state import State
from informed_search.search.branching import (
    DEFAULT_DELTA, DEFAULT_MAX_ERROR, DEFAULT_MAX_ITERATIONS, estimate_branching_factor
)
from informed_search.search.node import SearchNode
from informed_search.search.strategies import Strategy

logger = logging.getLogger(__name__)

SelectCallback = Callable[[SearchNode], None]


@dataclass
class SearchConfig:
    """Configuration for a search run."""
    max_nodes_expanded: Optional[int] = None  # None = unbounded
    max_computation_time: Optional[float] = None  # seconds, None = no deadline
    hashed_repeated_states: bool = True  # hashed lookup for the greedy filter
    # Effective branching factor estimation
    branching_max_error: float = DEFAULT_MAX_ERROR
    branching_delta: float = DEFAULT_DELTA
    branching_max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS  # None = unbounded

    @classmethod
    def from_config(cls, config) -> 'SearchConfig':
        """Build a SearchConfig from the ``search`` and ``branching_factor`` groups.

        Args:
            config: Loaded OmegaConf configuration (or a plain dict)

        Returns:
            SearchConfig with defaults for missing keys
        """
        search_cfg = config.get('search', {}) or {}
        branching_cfg = config.get('branching_factor', {}) or {}
        return cls(
            max_nodes_expanded=search_cfg.get('max_nodes_expanded', None),
            max_computation_time=search_cfg.get('max_computation_time', None),
            hashed_repeated_states=bool(search_cfg.get('hashed_repeated_states', True)),
            branching_max_error=float(branching_cfg.get('max_error', DEFAULT_MAX_ERROR)),
            branching_delta=float(branching_cfg.get('delta', DEFAULT_DELTA)),
            branching_max_iterations=branching_cfg.get('max_iterations', DEFAULT_MAX_ITERATIONS)
        )


@dataclass
class SearchStatistics:
    """Counters collected during one search run."""
    strategy: str = ""
    nodes_generated: int = 0  # children inserted into the frontier
    nodes_expanded: int = 0
    duplicates_skipped: int = 0
    max_frontier_size: int = 0
    solution_depth: Optional[int] = None
    solution_cost: Optional[float] = None
    computation_time: float = 0.0
    effective_branching_factor: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'strategy': self.strategy,
            'nodes_generated': self.nodes_generated,
            'nodes_expanded': self.nodes_expanded,
            'duplicates_skipped': self.duplicates_skipped,
            'max_frontier_size': self.max_frontier_size,
            'solution_depth': self.solution_depth,
            'solution_cost': self.solution_cost,
            'computation_time': self.computation_time,
            'effective_branching_factor': self.effective_branching_factor
        }


@dataclass
class SearchResult:
    """Outcome of :meth:`SearchEngine.solve`."""
    success: bool
    strategy: str
    node: Optional[SearchNode] = None
    actions: List[Any] = field(default_factory=list)
    statistics: SearchStatistics = field(default_factory=SearchStatistics)
    termination_reason: str = "unknown"

    @property
    def cost(self) -> Optional[float]:
        return self.node.cost if self.node is not None else None

    @property
    def depth(self) -> Optional[int]:
        return self.node.depth if self.node is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'strategy': self.strategy,
            'actions': [str(a) for a in self.actions],
            'cost': self.cost,
            'depth': self.depth,
            'termination_reason': self.termination_reason,
            'statistics': self.statistics.to_dict()
        }


class RepeatedStateFilter:
    """States already selected as current by the greedy strategy.

    Hashable states go into a set; states that cannot be hashed (or all
    states, when ``hashed`` is False) are kept in a list and found by a linear
    equality scan. Both give the same answers for states whose hash agrees
    with their equality.
    """

    def __init__(self, hashed: bool = True):
        self.hashed = hashed
        self._hashed_states = set()
        self._scanned_states: List[State] = []

    def add(self, state: State) -> None:
        if not state == state:
            raise ContractViolation(f"State equality is not reflexive for {state!r}")
        if self.hashed:
            try:
                self._hashed_states.add(state)
                return
            except TypeError:
                pass  # unhashable, fall back to the scan list
        self._scanned_states.append(state)

    def __contains__(self, state: State) -> bool:
        if self._hashed_states:
            try:
                if state in self._hashed_states:
                    return True
            except TypeError:
                pass
        return any(seen == state for seen in self._scanned_states)

    def __len__(self) -> int:
        return len(self._hashed_states) + len(self._scanned_states)


class SearchEngine:
    """Runs breadth-first, greedy and A* strategies over a State contract."""

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize search engine.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()
        self.statistics = SearchStatistics()

        logger.info(f"Search engine initialized with max_nodes_expanded={self.config.max_nodes_expanded}, "
                    f"max_computation_time={self.config.max_computation_time}")

    def search(self, initial: State, strategy: Strategy,
               on_select: Optional[SelectCallback] = None) -> SearchNode:
        """Search from ``initial`` until a goal node is selected.

        Args:
            initial: Initial state
            strategy: Expansion strategy
            on_select: Optional callback invoked with every node selected as
                current, starting with the root

        Returns:
            The goal node; ``node.actions()`` gives the solution

        Raises:
            NoSolution: If the frontier runs empty before a goal is found
            SearchLimitExceeded: If the node budget or deadline is exhausted
            ContractViolation: If the problem definition misbehaves
        """
        start_time = time.perf_counter()
        deadline = None
        if self.config.max_computation_time is not None:
            deadline = start_time + self.config.max_computation_time

        stats = SearchStatistics(strategy=strategy.label)
        self.statistics = stats

        logger.info(f"Starting {strategy.label} search")

        frontier = strategy.make_frontier()
        accepted = None
        if strategy.discards_repeated_states:
            accepted = RepeatedStateFilter(hashed=self.config.hashed_repeated_states)

        node = SearchNode.root(initial)
        if accepted is not None:
            accepted.add(node.state)
        self._notify(on_select, node)

        try:
            while not self._is_goal(node.state):
                self._check_limits(deadline)

                children = node.expand()
                stats.nodes_expanded += 1
                for child in children:
                    frontier.insert(strategy.priority(child), child)
                    stats.nodes_generated += 1
                stats.max_frontier_size = max(stats.max_frontier_size, len(frontier))

                node = self._select(frontier, accepted, strategy)
                self._notify(on_select, node)
        except NoSolution:
            logger.warning(f"{strategy.label} search exhausted the frontier after "
                           f"{stats.nodes_expanded} expansions")
            raise
        except SearchLimitExceeded as e:
            logger.warning(f"{strategy.label} search stopped: {e.reason}")
            raise
        finally:
            stats.computation_time = time.perf_counter() - start_time

        stats.solution_depth = node.depth
        stats.solution_cost = node.cost
        stats.effective_branching_factor = self._branching_factor(stats.nodes_generated, node.depth)

        logger.info(f"{strategy.label} found a goal at depth {node.depth} (cost {node.cost}) "
                    f"after generating {stats.nodes_generated} nodes in {stats.computation_time:.4f}s")
        return node

    def solve(self, initial: State, strategy: Strategy,
              on_select: Optional[SelectCallback] = None) -> SearchResult:
        """Run :meth:`search` and package the outcome.

        Exhaustion and budget limits become unsuccessful results; contract
        violations still propagate.

        Returns:
            SearchResult with actions and statistics
        """
        try:
            node = self.search(initial, strategy, on_select=on_select)
        except NoSolution:
            return SearchResult(
                success=False,
                strategy=strategy.label,
                statistics=self.statistics,
                termination_reason="search_exhausted"
            )
        except SearchLimitExceeded as e:
            return SearchResult(
                success=False,
                strategy=strategy.label,
                statistics=self.statistics,
                termination_reason=e.reason
            )

        return SearchResult(
            success=True,
            strategy=strategy.label,
            node=node,
            actions=node.actions(),
            statistics=self.statistics,
            termination_reason="initial_match" if node.is_root else "goal_found"
        )

    def _select(self, frontier, accepted: Optional[RepeatedStateFilter],
                strategy: Strategy) -> SearchNode:
        """Pop the next current node, skipping states already selected."""
        while True:
            if not frontier:
                raise NoSolution(strategy.label, self.statistics.nodes_generated,
                                 self.statistics.nodes_expanded)
            node = frontier.pop_min()
            if accepted is None:
                return node
            if node.state in accepted:
                self.statistics.duplicates_skipped += 1
                continue
            accepted.add(node.state)
            return node

    def _check_limits(self, deadline: Optional[float]) -> None:
        limit = self.config.max_nodes_expanded
        if limit is not None and self.statistics.nodes_expanded >= limit:
            raise SearchLimitExceeded("max_nodes_reached", self.statistics.nodes_generated,
                                      self.statistics.nodes_expanded)
        if deadline is not None and time.perf_counter() > deadline:
            raise SearchLimitExceeded("timeout", self.statistics.nodes_generated,
                                      self.statistics.nodes_expanded)

    def _branching_factor(self, nodes_generated: int, depth: int) -> Optional[float]:
        try:
            return estimate_branching_factor(
                nodes_generated, depth,
                max_error=self.config.branching_max_error,
                delta=self.config.branching_delta,
                max_iterations=self.config.branching_max_iterations
            )
        except BranchingFactorError as e:
            logger.warning(f"Could not estimate branching factor: {e}")
            return None

    @staticmethod
    def _is_goal(state: State) -> bool:
        try:
            return bool(state.goal())
        except Exception as e:
            raise ContractViolation(f"goal() failed for state {state!r}: {e}") from e

    @staticmethod
    def _notify(on_select: Optional[SelectCallback], node: SearchNode) -> None:
        if on_select is None:
            return
        try:
            on_select(node)
        except Exception as e:
            logger.warning(f"on_select callback failed: {e}")


def create_search_engine(max_nodes_expanded: Optional[int] = None,
                         max_computation_time: Optional[float] = None,
                         hashed_repeated_states: bool = True) -> SearchEngine:
    """Factory function to create a search engine with custom configuration.

    Args:
        max_nodes_expanded: Node expansion budget, None for unbounded
        max_computation_time: Deadline in seconds, None for no deadline
        hashed_repeated_states: Use a hashed set for greedy repeated-state checks

    Returns:
        Configured SearchEngine instance
    """
    config = SearchConfig(
        max_nodes_expanded=max_nodes_expanded,
        max_computation_time=max_computation_time,
        hashed_repeated_states=hashed_repeated_states
    )

    return SearchEngine(config)


def search(initial: State, strategy: Strategy,
           config: Optional[SearchConfig] = None) -> SearchNode:
    """Search from ``initial`` with ``strategy`` and return the goal node.

    Raises:
        NoSolution: If no goal is reachable
    """
    return SearchEngine(config).search(initial, strategy)
