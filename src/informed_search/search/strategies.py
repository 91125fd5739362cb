"""Search strategies.

A strategy decides three things for the engine: which frontier to use, the
priority of a newly generated child, and whether previously selected states
are discarded when popped. Every strategy runs on the same driver loop in
:mod:`informed_search.search.engine`.
"""

import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional, Union

from informed_search.core.errors import ContractViolation
from informed_search.core.state import HeuristicIndex, State
from informed_search.search.frontier import (
    ExactPriorityFrontier, FIFOFrontier, PriorityFrontier
)
from informed_search.search.node import SearchNode

HeuristicSelector = Union[HeuristicIndex, Callable[[State], float]]


def resolve_heuristic(selector: HeuristicSelector) -> Callable[[State], float]:
    """Turn a heuristic index, name or callable into a ``f(state)`` function."""
    if callable(selector):
        return selector

    def by_index(state: State) -> float:
        return state.heuristic(selector)

    by_index.__name__ = f"h{selector}" if isinstance(selector, int) else str(selector)
    return by_index


def evaluate_heuristic(h: Callable[[State], float], state: State) -> float:
    """Evaluate a heuristic, reporting bad values as contract violations."""
    try:
        value = h(state)
    except Exception as e:
        raise ContractViolation(f"heuristic failed for state {state!r}: {e}") from e

    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise ContractViolation(
            f"heuristic returned {value!r} for state {state!r}, expected a number"
        )
    if not math.isfinite(value):
        raise ContractViolation(f"heuristic returned {value} for state {state!r}")
    return value


class Strategy(ABC):
    """Expansion policy plugged into the search driver."""

    name: ClassVar[str] = "strategy"
    discards_repeated_states: ClassVar[bool] = False

    @abstractmethod
    def make_frontier(self):
        """Create an empty frontier for one search run."""

    @abstractmethod
    def priority(self, node: SearchNode):
        """Priority key for a newly generated node."""

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class BreadthFirst(Strategy):
    """Uninformed breadth-first search: expand nodes in generation order."""

    name: ClassVar[str] = "breadth-first"

    def make_frontier(self) -> FIFOFrontier:
        return FIFOFrontier()

    def priority(self, node: SearchNode) -> int:
        return 0


@dataclass(frozen=True)
class Greedy(Strategy):
    """Greedy best-first search ordered by the heuristic estimate alone.

    A popped node whose state equals a previously selected state is skipped.
    """
    heuristic: HeuristicSelector = 1

    name: ClassVar[str] = "greedy"
    discards_repeated_states: ClassVar[bool] = True

    def __post_init__(self):
        object.__setattr__(self, '_h', resolve_heuristic(self.heuristic))

    def make_frontier(self) -> PriorityFrontier:
        return PriorityFrontier()

    def priority(self, node: SearchNode) -> int:
        return math.floor(evaluate_heuristic(self._h, node.state))

    @property
    def label(self) -> str:
        return f"{self.name}[{_selector_name(self.heuristic)}]"


@dataclass(frozen=True)
class AStar(Strategy):
    """A* search ordered by ``g + h``.

    By default the sum is truncated to an integer bucket and nodes in the same
    bucket leave in insertion order. This only approximates real-valued A*
    ordering when costs are fractional. ``exact=True`` keeps the real-valued
    sum instead.
    """
    heuristic: HeuristicSelector = 1
    exact: bool = False

    name: ClassVar[str] = "astar"

    def __post_init__(self):
        object.__setattr__(self, '_h', resolve_heuristic(self.heuristic))

    def make_frontier(self):
        if self.exact:
            return ExactPriorityFrontier()
        return PriorityFrontier()

    def priority(self, node: SearchNode):
        f = node.cost + evaluate_heuristic(self._h, node.state)
        if self.exact:
            return float(f)
        return math.floor(f)

    @property
    def label(self) -> str:
        suffix = ",exact" if self.exact else ""
        return f"{self.name}[{_selector_name(self.heuristic)}{suffix}]"


STRATEGY_NAMES = ('breadth-first', 'greedy', 'astar')

# Accepted spellings after lower-casing and replacing underscores with dashes
STRATEGY_ALIASES = {
    'breadth-first': 'breadth-first',
    'bfs': 'breadth-first',
    'greedy': 'greedy',
    'astar': 'astar',
    'a*': 'astar',
}


def canonical_strategy_name(name: str) -> str:
    """Map a strategy spelling to one of STRATEGY_NAMES.

    Raises:
        ValueError: If the name is not a known strategy
    """
    key = str(name).strip().lower().replace('_', '-')
    try:
        return STRATEGY_ALIASES[key]
    except KeyError:
        raise ValueError(
            f"Unknown strategy {name!r}, expected one of {STRATEGY_NAMES}"
        ) from None


def create_strategy(name: str,
                    heuristic: Optional[HeuristicSelector] = None,
                    exact: bool = False) -> Strategy:
    """Build a strategy from its name.

    Args:
        name: ``breadth-first``, ``greedy`` or ``astar``, or an alias from
            STRATEGY_ALIASES (underscores are accepted in place of dashes)
        heuristic: Heuristic selector for the informed strategies
        exact: Use real-valued priorities for A*

    Returns:
        Strategy instance
    """
    key = canonical_strategy_name(name)
    if key == 'breadth-first':
        return BreadthFirst()
    if heuristic is None:
        heuristic = 1
    if key == 'greedy':
        return Greedy(heuristic)
    return AStar(heuristic, exact=exact)


def _selector_name(selector: HeuristicSelector) -> str:
    if callable(selector):
        return getattr(selector, '__name__', 'custom')
    return f"h{selector}" if isinstance(selector, int) else str(selector)
