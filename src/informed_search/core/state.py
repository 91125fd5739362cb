"""State contract consumed by the search engine.

A problem plugs into the engine by subclassing :class:`State`. The engine only
ever calls the four methods below and compares states for equality; it never
looks inside a state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Hashable, NamedTuple, Sequence, Tuple, Union


@dataclass(frozen=True)
class Action:
    """Opaque transition label. Only identity and display matter."""
    label: str

    def __str__(self) -> str:
        return self.label


class Successor(NamedTuple):
    """An (action, resulting state) pair produced by ``State.successor()``."""
    action: Hashable
    state: 'State'


HeuristicIndex = Union[int, str]


class State(ABC):
    """Abstract state of a finite-domain search problem.

    Subclasses must implement structural equality (``__eq__``); the greedy
    strategy relies on it to discard previously selected states. Implementing
    ``__hash__`` consistently lets the engine use a hashed lookup instead of a
    linear scan.
    """

    @abstractmethod
    def goal(self) -> bool:
        """Return True if this is a goal state."""

    @abstractmethod
    def successor(self) -> Sequence[Union[Successor, Tuple[Any, 'State']]]:
        """Return the ordered (action, state) pairs reachable in one step.

        Illegal actions must be omitted.
        """

    @abstractmethod
    def pathcost(self, action: Any) -> float:
        """Cost of taking ``action`` from this state.

        Non-negative for every legal action.
        """

    def heuristic(self, index: HeuristicIndex) -> int:
        """Estimate of the remaining cost to a goal, by estimator index or name."""
        raise NotImplementedError(
            f"{type(self).__name__} does not provide heuristic {index!r}"
        )
