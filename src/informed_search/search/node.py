"""Search tree nodes.

Nodes point to their parent only. The tree grows by adding leaves and no node
is modified after creation, so any node can rebuild its action sequence by
walking parent links.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from informed_search.core.errors import ContractViolation, SearchError
from informed_search.core.state import State


@dataclass(frozen=True, eq=False)
class SearchNode:
    """Node in the search tree."""
    state: State
    parent: Optional['SearchNode'] = None
    action: Any = None
    cost: float = 0.0  # g(n) - accumulated path cost from the root
    depth: int = field(init=False)

    def __post_init__(self):
        depth = 0 if self.parent is None else self.parent.depth + 1
        object.__setattr__(self, 'depth', depth)

    @classmethod
    def root(cls, state: State) -> 'SearchNode':
        """Create the root node for an initial state."""
        return cls(state)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def expand(self) -> List['SearchNode']:
        """Generate one child per (action, state) pair of the successor function.

        Returns:
            Children in successor order, possibly empty

        Raises:
            ContractViolation: If the state's successor or cost function fails,
                or a step cost is negative, infinite or NaN
        """
        try:
            successors = list(self.state.successor())
        except Exception as e:
            raise ContractViolation(
                f"successor() failed for state {self.state!r}: {e}"
            ) from e

        children = []
        for pair in successors:
            try:
                action, child_state = pair
            except (TypeError, ValueError) as e:
                raise ContractViolation(
                    f"successor() must yield (action, state) pairs, got {pair!r}"
                ) from e

            try:
                step = float(self.state.pathcost(action))
            except Exception as e:
                raise ContractViolation(
                    f"pathcost({action!r}) failed for state {self.state!r}: {e}"
                ) from e

            if not math.isfinite(step) or step < 0:
                raise ContractViolation(
                    f"pathcost({action!r}) returned {step} for a legal action"
                )

            children.append(SearchNode(
                state=child_state,
                parent=self,
                action=action,
                cost=self.cost + step
            ))
        return children

    def actions_from_leaf(self) -> Iterator[Any]:
        """Yield the inducing actions from this node back towards the root.

        The first action yielded is the one that produced this node, the last
        is the one applied to the root state.
        """
        node = self
        for _ in range(self.depth):
            if node.parent is None:
                raise SearchError(
                    f"Node at depth {self.depth} has a broken parent chain"
                )
            yield node.action
            node = node.parent

    def actions(self) -> List[Any]:
        """Get the sequence of actions from the root to this node."""
        steps = list(self.actions_from_leaf())
        steps.reverse()
        return steps

    def path(self) -> List['SearchNode']:
        """Get the nodes from the root to this node, inclusive."""
        nodes = []
        node = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        return list(reversed(nodes))

    def __repr__(self) -> str:
        return (f"SearchNode(state={self.state!r}, action={self.action!r}, "
                f"cost={self.cost}, depth={self.depth})")
