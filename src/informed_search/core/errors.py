"""Exceptions raised by the search engine."""


class SearchError(Exception):
    """Base class for all search engine errors."""
    pass


class NoSolution(SearchError):
    """The frontier was exhausted without reaching a goal state."""

    def __init__(self, strategy: str, nodes_generated: int = 0, nodes_expanded: int = 0):
        self.strategy = strategy
        self.nodes_generated = nodes_generated
        self.nodes_expanded = nodes_expanded
        super().__init__(
            f"{strategy}: frontier exhausted after expanding {nodes_expanded} nodes "
            f"({nodes_generated} generated)"
        )


class ContractViolation(SearchError):
    """The problem definition returned inconsistent data. Not recoverable."""
    pass


class EmptyFrontier(SearchError):
    """Popped a frontier that holds no nodes."""
    pass


class SearchLimitExceeded(SearchError):
    """The configured node budget or deadline ran out before a goal was found."""

    def __init__(self, reason: str, nodes_generated: int = 0, nodes_expanded: int = 0):
        self.reason = reason
        self.nodes_generated = nodes_generated
        self.nodes_expanded = nodes_expanded
        super().__init__(f"Search stopped: {reason}")


class BranchingFactorError(SearchError):
    """The effective branching factor could not be estimated."""
    pass
