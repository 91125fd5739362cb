"""Problem contract and error taxonomy shared by every search component."""

from .errors import (
    SearchError, NoSolution, ContractViolation, EmptyFrontier,
    SearchLimitExceeded, BranchingFactorError
)
from .state import State, Action, Successor

__all__ = [
    'SearchError',
    'NoSolution',
    'ContractViolation',
    'EmptyFrontier',
    'SearchLimitExceeded',
    'BranchingFactorError',
    'State',
    'Action',
    'Successor'
]
