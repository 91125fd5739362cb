"""Problems implementing the State contract."""

from .graph import StateGraph, GraphState
from .npuzzle import (
    NPuzzleState, IllegalMoveError, MOVE_LEFT, MOVE_RIGHT, MOVE_UP, MOVE_DOWN,
    HEURISTIC_NAMES, perform_action, random_puzzle, check_actions
)

__all__ = [
    'StateGraph',
    'GraphState',
    'NPuzzleState',
    'IllegalMoveError',
    'MOVE_LEFT',
    'MOVE_RIGHT',
    'MOVE_UP',
    'MOVE_DOWN',
    'HEURISTIC_NAMES',
    'perform_action',
    'random_puzzle',
    'check_actions'
]
