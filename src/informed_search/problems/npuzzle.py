"""N x N sliding-tile puzzle.

The board is stored row-major as a tuple, 0 marks the blank. The goal is
``1, 2, ..., N*N-1`` followed by the blank. Actions move the blank; moves off
the board are illegal and never produced by ``successor()``.

Four heuristics are available, by index or by name:

1. ``misplaced``  - number of tiles not on their goal square
2. ``manhattan``  - sum of Manhattan distances of tiles to their goal squares
3. ``gaschnig``   - swaps of the blank needed to sort the board
4. ``row_column`` - tiles outside their goal row plus tiles outside their goal column

The blank is never counted.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from informed_search.core.state import Action, HeuristicIndex, State, Successor

logger = logging.getLogger(__name__)

MOVE_LEFT = Action("LEFT")
MOVE_RIGHT = Action("RIGHT")
MOVE_UP = Action("UP")
MOVE_DOWN = Action("DOWN")

ACTION_SEQUENCE = (MOVE_LEFT, MOVE_RIGHT, MOVE_UP, MOVE_DOWN)

# Blank displacement (row, col) per action
_OFFSETS: Dict[Action, Tuple[int, int]] = {
    MOVE_LEFT: (0, -1),
    MOVE_RIGHT: (0, 1),
    MOVE_UP: (-1, 0),
    MOVE_DOWN: (1, 0),
}

HEURISTIC_NAMES = {
    1: 'misplaced',
    2: 'manhattan',
    3: 'gaschnig',
    4: 'row_column',
}


class IllegalMoveError(ValueError):
    """The blank cannot move in the requested direction."""
    pass


def goal_tiles(size: int) -> Tuple[int, ...]:
    """Goal configuration for a ``size`` x ``size`` board."""
    return tuple(range(1, size * size)) + (0,)


class NPuzzleState(State):
    """Immutable sliding-tile puzzle configuration."""

    __slots__ = ('tiles', 'size', '_blank')

    def __init__(self, tiles: Optional[Iterable[int]] = None, size: Optional[int] = None):
        """Create a board.

        Args:
            tiles: Row-major tile values with 0 for the blank. Defaults to the
                goal configuration.
            size: Side length. Inferred from ``tiles`` when omitted, 4 when
                both are omitted.
        """
        if tiles is None:
            size = 4 if size is None else size
            tiles = goal_tiles(size)
        tiles = tuple(int(t) for t in np.asarray(list(tiles)).ravel())

        if size is None:
            size = int(round(len(tiles) ** 0.5))
        if size < 2 or len(tiles) != size * size:
            raise ValueError(f"Expected {size}x{size} tiles, got {len(tiles)} values")
        if sorted(tiles) != list(range(size * size)):
            raise ValueError(f"Tiles must be a permutation of 0..{size * size - 1}")

        self.tiles = tiles
        self.size = size
        self._blank = tiles.index(0)

    @property
    def blank(self) -> Tuple[int, int]:
        """(row, col) of the blank."""
        return divmod(self._blank, self.size)

    # State contract

    def goal(self) -> bool:
        return self.tiles == goal_tiles(self.size)

    def successor(self) -> List[Successor]:
        pairs = []
        for action in ACTION_SEQUENCE:
            try:
                pairs.append(Successor(action, perform_action(self, action)))
            except IllegalMoveError:
                continue
        return pairs

    def pathcost(self, action: Action) -> float:
        return 1.0

    def heuristic(self, index: HeuristicIndex) -> int:
        name = HEURISTIC_NAMES.get(index, index)
        if name == 'misplaced':
            return self.misplaced_tiles()
        if name == 'manhattan':
            return self.manhattan_distance()
        if name == 'gaschnig':
            return self.gaschnig_swaps()
        if name == 'row_column':
            return self.out_of_row_column()
        raise NotImplementedError(f"Unknown N-puzzle heuristic {index!r}")

    # Heuristics

    def _tile_positions(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Current and goal (row, col) of every non-blank tile."""
        tiles = np.asarray(self.tiles)
        positions = np.flatnonzero(tiles)
        rows, cols = np.divmod(positions, self.size)
        goal_rows, goal_cols = np.divmod(tiles[positions] - 1, self.size)
        return rows, cols, goal_rows, goal_cols

    def misplaced_tiles(self) -> int:
        tiles = np.asarray(self.tiles)
        goal = np.asarray(goal_tiles(self.size))
        return int(np.count_nonzero((tiles != goal) & (tiles != 0)))

    def manhattan_distance(self) -> int:
        rows, cols, goal_rows, goal_cols = self._tile_positions()
        return int(np.sum(np.abs(rows - goal_rows) + np.abs(cols - goal_cols)))

    def gaschnig_swaps(self) -> int:
        """Number of blank swaps that sort the board.

        While the blank is not on its goal square it swaps with the tile that
        belongs where the blank is; once it is home it swaps with the first
        misplaced tile.
        """
        permutation = list(self.tiles)
        last = len(permutation) - 1
        space = permutation.index(0)
        swaps = 0

        while True:
            if space == last:
                swap = next((i for i in range(last) if permutation[i] != i + 1), None)
            else:
                swap = permutation.index(space + 1)
            if swap is None:
                return swaps

            permutation[space] = permutation[swap]
            permutation[swap] = 0
            space = swap
            swaps += 1

    def out_of_row_column(self) -> int:
        rows, cols, goal_rows, goal_cols = self._tile_positions()
        return int(np.count_nonzero(rows != goal_rows) + np.count_nonzero(cols != goal_cols))

    def __eq__(self, other) -> bool:
        if not isinstance(other, NPuzzleState):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.tiles)

    def __str__(self) -> str:
        lines = []
        for r in range(self.size):
            row = self.tiles[r * self.size:(r + 1) * self.size]
            lines.append("".join(f" {t:02d}" for t in row))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"NPuzzleState({list(self.tiles)!r}, size={self.size})"


def perform_action(state: NPuzzleState, action: Action) -> NPuzzleState:
    """Return the board obtained by moving the blank.

    Raises:
        IllegalMoveError: If the move would leave the board
    """
    try:
        dr, dc = _OFFSETS[action]
    except KeyError:
        raise IllegalMoveError(f"Unknown action {action!r}") from None

    row, col = state.blank
    new_row, new_col = row + dr, col + dc
    if not (0 <= new_row < state.size and 0 <= new_col < state.size):
        raise IllegalMoveError(f"Cannot move blank {action} from ({row}, {col})")

    tiles = list(state.tiles)
    blank = row * state.size + col
    target = new_row * state.size + new_col
    tiles[blank], tiles[target] = tiles[target], 0
    return NPuzzleState(tiles, size=state.size)


def random_puzzle(size: int = 4, shuffles: int = 10,
                  seed: Optional[int] = None,
                  rng: Optional[np.random.Generator] = None) -> NPuzzleState:
    """Generate a solvable board by random legal blank moves from the goal.

    Args:
        size: Side length of the board
        shuffles: Number of legal moves to perform
        seed: Seed for a fresh random generator
        rng: Generator to draw from, overrides ``seed``

    Returns:
        Scrambled board
    """
    if rng is None:
        rng = np.random.default_rng(seed)

    state = NPuzzleState(size=size)
    moves = 0
    while moves < shuffles:
        action = ACTION_SEQUENCE[int(rng.integers(len(ACTION_SEQUENCE)))]
        try:
            state = perform_action(state, action)
        except IllegalMoveError:
            continue
        moves += 1

    logger.debug(f"Generated {size}x{size} puzzle with {shuffles} shuffles")
    return state


def check_actions(state: NPuzzleState, actions: Iterable[Action]) -> bool:
    """Return True if applying ``actions`` to ``state`` reaches the goal."""
    for action in actions:
        try:
            state = perform_action(state, action)
        except IllegalMoveError:
            return False
    return state.goal()
