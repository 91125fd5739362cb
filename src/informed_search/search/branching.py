"""Effective branching factor estimation.

The effective branching factor b* of a search that generated N nodes and found
a solution at depth d is the branching factor a uniform tree of depth d would
need to contain N + 1 nodes::

    N + 1 = 1 + b* + (b*)^2 + ... + (b*)^d

It is found numerically by walking b upwards from zero in steps of ``delta``;
when the error changes sign the root was stepped over, so the walk backs up
one step and halves ``delta``. The number of steps grows with b*, roughly
b* / delta, so the walk is unbounded unless ``max_iterations`` is given.
"""

import itertools
import logging
from typing import Optional

from informed_search.core.errors import BranchingFactorError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ERROR = 0.01
DEFAULT_DELTA = 0.01
DEFAULT_MAX_ITERATIONS: Optional[int] = None


def tree_size(b: float, depth: int) -> float:
    """Evaluate ``1 + b + b^2 + ... + b^depth`` by Horner's rule."""
    total = 1.0
    for _ in range(max(depth, 0)):
        total = total * b + 1.0
    return total


def estimate_branching_factor(n_nodes: int,
                              depth: int,
                              max_error: float = DEFAULT_MAX_ERROR,
                              delta: float = DEFAULT_DELTA,
                              max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS) -> float:
    """Estimate the effective branching factor of a finished search.

    Args:
        n_nodes: Number of nodes generated by the search
        depth: Depth at which the solution was found
        max_error: Accepted distance between the tree size and ``n_nodes + 1``
        delta: Initial step for the walk over b
        max_iterations: Upper bound on polynomial evaluations, None for no bound

    Returns:
        Branching factor b >= 0 with ``|tree_size(b, depth) - (n_nodes + 1)| <= max_error``

    Raises:
        ValueError: If an argument is out of range
        BranchingFactorError: If no b satisfies the equation for ``depth == 0``,
            or the walk does not converge within ``max_iterations``
    """
    if n_nodes < 0:
        raise ValueError(f"n_nodes must be non-negative, got {n_nodes}")
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    if max_error <= 0 or delta <= 0:
        raise ValueError("max_error and delta must be positive")
    if max_iterations is not None and max_iterations <= 0:
        raise ValueError(f"max_iterations must be positive or None, got {max_iterations}")

    if depth == 0:
        # The tree size is 1 for every b.
        if n_nodes == 0:
            return 0.0
        raise BranchingFactorError(
            f"No branching factor explains {n_nodes} nodes at depth 0"
        )

    target = 1.0 + n_nodes
    b = 0.0
    sign = 0

    steps = itertools.count() if max_iterations is None else range(max_iterations)
    for _ in steps:
        error = tree_size(b, depth) - target
        previous_sign = sign
        sign = -1 if error < 0.0 else 1

        if abs(error) <= max_error:
            logger.debug(f"Effective branching factor {b:.4f} for {n_nodes} nodes at depth {depth}")
            return b

        if previous_sign == sign or previous_sign == 0:
            b += delta
        else:
            # Stepped over the root: go back and take smaller steps.
            b -= delta
            delta /= 2
            sign = previous_sign

    raise BranchingFactorError(
        f"Branching factor for n_nodes={n_nodes}, depth={depth} did not converge "
        f"within {max_iterations} iterations (last b={b:.6f})"
    )
