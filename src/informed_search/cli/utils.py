"""CLI utility functions."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from informed_search.problems.npuzzle import NPuzzleState
from informed_search.search.engine import SearchResult


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True
    )

    # Hydra is chatty at INFO
    logging.getLogger('hydra').setLevel(logging.WARNING)


def parse_tiles(text: str) -> NPuzzleState:
    """Parse a board from a comma or whitespace separated list of tiles.

    Rows may be separated by ``/``, e.g. ``1,2,3/4,5,6/7,0,8``.

    Raises:
        ValueError: If the text is not a valid board
    """
    tokens = text.replace('/', ' ').replace(',', ' ').split()
    if not tokens:
        raise ValueError("Empty tile list")
    try:
        tiles = [int(token) for token in tokens]
    except ValueError:
        raise ValueError(f"Tiles must be integers: {text!r}") from None
    return NPuzzleState(tiles)


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
        pretty: Whether to pretty-print JSON
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        if pretty:
            json.dump(results, f, indent=2, sort_keys=True, default=str)
        else:
            json.dump(results, f, default=str)


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0.001:
        return f"{seconds*1000000:.1f}µs"
    elif seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"


def format_branching_factor(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.4f}"


def format_comparison(results: List[SearchResult]) -> str:
    """Render search results as a fixed-width table."""
    header = (f"{'Strategy':<24} {'Result':<18} {'Depth':>5} {'Cost':>7} "
              f"{'Generated':>10} {'Expanded':>9} {'EBF':>8} {'Time':>9}")
    lines = [header, "-" * len(header)]
    for result in results:
        stats = result.statistics
        status = "solved" if result.success else result.termination_reason
        depth = "-" if result.depth is None else str(result.depth)
        cost = "-" if result.cost is None else f"{result.cost:g}"
        lines.append(
            f"{result.strategy:<24} {status:<18} {depth:>5} {cost:>7} "
            f"{stats.nodes_generated:>10} {stats.nodes_expanded:>9} "
            f"{format_branching_factor(stats.effective_branching_factor):>8} "
            f"{format_duration(stats.computation_time):>9}"
        )
    return "\n".join(lines)


def format_solution(result: SearchResult, show_steps: bool = False) -> str:
    """Describe a solved search, optionally printing the board after every move."""
    lines = [f"Solution via {result.strategy} ({len(result.actions)} moves):"]
    for i, node in enumerate(result.node.path()[1:], start=1):
        lines.append(f"{i}: {node.action}")
        if show_steps:
            lines.append(str(node.state))
    return "\n".join(lines)
