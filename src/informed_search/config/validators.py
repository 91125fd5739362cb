"""Configuration validation for the search engine."""

import logging
from typing import List
from omegaconf import DictConfig

from informed_search.search.strategies import STRATEGY_NAMES, canonical_strategy_name

logger = logging.getLogger(__name__)

VALID_HEURISTICS = (1, 2, 3, 4, 'misplaced', 'manhattan', 'gaschnig', 'row_column')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_branching_config(config.get('branching_factor', {}))
        validate_puzzle_config(config.get('puzzle', {}))

        logger.info("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    strategy = search_config.get('strategy', 'astar')
    try:
        canonical_strategy_name(strategy)
    except ValueError:
        raise ConfigValidationError(
            f"search.strategy must be one of {', '.join(STRATEGY_NAMES)}, got {strategy}"
        ) from None

    heuristic = search_config.get('heuristic', 1)
    if heuristic not in VALID_HEURISTICS:
        raise ConfigValidationError(
            f"search.heuristic must be 1-4 or a heuristic name, got {heuristic}"
        )

    max_nodes = search_config.get('max_nodes_expanded', None)
    if max_nodes is not None and (not _is_int(max_nodes) or max_nodes <= 0):
        raise ConfigValidationError(
            f"search.max_nodes_expanded must be positive integer or null, got {max_nodes}"
        )

    max_time = search_config.get('max_computation_time', None)
    if max_time is not None and (not _is_number(max_time) or max_time <= 0):
        raise ConfigValidationError(
            f"search.max_computation_time must be positive number or null, got {max_time}"
        )

    for key in ('exact_priorities', 'hashed_repeated_states'):
        value = search_config.get(key, False)
        if not isinstance(value, bool):
            raise ConfigValidationError(f"search.{key} must be boolean, got {value}")


def validate_branching_config(branching_config: DictConfig) -> None:
    """Validate branching factor configuration section.

    Args:
        branching_config: Branching factor configuration section
    """
    if not branching_config:
        return

    for key in ('max_error', 'delta'):
        value = branching_config.get(key, 0.01)
        if not _is_number(value) or value <= 0:
            raise ConfigValidationError(
                f"branching_factor.{key} must be positive number, got {value}"
            )

    max_iterations = branching_config.get('max_iterations', None)
    if max_iterations is not None and (not _is_int(max_iterations) or max_iterations <= 0):
        raise ConfigValidationError(
            f"branching_factor.max_iterations must be positive integer or null, got {max_iterations}"
        )


def validate_puzzle_config(puzzle_config: DictConfig) -> None:
    """Validate puzzle configuration section.

    Args:
        puzzle_config: Puzzle configuration section
    """
    if not puzzle_config:
        return

    size = puzzle_config.get('size', 3)
    if not _is_int(size) or size < 2:
        raise ConfigValidationError(f"puzzle.size must be integer >= 2, got {size}")

    shuffles = puzzle_config.get('shuffles', 10)
    if not _is_int(shuffles) or shuffles < 0:
        raise ConfigValidationError(
            f"puzzle.shuffles must be non-negative integer, got {shuffles}"
        )

    seed = puzzle_config.get('seed', None)
    if seed is not None and (not _is_int(seed) or seed < 0):
        raise ConfigValidationError(f"puzzle.seed must be non-negative integer or null, got {seed}")

    depth = puzzle_config.get('solution_depth', None)
    if depth is not None and (not _is_int(depth) or depth < 0):
        raise ConfigValidationError(
            f"puzzle.solution_depth must be non-negative integer or null, got {depth}"
        )

    attempts = puzzle_config.get('max_attempts', 100)
    if not _is_int(attempts) or attempts <= 0:
        raise ConfigValidationError(
            f"puzzle.max_attempts must be positive integer, got {attempts}"
        )


def check_config_consistency(config: DictConfig) -> List[str]:
    """Check configuration consistency and return issues.

    Args:
        config: Configuration to check

    Returns:
        List of consistency issues
    """
    issues = []

    search_config = config.get('search', {}) or {}
    puzzle_config = config.get('puzzle', {}) or {}

    if search_config.get('exact_priorities', False) and \
            canonical_strategy_name(search_config.get('strategy', 'astar')) != 'astar':
        issues.append(
            f"search.exact_priorities only affects astar, strategy is {search_config.get('strategy')}"
        )

    depth = puzzle_config.get('solution_depth', None)
    shuffles = puzzle_config.get('shuffles', 10)
    if depth is not None and shuffles < depth:
        issues.append(
            f"puzzle.solution_depth={depth} cannot be reached with puzzle.shuffles={shuffles}"
        )

    return issues
