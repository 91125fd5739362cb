"""CLI command implementations."""

import logging
from argparse import Namespace
from typing import Any, Dict, List, Optional, Union

import numpy as np
from omegaconf import DictConfig, OmegaConf

from informed_search.config import (
    ConfigValidationError, default_config, get_parameter, load_config, validate_config
)
from informed_search.config.validators import check_config_consistency
from informed_search.problems.npuzzle import NPuzzleState, check_actions, random_puzzle
from informed_search.search.engine import SearchConfig, SearchEngine, SearchResult
from informed_search.search.strategies import AStar, BreadthFirst, Greedy, create_strategy
from .utils import (
    format_branching_factor, format_comparison, format_duration, format_solution,
    parse_tiles, save_results
)

logger = logging.getLogger(__name__)

_MISSING = object()


def parse_heuristic(value: Union[str, int, None]) -> Union[str, int, None]:
    """Heuristic selector from the command line: digits become an index."""
    if value is None or isinstance(value, int):
        return value
    value = str(value).strip()
    return int(value) if value.isdigit() else value


class PuzzleRunner:
    """Builds puzzles and runs searches using the loaded configuration."""

    def __init__(self, config_overrides: Optional[List[str]] = None,
                 config_dir: Optional[str] = None):
        """Initialize the runner.

        Args:
            config_overrides: ``key=value`` configuration overrides
            config_dir: Configuration directory, defaults to the project ``conf``
        """
        self.config = resolve_config(config_overrides, config_dir)
        self.search_config = SearchConfig.from_config(self.config)

    def apply_limits(self, max_nodes: Optional[int] = None,
                     timeout: Optional[float] = None) -> None:
        if max_nodes is not None:
            self.search_config.max_nodes_expanded = max_nodes
        if timeout is not None:
            self.search_config.max_computation_time = timeout

    def make_puzzle(self, tiles: Optional[str] = None,
                    size: Optional[int] = None,
                    shuffles: Optional[int] = None,
                    seed: Optional[int] = None) -> NPuzzleState:
        """Parse ``tiles`` or draw a random board using config defaults."""
        if tiles:
            return parse_tiles(tiles)

        puzzle_cfg = self.config.puzzle
        return random_puzzle(
            size=size if size is not None else puzzle_cfg.size,
            shuffles=shuffles if shuffles is not None else puzzle_cfg.shuffles,
            seed=seed if seed is not None else puzzle_cfg.seed
        )

    def run(self, state: NPuzzleState, strategy) -> SearchResult:
        engine = SearchEngine(self.search_config)
        return engine.solve(state, strategy)

    def draw_with_depth(self, depth: int, size: int, shuffles: int,
                        seed: Optional[int] = None,
                        max_attempts: int = 100) -> NPuzzleState:
        """Draw random boards until A* with the Gaschnig heuristic needs ``depth`` moves.

        Raises:
            RuntimeError: If no board of that depth is drawn within ``max_attempts``
        """
        rng = np.random.default_rng(seed)
        probe = AStar(3)
        for attempt in range(1, max_attempts + 1):
            state = random_puzzle(size=size, shuffles=shuffles, rng=rng)
            result = self.run(state, probe)
            if result.success and result.depth == depth:
                logger.info(f"Drew a depth-{depth} puzzle after {attempt} attempts")
                return state
            logger.debug(f"Attempt {attempt}: solution depth {result.depth}, wanted {depth}")

        raise RuntimeError(f"No puzzle with solution depth {depth} found in {max_attempts} attempts")

    def compare(self, state: NPuzzleState, heuristics: List[Union[int, str]],
                include_bfs: bool = False) -> List[SearchResult]:
        """Run greedy and A* for each heuristic, optionally breadth-first first."""
        strategies = [BreadthFirst()] if include_bfs else []
        for h in heuristics:
            strategies.append(Greedy(h))
            strategies.append(AStar(h))

        return [self.run(state, strategy) for strategy in strategies]


def resolve_config(overrides: Optional[List[str]] = None,
                   config_dir: Optional[str] = None) -> DictConfig:
    """Load the Hydra configuration, falling back to built-in defaults."""
    try:
        return load_config(overrides=overrides, config_dir=config_dir)
    except FileNotFoundError as e:
        if config_dir is not None:
            raise
        logger.warning(f"{e}; using built-in defaults")
        return default_config(overrides)


def solve_command(args: Namespace) -> int:
    """Execute the solve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        runner = PuzzleRunner(args.config, args.config_dir)
        runner.apply_limits(args.max_nodes, args.timeout)

        search_cfg = runner.config.search
        strategy = create_strategy(
            args.strategy or search_cfg.strategy,
            heuristic=parse_heuristic(args.heuristic) if args.heuristic else search_cfg.heuristic,
            exact=args.exact or bool(search_cfg.get('exact_priorities', False))
        )

        state = runner.make_puzzle(args.tiles, args.size, args.shuffles, args.seed)
        if not args.quiet:
            print(f"Initial board:\n{state}")

        result = runner.run(state, strategy)
        stats = result.statistics

        if result.success:
            if not check_actions(state, result.actions):
                logger.error("Solution does not lead from the initial board to the goal")
                return 1
            print(format_solution(result, show_steps=args.show_steps))
            print(f"Cost: {result.cost:g}")
        else:
            print(f"No solution: {result.termination_reason}")

        print(f"Nodes generated: {stats.nodes_generated}")
        print(f"Nodes expanded: {stats.nodes_expanded}")
        print(f"Effective branching factor: "
              f"{format_branching_factor(stats.effective_branching_factor)}")
        print(f"Time: {format_duration(stats.computation_time)}")

        if args.output:
            output = {
                'initial': list(state.tiles),
                'size': state.size,
                'result': result.to_dict()
            }
            save_results(output, args.output)
            logger.info(f"Results saved to {args.output}")

        return 0 if result.success else 1

    except ValueError as e:
        logger.error(f"Invalid argument: {e}")
        return 1
    except ConfigValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1


def compare_command(args: Namespace) -> int:
    """Execute the compare command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        runner = PuzzleRunner(args.config, args.config_dir)
        runner.apply_limits(args.max_nodes, args.timeout)
        puzzle_cfg = runner.config.puzzle

        depth = args.solution_depth if args.solution_depth is not None else puzzle_cfg.solution_depth
        if depth is not None and not args.tiles:
            state = runner.draw_with_depth(
                depth,
                size=args.size if args.size is not None else puzzle_cfg.size,
                shuffles=args.shuffles if args.shuffles is not None else puzzle_cfg.shuffles,
                seed=args.seed if args.seed is not None else puzzle_cfg.seed,
                max_attempts=args.max_attempts or puzzle_cfg.max_attempts
            )
        else:
            state = runner.make_puzzle(args.tiles, args.size, args.shuffles, args.seed)

        heuristics = [parse_heuristic(h) for h in args.heuristics]
        results = runner.compare(state, heuristics, include_bfs=args.include_bfs)

        if not args.quiet:
            print(f"Initial board:\n{state}")
        print(format_comparison(results))

        if args.output:
            output: Dict[str, Any] = {
                'initial': list(state.tiles),
                'size': state.size,
                'results': [r.to_dict() for r in results]
            }
            save_results(output, args.output)
            logger.info(f"Results saved to {args.output}")

        return 0

    except (ValueError, RuntimeError) as e:
        logger.error(f"Comparison failed: {e}")
        return 1
    except ConfigValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1


def config_command(args: Namespace) -> int:
    """Execute the config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        if args.config_action == 'show':
            config = resolve_config(args.config, args.config_dir)
            key = getattr(args, 'key', None)
            if key:
                value = get_parameter(key, _MISSING)
                if value is _MISSING:
                    logger.error(f"Unknown configuration key: {key}")
                    return 1
                if isinstance(value, DictConfig):
                    value = OmegaConf.to_yaml(value).rstrip()
                print("null" if value is None else value)
                return 0

            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config))
            return 0

        elif args.config_action == 'validate':
            config = resolve_config(args.config, args.config_dir)
            validate_config(config)

            issues = check_config_consistency(config)
            for issue in issues:
                print(f"Warning: {issue}")

            print("Configuration is valid")
            return 0

        else:
            logger.error("No config action specified. Use 'show' or 'validate'")
            return 1

    except ConfigValidationError as e:
        print(f"Configuration is invalid: {e}")
        return 1
