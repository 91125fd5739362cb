"""Main CLI entry point for informed-search."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging
from informed_search.search.strategies import STRATEGY_NAMES, canonical_strategy_name


def _add_puzzle_arguments(parser: argparse.ArgumentParser) -> None:
    """Options that describe the puzzle to search."""
    parser.add_argument(
        '--tiles',
        type=str,
        help='Explicit board, row-major, 0 for the blank (e.g. "1,2,3/4,5,6/7,0,8")'
    )

    parser.add_argument(
        '--size',
        type=int,
        help='Board side length for random puzzles (default: from config)'
    )

    parser.add_argument(
        '--shuffles',
        type=int,
        help='Random blank moves applied to the goal board (default: from config)'
    )

    parser.add_argument(
        '--seed',
        type=int,
        help='Random seed for puzzle generation'
    )

    parser.add_argument(
        '--max-nodes',
        type=int,
        help='Maximum nodes to expand before giving up'
    )

    parser.add_argument(
        '--timeout', '-t',
        type=float,
        help='Timeout in seconds per search'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='informed-search',
        description='Informed search engine - breadth-first, greedy and A* search on the sliding-tile puzzle',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  informed-search solve --size 3 --shuffles 20 --seed 7     # A* on a random 8-puzzle
  informed-search solve --tiles 1,2,3/4,5,6/7,0,8 --strategy greedy --heuristic 1
  informed-search compare --size 4 --solution-depth 8       # Compare all heuristics
  informed-search config show                               # Show current configuration
  informed-search config show branching_factor.max_error   # Show one parameter
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        action='append',
        help='Configuration override, repeatable (e.g., search.heuristic=3)'
    )

    parser.add_argument(
        '--config-dir',
        type=str,
        help='Directory holding config.yaml (default: <project>/conf)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Solve one puzzle with one strategy',
        description='Solve a sliding-tile puzzle with breadth-first, greedy or A* search'
    )
    _add_puzzle_arguments(solve_parser)

    solve_parser.add_argument(
        '--strategy', '-s',
        type=canonical_strategy_name,
        choices=STRATEGY_NAMES,
        help='Search strategy (default: from config)'
    )

    solve_parser.add_argument(
        '--heuristic', '-H',
        type=str,
        help='Heuristic index 1-4 or name (default: from config)'
    )

    solve_parser.add_argument(
        '--exact',
        action='store_true',
        help='A* with real-valued priorities instead of integer buckets'
    )

    solve_parser.add_argument(
        '--show-steps',
        action='store_true',
        help='Print the board after every move of the solution'
    )

    # Compare command
    compare_parser = subparsers.add_parser(
        'compare',
        help='Compare heuristics on one puzzle',
        description='Run greedy and A* search with every heuristic on the same puzzle'
    )
    _add_puzzle_arguments(compare_parser)

    compare_parser.add_argument(
        '--heuristics',
        type=str,
        nargs='+',
        default=['1', '2', '3', '4'],
        help='Heuristics to compare (default: 1 2 3 4)'
    )

    compare_parser.add_argument(
        '--include-bfs',
        action='store_true',
        help='Also run uninformed breadth-first search'
    )

    compare_parser.add_argument(
        '--solution-depth',
        type=int,
        help='Redraw random puzzles until A* with heuristic 3 needs this many moves'
    )

    compare_parser.add_argument(
        '--max-attempts',
        type=int,
        help='Maximum puzzles drawn for --solution-depth (default: from config)'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Manage search configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    show_parser = config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )
    show_parser.add_argument(
        'key',
        nargs='?',
        help='Dotted parameter key to print, e.g. search.heuristic'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # Setup logging based on verbosity
    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'compare':
            return commands.compare_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
