"""Command line interface for informed-search."""

from .main import create_parser, main, main_cli

__all__ = ['create_parser', 'main', 'main_cli']
