"""Configuration management for the search engine.

This module provides Hydra-based configuration management with hierarchical
parameter groups and runtime override capabilities.
"""

from .config_manager import (
    ConfigManager, load_config, get_config, get_parameter, default_config
)
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'get_config',
    'get_parameter',
    'default_config',
    'validate_config',
    'ConfigValidationError'
]
