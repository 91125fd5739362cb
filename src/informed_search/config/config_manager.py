"""Configuration manager using Hydra for hierarchical configuration."""

import logging
from typing import Any, Dict, Optional, Union
from pathlib import Path
from omegaconf import DictConfig, OmegaConf
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra

from .validators import validate_config

logger = logging.getLogger(__name__)

# Global configuration instance
_global_config: Optional[DictConfig] = None

# Mirrors conf/config.yaml; used when no configuration directory is available
DEFAULT_CONFIG: Dict[str, Any] = {
    'search': {
        'strategy': 'astar',
        'heuristic': 2,
        'exact_priorities': False,
        'max_nodes_expanded': None,
        'max_computation_time': None,
        'hashed_repeated_states': True,
    },
    'branching_factor': {
        'max_error': 0.01,
        'delta': 0.01,
        'max_iterations': None,
    },
    'puzzle': {
        'size': 3,
        'shuffles': 10,
        'seed': None,
        'solution_depth': None,
        'max_attempts': 100,
    },
}


class ConfigManager:
    """Manages configuration loading and validation using Hydra."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_dir: Path to configuration directory. If None, uses default.
        """
        if config_dir is None:
            # Default to conf directory relative to project root
            project_root = Path(__file__).parent.parent.parent.parent
            config_dir = project_root / "conf"

        self.config_dir = Path(config_dir).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.exists():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        logger.info(f"Configuration manager initialized with config_dir: {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[list] = None,
                    validate: bool = True) -> DictConfig:
        """Load configuration with optional overrides.

        Args:
            config_name: Name of the main config file (without .yaml)
            overrides: List of configuration overrides
            validate: Whether to validate the configuration

        Returns:
            Loaded and validated configuration
        """
        # Clear any existing Hydra instance
        GlobalHydra.instance().clear()

        try:
            with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
                cfg = compose(config_name=config_name, overrides=overrides or [])

                if validate:
                    validate_config(cfg)

                self.config = cfg

                global _global_config
                _global_config = cfg

                logger.info(f"Configuration loaded successfully: {config_name}")
                if overrides:
                    logger.info(f"Applied overrides: {overrides}")

                return cfg

        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise


# Global configuration functions
def load_config(config_name: str = "config",
                overrides: Optional[list] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load configuration using global config manager.

    Args:
        config_name: Name of the main config file
        overrides: List of configuration overrides
        config_dir: Path to configuration directory
        validate: Whether to validate the configuration

    Returns:
        Loaded configuration
    """
    manager = ConfigManager(config_dir)
    return manager.load_config(config_name, overrides, validate)


def default_config(overrides: Optional[list] = None) -> DictConfig:
    """Build the built-in default configuration, applying dotted overrides.

    Args:
        overrides: ``key=value`` strings, e.g. ``search.heuristic=3``

    Returns:
        Validated configuration
    """
    cfg = OmegaConf.create(DEFAULT_CONFIG)
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    validate_config(cfg)

    global _global_config
    _global_config = cfg
    return cfg


def get_config() -> Optional[DictConfig]:
    """Get the global configuration.

    Returns:
        Global configuration or None if not loaded
    """
    return _global_config


def get_parameter(key: str, default: Any = None) -> Any:
    """Get a parameter from global configuration.

    Args:
        key: Parameter key (supports dot notation)
        default: Default value if key not found

    Returns:
        Parameter value or default
    """
    config = get_config()
    if config is None:
        logger.warning("No global configuration loaded")
        return default

    return OmegaConf.select(config, key, default=default)

