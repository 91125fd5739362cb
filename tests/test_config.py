"""Tests for configuration management system."""

import pytest
import tempfile
import shutil
from pathlib import Path
from omegaconf import DictConfig, OmegaConf

from informed_search.config import (
    ConfigManager, load_config, get_config, get_parameter, default_config,
    validate_config, ConfigValidationError
)
from informed_search.config.validators import check_config_consistency
from informed_search.search.engine import SearchConfig
from informed_search.search.strategies import create_strategy


CONFIG_CONTENT = """
search:
  strategy: greedy
  heuristic: 3
  exact_priorities: false
  max_nodes_expanded: 600
  max_computation_time: 30.0
  hashed_repeated_states: true

branching_factor:
  max_error: 0.01
  delta: 0.01
  max_iterations: 1000000

puzzle:
  size: 4
  shuffles: 20
  seed: 7
  solution_depth: null
  max_attempts: 50
"""


@pytest.fixture
def temp_config_dir():
    """Create temporary configuration directory."""
    temp_dir = tempfile.mkdtemp()
    config_dir = Path(temp_dir) / "conf"
    config_dir.mkdir()

    with open(config_dir / "config.yaml", 'w') as f:
        f.write(CONFIG_CONTENT)

    yield config_dir

    shutil.rmtree(temp_dir)


class TestConfigManager:
    """Test ConfigManager functionality."""

    def test_config_manager_initialization(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        assert manager.config_dir.resolve() == temp_config_dir.resolve()
        assert manager.config is None

    def test_missing_directory(self, temp_config_dir):
        with pytest.raises(FileNotFoundError):
            ConfigManager(temp_config_dir / "missing")

    def test_load_config_basic(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config()

        assert isinstance(config, DictConfig)
        assert config.search.strategy == "greedy"
        assert config.search.heuristic == 3
        assert config.puzzle.size == 4
        assert manager.config is config

    def test_load_config_with_overrides(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config(overrides=[
            "search.heuristic=1",
            "puzzle.shuffles=5"
        ])

        assert config.search.heuristic == 1
        assert config.puzzle.shuffles == 5

    def test_invalid_override_rejected(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        with pytest.raises(ConfigValidationError):
            manager.load_config(overrides=["search.heuristic=9"])


class TestGlobalConfig:
    """Test module-level configuration helpers."""

    def test_load_config_sets_global(self, temp_config_dir):
        config = load_config(config_dir=temp_config_dir)

        assert get_config() is config
        assert get_parameter("puzzle.seed") == 7

    def test_project_config(self):
        """Test the shipped configuration loads and validates."""
        config = load_config()

        assert config.search.strategy == "astar"
        assert config.branching_factor.max_error == 0.01

    def test_default_config(self):
        config = default_config(["search.heuristic=4", "puzzle.size=5"])

        assert config.search.heuristic == 4
        assert config.puzzle.size == 5
        assert config.search.strategy == "astar"
        assert get_config() is config

    def test_default_config_invalid_override(self):
        with pytest.raises(ConfigValidationError):
            default_config(["puzzle.size=1"])

    def test_search_config_from_config(self, temp_config_dir):
        config = load_config(config_dir=temp_config_dir)
        search_config = SearchConfig.from_config(config)

        assert search_config.max_nodes_expanded == 600
        assert search_config.max_computation_time == 30.0
        assert search_config.hashed_repeated_states
        assert search_config.branching_max_iterations == 1000000


class TestConfigValidation:
    """Test configuration validators."""

    @pytest.fixture
    def valid_config(self):
        return default_config()

    def test_valid_config(self, valid_config):
        validate_config(valid_config)

    @pytest.mark.parametrize("key,value", [
        ("search.strategy", "depth-first"),
        ("search.heuristic", 0),
        ("search.max_nodes_expanded", -5),
        ("search.max_computation_time", 0),
        ("search.exact_priorities", "yes"),
        ("branching_factor.max_error", 0),
        ("branching_factor.delta", -0.1),
        ("branching_factor.max_iterations", 0),
        ("puzzle.size", 1),
        ("puzzle.shuffles", -1),
        ("puzzle.seed", -3),
        ("puzzle.solution_depth", -2),
        ("puzzle.max_attempts", 0),
    ])
    def test_invalid_values(self, valid_config, key, value):
        OmegaConf.update(valid_config, key, value)
        with pytest.raises(ConfigValidationError):
            validate_config(valid_config)

    def test_heuristic_names_accepted(self, valid_config):
        OmegaConf.update(valid_config, "search.heuristic", "manhattan")
        validate_config(valid_config)

    @pytest.mark.parametrize("strategy", ["a*", "A*", "breadth_first", "bfs", "Greedy"])
    def test_strategy_aliases_accepted(self, valid_config, strategy):
        """Test every spelling the strategy factory accepts also validates."""
        OmegaConf.update(valid_config, "search.strategy", strategy)
        validate_config(valid_config)
        assert create_strategy(strategy).name in ("breadth-first", "greedy", "astar")

    def test_unbounded_branching_iterations(self, valid_config):
        OmegaConf.update(valid_config, "branching_factor.max_iterations", None)
        validate_config(valid_config)
        OmegaConf.update(valid_config, "branching_factor.max_iterations", 500)
        validate_config(valid_config)

    def test_exact_priorities_with_astar_alias(self, valid_config):
        OmegaConf.update(valid_config, "search.strategy", "a*")
        OmegaConf.update(valid_config, "search.exact_priorities", True)
        assert check_config_consistency(valid_config) == []

    def test_consistency_issues(self, valid_config):
        OmegaConf.update(valid_config, "search.strategy", "greedy")
        OmegaConf.update(valid_config, "search.exact_priorities", True)
        OmegaConf.update(valid_config, "puzzle.solution_depth", 30)

        issues = check_config_consistency(valid_config)

        assert len(issues) == 2

    def test_no_consistency_issues(self, valid_config):
        assert check_config_consistency(valid_config) == []


if __name__ == "__main__":
    pytest.main([__file__])
