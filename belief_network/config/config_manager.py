"""
Configuration manager for the belief network simulation.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional, List
from pathlib import Path

from ..topologies import TOPOLOGIES

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BELIEF_NETWORK_CONFIG"


@dataclass
class SimulationConfig:
    """Parameters of a single simulation run."""
    agent_count: int = 50
    initial_believer_percentage: float = 20
    network_density: float = 0.1
    network_type: str = "random"
    steps: int = 20
    current_step: int = 0
    random_seed: Optional[int] = None

    def errors(self) -> List[str]:
        """Describe every invalid field; empty when the config is usable."""
        problems = []
        if self.agent_count < 0:
            problems.append("agent_count must be non-negative")
        if not 0 <= self.initial_believer_percentage <= 100:
            problems.append("initial_believer_percentage must be in [0, 100]")
        if not 0 < self.network_density <= 1:
            problems.append("network_density must be in (0, 1]")
        if self.network_type not in TOPOLOGIES:
            problems.append(f"network_type must be one of {sorted(TOPOLOGIES)}")
        if self.steps < 0:
            problems.append("steps must be non-negative")
        return problems

    def validate(self):
        """Raise ValueError if any field is invalid."""
        problems = self.errors()
        if problems:
            raise ValueError("; ".join(problems))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ConfigManager:
    """
    Manages configuration for the simulation.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file (JSON); falls back to the
                BELIEF_NETWORK_CONFIG environment variable, then config.json
        """
        self.config_path = config_path or os.getenv(CONFIG_ENV_VAR, "config.json")
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r') as f:
            return json.load(f)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Args:
            key: Dotted configuration key, e.g. "simulation.steps"
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_simulation_config(self) -> SimulationConfig:
        """
        Get simulation parameters.

        Returns:
            SimulationConfig built from the "simulation" section
        """
        seed = self.get('simulation.random_seed')
        return SimulationConfig(
            agent_count=int(self.get('simulation.agent_count', 50)),
            initial_believer_percentage=float(self.get('simulation.initial_believer_percentage', 20)),
            network_density=float(self.get('simulation.network_density', 0.1)),
            network_type=str(self.get('simulation.network_type', 'random')),
            steps=int(self.get('simulation.steps', 20)),
            random_seed=int(seed) if seed is not None else None,
        )

    def get_visualization_params(self) -> Dict[str, Any]:
        """
        Get visualization parameters.

        Returns:
            Dictionary of visualization parameters
        """
        return {
            'figure_size': tuple(self.get('visualization.figure_size', [12, 8])),
            'dpi': int(self.get('visualization.dpi', 150))
        }

    def get_output_directory(self) -> str:
        """
        Get output directory.

        Returns:
            Output directory path
        """
        return str(self.get('output_directory', 'simulation_results'))

    def validate_config(self) -> bool:
        """
        Validate configuration.

        Returns:
            True if configuration is valid
        """
        try:
            sim_config = self.get_simulation_config()
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid simulation parameter: {e}")
            return False

        problems = sim_config.errors()
        for problem in problems:
            logger.error(f"Invalid configuration: {problem}")
        return not problems
