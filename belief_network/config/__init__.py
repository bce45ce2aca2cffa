"""
Configuration loading for the belief network simulation.
"""

from .config_manager import ConfigManager, SimulationConfig

__all__ = ["ConfigManager", "SimulationConfig"]
