from .agent import Agent, BigFiveTraits, initialize_agents
from .network.graph_model import Link, Message, Network
from .network.analysis import (
    NetworkStatistics,
    HistoryPoint,
    calculate_statistics,
    generate_belief_history_data
)
from .network.generator import create_network
from .config.config_manager import SimulationConfig, ConfigManager
from .simulation.controller import Controller

__version__ = "0.1.0"

__all__ = [
    "Agent",
    "BigFiveTraits",
    "initialize_agents",
    "Link",
    "Message",
    "Network",
    "NetworkStatistics",
    "HistoryPoint",
    "calculate_statistics",
    "generate_belief_history_data",
    "create_network",
    "SimulationConfig",
    "ConfigManager",
    "Controller"
]
