"""
Network data model and snapshot analysis.
"""

from .graph_model import Link, Message, Network, create_message
from .analysis import (
    NetworkStatistics,
    HistoryPoint,
    calculate_statistics,
    generate_belief_history_data,
    get_network_info
)

__all__ = [
    "Link",
    "Message",
    "Network",
    "create_message",
    "NetworkStatistics",
    "HistoryPoint",
    "calculate_statistics",
    "generate_belief_history_data",
    "get_network_info"
]
