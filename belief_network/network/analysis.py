"""
Statistics and belief-history aggregation over network snapshots.

All functions are pure: they never modify the network they are given and
return zero-valued results for an empty network.
"""

import numpy as np
import networkx as nx
from dataclasses import dataclass, asdict
from typing import Dict, Any, List

from .graph_model import Network


@dataclass
class NetworkStatistics:
    """Aggregate belief and connectivity statistics for one snapshot."""
    total_agents: int
    believers: int
    non_believers: int
    believer_percentage: float
    average_susceptibility: float
    average_degree: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class HistoryPoint:
    """Believer counts at a single simulation step."""
    step: int
    believers: int
    non_believers: int
    believer_percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _count_believers(network: Network) -> int:
    return sum(1 for agent in network.nodes if agent.belief > 0.5)


def calculate_statistics(network: Network) -> NetworkStatistics:
    """
    Calculate statistics for the current simulation state.

    Args:
        network: Current network state

    Returns:
        Believer counts, mean susceptibility and mean degree
    """
    total_agents = len(network.nodes)
    believers = _count_believers(network)

    if total_agents == 0:
        return NetworkStatistics(0, 0, 0, 0.0, 0.0, 0.0)

    susceptibilities = np.array([agent.susceptibility for agent in network.nodes], dtype=float)
    # Each undirected link adds 2 to the total degree
    total_degree = len(network.links) * 2

    return NetworkStatistics(
        total_agents=total_agents,
        believers=believers,
        non_believers=total_agents - believers,
        believer_percentage=believers / total_agents * 100,
        average_susceptibility=float(susceptibilities.mean()),
        average_degree=total_degree / total_agents,
    )


def generate_belief_history_data(network: Network, step: int = 0) -> List[HistoryPoint]:
    """
    Build the belief-adoption chart entry for the current instant.

    The caller accumulates these entries into a series across steps.

    Args:
        network: Current network state
        step: Step number to stamp on the entry

    Returns:
        Single-element list with the current history point
    """
    total = len(network.nodes)
    believers = _count_believers(network)
    return [HistoryPoint(
        step=step,
        believers=believers,
        non_believers=total - believers,
        believer_percentage=believers / total * 100 if total > 0 else 0.0,
    )]


def get_network_info(network: Network) -> Dict[str, Any]:
    """
    Get structural information about a network.

    Args:
        network: Network snapshot

    Returns:
        Dictionary with network statistics
    """
    adjacency = network.adjacency_matrix()
    n_agents = adjacency.shape[0]
    if n_agents == 0:
        return {
            "n_agents": 0,
            "total_edges": 0,
            "density": 0.0,
            "average_degree": 0.0,
            "max_degree": 0,
            "min_degree": 0,
            "average_clustering": 0.0,
        }

    degrees = np.sum(adjacency, axis=1)
    total_edges = int(np.sum(adjacency) / 2)  # Undirected graph
    max_possible_edges = n_agents * (n_agents - 1) / 2

    return {
        "n_agents": n_agents,
        "total_edges": total_edges,
        "density": total_edges / max_possible_edges if max_possible_edges > 0 else 0.0,
        "average_degree": float(np.mean(degrees)),
        "max_degree": int(np.max(degrees)),
        "min_degree": int(np.min(degrees)),
        "average_clustering": float(nx.average_clustering(nx.from_numpy_array(adjacency))),
    }
