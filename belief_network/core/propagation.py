"""
Belief propagation dynamics.

Agents adopt the belief when the share of believing neighbors exceeds a
threshold lowered by their susceptibility.
"""

import copy
import numpy as np
from typing import Optional

from ..network.graph_model import Network

THRESHOLD_BASE = 0.5
SUSCEPTIBILITY_WEIGHT = 0.2


def believer_thresholds(susceptibility: np.ndarray) -> np.ndarray:
    """Adoption threshold per agent: 0.5 - 0.2 * susceptibility."""
    return THRESHOLD_BASE - susceptibility * SUSCEPTIBILITY_WEIGHT


def update_believers_majority(believers: np.ndarray, adjacency: np.ndarray,
                              susceptibility: np.ndarray) -> np.ndarray:
    """
    Majority-rule update: B[k+1]_i = (A B[k])_i / deg_i > threshold_i

    Isolated agents keep their current state.

    Args:
        believers: Boolean believer vector (n_agents,)
        adjacency: Symmetric 0/1 adjacency matrix
        susceptibility: Susceptibility vector (n_agents,)

    Returns:
        Updated boolean believer vector
    """
    degrees = adjacency.sum(axis=1)
    believing_neighbors = adjacency.dot(believers.astype(int))

    connected = degrees > 0
    updated = believers.copy()
    fractions = believing_neighbors[connected] / degrees[connected]
    updated[connected] = fractions > believer_thresholds(susceptibility[connected])
    return updated


def run_belief_propagation_step(network: Network, adjacency: Optional[np.ndarray] = None) -> Network:
    """
    Run a single step of belief propagation.

    Args:
        network: Current network state (left unchanged)
        adjacency: Precomputed adjacency matrix of ``network``; built when omitted

    Returns:
        New network whose agents hold the updated beliefs and extended histories
    """
    if adjacency is None:
        adjacency = network.adjacency_matrix()

    nodes = copy.deepcopy(network.nodes)
    if not nodes:
        return Network(nodes=nodes, links=list(network.links),
                       message_log=list(network.message_log), current_topic=network.current_topic)

    believers = np.array([agent.believer for agent in nodes], dtype=bool)
    susceptibility = np.array([agent.susceptibility for agent in nodes], dtype=float)
    updated = update_believers_majority(believers, adjacency, susceptibility)

    degrees = adjacency.sum(axis=1)
    for agent, degree, believer in zip(nodes, degrees, updated):
        if degree == 0:
            agent.record_unchanged()
        else:
            agent.update_belief(bool(believer))

    return Network(
        nodes=nodes,
        links=list(network.links),
        message_log=list(network.message_log),
        current_topic=network.current_topic,
    )
