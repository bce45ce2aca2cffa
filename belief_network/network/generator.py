"""
Network generator dispatching to the topology implementations.
"""

import logging
import numpy as np
from typing import List, Optional

from ..agent import Agent
from ..topologies import TOPOLOGIES
from .graph_model import Network

logger = logging.getLogger(__name__)

NETWORK_TYPES = tuple(TOPOLOGIES)


def create_network(agents: List[Agent], network_type: str, density: float,
                   rng: Optional[np.random.Generator] = None) -> Network:
    """
    Create a Network connecting the agents with the specified topology.

    Args:
        agents: Agents to connect; only their count determines the links
        network_type: One of "random", "scale-free", "small-world"
        density: Connectivity scalar in (0, 1]
        rng: Random generator for reproducible networks

    Returns:
        Network with an empty message log and no topic
    """
    if network_type not in TOPOLOGIES:
        raise ValueError(f"Unknown network type: {network_type}")

    topology = TOPOLOGIES[network_type]()
    links = topology.generate_links(len(agents), density, rng)
    logger.debug(f"Generated {network_type} network: {len(agents)} agents, {len(links)} links")

    return Network(nodes=agents, links=links, message_log=[], current_topic="")
