"""
Base classes and interfaces for network topologies.

This module provides the abstract base class that every link generator
implements, so the simulation can swap topology models freely.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional
import numpy as np

from ..network.graph_model import Link


class NetworkTopology(ABC):
    """
    Abstract base class for network topologies.

    This defines the interface for generating the link set of a fixed
    agent population under a structural model.
    """

    def __init__(self, parameters: Optional[Dict[str, Any]] = None):
        """
        Initialize the network topology.

        Args:
            parameters: Topology-specific parameters
        """
        self.parameters = parameters or {}
        self.name = self.__class__.__name__

    def generate_links(self, n_agents: int, density: float,
                       rng: Optional[np.random.Generator] = None) -> List[Link]:
        """
        Generate links for ``n_agents`` agents.

        Args:
            n_agents: Number of agents (ids 0..n_agents-1)
            density: Connectivity scalar in (0, 1]
            rng: Random generator; a fresh unseeded one is used when omitted

        Returns:
            Links with distinct endpoints and ids in [0, n_agents)
        """
        validate_density(density)
        if n_agents < 2:
            return []
        if rng is None:
            rng = np.random.default_rng()
        return self._generate(n_agents, density, rng)

    @abstractmethod
    def _generate(self, n: int, density: float, rng: np.random.Generator) -> List[Link]:
        """
        Build the link list. Called only with ``n >= 2`` and a valid density.

        Args:
            n: Number of agents
            density: Connectivity scalar in (0, 1]
            rng: Random generator

        Returns:
            Generated links
        """
        pass

    def get_network_info(self, n_agents: int, density: float,
                         rng: Optional[np.random.Generator] = None) -> Dict[str, Any]:
        """
        Get information about a freshly generated network.

        Returns:
            Dictionary with network statistics
        """
        links = self.generate_links(n_agents, density, rng)
        n_edges = len(links)
        max_edges = n_agents * (n_agents - 1) / 2
        return {
            "n_agents": n_agents,
            "n_edges": n_edges,
            "density": n_edges / max_edges if max_edges > 0 else 0.0,
            "avg_degree": 2 * n_edges / n_agents if n_agents > 0 else 0.0,
            "topology": self.name
        }


def validate_density(density: float):
    """Reject densities outside (0, 1]."""
    if not 0 < density <= 1:
        raise ValueError(f"density must be in (0, 1], got {density}")
