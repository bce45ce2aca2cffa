"""
Simplified storage for simulation results.
"""

import json
import os
import numpy as np
from typing import List, Dict, Any

from ..network.graph_model import Network
from ..network.analysis import HistoryPoint


class DataStorage:
    """
    Simplified storage for simulation data.
    """

    def __init__(self):
        """Initialize data storage."""
        self.belief_history: List[np.ndarray] = []
        self.history_points: List[HistoryPoint] = []
        self.n_agents = 0

    def initialize(self, n_agents: int):
        """
        Initialize storage for a simulation run.

        Args:
            n_agents: Number of agents
        """
        self.n_agents = n_agents
        self.belief_history = []
        self.history_points = []

    def store_step(self, network: Network, point: HistoryPoint):
        """
        Store step data.

        Args:
            network: Network snapshot after the step
            point: History point of the step
        """
        beliefs = np.array([agent.belief for agent in network.nodes], dtype=float)
        self.belief_history.append(beliefs)
        self.history_points.append(point)

    def get_belief_history(self) -> np.ndarray:
        """
        Get belief history.

        Returns:
            Array of shape (steps, n_agents)
        """
        if not self.belief_history:
            return np.zeros((0, self.n_agents))
        return np.vstack(self.belief_history)

    def get_history_points(self) -> List[HistoryPoint]:
        return list(self.history_points)

    def get_simulation_results(self) -> Dict[str, Any]:
        """
        Get complete simulation results.

        Returns:
            Dictionary containing all simulation data
        """
        return {
            'belief_history': [beliefs.tolist() for beliefs in self.belief_history],
            'history': [point.to_dict() for point in self.history_points],
            'n_agents': self.n_agents,
            'num_steps': max(0, len(self.history_points) - 1)
        }

    def save_to_file(self, filename: str):
        """
        Save simulation data to file.

        Args:
            filename: Output filename
        """
        output_dir = os.path.dirname(filename)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        with open(filename, 'w') as f:
            json.dump(self.get_simulation_results(), f, indent=2)
