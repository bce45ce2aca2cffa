"""
Data analysis for simulation results.
"""

import numpy as np
from typing import Dict, Any
from .storage import DataStorage


class SimulationAnalyzer:
    """
    Analyzes simulation results and generates insights.
    """

    def __init__(self, data_storage: DataStorage):
        """
        Initialize analyzer.

        Args:
            data_storage: Data storage containing simulation results
        """
        self.data_storage = data_storage

    def analyze_belief_evolution(self) -> Dict[str, Any]:
        """
        Analyze belief adoption over time.

        Returns:
            Dictionary containing belief evolution analysis
        """
        points = self.data_storage.get_history_points()
        if not points:
            return {}

        percentages = np.array([p.believer_percentage for p in points])
        believers = self.data_storage.get_belief_history() > 0.5

        # Count every agent-level change between consecutive steps
        flips = int(np.sum(believers[1:] != believers[:-1])) if len(believers) > 1 else 0

        majority_steps = [p.step for p in points if p.believer_percentage > 50]

        return {
            'initial_believer_percentage': float(percentages[0]),
            'final_believer_percentage': float(percentages[-1]),
            'peak_believer_percentage': float(percentages.max()),
            'net_change': float(percentages[-1] - percentages[0]),
            'total_belief_flips': flips,
            'first_majority_step': majority_steps[0] if majority_steps else None,
            'num_steps': len(points) - 1
        }
