"""
Streamlined simulation controller for the belief network.
"""

import json
import logging
import os
import numpy as np
from typing import List, Dict, Any, Optional
from tqdm import tqdm

from ..agent import initialize_agents, generate_thought
from ..config.config_manager import SimulationConfig
from ..core.propagation import run_belief_propagation_step
from ..data.storage import DataStorage
from ..messaging.generation import simulate_message_exchange, enhance_messages
from ..messaging.templates import get_random_topic
from ..network.analysis import (
    NetworkStatistics,
    HistoryPoint,
    calculate_statistics,
    generate_belief_history_data,
    get_network_info
)
from ..network.generator import create_network
from ..network.graph_model import Network

logger = logging.getLogger(__name__)


class Controller:
    """
    Drives the simulation: owns the current network and advances it step by step.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, output_file: Optional[str] = None):
        """
        Initialize simulation controller.

        Args:
            config: Simulation parameters; defaults are used when omitted
            output_file: Optional JSON file the run is streamed to after every step
        """
        self.config = config or SimulationConfig()
        self.config.validate()
        self.output_file = output_file
        self.storage = DataStorage()

        self.rng: np.random.Generator = np.random.default_rng(self.config.random_seed)
        self.network: Optional[Network] = None
        self.statistics: Optional[NetworkStatistics] = None
        self.history: List[HistoryPoint] = []

        self.initialize_simulation()

    def initialize_simulation(self):
        """Create a fresh population, network and topic."""
        self.rng = np.random.default_rng(self.config.random_seed)
        self.config.current_step = 0

        topic = get_random_topic(self.rng)
        logger.info(f"New discussion topic: {topic}")

        agents = initialize_agents(self.config.agent_count,
                                   self.config.initial_believer_percentage, self.rng)
        for agent in agents:
            agent.thoughts = generate_thought(agent, topic, self.rng)

        network = create_network(agents, self.config.network_type,
                                 self.config.network_density, self.rng)
        network.current_topic = topic
        self.network = network
        self._adjacency = network.adjacency_matrix()

        self.statistics = calculate_statistics(network)
        self.history = generate_belief_history_data(network, step=0)

        self.storage.initialize(len(agents))
        self.storage.store_step(network, self.history[0])

        if self.output_file:
            self._initialize_output_file()

        logger.info(f"Simulation initialized: {network}")

    def reset(self):
        """Discard the current run and start over."""
        self.initialize_simulation()

    @property
    def is_complete(self) -> bool:
        return self.config.current_step >= self.config.steps

    def step(self) -> bool:
        """
        Advance the simulation by one step.

        Returns:
            False if the simulation was already complete, True otherwise
        """
        if self.is_complete:
            logger.info("Simulation complete")
            return False

        logger.debug(f"Running belief propagation step {self.config.current_step + 1} of {self.config.steps}")

        previous_log_size = len(self.network.message_log)
        network = run_belief_propagation_step(self.network, self._adjacency)
        network = simulate_message_exchange(network, self.rng)
        new_messages = network.message_log[previous_log_size:]
        network = enhance_messages(network, new_messages, self.rng)

        self.network = network
        self.config.current_step += 1

        self.statistics = calculate_statistics(network)
        point = generate_belief_history_data(network, step=self.config.current_step)[0]
        self.history.append(point)
        self.storage.store_step(network, point)

        logger.debug(f"Step {point.step}: {point.believers} believers ({point.believer_percentage:.1f}%), "
                     f"{len(new_messages)} new messages")

        if self.output_file:
            self._stream_to_file()

        return True

    def run_simulation(self, progress_bar: bool = True) -> Dict[str, Any]:
        """
        Run all remaining steps.

        Args:
            progress_bar: Show a tqdm progress bar

        Returns:
            Simulation results
        """
        remaining = range(self.config.current_step, self.config.steps)
        if progress_bar:
            remaining = tqdm(remaining,
                             desc=f"🔄 {self.config.network_type} ({self.config.agent_count} agents)",
                             unit="step")

        for _ in remaining:
            self.step()

        logger.info(f"Simulation finished after {self.config.current_step} steps: "
                    f"{self.statistics.believer_percentage:.1f}% believers")

        if self.output_file:
            self._finalize_output_file()

        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """Get simulation results as JSON-serializable data."""
        return {
            'experiment_metadata': {
                'network_type': self.config.network_type,
                'n_agents': self.config.agent_count,
                'network_density': self.config.network_density,
                'initial_believer_percentage': self.config.initial_believer_percentage,
                'num_steps': self.config.steps,
                'completed_steps': self.config.current_step,
                'random_seed': self.config.random_seed,
                'topic': self.network.current_topic
            },
            'history': [point.to_dict() for point in self.history],
            'statistics': self.statistics.to_dict(),
            'network_info': get_network_info(self.network),
            'belief_history': self.storage.get_belief_history().tolist(),
            'message_count': len(self.network.message_log)
        }

    def _initialize_output_file(self):
        """Initialize the output file for streaming data."""
        output_dir = os.path.dirname(self.output_file)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        with open(self.output_file, 'w') as f:
            json.dump(self.get_results(), f, indent=2)

    def _stream_to_file(self):
        """Rewrite the output file with the current state."""
        with open(self.output_file, 'w') as f:
            json.dump(self.get_results(), f, indent=2)

    def _finalize_output_file(self):
        """Finalize the output file with complete results."""
        data = self.get_results()
        data['experiment_metadata']['completed'] = self.is_complete

        with open(self.output_file, 'w') as f:
            json.dump(data, f, indent=2)
