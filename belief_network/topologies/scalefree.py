"""
Barabási-Albert scale-free network topology implementation.
"""

import numpy as np
from typing import List
from ..core.base_models import NetworkTopology
from ..network.graph_model import Link


class ScaleFree(NetworkTopology):
    """
    Barabási-Albert scale-free network topology.

    Grows a network by adding nodes one at a time, connecting each new node
    to m existing nodes with probability proportional to their degree.
    """

    @staticmethod
    def attachment_count(n: int, density: float) -> int:
        return max(1, int(np.floor(n * density / 2)))

    def _generate(self, n: int, density: float, rng: np.random.Generator) -> List[Link]:
        m = self.attachment_count(n, density)
        links = []
        degrees = np.zeros(n, dtype=int)

        # Start with m+1 nodes fully connected
        seed_size = min(m + 1, n)
        for i in range(seed_size):
            for j in range(i + 1, seed_size):
                links.append(Link(i, j, float(rng.random())))
                degrees[i] += 1
                degrees[j] += 1

        # Add remaining nodes
        for new_node in range(m + 1, n):
            cumulative = np.cumsum(degrees[:new_node])
            total_degree = cumulative[-1]
            targets = []
            while len(targets) < min(m, new_node):
                draw = rng.random() * total_degree
                # First node whose cumulative degree exceeds the draw
                chosen = int(np.searchsorted(cumulative, draw, side="right"))
                if chosen not in targets:
                    targets.append(chosen)

            for target in targets:
                links.append(Link(new_node, target, float(rng.random())))
                degrees[new_node] += 1
                degrees[target] += 1

        return links
