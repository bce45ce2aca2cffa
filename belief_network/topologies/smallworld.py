"""
Watts-Strogatz small-world network topology implementation.
"""

import numpy as np
from typing import Dict, Any, List, Optional
from ..core.base_models import NetworkTopology
from ..network.graph_model import Link

DEFAULT_REWIRE_PROBABILITY = 0.1


class SmallWorld(NetworkTopology):
    """
    Watts-Strogatz small-world network topology.

    Creates a ring lattice where each node is connected to its k/2 forward
    neighbors, then rewires each lattice edge with probability p.
    """

    def __init__(self, parameters: Optional[Dict[str, Any]] = None):
        super().__init__(parameters)
        self.p = self.parameters.get("p", DEFAULT_REWIRE_PROBABILITY)

    @staticmethod
    def neighbor_count(n: int, density: float) -> int:
        return max(2, int(np.floor(n * density)))

    def _generate(self, n: int, density: float, rng: np.random.Generator) -> List[Link]:
        k = self.neighbor_count(n, density)

        # Create ring lattice
        edges = []
        adjacency = [set() for _ in range(n)]
        for i in range(n):
            for offset in range(1, k // 2 + 1):
                j = (i + offset) % n
                if j == i or j in adjacency[i]:
                    continue
                edges.append([i, j])
                adjacency[i].add(j)
                adjacency[j].add(i)

        # Rewire edges with probability p
        for edge in edges:
            if rng.random() >= self.p:
                continue
            source, old_target = edge
            possible_targets = [x for x in range(n) if x != source and x not in adjacency[source]]
            if not possible_targets:
                continue
            new_target = possible_targets[int(rng.integers(len(possible_targets)))]
            adjacency[source].discard(old_target)
            adjacency[old_target].discard(source)
            adjacency[source].add(new_target)
            adjacency[new_target].add(source)
            edge[1] = new_target

        return [Link(source, target, float(rng.random())) for source, target in edges]
