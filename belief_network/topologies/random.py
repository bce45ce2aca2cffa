"""
Erdős-Rényi random network topology implementation.
"""

import numpy as np
from typing import Dict, Any, List, Optional
from ..core.base_models import NetworkTopology
from ..network.graph_model import Link

# Above this density rejection sampling spends most draws on existing pairs.
DENSE_THRESHOLD = 0.5


class Random(NetworkTopology):
    """
    Erdős-Rényi-style random network topology.

    Places exactly floor(n(n-1)density/2) distinct undirected edges,
    chosen uniformly at random.
    """

    def __init__(self, parameters: Optional[Dict[str, Any]] = None):
        super().__init__(parameters)
        self.dense_threshold = self.parameters.get("dense_threshold", DENSE_THRESHOLD)

    @staticmethod
    def expected_edges(n: int, density: float) -> int:
        return int(np.floor(n * (n - 1) * density / 2))

    def _generate(self, n: int, density: float, rng: np.random.Generator) -> List[Link]:
        expected = self.expected_edges(n, density)
        if density > self.dense_threshold:
            return self._sample_shuffled_pairs(n, expected, rng)
        return self._sample_rejection(n, expected, rng)

    def _sample_rejection(self, n: int, expected: int, rng: np.random.Generator) -> List[Link]:
        """Draw random pairs, rejecting self-pairs and duplicates."""
        links = []
        seen = set()
        while len(links) < expected:
            source, target = (int(x) for x in rng.integers(n, size=2))
            if source == target:
                continue
            pair = frozenset((source, target))
            if pair in seen:
                continue
            seen.add(pair)
            links.append(Link(source, target, float(rng.random())))
        return links

    def _sample_shuffled_pairs(self, n: int, expected: int, rng: np.random.Generator) -> List[Link]:
        """Take the first ``expected`` pairs of a shuffled list of all pairs."""
        sources, targets = np.triu_indices(n, k=1)
        order = rng.permutation(len(sources))[:expected]
        strengths = rng.random(expected)
        return [
            Link(int(sources[i]), int(targets[i]), float(s))
            for i, s in zip(order, strengths)
        ]
