"""
Network model holding agents, links and the conversation log.
"""

import time
import uuid
import numpy as np
import networkx as nx
from dataclasses import dataclass, field
from typing import List, Optional, Dict

from ..agent import Agent


@dataclass(frozen=True)
class Link:
    """An undirected connection between two agents."""
    source: int
    target: int
    strength: Optional[float] = None

    def __post_init__(self):
        if self.source == self.target:
            raise ValueError(f"Self-loop on agent {self.source} is not allowed")

    @property
    def pair(self) -> frozenset:
        return frozenset((self.source, self.target))


@dataclass
class Message:
    """A chat message posted by an agent."""
    id: str
    sender_id: int
    content: str
    timestamp: int
    type: Optional[str] = None


def create_message(sender_id: int, content: str, message_type: Optional[str] = None) -> Message:
    """
    Create a message stamped with the current time.

    Args:
        sender_id: ID of the posting agent
        content: Message text
        message_type: Optional template category

    Returns:
        New message with a unique id
    """
    timestamp = int(time.time() * 1000)
    return Message(
        id=f"{sender_id}-{timestamp}-{uuid.uuid4().hex[:8]}",
        sender_id=sender_id,
        content=content,
        timestamp=timestamp,
        type=message_type,
    )


@dataclass
class Network:
    """
    Social network snapshot.

    Simulation steps never mutate a network in place; they return a new one.
    """
    nodes: List[Agent]
    links: List[Link]
    message_log: List[Message] = field(default_factory=list)
    current_topic: str = ""

    def _index(self) -> Dict[int, int]:
        return {agent.id: position for position, agent in enumerate(self.nodes)}

    def get_agent(self, agent_id: int) -> Optional[Agent]:
        for agent in self.nodes:
            if agent.id == agent_id:
                return agent
        return None

    def adjacency_matrix(self) -> np.ndarray:
        """
        Build the symmetric 0/1 adjacency matrix, rows ordered as ``nodes``.

        Returns:
            Adjacency matrix (shape: n_agents x n_agents)
        """
        n = len(self.nodes)
        index = self._index()
        adjacency = np.zeros((n, n), dtype=int)
        for link in self.links:
            i, j = index[link.source], index[link.target]
            adjacency[i, j] = 1
            adjacency[j, i] = 1
        return adjacency

    def degrees(self) -> np.ndarray:
        """Per-agent link count, ordered as ``nodes``."""
        n = len(self.nodes)
        index = self._index()
        degrees = np.zeros(n, dtype=int)
        for link in self.links:
            degrees[index[link.source]] += 1
            degrees[index[link.target]] += 1
        return degrees

    def neighbors(self, agent_id: int) -> List[int]:
        """IDs of agents linked to ``agent_id``."""
        result = set()
        for link in self.links:
            if link.source == agent_id:
                result.add(link.target)
            elif link.target == agent_id:
                result.add(link.source)
        return sorted(result)

    def to_networkx(self) -> nx.Graph:
        """Convert to an undirected networkx graph with agent attributes."""
        G = nx.Graph()
        for agent in self.nodes:
            G.add_node(agent.id, name=agent.name, believer=agent.believer,
                       susceptibility=agent.susceptibility)
        for link in self.links:
            G.add_edge(link.source, link.target, strength=link.strength)
        return G

    def __repr__(self) -> str:
        return f"Network(nodes={len(self.nodes)}, links={len(self.links)}, topic={self.current_topic!r})"
