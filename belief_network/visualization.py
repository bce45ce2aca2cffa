"""
Visualization module for the belief propagation simulation.
"""

import os
import matplotlib.pyplot as plt
import networkx as nx
from typing import List, Optional, Tuple

from .network.analysis import HistoryPoint
from .network.graph_model import Network

BELIEVER_COLOR = "#e4572e"
NON_BELIEVER_COLOR = "#4c72b0"


def _ensure_dir(save_path: str):
    output_dir = os.path.dirname(save_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)


def plot_belief_history(history: List[HistoryPoint], save_path: Optional[str] = None,
                        topic: str = "", figure_size: Tuple[float, float] = (12, 8), dpi: int = 150):
    """
    Plot believers and non-believers over simulation steps.

    Args:
        history: Accumulated history points
        save_path: Optional path to save the plot
        topic: Discussion topic shown in the title
        figure_size: Figure size in inches
        dpi: Resolution of the saved image
    """
    steps = [p.step for p in history]

    fig, ax = plt.subplots(figsize=figure_size)
    ax.plot(steps, [p.believers for p in history], color=BELIEVER_COLOR, linewidth=2, label='Believers')
    ax.plot(steps, [p.non_believers for p in history], color=NON_BELIEVER_COLOR, linewidth=2, label='Non-believers')

    ax.set_xlabel('Step')
    ax.set_ylabel('Agents')
    ax.set_title(f'Belief Adoption: {topic}' if topic else 'Belief Adoption')
    ax.grid(True, alpha=0.3)
    ax.legend()

    if save_path:
        _ensure_dir(save_path)
        fig.savefig(save_path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)


def plot_network(network: Network, save_path: Optional[str] = None, layout_seed: Optional[int] = None,
                 figure_size: Tuple[float, float] = (12, 12), dpi: int = 150):
    """
    Draw the network with nodes colored by believer state and sized by degree.

    Args:
        network: Network snapshot
        save_path: Optional path to save the plot
        layout_seed: Seed for the spring layout
        figure_size: Figure size in inches
        dpi: Resolution of the saved image
    """
    G = network.to_networkx()
    pos = nx.spring_layout(G, seed=layout_seed)

    degrees = dict(G.degree())
    max_degree = max(degrees.values(), default=0) or 1
    node_sizes = [100 + 400 * degrees[node] / max_degree for node in G.nodes()]
    node_colors = [BELIEVER_COLOR if G.nodes[node]['believer'] else NON_BELIEVER_COLOR for node in G.nodes()]

    fig, ax = plt.subplots(figsize=figure_size)
    nx.draw_networkx_edges(G, pos, ax=ax, alpha=0.3)
    nx.draw_networkx_nodes(G, pos, ax=ax, node_size=node_sizes, node_color=node_colors)
    ax.set_title(f'{network.current_topic} ({len(network.nodes)} agents, {len(network.links)} links)')
    ax.axis('off')

    if save_path:
        _ensure_dir(save_path)
        fig.savefig(save_path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
