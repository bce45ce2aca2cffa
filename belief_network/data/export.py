"""
CSV export of agent data.
"""

import os
import pandas as pd

from ..network.graph_model import Network

EXPORT_COLUMNS = [
    "Agent ID", "Name", "Gender", "Age", "Beliefs", "Susceptibility",
    "Openness", "Conscientiousness", "Extraversion", "Agreeableness", "Neuroticism",
]


def network_to_dataframe(network: Network) -> pd.DataFrame:
    """One row per agent with demographics, belief and traits."""
    rows = [
        [
            agent.id,
            agent.name,
            agent.gender,
            agent.age,
            agent.belief,
            agent.susceptibility,
            agent.traits.openness,
            agent.traits.conscientiousness,
            agent.traits.extraversion,
            agent.traits.agreeableness,
            agent.traits.neuroticism,
        ]
        for agent in network.nodes
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def generate_export_data(network: Network) -> str:
    """
    Generate a CSV export of the agents.

    Args:
        network: Current network state

    Returns:
        CSV text with floats rounded to 3 decimals
    """
    return network_to_dataframe(network).to_csv(index=False, float_format="%.3f", lineterminator="\n")


def save_export(network: Network, path: str) -> str:
    """Write the CSV export to ``path`` and return the path."""
    output_dir = os.path.dirname(path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    with open(path, "w", newline="") as f:
        f.write(generate_export_data(network))
    return path
