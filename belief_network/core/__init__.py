"""
Core topology interface and belief dynamics for the simulation.
"""

from .base_models import NetworkTopology, validate_density
from .propagation import (
    run_belief_propagation_step,
    update_believers_majority
)

__all__ = [
    "NetworkTopology",
    "validate_density",
    "run_belief_propagation_step",
    "update_believers_majority"
]
