"""
Simulation driver for the belief network.
"""

from .controller import Controller

__all__ = ["Controller"]
