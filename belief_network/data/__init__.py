"""
Data management module for the belief network simulation.
"""

from .storage import DataStorage
from .analysis import SimulationAnalyzer
from .export import generate_export_data, save_export

__all__ = ['DataStorage', 'SimulationAnalyzer', 'generate_export_data', 'save_export']
