"""
Network topology implementations package.
"""

from .smallworld import SmallWorld
from .scalefree import ScaleFree
from .random import Random

TOPOLOGIES = {
    "random": Random,
    "scale-free": ScaleFree,
    "small-world": SmallWorld,
}

__all__ = [
    'SmallWorld',
    'ScaleFree',
    'Random',
    'TOPOLOGIES'
]
