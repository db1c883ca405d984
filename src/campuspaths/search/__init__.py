"""
Shortest-path search over anything that implements `campuspaths.typing.NeighborProvider`.
"""

from . import dijkstra
from .dijkstra import shortest_path

__all__ = [
    "dijkstra",
    "shortest_path",
]
