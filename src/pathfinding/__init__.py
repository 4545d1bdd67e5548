"""
Grid pathfinding for numbered-target mazes.

BFS distances, the all-pairs target distance matrix and the priority
frontier search over (position, visited-mask) states.
"""

from .bfs import UNREACHABLE, distance_map, shortest_distance
from .distance_matrix import DistanceMatrix
from .frontier import FrontierResult, FrontierSearch, PriorityFrontier, SearchState

__all__ = [
    "UNREACHABLE",
    "distance_map",
    "shortest_distance",
    "DistanceMatrix",
    "FrontierResult",
    "FrontierSearch",
    "PriorityFrontier",
    "SearchState",
]
