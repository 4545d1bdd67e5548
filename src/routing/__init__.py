"""
Route optimization over target distance matrices.

Chooses between permutation enumeration and Held-Karp DP by target count.
"""

from .config import SolverConfig
from .optimizer import RouteOptimizer, Tour

__all__ = ["RouteOptimizer", "SolverConfig", "Tour"]
