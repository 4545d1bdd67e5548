"""
Maze route solver pipeline.

Parses maze text and reports the shortest route visiting every target.
"""

from .pipeline import MazeRouteSolver, part1, part2

__all__ = ["MazeRouteSolver", "part1", "part2"]
