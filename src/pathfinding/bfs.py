"""
Breadth-first search over the 4-connected walkable cells of a maze.
"""

from collections import deque
from typing import Optional

import numpy as np

from ..maze.grid import MazeGrid, Position

UNREACHABLE = -1


def _check_walkable(grid: MazeGrid, position: Position) -> None:
    if not grid.is_walkable(*position):
        raise ValueError(f"Position {position} is outside the maze or a wall")


def shortest_distance(
    grid: MazeGrid, source: Position, target: Position
) -> Optional[int]:
    """Number of moves on the shortest path between two cells.

    Args:
        grid: Maze to search
        source: Starting (row, col)
        target: Destination (row, col)

    Returns:
        Path length, or None if ``target`` cannot be reached
    """
    _check_walkable(grid, source)
    _check_walkable(grid, target)

    queue = deque([(source, 0)])
    visited = {source}

    while queue:
        position, steps = queue.popleft()
        if position == target:
            return steps

        for neighbor in grid.get_walkable_neighbors(*position):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, steps + 1))

    return None


def distance_map(grid: MazeGrid, source: Position) -> np.ndarray:
    """Distances from ``source`` to every cell in one BFS run.

    Returns:
        (height, width) int array, ``UNREACHABLE`` for walls and cells not
        connected to ``source``
    """
    _check_walkable(grid, source)

    distances = np.full((grid.height, grid.width), UNREACHABLE, dtype=np.int64)
    distances[source] = 0
    queue = deque([source])

    while queue:
        position = queue.popleft()
        steps = distances[position]
        for neighbor in grid.get_walkable_neighbors(*position):
            if distances[neighbor] == UNREACHABLE:
                distances[neighbor] = steps + 1
                queue.append(neighbor)

    return distances
