"""
All-pairs shortest distances between the numbered targets of a maze.
"""

import time
from typing import List, Sequence

import numpy as np

from ..maze.grid import MazeGrid
from ..util.errors import UnreachableTarget
from ..util.logger import logger
from .bfs import UNREACHABLE, distance_map

log = logger.bind(component="distance_matrix")


class DistanceMatrix:
    """Read-only symmetric table of target-to-target move counts."""

    def __init__(self, distances: np.ndarray):
        self.distances = np.array(distances, dtype=np.int64)
        self.distances.flags.writeable = False

    @classmethod
    def build(cls, grid: MazeGrid) -> "DistanceMatrix":
        """Run one BFS per target and collect distances to all others.

        Raises:
            UnreachableTarget: Some pair of targets is disconnected
        """
        start_time = time.time()
        n = grid.num_targets
        distances = np.zeros((n, n), dtype=np.int64)

        for source in grid.targets:
            reach = distance_map(grid, source.position)
            for other in grid.targets:
                steps = reach[other.position]
                if steps == UNREACHABLE:
                    raise UnreachableTarget(
                        min(source.id, other.id), max(source.id, other.id)
                    )
                distances[source.id, other.id] = steps

        elapsed_ms = (time.time() - start_time) * 1000
        log.debug(f"Built {n}x{n} distance matrix in {elapsed_ms:.1f} ms")
        return cls(distances)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "DistanceMatrix":
        """Create a matrix from nested lists, e.g. for hand-made instances."""
        distances = np.array(rows, dtype=np.int64)
        if distances.ndim != 2 or distances.shape[0] != distances.shape[1]:
            raise ValueError("Distance matrix must be square")
        if distances.size == 0:
            raise ValueError("Distance matrix must not be empty")
        if np.any(distances < 0):
            raise ValueError("Distances must be non-negative")
        if np.any(np.diag(distances) != 0):
            raise ValueError("Self-distances must be 0")
        return cls(distances)

    @property
    def size(self) -> int:
        return self.distances.shape[0]

    def get(self, source: int, target: int) -> int:
        return int(self.distances[source, target])

    def to_list(self) -> List[List[int]]:
        return self.distances.tolist()

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"DistanceMatrix(size={self.size})"
