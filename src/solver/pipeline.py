"""
End-to-end maze solving: text -> grid -> distances -> optimal route length.
"""

import time
from typing import Optional

from ..maze.grid import MazeGrid
from ..maze.parser import parse_maze
from ..pathfinding.distance_matrix import DistanceMatrix
from ..pathfinding.frontier import FrontierSearch
from ..routing.config import SolverConfig
from ..routing.optimizer import RouteOptimizer, Tour
from ..util.logger import logger

log = logger.bind(component="pipeline")


class MazeRouteSolver:
    """Solves "visit every numbered target" mazes."""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self.optimizer = RouteOptimizer(
            permutation_threshold=self.config.permutation_threshold,
            max_targets=self.config.max_targets,
            timeout_ms=self.config.timeout_ms,
        )
        self.frontier_search = FrontierSearch(
            max_targets=self.config.max_targets,
            timeout_ms=self.config.timeout_ms,
        )

    def solve(self, text: str, must_return: bool = False) -> int:
        """Minimum moves to visit every target from target 0.

        Args:
            text: Maze text
            must_return: Whether the route has to end back at target 0

        Returns:
            Minimum number of moves
        """
        return self.solve_grid(parse_maze(text), must_return)

    def solve_grid(
        self,
        grid: MazeGrid,
        must_return: bool = False,
        matrix: Optional[DistanceMatrix] = None,
    ) -> int:
        """Like ``solve`` on a parsed grid, reusing ``matrix`` when given."""
        start_time = time.time()

        if self.uses_matrix(must_return):
            steps = self.best_tour(grid, must_return, matrix).cost
        else:
            steps = self.frontier_search.visit_all(grid).steps

        elapsed_ms = (time.time() - start_time) * 1000
        log.info(
            f"{grid.num_targets} targets, must_return={must_return}: "
            f"{steps} steps ({elapsed_ms:.1f} ms)"
        )
        return steps

    def uses_matrix(self, must_return: bool) -> bool:
        return must_return or self.config.part1_strategy == "matrix"

    def best_tour(
        self,
        grid: MazeGrid,
        must_return: bool = False,
        matrix: Optional[DistanceMatrix] = None,
    ) -> Tour:
        """Optimal visiting order via the distance matrix."""
        if matrix is None:
            matrix = DistanceMatrix.build(grid)
        tour = self.optimizer.optimal_tour(matrix, grid.start.id, must_return)
        log.debug(f"Best order: {' -> '.join(str(i) for i in tour.order)}")
        return tour


def part1(text: str, config: Optional[SolverConfig] = None) -> str:
    """Fewest moves visiting every target, no return, as a decimal string."""
    return str(MazeRouteSolver(config).solve(text, must_return=False))


def part2(text: str, config: Optional[SolverConfig] = None) -> str:
    """Fewest moves visiting every target and returning to 0, as a string."""
    return str(MazeRouteSolver(config).solve(text, must_return=True))
