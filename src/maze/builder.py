"""
MazeBuilder for generating random numbered-target mazes.

Generates bordered mazes with scattered interior walls, used for property
testing the solvers and for the ``--generate`` CLI mode.
"""

import random
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..pathfinding.bfs import distance_map
from ..util.logger import logger
from .grid import CellType, MazeGrid, Position, Target

log = logger.bind(component="builder")

MAX_TARGET_DIGITS = 10


@dataclass
class MazeConfig:
    """Configuration for maze generation."""

    width: int = 11
    height: int = 7
    wall_density: float = 0.25
    num_targets: int = 5
    ensure_connected: bool = True
    max_attempts: int = 100

    def __post_init__(self):
        if self.width < 3 or self.height < 3:
            raise ValueError("width and height must be at least 3")
        if not (1 <= self.num_targets <= MAX_TARGET_DIGITS):
            raise ValueError(f"num_targets must be in [1, {MAX_TARGET_DIGITS}]")
        if not (0.0 <= self.wall_density < 1.0):
            raise ValueError("wall_density must be in [0, 1)")
        if (self.width - 2) * (self.height - 2) < self.num_targets:
            raise ValueError("Maze interior too small for the requested targets")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be positive")


class MazeBuilder:
    """Generates random mazes with numbered targets."""

    def __init__(self, config: MazeConfig, seed: Optional[int] = None):
        """Initialize maze builder.

        Args:
            config: Maze generation configuration
            seed: Random seed for deterministic generation
        """
        self.config = config
        self.rng = random.Random(seed)

    def generate_grid(self) -> MazeGrid:
        """Generate a maze.

        Returns:
            MazeGrid with ``num_targets`` targets; when ``ensure_connected`` is
            set every target is reachable from target 0

        Raises:
            ValueError: No suitable maze found within ``max_attempts``
        """
        for attempt in range(1, self.config.max_attempts + 1):
            cells = self._place_walls()
            positions = self._place_targets(cells)
            if positions is None:
                continue

            targets = [Target(i, pos) for i, pos in enumerate(positions)]
            for target in targets:
                cells[target.position] = CellType.TARGET.value

            log.debug(f"Generated maze on attempt {attempt}")
            return MazeGrid(cells, targets)

        raise ValueError(
            f"Could not place {self.config.num_targets} targets "
            f"in {self.config.max_attempts} attempts"
        )

    def generate_text(self) -> str:
        """Generate a maze rendered as parseable text."""
        return str(self.generate_grid())

    def _place_walls(self) -> np.ndarray:
        """Border walls plus randomly scattered interior walls."""
        cells = np.full(
            (self.config.height, self.config.width), CellType.WALL.value, dtype=np.int8
        )
        for row in range(1, self.config.height - 1):
            for col in range(1, self.config.width - 1):
                if self.rng.random() >= self.config.wall_density:
                    cells[row, col] = CellType.OPEN.value
        return cells

    def _place_targets(self, cells: np.ndarray) -> Optional[List[Position]]:
        """Pick distinct open cells for targets, start first."""
        open_cells = [
            (int(r), int(c)) for r, c in zip(*np.nonzero(cells == CellType.OPEN.value))
        ]
        if len(open_cells) < self.config.num_targets:
            return None

        start = self.rng.choice(open_cells)
        candidates = [cell for cell in open_cells if cell != start]

        if self.config.ensure_connected:
            # Targets are not placed yet; walkability is identical either way.
            layout = MazeGrid(cells, [])
            reachable = distance_map(layout, start)
            candidates = [cell for cell in candidates if reachable[cell] >= 0]

        if len(candidates) < self.config.num_targets - 1:
            return None

        return [start] + self.rng.sample(candidates, self.config.num_targets - 1)
