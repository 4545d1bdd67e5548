from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

Position = Tuple[int, int]  # (row, col)


class CellType(Enum):
    OPEN = 0
    WALL = 1
    TARGET = 2


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    def step(self, position: Position) -> Position:
        return position[0] + self.dr, position[1] + self.dc


@dataclass(frozen=True)
class Target:
    id: int
    position: Position


class MazeGrid:
    """Immutable maze: a cell-type array plus the numbered targets on it.

    Targets are indexed by id, so ``grid.targets[i].id == i`` and
    ``grid.targets[0]`` is the start.
    """

    def __init__(self, cells: np.ndarray, targets: Iterable[Target]):
        if cells.ndim != 2:
            raise ValueError("cells must be a 2D array")

        self.height, self.width = cells.shape
        self.grid = np.array(cells, dtype=np.int8)
        self.grid.flags.writeable = False

        self.targets: Tuple[Target, ...] = tuple(sorted(targets, key=lambda t: t.id))
        for index, target in enumerate(self.targets):
            if target.id != index:
                raise ValueError(f"Target ids must be 0..{len(self.targets) - 1}")
            if self.get_cell_type(*target.position) != CellType.TARGET:
                raise ValueError(f"Target {target.id} is not on a target cell")

        self._target_at: Dict[Position, int] = {
            t.position: t.id for t in self.targets
        }

    @property
    def start(self) -> Target:
        return self.targets[0]

    @property
    def num_targets(self) -> int:
        return len(self.targets)

    def is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get_cell_type(self, row: int, col: int) -> Optional[CellType]:
        if not self.is_valid_position(row, col):
            return None
        return CellType(int(self.grid[row, col]))

    def is_walkable(self, row: int, col: int) -> bool:
        cell_type = self.get_cell_type(row, col)
        return cell_type == CellType.OPEN or cell_type == CellType.TARGET

    def get_walkable_neighbors(self, row: int, col: int) -> List[Position]:
        neighbors = []
        for direction in Direction:
            nr, nc = direction.step((row, col))
            if self.is_walkable(nr, nc):
                neighbors.append((nr, nc))
        return neighbors

    def target_at(self, row: int, col: int) -> Optional[int]:
        """Id of the target at a cell, or None."""
        return self._target_at.get((row, col))

    def find_cells_by_type(self, cell_type: CellType) -> List[Position]:
        rows, cols = np.nonzero(self.grid == cell_type.value)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return (
            np.array_equal(self.grid, other.grid) and self.targets == other.targets
        )

    def __repr__(self) -> str:
        return (
            f"MazeGrid(width={self.width}, height={self.height}, "
            f"targets={self.num_targets})"
        )

    def __str__(self) -> str:
        cell_symbols = {
            CellType.OPEN: ".",
            CellType.WALL: "#",
        }
        result = []
        for row in range(self.height):
            line = []
            for col in range(self.width):
                target_id = self.target_at(row, col)
                if target_id is not None:
                    line.append(str(target_id))
                else:
                    line.append(cell_symbols[self.get_cell_type(row, col)])
            result.append("".join(line))
        return "\n".join(result)
