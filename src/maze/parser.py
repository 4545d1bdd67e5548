"""
Parser turning maze text into a MazeGrid.

``#`` is a wall, ``.`` is open floor and a digit marks a numbered target.
Rows shorter than the widest row are padded with open floor.
"""

from typing import Dict, List

import numpy as np

from ..util.errors import MissingStart, NoTargetsFound, ParseError
from ..util.logger import logger
from .grid import CellType, MazeGrid, Position, Target

log = logger.bind(component="parser")

CELL_CHARS = {
    "#": CellType.WALL,
    ".": CellType.OPEN,
}


def parse_maze(text: str) -> MazeGrid:
    """Parse maze text.

    Args:
        text: Maze rows separated by newlines; blank lines are ignored

    Returns:
        MazeGrid with targets indexed by their digit

    Raises:
        ParseError: Empty input, unknown characters or bad target ids
        NoTargetsFound: No digit anywhere in the maze
        MissingStart: Digits present but no ``0``
    """
    if not text or not text.strip():
        raise ParseError("Maze text is empty")

    lines = [line.rstrip() for line in text.splitlines()]
    lines = [line for line in lines if line]

    height = len(lines)
    width = max(len(line) for line in lines)

    cells = np.full((height, width), CellType.OPEN.value, dtype=np.int8)
    found: Dict[int, Position] = {}

    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char.isdigit() and char.isascii():
                target_id = int(char)
                if target_id in found:
                    raise ParseError(f"Duplicate target {target_id}", (row, col))
                found[target_id] = (row, col)
                cells[row, col] = CellType.TARGET.value
            elif char in CELL_CHARS:
                cells[row, col] = CELL_CHARS[char].value
            else:
                raise ParseError(f"Unexpected character {char!r}", (row, col))

    if not found:
        raise NoTargetsFound()
    if 0 not in found:
        raise MissingStart(found.keys())

    missing: List[int] = [i for i in range(max(found) + 1) if i not in found]
    if missing:
        raise ParseError(
            f"Target ids must be contiguous from 0, missing {missing}"
        )

    targets = [Target(target_id, pos) for target_id, pos in found.items()]
    grid = MazeGrid(cells, targets)
    log.debug(
        f"Parsed {grid.width}x{grid.height} maze with {grid.num_targets} targets"
    )
    return grid
