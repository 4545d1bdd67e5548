import numpy as np
import pytest

from src.maze.grid import CellType, Direction, MazeGrid, Target
from src.maze.parser import parse_maze

REFERENCE_MAZE = """\
###########
#0.1.....2#
#.#######.#
#4.......3#
###########
"""


class TestMazeGrid:
    def test_dimensions(self):
        grid = parse_maze(REFERENCE_MAZE)
        assert grid.width == 11
        assert grid.height == 5
        assert grid.grid.shape == (5, 11)
        assert grid.num_targets == 5

    def test_targets_indexed_by_id(self):
        grid = parse_maze(REFERENCE_MAZE)
        assert [t.id for t in grid.targets] == [0, 1, 2, 3, 4]
        assert grid.start == Target(0, (1, 1))
        assert grid.targets[4].position == (3, 1)

    def test_valid_position(self):
        grid = parse_maze(REFERENCE_MAZE)
        assert grid.is_valid_position(0, 0)
        assert grid.is_valid_position(4, 10)
        assert not grid.is_valid_position(-1, 0)
        assert not grid.is_valid_position(5, 0)
        assert not grid.is_valid_position(0, 11)

    def test_cell_types(self):
        grid = parse_maze(REFERENCE_MAZE)
        assert grid.get_cell_type(0, 0) == CellType.WALL
        assert grid.get_cell_type(1, 2) == CellType.OPEN
        assert grid.get_cell_type(1, 1) == CellType.TARGET
        assert grid.get_cell_type(9, 9) is None

    def test_walkable_cells(self):
        grid = parse_maze(REFERENCE_MAZE)
        assert grid.is_walkable(1, 2)
        assert grid.is_walkable(1, 3)
        assert not grid.is_walkable(2, 2)
        assert not grid.is_walkable(-1, 1)

    def test_walkable_neighbors(self):
        grid = parse_maze(REFERENCE_MAZE)
        assert set(grid.get_walkable_neighbors(1, 1)) == {(1, 2), (2, 1)}
        assert set(grid.get_walkable_neighbors(1, 2)) == {(1, 1), (1, 3)}

    def test_target_at(self):
        grid = parse_maze(REFERENCE_MAZE)
        assert grid.target_at(1, 9) == 2
        assert grid.target_at(1, 2) is None

    def test_find_cells_by_type(self):
        grid = parse_maze(REFERENCE_MAZE)
        targets = grid.find_cells_by_type(CellType.TARGET)
        assert set(targets) == {t.position for t in grid.targets}
        assert len(grid.find_cells_by_type(CellType.OPEN)) == 15

    def test_grid_is_read_only(self):
        grid = parse_maze(REFERENCE_MAZE)
        with pytest.raises(ValueError):
            grid.grid[1, 2] = CellType.WALL.value

    def test_caller_array_not_shared(self):
        cells = np.zeros((3, 3), dtype=np.int8)
        cells[1, 1] = CellType.TARGET.value
        grid = MazeGrid(cells, [Target(0, (1, 1))])

        cells[0, 0] = CellType.WALL.value
        assert grid.get_cell_type(0, 0) == CellType.OPEN

    def test_rejects_target_on_open_cell(self):
        cells = np.zeros((3, 3), dtype=np.int8)
        with pytest.raises(ValueError):
            MazeGrid(cells, [Target(0, (1, 1))])

    def test_rejects_gap_in_target_ids(self):
        cells = np.zeros((1, 3), dtype=np.int8)
        cells[0, 0] = CellType.TARGET.value
        cells[0, 2] = CellType.TARGET.value
        with pytest.raises(ValueError):
            MazeGrid(cells, [Target(0, (0, 0)), Target(2, (0, 2))])

    def test_string_round_trip(self):
        grid = parse_maze(REFERENCE_MAZE)
        assert str(grid) == REFERENCE_MAZE.rstrip("\n")
        assert parse_maze(str(grid)) == grid


class TestDirection:
    def test_direction_properties(self):
        assert Direction.UP.dr == -1
        assert Direction.UP.dc == 0
        assert Direction.RIGHT.dr == 0
        assert Direction.RIGHT.dc == 1

    def test_step(self):
        assert Direction.DOWN.step((2, 3)) == (3, 3)
        assert Direction.LEFT.step((2, 3)) == (2, 2)
