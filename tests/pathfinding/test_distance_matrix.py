"""
Tests for the target distance matrix.
"""

import itertools

import pytest

from src.maze.builder import MazeBuilder, MazeConfig
from src.maze.parser import parse_maze
from src.pathfinding.distance_matrix import DistanceMatrix
from src.util.errors import UnreachableTarget

REFERENCE_MAZE = """\
###########
#0.1.....2#
#.#######.#
#4.......3#
###########
"""


class TestDistanceMatrixBuild:
    """Test building distances from a parsed maze."""

    def test_reference_matrix(self):
        matrix = DistanceMatrix.build(parse_maze(REFERENCE_MAZE))
        assert matrix.to_list() == [
            [0, 2, 8, 10, 2],
            [2, 0, 6, 8, 4],
            [8, 6, 0, 2, 10],
            [10, 8, 2, 0, 8],
            [2, 4, 10, 8, 0],
        ]

    def test_square_room(self):
        matrix = DistanceMatrix.build(parse_maze("#####\n#0.1#\n#...#\n#2.3#\n#####"))
        assert matrix.size == 4
        assert matrix.get(0, 1) == 2
        assert matrix.get(0, 3) == 4
        assert matrix.get(1, 2) == 4

    @pytest.mark.parametrize("seed", range(8))
    def test_metric_properties(self, seed):
        config = MazeConfig(width=15, height=9, wall_density=0.3, num_targets=7)
        grid = MazeBuilder(config, seed=seed).generate_grid()
        matrix = DistanceMatrix.build(grid)
        n = matrix.size

        for i in range(n):
            assert matrix.get(i, i) == 0
        for i, j in itertools.product(range(n), repeat=2):
            assert matrix.get(i, j) == matrix.get(j, i)
        for i, j, k in itertools.product(range(n), repeat=3):
            assert matrix.get(i, k) <= matrix.get(i, j) + matrix.get(j, k)

    def test_sealed_target_raises(self):
        maze = "#########\n#0.1.#.2#\n#########"
        with pytest.raises(UnreachableTarget) as exc_info:
            DistanceMatrix.build(parse_maze(maze))
        assert (exc_info.value.source, exc_info.value.target) == (0, 2)

    def test_matrix_is_read_only(self):
        matrix = DistanceMatrix.build(parse_maze(REFERENCE_MAZE))
        with pytest.raises(ValueError):
            matrix.distances[0, 1] = 99


class TestDistanceMatrixFromRows:
    """Test matrices given as explicit rows."""

    def test_from_rows(self):
        matrix = DistanceMatrix.from_rows([[0, 3], [3, 0]])
        assert len(matrix) == 2
        assert matrix.get(1, 0) == 3

    @pytest.mark.parametrize(
        "rows",
        [
            [],
            [[0, 1, 2], [1, 0, 3]],
            [[0, -1], [-1, 0]],
            [[1, 2], [2, 0]],
        ],
    )
    def test_invalid_rows(self, rows):
        with pytest.raises(ValueError):
            DistanceMatrix.from_rows(rows)
