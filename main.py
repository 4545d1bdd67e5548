#!/usr/bin/env python3
"""
Maze Route Solver

Finds the shortest route through a maze that visits every numbered target,
optionally returning to the start.
"""

import argparse
import sys
from pathlib import Path

from src.maze.builder import MazeBuilder, MazeConfig
from src.maze.parser import parse_maze
from src.pathfinding.distance_matrix import DistanceMatrix
from src.routing.config import SolverConfig
from src.solver.pipeline import MazeRouteSolver
from src.util.errors import MazeError
from src.util.logger import logger, set_console_level

log = logger.bind(component="pipeline")


def run_solve(input_path: Path, part: str, config: SolverConfig) -> int:
    """Solve the maze in ``input_path`` and print the requested parts."""
    text = input_path.read_text()
    solver = MazeRouteSolver(config)
    parts = [("1", False), ("2", True)]

    try:
        grid = parse_maze(text)
        matrix = None
        for name, must_return in parts:
            if part not in (name, "both"):
                continue
            if matrix is None and solver.uses_matrix(must_return):
                matrix = DistanceMatrix.build(grid)
            print(f"Part {name}:")
            print(solver.solve_grid(grid, must_return, matrix))
    except MazeError as e:
        log.error(f"{type(e).__name__}: {e}")
        return 1

    return 0


def run_generate(seed: int, num_targets: int, width: int, height: int) -> int:
    """Print a random connected maze."""
    config = MazeConfig(width=width, height=height, num_targets=num_targets)
    print(MazeBuilder(config, seed=seed).generate_text())
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Maze Route Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py input.txt                      # Both parts
  python main.py input.txt --part 1 --strategy frontier
  python main.py --generate --seed 42 --targets 6
        """,
    )

    parser.add_argument("input", nargs="?", type=Path, help="Maze text file")
    parser.add_argument(
        "--part", choices=["1", "2", "both"], default="both", help="Part to solve"
    )
    parser.add_argument(
        "--strategy",
        choices=["matrix", "frontier"],
        default="matrix",
        help="Part 1 strategy",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=8,
        help="Largest target count solved by permutation search",
    )
    parser.add_argument(
        "--timeout-ms", type=float, default=None, help="Per-search time limit"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--generate", action="store_true", help="Print a random maze instead"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--targets", type=int, default=5, help="Targets to generate")
    parser.add_argument("--width", type=int, default=11, help="Generated maze width")
    parser.add_argument("--height", type=int, default=7, help="Generated maze height")

    args = parser.parse_args()

    set_console_level("DEBUG" if args.verbose else "INFO")

    if args.generate:
        return run_generate(args.seed, args.targets, args.width, args.height)

    if args.input is None:
        parser.error("an input file is required unless --generate is given")

    config = SolverConfig(
        permutation_threshold=args.threshold,
        part1_strategy=args.strategy,
        timeout_ms=args.timeout_ms,
    )
    return run_solve(args.input, args.part, config)


if __name__ == "__main__":
    sys.exit(main())
