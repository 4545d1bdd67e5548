"""
Configuration for the maze route solver.
"""

from dataclasses import dataclass
from typing import Optional

# The Held-Karp table is (2^N, N) int64 values: about 168 MB at N = 20 and
# 738 MB at N = 22. Tables above the memory budget are refused.
HELD_KARP_MEMORY_BUDGET = 1 << 30  # bytes
MAX_HELD_KARP_TARGETS = 22
DEFAULT_MAX_TARGETS = 20

# 9! = 362880 orderings at a threshold of 10
MAX_PERMUTATION_THRESHOLD = 10

STRATEGIES = ("matrix", "frontier")


@dataclass
class SolverConfig:
    """Configuration for solving a maze."""

    # Route optimizer
    permutation_threshold: int = 8  # Largest N solved by enumerating permutations
    max_targets: int = DEFAULT_MAX_TARGETS  # Held-Karp capacity ceiling

    # Part 1 strategy: distance matrix + optimizer, or grid frontier search
    part1_strategy: str = "matrix"

    # Optional wall-clock limit per search, in milliseconds
    timeout_ms: Optional[float] = None

    def __post_init__(self):
        """Validate configuration."""
        if not (1 <= self.permutation_threshold <= MAX_PERMUTATION_THRESHOLD):
            raise ValueError(
                f"permutation_threshold must be in [1, {MAX_PERMUTATION_THRESHOLD}]"
            )
        if not (1 <= self.max_targets <= MAX_HELD_KARP_TARGETS):
            raise ValueError(f"max_targets must be in [1, {MAX_HELD_KARP_TARGETS}]")
        if self.part1_strategy not in STRATEGIES:
            raise ValueError(f"part1_strategy must be one of {STRATEGIES}")
        if self.timeout_ms is not None and self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
