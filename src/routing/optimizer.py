"""
Route optimizer over a target distance matrix.

Finds the cheapest order to visit every target from a start target, either
stopping at the last target (open path) or returning to the start (circuit).
Small instances enumerate permutations; larger ones use Held-Karp bitmask DP.
"""

import itertools
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ..pathfinding.distance_matrix import DistanceMatrix
from ..util.errors import DeadlineExceeded, TooManyTargets
from ..util.logger import logger
from .config import DEFAULT_MAX_TARGETS, HELD_KARP_MEMORY_BUDGET

log = logger.bind(component="optimizer")

INF = np.iinfo(np.int64).max // 4
DEADLINE_CHECK_INTERVAL = 256


def held_karp_table_bytes(n: int) -> int:
    return (1 << n) * n * np.dtype(np.int64).itemsize


def held_karp_target_limit(budget: int = HELD_KARP_MEMORY_BUDGET) -> int:
    """Largest target count whose Held-Karp table fits in ``budget`` bytes."""
    n = 1
    while held_karp_table_bytes(n + 1) <= budget:
        n += 1
    return n


@dataclass(frozen=True)
class Tour:
    """Visiting order (start first, and last again for circuits) and its cost."""

    order: Tuple[int, ...]
    cost: int


class RouteOptimizer:
    """Exact shortest Hamiltonian path / circuit solver."""

    def __init__(
        self,
        permutation_threshold: int = 8,
        max_targets: int = DEFAULT_MAX_TARGETS,
        timeout_ms: Optional[float] = None,
    ):
        """Initialize route optimizer.

        Args:
            permutation_threshold: Largest target count solved by enumeration
            max_targets: Largest target count accepted at all
            timeout_ms: Optional wall-clock limit per search in milliseconds
        """
        self.permutation_threshold = permutation_threshold
        self.max_targets = max_targets
        self.timeout_ms = timeout_ms

    def optimal_tour(
        self, matrix: DistanceMatrix, start_id: int = 0, must_return: bool = False
    ) -> Tour:
        """Cheapest route visiting every target, starting at ``start_id``.

        Args:
            matrix: All-pairs target distances
            start_id: Target the route starts from
            must_return: Whether the route has to end back at ``start_id``

        Returns:
            Tour with the minimal total distance

        Raises:
            TooManyTargets: ``matrix.size`` exceeds ``max_targets`` or the
                Held-Karp memory budget
            DeadlineExceeded: Search ran past ``timeout_ms``
        """
        n = matrix.size
        if n <= self.permutation_threshold:
            log.debug(f"Enumerating permutations for {n} targets")
            return self.permutation_search(matrix, start_id, must_return)

        log.debug(f"Running Held-Karp for {n} targets")
        return self.held_karp(matrix, start_id, must_return)

    def permutation_search(
        self, matrix: DistanceMatrix, start_id: int = 0, must_return: bool = False
    ) -> Tour:
        """Exhaustive search over orderings of the non-start targets."""
        trivial = self._trivial_tour(matrix, start_id, must_return)
        if trivial is not None:
            return trivial

        start_time = time.time()
        dist = matrix.to_list()
        others = [i for i in range(matrix.size) if i != start_id]

        best_order: Tuple[int, ...] = ()
        best_cost = INF
        for index, perm in enumerate(itertools.permutations(others)):
            if index % DEADLINE_CHECK_INTERVAL == 0:
                self._check_deadline(start_time)

            cost = 0
            current = start_id
            for next_id in perm:
                cost += dist[current][next_id]
                current = next_id
            if must_return:
                cost += dist[current][start_id]

            if cost < best_cost:
                best_cost = cost
                best_order = perm

        order = (start_id,) + best_order
        if must_return:
            order += (start_id,)
        return Tour(order=order, cost=int(best_cost))

    def held_karp(
        self, matrix: DistanceMatrix, start_id: int = 0, must_return: bool = False
    ) -> Tour:
        """Bitmask dynamic program over (visited set, last target).

        ``dp[mask, last]`` is the cheapest path from ``start_id`` through exactly
        the targets in ``mask`` that ends at ``last``. O(2^N * N^2) time,
        O(2^N * N) memory.
        """
        trivial = self._trivial_tour(matrix, start_id, must_return)
        if trivial is not None:
            return trivial

        n = matrix.size
        if held_karp_table_bytes(n) > HELD_KARP_MEMORY_BUDGET:
            raise TooManyTargets(n, held_karp_target_limit())

        start_time = time.time()
        dist = matrix.distances
        bits = np.left_shift(1, np.arange(n, dtype=np.int64))
        start_bit = 1 << start_id
        full_mask = (1 << n) - 1

        dp = np.full((1 << n, n), INF, dtype=np.int64)
        dp[start_bit, start_id] = 0

        for mask in range(1 << n):
            if mask % DEADLINE_CHECK_INTERVAL == 0:
                self._check_deadline(start_time)
            if not mask & start_bit or mask == start_bit:
                continue

            members = np.nonzero(mask & bits)[0]
            members = members[members != start_id]
            prev_masks = mask ^ bits[members]
            # Row r: cost of reaching each prev target, plus prev -> members[r].
            candidates = dp[prev_masks] + dist[:, members].T
            dp[mask, members] = candidates.min(axis=1)

        lasts = np.array([j for j in range(n) if j != start_id])
        totals = dp[full_mask, lasts].copy()
        if must_return:
            totals += dist[lasts, start_id]
        best = int(np.argmin(totals))

        order = self._reconstruct(dp, dist, full_mask, int(lasts[best]), start_id)
        if must_return:
            order.append(start_id)

        elapsed_ms = (time.time() - start_time) * 1000
        log.debug(f"Held-Karp over {1 << n} masks took {elapsed_ms:.1f} ms")
        return Tour(order=tuple(order), cost=int(totals[best]))

    def _reconstruct(
        self,
        dp: np.ndarray,
        dist: np.ndarray,
        mask: int,
        last: int,
        start_id: int,
    ) -> List[int]:
        """Walk the table backwards from (mask, last) to the start."""
        order = [last]
        while last != start_id:
            prev_mask = mask ^ (1 << last)
            prev = int(np.argmin(dp[prev_mask] + dist[:, last]))
            order.append(prev)
            mask, last = prev_mask, prev
        order.reverse()
        return order

    def _trivial_tour(
        self, matrix: DistanceMatrix, start_id: int, must_return: bool
    ) -> Optional[Tour]:
        n = matrix.size
        if not (0 <= start_id < n):
            raise ValueError(f"start_id {start_id} out of range for {n} targets")
        if n > self.max_targets:
            raise TooManyTargets(n, self.max_targets)
        if n == 1:
            order = (start_id, start_id) if must_return else (start_id,)
            return Tour(order=order, cost=0)
        return None

    def _check_deadline(self, start_time: float) -> None:
        if self.timeout_ms is None:
            return
        if (time.time() - start_time) * 1000 > self.timeout_ms:
            raise DeadlineExceeded(self.timeout_ms)
