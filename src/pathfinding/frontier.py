"""
Priority frontier search for visiting every target of a maze.

States are (position, visited-mask) pairs ordered by steps taken. The first
state extracted with every target bit set is an optimal open route.
"""

import time
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..maze.grid import MazeGrid, Position
from ..util.errors import DeadlineExceeded, FrontierExhausted, TooManyTargets
from ..util.logger import logger

log = logger.bind(component="frontier")

MASK_BITS = 32
DEADLINE_CHECK_INTERVAL = 1024


@dataclass(frozen=True)
class SearchState:
    position: Position
    steps: int
    visited: int


class PriorityFrontier:
    """Array-backed binary min-heap of SearchState keyed on ``steps``.

    The backing list grows as needed, so no state is ever dropped.
    """

    def __init__(self):
        self.heap: List[SearchState] = []

    def insert(self, state: SearchState) -> None:
        heap = self.heap
        heap.append(state)

        current = len(heap) - 1
        while current > 0:
            parent = (current - 1) // 2
            if heap[parent].steps <= heap[current].steps:
                break
            heap[parent], heap[current] = heap[current], heap[parent]
            current = parent

    def extract_min(self) -> Optional[SearchState]:
        """Remove and return the state with fewest steps, or None if empty."""
        heap = self.heap
        if not heap:
            return None

        min_state = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sift_down(0)
        return min_state

    def peek(self) -> Optional[SearchState]:
        return self.heap[0] if self.heap else None

    def is_empty(self) -> bool:
        return not self.heap

    def __len__(self) -> int:
        return len(self.heap)

    def _sift_down(self, current: int) -> None:
        heap = self.heap
        size = len(heap)
        while True:
            left = 2 * current + 1
            right = left + 1
            smallest = current

            if left < size and heap[left].steps < heap[smallest].steps:
                smallest = left
            if right < size and heap[right].steps < heap[smallest].steps:
                smallest = right

            if smallest == current:
                break
            heap[current], heap[smallest] = heap[smallest], heap[current]
            current = smallest


@dataclass
class FrontierResult:
    """Result of a frontier search."""

    steps: int
    states_explored: int
    time_taken_ms: float


class FrontierSearch:
    """Solves "visit every target, no return" directly on the grid."""

    def __init__(
        self, max_targets: int = MASK_BITS - 1, timeout_ms: Optional[float] = None
    ):
        """Initialize frontier search.

        Args:
            max_targets: Largest target count accepted for the visited mask
            timeout_ms: Optional wall-clock limit in milliseconds
        """
        self.max_targets = max_targets
        self.timeout_ms = timeout_ms

    def visit_all(self, grid: MazeGrid) -> FrontierResult:
        """Find the fewest moves that visit every target starting at target 0.

        Raises:
            TooManyTargets: More targets than the mask supports
            FrontierExhausted: Some target is unreachable
            DeadlineExceeded: ``timeout_ms`` elapsed
        """
        start_time = time.time()
        n = grid.num_targets
        if n > self.max_targets:
            raise TooManyTargets(n, self.max_targets)

        all_visited = (1 << n) - 1
        start = grid.start
        initial = SearchState(start.position, 0, 1 << start.id)

        frontier = PriorityFrontier()
        frontier.insert(initial)
        seen: Set[Tuple[Position, int]] = {(initial.position, initial.visited)}
        states_explored = 0

        while not frontier.is_empty():
            current = frontier.extract_min()
            states_explored += 1

            if current.visited == all_visited:
                elapsed_ms = (time.time() - start_time) * 1000
                log.debug(
                    f"Visited all {n} targets in {current.steps} steps "
                    f"({states_explored} states, {elapsed_ms:.1f} ms)"
                )
                return FrontierResult(
                    steps=current.steps,
                    states_explored=states_explored,
                    time_taken_ms=elapsed_ms,
                )

            if states_explored % DEADLINE_CHECK_INTERVAL == 0:
                self._check_deadline(start_time)

            for neighbor in grid.get_walkable_neighbors(*current.position):
                visited = current.visited
                target_id = grid.target_at(*neighbor)
                if target_id is not None:
                    visited |= 1 << target_id

                key = (neighbor, visited)
                if key in seen:
                    continue
                seen.add(key)
                frontier.insert(SearchState(neighbor, current.steps + 1, visited))

        raise FrontierExhausted(states_explored)

    def _check_deadline(self, start_time: float) -> None:
        if self.timeout_ms is None:
            return
        if (time.time() - start_time) * 1000 > self.timeout_ms:
            raise DeadlineExceeded(self.timeout_ms)
