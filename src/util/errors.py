"""
Error taxonomy for the maze route solver.

Every error is fatal for the maze being solved; nothing is retried.
"""

from typing import Optional, Tuple


class MazeError(Exception):
    """Base class for all maze solving failures."""


class ParseError(MazeError):
    """Maze text is empty or malformed."""

    def __init__(self, message: str, position: Optional[Tuple[int, int]] = None):
        if position is not None:
            message = f"{message} at row {position[0]}, col {position[1]}"
        super().__init__(message)
        self.position = position


class NoTargetsFound(ParseError):
    """Maze contains no numbered targets."""

    def __init__(self):
        super().__init__("Maze contains no numbered targets")


class MissingStart(ParseError):
    """Maze has targets but none labelled 0."""

    def __init__(self, target_ids):
        ids = ", ".join(str(i) for i in sorted(target_ids))
        super().__init__(f"Maze has no start target 0 (found targets: {ids})")
        self.target_ids = tuple(sorted(target_ids))


class UnreachableTarget(MazeError):
    """Two targets are not connected by any open path."""

    def __init__(self, source: int, target: int):
        super().__init__(f"Target {target} is unreachable from target {source}")
        self.source = source
        self.target = target


class TooManyTargets(MazeError):
    """Target count exceeds the bitmask / table capacity."""

    def __init__(self, count: int, limit: int):
        super().__init__(f"{count} targets exceeds the supported maximum of {limit}")
        self.count = count
        self.limit = limit


class FrontierExhausted(MazeError):
    """Priority frontier emptied before every target was visited."""

    def __init__(self, states_explored: int):
        super().__init__(
            f"Frontier exhausted after {states_explored} states without visiting all targets"
        )
        self.states_explored = states_explored


class DeadlineExceeded(MazeError):
    """Configured wall-clock timeout elapsed mid-search."""

    def __init__(self, timeout_ms: float):
        super().__init__(f"Search exceeded timeout of {timeout_ms:.0f} ms")
        self.timeout_ms = timeout_ms
