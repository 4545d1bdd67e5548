import pytest

from src.util.errors import (
    DeadlineExceeded,
    FrontierExhausted,
    MazeError,
    MissingStart,
    NoTargetsFound,
    ParseError,
    TooManyTargets,
    UnreachableTarget,
)
from src.util.logger import set_console_level


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(NoTargetsFound, ParseError)
        assert issubclass(MissingStart, ParseError)
        for error in (
            ParseError,
            UnreachableTarget,
            TooManyTargets,
            FrontierExhausted,
            DeadlineExceeded,
        ):
            assert issubclass(error, MazeError)

    def test_unreachable_target_is_distinct_from_capacity_errors(self):
        assert not issubclass(UnreachableTarget, TooManyTargets)
        assert not issubclass(TooManyTargets, UnreachableTarget)

    def test_messages_name_the_culprit(self):
        assert str(UnreachableTarget(1, 3)) == "Target 3 is unreachable from target 1"
        assert "21" in str(TooManyTargets(21, 20))
        assert "250 ms" in str(DeadlineExceeded(250))
        assert "5 states" in str(FrontierExhausted(5))
        assert "found targets: 1, 2" in str(MissingStart({2, 1}))


class TestLogger:
    def test_set_console_level(self):
        set_console_level("DEBUG")
        set_console_level("INFO")

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            set_console_level("CHATTY")
