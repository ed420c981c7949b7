"""The contract every puzzle solver implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, ClassVar


class InputShape(Enum):
    """How a solver wants its input delivered to the constructor."""

    TEXT = "text"
    """The whole payload as a single string"""

    LINES = "lines"
    """The payload split into a list of lines"""


class _NotImplementedType:
    """Result returned by a part that has not been written yet."""

    _instance: ClassVar[_NotImplementedType | None] = None

    def __new__(cls) -> _NotImplementedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_IMPLEMENTED"


NOT_IMPLEMENTED = _NotImplementedType()


@dataclass(frozen=True)
class TestCase:
    """Example input with the expected answers.

    A part whose expected answer is None is not checked.
    """

    __test__ = False

    input: str
    """Raw puzzle input"""

    part1: str | None = None
    """Expected answer for part 1"""

    part2: str | None = None
    """Expected answer for part 2"""


class Day(ABC):
    """Base class for a daily puzzle solver.

    Subclasses set ``day_number`` and ``input_shape``, accept the input in
    their constructor and implement both parts. Parts may be coroutines or
    plain methods, and may return ``NOT_IMPLEMENTED`` (or raise
    ``NotImplementedError``) while unfinished.

    Example:
        class Day01(Day):
            day_number = 1
            input_shape = InputShape.LINES
            tests = (TestCase("1\\n2", part1="3"),)

            def __init__(self, lines: list[str]):
                self.numbers = [int(line) for line in lines]

            async def solve1(self) -> str:
                return str(sum(self.numbers))

            async def solve2(self) -> str:
                return NOT_IMPLEMENTED
    """

    day_number: ClassVar[int] = 0
    """Identity of the puzzle; 0 means unnumbered"""

    tests: ClassVar[tuple[TestCase, ...]] = ()
    """Example test cases"""

    input_shape: ClassVar[InputShape | None] = None
    """Constructor shape; None when the solver cannot be built from input"""

    @abstractmethod
    def solve1(self) -> Awaitable[Any] | Any:
        """Solve part 1."""

    @abstractmethod
    def solve2(self) -> Awaitable[Any] | Any:
        """Solve part 2."""
