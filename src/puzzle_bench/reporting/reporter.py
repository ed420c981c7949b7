"""Reporter interface and structured rows.

Runners emit rows through a ``Reporter``; they never render anything
themselves. ``RecordingReporter`` keeps the rows for inspection and
``RichReporter`` (see console.py) draws them as tables.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .aggregate import OverallResults

PLACEHOLDER = "-----------"
"""Solution shown for rows without an answer"""


@dataclass(frozen=True)
class TestRow:
    """One checked part of a test case."""

    __test__ = False

    title: str
    part: str
    actual: str
    expected: str
    passed: bool


@dataclass(frozen=True)
class SolveRow:
    """One timed phase of a solved day."""

    title: str
    part: str
    solution: str
    elapsed_ms: float


class Reporter(ABC):
    """Receives the rows produced by a run."""

    def clear(self) -> None:
        """Clear previous output."""
        pass

    def begin_tests(self) -> None:
        pass

    @abstractmethod
    def test_row(self, row: TestRow) -> None:
        pass

    def end_tests(self, success: bool) -> None:
        pass

    def begin_solve(self) -> None:
        pass

    @abstractmethod
    def solve_row(self, row: SolveRow) -> None:
        pass

    def end_solve(self) -> None:
        pass

    def day_break(self) -> None:
        """Separate the rows of consecutive days or test cases."""
        pass

    @abstractmethod
    def summary(self, results: OverallResults) -> None:
        pass


@dataclass
class RecordingReporter(Reporter):
    """Reporter that stores everything it receives."""

    test_rows: list[TestRow] = field(default_factory=list)
    solve_rows: list[SolveRow] = field(default_factory=list)
    summaries: list[OverallResults] = field(default_factory=list)
    tests_success: bool | None = None
    cleared: bool = False
    breaks: int = 0

    def clear(self) -> None:
        self.cleared = True

    def test_row(self, row: TestRow) -> None:
        self.test_rows.append(row)

    def end_tests(self, success: bool) -> None:
        self.tests_success = success

    def solve_row(self, row: SolveRow) -> None:
        self.solve_rows.append(row)

    def day_break(self) -> None:
        self.breaks += 1

    def summary(self, results: OverallResults) -> None:
        self.summaries.append(results)

    def solve_rows_for(self, title: str) -> list[SolveRow]:
        return [r for r in self.solve_rows if r.title == title]
