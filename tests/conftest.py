"""Shared pytest fixtures for puzzle-bench tests."""

from __future__ import annotations

import shutil
import sys
import tempfile
import textwrap
from pathlib import Path
from typing import Generator

import pytest

from puzzle_bench.core.registry import SolverDescriptor, SolverRegistry
from puzzle_bench.reporting.reporter import RecordingReporter

from .stubs import CountingDay, LinesDay, StepClock


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests.

    Yields:
        Path to temporary directory (cleaned up after test)
    """
    temp_path = Path(tempfile.mkdtemp(prefix="puzzle_bench_test_"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def clock() -> StepClock:
    """Return a clock that only moves when advanced."""
    return StepClock()


@pytest.fixture
def reporter() -> RecordingReporter:
    """Return a reporter that records rows."""
    return RecordingReporter()


@pytest.fixture
def counting_day() -> type[CountingDay]:
    """Return CountingDay with its counters reset."""
    CountingDay.reset()
    return CountingDay


@pytest.fixture
def registry(counting_day) -> SolverRegistry:
    """Return a registry with the working stub solvers."""
    return SolverRegistry(
        [
            SolverDescriptor.for_class(counting_day),
            SolverDescriptor.for_class(LinesDay),
        ]
    )


@pytest.fixture
def solver_package(temp_dir: Path, monkeypatch) -> Generator[str, None, None]:
    """Create an importable package of solvers on disk.

    Layout:
        pkg_days/__init__.py
        pkg_days/day02.py      Day02 (lines), Day02Base (abstract)
        pkg_days/day10.py      Day10 (text)
        pkg_days/extra/day05.py Day05 (text)
        pkg_days/broken.py     raises on import

    Yields:
        Package name (unloaded again after the test)
    """
    package = temp_dir / "pkg_days"
    (package / "extra").mkdir(parents=True)
    (package / "__init__.py").write_text("")
    (package / "extra" / "__init__.py").write_text("")

    (package / "day02.py").write_text(textwrap.dedent("""\
        from abc import abstractmethod

        from puzzle_bench import Day, InputShape, TestCase


        class Day02Base(Day):
            day_number = 2

            @abstractmethod
            def helper(self):
                pass


        class Day02(Day02Base):
            input_shape = InputShape.LINES
            tests = (TestCase("a\\nb", part1="2"),)

            def __init__(self, lines):
                self.lines = lines

            def helper(self):
                return None

            async def solve1(self):
                return str(len(self.lines))

            async def solve2(self):
                return "two"
    """))

    (package / "day10.py").write_text(textwrap.dedent("""\
        from puzzle_bench import Day, InputShape


        class Day10(Day):
            day_number = 10
            input_shape = InputShape.TEXT

            def __init__(self, text):
                self.text = text

            async def solve1(self):
                return self.text.upper()

            async def solve2(self):
                return self.text.lower()
    """))

    (package / "extra" / "day05.py").write_text(textwrap.dedent("""\
        from puzzle_bench import Day, InputShape


        class Day05(Day):
            day_number = 5
            input_shape = InputShape.TEXT

            def __init__(self, text):
                self.text = text

            async def solve1(self):
                return "5a"

            async def solve2(self):
                return "5b"
    """))

    (package / "broken.py").write_text("raise ImportError('missing dependency')\n")

    monkeypatch.syspath_prepend(str(temp_dir))
    try:
        yield "pkg_days"
    finally:
        for name in [m for m in sys.modules if m == "pkg_days" or m.startswith("pkg_days.")]:
            del sys.modules[name]
