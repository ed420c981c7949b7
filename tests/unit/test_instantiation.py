"""Tests for building solver instances."""

from __future__ import annotations

import pytest

from puzzle_bench.core.day import InputShape
from puzzle_bench.core.inputs import MemoryInputSource
from puzzle_bench.core.registry import SolverDescriptor
from puzzle_bench.exceptions import (
    ConstructionError,
    InputNotFoundError,
    NoSuitableConstructorError,
)
from puzzle_bench.execution.instantiation import (
    instantiate,
    select_constructor,
    timed_instantiate,
)

from tests.stubs import ExplodingDay, LinesDay, NoConstructorDay


class TestSelectConstructor:
    """Test constructor selection."""

    def test_text_preferred_over_lines(self):
        """Whole text wins when both shapes are available."""
        descriptor = SolverDescriptor(1, "Both", from_text=str.upper, from_lines=len)
        shape, factory = select_constructor(descriptor)
        assert shape is InputShape.TEXT
        assert factory is str.upper

    def test_lines_used_when_no_text(self):
        """Lines constructor is used when it is the only one."""
        descriptor = SolverDescriptor(1, "Lines", from_lines=len)
        shape, _ = select_constructor(descriptor)
        assert shape is InputShape.LINES

    def test_no_constructor_raises(self):
        """Neither shape raises NoSuitableConstructorError."""
        with pytest.raises(NoSuitableConstructorError, match="No suitable constructor found."):
            select_constructor(SolverDescriptor.for_class(NoConstructorDay))


class TestInstantiate:
    """Test instantiate function."""

    def test_text_payload(self, counting_day):
        """Text solvers receive the payload unchanged."""
        day = instantiate(SolverDescriptor.for_class(counting_day), "a\nb\n")
        assert day.text == "a\nb\n"

    def test_lines_split_without_trimming(self):
        """Lines solvers receive the payload split on newlines, untrimmed."""
        day = instantiate(SolverDescriptor.for_class(LinesDay), " 1\n2 \n")
        assert day.lines == [" 1", "2 ", ""]

    def test_constructor_error_wrapped(self):
        """Exceptions from the constructor become ConstructionError."""
        with pytest.raises(ConstructionError) as exc_info:
            instantiate(SolverDescriptor.for_class(ExplodingDay), "bad")

        error = exc_info.value
        assert isinstance(error.__cause__, ValueError)
        assert "cannot parse 'bad'" in str(error)
        assert "Traceback" in error.details


class TestTimedInstantiate:
    """Test timed_instantiate function."""

    def test_repeats_build_and_average(self, counting_day, clock):
        """Builds repeat times, keeps the last instance and averages durations."""
        durations = iter([2.0, 4.0, 6.0])

        def factory(text):
            clock.advance_ms(next(durations))
            return counting_day(text)

        descriptor = SolverDescriptor(7, "CountingDay", from_text=factory)
        source = MemoryInputSource({7: "input"})

        built = timed_instantiate(descriptor, source, repeats=3, clock=clock)

        assert counting_day.constructed == 3
        assert built.instance.text == "input"
        assert built.elapsed_ms == pytest.approx(4.0)

    def test_lines_read_from_source(self, clock):
        """Lines solvers get the source's line split (no trailing empty line)."""
        descriptor = SolverDescriptor.for_class(LinesDay)
        built = timed_instantiate(descriptor, MemoryInputSource({3: "1\n2\n"}), clock=clock)
        assert built.instance.lines == ["1", "2"]

    def test_each_build_gets_fresh_lines(self, clock):
        """Constructors mutating their lines do not affect later builds."""
        seen = []

        def factory(lines):
            seen.append(list(lines))
            lines.clear()
            return lines

        descriptor = SolverDescriptor(3, "Mutating", from_lines=factory)
        timed_instantiate(descriptor, MemoryInputSource({3: "a\nb"}), repeats=2, clock=clock)

        assert seen == [["a", "b"], ["a", "b"]]

    def test_missing_input_raises(self, counting_day, clock):
        """A missing input propagates InputNotFoundError."""
        descriptor = SolverDescriptor.for_class(counting_day)
        with pytest.raises(InputNotFoundError):
            timed_instantiate(descriptor, MemoryInputSource({}), clock=clock)
