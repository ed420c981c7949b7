"""Tests for solver registry and discovery."""

from __future__ import annotations

import logging
import types

import pytest

from puzzle_bench.core.day import InputShape
from puzzle_bench.core.registry import SolverDescriptor, SolverRegistry, discover
from puzzle_bench.exceptions import DiscoveryError

from tests.stubs import CountingDay, LinesDay, NoConstructorDay


class TestSolverDescriptor:
    """Test SolverDescriptor."""

    def test_for_class_text(self):
        """Text solvers get a text factory only."""
        descriptor = SolverDescriptor.for_class(CountingDay)
        assert descriptor.day_number == 7
        assert descriptor.name == "CountingDay"
        assert descriptor.from_text is CountingDay
        assert descriptor.from_lines is None
        assert descriptor.input_shape is InputShape.TEXT
        assert len(descriptor.tests) == 1

    def test_for_class_lines(self):
        """Lines solvers get a lines factory only."""
        descriptor = SolverDescriptor.for_class(LinesDay)
        assert descriptor.from_lines is LinesDay
        assert descriptor.input_shape is InputShape.LINES

    def test_for_class_without_shape(self):
        """Solvers without input_shape have no factory."""
        descriptor = SolverDescriptor.for_class(NoConstructorDay)
        assert descriptor.input_shape is None

    def test_title(self):
        """Numbered solvers are titled by day; unnumbered by name."""
        assert SolverDescriptor(4, "Whatever").title == "Day 4"
        assert SolverDescriptor(0, "Scratch").title == "Scratch"


class TestSolverRegistry:
    """Test SolverRegistry."""

    def test_ordered_by_day_number(self):
        """Descriptors are kept in ascending day order."""
        registry = SolverRegistry()
        registry.add(SolverDescriptor(10, "Ten"))
        registry.add(SolverDescriptor(2, "Two"))
        registry.add(SolverDescriptor(5, "Five"))
        assert registry.day_numbers == [2, 5, 10]

    def test_register_decorator(self):
        """register adds a Day subclass and returns it unchanged."""
        registry = SolverRegistry()
        assert registry.register(LinesDay) is LinesDay
        assert registry.get(3).name == "LinesDay"

    def test_get_missing(self, registry):
        """Unknown days return None."""
        assert registry.get(99) is None

    def test_last(self, registry):
        """last returns the highest day."""
        assert registry.last().day_number == 7
        assert SolverRegistry().last() is None

    def test_select_keeps_registry_order(self, registry):
        """select returns matching days in ascending order."""
        selected = registry.select([7, 3, 42])
        assert [d.day_number for d in selected] == [3, 7]

    def test_non_contiguous_numbers(self):
        """Day numbers need not be contiguous."""
        registry = SolverRegistry([SolverDescriptor(25, "b"), SolverDescriptor(1, "a")])
        assert registry.day_numbers == [1, 25]


class TestDiscover:
    """Test discover function."""

    def test_walks_package(self, solver_package):
        """All concrete Day subclasses in the package tree are found, ordered."""
        registry = discover([solver_package])
        assert registry.day_numbers == [2, 5, 10]
        assert [d.name for d in registry] == ["Day02", "Day05", "Day10"]

    def test_abstract_subclasses_skipped(self, solver_package):
        """Abstract intermediate classes are not solvers."""
        names = [d.name for d in discover([solver_package])]
        assert "Day02Base" not in names

    def test_order_stable(self, solver_package):
        """Discovering twice yields the same order."""
        first = discover([solver_package]).day_numbers
        second = discover([solver_package]).day_numbers
        assert first == second

    def test_broken_module_skipped(self, solver_package, caplog):
        """Modules that fail to import are logged and skipped."""
        with caplog.at_level(logging.WARNING, logger="puzzle_bench.core.registry"):
            registry = discover([solver_package])
        assert len(registry) == 3
        assert "pkg_days.broken" in caplog.text

    def test_broken_module_strict(self, solver_package):
        """Strict discovery raises on the first module that cannot be imported."""
        with pytest.raises(DiscoveryError, match="pkg_days.broken"):
            discover([solver_package], strict=True)

    def test_missing_source_skipped(self):
        """Sources that do not exist are skipped."""
        registry = discover(["puzzle_bench_no_such_module"])
        assert len(registry) == 0

    def test_missing_source_strict(self):
        """Strict discovery raises for sources that do not exist."""
        with pytest.raises(DiscoveryError):
            discover(["puzzle_bench_no_such_module"], strict=True)

    def test_module_object_source(self):
        """Module objects are scanned directly."""
        module = types.ModuleType("adhoc_days")
        exec(
            "from puzzle_bench import Day, InputShape\n"
            "class Day08(Day):\n"
            "    day_number = 8\n"
            "    input_shape = InputShape.TEXT\n"
            "    def __init__(self, text):\n"
            "        pass\n"
            "    async def solve1(self):\n"
            "        return '1'\n"
            "    async def solve2(self):\n"
            "        return '2'\n",
            module.__dict__,
        )

        registry = discover([module])

        assert registry.day_numbers == [8]

    def test_duplicate_sources_deduplicated(self, solver_package):
        """A class reachable from two sources is registered once."""
        registry = discover([solver_package, f"{solver_package}.day10"])
        assert registry.day_numbers == [2, 5, 10]

    def test_bundled_days(self):
        """The bundled package contains day 1."""
        assert 1 in discover(["puzzle_bench.days"]).day_numbers
