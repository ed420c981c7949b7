"""Invocation modes: solve one day, the last day, a list of days or all days.

Example:
    import asyncio
    from puzzle_bench import RunConfiguration, Runner

    config = RunConfiguration(run_tests=True, sources=["my_puzzles.days"])
    result = asyncio.run(Runner(config).solve_all())
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from ..core.config import RunConfiguration
from ..core.inputs import FileInputSource, InputSource
from ..core.registry import SolverDescriptor, SolverRegistry, discover
from ..reporting.aggregate import ElapsedTimeRecord, OverallResults, overall_results
from ..reporting.console import RichReporter
from ..reporting.reporter import Reporter
from .solving import DayResult, solve_day
from .testing import run_tests
from .timing import Clock

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Everything produced by one invocation."""

    tests_passed: bool = True
    """False when the test phase ran and any check failed"""

    days: list[DayResult] = field(default_factory=list)

    overall: OverallResults | None = None
    """Batch summary; only set for list/all runs with more than one solved day"""

    @property
    def records(self) -> list[ElapsedTimeRecord]:
        """Timings of the days that were actually solved."""
        return [d.elapsed for d in self.days if d.solved]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "tests_passed": self.tests_passed,
            "days": [d.to_dict() for d in self.days],
            "overall": self.overall.to_dict() if self.overall else None,
        }


class Runner:
    """Runs tests and solves for the days of a registry.

    Collaborators default to what the configuration describes: solvers
    discovered from ``config.sources``, inputs read from
    ``config.input_dir`` and output drawn with rich.
    """

    def __init__(
        self,
        config: RunConfiguration | None = None,
        registry: SolverRegistry | None = None,
        reporter: Reporter | None = None,
        source: InputSource | None = None,
        clock: Clock = time.perf_counter,
    ):
        self.config = config or RunConfiguration()
        self.registry = registry if registry is not None else discover(
            self.config.sources, strict=self.config.strict_discovery
        )
        self.reporter = reporter or RichReporter(format_spec=self.config.elapsed_time_format_specifier)
        self.source = source or FileInputSource(self.config.input_dir)
        self.clock = clock

    async def run_batch(self, descriptors: Sequence[SolverDescriptor], aggregate: bool = False) -> BatchResult:
        """Test (when enabled) and solve the given days in order.

        Args:
            descriptors: Days to run
            aggregate: Compute and report overall results

        Returns:
            BatchResult
        """
        config = self.config
        reporter = self.reporter
        result = BatchResult()

        if config.clear_console:
            reporter.clear()

        if config.run_tests:
            reporter.begin_tests()
            try:
                for descriptor in descriptors:
                    if not await run_tests(descriptor, reporter):
                        result.tests_passed = False
            finally:
                reporter.end_tests(result.tests_passed)

        reporter.begin_solve()
        try:
            for descriptor in descriptors:
                result.days.append(await solve_day(descriptor, self.source, config, reporter, self.clock))
        finally:
            reporter.end_solve()

        if aggregate:
            result.overall = overall_results(
                result.records,
                enabled=config.show_overall_results,
                include_constructor=config.show_constructor_elapsed_time,
            )
            if result.overall is not None:
                reporter.summary(result.overall)

        return result

    async def solve(self, day_number: int) -> BatchResult:
        """Solve a single day."""
        descriptor = self.registry.get(day_number)
        if descriptor is None:
            logger.warning("No solver found for day %d", day_number)
        return await self.run_batch([descriptor] if descriptor else [])

    async def solve_last(self) -> BatchResult:
        """Solve the day with the highest number."""
        descriptor = self.registry.last()
        if descriptor is None:
            logger.warning("No solvers found in %s", ", ".join(map(str, self.config.sources)))
        return await self.run_batch([descriptor] if descriptor else [])

    async def solve_list(self, day_numbers: Iterable[int]) -> BatchResult:
        """Solve the given days, in day order."""
        day_numbers = list(day_numbers)
        descriptors = self.registry.select(day_numbers)
        missing = sorted(set(day_numbers) - {d.day_number for d in descriptors})
        if missing:
            logger.warning("No solver found for days %s", missing)
        return await self.run_batch(descriptors, aggregate=True)

    async def solve_all(self) -> BatchResult:
        """Solve every discovered day."""
        return await self.run_batch(list(self.registry), aggregate=True)


async def solve(day_number: int, config: RunConfiguration | None = None, **kwargs: Any) -> BatchResult:
    """Solve a single day; kwargs are passed to Runner."""
    return await Runner(config, **kwargs).solve(day_number)


async def solve_last(config: RunConfiguration | None = None, **kwargs: Any) -> BatchResult:
    """Solve the last day; kwargs are passed to Runner."""
    return await Runner(config, **kwargs).solve_last()


async def solve_list(
    day_numbers: Iterable[int], config: RunConfiguration | None = None, **kwargs: Any
) -> BatchResult:
    """Solve the given days; kwargs are passed to Runner."""
    return await Runner(config, **kwargs).solve_list(day_numbers)


async def solve_all(config: RunConfiguration | None = None, **kwargs: Any) -> BatchResult:
    """Solve every day; kwargs are passed to Runner."""
    return await Runner(config, **kwargs).solve_all()
