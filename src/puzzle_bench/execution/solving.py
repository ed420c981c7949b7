"""Solving a day's real input with timing."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

from ..core.config import RunConfiguration
from ..core.inputs import InputSource
from ..core.registry import SolverDescriptor
from ..exceptions import ConstructionError, PuzzleBenchError
from ..reporting.aggregate import ElapsedTimeRecord
from ..reporting.reporter import PLACEHOLDER, Reporter, SolveRow
from .instantiation import timed_instantiate
from .timing import Clock, TimedResult, measure

logger = logging.getLogger(__name__)


@dataclass
class DayResult:
    """Outcome of solving one day."""

    day_number: int
    title: str
    elapsed: ElapsedTimeRecord = field(default_factory=ElapsedTimeRecord)
    part1: str = PLACEHOLDER
    part2: str = PLACEHOLDER
    error: str | None = None
    """Construction or input failure; parts were not run when set"""

    @property
    def solved(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "day": self.day_number,
            "title": self.title,
            "part1": self.part1,
            "part2": self.part2,
            "elapsed_ms": self.elapsed.to_dict(),
            "error": self.error,
        }


def _report_degraded(
    descriptor: SolverDescriptor, message: str, reporter: Reporter, config: RunConfiguration
) -> DayResult:
    title = descriptor.name
    reporter.solve_row(SolveRow(title, f"{title}()", message, 0.0))
    reporter.solve_row(SolveRow(title, "Part 1", PLACEHOLDER, 0.0))
    reporter.solve_row(SolveRow(title, "Part 2", PLACEHOLDER, 0.0))
    if config.show_total_elapsed_time_per_day:
        reporter.solve_row(SolveRow(title, "Total", PLACEHOLDER, 0.0))
    reporter.day_break()

    return DayResult(day_number=descriptor.day_number, title=title, error=message)


async def solve_day(
    descriptor: SolverDescriptor,
    source: InputSource,
    config: RunConfiguration,
    reporter: Reporter,
    clock: Clock = time.perf_counter,
) -> DayResult:
    """Build a solver from its input and time both parts.

    When the solver cannot be built (no constructor, missing input or a
    raising constructor) a degraded result with zero durations is returned
    and neither part is run.

    Args:
        descriptor: Solver to run
        source: Supplies the day's input
        config: Repeats and which rows to show
        reporter: Receives the solve rows
        clock: Monotonic clock in seconds

    Returns:
        DayResult with answers and phase durations
    """
    repeats = config.measurement_repeats
    title = descriptor.title

    try:
        built = timed_instantiate(descriptor, source, repeats, clock)
    except ConstructionError as e:
        logger.warning("%s failed to build: %s", descriptor.name, e)
        return _report_degraded(descriptor, e.details, reporter, config)
    except PuzzleBenchError as e:
        logger.warning("%s cannot be solved: %s", descriptor.name, e)
        return _report_degraded(descriptor, str(e), reporter, config)

    day = built.instance
    if config.show_constructor_elapsed_time:
        reporter.solve_row(SolveRow(title, f"{type(day).__name__}()", PLACEHOLDER, built.elapsed_ms))

    part1: TimedResult = await measure(day.solve1, repeats, clock)
    reporter.solve_row(SolveRow(title, "Part 1", part1.result, part1.elapsed_ms))

    part2: TimedResult = await measure(day.solve2, repeats, clock)
    reporter.solve_row(SolveRow(title, "Part 2", part2.result, part2.elapsed_ms))

    elapsed = ElapsedTimeRecord(built.elapsed_ms, part1.elapsed_ms, part2.elapsed_ms)
    if config.show_total_elapsed_time_per_day:
        reporter.solve_row(SolveRow(title, "Total", PLACEHOLDER, elapsed.total))

    reporter.day_break()
    logger.debug(
        "%s: constructor %.3f ms, part 1 %.3f ms, part 2 %.3f ms",
        title,
        elapsed.constructor,
        elapsed.part1,
        elapsed.part2,
    )

    return DayResult(
        day_number=descriptor.day_number,
        title=title,
        elapsed=elapsed,
        part1=part1.result,
        part2=part2.result,
    )
