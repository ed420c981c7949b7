"""Timing records and batch aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class ElapsedTimeRecord:
    """Phase durations of one solved day, in milliseconds."""

    constructor: float = 0.0
    part1: float = 0.0
    part2: float = 0.0

    @property
    def total(self) -> float:
        return self.constructor + self.part1 + self.part2

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary."""
        return {
            "constructor": self.constructor,
            "part1": self.part1,
            "part2": self.part2,
        }


@dataclass(frozen=True)
class OverallResults:
    """Totals and means over a batch of solved days."""

    count: int
    total_constructor: float
    total_part1: float
    total_part2: float
    total: float
    """Part 1 + part 2, plus constructors when included"""

    mean: float
    """Total divided by the number of days"""

    mean_constructor: float
    mean_part1: float
    mean_part2: float
    include_constructor: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "count": self.count,
            "total": self.total,
            "total_constructor": self.total_constructor,
            "total_part1": self.total_part1,
            "total_part2": self.total_part2,
            "mean": self.mean,
            "mean_constructor": self.mean_constructor,
            "mean_part1": self.mean_part1,
            "mean_part2": self.mean_part2,
            "include_constructor": self.include_constructor,
        }


def summarize(records: Sequence[ElapsedTimeRecord], include_constructor: bool = False) -> OverallResults:
    """Aggregate a batch of records.

    Raises:
        ValueError: If records is empty
    """
    if not records:
        raise ValueError("Cannot summarize an empty batch")

    count = len(records)
    total_constructor = sum(r.constructor for r in records)
    total_part1 = sum(r.part1 for r in records)
    total_part2 = sum(r.part2 for r in records)
    total = total_part1 + total_part2 + (total_constructor if include_constructor else 0.0)

    return OverallResults(
        count=count,
        total_constructor=total_constructor,
        total_part1=total_part1,
        total_part2=total_part2,
        total=total,
        mean=total / count,
        mean_constructor=total_constructor / count,
        mean_part1=total_part1 / count,
        mean_part2=total_part2 / count,
        include_constructor=include_constructor,
    )


def overall_results(
    records: Sequence[ElapsedTimeRecord],
    enabled: bool = True,
    include_constructor: bool = False,
) -> OverallResults | None:
    """Batch summary, only for enabled runs with more than one day."""
    if not enabled or len(records) <= 1:
        return None
    return summarize(records, include_constructor)
