"""Aggregation, formatting and rendering of run results."""

from .aggregate import ElapsedTimeRecord, OverallResults, summarize, overall_results
from .formatting import format_time, time_color, colorize_time
from .reporter import Reporter, RecordingReporter, TestRow, SolveRow, PLACEHOLDER
from .console import RichReporter

__all__ = [
    "ElapsedTimeRecord",
    "OverallResults",
    "summarize",
    "overall_results",
    "format_time",
    "time_color",
    "colorize_time",
    "Reporter",
    "RecordingReporter",
    "TestRow",
    "SolveRow",
    "PLACEHOLDER",
    "RichReporter",
]
