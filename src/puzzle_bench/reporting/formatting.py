"""Human-scaled duration formatting."""

from __future__ import annotations

import math

# (upper bound in ms, rich color)
TIME_COLORS: list[tuple[float, str]] = [
    (1, "blue"),
    (10, "green1"),
    (100, "bright_green"),
    (500, "green_yellow"),
    (1_000, "yellow1"),
    (10_000, "orange_red1"),
]
SLOWEST_COLOR = "red1"


def format_time(elapsed_ms: float, format_spec: str | None = None) -> str:
    """Format milliseconds for display.

    Default scaling:
        0.5     -> "0.50 ms"
        999     -> "999 ms"
        1500    -> "1.50 s"
        125000  -> "2 min 5 s"

    With a format_spec (a Python format spec such as ".3f") the same units
    are used but numbers are formatted with it.
    """
    if format_spec is None:
        if elapsed_ms < 1:
            return f"{elapsed_ms:.2f} ms"
        if elapsed_ms < 1_000:
            return f"{round(elapsed_ms)} ms"
        if elapsed_ms < 60_000:
            return f"{0.001 * elapsed_ms:.2f} s"
        minutes, seconds = divmod(round(0.001 * elapsed_ms), 60)
        return f"{minutes} min {seconds} s"

    if elapsed_ms < 1_000:
        return f"{format(elapsed_ms, format_spec)} ms"
    if elapsed_ms < 60_000:
        return f"{format(0.001 * elapsed_ms, format_spec)} s"
    return f"{math.floor(elapsed_ms / 60_000)} min {format(0.001 * (elapsed_ms % 60_000), format_spec)} s"


def time_color(elapsed_ms: float) -> str:
    """Color tier for a duration."""
    for bound, color in TIME_COLORS:
        if elapsed_ms < bound:
            return color
    return SLOWEST_COLOR


def colorize_time(elapsed_ms: float, format_spec: str | None = None) -> str:
    """Formatted duration wrapped in rich color markup."""
    color = time_color(elapsed_ms)
    return f"[{color}]{format_time(elapsed_ms, format_spec)}[/{color}]"
