"""Custom exception hierarchy for puzzle-bench.

This module provides a structured exception hierarchy that:
1. Separates setup failures from per-day failures
2. Preserves context through exception chaining
3. Lets the runner convert per-day failures into report rows

Usage:
    from puzzle_bench.exceptions import (
        PuzzleBenchError,
        NoSuitableConstructorError,
        ConstructionError,
    )

    try:
        day = instantiate(descriptor, payload)
    except NoSuitableConstructorError as e:
        print(f"Cannot build: {e}")
    except ConstructionError as e:
        print(f"Parsing failed: {e.details}")
"""

from __future__ import annotations

import traceback


class PuzzleBenchError(Exception):
    """Base exception for all puzzle-bench errors.

    All custom exceptions in this package inherit from this class,
    making it easy to catch any puzzle-bench error with a single
    except clause.
    """

    pass


class ConfigurationError(PuzzleBenchError):
    """Invalid run configuration.

    Raised when:
    - A configuration file is unreadable or not a mapping
    - A setting has an invalid value (e.g., measurement_repeats < 1)
    """

    pass


class DiscoveryError(PuzzleBenchError):
    """A solver source could not be inspected.

    Only raised when discovery runs in strict mode; otherwise the
    source is logged and skipped.
    """

    pass


class InputNotFoundError(PuzzleBenchError):
    """The input file for a day does not exist."""

    pass


class InputReadError(PuzzleBenchError):
    """The input file for a day exists but cannot be read.

    Raised when:
    - The path is a directory or is not readable
    - The file is not valid UTF-8
    """

    pass


class NoSuitableConstructorError(PuzzleBenchError):
    """The solver declares neither a text nor a lines constructor."""

    def __init__(self, message: str = "No suitable constructor found."):
        super().__init__(message)


class ConstructionError(PuzzleBenchError):
    """The solver's constructor raised while parsing its input.

    The original exception is chained as ``__cause__`` and its full
    traceback text is kept in ``details`` for reporting.
    """

    def __init__(self, message: str, details: str = ""):
        super().__init__(message)
        self.details = details or message

    @classmethod
    def from_exception(cls, exc: BaseException) -> ConstructionError:
        """Wrap an exception raised by a solver constructor."""
        details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        error = cls(f"{type(exc).__name__}: {exc}", details.rstrip())
        error.__cause__ = exc
        return error


class SolvingError(PuzzleBenchError):
    """Raised by solvers to signal an unsolvable input.

    The runner treats it like any other failure during a part and
    renders its message as the part's result.
    """

    pass
