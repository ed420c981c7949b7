"""Timed execution of solver parts.

``measure`` is the boundary between solver code and the runner: whatever a
part does (returns, returns NOT_IMPLEMENTED, raises), the caller gets a
``TimedResult`` with a printable result string.
"""

from __future__ import annotations

import inspect
import logging
import time
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from ..core.day import NOT_IMPLEMENTED

logger = logging.getLogger(__name__)

NOT_IMPLEMENTED_RESULT = "[Not implemented]"

Clock = Callable[[], float]


class ResultStatus(Enum):
    """How a timed call ended."""

    OK = "ok"
    NOT_IMPLEMENTED = "not_implemented"
    ERROR = "error"


@dataclass(frozen=True)
class TimedResult:
    """Result of a timed part."""

    result: str
    """Answer, sentinel or error text; never None"""

    elapsed_ms: float
    """Mean duration of the measured calls in milliseconds"""

    calls: int = 1
    """Number of invocations made"""

    status: ResultStatus = ResultStatus.OK

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK


def elapsed_ms(start: float, end: float) -> float:
    """Convert a clock interval in seconds to milliseconds."""
    return max(0.0, (end - start) * 1000.0)


def format_error(exc: BaseException) -> str:
    """Error message followed by its traceback."""
    trace = "".join(traceback.format_tb(exc.__traceback__)).rstrip()
    return f"{exc}\n{trace}"


async def invoke(operation: Callable[[], Any]) -> Any:
    """Call an operation, awaiting it when it returns an awaitable."""
    value = operation()
    if inspect.isawaitable(value):
        value = await value
    return value


async def measure(
    operation: Callable[[], Any],
    repeats: int = 1,
    clock: Clock = time.perf_counter,
) -> TimedResult:
    """Run an operation sequentially and time it.

    The result is the value of the last call and the duration is the mean
    over all calls. A call that is not implemented or raises ends the loop
    and is reported as a single measurement.

    Args:
        operation: Zero-argument callable, sync or async
        repeats: Number of calls (>= 1)
        clock: Monotonic clock in seconds

    Returns:
        TimedResult; exceptions are never propagated
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    total = 0.0
    value: Any = None

    for call in range(1, repeats + 1):
        start = clock()
        try:
            value = await invoke(operation)
        except NotImplementedError:
            return TimedResult(
                NOT_IMPLEMENTED_RESULT,
                elapsed_ms(start, clock()),
                calls=call,
                status=ResultStatus.NOT_IMPLEMENTED,
            )
        except Exception as e:
            duration = elapsed_ms(start, clock())
            logger.debug("Part raised %s after %.3f ms", type(e).__name__, duration)
            return TimedResult(format_error(e), duration, calls=call, status=ResultStatus.ERROR)
        duration = elapsed_ms(start, clock())

        if value is NOT_IMPLEMENTED:
            return TimedResult(
                NOT_IMPLEMENTED_RESULT,
                duration,
                calls=call,
                status=ResultStatus.NOT_IMPLEMENTED,
            )
        total += duration

    return TimedResult(str(value), total / repeats, calls=repeats)
