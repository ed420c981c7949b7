"""Building solver instances from input."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

from ..core.day import InputShape
from ..core.inputs import InputSource, split_lines
from ..core.registry import SolverDescriptor
from ..exceptions import ConstructionError, NoSuitableConstructorError
from .timing import Clock, elapsed_ms

logger = logging.getLogger(__name__)


@dataclass
class TimedInstance:
    """A built solver with the mean construction time."""

    instance: Any
    elapsed_ms: float


def select_constructor(descriptor: SolverDescriptor) -> tuple[InputShape, Callable[[Any], Any]]:
    """Pick the constructor to use; whole text is preferred over lines.

    Raises:
        NoSuitableConstructorError: If the solver declares neither shape
    """
    if descriptor.from_text is not None:
        return InputShape.TEXT, descriptor.from_text
    if descriptor.from_lines is not None:
        return InputShape.LINES, descriptor.from_lines
    raise NoSuitableConstructorError()


def construct(factory: Callable[[Any], Any], argument: Any) -> Any:
    """Call a solver constructor.

    Raises:
        ConstructionError: If the constructor raises
    """
    try:
        return factory(argument)
    except Exception as e:
        raise ConstructionError.from_exception(e) from e


def instantiate(descriptor: SolverDescriptor, payload: str) -> Any:
    """Build a fresh solver from a raw payload (used for test cases).

    Raises:
        NoSuitableConstructorError: If the solver has no constructor
        ConstructionError: If the constructor raises
    """
    shape, factory = select_constructor(descriptor)
    argument = payload if shape is InputShape.TEXT else split_lines(payload)
    return construct(factory, argument)


def timed_instantiate(
    descriptor: SolverDescriptor,
    source: InputSource,
    repeats: int = 1,
    clock: Clock = time.perf_counter,
) -> TimedInstance:
    """Read a day's input once and build the solver ``repeats`` times.

    The last instance is kept; the duration is the mean over all builds.
    Every build receives its own copy of the lines, so constructors that
    mutate their argument do not affect later builds.

    Raises:
        NoSuitableConstructorError: If the solver has no constructor
        InputNotFoundError: If the input file does not exist
        InputReadError: If the input file cannot be read
        ConstructionError: If the constructor raises
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    shape, factory = select_constructor(descriptor)
    if shape is InputShape.TEXT:
        payload: Any = source.read_text(descriptor.day_number)
    else:
        payload = source.read_lines(descriptor.day_number)

    instance = None
    total = 0.0
    for _ in range(repeats):
        argument = payload if shape is InputShape.TEXT else list(payload)
        start = clock()
        instance = construct(factory, argument)
        total += elapsed_ms(start, clock())

    mean = total / repeats
    logger.debug("%s built in %.3f ms (%d runs)", descriptor.name, mean, repeats)
    return TimedInstance(instance=instance, elapsed_ms=mean)
