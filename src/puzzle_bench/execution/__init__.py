"""Instantiation, timing, testing and solving of puzzle solvers."""

from .timing import TimedResult, ResultStatus, measure, NOT_IMPLEMENTED_RESULT
from .instantiation import TimedInstance, instantiate, timed_instantiate, select_constructor
from .testing import run_tests
from .solving import DayResult, solve_day
from .runner import BatchResult, Runner, solve, solve_last, solve_list, solve_all

__all__ = [
    "TimedResult",
    "ResultStatus",
    "measure",
    "NOT_IMPLEMENTED_RESULT",
    "TimedInstance",
    "instantiate",
    "timed_instantiate",
    "select_constructor",
    "run_tests",
    "DayResult",
    "solve_day",
    "BatchResult",
    "Runner",
    "solve",
    "solve_last",
    "solve_list",
    "solve_all",
]
