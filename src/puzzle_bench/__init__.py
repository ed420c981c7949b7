"""Puzzle Bench - Run, verify and benchmark daily puzzle solvers."""

__version__ = "0.1.0"

from .core.day import Day, InputShape, TestCase, NOT_IMPLEMENTED
from .core.config import RunConfiguration
from .core.registry import SolverDescriptor, SolverRegistry, discover
from .execution.runner import BatchResult, Runner, solve, solve_last, solve_list, solve_all

__all__ = [
    "Day",
    "InputShape",
    "TestCase",
    "NOT_IMPLEMENTED",
    "RunConfiguration",
    "SolverDescriptor",
    "SolverRegistry",
    "discover",
    "BatchResult",
    "Runner",
    "solve",
    "solve_last",
    "solve_list",
    "solve_all",
]
