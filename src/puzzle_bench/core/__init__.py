"""Solver contract, discovery, configuration and inputs."""

from .day import Day, InputShape, TestCase, NOT_IMPLEMENTED
from .registry import SolverDescriptor, SolverRegistry, discover
from .config import RunConfiguration
from .inputs import InputSource, FileInputSource, MemoryInputSource, input_filename, split_lines

__all__ = [
    "Day",
    "InputShape",
    "TestCase",
    "NOT_IMPLEMENTED",
    "SolverDescriptor",
    "SolverRegistry",
    "discover",
    "RunConfiguration",
    "InputSource",
    "FileInputSource",
    "MemoryInputSource",
    "input_filename",
    "split_lines",
]
