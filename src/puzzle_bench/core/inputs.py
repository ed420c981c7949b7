"""Puzzle input sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..exceptions import InputNotFoundError, InputReadError


def input_filename(day_number: int) -> str:
    """Input file name for a day, e.g. 01.txt."""
    return f"{day_number:02d}.txt"


def split_lines(payload: str) -> list[str]:
    """Split a test payload on newlines without trimming."""
    return payload.split("\n")


class InputSource(ABC):
    """Supplies the real input of a day."""

    @abstractmethod
    def read_text(self, day_number: int) -> str:
        """Read the whole input."""
        pass

    def read_lines(self, day_number: int) -> list[str]:
        """Read the input as lines (a trailing newline adds no empty line)."""
        return self.read_text(day_number).splitlines()


class FileInputSource(InputSource):
    """Reads NN.txt files from a directory."""

    def __init__(self, directory: Path | str = "."):
        self.directory = Path(directory)

    def path_for(self, day_number: int) -> Path:
        return self.directory / input_filename(day_number)

    def read_text(self, day_number: int) -> str:
        path = self.path_for(day_number)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise InputNotFoundError(f"Input file not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"Cannot read input file {path}: {e}") from e


class MemoryInputSource(InputSource):
    """Serves inputs from a mapping of day number to text."""

    def __init__(self, inputs: dict[int, str]):
        self.inputs = dict(inputs)

    def read_text(self, day_number: int) -> str:
        if day_number not in self.inputs:
            raise InputNotFoundError(f"No input for day {day_number}")
        return self.inputs[day_number]
