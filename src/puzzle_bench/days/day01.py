"""Day 1: compare two lists of location IDs."""

from __future__ import annotations

from collections import Counter

from ..core.day import Day, InputShape, TestCase


class Day01(Day):
    day_number = 1
    input_shape = InputShape.LINES
    tests = (
        TestCase(
            "3   4\n"
            "4   3\n"
            "2   5\n"
            "1   3\n"
            "3   9\n"
            "3   3",
            part1="11",
            part2="31",
        ),
    )

    def __init__(self, lines: list[str]):
        self.left: list[int] = []
        self.right: list[int] = []
        for line in lines:
            if not line.strip():
                continue
            left, right = line.split()
            self.left.append(int(left))
            self.right.append(int(right))

    async def solve1(self) -> str:
        pairs = zip(sorted(self.left), sorted(self.right))
        return str(sum(abs(a - b) for a, b in pairs))

    async def solve2(self) -> str:
        counts = Counter(self.right)
        return str(sum(value * counts[value] for value in self.left))
