"""Checking solvers against their example test cases."""

from __future__ import annotations

import logging

from ..core.registry import SolverDescriptor
from ..exceptions import ConstructionError, NoSuitableConstructorError
from ..reporting.reporter import PLACEHOLDER, Reporter, TestRow
from .instantiation import instantiate
from .timing import measure

logger = logging.getLogger(__name__)


def _report_construction_failure(descriptor: SolverDescriptor, message: str, reporter: Reporter) -> None:
    title = descriptor.name
    reporter.test_row(TestRow(title, f"{title}()", message, "", False))
    reporter.test_row(TestRow(title, "Part 1", PLACEHOLDER, PLACEHOLDER, False))
    reporter.test_row(TestRow(title, "Part 2", PLACEHOLDER, PLACEHOLDER, False))
    reporter.day_break()


async def run_tests(descriptor: SolverDescriptor, reporter: Reporter) -> bool:
    """Run every test case of a solver.

    Each test case gets a fresh instance. Only parts with an expected
    answer are executed; answers are compared by exact string equality.

    Args:
        descriptor: Solver to test
        reporter: Receives one row per checked part

    Returns:
        True if every checked part of every test case passed (True when
        the solver has no test cases)
    """
    success = True

    for index, case in enumerate(descriptor.tests, start=1):
        try:
            day = instantiate(descriptor, case.input)
        except NoSuitableConstructorError as e:
            logger.warning("%s: %s", descriptor.name, e)
            _report_construction_failure(descriptor, str(e), reporter)
            success = False
            continue
        except ConstructionError as e:
            logger.warning("%s: test case %d failed to build: %s", descriptor.name, index, e)
            _report_construction_failure(descriptor, e.details, reporter)
            success = False
            continue

        checks = (
            ("Part 1", case.part1, day.solve1),
            ("Part 2", case.part2, day.solve2),
        )
        for part, expected, operation in checks:
            if expected is None:
                continue

            actual = (await measure(operation, repeats=1)).result
            passed = actual == expected
            if not passed:
                logger.warning(
                    "%s test case %d %s: expected %r, got %r",
                    descriptor.title,
                    index,
                    part,
                    expected,
                    actual,
                )
            reporter.test_row(TestRow(descriptor.title, part, actual, expected, passed))
            success = success and passed

        reporter.day_break()

    return success
