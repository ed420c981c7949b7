"""Solver registry and discovery.

Discovery imports the configured sources (modules or packages), collects
every concrete ``Day`` subclass defined in them and returns a registry
ordered by day number.

Example:
    registry = discover(["puzzle_bench.days"])

    for descriptor in registry:
        print(descriptor.title, len(descriptor.tests))

    last = registry.last()
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, Callable, Iterable, Iterator

from ..exceptions import DiscoveryError
from .day import Day, InputShape, TestCase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverDescriptor:
    """Static description of one solver implementation."""

    day_number: int
    """Identity used for ordering and selection"""

    name: str
    """Implementation name (class name for Day subclasses)"""

    tests: tuple[TestCase, ...] = ()
    """Example test cases"""

    from_text: Callable[[str], Any] | None = None
    """Factory receiving the whole input"""

    from_lines: Callable[[list[str]], Any] | None = None
    """Factory receiving the input split into lines"""

    @classmethod
    def for_class(cls, day_cls: type[Day]) -> SolverDescriptor:
        """Describe a Day subclass."""
        shape = day_cls.input_shape
        return cls(
            day_number=int(day_cls.day_number),
            name=day_cls.__name__,
            tests=tuple(day_cls.tests or ()),
            from_text=day_cls if shape is InputShape.TEXT else None,
            from_lines=day_cls if shape is InputShape.LINES else None,
        )

    @property
    def title(self) -> str:
        """Display title: "Day N", or the name for unnumbered solvers."""
        if self.day_number:
            return f"Day {self.day_number}"
        return self.name

    @property
    def input_shape(self) -> InputShape | None:
        """Constructor shape used to build instances; text wins over lines."""
        if self.from_text is not None:
            return InputShape.TEXT
        if self.from_lines is not None:
            return InputShape.LINES
        return None

    @property
    def sort_key(self) -> tuple[int, str]:
        return (self.day_number, self.name)


@dataclass
class SolverRegistry:
    """Ordered collection of solver descriptors."""

    descriptors: list[SolverDescriptor] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.descriptors.sort(key=lambda d: d.sort_key)

    def __iter__(self) -> Iterator[SolverDescriptor]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    def add(self, descriptor: SolverDescriptor) -> SolverDescriptor:
        """Add a descriptor, keeping the registry ordered."""
        self.descriptors.append(descriptor)
        self.descriptors.sort(key=lambda d: d.sort_key)
        return descriptor

    def register(self, day_cls: type[Day]) -> type[Day]:
        """Class decorator registering a Day subclass.

        Example:
            registry = SolverRegistry()

            @registry.register
            class Day03(Day):
                ...
        """
        self.add(SolverDescriptor.for_class(day_cls))
        return day_cls

    def get(self, day_number: int) -> SolverDescriptor | None:
        """Get the first descriptor with the given day number."""
        for descriptor in self.descriptors:
            if descriptor.day_number == day_number:
                return descriptor
        return None

    def last(self) -> SolverDescriptor | None:
        """Get the descriptor with the highest day number."""
        return self.descriptors[-1] if self.descriptors else None

    def select(self, day_numbers: Iterable[int]) -> list[SolverDescriptor]:
        """Get descriptors whose day number is in day_numbers, in registry order."""
        wanted = set(day_numbers)
        return [d for d in self.descriptors if d.day_number in wanted]

    @property
    def day_numbers(self) -> list[int]:
        return [d.day_number for d in self.descriptors]


def _import_source(source: str | ModuleType) -> ModuleType:
    if isinstance(source, ModuleType):
        return source
    return importlib.import_module(source)


def _iter_modules(module: ModuleType, strict: bool) -> Iterator[ModuleType]:
    """Yield a module and, for packages, all of its submodules."""
    yield module

    if not hasattr(module, "__path__"):
        return

    # import failures are reported by the loop below
    packages = pkgutil.walk_packages(module.__path__, prefix=f"{module.__name__}.", onerror=lambda name: None)
    for info in packages:
        try:
            yield importlib.import_module(info.name)
        except Exception as e:
            if strict:
                raise DiscoveryError(f"Cannot import {info.name}: {e}") from e
            logger.warning("Skipping solver module %s: %s", info.name, e)


def _is_solver_class(obj: Any, module: ModuleType) -> bool:
    return (
        inspect.isclass(obj)
        and issubclass(obj, Day)
        and obj is not Day
        and not inspect.isabstract(obj)
        and obj.__module__ == module.__name__
    )


def discover(sources: Iterable[str | ModuleType], strict: bool = False) -> SolverRegistry:
    """Find every concrete Day subclass in the given sources.

    Args:
        sources: Dotted module names or module objects; packages are
            walked recursively
        strict: Raise DiscoveryError instead of skipping sources that
            cannot be imported

    Returns:
        Registry ordered by (day_number, class name)

    Raises:
        DiscoveryError: If strict and a source cannot be imported
    """
    seen: set[type] = set()
    registry = SolverRegistry()

    for source in sources:
        try:
            module = _import_source(source)
        except Exception as e:
            if strict:
                raise DiscoveryError(f"Cannot import {source}: {e}") from e
            logger.warning("Skipping solver source %s: %s", source, e)
            continue

        for scanned in _iter_modules(module, strict):
            for _, obj in inspect.getmembers(scanned, lambda o: _is_solver_class(o, scanned)):
                if obj in seen:
                    continue
                seen.add(obj)
                registry.add(SolverDescriptor.for_class(obj))

    logger.debug("Discovered days: %s", registry.day_numbers)
    return registry
