"""Run configuration."""

from __future__ import annotations

import yaml
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from ..exceptions import ConfigurationError


@dataclass
class RunConfiguration:
    """Behavioral switches for one run, loadable from YAML.

    Example puzzle-bench.yaml:
        run_tests: true
        show_constructor_elapsed_time: true
        measurement_repeats: 5
        sources:
          - my_puzzles.days
    """

    run_tests: bool = False
    """Run every day's test cases before solving"""

    clear_console: bool = True
    """Clear the terminal before a run (ignored when not a terminal)"""

    show_overall_results: bool = True
    """Show totals and means when more than one day is solved"""

    show_constructor_elapsed_time: bool = False
    """Show the time spent building the solver (normally input parsing)"""

    show_total_elapsed_time_per_day: bool = False
    """Show constructor + part 1 + part 2 per day"""

    elapsed_time_format_specifier: str | None = None
    """Python format spec for durations (e.g. ".3f"), replacing the default scaling"""

    sources: list[str] = field(default_factory=lambda: ["__main__"])
    """Modules or packages where solvers are located"""

    measurement_repeats: int = 1
    """How many times each phase is executed for timing"""

    input_dir: str = "."
    """Directory holding the NN.txt input files"""

    strict_discovery: bool = False
    """Fail instead of skipping sources that cannot be imported"""

    log_level: str = "WARNING"
    """Logging level for the CLI"""

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check setting values.

        Raises:
            ConfigurationError: If a setting is out of range
        """
        if not isinstance(self.measurement_repeats, int) or self.measurement_repeats < 1:
            raise ConfigurationError(
                f"measurement_repeats must be a positive integer, got {self.measurement_repeats!r}"
            )
        if self.elapsed_time_format_specifier is not None:
            try:
                format(0.0, self.elapsed_time_format_specifier)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"elapsed_time_format_specifier {self.elapsed_time_format_specifier!r} is not a valid format spec: {e}"
                ) from e
        if isinstance(self.sources, str):
            self.sources = [self.sources]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RunConfiguration:
        """Create from dictionary, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Path) -> RunConfiguration:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {path} must be a mapping")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "run_tests": self.run_tests,
            "clear_console": self.clear_console,
            "show_overall_results": self.show_overall_results,
            "show_constructor_elapsed_time": self.show_constructor_elapsed_time,
            "show_total_elapsed_time_per_day": self.show_total_elapsed_time_per_day,
            "elapsed_time_format_specifier": self.elapsed_time_format_specifier,
            "sources": list(self.sources),
            "measurement_repeats": self.measurement_repeats,
            "input_dir": self.input_dir,
            "strict_discovery": self.strict_discovery,
            "log_level": self.log_level,
        }

    def with_overrides(self, **changes: Any) -> RunConfiguration:
        """Copy with the given settings replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
