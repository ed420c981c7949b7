"""Command-line interface for Puzzle Bench."""

import asyncio
import json
import logging
import os
import sys
from pathlib import Path

import click

from . import __version__
from .core.config import RunConfiguration
from .core.registry import discover
from .exceptions import ConfigurationError, DiscoveryError
from .execution.runner import Runner

DEFAULT_SOURCE = "puzzle_bench.days"
INPUT_DIR_ENV = "PUZZLE_BENCH_INPUT_DIR"


def setup_logging(level: str) -> None:
    """Log to stderr so tables on stdout stay clean."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(numeric_level)
    root.addHandler(handler)


def _load_config(config_path: Path | None) -> RunConfiguration:
    """Load config from file, or defaults with the bundled days as source."""
    if config_path:
        return RunConfiguration.from_yaml(config_path)
    return RunConfiguration(sources=[DEFAULT_SOURCE])


def _get_input_dir(input_dir: Path | None) -> str | None:
    """Get input directory from argument or environment."""
    if input_dir:
        return str(input_dir)
    return os.environ.get(INPUT_DIR_ENV)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Puzzle Bench - Run, verify and benchmark daily puzzle solvers."""
    pass


@cli.command("solve")
@click.argument("days", nargs=-1, type=int)
@click.option("--all", "solve_all", is_flag=True, help="Solve every discovered day")
@click.option("--last", "solve_last", is_flag=True, help="Solve the day with the highest number")
@click.option("--tests/--no-tests", default=None, help="Run example test cases before solving")
@click.option("--repeats", "-n", type=int, help="Measurement repeats per phase")
@click.option("--constructor-time/--no-constructor-time", default=None, help="Show constructor (parsing) time")
@click.option("--day-total/--no-day-total", default=None, help="Show total elapsed time per day")
@click.option("--no-overall", is_flag=True, help="Hide overall results")
@click.option("--no-clear", is_flag=True, help="Do not clear the console")
@click.option("--time-format", help="Python format spec for durations (e.g. .3f)")
@click.option("--source", "-s", "sources", multiple=True, help="Module or package with solvers (repeatable)")
@click.option("--input-dir", "-i", type=click.Path(file_okay=False, path_type=Path), help="Directory with NN.txt inputs")
@click.option("--strict/--no-strict", default=None, help="Fail when a source cannot be imported")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML configuration file")
@click.option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON after the tables")
def solve(
    days: tuple[int, ...],
    solve_all: bool,
    solve_last: bool,
    tests: bool | None,
    repeats: int | None,
    constructor_time: bool | None,
    day_total: bool | None,
    no_overall: bool,
    no_clear: bool,
    time_format: str | None,
    sources: tuple[str, ...],
    input_dir: Path | None,
    strict: bool | None,
    config_path: Path | None,
    log_level: str | None,
    as_json: bool,
):
    """Test and solve puzzles.

    Without DAYS, --all or --last, the last day is solved.
    """
    if days and (solve_all or solve_last):
        raise click.UsageError("DAYS cannot be combined with --all or --last")
    if solve_all and solve_last:
        raise click.UsageError("--all and --last are mutually exclusive")

    try:
        config = _load_config(config_path).with_overrides(
            run_tests=tests,
            measurement_repeats=repeats,
            show_constructor_elapsed_time=constructor_time,
            show_total_elapsed_time_per_day=day_total,
            show_overall_results=False if no_overall else None,
            clear_console=False if no_clear else None,
            elapsed_time_format_specifier=time_format,
            sources=list(sources) or None,
            input_dir=_get_input_dir(input_dir),
            strict_discovery=strict,
            log_level=log_level,
        )
    except ConfigurationError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(2)

    setup_logging(config.log_level)

    try:
        runner = Runner(config)
    except DiscoveryError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(2)

    if solve_all:
        result = asyncio.run(runner.solve_all())
    elif days:
        result = asyncio.run(runner.solve(days[0]) if len(days) == 1 else runner.solve_list(days))
    else:
        result = asyncio.run(runner.solve_last())

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))

    if not result.tests_passed:
        sys.exit(1)


@cli.command("list")
@click.option("--source", "-s", "sources", multiple=True, help="Module or package with solvers (repeatable)")
@click.option("--strict", is_flag=True, help="Fail when a source cannot be imported")
def list_days(sources: tuple[str, ...], strict: bool):
    """List discovered solvers."""
    try:
        registry = discover(list(sources) or [DEFAULT_SOURCE], strict=strict)
    except DiscoveryError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(2)

    if not len(registry):
        click.echo("No solvers found.")
        return

    click.echo(f"Found {len(registry)} solver(s):\n")
    for descriptor in registry:
        shape = descriptor.input_shape.value if descriptor.input_shape else "no constructor"
        click.echo(f"  {descriptor.title}: {descriptor.name} ({shape}, {len(descriptor.tests)} test case(s))")


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
