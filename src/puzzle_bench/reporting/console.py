"""Rich console rendering of test, solve and overall results."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .aggregate import OverallResults
from .formatting import colorize_time, format_time
from .reporter import Reporter, SolveRow, TestRow


def build_test_table() -> Table:
    table = Table(title="Test", box=box.ROUNDED, border_style="green")
    for header in ("Day", "Part", "Expected Solution", "Actual Solution", "Success"):
        table.add_column(f"[bold]{header}[/bold]")
    return table


def build_solve_table() -> Table:
    table = Table(title="Solve", box=box.ROUNDED, border_style="grey50")
    for header in ("Day", "Part", "Solution", "Elapsed time"):
        table.add_column(f"[bold]{header}[/bold]")
    return table


def build_overall_panel(results: OverallResults, format_spec: str | None = None) -> Panel:
    """Grid of totals (plain) and means (colored) inside a panel."""

    def plain(ms: float) -> str:
        return format_time(ms, format_spec)

    def colored(ms: float) -> str:
        return colorize_time(ms, format_spec)

    grid = Table.grid(padding=(0, 4, 0, 0))
    grid.add_column(no_wrap=True)
    grid.add_column()

    grid.add_row("", "")
    grid.add_row(f"[bold]Total ({results.count} days)[/bold]", plain(results.total))
    if results.include_constructor:
        grid.add_row("Total constructors", plain(results.total_constructor))
    grid.add_row("Total parts 1", plain(results.total_part1))
    grid.add_row("Total parts 2", plain(results.total_part2))
    grid.add_row("", "")
    grid.add_row("[bold]Mean (per day)[/bold]", colored(results.mean))
    if results.include_constructor:
        grid.add_row("Mean constructors", colored(results.mean_constructor))
    grid.add_row("Mean parts 1", colored(results.mean_part1))
    grid.add_row("Mean parts 2", colored(results.mean_part2))

    return Panel(grid, title="[b] Overall results [/b]", title_align="center", expand=False)


class RichReporter(Reporter):
    """Draws live-updating tables on a rich console."""

    def __init__(self, console: Console | None = None, format_spec: str | None = None):
        self.console = console or Console()
        self.format_spec = format_spec
        self.test_table: Table | None = None
        self.solve_table: Table | None = None
        self._live: Live | None = None
        self._table: Table | None = None

    def _start(self, table: Table) -> None:
        self._table = table
        self._live = Live(
            table,
            console=self.console,
            auto_refresh=False,
            vertical_overflow="ellipsis",
        )
        self._live.start()

    def _refresh(self) -> None:
        if self._live is not None:
            self._live.refresh()

    def _stop(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None
        self._table = None

    def clear(self) -> None:
        if self.console.is_terminal:
            self.console.clear()

    def begin_tests(self) -> None:
        self.test_table = build_test_table()
        self._start(self.test_table)

    def test_row(self, row: TestRow) -> None:
        if self.test_table is None:
            return
        verdict = "[bold green]Pass[/bold green]" if row.passed else "[bold red]Fail[/bold red]"
        self.test_table.add_row(
            escape(row.title),
            escape(row.part),
            escape(row.expected),
            escape(row.actual),
            verdict,
        )
        self._refresh()

    def end_tests(self, success: bool) -> None:
        if self.test_table is not None and not success:
            self.test_table.border_style = "red"
        self._refresh()
        self._stop()

    def begin_solve(self) -> None:
        self.solve_table = build_solve_table()
        self._start(self.solve_table)

    def solve_row(self, row: SolveRow) -> None:
        if self.solve_table is None:
            return
        part = "[bold]Total[/bold]" if row.part == "Total" else escape(row.part)
        self.solve_table.add_row(
            escape(row.title),
            part,
            escape(row.solution),
            colorize_time(row.elapsed_ms, self.format_spec),
        )
        self._refresh()

    def end_solve(self) -> None:
        self._refresh()
        self._stop()

    def day_break(self) -> None:
        if self._table is not None:
            self._table.add_row()
            self._refresh()

    def summary(self, results: OverallResults) -> None:
        self.console.print(build_overall_panel(results, self.format_spec))
