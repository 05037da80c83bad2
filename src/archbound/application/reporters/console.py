"""Console reporter: CheckResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from archbound.domain.model.enums import ErrorKind

if TYPE_CHECKING:
    from archbound.domain.model.check_result import CheckResult
    from archbound.domain.model.errors import BoundaryError


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in columns.
        max_errors_per_kind: Rows per kind table. None = unlimited.
        include_kinds: Error kinds to show. None = all kinds.
        color: Emit ANSI colors.
    """

    width: int = 120
    max_errors_per_kind: int | None = None
    include_kinds: frozenset[ErrorKind] | None = None
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")
        if self.max_errors_per_kind is not None and self.max_errors_per_kind < 1:
            raise ValueError(f"max_errors_per_kind must be >= 1, got {self.max_errors_per_kind}")


class ConsoleReporter:
    """Console reporter: one rich table per error kind.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: CheckResult) -> str:
        """Format check result as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, result)

        grouped = self._group(result.errors)
        for kind in ErrorKind:
            errors = grouped.get(kind)
            if errors:
                self._render_kind(console, kind, errors)

        status = "[bold green]PASSED[/bold green]" if result.passed else "[bold red]FAILED[/bold red]"
        console.print(f"Result: {status}")
        return output.getvalue()

    def _group(self, errors: tuple[BoundaryError, ...]) -> dict[ErrorKind, list[BoundaryError]]:
        grouped: dict[ErrorKind, list[BoundaryError]] = {}
        include = self._config.include_kinds
        for error in errors:
            if include is not None and error.kind not in include:
                continue
            grouped.setdefault(error.kind, []).append(error)
        return grouped

    def _render_header(self, console: Console, result: CheckResult) -> None:
        console.print()
        console.rule(f"[bold]BOUNDARY CHECK[/bold] {escape(result.app)}")
        console.print()
        stats = result.stats
        console.print(
            f"[bold]Boundaries:[/bold] {stats.boundaries_checked}  "
            f"[bold]Modules:[/bold] {stats.modules_checked}  "
            f"[bold]Calls:[/bold] {stats.calls_checked}  "
            f"[bold]Errors:[/bold] {result.error_count}"
        )
        console.print()

    def _render_kind(self, console: Console, kind: ErrorKind, errors: list[BoundaryError]) -> None:
        console.print(f"[bold]{kind.value}[/bold] ({len(errors)})")

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Location", style="cyan")
        table.add_column("Message")

        limit = self._config.max_errors_per_kind
        shown = errors if limit is None else errors[:limit]
        for error in shown:
            location = str(error.location) if error.location is not None else "-"
            table.add_row(escape(location), escape(error.message))

        console.print(table)
        if len(shown) < len(errors):
            console.print(f"[dim]... {len(errors) - len(shown)} more[/dim]")
        console.print()
