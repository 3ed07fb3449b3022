"""Console reporter: CheckResult -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from paramcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from paramcheck.domain.exceptions.base import ParamCheckError
    from paramcheck.domain.model.check_result import CheckResult
    from paramcheck.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_parameters: Render the parameter table.
        show_descriptions: Add description column to the table.
        width: Console width in characters.
    """

    show_parameters: bool = True
    show_descriptions: bool = False
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

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
            force_terminal=True,
            width=self._config.width,
            highlight=False,
        )

        self._render_header(console, result)

        if self._config.show_parameters and result.parameters:
            self._render_parameters(console, result.parameters)

        if result.unresolved:
            self._render_unresolved(console, result.unresolved)

        if result.error is not None:
            self._render_error(console, result.error)

        return output.getvalue()

    def _render_header(self, console: Console, result: CheckResult) -> None:
        """Render header with status."""
        console.print()
        console.rule(f"[bold]PARAMETERS[/bold] {escape(result.subject)}")
        console.print()

        status = "[green]PASS[/green]" if result.passed else "[bold red]FAIL[/bold red]"
        console.print(
            f"[bold]Status:[/bold] {status}  "
            f"[bold]Parameters:[/bold] {len(result.parameters)}  "
            f"[bold]Unresolved:[/bold] {len(result.unresolved)}"
        )
        console.print()

    def _render_parameters(self, console: Console, parameters: tuple[Parameter, ...]) -> None:
        """Render parameter table in collection order."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("in")
        table.add_column("name")
        table.add_column("required")
        table.add_column("deprecated")
        table.add_column("shape")
        if self._config.show_descriptions:
            table.add_column("description")

        for parameter in parameters:
            row = [
                escape(parameter.location),
                escape(parameter.name),
                "yes" if parameter.required else "no",
                "yes" if parameter.deprecated else "no",
                self._shape(parameter),
            ]
            if self._config.show_descriptions:
                row.append(escape(parameter.description))
            table.add_row(*row)

        console.print(table)
        console.print()

    @staticmethod
    def _shape(parameter: Parameter) -> str:
        """Short description of schema/content."""
        if parameter.schema is not None:
            if parameter.schema.ref:
                return escape(parameter.schema.ref)
            if parameter.schema.value is not None and parameter.schema.value.type is not None:
                return escape(f"schema: {parameter.schema.value.type}")
            return "schema"
        if parameter.content:
            return escape(f"content: {', '.join(parameter.content)}")
        return "-"

    def _render_unresolved(self, console: Console, unresolved: tuple[str, ...]) -> None:
        """Render unresolved references."""
        console.print(f"[bold yellow]UNRESOLVED[/bold yellow] ({len(unresolved)})")
        for ref in unresolved:
            console.print(f"  {ref}", markup=False)
        console.print()

    def _render_error(self, console: Console, error: ParamCheckError) -> None:
        """Render first error."""
        console.print(f"[bold red]ERROR[/bold red] {type(error).__name__}")
        console.print(f"  {error}", markup=False)
        for key, value in self.error_details(error).items():
            console.print(f"  {key}: {value}", markup=False)
        console.print()
