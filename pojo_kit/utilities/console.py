"""
Console output utilities.

This module provides the status lines and rich tables the CLI prints.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..domain.validation_report import ValidationReport, ValidationStatus
from .constants import EMOJI_ERROR, EMOJI_INFO, EMOJI_SUCCESS, EMOJI_WARNING
from .formatters import format_duration, format_type

console = Console()

STATUS_STYLES = {
    ValidationStatus.PASSED: "green",
    ValidationStatus.FAILED: "red",
    ValidationStatus.SKIPPED: "yellow",
}


def print_success(message: str) -> None:
    """Print success message with emoji."""
    console.print(f"{EMOJI_SUCCESS} {escape(message)}")


def print_error(message: str) -> None:
    """Print error message with emoji."""
    console.print(f"{EMOJI_ERROR} {escape(message)}", style="red")


def print_warning(message: str) -> None:
    """Print warning message with emoji."""
    console.print(f"{EMOJI_WARNING} {escape(message)}", style="yellow")


def print_info(message: str) -> None:
    """Print info message with emoji."""
    console.print(f"{EMOJI_INFO} {escape(message)}")


def print_section_header(title: str, width: int = 60) -> None:
    """Print formatted section header."""
    console.print(f"\n[bold]{escape(title)}[/bold]")
    console.print("=" * width)


def build_report_table(report: ValidationReport) -> Table:
    """Per-property outcomes of one report."""
    table = Table(title=format_type(report.target), title_justify="left")
    table.add_column("Property", style="cyan")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Detail", style="dim")
    for outcome in report.outcomes:
        style = STATUS_STYLES[outcome.status]
        table.add_row(
            escape(outcome.name),
            outcome.check.value,
            f"[{style}]{outcome.status.value}[/{style}]",
            escape(outcome.detail),
        )
    return table


def print_report(report: ValidationReport) -> None:
    """Print the outcome table and a one-line summary for ``report``."""
    console.print(build_report_table(report))
    summary = (
        f"{format_type(report.target)} via {report.constructor or '-'} "
        f"in {format_duration(report.execution_time)}"
    )
    if report.is_success():
        print_success(
            f"{summary}: {report.count(ValidationStatus.PASSED)} passed, "
            f"{report.count(ValidationStatus.SKIPPED)} skipped"
        )
    else:
        print_error(f"{summary}: {report.error_message}")
