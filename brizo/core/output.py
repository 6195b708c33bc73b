"""Terminal output for the brizo CLI.

Renders records as Rich tables, key/value listings, or JSON.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

if TYPE_CHECKING:
    from brizo.models.upload import BatchOutcome

console = Console()
err_console = Console(stderr=True)


class OutputFormat(Enum):
    """Output format options."""

    JSON = "json"
    TABLE = "table"

    @classmethod
    def from_string(cls, value: str) -> OutputFormat:
        return cls(value.lower())


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    return str(value)


def print_table(
    rows: Sequence[dict[str, Any]],
    columns: Sequence[str],
    *,
    title: str | None = None,
    column_labels: dict[str, str] | None = None,
) -> None:
    """Print rows as a Rich table.

    Args:
        rows: Row dictionaries.
        columns: Keys to show, in order.
        title: Optional table title.
        column_labels: Display labels keyed by column.
    """
    if not rows:
        console.print("[dim]No results[/dim]")
        return

    labels = column_labels or {}
    table = Table(title=title, show_header=True, header_style="bold")
    for col in columns:
        table.add_column(labels.get(col, col.replace("_", " ").title()))
    for row in rows:
        table.add_row(*(_cell(row.get(col)) for col in columns))

    console.print(table)


def print_key_value(data: dict[str, Any], *, title: str | None = None) -> None:
    """Print a single record as aligned ``label  value`` lines."""
    if title:
        console.print(f"[bold]{title}[/bold]")
    if not data:
        return

    labels = {key: key.replace("_", " ").title() for key in data}
    width = max(len(label) for label in labels.values())
    for key, value in data.items():
        shown = "[dim]-[/dim]" if value is None or value == "" else _cell(value)
        console.print(f"  {labels[key]:<{width}}  {shown}")


def print_json(data: Any) -> None:
    """Print data as indented JSON on stdout."""
    print(json.dumps(data, indent=2, default=str))


def print_output(
    data: Any,
    *,
    format: OutputFormat = OutputFormat.TABLE,
    columns: Sequence[str] | None = None,
    title: str | None = None,
    quiet: bool = False,
) -> None:
    """Print records in the requested format.

    In quiet mode only the ``id`` of each record is printed, one per line.
    """
    if quiet:
        items = data if isinstance(data, list) else [data]
        for item in items:
            print(item.get("id", "") if isinstance(item, dict) else item)
        return

    if format == OutputFormat.JSON:
        print_json(data)
    elif isinstance(data, list) and columns:
        print_table(data, columns, title=title)
    elif isinstance(data, dict):
        print_key_value(data, title=title)
    else:
        print_json(data)


def print_batch_summary(outcome: BatchOutcome) -> None:
    """Print per-item results of a batch upload."""
    table = Table(title="Upload summary", show_header=True, header_style="bold")
    table.add_column("File")
    table.add_column("Status")
    table.add_column("Detail")

    for entry in outcome.successful:
        table.add_row(entry.label, "[green]uploaded[/green]", entry.file.id)
    for failure in outcome.failed:
        table.add_row(failure.label, "[red]failed[/red]", failure.message)

    console.print(table)
    console.print(
        f"{len(outcome.successful)} uploaded, {len(outcome.failed)} failed "
        f"({outcome.success_rate:.0f}% success)"
    )


# =============================================================================
# Status Messages
# =============================================================================


def print_error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    err_console.print(f"[yellow]Warning:[/yellow] {message}")


def print_success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def create_progress() -> Progress:
    """Create a progress bar that counts completed items."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=err_console,
    )
