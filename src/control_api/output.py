"""Console rendering for results."""

from typing import Any
import json

import yaml
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .base import Model, Tabular


console = Console()
error_console = Console(stderr=True)


def print_json(data: Model | Any) -> None:
    """Print data as formatted JSON."""
    if isinstance(data, Model):
        data = data.to_dict()
    print(json.dumps(data, indent=2, default=str))


def print_yaml(data: Model | Any) -> None:
    """Print data as YAML."""
    if isinstance(data, Model):
        print(data.to_yaml(), end="")
        return
    print(yaml.safe_dump(data, sort_keys=False), end="")


def build_table(result: Tabular, title: str | None = None) -> Table | None:
    """Build a rich table from a result's header and rows. None if there are no rows."""
    rows = result.table()
    if not rows:
        return None

    headers, data = rows[0], rows[1:]
    if not data and len(headers) > 1:
        return None

    table = Table(title=title, box=box.ROUNDED, show_header=bool(data))
    for header in headers:
        table.add_column(header, style="cyan" if header in ("NAME", "ID") else None)

    if data:
        for row in data:
            table.add_row(*(Text(cell) for cell in row))
    else:
        # single-cell message result (e.g. "Operation success")
        table.add_row(*(Text(cell) for cell in headers))

    return table


def print_table(result: Tabular, title: str | None = None) -> None:
    """Print a result as a formatted table."""
    table = build_table(result, title)
    if table is None:
        console.print("[dim]No data[/dim]")
        return
    console.print(table)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str | Exception) -> None:
    """Print an error message to stderr.

    Aggregated validation errors are printed one rule per line.
    """
    errors = getattr(message, "errors", None)
    if isinstance(errors, list):
        for e in errors:
            error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return
    error_console.print(f"[red]Error: {escape(str(message))}[/red]")
