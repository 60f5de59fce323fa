"""Shared utility functions for Radnt.

Provides the shared Rich console and its output helpers, JSON and text file
I/O, and the name-casing helpers used to build import hints.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from radnt.resolver import CatalogEntry

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def to_pascal_case(name: str) -> str:
    """Convert a kebab-case component name to PascalCase.

    Examples::

        to_pascal_case("alert-dialog") -> "AlertDialog"
        to_pascal_case("tabs")         -> "Tabs"
    """
    parts = re.split(r"[-_\s]+", name)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def import_hint(name: str, alias: str = "@/components/ui") -> str:
    """Return the TypeScript import line for an installed component."""
    return f'import {{ {to_pascal_case(name)} }} from "{alias}/{name}"'


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        return {"_root": data}
    return data


def write_text_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def format_validation_error(exc: ValidationError) -> str:
    """Collapse a pydantic ``ValidationError`` into one readable line.

    Examples::

        "style: Input should be 'default' or 'new-york'"
        "Invalid JSON: key must be a string at line 1 column 2"
    """
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_component_list(entries: Iterable[CatalogEntry]) -> None:
    """Print ``• name - description`` for each entry."""
    for entry in entries:
        console.print(f"  [cyan]• {escape(entry.name)}[/cyan] [dim]- {escape(entry.description)}[/dim]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def create_progress() -> Progress:
    """Create a Rich spinner for long-running command steps.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
