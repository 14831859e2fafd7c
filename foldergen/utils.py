"""Shared utility functions for foldergen.

Provides the Rich console used for every piece of user-facing output, the
coloured message helpers, the key/value summary table, and small formatting
helpers shared by the generator and the preview.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def pluralize(count: int, word: str, plural: str | None = None) -> str:
    """Return ``"<count> <word>"`` with the word pluralised when needed.

    Examples::

        pluralize(1, "folder") -> "1 folder"
        pluralize(3, "folder") -> "3 folders"
        pluralize(0, "folder") -> "0 folders"
    """
    if count == 1:
        return f"{count} {word}"
    return f"{count} {plural or word + 's'}"


def is_blank(value: str | None) -> bool:
    """Return ``True`` for ``None``, the empty string and whitespace-only strings."""
    return value is None or not value.strip()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
