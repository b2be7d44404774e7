"""UI tables for displaying structured data."""

from __future__ import annotations

from typing import Any

from rich import box
from rich.table import Table

from .console import console

__all__ = ["create_table", "print_summary"]


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a standard table with consistent styling."""
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a standard two-column summary table.

    Args:
        items: Dictionary of key-value pairs to display
        title: Table title
    """
    table = create_table(title, show_header=False)
    table.add_column("Item", style="key")
    table.add_column("Value", style="value")

    for key, value in items.items():
        table.add_row(key, str(value))

    console.print(table)
