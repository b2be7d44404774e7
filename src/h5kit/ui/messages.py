"""UI messages and status indicators."""

from __future__ import annotations

import logging

from h5kit.ui.console import console, icon

_logger = logging.getLogger("h5kit.ui")


def success(message: str, indent: int = 0) -> None:
    """Display a success message."""
    spaces = "  " * indent
    console.print(f"{spaces}[success]{icon('check')}[/success] {message}")
    _logger.info(message)


def error(message: str, indent: int = 0) -> None:
    """Display an error message."""
    spaces = "  " * indent
    console.print(f"{spaces}[error]{icon('error')}[/error] {message}")
    _logger.error(message)


def info(message: str, indent: int = 0) -> None:
    """Display an info message."""
    spaces = "  " * indent
    console.print(f"{spaces}[dim]{icon('info')}[/dim] {message}")
    _logger.info(message)


def print_next_steps(steps: list[str]) -> None:
    """Print suggested next steps for the user."""
    console.print("\n[bold cyan]Next steps:[/]")
    for i, step in enumerate(steps, 1):
        console.print(f"  {i}. {step}")
    console.print()


__all__ = ["error", "info", "print_next_steps", "success"]
