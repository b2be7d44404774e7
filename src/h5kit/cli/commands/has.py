"""Has command implementation."""

from __future__ import annotations

from pathlib import Path  # Required at runtime by Typer  # noqa: TC003
from typing import Annotated

import typer  # Required at runtime by Typer

from h5kit.cli.shared import exit_on_error
from h5kit.ui import console


def has_command(
    filename: Annotated[
        Path,
        typer.Argument(help="HDF5 file to inspect", exists=True, dir_okay=False, resolve_path=True),
    ],
    name: Annotated[str, typer.Argument(help="Group or dataset path")],
) -> None:
    """Check whether an HDF5 file holds NAME (exit status 1 if not)."""
    from h5kit.io.store import has

    with exit_on_error():
        found = has(filename, name)
    console.print("yes" if found else "no")
    if not found:
        raise typer.Exit(1)
