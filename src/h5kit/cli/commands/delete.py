"""Delete command implementation."""

from __future__ import annotations

from pathlib import Path  # Required at runtime by Typer  # noqa: TC003
from typing import Annotated

import typer  # Required at runtime by Typer

from h5kit.cli.shared import exit_on_error
from h5kit.ui import info, success


def delete_command(
    filename: Annotated[
        Path,
        typer.Argument(help="HDF5 file to modify", exists=True, dir_okay=False, resolve_path=True),
    ],
    element: Annotated[str, typer.Argument(help="Group or dataset path to delete")],
) -> None:
    """Delete a group or dataset from an HDF5 file.

    HDF5 may keep the space the element used; run [code]h5kit repack[/code]
    afterwards to reclaim it.
    """
    from h5kit.io.store import delete

    with exit_on_error():
        delete(filename, element)
    success(f"Deleted [key]{element}[/key] from [path]{filename.name}[/path]")
    info(f"Space is not reclaimed until the file is repacked: h5kit repack {filename.name}")
