"""Repack command implementation."""

from __future__ import annotations

from pathlib import Path  # Required at runtime by Typer  # noqa: TC003
from typing import Annotated

import typer  # Required at runtime by Typer

from h5kit.cli.shared import ConfigOption, exit_on_error, resolve_config
from h5kit.ui import console, success


def repack_command(
    src: Annotated[
        Path,
        typer.Argument(help="HDF5 file to repack", exists=True, dir_okay=False, resolve_path=True),
    ],
    trg: Annotated[
        Path | None,
        typer.Argument(help="Output file (defaults to repacking SRC in place)", dir_okay=False),
    ] = None,
    executable: Annotated[
        str | None,
        typer.Option("--executable", "-e", help="h5repack executable"),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Repack an HDF5 file with h5repack, e.g. to free unused space."""
    from h5kit.io.repack import repack

    exe = executable or resolve_config(config).repack.executable
    with exit_on_error():
        output = repack(src, trg, executable=exe)
    if output.strip():
        console.print(output.rstrip(), markup=False, highlight=False)
    success(f"Repacked [path]{src.name}[/path]" + (f" into [path]{trg}[/path]" if trg else ""))
