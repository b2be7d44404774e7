"""Dump command implementation."""

from __future__ import annotations

from pathlib import Path  # Required at runtime by Typer  # noqa: TC003
from typing import Annotated

import typer  # Required at runtime by Typer

from h5kit.cli.shared import ConfigOption, exit_on_error, resolve_config
from h5kit.ui import console


def dump_command(
    filename: Annotated[
        Path,
        typer.Argument(help="HDF5 file to inspect", exists=True, dir_okay=False, resolve_path=True),
    ],
    indent: Annotated[
        int | None,
        typer.Option("--indent", "-i", min=0, help="Spaces per tree level"),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Print the group/dataset tree of an HDF5 file."""
    from h5kit.io.store import dump

    space = resolve_config(config).dump.indent if indent is None else " " * indent
    with exit_on_error():
        dump(filename, space, echo=lambda line: console.print(line, markup=False, highlight=False))
