"""Main Typer application for h5kit.

Creates the application, registers the commands from the commands/
subpackage and configures logging for every invocation.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from h5kit.cli.callbacks import version_callback
from h5kit.cli.commands import (
    delete_command,
    dump_command,
    has_command,
    info_command,
    init_command,
    repack_command,
    rng_app,
)
from h5kit.ui import setup_logging

app = typer.Typer(
    name="h5kit",
    help="h5kit - HDF5 file utilities and generator state persistence",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log library activity to the console."),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write a log file (.json for JSON lines)."),
    ] = None,
) -> None:
    """h5kit - HDF5 file utilities.

    Dump, delete, repack and persist pseudo-random generator state in HDF5 files.
    """
    setup_logging(log_file, verbose=verbose, level=logging.DEBUG if verbose else logging.INFO)


# Register commands
app.command(name="dump")(dump_command)
app.command(name="delete")(delete_command)
app.command(name="repack")(repack_command)
app.command(name="has")(has_command)
app.command(name="init")(init_command)
app.command(name="info")(info_command)

# Register sub-applications
app.add_typer(rng_app, name="rng")
