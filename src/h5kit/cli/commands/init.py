"""Init command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from h5kit.io.config import generate_default_config
from h5kit.ui import error, info, print_next_steps, success


def init_command(
    path: Annotated[
        Path,
        typer.Argument(
            help="Path for new configuration file",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = Path("h5kit.toml"),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing file",
        ),
    ] = False,
) -> None:
    """Generate a default configuration file.

    Examples
    --------
      Create default config:
        $ h5kit init

      Overwrite existing config:
        $ h5kit init --force
    """
    if path.exists() and not force:
        error(f"File already exists: [path]{path}[/path]")
        info("Use [code]--force[/code] to overwrite")
        raise typer.Exit(1)

    path.write_text(generate_default_config())
    success(f"Created configuration file: [path]{path}[/path]")

    print_next_steps([
        f"Review and customize: [cyan]{path.name}[/]",
        f"Save a generator: [cyan]h5kit rng save state.h5 --seed 42 --config {path.name}[/]",
    ])
