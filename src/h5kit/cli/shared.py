"""Helpers shared by CLI commands."""

from __future__ import annotations

import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from h5kit.core.domain.config import H5KitConfig
from h5kit.core.shared.exceptions import ConfigError, H5KitError
from h5kit.ui import error

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="TOML configuration file",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
]


def resolve_config(path: Path | None) -> H5KitConfig:
    """Load *path* if given, otherwise return the default configuration."""
    from h5kit.io.config import load_config

    if path is None:
        return H5KitConfig()
    with exit_on_error():
        try:
            return load_config(path)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Cannot parse {path.name}: {exc}"
            raise ConfigError(msg) from exc


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Report h5kit errors on the console and exit with status 1."""
    try:
        yield
    except H5KitError as exc:
        error(escape(str(exc)))
        raise typer.Exit(1) from exc
