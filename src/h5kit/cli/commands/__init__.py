"""CLI command modules for h5kit.

Each module exports a command function (or a Typer sub-application) that
app.py registers with the main application.
"""

from h5kit.cli.commands.delete import delete_command
from h5kit.cli.commands.dump import dump_command
from h5kit.cli.commands.has import has_command
from h5kit.cli.commands.info import info_command
from h5kit.cli.commands.init import init_command
from h5kit.cli.commands.repack import repack_command
from h5kit.cli.commands.rng import rng_app

__all__ = [
    "delete_command",
    "dump_command",
    "has_command",
    "info_command",
    "init_command",
    "repack_command",
    "rng_app",
]
