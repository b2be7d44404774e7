"""Generator state subcommands for h5kit CLI.

This module creates a Typer sub-application with commands to save a freshly
seeded generator into an HDF5 file and to inspect a stored generator state.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from h5kit.cli.shared import ConfigOption, exit_on_error, resolve_config
from h5kit.ui import console, info, print_summary, success

rng_app = typer.Typer(
    help="Save and inspect pseudo-random generator state",
    no_args_is_help=True,
)

GroupOption = Annotated[
    str | None,
    typer.Option("--group", "-g", help="Group path holding the state [default: from config]"),
]


@rng_app.command("save")
def save_command(
    filename: Annotated[
        Path, typer.Argument(help="HDF5 file (created if missing)", dir_okay=False)
    ],
    seed: Annotated[
        list[int] | None,
        typer.Option("--seed", "-s", help="Seed value; repeat for multi-word seeds"),
    ] = None,
    group: GroupOption = None,
    config: ConfigOption = None,
) -> None:
    """Seed a new generator and save its state to FILENAME."""
    from h5kit.core.random import BufferedGenerator
    from h5kit.io.rng import save_rng

    cfg = resolve_config(config).rng
    target_group = group or cfg.group
    with exit_on_error():
        try:
            rng = BufferedGenerator(
                seed or None,
                float_cache_size=cfg.float_cache_size,
                int_cache_size=cfg.int_cache_size,
            )
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--seed") from exc
        save_rng(filename, rng, group=target_group)
    success(f"Saved generator state to [path]{filename.name}[/path]:[key]{target_group}[/key]")
    info(f"Seed: {list(rng.seed)}")


@rng_app.command("show")
def show_command(
    filename: Annotated[
        Path,
        typer.Argument(help="HDF5 file holding a generator state", exists=True, dir_okay=False),
    ],
    group: GroupOption = None,
    draws: Annotated[
        int,
        typer.Option("--draws", "-n", min=0, help="Print the next N floats it would draw"),
    ] = 0,
    config: ConfigOption = None,
) -> None:
    """Show a generator state stored in FILENAME."""
    from h5kit.core.random import BufferedGenerator
    from h5kit.io.rng import RNGStateRepository
    from h5kit.io.store import open_store

    target_group = group or resolve_config(config).rng.group
    with exit_on_error(), open_store(filename, "r") as f:
        state = RNGStateRepository.load(f, target_group)

    print_summary(
        {
            "Group": target_group,
            "Seed": list(int(s) for s in state.seed),
            "Key position": state.pos,
            "Float buffer": f"{state.idx_f}/{state.vals.size} used",
            "Integer buffer": f"{state.idx_i}/{len(state.ints)} used",
        },
        title="Generator State",
    )
    if draws:
        rng = BufferedGenerator.from_state(state)
        for value in rng.random(draws):
            console.print(repr(float(value)), highlight=False)
