"""Info command implementation."""

from __future__ import annotations

import shutil

from h5kit.ui import console


def info_command() -> None:
    """Show system information.

    Display versions of h5kit, its libraries and the HDF5 tools.
    """
    import sys

    import h5py
    import numpy as np

    from h5kit import __version__

    console.print("[bold]h5kit System Information[/bold]\n")

    console.print(f"[green]h5kit version:[/green] {__version__}")
    console.print(f"[green]Python version:[/green] {sys.version}")
    console.print(f"[green]NumPy version:[/green] {np.__version__}")
    console.print(f"[green]h5py version:[/green] {h5py.version.version}")
    console.print(f"[green]HDF5 library:[/green] {h5py.version.hdf5_version}")

    repack_path = shutil.which("h5repack")
    status = f"[path]{repack_path}[/path]" if repack_path else "[warning]not found[/warning]"
    console.print(f"[green]h5repack:[/green] {status}")
