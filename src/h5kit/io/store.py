"""HDF5 file helpers: scoped opening, tree dumps, deletion and object passthrough."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Literal

import h5py
import numpy as np

from h5kit.core.shared.exceptions import ElementNotFoundError, StoreError

logger = logging.getLogger(__name__)

StoreMode = Literal["r", "r+", "w"]
DEFAULT_INDENT = "      "


@contextmanager
def open_store(path: str | Path, mode: StoreMode = "r") -> Iterator[h5py.File]:
    """Open an HDF5 file and guarantee it is closed on every exit path.

    Args:
        path: File to open.
        mode: ``"r"`` read-only, ``"r+"`` read/write an existing file,
            ``"w"`` create (truncating any existing file).

    Raises:
        StoreError: If the file cannot be opened in the requested mode.
    """
    try:
        handle = h5py.File(path, mode)
    except OSError as exc:
        msg = f"Cannot open {path} (mode {mode!r}): {exc}"
        raise StoreError(msg) from exc
    logger.debug("Opened %s (mode %s)", path, mode)
    try:
        yield handle
    finally:
        handle.close()


def writable_mode(path: str | Path) -> StoreMode:
    """Return ``"r+"`` for an existing file and ``"w"`` otherwise."""
    return "r+" if Path(path).is_file() else "w"


def format_tree(node: h5py.Group, space: str = DEFAULT_INDENT, level: int = 0) -> list[str]:
    """Render the group/dataset tree below *node*.

    The first line is the full HDF5 name of *node*; child groups recurse one
    level deeper and datasets are listed by their short name.
    """
    lines = [space * level + node.name]
    for name in node:
        child = node.get(name)
        if isinstance(child, h5py.Group):
            lines.extend(format_tree(child, space, level + 1))
        else:
            lines.append(space * (level + 1) + name)
    return lines


def dump(
    target: str | Path | h5py.Group,
    space: str = DEFAULT_INDENT,
    echo: Callable[[str], object] = print,
) -> list[str]:
    """Print the group/dataset tree of an HDF5 file and return its lines.

    *target* is either a path (opened read-only) or an open file or group.
    """
    if isinstance(target, h5py.Group):
        lines = format_tree(target, space)
    else:
        with open_store(target, "r") as f:
            lines = format_tree(f, space)
    for line in lines:
        echo(line)
    return lines


def has(path: str | Path, name: str) -> bool:
    """Check whether an HDF5 file holds an object called *name*."""
    with open_store(path, "r") as f:
        return name in f


def delete(path: str | Path, element: str) -> None:
    """Delete a group or dataset from an HDF5 file.

    HDF5 does not necessarily free the space the element occupied; use
    `h5kit.io.repack.repack` to reclaim it.

    Raises:
        ElementNotFoundError: If *element* does not exist.
    """
    with open_store(path, "r+") as f:
        if element not in f:
            raise ElementNotFoundError(element, str(path))
        del f[element]
    logger.info("Deleted %s from %s", element, path)


def write_object(path: str | Path, name: str, obj: Any, compress: bool = False) -> None:
    """Write *obj* as dataset *name*, replacing whatever was stored there.

    The file is created when it does not exist. Strings are stored as UTF-8
    variable-length strings; everything else goes through NumPy.
    """
    if isinstance(obj, str):
        data: Any = obj
        dtype: Any = h5py.string_dtype()
    else:
        data = np.asarray(obj)
        dtype = None
        if data.dtype.kind == "O":
            msg = f"Cannot store object of type {type(obj).__name__} as {name!r}"
            raise StoreError(msg)

    options: dict[str, Any] = {}
    if compress and np.ndim(data) > 0:
        options = {"compression": "gzip", "shuffle": True}

    with open_store(path, writable_mode(path)) as f:
        if name in f:
            del f[name]
        try:
            f.create_dataset(name, data=data, dtype=dtype, **options)
        except (TypeError, ValueError) as exc:
            msg = f"Cannot write {name!r} to {path}: {exc}"
            raise StoreError(msg) from exc
    logger.debug("Wrote %s to %s (compress=%s)", name, path, compress)


def read_object(path: str | Path, name: str) -> Any:
    """Read dataset *name*; byte strings come back as ``str``."""
    with open_store(path, "r") as f:
        if name not in f:
            raise ElementNotFoundError(name, str(path))
        node = f[name]
        if not isinstance(node, h5py.Dataset):
            msg = f"{name!r} in {path} is a group, not a dataset"
            raise StoreError(msg)
        if h5py.check_string_dtype(node.dtype) is not None:
            return node.asstr()[()]
        return node[()]


__all__ = [
    "DEFAULT_INDENT",
    "StoreMode",
    "delete",
    "dump",
    "format_tree",
    "has",
    "open_store",
    "read_object",
    "write_object",
    "writable_mode",
]
