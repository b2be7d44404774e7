"""Persistence of generator state in HDF5 files.

A generator is stored as six sibling datasets under a group path ``G``::

    G/idxF        scalar int64
    G/idxI        scalar int64
    G/state_val   uint32[625]   MT19937 key followed by the key position
    G/vals        float64[n]    float output buffer
    G/seed        int64[k]      seed material
    G/ints        int64[m, 2]   128-bit output buffer, (low, high) words

Saving to an existing group deletes it first. HDF5 does not necessarily
reclaim the space of deleted objects; run `h5kit.io.repack.repack` on files
that are rewritten often. The delete-then-write sequence is not
transactional: if a write fails, the group is left partially written and the
failure is reported as a `PersistenceError`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import h5py

from h5kit.core.domain.state import GeneratorState
from h5kit.core.random import BufferedGenerator, default_generator
from h5kit.core.shared.exceptions import PersistenceError
from h5kit.io.fields import FieldKind
from h5kit.io.store import open_store, writable_mode

logger = logging.getLogger(__name__)

DEFAULT_GROUP = "GLOBAL_RNG"

# Dataset name -> kind, in write order
RNG_FIELDS: dict[str, FieldKind] = {
    "idxF": FieldKind.SCALAR_INT,
    "idxI": FieldKind.SCALAR_INT,
    "state_val": FieldKind.WORD_ARRAY,
    "vals": FieldKind.FLOAT_ARRAY,
    "seed": FieldKind.INT_ARRAY,
    "ints": FieldKind.UINT128_ARRAY,
}

# The HDF5 I/O layer reports failures through these
_STORE_ERRORS = (OSError, ValueError, KeyError, TypeError, RuntimeError)


def normalize_group(group: str) -> str:
    """Return *group* with a trailing ``/``."""
    return group if group.endswith("/") else group + "/"


def _field_values(state: GeneratorState) -> dict[str, Any]:
    return {
        "idxF": state.idx_f,
        "idxI": state.idx_i,
        "state_val": state.state_val,
        "vals": state.vals,
        "seed": state.seed,
        "ints": state.ints,
    }


def _check_store(store: h5py.Group, group: str, writable: bool) -> None:
    # h5py objects evaluate false once their file is closed
    if not store:
        raise PersistenceError("store is closed", group=group)
    if writable and store.file.mode != "r+":
        raise PersistenceError("store is not open for writing", group=group)
    if group.strip("/") == "":
        raise PersistenceError("group path must name a group below the root", group=group)


class RNGStateRepository:
    """Infrastructure boundary for saving/loading generator state in HDF5."""

    fields: dict[str, FieldKind] = RNG_FIELDS

    @classmethod
    def save(
        cls,
        store: h5py.Group,
        generator: BufferedGenerator | None = None,
        group: str = DEFAULT_GROUP,
    ) -> None:
        """Write the state of *generator* below *group* in an open store.

        Args:
            store: Writable ``h5py.File`` or ``h5py.Group``.
            generator: Generator to snapshot; the default generator if None.
            group: Group path; any existing object there is deleted first.

        Raises:
            PersistenceError: If the store is not writable or any write fails.
                Fields written before the failure are not rolled back.
        """
        g = normalize_group(group)
        _check_store(store, g, writable=True)
        rng = generator if generator is not None else default_generator()
        state = rng.get_state()

        key = g.rstrip("/")
        try:
            if key in store:
                del store[key]
                logger.debug("Deleted existing %s", key)
        except _STORE_ERRORS as exc:
            msg = f"cannot delete existing group: {exc}"
            raise PersistenceError(msg, group=g) from exc

        for name, value in _field_values(state).items():
            kind = cls.fields[name]
            try:
                store.create_dataset(g + name, data=kind.encode(value))
            except _STORE_ERRORS as exc:
                msg = f"error while saving generator state: {exc}"
                raise PersistenceError(msg, group=g, field=name) from exc
        logger.info("Saved generator state to %s", g)

    @classmethod
    def load(cls, store: h5py.Group, group: str = DEFAULT_GROUP) -> GeneratorState:
        """Read a generator state from an open store.

        Raises:
            PersistenceError: If a field is missing, malformed or unreadable,
                or the fields do not form a consistent state.
        """
        g = normalize_group(group)
        _check_store(store, g, writable=False)

        values: dict[str, Any] = {}
        for name, kind in cls.fields.items():
            path = g + name
            try:
                if path not in store:
                    raise PersistenceError("missing field", group=g, field=name)
                values[name] = kind.decode(store[path], name, g)
            except PersistenceError:
                raise
            except _STORE_ERRORS as exc:
                msg = f"error while restoring generator state: {exc}"
                raise PersistenceError(msg, group=g, field=name) from exc

        try:
            state = GeneratorState(
                idx_f=values["idxF"],
                idx_i=values["idxI"],
                state_val=values["state_val"],
                vals=values["vals"],
                seed=values["seed"],
                ints=values["ints"],
            )
        except ValueError as exc:
            msg = f"inconsistent generator state: {exc}"
            raise PersistenceError(msg, group=g) from exc
        logger.debug("Loaded generator state from %s", g)
        return state

    @classmethod
    def restore(
        cls,
        store: h5py.Group,
        group: str = DEFAULT_GROUP,
        generator: BufferedGenerator | None = None,
    ) -> None:
        """Install a stored state into *generator* (the default generator if None).

        The generator is only modified after the state loaded successfully.
        """
        state = cls.load(store, group)
        rng = generator if generator is not None else default_generator()
        rng.set_state(state)
        logger.info("Restored generator state from %s", normalize_group(group))

    # --- Filename-based entry points ---

    @classmethod
    def save_file(
        cls,
        path: str | Path,
        generator: BufferedGenerator | None = None,
        group: str = DEFAULT_GROUP,
    ) -> Path:
        """Save into *path*, creating the file if needed, and return the path."""
        path = Path(path)
        with open_store(path, writable_mode(path)) as f:
            cls.save(f, generator, group)
        return path

    @classmethod
    def load_file(cls, path: str | Path, group: str = DEFAULT_GROUP) -> BufferedGenerator:
        """Return a new generator built from the state stored in *path*."""
        with open_store(path, "r") as f:
            state = cls.load(f, group)
        return BufferedGenerator.from_state(state)

    @classmethod
    def restore_file(
        cls,
        path: str | Path,
        group: str = DEFAULT_GROUP,
        generator: BufferedGenerator | None = None,
    ) -> None:
        """Install the state stored in *path* into *generator*."""
        with open_store(path, "r") as f:
            cls.restore(f, group, generator)


def save_rng(
    path: str | Path,
    generator: BufferedGenerator | None = None,
    group: str = DEFAULT_GROUP,
) -> Path:
    """Save a generator's state to an HDF5 file."""
    return RNGStateRepository.save_file(path, generator, group)


def load_rng(path: str | Path, group: str = DEFAULT_GROUP) -> BufferedGenerator:
    """Load a generator from an HDF5 file."""
    return RNGStateRepository.load_file(path, group)


def restore_rng(
    path: str | Path,
    group: str = DEFAULT_GROUP,
    generator: BufferedGenerator | None = None,
) -> None:
    """Restore a generator (the default one if None) from an HDF5 file."""
    RNGStateRepository.restore_file(path, group, generator)


__all__ = [
    "DEFAULT_GROUP",
    "RNG_FIELDS",
    "RNGStateRepository",
    "load_rng",
    "normalize_group",
    "restore_rng",
    "save_rng",
]
