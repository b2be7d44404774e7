"""h5kit - HDF5 file utilities and generator state persistence.

Public API:
    - dump, delete, has, write_object, read_object: HDF5 file helpers
    - repack: Wrapper around the h5repack tool
    - save_rng, load_rng, restore_rng: Generator state persistence by filename
    - RNGStateRepository: Generator state persistence on open files

Domain Objects:
    - BufferedGenerator: Generator whose state round-trips through HDF5
    - GeneratorState: Snapshot of a generator
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from h5kit.core.domain.config import H5KitConfig
from h5kit.core.domain.state import GeneratorState
from h5kit.core.random import BufferedGenerator, default_generator, set_seed
from h5kit.core.shared.exceptions import (
    ConfigError,
    ElementNotFoundError,
    H5KitError,
    PersistenceError,
    RepackError,
    StoreError,
)
from h5kit.io.repack import repack
from h5kit.io.rng import RNGStateRepository, load_rng, restore_rng, save_rng
from h5kit.io.store import delete, dump, has, read_object, write_object

__all__ = [
    # Version
    "__version__",
    # File helpers
    "delete",
    "dump",
    "has",
    "read_object",
    "repack",
    "write_object",
    # Generator state
    "RNGStateRepository",
    "load_rng",
    "restore_rng",
    "save_rng",
    # Domain
    "BufferedGenerator",
    "GeneratorState",
    "H5KitConfig",
    "default_generator",
    "set_seed",
    # Errors
    "ConfigError",
    "ElementNotFoundError",
    "H5KitError",
    "PersistenceError",
    "RepackError",
    "StoreError",
]
