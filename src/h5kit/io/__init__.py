"""I/O module for h5kit.

Handles file operations including:
- Configuration file loading/saving (TOML)
- HDF5 tree dumps, deletion and object passthrough
- Generator state persistence
- Repacking through h5repack
"""

from h5kit.io.config import generate_default_config, load_config, save_config
from h5kit.io.repack import repack
from h5kit.io.rng import RNGStateRepository, load_rng, restore_rng, save_rng
from h5kit.io.store import delete, dump, has, open_store, read_object, write_object

__all__ = [
    "RNGStateRepository",
    "delete",
    "dump",
    "generate_default_config",
    "has",
    "load_config",
    "load_rng",
    "open_store",
    "read_object",
    "repack",
    "restore_rng",
    "save_config",
    "save_rng",
    "write_object",
]
