"""Shared primitives used across h5kit layers."""

from h5kit.core.shared.exceptions import (
    ConfigError,
    ElementNotFoundError,
    H5KitError,
    PersistenceError,
    RepackError,
    StoreError,
)

__all__ = [
    "ConfigError",
    "ElementNotFoundError",
    "H5KitError",
    "PersistenceError",
    "RepackError",
    "StoreError",
]
