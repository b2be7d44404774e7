"""Exception taxonomy for h5kit.

This module defines a small, coherent hierarchy of exceptions. Use these
instead of generic Exception so that callers (and the CLI) can handle
errors precisely.
"""

from __future__ import annotations


class H5KitError(Exception):
    """Base class for all h5kit-specific exceptions."""


class ConfigError(H5KitError):
    """Configuration-related errors (invalid/missing options, schema issues)."""


class StoreError(H5KitError):
    """Errors raised while operating on an HDF5 file."""


class ElementNotFoundError(StoreError, KeyError):
    """A group or dataset does not exist in an HDF5 file."""

    def __init__(self, element: str, filename: str | None = None) -> None:
        self.element = element
        self.filename = filename
        where = f' in "{filename}"' if filename else ""
        super().__init__(f'Element "{element}" does not exist{where}.')

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class PersistenceError(H5KitError):
    """Failure while saving or loading generator state.

    Attributes:
        group: Normalized group path the operation targeted.
        field: Name of the offending field, if any.
    """

    def __init__(self, message: str, group: str | None = None, field: str | None = None) -> None:
        self.group = group
        self.field = field
        context = []
        if field is not None:
            context.append(f"field={field!r}")
        if group is not None:
            context.append(f"group={group!r}")
        if context:
            message = f"{message} ({', '.join(context)})"
        super().__init__(message)


class RepackError(H5KitError):
    """The external h5repack tool is missing or failed."""


__all__ = [
    "ConfigError",
    "ElementNotFoundError",
    "H5KitError",
    "PersistenceError",
    "RepackError",
    "StoreError",
]
