"""Typed HDF5 field codec.

Every value h5kit persists as part of a generator state belongs to one of a
closed set of field kinds. Each kind owns an explicit encoder (Python value
to a NumPy array ready for ``create_dataset``) and decoder (HDF5 dataset back
to a Python value) that checks the stored shape and dtype kind.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

import h5py
import numpy as np

from h5kit.core.domain.state import UINT128_MAX
from h5kit.core.shared.exceptions import PersistenceError

if TYPE_CHECKING:
    from numpy.typing import NDArray

_MASK64 = (1 << 64) - 1


def uint128_to_storage(values: Iterable[int]) -> NDArray[np.int64]:
    """Reinterpret unsigned 128-bit integers as pairs of signed 64-bit words.

    Row ``i`` holds ``(low, high)`` of ``values[i]``; each word keeps the
    exact bit pattern of the corresponding unsigned half.
    """
    ints = [int(v) for v in values]
    if any(not 0 <= v <= UINT128_MAX for v in ints):
        msg = "value does not fit in 128 unsigned bits"
        raise ValueError(msg)
    words = np.array([(v & _MASK64, v >> 64) for v in ints], dtype=np.uint64).reshape(-1, 2)
    return words.view(np.int64)


def uint128_from_storage(words: NDArray[np.integer]) -> tuple[int, ...]:
    """Inverse of `uint128_to_storage`."""
    array = np.asarray(words)
    if array.ndim != 2 or array.shape[1] != 2:
        msg = f"expected an (n, 2) word array, got shape {array.shape}"
        raise ValueError(msg)
    unsigned = np.ascontiguousarray(array, dtype=np.int64).view(np.uint64).tolist()
    return tuple(low | (high << 64) for low, high in unsigned)


class FieldKind(Enum):
    """Closed set of dataset kinds used by the generator state layout."""

    SCALAR_INT = "scalar_int"
    WORD_ARRAY = "word_array"
    INT_ARRAY = "int_array"
    UINT128_ARRAY = "uint128_array"
    FLOAT_ARRAY = "float_array"

    def encode(self, value: Any) -> NDArray[Any]:
        """Convert *value* into the array stored on disk."""
        if self is FieldKind.SCALAR_INT:
            return np.asarray(int(value), dtype=np.int64)
        if self is FieldKind.WORD_ARRAY:
            return np.asarray(value, dtype=np.uint32).reshape(-1)
        if self is FieldKind.INT_ARRAY:
            return np.asarray(value, dtype=np.int64).reshape(-1)
        if self is FieldKind.UINT128_ARRAY:
            return uint128_to_storage(value)
        return np.asarray(value, dtype=np.float64).reshape(-1)

    def decode(self, node: Any, field: str, group: str) -> Any:
        """Read and validate a stored field."""
        if not isinstance(node, h5py.Dataset):
            raise PersistenceError("expected a dataset, found a group", group=group, field=field)
        shape, kind = node.shape, node.dtype.kind

        if self is FieldKind.SCALAR_INT:
            _expect(shape == () and kind in "iu", node, "an integer scalar", field, group)
            return int(node[()])
        if self is FieldKind.FLOAT_ARRAY:
            _expect(len(shape) == 1 and kind == "f", node, "a 1-D float array", field, group)
            return np.asarray(node[()], dtype=np.float64)
        if self is FieldKind.UINT128_ARRAY:
            _expect(
                len(shape) == 2 and shape[1] == 2 and kind in "iu",
                node,
                "an (n, 2) integer word array",
                field,
                group,
            )
            return uint128_from_storage(node[()].astype(np.int64, copy=False))

        _expect(len(shape) == 1 and kind in "iu", node, "a 1-D integer array", field, group)
        dtype = np.uint32 if self is FieldKind.WORD_ARRAY else np.int64
        data = node[()]
        if self is FieldKind.WORD_ARRAY and data.size:
            if data.min() < 0 or data.max() > np.iinfo(np.uint32).max:
                raise PersistenceError("word values exceed 32 bits", group=group, field=field)
        return np.asarray(data, dtype=dtype)


def _expect(ok: bool, node: h5py.Dataset, what: str, field: str, group: str) -> None:
    if not ok:
        msg = f"expected {what}, found shape {node.shape} dtype {node.dtype}"
        raise PersistenceError(msg, group=group, field=field)


__all__ = ["FieldKind", "uint128_from_storage", "uint128_to_storage"]
