"""Domain representation of a serialized generator state."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

# MT19937 key length; the stored state vector appends the key position
MT_KEY_WORDS = 624
STATE_WORDS = MT_KEY_WORDS + 1
UINT128_MAX = (1 << 128) - 1
SEED_MAX = (1 << 63) - 1


@dataclass(frozen=True, eq=False)
class GeneratorState:
    """Snapshot of a BufferedGenerator's internals.

    Instances are validated on construction, so a GeneratorState that exists
    is always installable into a generator.
    """

    idx_f: int
    idx_i: int
    state_val: NDArray[np.uint32]
    vals: NDArray[np.float64]
    seed: NDArray[np.int64]
    ints: tuple[int, ...]

    def __post_init__(self) -> None:
        state_val = np.array(self.state_val, dtype=np.uint32).reshape(-1)
        vals = np.array(self.vals, dtype=np.float64).reshape(-1)
        seed = np.array(self.seed, dtype=np.int64).reshape(-1)
        ints = tuple(int(v) for v in self.ints)

        if state_val.size != STATE_WORDS:
            msg = f"state_val must hold {STATE_WORDS} words, got {state_val.size}"
            raise ValueError(msg)
        if state_val[-1] > MT_KEY_WORDS:
            msg = f"state_val key position {int(state_val[-1])} exceeds {MT_KEY_WORDS}"
            raise ValueError(msg)
        if vals.size == 0 or not ints:
            msg = "vals and ints buffers must not be empty"
            raise ValueError(msg)
        if not 0 <= self.idx_f <= vals.size:
            msg = f"idxF={self.idx_f} out of range for a float buffer of {vals.size}"
            raise ValueError(msg)
        if not 0 <= self.idx_i <= len(ints):
            msg = f"idxI={self.idx_i} out of range for an integer buffer of {len(ints)}"
            raise ValueError(msg)
        if seed.size == 0 or (seed < 0).any():
            msg = "seed must be a non-empty array of non-negative integers"
            raise ValueError(msg)
        if any(not 0 <= v <= UINT128_MAX for v in ints):
            msg = "ints must hold unsigned 128-bit values"
            raise ValueError(msg)

        # Store private copies so the snapshot cannot alias a live generator
        for name, value in (("state_val", state_val), ("vals", vals), ("seed", seed)):
            value.setflags(write=False)
            object.__setattr__(self, name, value)
        object.__setattr__(self, "idx_f", int(self.idx_f))
        object.__setattr__(self, "idx_i", int(self.idx_i))
        object.__setattr__(self, "ints", ints)

    @property
    def key(self) -> NDArray[np.uint32]:
        """MT19937 key words."""
        return self.state_val[:MT_KEY_WORDS]

    @property
    def pos(self) -> int:
        """MT19937 key position."""
        return int(self.state_val[MT_KEY_WORDS])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeneratorState):
            return NotImplemented
        return (
            self.idx_f == other.idx_f
            and self.idx_i == other.idx_i
            and np.array_equal(self.state_val, other.state_val)
            and np.array_equal(self.vals, other.vals)
            and np.array_equal(self.seed, other.seed)
            and self.ints == other.ints
        )

    __hash__ = None  # type: ignore[assignment]
