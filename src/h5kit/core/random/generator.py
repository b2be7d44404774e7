"""Buffered MT19937 generator with a persistable internal state.

The generator keeps two precomputed output buffers on top of NumPy's MT19937
bit generator: a block of doubles in ``[0, 1)`` and a block of unsigned
128-bit integers. Outputs are served from the buffers and the buffers are
refilled in whole blocks, so the complete state is the bit-generator state
plus both buffers and their read indices (see ``GeneratorState``).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from h5kit.core.domain.state import MT_KEY_WORDS, SEED_MAX, GeneratorState

if TYPE_CHECKING:
    from numpy.typing import NDArray

FLOAT_CACHE_SIZE = 1002
INT_CACHE_SIZE = 64

SeedLike = int | Sequence[int] | None


def make_seed(seed: SeedLike = None) -> NDArray[np.int64]:
    """Normalize seed material into a non-empty int64 array.

    ``None`` draws four fresh 32-bit words from the OS entropy pool.
    """
    if seed is None:
        words = np.random.SeedSequence().generate_state(4, dtype=np.uint32)
        return words.astype(np.int64)

    values = [int(seed)] if isinstance(seed, int | np.integer) else [int(s) for s in seed]
    if not values:
        msg = "seed must contain at least one integer"
        raise ValueError(msg)
    if any(not 0 <= v <= SEED_MAX for v in values):
        msg = f"seed values must lie in [0, {SEED_MAX}]"
        raise ValueError(msg)
    return np.array(values, dtype=np.int64)


def _bit_generator(seed: NDArray[np.int64]) -> np.random.MT19937:
    return np.random.MT19937(np.random.SeedSequence([int(s) for s in seed]))


class BufferedGenerator:
    """Pseudo-random generator whose full state round-trips through HDF5."""

    def __init__(
        self,
        seed: SeedLike = None,
        float_cache_size: int = FLOAT_CACHE_SIZE,
        int_cache_size: int = INT_CACHE_SIZE,
    ) -> None:
        if float_cache_size <= 0 or int_cache_size <= 0:
            msg = "cache sizes must be positive"
            raise ValueError(msg)
        self._float_cache_size = float_cache_size
        self._int_cache_size = int_cache_size
        self.reseed(seed)

    @classmethod
    def from_state(cls, state: GeneratorState) -> BufferedGenerator:
        """Build a generator that continues exactly where *state* left off."""
        rng = cls.__new__(cls)
        rng.set_state(state)
        return rng

    def reseed(self, seed: SeedLike = None) -> None:
        """Reinitialize the bit generator and empty both buffers."""
        self._seed = make_seed(seed)
        self._bit_gen = _bit_generator(self._seed)
        self._vals = np.zeros(self._float_cache_size, dtype=np.float64)
        self._idx_f = self._float_cache_size
        self._ints = [0] * self._int_cache_size
        self._idx_i = self._int_cache_size

    @property
    def seed(self) -> tuple[int, ...]:
        return tuple(int(s) for s in self._seed)

    # --- Outputs ---

    def random(self, size: int | tuple[int, ...] | None = None) -> float | NDArray[np.float64]:
        """Return float(s) drawn uniformly from ``[0, 1)``."""
        if size is None:
            return float(self._take_floats(1)[0])
        shape = (int(size),) if np.ndim(size) == 0 else tuple(int(s) for s in size)
        count = int(np.prod(shape, dtype=np.int64))
        return self._take_floats(count).reshape(shape)

    def random_uint128(self) -> int:
        """Return an integer drawn uniformly from ``[0, 2**128)``."""
        if self._idx_i == len(self._ints):
            self._refill_ints()
        value = self._ints[self._idx_i]
        self._idx_i += 1
        return value

    def integers(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high)``."""
        span = high - low
        if span <= 0:
            msg = f"empty range [{low}, {high})"
            raise ValueError(msg)
        if span > 1 << 128:
            msg = "range wider than 128 bits"
            raise ValueError(msg)
        limit = (1 << 128) - ((1 << 128) % span)
        while True:
            value = self.random_uint128()
            if value < limit:
                return low + value % span

    def _take_floats(self, count: int) -> NDArray[np.float64]:
        out = np.empty(count, dtype=np.float64)
        filled = 0
        while filled < count:
            if self._idx_f == self._vals.size:
                self._refill_floats()
            take = min(count - filled, self._vals.size - self._idx_f)
            out[filled : filled + take] = self._vals[self._idx_f : self._idx_f + take]
            self._idx_f += take
            filled += take
        return out

    def _refill_floats(self) -> None:
        self._vals = np.random.Generator(self._bit_gen).random(self._vals.size)
        self._idx_f = 0

    def _refill_ints(self) -> None:
        raw = self._bit_gen.random_raw(4 * len(self._ints)).reshape(-1, 4).tolist()
        self._ints = [w0 | (w1 << 32) | (w2 << 64) | (w3 << 96) for w0, w1, w2, w3 in raw]
        self._idx_i = 0

    # --- State ---

    def get_state(self) -> GeneratorState:
        """Snapshot the generator."""
        bit_state = self._bit_gen.state["state"]
        key = np.asarray(bit_state["key"], dtype=np.uint32)
        state_val = np.append(key, np.uint32(bit_state["pos"]))
        return GeneratorState(
            idx_f=self._idx_f,
            idx_i=self._idx_i,
            state_val=state_val,
            vals=self._vals.copy(),
            seed=self._seed.copy(),
            ints=tuple(self._ints),
        )

    def set_state(self, state: GeneratorState) -> None:
        """Replace the whole generator state with *state*.

        Nothing is modified until the new bit generator has been built.
        """
        bit_gen = _bit_generator(state.seed)
        bit_gen.state = {
            "bit_generator": "MT19937",
            "state": {"key": np.array(state.key, dtype=np.uint32), "pos": state.pos},
        }
        self._bit_gen = bit_gen
        self._seed = np.array(state.seed, dtype=np.int64)
        self._vals = np.array(state.vals, dtype=np.float64)
        self._idx_f = state.idx_f
        self._ints = list(state.ints)
        self._idx_i = state.idx_i
        self._float_cache_size = self._vals.size
        self._int_cache_size = len(self._ints)

    def copy(self) -> BufferedGenerator:
        """Return an independent generator with identical state."""
        return BufferedGenerator.from_state(self.get_state())

    def __repr__(self) -> str:
        return (
            f"BufferedGenerator(seed={list(self.seed)}, "
            f"idxF={self._idx_f}/{self._vals.size}, idxI={self._idx_i}/{len(self._ints)})"
        )


# Process-wide default generator, reseeded in place so references stay valid
_default_generator = BufferedGenerator()


def default_generator() -> BufferedGenerator:
    """Return the process-wide default generator."""
    return _default_generator


def set_seed(seed: SeedLike = None) -> None:
    """Reseed the process-wide default generator."""
    _default_generator.reseed(seed)


__all__ = [
    "FLOAT_CACHE_SIZE",
    "INT_CACHE_SIZE",
    "MT_KEY_WORDS",
    "BufferedGenerator",
    "default_generator",
    "make_seed",
    "set_seed",
]
