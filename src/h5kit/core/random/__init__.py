"""Persistable pseudo-random generators."""

from h5kit.core.random.generator import (
    FLOAT_CACHE_SIZE,
    INT_CACHE_SIZE,
    BufferedGenerator,
    default_generator,
    make_seed,
    set_seed,
)

__all__ = [
    "FLOAT_CACHE_SIZE",
    "INT_CACHE_SIZE",
    "BufferedGenerator",
    "default_generator",
    "make_seed",
    "set_seed",
]
