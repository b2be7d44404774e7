"""Pytest fixtures for h5kit tests."""

import h5py
import numpy as np
import pytest

from h5kit.core.random import BufferedGenerator


@pytest.fixture
def seeded_rng():
    """Generator seeded with [42] that has already served a few outputs."""
    rng = BufferedGenerator([42])
    rng.random(5)
    rng.random_uint128()
    return rng


@pytest.fixture
def small_rng():
    """Generator with tiny buffers so refills happen within a few draws."""
    return BufferedGenerator(7, float_cache_size=5, int_cache_size=3)


@pytest.fixture
def h5_path(tmp_path):
    """Path for a not-yet-existing HDF5 file."""
    return tmp_path / "data.h5"


@pytest.fixture
def tree_file(tmp_path):
    """Create a small HDF5 file with nested groups and datasets.

    Layout::

        /a          dataset
        /g          group
        /g/h        group
        /g/h/y      dataset
        /g/x        dataset
    """
    path = tmp_path / "tree.h5"
    with h5py.File(path, "w") as f:
        f.create_dataset("a", data=1)
        f.create_dataset("g/x", data=np.arange(3))
        f.create_dataset("g/h/y", data=2.5)
    return path
