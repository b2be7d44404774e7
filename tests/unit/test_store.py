"""Tests for HDF5 file helpers."""

import h5py
import numpy as np
import pytest

from h5kit.core.shared.exceptions import ElementNotFoundError, StoreError
from h5kit.io.store import (
    delete,
    dump,
    format_tree,
    has,
    open_store,
    read_object,
    writable_mode,
    write_object,
)


class TestTree:
    """Tests for tree formatting and dumping."""

    def test_format_tree(self, tree_file):
        with h5py.File(tree_file, "r") as f:
            lines = format_tree(f, space="  ")
        assert lines == ["/", "  a", "  /g", "    /g/h", "      y", "    x"]

    def test_format_subgroup(self, tree_file):
        with h5py.File(tree_file, "r") as f:
            lines = format_tree(f["g/h"], space="-")
        assert lines == ["/g/h", "-y"]

    def test_dump_default_indent(self, tree_file, capsys):
        lines = dump(tree_file)
        assert lines[1] == "      a"
        assert capsys.readouterr().out.splitlines() == lines

    def test_dump_open_file_with_echo(self, tree_file):
        seen = []
        with h5py.File(tree_file, "r") as f:
            dump(f, space=" ", echo=seen.append)
        assert seen[0] == "/"
        assert " /g" in seen

    def test_dump_empty_file(self, h5_path):
        h5py.File(h5_path, "w").close()
        assert dump(h5_path, echo=lambda line: None) == ["/"]


class TestDelete:
    """Tests for element deletion."""

    def test_delete_dataset(self, tree_file):
        delete(tree_file, "g/x")
        assert not has(tree_file, "g/x")
        assert has(tree_file, "g/h/y")

    def test_delete_group(self, tree_file):
        delete(tree_file, "g")
        assert not has(tree_file, "g/h/y")
        assert has(tree_file, "a")

    def test_delete_missing(self, tree_file):
        with pytest.raises(ElementNotFoundError, match='"nope" does not exist') as excinfo:
            delete(tree_file, "nope")
        assert isinstance(excinfo.value, KeyError)
        assert excinfo.value.element == "nope"


class TestObjects:
    """Tests for generic object write/read passthrough."""

    def test_array_round_trip(self, h5_path):
        data = np.arange(12.0).reshape(3, 4)
        write_object(h5_path, "arrays/x", data)
        np.testing.assert_array_equal(read_object(h5_path, "arrays/x"), data)

    def test_scalar_and_string(self, h5_path):
        write_object(h5_path, "n", 3)
        write_object(h5_path, "label", "héllo")
        assert read_object(h5_path, "n") == 3
        assert read_object(h5_path, "label") == "héllo"

    def test_replace_existing(self, h5_path):
        write_object(h5_path, "x", np.zeros(10))
        write_object(h5_path, "x", [1, 2])
        np.testing.assert_array_equal(read_object(h5_path, "x"), [1, 2])

    def test_compress(self, h5_path):
        write_object(h5_path, "z", np.zeros(1000), compress=True)
        with h5py.File(h5_path, "r") as f:
            assert f["z"].compression == "gzip"

    def test_unsupported_object(self, h5_path):
        with pytest.raises(StoreError, match="Cannot store"):
            write_object(h5_path, "bad", {"a": 1})

    def test_read_missing(self, tree_file):
        with pytest.raises(ElementNotFoundError):
            read_object(tree_file, "missing")

    def test_read_group(self, tree_file):
        with pytest.raises(StoreError, match="is a group"):
            read_object(tree_file, "g")


class TestOpenStore:
    """Tests for scoped file handles."""

    def test_closed_after_block(self, h5_path):
        with open_store(h5_path, "w") as f:
            f.create_dataset("x", data=1)
        assert not f

    def test_closed_after_error(self, h5_path):
        with pytest.raises(RuntimeError), open_store(h5_path, "w") as f:
            raise RuntimeError("boom")
        assert not f

    def test_missing_file(self, h5_path):
        with pytest.raises(StoreError, match="Cannot open"):
            with open_store(h5_path, "r"):
                pass

    def test_writable_mode(self, h5_path):
        assert writable_mode(h5_path) == "w"
        h5py.File(h5_path, "w").close()
        assert writable_mode(h5_path) == "r+"
