"""Integration tests for CLI commands."""

import h5py
import numpy as np
import pytest
from typer.testing import CliRunner

from h5kit.core.random import BufferedGenerator
from h5kit.io.store import has


class TestCLICommands:
    """Test CLI command invocation."""

    @pytest.fixture
    def runner(self):
        """Create a CLI runner."""
        return CliRunner()

    @pytest.fixture
    def app(self):
        """Import the CLI app."""
        from h5kit.cli.app import app

        return app

    def test_help_flag(self, runner, app):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("dump", "delete", "repack", "has", "rng", "init", "info"):
            assert command in result.output

    def test_version_flag(self, runner, app):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "h5kit" in result.output

    def test_info_command(self, runner, app):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "HDF5 library" in result.output

    def test_dump(self, runner, app, tree_file):
        result = runner.invoke(app, ["dump", str(tree_file), "--indent", "2"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["/", "  a", "  /g", "    /g/h", "      y", "    x"]

    def test_dump_missing_file(self, runner, app, tmp_path):
        result = runner.invoke(app, ["dump", str(tmp_path / "absent.h5")])
        assert result.exit_code != 0

    def test_delete(self, runner, app, tree_file):
        result = runner.invoke(app, ["delete", str(tree_file), "g/h"])
        assert result.exit_code == 0
        assert "Deleted" in result.output
        assert not has(tree_file, "g/h")

    def test_delete_missing_element(self, runner, app, tree_file):
        result = runner.invoke(app, ["delete", str(tree_file), "missing"])
        assert result.exit_code == 1
        assert "missing" in result.output

    def test_has(self, runner, app, tree_file):
        found = runner.invoke(app, ["has", str(tree_file), "g/x"])
        absent = runner.invoke(app, ["has", str(tree_file), "g/z"])
        assert (found.exit_code, found.output.strip()) == (0, "yes")
        assert (absent.exit_code, absent.output.strip()) == (1, "no")

    def test_repack_missing_executable(self, runner, app, tree_file):
        result = runner.invoke(app, ["repack", str(tree_file), "-e", "no-such-h5repack-binary"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestRNGCommands:
    """Tests for the rng sub-application."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def app(self):
        from h5kit.cli.app import app

        return app

    def test_save_and_show(self, runner, app, h5_path):
        saved = runner.invoke(app, ["rng", "save", str(h5_path), "--seed", "42"])
        assert saved.exit_code == 0
        with h5py.File(h5_path, "r") as f:
            assert f["GLOBAL_RNG/seed"][()].tolist() == [42]

        shown = runner.invoke(app, ["rng", "show", str(h5_path), "--draws", "3"])
        assert shown.exit_code == 0
        assert "Generator State" in shown.output
        expected = [repr(float(v)) for v in BufferedGenerator(42).random(3)]
        assert shown.output.splitlines()[-3:] == expected

    def test_save_custom_group(self, runner, app, h5_path):
        result = runner.invoke(app, ["rng", "save", str(h5_path), "-s", "1", "-s", "2", "-g", "runs/rng"])
        assert result.exit_code == 0
        with h5py.File(h5_path, "r") as f:
            np.testing.assert_array_equal(f["runs/rng/seed"][()], [1, 2])

    def test_save_uses_config(self, runner, app, h5_path, tmp_path):
        config = tmp_path / "h5kit.toml"
        config.write_text('[rng]\ngroup = "FROM_CONFIG"\nfloat_cache_size = 16\n')
        result = runner.invoke(app, ["rng", "save", str(h5_path), "--config", str(config)])
        assert result.exit_code == 0
        with h5py.File(h5_path, "r") as f:
            assert f["FROM_CONFIG/vals"].shape == (16,)

    def test_save_invalid_seed(self, runner, app, h5_path):
        result = runner.invoke(app, ["rng", "save", str(h5_path), "--seed", "-1"])
        assert result.exit_code == 2
        assert not h5_path.exists()

    def test_show_missing_group(self, runner, app, h5_path):
        runner.invoke(app, ["rng", "save", str(h5_path), "--seed", "1"])
        result = runner.invoke(app, ["rng", "show", str(h5_path), "--group", "OTHER"])
        assert result.exit_code == 1
        assert "missing field" in result.output


class TestInitCommand:
    """Tests for init command."""

    def test_init_creates_file(self, tmp_path):
        from h5kit.cli.app import app

        path = tmp_path / "h5kit.toml"
        result = CliRunner().invoke(app, ["init", str(path)])
        assert result.exit_code == 0
        assert "[rng]" in path.read_text()

    def test_init_no_overwrite_without_force(self, tmp_path):
        from h5kit.cli.app import app

        path = tmp_path / "existing.toml"
        path.write_text("# existing content")
        result = CliRunner().invoke(app, ["init", str(path)])
        assert result.exit_code == 1
        assert path.read_text() == "# existing content"

        forced = CliRunner().invoke(app, ["init", str(path), "--force"])
        assert forced.exit_code == 0
        assert "[repack]" in path.read_text()
