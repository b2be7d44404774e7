"""Test configuration loading and saving."""

import tomllib

import pytest

from h5kit.core.domain.config import H5KitConfig, RepackConfig, RNGConfig
from h5kit.core.shared.exceptions import ConfigError
from h5kit.io.config import generate_default_config, load_config, save_config


class TestConfigLoading:
    """Tests for configuration file loading."""

    def test_load_valid_config(self, tmp_path):
        path = tmp_path / "h5kit.toml"
        path.write_text('[rng]\ngroup = "RUN/rng"\nint_cache_size = 8\n\n[dump]\nindent = "  "\n')
        config = load_config(path)
        assert config.rng.group == "RUN/rng"
        assert config.rng.int_cache_size == 8
        assert config.rng.float_cache_size == 1002
        assert config.dump.indent == "  "
        assert config.repack.executable == "h5repack"

    def test_load_nonexistent_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "does_not_exist.toml")

    def test_load_invalid_toml(self, tmp_path):
        path = tmp_path / "invalid.toml"
        path.write_text("not valid toml {{{")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)

    @pytest.mark.parametrize(
        "content",
        [
            "[rng]\nfloat_cache_size = 0\n",
            '[rng]\ngroup = "/"\n',
            "[unknown]\nx = 1\n",
        ],
    )
    def test_load_invalid_values(self, tmp_path, content):
        path = tmp_path / "bad.toml"
        path.write_text(content)
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_default_config_matches_defaults(self, tmp_path):
        path = tmp_path / "default.toml"
        path.write_text(generate_default_config())
        assert load_config(path) == H5KitConfig()


class TestConfigSaving:
    """Tests for configuration file saving."""

    def test_save_and_load_roundtrip(self, tmp_path):
        config = H5KitConfig(
            rng=RNGConfig(group="STATE", float_cache_size=10),
            repack=RepackConfig(executable="/usr/local/bin/h5repack"),
        )
        path = tmp_path / "roundtrip.toml"
        save_config(config, path)
        assert load_config(path) == config
