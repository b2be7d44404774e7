"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from h5kit.core.domain.config import H5KitConfig
from h5kit.core.shared.exceptions import ConfigError


def load_config(path: Path) -> H5KitConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        H5KitConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the configuration is invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    try:
        return H5KitConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid configuration in {path}:\n{exc}"
        raise ConfigError(msg) from exc


def save_config(config: H5KitConfig, path: Path) -> None:
    """Save configuration to a TOML file."""
    data = config.model_dump(mode="json", exclude_none=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a default configuration file as a string.

    Returns:
        str: TOML-formatted default configuration.
    """
    return """# h5kit Configuration File
# Generated automatically - edit as needed

[rng]
group = "GLOBAL_RNG"  # group path holding the generator state
float_cache_size = 1002
int_cache_size = 64

[repack]
executable = "h5repack"  # name on PATH or absolute path

[dump]
indent = "      "
"""
