"""Domain models: configuration and generator state."""

from h5kit.core.domain.config import DumpConfig, H5KitConfig, RepackConfig, RNGConfig
from h5kit.core.domain.state import GeneratorState

__all__ = ["DumpConfig", "GeneratorState", "H5KitConfig", "RNGConfig", "RepackConfig"]
