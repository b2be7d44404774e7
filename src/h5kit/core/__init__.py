"""Core module for h5kit - domain models and generators."""

from h5kit.core.domain.state import GeneratorState
from h5kit.core.random import BufferedGenerator

__all__ = ["BufferedGenerator", "GeneratorState"]
