"""Configuration models for h5kit."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from h5kit.core.random.generator import FLOAT_CACHE_SIZE, INT_CACHE_SIZE


class RNGConfig(BaseModel):
    """Generator state persistence settings.

    Example:
        [rng]
        group = "GLOBAL_RNG"
        float_cache_size = 1002
        int_cache_size = 64
    """

    model_config = ConfigDict(extra="forbid")

    group: str = Field(default="GLOBAL_RNG", description="Group path holding the generator state.")
    float_cache_size: Annotated[int, Field(gt=0)] = Field(
        default=FLOAT_CACHE_SIZE,
        description="Length of the float output buffer of new generators.",
    )
    int_cache_size: Annotated[int, Field(gt=0)] = Field(
        default=INT_CACHE_SIZE,
        description="Length of the 128-bit integer output buffer of new generators.",
    )

    @field_validator("group")
    @classmethod
    def validate_group(cls, v: str) -> str:
        """Reject paths that resolve to the file root."""
        if not v.strip("/"):
            msg = "group must name a group below the root"
            raise ValueError(msg)
        return v


class RepackConfig(BaseModel):
    """Settings for the external h5repack tool."""

    model_config = ConfigDict(extra="forbid")

    executable: str = Field(default="h5repack", description="h5repack executable name or path.")


class DumpConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    indent: str = Field(default="      ", description="Indentation per tree level.")


class H5KitConfig(BaseModel):
    """Top-level h5kit configuration."""

    model_config = ConfigDict(extra="forbid")

    rng: RNGConfig = Field(default_factory=RNGConfig)
    repack: RepackConfig = Field(default_factory=RepackConfig)
    dump: DumpConfig = Field(default_factory=DumpConfig)
