"""Map generation configuration models."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field


class NoiseConfig(BaseModel):
    """Fractal noise parameters shared by the elevation and moisture layers."""

    octaves: int = Field(default=16, ge=1, description="Number of octaves for fBm")
    persistence: float = Field(
        default=0.5, description="Amplitude multiplier per octave"
    )
    low: float = Field(default=0.0, description="Lower bound of the output range")
    high: float = Field(default=1.0, description="Upper bound of the output range")


class LayerConfig(BaseModel):
    """Base sampling scale of each noise layer."""

    elevation_scale: float = Field(
        default=0.004, description="Base frequency of the elevation noise"
    )
    moisture_scale: float = Field(
        default=0.007, description="Base frequency of the moisture noise"
    )


class MaskConfig(BaseModel):
    """Radial gradient mask parameters."""

    offset: float = Field(
        default=0.1, description="Subtracted from the squared falloff before clamping"
    )


class CompositorConfig(BaseModel):
    """Weights used when combining noise layers with the gradient mask."""

    elevation_gain: float = Field(default=1.1, description="Elevation noise multiplier")
    elevation_mask_weight: float = Field(
        default=0.8, description="How strongly the mask lowers elevation"
    )
    moisture_bias: float = Field(
        default=0.1, description="Mask value at which moisture is unchanged"
    )
    moisture_mask_weight: float = Field(
        default=0.4, description="How strongly the mask shifts moisture"
    )


class MapConfig(BaseModel):
    """Complete map generation configuration."""

    width: int = Field(default=2048, ge=1, description="Map width in pixels")
    height: int = Field(default=2048, ge=1, description="Map height in pixels")
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Seed for the per-map seed source (None = fresh entropy)",
    )
    output: str = Field(default="output.png", description="Output image path")

    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    layers: LayerConfig = Field(default_factory=LayerConfig)
    mask: MaskConfig = Field(default_factory=MaskConfig)
    compositor: CompositorConfig = Field(default_factory=CompositorConfig)


def load_config(config_path: Path) -> MapConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed MapConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return MapConfig.model_validate(data)
