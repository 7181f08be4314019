"""Field generation for maps: elevation and moisture from noise and the mask."""

from concurrent import futures

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel

from .config import CompositorConfig, MapConfig
from .exceptions import GridBoundsError, GridShapeError
from .noise import generate_noise_map

logger = structlog.get_logger()


class Seeds(BaseModel, frozen=True):
    """Immutable pair of noise seeds, one per layer."""

    elevation: int
    moisture: int


def cell_index(x: int, y: int, width: int, height: int) -> int:
    """Return the row-major linear index of cell (x, y).

    Raises:
        GridBoundsError: If the cell lies outside the grid.
    """
    if not (0 <= x < width and 0 <= y < height):
        raise GridBoundsError(f"Cell ({x}, {y}) outside {width}x{height} grid")
    return x + width * y


def compose_fields(
    gradient: NDArray[np.float32],
    height_noise: NDArray[np.float32],
    moisture_noise: NDArray[np.float32],
    config: CompositorConfig | None = None,
    out: tuple[NDArray[np.float32], NDArray[np.float32]] | None = None,
) -> tuple[NDArray[np.float32], NDArray[np.float32]]:
    """Combine raw noise layers with the gradient mask.

    Elevation is lowered toward the rim and moisture shifted by the mask.
    Only the lower bound is clamped; values above 1 are kept and fall
    through to the catch-all biome.

    Args:
        gradient: Radial mask.
        height_noise: Raw elevation noise in [0, 1].
        moisture_noise: Raw moisture noise in [0, 1].
        config: Compositing weights.
        out: Optional (elevation, moisture) buffers to write into.

    Returns:
        Tuple of (elevation, moisture) float32 fields.

    Raises:
        GridShapeError: If the inputs do not share one shape.
    """
    if config is None:
        config = CompositorConfig()

    if not (gradient.shape == height_noise.shape == moisture_noise.shape):
        raise GridShapeError(
            f"Field shapes differ: gradient {gradient.shape}, "
            f"height {height_noise.shape}, moisture {moisture_noise.shape}"
        )

    if out is None:
        elevation = np.empty(gradient.shape, dtype=np.float32)
        moisture = np.empty(gradient.shape, dtype=np.float32)
    else:
        elevation, moisture = out

    # float32 throughout
    height_noise = height_noise.astype(np.float32, copy=False)
    moisture_noise = moisture_noise.astype(np.float32, copy=False)
    gradient = gradient.astype(np.float32, copy=False)

    elevation[...] = (
        height_noise * config.elevation_gain
        - gradient * config.elevation_mask_weight
    )
    moisture[...] = moisture_noise - (
        config.moisture_bias - gradient
    ) * config.moisture_mask_weight

    np.maximum(elevation, 0.0, out=elevation)
    np.maximum(moisture, 0.0, out=moisture)

    return elevation, moisture


def generate_maps(
    gradient: NDArray[np.float32],
    seeds: Seeds,
    config: MapConfig,
) -> tuple[NDArray[np.float32], NDArray[np.float32]]:
    """Generate elevation and moisture fields for one map.

    The two noise layers are independent, so they are computed in parallel
    and joined before compositing.

    Args:
        gradient: Radial mask matching the configured grid.
        seeds: Noise seeds for the elevation and moisture layers.
        config: Map configuration.

    Returns:
        Tuple of (elevation, moisture) float32 fields.
    """
    width, height = config.width, config.height

    with futures.ThreadPoolExecutor(max_workers=2) as executor:
        height_job = executor.submit(
            generate_noise_map,
            seeds.elevation,
            config.layers.elevation_scale,
            width,
            height,
            config.noise,
        )
        moisture_job = executor.submit(
            generate_noise_map,
            seeds.moisture,
            config.layers.moisture_scale,
            width,
            height,
            config.noise,
        )
        height_noise = height_job.result()
        moisture_noise = moisture_job.result()

    logger.debug(
        "noise_layers_generated",
        elevation_seed=seeds.elevation,
        moisture_seed=seeds.moisture,
        width=width,
        height=height,
    )

    return compose_fields(gradient, height_noise, moisture_noise, config.compositor)
