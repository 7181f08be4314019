"""Main map generation orchestration."""

import time

import numpy as np
import structlog
from numpy.typing import NDArray
from PIL import Image

from .biomes import Biome, biome_fractions, classify_map, value_to_biome
from .config import MapConfig
from .fields import Seeds, cell_index, generate_maps
from .island import generate_gradient
from .noise import draw_seed
from .render import colorize, to_image

logger = structlog.get_logger()


class GenerationResult:
    """Result of one map generation with all intermediate data."""

    def __init__(
        self,
        seeds: Seeds,
        elevation: NDArray[np.float32],
        moisture: NDArray[np.float32],
        biomes: NDArray[np.uint8],
        image: Image.Image,
    ):
        self.seeds = seeds
        self.elevation = elevation
        self.moisture = moisture
        self.biomes = biomes
        self.image = image

    @property
    def width(self) -> int:
        return self.biomes.shape[1]

    @property
    def height(self) -> int:
        return self.biomes.shape[0]

    def cell(self, x: int, y: int) -> tuple[float, float, Biome]:
        """Return (elevation, moisture, biome) of cell (x, y).

        Raises:
            GridBoundsError: If the cell lies outside the map.
        """
        idx = cell_index(x, y, self.width, self.height)
        return (
            float(self.elevation.ravel()[idx]),
            float(self.moisture.ravel()[idx]),
            value_to_biome(self.biomes.ravel()[idx]),
        )


def generate_map(
    config: MapConfig,
    seeds: Seeds,
    gradient: NDArray[np.float32] | None = None,
) -> GenerationResult:
    """Generate one map from explicit seeds.

    Args:
        config: Map configuration.
        seeds: Noise seeds for the elevation and moisture layers.
        gradient: Precomputed radial mask; computed from config if None.

    Returns:
        GenerationResult with fields, biome grid and image.
    """
    if gradient is None:
        gradient = generate_gradient(config.width, config.height, config.mask)

    start = time.perf_counter()
    elevation, moisture = generate_maps(gradient, seeds, config)
    maps_time = time.perf_counter() - start

    start = time.perf_counter()
    biomes = classify_map(elevation, moisture)
    image = to_image(colorize(biomes))
    image_time = time.perf_counter() - start

    logger.info(
        "map_generated",
        elevation_seed=seeds.elevation,
        moisture_seed=seeds.moisture,
        maps_seconds=round(maps_time, 3),
        image_seconds=round(image_time, 3),
    )
    _log_biome_stats(biomes)

    return GenerationResult(
        seeds=seeds,
        elevation=elevation,
        moisture=moisture,
        biomes=biomes,
        image=image,
    )


class MapGenerator:
    """Produces a fresh, independently seeded map on every regenerate call.

    The gradient mask depends only on the grid size and is computed once.
    Seeds come from ``rng``, or from a generator seeded with
    ``config.seed`` when no rng is given.
    """

    def __init__(
        self,
        config: MapConfig,
        rng: np.random.Generator | None = None,
    ):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)

        logger.info("generating_gradient", width=config.width, height=config.height)
        self.gradient = generate_gradient(config.width, config.height, config.mask)
        # Shared across regenerations, never written to
        self.gradient.flags.writeable = False

    def next_seeds(self) -> Seeds:
        """Draw an independent seed for each noise layer."""
        return Seeds(elevation=draw_seed(self.rng), moisture=draw_seed(self.rng))

    def regenerate(self) -> GenerationResult:
        """Generate a new map with fresh seeds."""
        return generate_map(self.config, self.next_seeds(), self.gradient)


def _log_biome_stats(biomes: NDArray[np.uint8]) -> None:
    """Log biome coverage statistics."""
    fractions = biome_fractions(biomes)
    logger.debug(
        "biome_stats",
        cells=int(biomes.size),
        **{biome.value: round(fraction, 4) for biome, fraction in fractions.items()},
    )
