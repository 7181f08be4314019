"""Procedural biome map generation.

This package builds island-shaped maps from layered OpenSimplex noise and a
radial gradient mask, classifies each cell into a biome from its elevation
and moisture, and rasterizes the result into an RGB image.
"""

from .biomes import Biome, classify, classify_map
from .config import MapConfig, load_config
from .fields import Seeds, compose_fields, generate_maps
from .generator import GenerationResult, MapGenerator, generate_map
from .island import generate_gradient
from .noise import generate_noise_map, sum_octaves
from .render import rasterize, render_image, save_image

__all__ = [
    "Biome",
    "GenerationResult",
    "MapConfig",
    "MapGenerator",
    "Seeds",
    "classify",
    "classify_map",
    "compose_fields",
    "generate_gradient",
    "generate_map",
    "generate_maps",
    "generate_noise_map",
    "load_config",
    "rasterize",
    "render_image",
    "save_image",
    "sum_octaves",
]
