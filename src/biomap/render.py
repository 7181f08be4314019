"""Rasterization of classified fields into RGB images."""

from pathlib import Path

import numpy as np
import structlog
from numpy.typing import NDArray
from PIL import Image

from .biomes import PALETTE, classify_map
from .exceptions import GridShapeError

logger = structlog.get_logger()


def colorize(
    biomes: NDArray[np.uint8],
    out: NDArray[np.uint8] | None = None,
) -> NDArray[np.uint8]:
    """Look up the color of every cell of a biome grid.

    Args:
        biomes: Biome storage values, shape (height, width).
        out: Optional (height, width, 3) uint8 buffer, fully overwritten.

    Returns:
        RGB buffer of shape (height, width, 3).

    Raises:
        GridShapeError: If ``out`` does not match the grid.
    """
    expected = (*biomes.shape, 3)
    if out is None:
        out = np.empty(expected, dtype=np.uint8)
    elif out.shape != expected:
        raise GridShapeError(f"Image buffer shape {out.shape} != {expected}")

    np.take(PALETTE, biomes, axis=0, out=out)
    return out


def rasterize(
    elevation: NDArray[np.float32],
    moisture: NDArray[np.float32],
    out: NDArray[np.uint8] | None = None,
) -> NDArray[np.uint8]:
    """Classify every cell and write its biome color into a pixel buffer.

    Raises:
        GridShapeError: If the fields or the buffer do not match.
    """
    if elevation.shape != moisture.shape:
        raise GridShapeError(
            f"Field shapes differ: elevation {elevation.shape}, "
            f"moisture {moisture.shape}"
        )
    return colorize(classify_map(elevation, moisture), out)


def to_image(pixels: NDArray[np.uint8]) -> Image.Image:
    """Wrap an (height, width, 3) uint8 buffer as an RGB image."""
    return Image.fromarray(pixels)


def render_image(
    elevation: NDArray[np.float32],
    moisture: NDArray[np.float32],
) -> Image.Image:
    """Render fields as an RGB image of size (width, height)."""
    return to_image(rasterize(elevation, moisture))


def save_image(image: Image.Image, path: Path) -> None:
    """Save image as PNG, creating parent directories.

    Write errors propagate to the caller.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format="PNG")
    logger.info("image_saved", path=str(path), width=image.width, height=image.height)
