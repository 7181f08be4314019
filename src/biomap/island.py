"""Island shaping: radial gradient mask that pushes map edges toward water."""

import numpy as np
from numpy.typing import NDArray

from .config import MaskConfig


def _fold(size: int) -> NDArray[np.int64]:
    """Distance of each coordinate from the nearer grid edge, folded at the center."""
    coords = np.arange(size, dtype=np.int64)
    return np.where(coords > size // 2, size - coords, coords)


def generate_gradient(
    width: int,
    height: int,
    config: MaskConfig | None = None,
) -> NDArray[np.float32]:
    """Generate the radial falloff mask.

    Each cell takes its distance to the nearest edge, normalized by half the
    width, inverts and squares it, subtracts the configured offset, and
    clamps to [0, 1]. The result is 0 in the interior and approaches
    ``1 - offset`` at the rim. It depends only on the grid size, so it can be
    computed once and reused for every map.

    Args:
        width: Grid width.
        height: Grid height.
        config: Mask parameters.

    Returns:
        2D float32 array of shape (height, width).
    """
    if config is None:
        config = MaskConfig()

    a = _fold(width)
    b = _fold(height)
    smaller = np.minimum(a[np.newaxis, :], b[:, np.newaxis]).astype(np.float32)

    value = smaller / np.float32(width / 2.0)
    value = np.float32(1.0) - value
    value = value * value

    return np.clip(value - config.offset, 0.0, 1.0).astype(np.float32)
