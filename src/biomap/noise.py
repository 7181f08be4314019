"""Noise generation functions for map generation.

Provides fractal Brownian motion over a seeded OpenSimplex source and
the seed draws that feed it.
"""

from typing import Callable

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex

from .config import NoiseConfig
from .exceptions import InvalidOctaveCountError

SEED_MAX = int(np.iinfo(np.int64).max)


def sum_octaves(
    num_iterations: int,
    point: tuple[float, float] | tuple[NDArray[np.float64], NDArray[np.float64]],
    persistence: float,
    scale: float,
    low: float,
    high: float,
    noise_fn: Callable[..., float | NDArray[np.float64]],
) -> float | NDArray[np.float64]:
    """Sum octaves of coherent noise into a single normalized value.

    Each octave doubles the sampling frequency and multiplies the amplitude
    by ``persistence``. The sum is divided by the total amplitude and then
    mapped from [-1, 1] onto [low, high]. No clamping is applied.

    ``point`` is either an ``(x, y)`` pair of scalars, in which case
    ``noise_fn(x, y)`` must return a float, or a pair of 1-D coordinate
    arrays, in which case ``noise_fn`` must return an array of shape
    ``(len(y), len(x))`` and so does this function.

    Args:
        num_iterations: Number of octaves, at least 1.
        point: Sample coordinates.
        persistence: Amplitude multiplier between octaves.
        scale: Frequency of the first octave.
        low: Lower bound of the output range.
        high: Upper bound of the output range.
        noise_fn: Noise evaluator returning values in [-1, 1].

    Returns:
        Normalized noise value(s).

    Raises:
        InvalidOctaveCountError: If num_iterations is less than 1.
    """
    if num_iterations < 1:
        raise InvalidOctaveCountError(
            f"At least one octave is required, got {num_iterations}"
        )

    x, y = point
    max_amp = 0.0
    amp = 1.0
    freq = scale
    noise = 0.0

    for _ in range(num_iterations):
        noise = noise + noise_fn(x * freq, y * freq) * amp
        max_amp += amp
        amp *= persistence
        freq *= 2.0

    return (noise / max_amp) * (high - low) / 2.0 + (high + low) / 2.0


def generate_noise_map(
    seed: int,
    scale: float,
    width: int,
    height: int,
    config: NoiseConfig | None = None,
) -> NDArray[np.float32]:
    """Generate a fractal noise field over the whole grid.

    A fresh OpenSimplex source is built from ``seed`` for every call, so
    calls share no state and may run concurrently.

    Args:
        seed: Seed for the noise source.
        scale: Base sampling frequency.
        width: Grid width.
        height: Grid height.
        config: Octave parameters (defaults: 16 octaves, persistence 0.5,
            range [0, 1]).

    Returns:
        2D float32 array of shape (height, width).
    """
    if config is None:
        config = NoiseConfig()

    generator = OpenSimplex(seed=seed)
    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(height, dtype=np.float64)

    values = sum_octaves(
        config.octaves,
        (xs, ys),
        config.persistence,
        scale,
        config.low,
        config.high,
        generator.noise2array,
    )
    return np.asarray(values, dtype=np.float32)


def draw_seed(rng: np.random.Generator) -> int:
    """Draw a non-negative 64-bit noise seed from ``rng``."""
    return int(rng.integers(0, SEED_MAX))
