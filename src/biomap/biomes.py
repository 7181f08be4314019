"""Biome types, their colors, and elevation/moisture classification."""

from enum import Enum
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray


class Biome(str, Enum):
    """Terrain cover classes with fixed display colors."""

    GRASS = "grass"
    DEEP_WATER = "deep_water"
    WATER = "water"
    DIRT = "dirt"
    SAND = "sand"
    WET_SAND = "wet_sand"
    DARK_FOREST = "dark_forest"
    HIGH_DARK_FOREST = "high_dark_forest"
    LIGHT_FOREST = "light_forest"
    MOUNTAIN = "mountain"
    HIGH_MOUNTAIN = "high_mountain"
    SNOW = "snow"

    @property
    def color(self) -> tuple[int, int, int]:
        """RGB color used when rasterizing this biome."""
        return BIOME_COLORS[self]


BIOME_COLORS: dict[Biome, tuple[int, int, int]] = {
    Biome.GRASS: (120, 157, 80),
    Biome.WATER: (9, 82, 198),
    Biome.DEEP_WATER: (0, 62, 178),
    Biome.DIRT: (114, 98, 49),
    Biome.SAND: (194, 178, 128),
    Biome.WET_SAND: (164, 148, 99),
    Biome.DARK_FOREST: (60, 97, 20),
    Biome.HIGH_DARK_FOREST: (40, 77, 0),
    Biome.LIGHT_FOREST: (85, 122, 45),
    Biome.MOUNTAIN: (140, 142, 123),
    Biome.HIGH_MOUNTAIN: (160, 162, 143),
    Biome.SNOW: (235, 235, 235),
}

# Storage values follow declaration order
_BIOME_VALUES: dict[Biome, int] = {biome: i for i, biome in enumerate(Biome)}
_VALUE_BIOMES: dict[int, Biome] = {i: biome for biome, i in _BIOME_VALUES.items()}

# Palette indexed by storage value, shape (12, 3)
PALETTE: NDArray[np.uint8] = np.array(
    [BIOME_COLORS[biome] for biome in Biome], dtype=np.uint8
)

# Ordered rules, first match wins. Ranges overlap, so order matters.
# Predicates work on float32 scalars and arrays alike.
Rule = tuple[Biome, Callable]

RULES: tuple[Rule, ...] = (
    (Biome.DEEP_WATER, lambda e, m: e < 0.39),
    (Biome.WATER, lambda e, m: e < 0.42),
    (Biome.SAND, lambda e, m: (e < 0.46) & (m < 0.57)),
    (Biome.WET_SAND, lambda e, m: (e < 0.47) & (m < 0.6)),
    (Biome.DIRT, lambda e, m: (e < 0.47) & (m >= 0.6)),
    (Biome.GRASS, lambda e, m: (e > 0.54) & (m < 0.43) & (e < 0.62)),
    (Biome.HIGH_DARK_FOREST, lambda e, m: (e < 0.62) & (m >= 0.58)),
    (Biome.DARK_FOREST, lambda e, m: (e < 0.62) & (m >= 0.49)),
    (Biome.SNOW, lambda e, m: e >= 0.79),
    (Biome.HIGH_MOUNTAIN, lambda e, m: e >= 0.74),
    (Biome.MOUNTAIN, lambda e, m: (e >= 0.68) & (m >= 0.10)),
)

FALLBACK_BIOME = Biome.LIGHT_FOREST


def classify(elevation: float, moisture: float) -> Biome:
    """Classify a single (elevation, moisture) pair.

    Every pair maps to exactly one biome; anything no rule claims,
    including NaN, becomes light forest.
    """
    e = np.float32(elevation)
    m = np.float32(moisture)
    for biome, matches in RULES:
        if matches(e, m):
            return biome
    return FALLBACK_BIOME


def classify_map(
    elevation: ArrayLike,
    moisture: ArrayLike,
) -> NDArray[np.uint8]:
    """Classify every cell of the elevation and moisture fields.

    Applies the same ordered rules as :func:`classify`; ``np.select`` takes
    the first condition that holds for each cell.

    Args:
        elevation: Elevation field.
        moisture: Moisture field of the same shape.

    Returns:
        Array of biome storage values as uint8.
    """
    e = np.asarray(elevation, dtype=np.float32)
    m = np.asarray(moisture, dtype=np.float32)

    conditions = [matches(e, m) for _, matches in RULES]
    choices = [_BIOME_VALUES[biome] for biome, _ in RULES]

    return np.select(
        conditions, choices, default=_BIOME_VALUES[FALLBACK_BIOME]
    ).astype(np.uint8)


def biome_value(biome: Biome) -> int:
    """Convert Biome to its uint8 storage value."""
    return _BIOME_VALUES[biome]


def value_to_biome(value: int) -> Biome:
    """Convert a uint8 storage value back to Biome.

    Raises:
        ValueError: If the value is not a biome storage value.
    """
    try:
        return _VALUE_BIOMES[int(value)]
    except KeyError:
        raise ValueError(f"Unknown biome value: {value}") from None


def biome_fractions(biomes: NDArray[np.uint8]) -> dict[Biome, float]:
    """Fraction of cells covered by each biome."""
    counts = np.bincount(biomes.ravel(), minlength=len(_BIOME_VALUES))
    total = max(biomes.size, 1)
    return {biome: float(counts[i] / total) for biome, i in _BIOME_VALUES.items()}
