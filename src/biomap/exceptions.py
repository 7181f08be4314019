"""Custom exceptions for map generation."""


class BiomapError(Exception):
    """Base exception for map generation errors."""

    pass


class InvalidOctaveCountError(BiomapError, ValueError):
    """Raised when fractal noise is requested with fewer than one octave."""

    pass


class GridBoundsError(BiomapError, IndexError):
    """Raised when a cell coordinate falls outside the grid."""

    pass


class GridShapeError(BiomapError, ValueError):
    """Raised when fields that must share a grid have different shapes."""

    pass
