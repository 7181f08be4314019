"""Shared test fixtures for map generation tests."""

import pytest

from biomap.config import MapConfig
from biomap.fields import Seeds


@pytest.fixture
def small_config() -> MapConfig:
    """48x32 map, non-square so x/y mix-ups show up."""
    return MapConfig(width=48, height=32, seed=7)


@pytest.fixture
def seeds() -> Seeds:
    """Fixed pair of distinct layer seeds."""
    return Seeds(elevation=1234, moisture=98765)
