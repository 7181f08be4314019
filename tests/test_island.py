"""Tests for the radial gradient mask."""

import numpy as np
import pytest

from biomap.config import MaskConfig
from biomap.island import generate_gradient


class TestGenerateGradient:
    """Tests for gradient mask generation."""

    def test_output_shape(self) -> None:
        """Output has (height, width) shape."""
        result = generate_gradient(48, 32)
        assert result.shape == (32, 48)

    def test_output_dtype(self) -> None:
        """Output is float32."""
        assert generate_gradient(16, 16).dtype == np.float32

    def test_output_range(self) -> None:
        """Values are clamped to [0, 1]."""
        result = generate_gradient(64, 64)
        assert result.min() >= 0.0
        assert result.max() <= 1.0

    def test_center_is_zero(self) -> None:
        """Grid center is fully inland."""
        result = generate_gradient(64, 64)
        assert result[32, 32] == 0.0

    def test_interior_is_zero(self) -> None:
        """Cells well away from the rim are clamped to 0."""
        result = generate_gradient(64, 64)
        # (1 - 22/32)^2 = 0.098 < 0.1
        assert np.all(result[22:43, 22:43] == 0.0)

    def test_edges_near_maximum(self) -> None:
        """Edge rows and columns sit at 1 minus the offset."""
        result = generate_gradient(64, 64)
        np.testing.assert_allclose(result[0, :], 0.9, rtol=1e-6)
        np.testing.assert_allclose(result[:, 0], 0.9, rtol=1e-6)

    def test_zero_offset_edges_are_one(self) -> None:
        """Without the offset the rim reaches 1."""
        result = generate_gradient(32, 32, MaskConfig(offset=0.0))
        np.testing.assert_array_equal(result[0, :], 1.0)

    def test_rises_toward_edge(self) -> None:
        """Values never decrease moving from the center to the left edge."""
        result = generate_gradient(64, 64)
        row = result[32, :33]
        assert np.all(np.diff(row) <= 0.0)

    def test_horizontal_mirror_symmetry(self) -> None:
        """Column x matches column W - x."""
        width = 64
        result = generate_gradient(width, 40)
        for x in range(1, width):
            np.testing.assert_array_equal(result[:, x], result[:, width - x])

    def test_vertical_mirror_symmetry(self) -> None:
        """Row y matches row H - y."""
        height = 40
        result = generate_gradient(64, height)
        for y in range(1, height):
            np.testing.assert_array_equal(result[y, :], result[height - y, :])

    @pytest.mark.parametrize("size", [31, 33])
    def test_odd_sizes(self, size: int) -> None:
        """Odd grid sizes still reach 0 at the center."""
        result = generate_gradient(size, size)
        center = size // 2
        assert result[center, center] == 0.0
        assert result[0, 0] == pytest.approx(0.9)

    def test_known_value(self) -> None:
        """Spot check a value inside the falloff band."""
        result = generate_gradient(64, 64)
        # nearest edge distance 4, (1 - 4/32)^2 - 0.1
        assert result[4, 20] == pytest.approx((1 - 4 / 32) ** 2 - 0.1, rel=1e-6)
