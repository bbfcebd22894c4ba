"""Tests for energy functions."""

import numpy as np
import pytest

from seam_carve.energy import (
    GradientEnergyFunction,
    compute_energy,
    normalize_energy,
)


class TestGradientEnergy:
    """Tests for gradient-based energy function."""

    def test_computes_energy_map(self):
        """Test that gradient energy produces a map with the image's shape."""
        img = np.random.default_rng(0).integers(0, 256, (40, 30, 3), dtype=np.uint8)

        energy = GradientEnergyFunction().compute(img)

        assert energy.shape == (40, 30)
        assert energy.dtype == np.float64
        assert energy.min() >= 0

    def test_uniform_image_has_zero_energy(self):
        """Test that a flat-color image has no edges."""
        img = np.full((25, 25, 3), [12, 200, 77], dtype=np.uint8)

        energy = compute_energy(img)

        assert np.all(energy == 0)

    def test_step_edge_magnitude(self):
        """Test the raw Sobel response next to a vertical step edge."""
        img = np.zeros((5, 6, 3), dtype=np.uint8)
        img[:, 3:] = 100

        energy = compute_energy(img)

        # 1 + 2 + 1 kernel weights times the step height, not normalized
        assert energy[2, 2] == pytest.approx(400.0)
        assert energy[2, 3] == pytest.approx(400.0)
        assert energy[2, 0] == pytest.approx(0.0)
        assert energy[2, 5] == pytest.approx(0.0)

    def test_detects_horizontal_edges(self):
        """Test that horizontal edges register through the y gradient."""
        img = np.zeros((20, 20, 3), dtype=np.uint8)
        img[10:, :] = 255

        energy = compute_energy(img)

        assert energy[9, 10] > energy[2, 10]
        assert energy[2, 10] == 0

    def test_grayscale_input(self):
        """Test that 2D arrays are used as the luminance map directly."""
        gray = np.zeros((8, 8))
        gray[:, 4:] = 1.0

        energy = GradientEnergyFunction().compute(gray)

        assert energy.shape == (8, 8)
        assert energy[4, 3] == pytest.approx(4.0)

    def test_channel_order(self):
        """Test that BGR input weights the first channel as blue."""
        img = np.zeros((6, 6, 3), dtype=np.uint8)
        img[:, 3:, 0] = 255

        rgb = GradientEnergyFunction(channel_order="rgb").compute(img)
        bgr = GradientEnergyFunction(channel_order="bgr").compute(img)

        # 8-bit luma: round(255 * 0.299) = 76, round(255 * 0.114) = 29
        assert rgb.max() == pytest.approx(4 * 76)
        assert bgr.max() == pytest.approx(4 * 29)

    def test_border_column_has_no_x_gradient(self):
        """Test that the outermost column reflects without repeating itself."""
        img = np.zeros((6, 5, 3), dtype=np.uint8)
        img[:, 1:] = 100

        energy = compute_energy(img)

        assert np.all(energy[:, 0] == 0)
        assert energy[2, 1] == pytest.approx(400.0)
        assert np.all(energy[:, 4] == 0)

    def test_border_row_has_no_y_gradient(self):
        img = np.zeros((5, 6, 3), dtype=np.uint8)
        img[1:, :] = 100

        energy = compute_energy(img)

        assert np.all(energy[0, :] == 0)
        assert energy[1, 2] == pytest.approx(400.0)

    def test_uint8_luma_is_rounded(self):
        """Test that 8-bit input is quantized to 8-bit luminance first."""
        img = np.zeros((6, 6, 3), dtype=np.uint8)
        img[:, 3:, 2] = 1

        # 0.114 rounds to 0, so the faint blue step vanishes
        assert np.all(compute_energy(img) == 0)

    def test_float_luma_is_not_rounded(self):
        img = np.zeros((6, 6, 3), dtype=np.float64)
        img[:, 3:, 2] = 1.0

        energy = compute_energy(img)

        assert energy.max() == pytest.approx(4 * 0.114)

    def test_single_channel_input(self):
        """Test that (H, W, 1) arrays are treated as grayscale."""
        gray = np.zeros((8, 8, 1), dtype=np.uint8)
        gray[:, 4:] = 10

        energy = GradientEnergyFunction().compute(gray)

        assert energy.shape == (8, 8)
        assert energy[4, 3] == pytest.approx(40.0)

    def test_unknown_channel_order(self):
        with pytest.raises(ValueError):
            GradientEnergyFunction(channel_order="hsv")

    def test_rejects_malformed_image(self):
        with pytest.raises(ValueError):
            GradientEnergyFunction().compute(np.zeros((4, 4, 2)))

    def test_does_not_modify_input(self):
        img = np.random.default_rng(1).integers(0, 256, (10, 10, 3), dtype=np.uint8)
        before = img.copy()

        compute_energy(img)

        np.testing.assert_array_equal(img, before)


class TestNormalizeEnergy:
    """Tests for display normalization."""

    def test_range(self):
        energy = np.array([[0.0, 5.0], [10.0, 2.5]])

        normalized = normalize_energy(energy)

        assert normalized.min() == 0.0
        assert normalized.max() == 1.0
        assert normalized[1, 1] == pytest.approx(0.25)

    def test_constant_map(self):
        normalized = normalize_energy(np.full((3, 3), 7.0))

        assert np.all(normalized == 0)
