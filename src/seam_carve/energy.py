"""Energy functions for seam carving.

The energy of a pixel measures local edge strength. Seams are routed through
low-energy pixels, so flat regions are removed first and edges are kept.
"""

from abc import ABC, abstractmethod

import numpy as np
from scipy import ndimage

# Luma weights (ITU-R BT.601), indexed R, G, B
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


class EnergyFunction(ABC):
    """Abstract base class for energy functions."""

    @abstractmethod
    def compute(self, image: np.ndarray) -> np.ndarray:
        """Compute energy map for the given image.

        Args:
            image: Input image as numpy array (H, W, C) or (H, W)

        Returns:
            Energy map as float64 numpy array (H, W); higher values mark
            pixels that should survive carving
        """
        pass


class GradientEnergyFunction(EnergyFunction):
    """Sobel gradient energy (from the original seam carving paper).

    Uses the L1 norm of the image gradient on the luminance channel:
    E(i, j) = |dI/dx| + |dI/dy|

    Values are raw magnitudes: zero on uniform regions, unbounded above.
    """

    CHANNEL_ORDERS = ("rgb", "bgr")

    def __init__(self, channel_order: str = "rgb"):
        """Initialize gradient energy function.

        Args:
            channel_order: Channel layout of color input ('rgb' for Pillow
                arrays, 'bgr' for OpenCV arrays)
        """
        channel_order = channel_order.lower()
        if channel_order not in self.CHANNEL_ORDERS:
            raise ValueError(f"Unknown channel order: {channel_order}")
        self.channel_order = channel_order

    def compute(self, image: np.ndarray) -> np.ndarray:
        """Compute gradient-based energy map."""
        gray = self.to_grayscale(image)

        grad_x = self._sobel(gray, axis=1)
        grad_y = self._sobel(gray, axis=0)

        return np.abs(grad_x) + np.abs(grad_y)

    def to_grayscale(self, image: np.ndarray) -> np.ndarray:
        """Convert an image to a float64 luminance map.

        8-bit color input is rounded back to 8-bit luminance before the
        float cast; other dtypes keep full precision.
        """
        image = np.asarray(image)

        if image.ndim == 3 and image.shape[2] == 1:
            image = image[:, :, 0]
        if image.ndim == 2:
            return image.astype(np.float64)
        if image.ndim != 3 or image.shape[2] < 3:
            raise ValueError(f"Expected (H, W) or (H, W, 3) image, got {image.shape}")

        weights = LUMA_WEIGHTS if self.channel_order == "rgb" else LUMA_WEIGHTS[::-1]
        gray = image[:, :, :3].astype(np.float64) @ weights

        if image.dtype == np.uint8:
            gray = np.rint(gray).clip(0, 255).astype(np.uint8)
        return gray.astype(np.float64)

    def _sobel(self, image: np.ndarray, axis: int) -> np.ndarray:
        """3x3 Sobel derivative along one axis.

        mode="mirror" reflects about the edge pixel without repeating it, so
        the outermost row or column has zero derivative across the border.
        """
        return ndimage.sobel(image, axis=axis, mode="mirror")


def compute_energy(image: np.ndarray) -> np.ndarray:
    """Compute the default gradient energy map of an RGB image."""
    return GradientEnergyFunction().compute(image)


def normalize_energy(energy: np.ndarray) -> np.ndarray:
    """Remap energy to [0, 1] for display.

    Monotonic, so seam positions are unchanged. A constant map becomes zeros.
    """
    energy_min = energy.min()
    energy_max = energy.max()
    if energy_max > energy_min:
        return (energy - energy_min) / (energy_max - energy_min)
    return np.zeros_like(energy, dtype=np.float64)
