"""Seam carving implementation for content-aware image width reduction.

Based on "Seam Carving for Content-Aware Image Resizing" by Avidan & Shamir (2007).
Vertical seams are removed one at a time; the energy map is recomputed from
scratch on the shrunken image before every seam.
"""

import logging
from typing import Optional, Union

import numpy as np
from PIL import Image
from tqdm import tqdm

from seam_carve.energy import EnergyFunction, GradientEnergyFunction, normalize_energy
from seam_carve.errors import ConfigurationError

logger = logging.getLogger(__name__)

SEAM_COLOR = (255, 0, 0)


def cumulative_cost(energy: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Forward pass of the seam search.

    Returns the cost map (minimum energy of any connected path ending at each
    pixel) and the backtrack map of predecessor offsets in {-1, 0, +1}.

    Among equal predecessors the one straight above wins, then up-left, then
    up-right: an offset only changes on a strictly smaller cost.
    """
    h, w = energy.shape
    if h == 0 or w == 0:
        raise ValueError(f"Cannot find a seam in an empty energy map {energy.shape}")

    cost = energy.astype(np.float64, copy=True)
    backtrack = np.zeros((h, w), dtype=np.int8)

    # Neighbors outside the image never win a strict comparison
    left = np.full(w, np.inf)
    right = np.full(w, np.inf)

    for i in range(1, h):
        prev = cost[i - 1]
        best = prev.copy()
        offset = np.zeros(w, dtype=np.int8)

        left[1:] = prev[:-1]
        take = left < best
        best[take] = left[take]
        offset[take] = -1

        right[:-1] = prev[1:]
        take = right < best
        best[take] = right[take]
        offset[take] = 1

        cost[i] += best
        backtrack[i] = offset

    return cost, backtrack


def find_seam(energy: np.ndarray) -> np.ndarray:
    """Find the minimum-energy vertical seam using dynamic programming.

    Args:
        energy: Energy map (H, W)

    Returns:
        Array of H column indices, one per row, adjacent entries differing
        by at most one
    """
    cost, backtrack = cumulative_cost(energy)
    h = cost.shape[0]

    seam = np.empty(h, dtype=np.int64)
    # argmin picks the lowest column among equal minima
    seam[-1] = np.argmin(cost[-1])

    for i in range(h - 2, -1, -1):
        seam[i] = seam[i + 1] + backtrack[i + 1, seam[i + 1]]

    return seam


def seam_energy(energy: np.ndarray, seam: np.ndarray) -> float:
    """Total energy of the pixels on a seam."""
    return float(energy[np.arange(energy.shape[0]), seam].sum())


def remove_seam(image: np.ndarray, seam: np.ndarray) -> np.ndarray:
    """Remove a vertical seam, returning a new image one column narrower.

    Works on (H, W) and (H, W, C) arrays. The input is left untouched.
    """
    h, w = image.shape[:2]
    seam = np.asarray(seam)

    if seam.shape != (h,):
        raise ValueError(f"Seam length {seam.shape} does not match {h} image rows")
    if h and (seam.min() < 0 or seam.max() >= w):
        raise ValueError(f"Seam column out of range for image width {w}")

    mask = np.ones((h, w), dtype=bool)
    mask[np.arange(h), seam] = False

    return image[mask].reshape((h, w - 1) + image.shape[2:])


class SeamCarver:
    """Content-aware width reduction using seam carving.

    Each iteration estimates energy, locates the cheapest vertical seam and
    removes it, so later seams see the image left by earlier removals.
    """

    def __init__(self, energy_function: Optional[EnergyFunction] = None):
        """Initialize seam carver.

        Args:
            energy_function: Energy function for pixel importance (default: gradient)
        """
        self.energy_function = energy_function or GradientEnergyFunction()

    def _to_numpy(self, image: Union[np.ndarray, Image.Image]) -> np.ndarray:
        """Convert image to numpy array."""
        if isinstance(image, Image.Image):
            return np.array(image.convert("RGB"))
        return np.asarray(image)

    def compute_energy(self, image: Union[np.ndarray, Image.Image]) -> np.ndarray:
        """Compute the energy map of an image."""
        return self.energy_function.compute(self._to_numpy(image))

    def find_vertical_seam(self, energy: np.ndarray) -> np.ndarray:
        """Find optimal vertical seam for an energy map."""
        return find_seam(energy)

    def remove_vertical_seam(self, image: np.ndarray, seam: np.ndarray) -> np.ndarray:
        """Remove vertical seam from image."""
        return remove_seam(image, seam)

    def check_num_seams(self, image: np.ndarray, num_seams: int) -> None:
        """Raise ConfigurationError unless 0 <= num_seams < image width."""
        width = image.shape[1]
        if num_seams < 0:
            raise ConfigurationError(f"num_seams ({num_seams}) must not be negative")
        if num_seams >= width:
            raise ConfigurationError(
                f"num_seams ({num_seams}) exceeds image width ({width})"
            )

    def remove_vertical_seams(
        self,
        image: Union[np.ndarray, Image.Image],
        num_seams: int,
        show_progress: bool = True,
    ) -> np.ndarray:
        """Remove num_seams vertical seams.

        The seam count is checked once against the original width.

        Args:
            image: Input image
            num_seams: Number of columns to remove
            show_progress: Show progress bar

        Returns:
            New image of width original_width - num_seams

        Raises:
            ConfigurationError: num_seams is negative or not smaller than the width
        """
        result = self._to_numpy(image)
        self.check_num_seams(result, num_seams)

        result = result.copy()
        iterator = (
            tqdm(range(num_seams), desc="Removing vertical seams")
            if show_progress
            else range(num_seams)
        )

        for _ in iterator:
            energy = self.energy_function.compute(result)
            seam = self.find_vertical_seam(energy)
            logger.debug(
                "Removing seam with energy %.3f from width %d",
                seam_energy(energy, seam),
                result.shape[1],
            )
            result = self.remove_vertical_seam(result, seam)

        return result

    def visualize_energy(self, image: Union[np.ndarray, Image.Image]) -> np.ndarray:
        """Visualize energy map for debugging."""
        energy = self.compute_energy(image)

        # Colorize energy map
        from matplotlib import colormaps

        cmap = colormaps["hot"]
        colored = cmap(normalize_energy(energy))[:, :, :3]

        return (colored * 255).astype(np.uint8)

    def visualize_seams(
        self,
        image: Union[np.ndarray, Image.Image],
        n_seams: int = 10,
    ) -> np.ndarray:
        """Visualize which seams would be removed.

        Returns a copy of the image with the first n_seams seams drawn in red
        at their positions in the original image.
        """
        img = self._to_numpy(image)
        self.check_num_seams(img, n_seams)

        result = img.copy()
        if result.ndim == 2:
            result = np.stack([result] * 3, axis=-1)

        h, w = img.shape[:2]
        rows = np.arange(h)
        # Original column of every pixel still present in temp_image
        columns = np.tile(np.arange(w), (h, 1))
        temp_image = img

        for _ in range(n_seams):
            energy = self.energy_function.compute(temp_image)
            seam = self.find_vertical_seam(energy)
            result[rows, columns[rows, seam]] = SEAM_COLOR
            temp_image = self.remove_vertical_seam(temp_image, seam)
            columns = self.remove_vertical_seam(columns, seam)

        return result


def seam_carving(
    image: np.ndarray,
    num_seams: int,
    energy_function: Optional[EnergyFunction] = None,
    show_progress: bool = False,
) -> np.ndarray:
    """Reduce image width by num_seams columns.

    Invalid seam counts are logged and the original image is returned as an
    unmodified copy.

    Example:
        >>> carved = seam_carving(np.asarray(Image.open("photo.png")), 50)
    """
    carver = SeamCarver(energy_function=energy_function)
    try:
        return carver.remove_vertical_seams(image, num_seams, show_progress=show_progress)
    except ConfigurationError as e:
        logger.error("Error: %s!", e)
        return np.array(image, copy=True)
