"""High-level width reduction interface with image file I/O."""

from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from seam_carve.energy import EnergyFunction
from seam_carve.errors import InputError, OutputError
from seam_carve.seam_carving import SeamCarver

DEFAULT_OUTPUT = "resized.png"


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Decode an image file into a uint8 RGB array.

    Raises:
        InputError: The path is missing or is not a readable image
    """
    try:
        with Image.open(path) as img:
            return np.array(img.convert("RGB"))
    except (FileNotFoundError, IsADirectoryError) as e:
        raise InputError(f"Could not open image '{path}'") from e
    except (UnidentifiedImageError, OSError) as e:
        raise InputError(f"Could not open image '{path}': {e}") from e


def save_image(image: np.ndarray, path: Union[str, Path]) -> Path:
    """Encode an image to disk, creating parent directories as needed.

    The file format is inferred from the extension.

    Raises:
        OutputError: The directory or file could not be written, or the
            extension is not a known image format
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(np.asarray(image, dtype=np.uint8)).save(path)
    except (ValueError, KeyError, OSError) as e:
        raise OutputError(f"Failed to save {path}: {e}") from e
    return path


class ResizeResult:
    """Result of a width reduction."""

    def __init__(
        self,
        image: np.ndarray,
        original_size: tuple[int, int],
        seams_removed: int,
    ):
        self.image = image
        self.original_size = original_size
        self.seams_removed = seams_removed

    @property
    def resized_size(self) -> tuple[int, int]:
        """Size as (height, width)."""
        return (self.image.shape[0], self.image.shape[1])

    def to_pil(self) -> Image.Image:
        """Convert to PIL Image."""
        return Image.fromarray(self.image.astype(np.uint8))

    def save(self, path: Union[str, Path]) -> Path:
        """Save resized image."""
        return save_image(self.image, path)


class WidthReducer:
    """Loads images and removes vertical seams from them."""

    def __init__(self, energy_function: Optional[EnergyFunction] = None):
        self.seam_carver = SeamCarver(energy_function=energy_function)

    def reduce(
        self,
        image: Union[str, Path, np.ndarray, Image.Image],
        num_seams: int,
        show_progress: bool = True,
    ) -> ResizeResult:
        """Remove num_seams vertical seams from an image.

        Args:
            image: Input image (path, array, or PIL Image)
            num_seams: Number of columns to remove
            show_progress: Show progress bar

        Returns:
            ResizeResult with the carved image

        Raises:
            InputError: The image path could not be decoded
            ConfigurationError: num_seams is not smaller than the image width
        """
        img = self._load_image(image)
        result = self.seam_carver.remove_vertical_seams(
            img, num_seams, show_progress=show_progress
        )
        return ResizeResult(
            image=result,
            original_size=(img.shape[0], img.shape[1]),
            seams_removed=num_seams,
        )

    def _load_image(self, image: Union[str, Path, np.ndarray, Image.Image]) -> np.ndarray:
        """Load image from various sources."""
        if isinstance(image, (str, Path)):
            return load_image(image)
        elif isinstance(image, np.ndarray):
            return image
        elif isinstance(image, Image.Image):
            return np.array(image.convert("RGB"))
        else:
            raise ValueError(f"Unsupported image type: {type(image)}")
