"""Seam Carve: content-aware image width reduction."""

from seam_carve.energy import EnergyFunction, GradientEnergyFunction, compute_energy
from seam_carve.errors import (
    ConfigurationError,
    InputError,
    OutputError,
    SeamCarvingError,
)
from seam_carve.resizer import ResizeResult, WidthReducer, load_image, save_image
from seam_carve.seam_carving import (
    SeamCarver,
    find_seam,
    remove_seam,
    seam_carving,
    seam_energy,
)

__version__ = "0.1.0"
__all__ = [
    "EnergyFunction",
    "GradientEnergyFunction",
    "compute_energy",
    "SeamCarvingError",
    "InputError",
    "ConfigurationError",
    "OutputError",
    "ResizeResult",
    "WidthReducer",
    "load_image",
    "save_image",
    "SeamCarver",
    "find_seam",
    "remove_seam",
    "seam_carving",
    "seam_energy",
]
