"""Exceptions raised by the seam carving pipeline."""


class SeamCarvingError(Exception):
    """Base class for all seam carving errors."""


class InputError(SeamCarvingError):
    """The input path does not decode to a valid image."""


class ConfigurationError(SeamCarvingError):
    """The requested seam count is not valid for the image."""


class OutputError(SeamCarvingError):
    """The carved image could not be written."""
