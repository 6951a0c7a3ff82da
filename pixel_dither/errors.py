# pixel_dither/errors.py
"""
Exception types raised by the processing core.

InvalidInput subclasses ValueError so callers that only know about the
builtin still catch bad presets, hex tokens and dither methods.
"""


class PixelDitherError(Exception):
    """Base class for pixel_dither errors."""


class InvalidInput(PixelDitherError, ValueError):
    """Unknown preset, unknown dither method, bad hex text or bad size."""


class EmptyPalette(InvalidInput):
    """A palette resolved to zero entries."""


class EmptySampleSet(InvalidInput):
    """K-means was given a buffer with nothing to sample."""


class RunCancelled(PixelDitherError):
    """A processing run was superseded and stopped early."""


__all__ = [
    "PixelDitherError",
    "InvalidInput",
    "EmptyPalette",
    "EmptySampleSet",
    "RunCancelled",
]
