# pixel_dither/dither/__init__.py
"""
Dithering API.

Provides:
  dither(grid, palette, method, *, strength=0.7, threshold=128, should_cancel=None) -> U8Image
    Map every grid cell to a palette colour.

    Methods:
      none      : nearest palette colour per cell
      fs        : Floyd–Steinberg error diffusion, left to right, no serpentine
      ordered   : 8x8 Bayer bias scaled by strength, then nearest colour
      threshold : luma < threshold -> darkest, else lightest

    Preconditions (not re-checked): strength in [0, 1], threshold in [0, 255],
    palette non-empty.

    Raises:
      InvalidInput for an unknown method.
"""

from ..constants import DEFAULT_STRENGTH, DEFAULT_THRESHOLD, DITHER_METHODS
from ..core_types import CancelCheck, Palette, U8Image
from ..errors import InvalidInput
from ..quantize import quantize_grid
from .diffusion import FS_DIVISOR, FS_WEIGHTS, diffuse_row, dither_floyd_steinberg
from .ordered import BAYER8, apply_bayer_bias, bayer_offset, dither_ordered
from .threshold import dither_threshold, two_tone


def check_method(method: str) -> str:
    if method not in DITHER_METHODS:
        raise InvalidInput(
            f"unknown dither method {method!r} (expected one of {', '.join(DITHER_METHODS)})"
        )
    return method


def dither(
    grid: U8Image,
    palette: Palette,
    method: str,
    *,
    strength: float = DEFAULT_STRENGTH,
    threshold: float = DEFAULT_THRESHOLD,
    should_cancel: CancelCheck = None,
) -> U8Image:
    check_method(method)
    if method == "fs":
        return dither_floyd_steinberg(grid, palette, should_cancel=should_cancel)
    if method == "ordered":
        return dither_ordered(grid, palette, strength)
    if method == "threshold":
        return dither_threshold(grid, palette, threshold)
    return quantize_grid(grid, palette)


__all__ = [
    "dither",
    "check_method",
    "FS_WEIGHTS",
    "FS_DIVISOR",
    "diffuse_row",
    "dither_floyd_steinberg",
    "BAYER8",
    "bayer_offset",
    "apply_bayer_bias",
    "dither_ordered",
    "two_tone",
    "dither_threshold",
]
