# pixel_dither/dither/ordered.py
from __future__ import annotations

"""Ordered dithering with a fixed 8x8 Bayer matrix."""

import numpy as np

from ..core_types import Palette, U8Image
from ..quantize import quantize_grid

# Standard 8x8 Bayer matrix, values 0..63.
BAYER8 = np.array(
    [
        [0, 48, 12, 60, 3, 51, 15, 63],
        [32, 16, 44, 28, 35, 19, 47, 31],
        [8, 56, 4, 52, 11, 59, 7, 55],
        [40, 24, 36, 20, 43, 27, 39, 23],
        [2, 50, 14, 62, 1, 49, 13, 61],
        [34, 18, 46, 30, 33, 17, 45, 29],
        [10, 58, 6, 54, 9, 57, 5, 53],
        [42, 26, 38, 22, 41, 25, 37, 21],
    ],
    dtype=np.int32,
)
BAYER8.setflags(write=False)


def bayer_offset(x: int, y: int) -> float:
    """Centred threshold t = (M[y%8][x%8] - 32) / 64, about -0.5..+0.48."""
    return (int(BAYER8[y & 7, x & 7]) - 32) / 64


def apply_bayer_bias(grid: U8Image, strength: float) -> np.ndarray:
    """
    Add t * 64 * strength to every channel and clamp to [0, 255].
    Returns float64 (H,W,3), the values handed to the quantizer.
    """
    H, W = int(grid.shape[0]), int(grid.shape[1])
    t = (BAYER8.astype(np.float64) - 32.0) / 64.0
    reps_y = (H + 7) // 8
    reps_x = (W + 7) // 8
    t_map = np.tile(t, (max(1, reps_y), max(1, reps_x)))[:H, :W]
    bias = t_map * 64.0 * float(strength)
    return np.clip(grid.astype(np.float64) + bias[..., None], 0.0, 255.0)


def dither_ordered(grid: U8Image, palette: Palette, strength: float) -> U8Image:
    """
    Ordered dither: Bayer-biased cells snapped to the nearest palette colour.
    strength in [0, 1]; 0 gives plain nearest-colour output.
    """
    return quantize_grid(apply_bayer_bias(grid, strength), palette)


__all__ = ["BAYER8", "bayer_offset", "apply_bayer_bias", "dither_ordered"]
