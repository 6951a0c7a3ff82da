# pixel_dither/dither/threshold.py
from __future__ import annotations

"""Binary threshold on luma to a two-colour palette."""

from typing import Tuple

import numpy as np

from ..colour_convert import luma_array, sort_by_luma
from ..core_types import Palette, U8Image
from ..palette_data import default_palette


def two_tone(palette: Palette) -> Tuple[np.ndarray, np.ndarray]:
    """
    Working (dark, light) pair for thresholding.
      - fewer than 2 entries -> black, white
      - exactly 2            -> as given
      - more than 2          -> darkest and lightest by luma
    """
    pal = np.asarray(palette, dtype=np.uint8).reshape(-1, 3)
    if pal.shape[0] < 2:
        pal = default_palette()
    elif pal.shape[0] > 2:
        ordered = sort_by_luma(pal)
        pal = ordered[[0, -1]]
    return pal[0].copy(), pal[1].copy()


def dither_threshold(grid: U8Image, palette: Palette, threshold: float) -> U8Image:
    """Cells with luma < threshold take the dark colour, the rest the light one."""
    dark, light = two_tone(palette)
    below = luma_array(grid) < float(threshold)
    out = np.where(below[..., None], dark[None, None, :], light[None, None, :])
    return out.astype(np.uint8, copy=False)


__all__ = ["two_tone", "dither_threshold"]
