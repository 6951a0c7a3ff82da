# pixel_dither/colour_convert.py
from __future__ import annotations

"""
Luma helpers.

Exports:
  luma(rgb)            scalar luma of one colour
  luma_array(rgb)      vectorised luma, preserves leading shape
  sort_by_luma(pal)    stable dark -> light ordering of a palette

Luma is the fixed Rec. 709 weighted sum on raw 0..255 channel values.
No gamma handling.
"""

from typing import Sequence

import numpy as np

from .constants import LUMA_WEIGHTS
from .core_types import Palette

_WR, _WG, _WB = LUMA_WEIGHTS


def luma(rgb: Sequence[float]) -> float:
    """Luma of a single (r, g, b) colour."""
    return _WR * float(rgb[0]) + _WG * float(rgb[1]) + _WB * float(rgb[2])


def luma_array(rgb: np.ndarray) -> np.ndarray:
    """
    Luma for array[..., 3]. Returns float64 array[...].
    Evaluated in the same order as luma() so scalar and vector agree exactly.
    """
    rgb_f = np.asarray(rgb, dtype=np.float64)
    return _WR * rgb_f[..., 0] + _WG * rgb_f[..., 1] + _WB * rgb_f[..., 2]


def sort_by_luma(palette: Palette) -> Palette:
    """Return palette rows ordered dark -> light. Equal luma keeps input order."""
    pal = np.asarray(palette, dtype=np.uint8).reshape(-1, 3)
    order = np.argsort(luma_array(pal), kind="stable")
    return pal[order]


__all__ = ["luma", "luma_array", "sort_by_luma"]
