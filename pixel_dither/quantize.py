# pixel_dither/quantize.py
from __future__ import annotations

"""
Nearest-colour quantization in RGB.

Exports:
  nearest(color, palette) -> RGBTuple
  nearest_index(color, palette) -> int
  nearest_indices(pixels, palette) -> int array
  quantize_grid(grid, palette) -> U8Image

Distance is squared Euclidean RGB. On exact ties the lowest palette index wins
(strict less-than during the scan; np.argmin keeps the first minimum too).
"""

from typing import Sequence

import numpy as np

from .core_types import Palette, RGBTuple, U8Image, coerce_to_rgb_tuple

# Rows per distance block; bounds the (rows, P, 3) temporary.
_CHUNK_ROWS = 1 << 16


def nearest_index(color: Sequence[float], palette: Palette) -> int:
    """Index of the palette row closest to color."""
    r, g, b = float(color[0]), float(color[1]), float(color[2])
    best = 0
    best_d = float("inf")
    for i, row in enumerate(palette):
        dr = r - int(row[0])
        dg = g - int(row[1])
        db = b - int(row[2])
        d = dr * dr + dg * dg + db * db
        if d < best_d:
            best_d = d
            best = i
    return best


def nearest(color: Sequence[float], palette: Palette) -> RGBTuple:
    """Palette entry closest to color (first minimum on ties)."""
    return coerce_to_rgb_tuple(palette[nearest_index(color, palette)])


def nearest_indices(pixels: np.ndarray, palette: Palette) -> np.ndarray:
    """
    Vectorised nearest_index for pixels[..., 3].
    Returns int array with the leading shape of pixels.
    """
    lead = pixels.shape[:-1]
    flat = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
    pal = np.asarray(palette, dtype=np.float64).reshape(-1, 3)
    out = np.zeros(flat.shape[0], dtype=np.intp)
    for start in range(0, flat.shape[0], _CHUNK_ROWS):
        chunk = flat[start : start + _CHUNK_ROWS]
        diff = pal[None, :, :] - chunk[:, None, :]
        dist2 = np.sum(diff * diff, axis=2)
        out[start : start + chunk.shape[0]] = np.argmin(dist2, axis=1)
    return out.reshape(lead)


def quantize_grid(grid: U8Image, palette: Palette) -> U8Image:
    """Map every cell of grid to its nearest palette colour."""
    pal = np.asarray(palette, dtype=np.uint8).reshape(-1, 3)
    idx = nearest_indices(grid, pal)
    return pal[idx].reshape(grid.shape[:-1] + (3,)).astype(np.uint8, copy=False)


__all__ = ["nearest", "nearest_index", "nearest_indices", "quantize_grid"]
