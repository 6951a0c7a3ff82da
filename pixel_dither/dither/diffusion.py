# pixel_dither/dither/diffusion.py
from __future__ import annotations

from typing import Tuple

import numpy as np

from ..core_types import CancelCheck, Palette, U8Image
from ..errors import RunCancelled


# (dx, dy, weight in sixteenths)
FS_WEIGHTS: Tuple[Tuple[int, int, int], ...] = (
    (1, 0, 7),
    (-1, 1, 3),
    (0, 1, 5),
    (1, 1, 1),
)
FS_DIVISOR = 16


def diffuse_row(
    row: np.ndarray,
    err_cur: np.ndarray,
    pal_f: np.ndarray,
    pal_u8: Palette,
) -> Tuple[U8Image, np.ndarray]:
    """
    Quantize one grid row left to right, diffusing error as it goes.

    row     : (W,3) raw cell colours
    err_cur : (W+2,3) float accumulator for this row; cell x lives at x+1,
              so slots 0 and W+1 absorb writes past either edge. Updated in place.
    Returns (quantized row (W,3) uint8, next-row accumulator (W+2,3)).
    """
    width = int(row.shape[0])
    out = np.empty((width, 3), dtype=np.uint8)
    err_next = np.zeros((width + 2, 3), dtype=np.float64)

    for x in range(width):
        px = np.clip(row[x].astype(np.float64) + err_cur[x + 1], 0.0, 255.0)
        d = pal_f - px
        j = int(np.argmin((d * d).sum(axis=1)))
        out[x] = pal_u8[j]

        e = px - pal_f[j]
        for dx, dy, w in FS_WEIGHTS:
            acc = err_next if dy else err_cur
            acc[x + 1 + dx] += e * (w / FS_DIVISOR)

    return out, err_next


def dither_floyd_steinberg(
    grid: U8Image,
    palette: Palette,
    *,
    should_cancel: CancelCheck = None,
) -> U8Image:
    """
    Floyd–Steinberg diffusion in RGB to the nearest palette colour.
    Single left-to-right pass per row (no serpentine). Polls should_cancel
    once per row.
    """
    H, W, _ = grid.shape
    pal_u8 = np.asarray(palette, dtype=np.uint8).reshape(-1, 3)
    pal_f = pal_u8.astype(np.float64)
    out: U8Image = np.zeros((H, W, 3), dtype=np.uint8)

    err_cur = np.zeros((W + 2, 3), dtype=np.float64)
    for y in range(H):
        if should_cancel is not None and should_cancel():
            raise RunCancelled(f"stopped at row {y}/{H}")
        out[y], err_cur = diffuse_row(grid[y], err_cur, pal_f, pal_u8)

    return out


__all__ = ["FS_WEIGHTS", "FS_DIVISOR", "diffuse_row", "dither_floyd_steinberg"]
