# pixel_dither/resample.py
from __future__ import annotations

"""
Explicit resampling steps of the pipeline.

Exports:
  grid_size(width, height, pixel_size) -> (gw, gh)
  downsample_box(source, pixel_size) -> U8Image   area-average mosaic
  upscale_nearest(grid, width, height) -> U8Image  nearest-neighbour stretch

downsample_box splits the source into gh row bands and gw column bands with
integer edges floor(i * H / gh) and averages each rectangle. pixel_size=1 is
an exact identity.

upscale_nearest samples the grid at each output pixel centre. When W/gw is
not an integer the last cells of a row cover a partial block; that is kept.
"""

from typing import Tuple

import numpy as np

from .core_types import U8Image, assert_u8_image_rgb


def grid_size(width: int, height: int, pixel_size: int) -> Tuple[int, int]:
    """Mosaic grid dimensions, each at least 1."""
    ps = int(pixel_size)
    return max(1, int(width) // ps), max(1, int(height) // ps)


def _band_edges(length: int, bands: int) -> np.ndarray:
    return (np.arange(bands + 1, dtype=np.int64) * length) // bands


def downsample_box(source: U8Image, pixel_size: int) -> U8Image:
    """
    Box-filter source down to its mosaic grid.
    Each cell is the rounded mean of the source rectangle it covers.
    """
    rgb = assert_u8_image_rgb(source)
    height, width = int(rgb.shape[0]), int(rgb.shape[1])
    gw, gh = grid_size(width, height, pixel_size)

    if height == 0 or width == 0:
        return np.zeros((gh, gw, 3), dtype=np.uint8)
    if (gw, gh) == (width, height):
        return np.array(rgb, dtype=np.uint8, copy=True)

    ys = _band_edges(height, gh)
    xs = _band_edges(width, gw)

    rows = np.add.reduceat(rgb, ys[:-1], axis=0, dtype=np.uint64)
    sums = np.add.reduceat(rows, xs[:-1], axis=1, dtype=np.uint64)

    area = (np.diff(ys)[:, None] * np.diff(xs)[None, :]).astype(np.uint64)[..., None]
    # Round half up in integer arithmetic.
    means = (2 * sums + area) // (2 * area)
    return means.astype(np.uint8)


def upscale_nearest(grid: U8Image, width: int, height: int) -> U8Image:
    """Stretch grid to (height, width) with nearest-neighbour sampling."""
    rgb = assert_u8_image_rgb(grid)
    gh, gw = int(rgb.shape[0]), int(rgb.shape[1])
    width, height = int(width), int(height)

    if width <= 0 or height <= 0 or gw == 0 or gh == 0:
        return np.zeros((max(0, height), max(0, width), 3), dtype=np.uint8)

    # Sample at pixel centres: src = floor((x + 0.5) * gw / W).
    yi = ((2 * np.arange(height, dtype=np.int64) + 1) * gh) // (2 * height)
    xi = ((2 * np.arange(width, dtype=np.int64) + 1) * gw) // (2 * width)
    return rgb[yi[:, None], xi[None, :]].astype(np.uint8, copy=False)


__all__ = ["grid_size", "downsample_box", "upscale_nearest"]
