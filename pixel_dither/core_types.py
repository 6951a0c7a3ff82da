# pixel_dither/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 3)
Palette = NDArray[np.uint8]  # (P, 3), order significant

# Polled between rows / stages. Returning True stops the run.
CancelCheck = Optional[Callable[[], bool]]

# Value objects


@dataclass(frozen=True)
class RectRun:
    """Horizontal run of identical grid cells, in grid units."""

    y: int
    x: int
    run: int
    color: RGBTuple

    def rect(self, cell: float) -> Tuple[float, float, float, float]:
        """(x, y, width, height) in output pixels for a given cell size."""
        return (self.x * cell, self.y * cell, self.run * cell, cell)


@dataclass(frozen=True, eq=False)
class ProcessResult:
    """Quantized grid and the full-size buffer stretched from it."""

    grid: U8Image  # (Gh, Gw, 3)
    image: U8Image  # (H, W, 3)

    @property
    def grid_size(self) -> Tuple[int, int]:
        return int(self.grid.shape[1]), int(self.grid.shape[0])


# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def rgb_to_hex(rgb: Sequence[int]) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{int(rgb[0]):02x}{int(rgb[1]):02x}{int(rgb[2]):02x}"


def coerce_to_rgb_tuple(value: Union[Sequence[int], NDArray[np.generic]]) -> RGBTuple:
    """
    Coerce a 3-length sequence or array to an (int, int, int) RGB tuple.
    Helpful when extracting values from NumPy rows.
    """
    if isinstance(value, np.ndarray):
        if value.size < 3:
            raise ValueError("array too small for RGB")
        return (int(value[..., 0]), int(value[..., 1]), int(value[..., 2]))
    if len(value) < 3:  # type: ignore[arg-type]
        raise ValueError("sequence too small for RGB")
    v = value  # type: ignore[assignment]
    return (int(v[0]), int(v[1]), int(v[2]))


def as_palette(colors: Union[Sequence[Sequence[int]], np.ndarray]) -> Palette:
    """Sequence of RGB triples to a (P,3) uint8 palette array."""
    arr = np.asarray(colors, dtype=np.int64).reshape(-1, 3)
    return np.clip(arr, 0, 255).astype(np.uint8)


def assert_u8_image_rgb(image: np.ndarray) -> U8Image:
    """
    Validate a uint8 (H,W,3 or 4) image and return the RGB planes.
    Any alpha plane is dropped; processed output is always opaque.
    """
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] < 3:
        raise TypeError("expected uint8 (H,W,3/4) image")
    if image.shape[-1] > 3:
        return np.ascontiguousarray(image[..., :3])  # type: ignore[return-value]
    return image  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "U8Image",
    "Palette",
    "CancelCheck",
    # value objects
    "RectRun",
    "ProcessResult",
    # helpers
    "clamp_value",
    "rgb_to_hex",
    "coerce_to_rgb_tuple",
    "as_palette",
    "assert_u8_image_rgb",
]
