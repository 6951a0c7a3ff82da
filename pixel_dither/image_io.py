# pixel_dither/image_io.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image, ImageOps

from .core_types import U8Image

"""
Image I/O helpers (sRGB), export scaling, and format selection.
"""

RASTER_SUFFIXES = {".png": "PNG", ".jpg": "JPEG", ".jpeg": "JPEG"}


def load_image_rgb(path: Path) -> U8Image:
    """Decode any Pillow-readable image to an (H,W,3) uint8 array."""
    with Image.open(path) as im0:
        im = ImageOps.exif_transpose(im0)
        if im.mode in ("RGBA", "LA", "PA") or "transparency" in im.info:
            # Flatten onto black like an unpainted canvas.
            rgba = im.convert("RGBA")
            base = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
            im = Image.alpha_composite(base, rgba)
        arr = np.array(im.convert("RGB"), dtype=np.uint8)
    return arr


def scale_nearest(rgb: U8Image, scale: float) -> U8Image:
    """Resize by scale with nearest-neighbour sampling (no smoothing)."""
    if scale == 1:
        return rgb
    H, W = int(rgb.shape[0]), int(rgb.shape[1])
    dst_w = max(1, int(round(W * scale)))
    dst_h = max(1, int(round(H * scale)))
    im = Image.fromarray(np.ascontiguousarray(rgb))
    im2 = im.resize((dst_w, dst_h), resample=Image.Resampling.NEAREST)
    return np.array(im2, dtype=np.uint8)


def save_raster(path: Path, rgb: U8Image, quality: Optional[float] = None) -> Path:
    """
    Write rgb as PNG or JPEG depending on the suffix (PNG when unknown).
    quality is 0..1 and only used for JPEG.
    """
    fmt = RASTER_SUFFIXES.get(path.suffix.lower())
    if fmt is None:
        path = path.with_suffix(".png")
        fmt = "PNG"
    im = Image.fromarray(np.ascontiguousarray(rgb))
    if fmt == "JPEG":
        q = 92 if quality is None else int(round(min(1.0, max(0.0, quality)) * 100))
        im.save(path, format=fmt, quality=q)
    else:
        im.save(path, format=fmt)
    return path


def save_svg(path: Path, text: str) -> Path:
    if path.suffix.lower() != ".svg":
        path = path.with_suffix(".svg")
    path.write_text(text, encoding="utf-8")
    return path


__all__ = [
    "RASTER_SUFFIXES",
    "load_image_rgb",
    "scale_nearest",
    "save_raster",
    "save_svg",
]
