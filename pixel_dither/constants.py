# pixel_dither/constants.py
"""
Defaults and tunables used across the project.

- Processing defaults (pixel size, dither method, strength, threshold)
- Palette defaults (preset, custom text, k-means bounds)
- Export defaults (scale range, JPEG quality)
"""
from __future__ import annotations

from typing import Tuple

# =========================
# Processing
# =========================
DEFAULT_PIXEL_SIZE: int = 24
MAX_PIXEL_SIZE_HINT: int = 64  # CLI help only; larger values are allowed

DITHER_METHODS: Tuple[str, ...] = ("none", "fs", "ordered", "threshold")
DEFAULT_METHOD: str = "fs"
DEFAULT_STRENGTH: float = 0.7
DEFAULT_THRESHOLD: int = 128

# Rec. 709 luma weights, applied to raw sRGB values (no linearisation).
LUMA_WEIGHTS: Tuple[float, float, float] = (0.2126, 0.7152, 0.0722)

# =========================
# Palette
# =========================
PALETTE_MODES: Tuple[str, ...] = ("preset", "custom", "extract")
DEFAULT_PALETTE_MODE: str = "preset"
DEFAULT_PRESET: str = "PICO-8 (16)"
DEFAULT_CUSTOM_TEXT: str = "#000,#fff"

KMEANS_DEFAULT_K: int = 8
KMEANS_MIN_K: int = 2
KMEANS_MAX_K: int = 32
KMEANS_STRIDE: int = 4
KMEANS_ITERATIONS: int = 12

# =========================
# Export
# =========================
EXPORT_FORMATS: Tuple[str, ...] = ("png", "jpg", "svg")
DEFAULT_EXPORT_SCALE: float = 1.0
EXPORT_SCALE_MIN: float = 0.25
EXPORT_SCALE_MAX: float = 4.0
DEFAULT_JPEG_QUALITY: float = 0.92

__all__ = [
    "DEFAULT_PIXEL_SIZE",
    "MAX_PIXEL_SIZE_HINT",
    "DITHER_METHODS",
    "DEFAULT_METHOD",
    "DEFAULT_STRENGTH",
    "DEFAULT_THRESHOLD",
    "LUMA_WEIGHTS",
    "PALETTE_MODES",
    "DEFAULT_PALETTE_MODE",
    "DEFAULT_PRESET",
    "DEFAULT_CUSTOM_TEXT",
    "KMEANS_DEFAULT_K",
    "KMEANS_MIN_K",
    "KMEANS_MAX_K",
    "KMEANS_STRIDE",
    "KMEANS_ITERATIONS",
    "EXPORT_FORMATS",
    "DEFAULT_EXPORT_SCALE",
    "EXPORT_SCALE_MIN",
    "EXPORT_SCALE_MAX",
    "DEFAULT_JPEG_QUALITY",
]
