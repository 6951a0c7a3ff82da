# pixel_dither/colour_select.py
from __future__ import annotations

"""
Palette resolution for a processing run.

Exports:
  clamp_k(k) -> int
  resolve_palette(mode, *, preset, text, source, k, debug=False) -> Palette

Modes:
  preset  : named table from palette_data.PRESETS
  custom  : free-form hex list
  extract : k-means colours of the source image

Every failure path (unknown preset, empty hex list, nothing to sample, unknown
mode) logs a warning and returns the black/white default so a run never aborts
because of its palette.
"""

from typing import Optional

from .constants import (
    DEFAULT_CUSTOM_TEXT,
    DEFAULT_PRESET,
    KMEANS_DEFAULT_K,
    KMEANS_MAX_K,
    KMEANS_MIN_K,
)
from .core_types import Palette, U8Image, rgb_to_hex
from .errors import EmptyPalette, InvalidInput
from .kmeans import kmeans_centres
from .palette_data import default_palette, parse_hex_list, preset_palette
from .utils import debug_log, warn


def clamp_k(k: int) -> int:
    """Clamp a requested colour count to [KMEANS_MIN_K, KMEANS_MAX_K]."""
    return max(KMEANS_MIN_K, min(KMEANS_MAX_K, int(k)))


def _resolve_strict(
    mode: str,
    preset: str,
    text: str,
    source: Optional[U8Image],
    k: int,
) -> Palette:
    if mode == "preset":
        return preset_palette(preset)
    if mode == "custom":
        return parse_hex_list(text)
    if mode == "extract":
        if source is None:
            # Nothing loaded yet: not an error.
            return default_palette()
        pal = kmeans_centres(source, clamp_k(k))
        if pal.shape[0] == 0:
            raise EmptyPalette("k-means produced no centres")
        return pal
    raise InvalidInput(f"unknown palette mode: {mode!r}")


def resolve_palette(
    mode: str,
    *,
    preset: str = DEFAULT_PRESET,
    text: str = DEFAULT_CUSTOM_TEXT,
    source: Optional[U8Image] = None,
    k: int = KMEANS_DEFAULT_K,
    debug: bool = False,
) -> Palette:
    """Resolve a palette for the given mode, falling back to black/white."""
    try:
        pal = _resolve_strict(mode, preset, text, source, k)
    except InvalidInput as exc:
        # EmptyPalette / EmptySampleSet are InvalidInput subclasses.
        warn(f"palette {mode}: {exc}; using monochrome")
        return default_palette()

    if debug:
        debug_log(f"palette {mode}: " + " ".join(rgb_to_hex(row) for row in pal))
    return pal


__all__ = ["clamp_k", "resolve_palette"]
