# pixel_dither/palette_data.py
from __future__ import annotations

"""
Palette definitions and parsers.

Exports:
  PRESETS: dict[str, list[str]]      # name -> ["#rrggbb" | "#rgb", ...]
  MONOCHROME: Palette                # black, white
  preset_names() -> list[str]
  preset_palette(name) -> Palette
  hex_to_rgb(token) -> RGBTuple
  parse_hex_list(text) -> Palette
"""

import re
from typing import Dict, List

import numpy as np

from .core_types import Palette, RGBTuple, as_palette
from .errors import EmptyPalette, InvalidInput


PRESETS: Dict[str, List[str]] = {
    "Monochrome": ["#000000", "#ffffff"],
    "Game Boy (4)": ["#0f380f", "#306230", "#8bac0f", "#9bbc0f"],
    "PICO-8 (16)": (
        "#000000 #1D2B53 #7E2553 #008751 #AB5236 #5F574F #C2C3C7 #FFF1E8 "
        "#FF004D #FFA300 #FFEC27 #00E436 #29ADFF #83769C #FF77A8 #FFCCAA"
    ).split(),
    "C64 (16)": (
        "#000000 #FFFFFF #68372B #70A4B2 #6F3D86 #588D43 #352879 #B8C76F "
        "#6F4F25 #433900 #9A6759 #444444 #6C6C6C #9AD284 #6C5EB5 #959595"
    ).split(),
    "Web 8": "#000 #555 #AAA #FFF #00A #0A0 #A00 #FA0".split(),
}

_TOKEN_SPLIT = re.compile(r"[\s,]+")
_NON_HEX = re.compile(r"[^0-9a-fA-F]")
_DASHES = re.compile(r"[‐-―−]")


def hex_to_rgb(token: str) -> RGBTuple:
    """
    Lenient hex parse: '#f0a', 'f0a', '#ff00aa', 'ff00aa'.

    Non-hex characters are dropped. Three digits are doubled ('f0a' -> 'ff00aa');
    otherwise digit pairs give r, g, b and a missing channel is 0.
    Raises InvalidInput when the token has no hex digits at all.
    """
    digits = _NON_HEX.sub("", token)
    if not digits:
        raise InvalidInput(f"not a hex colour: {token!r}")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    channels = []
    for start in (0, 2, 4):
        pair = digits[start : start + 2]
        channels.append(int(pair, 16) if pair else 0)
    return (channels[0], channels[1], channels[2])


def parse_hex_list(text: str) -> Palette:
    """
    Parse free-form text ('#000,#fff', '0f380f 306230', ...) into a palette.

    Tokens are split on whitespace and/or commas; order is preserved.
    Tokens without any hex digit are skipped. Raises EmptyPalette if nothing
    usable remains.
    """
    colours: List[RGBTuple] = []
    for token in _TOKEN_SPLIT.split(text or ""):
        token = token.strip()
        if not token:
            continue
        try:
            colours.append(hex_to_rgb(token))
        except InvalidInput:
            continue
    if not colours:
        raise EmptyPalette(f"no colours in {text!r}")
    return as_palette(colours)


def _normalise_name(name: str) -> str:
    return _DASHES.sub("-", name).strip().lower()


def preset_names() -> List[str]:
    return list(PRESETS.keys())


def preset_palette(name: str) -> Palette:
    """Look up a preset by name (case-insensitive). Raises InvalidInput if unknown."""
    wanted = _normalise_name(name)
    for key, hexes in PRESETS.items():
        if _normalise_name(key) == wanted:
            return as_palette([hex_to_rgb(hx) for hx in hexes])
    raise InvalidInput(f"unknown preset: {name!r}")


MONOCHROME: Palette = as_palette([(0, 0, 0), (255, 255, 255)])
MONOCHROME.setflags(write=False)


def default_palette() -> Palette:
    """Writable copy of the black/white fallback palette."""
    return np.array(MONOCHROME, dtype=np.uint8, copy=True)


__all__ = [
    "PRESETS",
    "MONOCHROME",
    "hex_to_rgb",
    "parse_hex_list",
    "preset_names",
    "preset_palette",
    "default_palette",
]
