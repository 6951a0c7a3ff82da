#!/usr/bin/env python3
"""
pixelate.py
Turn an image into palette-limited pixel art with optional dithering.

Usage:
  python pixelate.py INPUT [-o OUTPUT] --pixel-size N --method [none|fs|ordered|threshold]
                     --palette [preset|custom|extract] --format [png|jpg|svg] --debug

Methods:
  none      : nearest palette colour per mosaic cell.
  fs        : Floyd–Steinberg error diffusion.
  ordered   : 8x8 Bayer pattern, --strength 0..1.
  threshold : two-tone split on luma, --threshold 0..255.

Palettes:
  preset  : --preset NAME (see --list-presets).
  custom  : --colors "#000,#fff,#ff00aa".
  extract : --k N colours picked from the image by k-means.

Output:
  <stem>_pixel_<N>.<ext> next to INPUT unless -o is given. Raster output is
  the full-size result scaled by --scale; SVG uses one rectangle per
  same-colour run with cell size N * scale.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from pixel_dither.colour_select import clamp_k, resolve_palette
from pixel_dither.constants import (
    DEFAULT_CUSTOM_TEXT,
    DEFAULT_EXPORT_SCALE,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_METHOD,
    DEFAULT_PALETTE_MODE,
    DEFAULT_PIXEL_SIZE,
    DEFAULT_PRESET,
    DEFAULT_STRENGTH,
    DEFAULT_THRESHOLD,
    DITHER_METHODS,
    EXPORT_FORMATS,
    EXPORT_SCALE_MAX,
    EXPORT_SCALE_MIN,
    KMEANS_DEFAULT_K,
    MAX_PIXEL_SIZE_HINT,
    PALETTE_MODES,
)
from pixel_dither.core_types import clamp_value, rgb_to_hex
from pixel_dither.image_io import load_image_rgb, save_raster, save_svg, scale_nearest
from pixel_dither.palette_data import PRESETS
from pixel_dither.pipeline import Config, process
from pixel_dither.utils import (
    colour_usage_report,
    debug_log,
    error,
    format_duration,
    line_buffer_stdout,
    log,
    log_heading,
    log_settings,
)
from pixel_dither.vector import runs_to_svg


def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        src, output, pixel_size, method, strength, threshold,
        palette, preset, colors, k, format, scale, quality,
        list_presets, debug
    """
    parser = argparse.ArgumentParser(
        prog="pixelate",
        description="Convert an image to palette-limited pixel art.",
    )
    parser.add_argument("src", type=Path, nargs="?", help="Input image")
    parser.add_argument(
        "-o", "--output", type=Path, default=None, help="Output path (optional)"
    )
    parser.add_argument(
        "--pixel-size",
        type=int,
        default=DEFAULT_PIXEL_SIZE,
        help=f"Mosaic block size in source pixels (>= 1, usually 1..{MAX_PIXEL_SIZE_HINT}).",
    )
    parser.add_argument(
        "--method", choices=list(DITHER_METHODS), default=DEFAULT_METHOD
    )
    parser.add_argument(
        "--strength",
        type=float,
        default=DEFAULT_STRENGTH,
        help="Ordered dither strength 0..1.",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=DEFAULT_THRESHOLD,
        help="Luma threshold 0..255 for --method threshold.",
    )
    parser.add_argument(
        "--palette", choices=list(PALETTE_MODES), default=DEFAULT_PALETTE_MODE
    )
    parser.add_argument("--preset", default=DEFAULT_PRESET, help="Preset name.")
    parser.add_argument(
        "--colors",
        default=DEFAULT_CUSTOM_TEXT,
        help='Custom hex list, e.g. "#000,#fff,#ff00aa".',
    )
    parser.add_argument(
        "--k", type=int, default=KMEANS_DEFAULT_K, help="Colours to extract (2..32)."
    )
    parser.add_argument(
        "--format",
        choices=list(EXPORT_FORMATS),
        default=None,
        help="Output format. Defaults to the -o suffix, else png.",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=DEFAULT_EXPORT_SCALE,
        help=f"Export scale {EXPORT_SCALE_MIN}..{EXPORT_SCALE_MAX}.",
    )
    parser.add_argument(
        "--quality",
        type=float,
        default=DEFAULT_JPEG_QUALITY,
        help="JPEG quality 0.5..1.",
    )
    parser.add_argument(
        "--list-presets", action="store_true", help="Print preset palettes and exit"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    return parser.parse_args(argv)


def _resolve_format(args: argparse.Namespace) -> str:
    if args.format is not None:
        return args.format
    if args.output is not None:
        suffix = args.output.suffix.lower().lstrip(".")
        if suffix == "jpeg":
            return "jpg"
        if suffix in EXPORT_FORMATS:
            return suffix
    return "png"


def _list_presets() -> None:
    for name, hexes in PRESETS.items():
        log(f"{name}: {' '.join(hexes)}")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns a process exit status."""
    line_buffer_stdout()
    args = parse_cli_args(argv)

    if args.list_presets:
        _list_presets()
        return 0
    if args.src is None:
        error("missing INPUT")
        return 2

    src: Path = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2

    t_start = time.perf_counter()
    fmt = _resolve_format(args)
    pixel_size = max(1, int(args.pixel_size))
    scale = float(clamp_value(args.scale, EXPORT_SCALE_MIN, EXPORT_SCALE_MAX))
    out_path: Path = args.output or src.with_name(
        f"{src.stem}_pixel_{pixel_size}.{fmt}"
    )

    log_heading(src.name)
    rgb = load_image_rgb(src)
    height, width = int(rgb.shape[0]), int(rgb.shape[1])

    palette = resolve_palette(
        args.palette,
        preset=args.preset,
        text=args.colors,
        source=rgb,
        k=clamp_k(args.k),
        debug=args.debug,
    )
    config = Config.from_raw(
        pixel_size=pixel_size,
        method=args.method,
        strength=args.strength,
        threshold=args.threshold,
        palette=palette,
    )

    log_settings(
        "run",
        [
            ("Size", f"{width}x{height}"),
            ("Pixel size", config.pixel_size),
            ("Method", config.method),
            ("Palette", args.palette),
            ("Colours", int(config.palette.shape[0])),
            ("Format", fmt),
            ("Scale", scale),
        ],
    )
    if args.debug:
        debug_log(
            "palette: " + " ".join(rgb_to_hex(row) for row in config.palette)
        )

    result = process(rgb, config, debug=args.debug)
    gw, gh = result.grid_size

    if fmt == "svg":
        written = save_svg(out_path, runs_to_svg(result.grid, pixel_size * scale))
    else:
        exported = scale_nearest(result.image, scale)
        quality = clamp_value(args.quality, 0.5, 1.0) if fmt == "jpg" else None
        written = save_raster(out_path, exported, quality)

    log(f"Wrote {written.name} | grid={gw}x{gh} | palette_size={config.palette.shape[0]}")
    log("Colours used:")
    for hex_code, count in colour_usage_report(result.grid):
        log(f"  {hex_code}: {count:,} cells")
    log(f"Total time {format_duration(time.perf_counter() - t_start)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
