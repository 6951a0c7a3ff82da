# pixel_dither/__init__.py
"""
pixel_dither package.

Purpose:
  Turn a full-colour image into palette-limited pixel art: mosaic reduction,
  palette selection, dithering, and a run-length SVG export. See pixelate.py
  for the CLI.

Public API:
  process         : full pipeline, returns ProcessResult(grid, image).
  Config          : frozen per-run settings (Config.from_raw clamps raw values).
  PreviewSession  : latest-request-wins wrapper that drops stale runs.
  resolve_palette : preset / custom / extract palette with black/white fallback.
  extract_palette : k-means colours of an image, dark -> light.
  parse_hex_list  : '#000,#fff' style text to a palette.
  nearest         : nearest palette colour in RGB.
  dither          : none / fs / ordered / threshold on a grid.
  emit_runs       : row-wise run-length RectRun records.
  emit_vector     : scaled rectangles for vector export.
  runs_to_svg     : SVG document of the runs.

Quick start:
  from pixel_dither import Config, process, resolve_palette
  pal = resolve_palette("preset", preset="Game Boy (4)")
  result = process(rgb, Config.from_raw(pixel_size=8, method="ordered", palette=pal))
"""

__version__ = "0.1.0"

from . import colour_convert
from . import constants
from . import core_types
from . import errors
from . import palette_data
from . import utils

from .colour_select import resolve_palette
from .core_types import ProcessResult, RectRun
from .dither import dither
from .errors import EmptyPalette, EmptySampleSet, InvalidInput, RunCancelled
from .kmeans import extract_palette
from .palette_data import MONOCHROME, PRESETS, parse_hex_list
from .pipeline import Config, process
from .quantize import nearest
from .resample import downsample_box, upscale_nearest
from .session import PreviewSession
from .vector import emit_runs, emit_vector, runs_to_svg

__all__ = [
    "__version__",
    "colour_convert",
    "constants",
    "core_types",
    "errors",
    "palette_data",
    "utils",
    "Config",
    "ProcessResult",
    "RectRun",
    "PreviewSession",
    "process",
    "resolve_palette",
    "extract_palette",
    "parse_hex_list",
    "nearest",
    "dither",
    "downsample_box",
    "upscale_nearest",
    "emit_runs",
    "emit_vector",
    "runs_to_svg",
    "MONOCHROME",
    "PRESETS",
    "InvalidInput",
    "EmptyPalette",
    "EmptySampleSet",
    "RunCancelled",
]
