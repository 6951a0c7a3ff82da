# pixel_dither/pipeline.py
from __future__ import annotations

"""
Processing pipeline: source buffer -> mosaic grid -> palette grid -> full size.

Exports:
  Config                     frozen per-run settings
  Config.from_raw(...)       clamp raw UI/CLI values into a Config
  process(source, config, *, should_cancel=None, debug=False) -> ProcessResult
"""

import time
from dataclasses import dataclass, field
from typing import Sequence, Union

import numpy as np

from .constants import (
    DEFAULT_METHOD,
    DEFAULT_PIXEL_SIZE,
    DEFAULT_STRENGTH,
    DEFAULT_THRESHOLD,
)
from .core_types import (
    CancelCheck,
    Palette,
    ProcessResult,
    U8Image,
    as_palette,
    assert_u8_image_rgb,
    clamp_value,
)
from .dither import check_method, dither
from .errors import InvalidInput, RunCancelled
from .palette_data import default_palette
from .resample import downsample_box, upscale_nearest
from .utils import debug_log, describe, format_duration


def _frozen_palette(palette: Union[Palette, Sequence[Sequence[int]], None]) -> Palette:
    pal = as_palette(palette) if palette is not None else np.zeros((0, 3), np.uint8)
    if pal.shape[0] == 0:
        pal = default_palette()
    pal.setflags(write=False)
    return pal


@dataclass(frozen=True, eq=False)
class Config:
    """
    Settings for one processing run.

    pixel_size : mosaic block edge in source pixels, >= 1
    method     : "none" | "fs" | "ordered" | "threshold"
    strength   : ordered-dither strength in [0, 1]
    threshold  : luma cut for the threshold method, 0..255
    palette    : (P,3) uint8, P >= 1
    """

    pixel_size: int = DEFAULT_PIXEL_SIZE
    method: str = DEFAULT_METHOD
    strength: float = DEFAULT_STRENGTH
    threshold: int = DEFAULT_THRESHOLD
    palette: Palette = field(default_factory=lambda: _frozen_palette(None))

    def __post_init__(self) -> None:
        object.__setattr__(self, "palette", _frozen_palette(self.palette))

    @classmethod
    def from_raw(
        cls,
        pixel_size: float = DEFAULT_PIXEL_SIZE,
        method: str = DEFAULT_METHOD,
        strength: float = DEFAULT_STRENGTH,
        threshold: float = DEFAULT_THRESHOLD,
        palette: Union[Palette, Sequence[Sequence[int]], None] = None,
    ) -> "Config":
        """
        Clamp raw control values: pixel_size -> int >= 1, strength -> [0, 1],
        threshold -> int [0, 255], empty palette -> black/white.
        Raises InvalidInput for an unknown method.
        """
        check_method(method)
        return cls(
            pixel_size=max(1, int(pixel_size)),
            method=method,
            strength=float(clamp_value(float(strength), 0.0, 1.0)),
            threshold=int(clamp_value(int(round(float(threshold))), 0, 255)),
            palette=palette,  # type: ignore[arg-type]
        )


def _check(should_cancel: CancelCheck, stage: str) -> None:
    if should_cancel is not None and should_cancel():
        raise RunCancelled(f"cancelled before {stage}")


def process(
    source: U8Image,
    config: Config,
    *,
    should_cancel: CancelCheck = None,
    debug: bool = False,
) -> ProcessResult:
    """
    Run the full pipeline on a decoded (H,W,3|4) uint8 buffer.

    Raises RunCancelled when should_cancel() turns True between stages or
    between diffusion rows. Raises InvalidInput if pixel_size < 1 (callers
    clamp via Config.from_raw).
    """
    if config.pixel_size < 1:
        raise InvalidInput(f"pixel_size must be >= 1, got {config.pixel_size}")
    rgb = assert_u8_image_rgb(source)
    height, width = int(rgb.shape[0]), int(rgb.shape[1])

    t0 = time.perf_counter()
    _check(should_cancel, "downsample")
    grid = downsample_box(rgb, config.pixel_size)
    t1 = time.perf_counter()

    _check(should_cancel, "dither")
    quantized = dither(
        grid,
        config.palette,
        config.method,
        strength=config.strength,
        threshold=config.threshold,
        should_cancel=should_cancel,
    )
    t2 = time.perf_counter()

    _check(should_cancel, "upscale")
    full = upscale_nearest(quantized, width, height)
    t3 = time.perf_counter()

    if debug:
        debug_log(
            describe(
                [
                    ("Source", f"{width}x{height}"),
                    ("Grid", f"{grid.shape[1]}x{grid.shape[0]}"),
                    ("Method", config.method),
                    ("Palette", int(config.palette.shape[0])),
                    ("Downsample", format_duration(t1 - t0)),
                    ("Dither", format_duration(t2 - t1)),
                    ("Upscale", format_duration(t3 - t2)),
                ]
            )
        )

    return ProcessResult(grid=quantized, image=full)


__all__ = ["Config", "process"]
