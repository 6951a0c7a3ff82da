# pixel_dither/vector.py
"""Run-length rectangle export of a quantized grid.

emit_runs walks each grid row left to right and merges neighbouring cells of
exactly the same colour into one RectRun. Runs never cross rows, so the runs
tile the grid with no gaps or overlaps. runs_to_svg wraps them in an SVG
document of size (gw * cell, gh * cell).
"""

from typing import Iterator, List, Tuple, Union

import numpy as np
import svg

from .core_types import RectRun, RGBTuple, U8Image, assert_u8_image_rgb, rgb_to_hex

Number = Union[int, float]


def _row_runs(row: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Start columns and lengths of equal-colour runs in one (W,3) row."""
    width = int(row.shape[0])
    changes = np.flatnonzero(np.any(row[1:] != row[:-1], axis=1)) + 1
    starts = np.concatenate(([0], changes)).astype(np.int64)
    lengths = np.diff(np.concatenate((starts, [width])))
    return starts, lengths


def emit_runs(grid: U8Image) -> Iterator[RectRun]:
    """Yield RectRun records row by row, left to right."""
    rgb = assert_u8_image_rgb(grid)
    if rgb.shape[1] == 0:
        return
    for y in range(int(rgb.shape[0])):
        row = rgb[y]
        starts, lengths = _row_runs(row)
        for x, run in zip(starts.tolist(), lengths.tolist()):
            r, g, b = (int(v) for v in row[x])
            yield RectRun(y=y, x=x, run=run, color=(r, g, b))


def emit_vector(
    grid: U8Image, cell: Number
) -> List[Tuple[Number, Number, Number, Number, RGBTuple]]:
    """
    Rectangles (x, y, width, height, colour) already scaled to output pixels,
    one per run in emit_runs order. Use emit_runs for the RectRun records
    themselves (grid units) and RectRun.rect(cell) to scale one.
    """
    return [run.rect(cell) + (run.color,) for run in emit_runs(grid)]


def _num(value: Number) -> Number:
    # Keep integral sizes free of a trailing '.0' in the document.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def runs_to_svg(grid: U8Image, cell: Number) -> str:
    """SVG document with one <rect> per run."""
    rgb = assert_u8_image_rgb(grid)
    width = _num(rgb.shape[1] * cell)
    height = _num(rgb.shape[0] * cell)

    elements: List[svg.Element] = []
    for run in emit_runs(rgb):
        x, y, w, h = (_num(v) for v in run.rect(cell))
        elements.append(
            svg.Rect(x=x, y=y, width=w, height=h, fill=rgb_to_hex(run.color))
        )

    doc = svg.SVG(
        width=width,
        height=height,
        viewBox=svg.ViewBoxSpec(0, 0, width, height),
        elements=elements,
    )
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + doc.as_str()


__all__ = ["emit_runs", "emit_vector", "runs_to_svg"]
