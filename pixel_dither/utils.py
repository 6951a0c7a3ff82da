# pixel_dither/utils.py
from __future__ import annotations

"""
Console output for the CLI and the processing core.

Every line goes through print(); tagged lines ([debug], [warn], [error]) let a
piped run be filtered with grep. Also holds the colour tally printed after a
conversion.
"""

import sys
from typing import Any, Iterable, List, Optional, TextIO, Tuple

import numpy as np

from .core_types import U8Image, rgb_to_hex


def format_duration(seconds: float) -> str:
    """'12.4ms', '3.21s' or '2m 5s'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.2f}s"
    minutes, rest = divmod(int(round(seconds)), 60)
    return f"{minutes}m {rest}s"


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, (int, np.integer)):
        return f"{int(value):,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def describe(pairs: Iterable[Tuple[str, Any]]) -> str:
    """Join (label, value) pairs as 'Label: value' with two spaces between."""
    return "  ".join(f"{label}: {_display(value)}" for label, value in pairs)


def colour_usage_report(rgb: U8Image) -> List[Tuple[str, int]]:
    """
    Cells per colour in a grid or image, most used first.
    Equal counts keep the byte order of the colours.
    """
    flat = np.asarray(rgb, dtype=np.uint8).reshape(-1, 3)
    if flat.shape[0] == 0:
        return []
    uniques, counts = np.unique(flat, axis=0, return_counts=True)
    order = np.argsort(-counts, kind="stable")
    return [(rgb_to_hex(uniques[i]), int(counts[i])) for i in order]


def _emit(prefix: str, message: str, stream: Optional[TextIO] = None) -> None:
    print(f"{prefix}{message}", file=stream or sys.stdout, flush=True)


def log(message: str) -> None:
    _emit("", message)


def debug_log(message: str) -> None:
    _emit("[debug] ", message)


def warn(message: str) -> None:
    _emit("[warn] ", message)


def error(message: str) -> None:
    _emit("[error] ", message, sys.stderr)


def log_heading(name: str) -> None:
    """Blank line, then '=== name ===' ahead of one file's output."""
    _emit("\n", f"=== {name} ===")


def log_settings(section: str, pairs: Iterable[Tuple[str, Any]]) -> None:
    """'[section] Label: value  Label: value' on one line."""
    log(f"[{section}] {describe(pairs)}")


def line_buffer_stdout() -> None:
    # Keeps [warn]/[error] lines in order with stdout when piped.
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfigure):
        try:
            reconfigure(line_buffering=True)
        except (ValueError, OSError):
            pass


__all__ = [
    "format_duration",
    "describe",
    "colour_usage_report",
    "log",
    "debug_log",
    "warn",
    "error",
    "log_heading",
    "log_settings",
    "line_buffer_stdout",
]
