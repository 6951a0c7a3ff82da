# pixel_dither/kmeans.py
from __future__ import annotations

"""
Deterministic k-means palette extraction.

Exports:
  sample_pixels(source, stride) -> (N,3) uint8
  initial_centres(samples, k) -> (k,3) int64
  kmeans_centres(source, k, stride, iterations) -> Palette   (raises EmptySampleSet)
  extract_palette(source, k, stride, iterations) -> Palette  (empty on no samples)

Notes:
  - Samples come from every `stride`-th row and column in row-major order.
  - Centres start at evenly spaced samples, so the same input always gives the
    same palette. There is no random restart and no early exit.
  - A centre that attracts no samples in a round keeps its previous value.
  - Result is sorted dark -> light by luma.
"""

import numpy as np

from .colour_convert import sort_by_luma
from .constants import KMEANS_ITERATIONS, KMEANS_STRIDE
from .core_types import Palette, U8Image, assert_u8_image_rgb
from .errors import EmptySampleSet
from .quantize import nearest_indices


def sample_pixels(source: U8Image, stride: int = KMEANS_STRIDE) -> np.ndarray:
    """Every stride-th row/column of source, flattened row-major to (N,3)."""
    rgb = assert_u8_image_rgb(source)
    step = max(1, int(stride))
    return rgb[::step, ::step].reshape(-1, 3)


def initial_centres(samples: np.ndarray, k: int) -> np.ndarray:
    """
    Centre i starts at sample i * max(1, N // k).
    Indices past the end (k > N) reuse the last sample.
    """
    n = int(samples.shape[0])
    step = max(1, n // k)
    idx = np.minimum(np.arange(k) * step, n - 1)
    return samples[idx].astype(np.int64)


def _rounded_mean(sums: np.ndarray, counts: np.ndarray) -> np.ndarray:
    # Round half up; all values are non-negative.
    return np.floor(sums / counts[:, None] + 0.5).astype(np.int64)


def kmeans_centres(
    source: U8Image,
    k: int,
    stride: int = KMEANS_STRIDE,
    iterations: int = KMEANS_ITERATIONS,
) -> Palette:
    """
    Run a fixed number of k-means rounds on stride-sampled pixels.
    Raises EmptySampleSet when the buffer yields no samples.
    """
    samples = sample_pixels(source, stride)
    if samples.shape[0] == 0:
        raise EmptySampleSet(
            f"no samples from {source.shape[1]}x{source.shape[0]} buffer"
        )
    k = max(1, int(k))

    centres = initial_centres(samples, k)
    samples_f = samples.astype(np.float64)

    for _ in range(max(0, int(iterations))):
        labels = nearest_indices(samples, centres)
        counts = np.bincount(labels, minlength=k).astype(np.float64)
        sums = np.stack(
            [np.bincount(labels, weights=samples_f[:, c], minlength=k) for c in range(3)],
            axis=1,
        )
        filled = counts > 0
        if np.any(filled):
            centres[filled] = _rounded_mean(sums[filled], counts[filled])

    return sort_by_luma(np.clip(centres, 0, 255).astype(np.uint8))


def extract_palette(
    source: U8Image,
    k: int,
    stride: int = KMEANS_STRIDE,
    iterations: int = KMEANS_ITERATIONS,
) -> Palette:
    """
    k-means palette of source, dark -> light.
    Returns an empty (0,3) palette when there is nothing to sample; callers
    substitute a default.
    """
    try:
        return kmeans_centres(source, k, stride, iterations)
    except EmptySampleSet:
        return np.zeros((0, 3), dtype=np.uint8)


__all__ = [
    "sample_pixels",
    "initial_centres",
    "kmeans_centres",
    "extract_palette",
]
