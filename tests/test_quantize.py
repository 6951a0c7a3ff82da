import numpy as np

from pixel_dither.core_types import as_palette
from pixel_dither.palette_data import preset_palette
from pixel_dither.quantize import nearest, nearest_index, nearest_indices, quantize_grid


def squared_distance(a, b):
    return sum((int(p) - int(q)) ** 2 for p, q in zip(a, b))


def test_nearest_is_member_with_minimal_distance():
    rng = np.random.default_rng(3)
    pal = preset_palette("C64 (16)")
    members = {tuple(row) for row in pal.tolist()}
    for colour in rng.integers(0, 256, size=(200, 3)).tolist():
        got = nearest(colour, pal)
        assert got in members
        d = squared_distance(colour, got)
        assert all(d <= squared_distance(colour, row) for row in pal.tolist())


def test_ties_go_to_lowest_index():
    pal = as_palette([(0, 0, 0), (2, 0, 0)])
    assert nearest((1, 0, 0), pal) == (0, 0, 0)
    assert nearest((1, 0, 0), pal[::-1]) == (2, 0, 0)


def test_vectorised_matches_scalar_including_duplicates():
    pal = as_palette([(10, 10, 10), (10, 10, 10), (200, 0, 0), (0, 0, 0), (2, 0, 0)])
    rng = np.random.default_rng(11)
    pixels = rng.integers(0, 256, size=(30, 3)).astype(np.float64)
    pixels[0] = (1, 0, 0)
    idx = nearest_indices(pixels, pal)
    assert idx.tolist() == [nearest_index(p, pal) for p in pixels.tolist()]
    assert 1 not in idx.tolist()


def test_quantize_grid_keeps_shape():
    grid = np.full((3, 4, 3), 250, dtype=np.uint8)
    out = quantize_grid(grid, as_palette([(0, 0, 0), (255, 255, 255)]))
    assert out.shape == (3, 4, 3)
    assert out.dtype == np.uint8
    assert np.all(out == 255)
