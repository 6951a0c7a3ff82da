import numpy as np

from pixel_dither.resample import downsample_box, grid_size, upscale_nearest


def test_grid_size_floors_and_never_hits_zero():
    assert grid_size(100, 50, 24) == (4, 2)
    assert grid_size(5, 5, 10) == (1, 1)
    assert grid_size(0, 0, 3) == (1, 1)


def test_pixel_size_one_is_identity():
    rng = np.random.default_rng(0)
    img = rng.integers(0, 256, size=(7, 9, 3), dtype=np.uint8)
    out = downsample_box(img, 1)
    assert np.array_equal(out, img)
    assert out is not img


def test_blocks_are_averaged():
    img = np.zeros((4, 4, 3), dtype=np.uint8)
    img[:2, :2] = (10, 20, 30)
    img[:2, 2:] = (40, 50, 60)
    img[2:, :2] = (70, 80, 90)
    img[2:, 2:] = (100, 110, 120)
    out = downsample_box(img, 2)
    assert out.tolist() == [
        [[10, 20, 30], [40, 50, 60]],
        [[70, 80, 90], [100, 110, 120]],
    ]


def test_mean_rounds_half_up():
    img = np.array([[[0, 0, 0], [255, 255, 255]]], dtype=np.uint8)
    out = downsample_box(img, 2)
    assert out.shape == (1, 1, 3)
    assert out[0, 0].tolist() == [128, 128, 128]


def test_uneven_source_spreads_remainder():
    img = np.zeros((5, 5, 3), dtype=np.uint8)
    img[4, :] = 255
    out = downsample_box(img, 2)
    assert out.shape == (2, 2, 3)
    # Rows split as [0,2) and [2,5): the bottom band holds the white row.
    assert np.all(out[0] == 0)
    assert np.all(out[1] == 85)


def test_averaging_keeps_overall_tone():
    yy, xx = np.mgrid[0:32, 0:32]
    checker = ((yy + xx) % 2 * 255).astype(np.uint8)
    img = np.repeat(checker[..., None], 3, axis=2)
    out = downsample_box(img, 4)
    assert abs(float(out.mean()) - float(img.mean())) < 1.0


def test_zero_area_source():
    out = downsample_box(np.zeros((0, 3, 3), dtype=np.uint8), 2)
    assert out.shape == (1, 1, 3)


def test_integer_upscale_repeats_blocks():
    grid = np.arange(2 * 2 * 3, dtype=np.uint8).reshape(2, 2, 3)
    out = upscale_nearest(grid, 4, 4)
    expected = np.repeat(np.repeat(grid, 2, axis=0), 2, axis=1)
    assert np.array_equal(out, expected)


def test_fractional_upscale_keeps_partial_edge_cells():
    grid = np.array([[[0, 0, 0], [255, 255, 255]]], dtype=np.uint8)
    out = upscale_nearest(grid, 5, 3)
    assert out.shape == (3, 5, 3)
    assert out[0, :, 0].tolist() == [0, 0, 255, 255, 255]


def test_upscale_to_empty():
    grid = np.zeros((1, 1, 3), dtype=np.uint8)
    assert upscale_nearest(grid, 0, 0).shape == (0, 0, 3)
