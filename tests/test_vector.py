import numpy as np

from pixel_dither.core_types import RectRun
from pixel_dither.vector import emit_runs, emit_vector, runs_to_svg

A = (255, 0, 0)
B = (0, 0, 255)


def _grid(rows):
    return np.array(rows, dtype=np.uint8)


def test_runs_merge_within_rows_only():
    grid = _grid([[A, A, B], [B, B, B]])
    assert list(emit_runs(grid)) == [
        RectRun(y=0, x=0, run=2, color=A),
        RectRun(y=0, x=2, run=1, color=B),
        RectRun(y=1, x=0, run=3, color=B),
    ]


def test_runs_tile_the_grid():
    rng = np.random.default_rng(2)
    colours = np.array([A, B, (0, 0, 0)], dtype=np.uint8)
    grid = colours[rng.integers(0, 3, size=(12, 17))]
    cell = 5
    runs = list(emit_runs(grid))

    area = sum(r.run * cell * cell for r in runs)
    assert area == (17 * cell) * (12 * cell)

    for y in range(12):
        row = [r for r in runs if r.y == y]
        assert row[0].x == 0
        for left, right in zip(row, row[1:]):
            # Share exactly one edge, never overlap.
            assert left.x + left.run == right.x
            assert left.color != right.color
        assert row[-1].x + row[-1].run == 17


def test_emit_vector_scales_to_pixels():
    grid = _grid([[A, A, B]])
    assert emit_vector(grid, 12) == [(0, 0, 24, 12, A), (24, 0, 12, 12, B)]


def test_svg_document_size_and_rects():
    grid = _grid([[A, A, B], [B, B, B]])
    text = runs_to_svg(grid, 12)
    assert text.startswith("<?xml")
    assert 'width="36"' in text
    assert 'height="24"' in text
    assert text.count("<rect") == 3
    assert 'fill="#ff0000"' in text
    assert 'fill="#0000ff"' in text


def test_svg_with_fractional_cell():
    grid = _grid([[A, B, B]])
    text = runs_to_svg(grid, 2.5)
    assert 'width="7.5"' in text
    assert text.count("<rect") == 2


def test_empty_width_grid_has_no_runs():
    assert list(emit_runs(np.zeros((2, 0, 3), dtype=np.uint8))) == []


def test_emit_vector_follows_emit_runs_order():
    grid = _grid([[A, B, B], [A, A, A]])
    runs = list(emit_runs(grid))
    assert all(isinstance(run, RectRun) for run in runs)
    assert emit_vector(grid, 2.5) == [run.rect(2.5) + (run.color,) for run in runs]
