import numpy as np
import pytest
from PIL import Image

import pixelate


@pytest.fixture
def src_png(tmp_path):
    yy, xx = np.mgrid[0:24, 0:32]
    rgb = np.stack(
        [xx * 8, yy * 10, np.full_like(xx, 90)], axis=-1
    ).astype(np.uint8)
    path = tmp_path / "photo.png"
    Image.fromarray(rgb).save(path)
    return path


def test_png_export_next_to_input(src_png, capsys):
    status = pixelate.main(
        [str(src_png), "--pixel-size", "4", "--preset", "Game Boy (4)"]
    )
    assert status == 0
    out_path = src_png.with_name("photo_pixel_4.png")
    assert out_path.exists()
    with Image.open(out_path) as im:
        assert im.size == (32, 24)
        colours = {c for _n, c in im.convert("RGB").getcolors()}
    assert colours <= {(0x0F, 0x38, 0x0F), (0x30, 0x62, 0x30), (0x8B, 0xAC, 0x0F), (0x9B, 0xBC, 0x0F)}
    assert "Wrote photo_pixel_4.png" in capsys.readouterr().out


def test_jpg_export_is_scaled(src_png, tmp_path):
    out_path = tmp_path / "out.jpg"
    status = pixelate.main(
        [str(src_png), "-o", str(out_path), "--method", "ordered", "--scale", "2"]
    )
    assert status == 0
    with Image.open(out_path) as im:
        assert im.format == "JPEG"
        assert im.size == (64, 48)


def test_svg_export(src_png, tmp_path):
    out_path = tmp_path / "out.svg"
    status = pixelate.main(
        [
            str(src_png),
            "-o",
            str(out_path),
            "--pixel-size",
            "8",
            "--palette",
            "custom",
            "--colors",
            "000,fff",
            "--method",
            "threshold",
        ]
    )
    assert status == 0
    text = out_path.read_text(encoding="utf-8")
    assert 'width="32"' in text
    assert 'height="24"' in text
    assert "<rect" in text


def test_extract_palette_mode(src_png, tmp_path):
    out_path = tmp_path / "k.png"
    status = pixelate.main(
        [str(src_png), "-o", str(out_path), "--palette", "extract", "--k", "3", "--pixel-size", "2"]
    )
    assert status == 0
    with Image.open(out_path) as im:
        assert len(im.convert("RGB").getcolors()) <= 3


def test_missing_input(tmp_path, capsys):
    assert pixelate.main([str(tmp_path / "nope.png")]) == 2
    assert "[error]" in capsys.readouterr().err


def test_list_presets(capsys):
    assert pixelate.main(["--list-presets"]) == 0
    assert "PICO-8 (16)" in capsys.readouterr().out
