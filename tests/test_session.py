from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

import pixel_dither.pipeline as pipeline
from pixel_dither import Config, PreviewSession
from pixel_dither.errors import InvalidInput


def _image():
    rng = np.random.default_rng(12)
    return rng.integers(0, 256, size=(24, 24, 3), dtype=np.uint8)


def test_run_keeps_latest_result():
    session = PreviewSession(_image(), Config.from_raw(pixel_size=4, method="none"))
    result = session.run()
    assert result is not None
    assert result.grid.shape == (6, 6, 3)
    assert session.latest is result


def test_run_without_source_returns_none():
    assert PreviewSession().run() is None


def test_update_bumps_generation_and_replaces_config():
    session = PreviewSession(_image(), Config.from_raw(pixel_size=4))
    g0 = session.generation
    g1 = session.update(method="ordered", strength=0.25)
    assert g1 == g0 + 1
    assert session.config.method == "ordered"
    assert session.config.strength == 0.25
    assert session.set_source(_image()) == g1 + 1


def test_update_rejects_unknown_method():
    session = PreviewSession(_image())
    with pytest.raises(InvalidInput):
        session.update(method="sierra")
    assert session.generation == 0


def test_superseded_run_is_dropped(monkeypatch):
    session = PreviewSession(_image(), Config.from_raw(pixel_size=2, method="fs"))
    real_downsample = pipeline.downsample_box

    def downsample_then_change(source, pixel_size):
        grid = real_downsample(source, pixel_size)
        # A newer request arrives while this run is in flight.
        session.update(pixel_size=3)
        return grid

    monkeypatch.setattr(pipeline, "downsample_box", downsample_then_change)
    assert session.run() is None
    assert session.latest is None

    monkeypatch.setattr(pipeline, "downsample_box", real_downsample)
    result = session.run()
    assert result is not None
    assert result.grid.shape == (8, 8, 3)


def test_submit_on_executor():
    session = PreviewSession(_image(), Config.from_raw(pixel_size=6, method="ordered"))
    with ThreadPoolExecutor(max_workers=1) as ex:
        result = session.submit(ex).result()
    assert result is not None
    assert result.image.shape == (24, 24, 3)


def test_update_clamps_raw_values():
    session = PreviewSession(_image(), Config.from_raw(pixel_size=4))
    session.update(pixel_size=0, strength=5.0, threshold=900)
    assert session.config.pixel_size == 1
    assert session.config.strength == 1.0
    assert session.config.threshold == 255
    result = session.run()
    assert result is not None
    assert result.grid.shape == (24, 24, 3)
