import numpy as np
import pytest
from PIL import Image

from hsluv_palette.image_io import load_image_rgba, render_swatch, save_image_rgba, save_palette_swatch
from hsluv_palette.image_ops import packed_array_to_rgba
from hsluv_palette.palette_data import NAMED


def test_png_round_trip(tmp_path):
    rng = np.random.default_rng(11)
    rgba = rng.integers(0, 256, size=(5, 7, 4), dtype=np.uint8)
    out = save_image_rgba(tmp_path / "noise.png", rgba)
    assert out.exists()
    np.testing.assert_array_equal(load_image_rgba(out), rgba)


def test_save_forces_png_suffix(tmp_path):
    rgba = np.zeros((2, 2, 4), dtype=np.uint8)
    out = save_image_rgba(tmp_path / "picture.jpg", rgba)
    assert out.suffix == ".png"
    assert out.exists()


def test_save_rejects_bad_arrays(tmp_path):
    with pytest.raises(TypeError):
        save_image_rgba(tmp_path / "a.png", np.zeros((2, 2, 3), dtype=np.uint8))
    with pytest.raises(TypeError):
        save_image_rgba(tmp_path / "b.png", np.zeros((2, 2, 4), dtype=np.float64))
    with pytest.raises(TypeError):
        save_image_rgba(tmp_path / "c.png", np.zeros(4, dtype=np.uint8))


def test_load_adds_alpha(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new("RGB", (3, 2), (10, 20, 30)).save(path)
    rgba = load_image_rgba(path)
    assert rgba.shape == (2, 3, 4)
    assert rgba[0, 0].tolist() == [10, 20, 30, 255]


def test_render_swatch_layout():
    colors = [NAMED["red"], NAMED["blue"], NAMED["mint"]]
    strip = render_swatch(colors, cell=4)
    assert strip.shape == (4, 12, 4)
    expected = packed_array_to_rgba(np.array(colors, dtype=np.uint32))
    assert strip[0, 0].tolist() == expected[0].tolist()
    assert strip[3, 11].tolist() == expected[2].tolist()

    grid = render_swatch(colors, cell=2, columns=2)
    assert grid.shape == (4, 4, 4)
    assert grid[3, 3].tolist() == [0, 0, 0, 0]
    assert grid[2, 0].tolist() == expected[2].tolist()


def test_render_swatch_edge_cases():
    assert render_swatch([], cell=3).shape == (3, 3, 4)
    with pytest.raises(ValueError):
        render_swatch([NAMED["red"]], cell=0)


def test_save_palette_swatch(tmp_path):
    out = save_palette_swatch(tmp_path / "swatch.png", [NAMED["red"], NAMED["white"]], cell=3)
    with Image.open(out) as im:
        assert im.size == (6, 3)
        assert im.mode == "RGBA"
