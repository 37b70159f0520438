import numpy as np
import pytest

from orrery.text_layout import Glyph, TextLayout, load_glyphs


def _layout():
    glyph = Glyph(size=(10, 20), bearing=(1, 15), advance=64 * 10)
    return TextLayout(glyphs={"A": glyph, "B": glyph})


def test_quads_shape_and_texture_coordinates():
    quads = _layout().quads("A", 0.0, 0.0, 1.0)
    assert len(quads) == 1
    char, vertices = quads[0]
    assert char == "A"
    assert vertices.shape == (6, 4)
    assert vertices[:, 2:].tolist() == [
        [0.0, 0.0],
        [0.0, 1.0],
        [1.0, 1.0],
        [0.0, 0.0],
        [1.0, 1.0],
        [1.0, 0.0],
    ]


def test_quad_extent_matches_glyph_size():
    _, vertices = _layout().quads("A", 100.0, 50.0, 2.0)[0]
    xs, ys = vertices[:, 0], vertices[:, 1]
    assert xs.max() - xs.min() == pytest.approx(10 * 2.0)
    assert ys.max() - ys.min() == pytest.approx(20 * 2.0)
    assert xs.min() == pytest.approx(100.0 + 1 * 2.0)
    assert ys.max() == pytest.approx(50.0 + 15 * 2.0)


def test_quads_advance_by_glyph_advance():
    quads = _layout().quads("AB", 0.0, 0.0, 0.5)
    first = quads[0][1]
    second = quads[1][1]
    assert np.allclose(second[:, 0] - first[:, 0], 10 * 0.5)
    assert np.allclose(second[:, 1], first[:, 1])


def test_missing_glyph_is_empty_and_does_not_advance():
    quads = _layout().quads("?A", 5.0, 5.0, 1.0)
    _, empty = quads[0]
    assert np.allclose(empty[:, 0], 5.0)
    assert np.allclose(empty[:, 1], 5.0)
    assert quads[1][1][:, 0].min() == pytest.approx(5.0 + 1)


def test_empty_text():
    assert _layout().quads("", 0.0, 0.0, 1.0) == []


def test_projection_maps_window_corners():
    layout = TextLayout(width=1280, height=720)
    corner = layout.projection @ np.array([1280.0, 720.0, 0.0, 1.0])
    origin = layout.projection @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(corner[:2], [1.0, 1.0])
    assert np.allclose(origin[:2], [-1.0, -1.0])


def test_load_glyphs_missing_font(tmp_path):
    with pytest.raises(OSError):
        load_glyphs(str(tmp_path / "absent.ttf"), 24)


def test_load_glyphs_rejects_bad_size(tmp_path):
    with pytest.raises(ValueError):
        load_glyphs(str(tmp_path / "absent.ttf"), 0)