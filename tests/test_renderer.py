import numpy as np
import pytest
from PIL import Image

from sandengine.renderer import _load_image, _model_matrix, create_texture


def test_model_matrix_identity():
    np.testing.assert_allclose(_model_matrix([0, 0, 0], [1, 1, 1]), np.identity(4))


def test_model_matrix_translation_and_scale():
    m = _model_matrix([1.0, 2.0, 3.0], [0.5, 0.5, 0.5])
    np.testing.assert_allclose(m[:3, 3], [1.0, 2.0, 3.0])
    np.testing.assert_allclose(np.diag(m)[:3], [0.5, 0.5, 0.5])


def test_model_matrix_maps_origin_to_pos():
    m = _model_matrix([4.0, -1.0, 2.0], [3.0, 3.0, 3.0])
    np.testing.assert_allclose((m @ np.array([0, 0, 0, 1.0]))[:3], [4.0, -1.0, 2.0])


def test_load_image_flips_rows(tmp_path):
    img = Image.new("RGB", (2, 2))
    img.putpixel((0, 0), (255, 0, 0))
    img.putpixel((0, 1), (0, 0, 255))
    path = tmp_path / "t.png"
    img.save(path)
    w, h, ch, data = _load_image(path)
    assert (w, h, ch) == (2, 2, 3)
    assert data[0:3] == bytes([0, 0, 255])
    assert data[6:9] == bytes([255, 0, 0])


def test_load_image_keeps_alpha(tmp_path):
    path = tmp_path / "a.png"
    Image.new("RGBA", (3, 1), (1, 2, 3, 4)).save(path)
    w, h, ch, data = _load_image(path)
    assert ch == 4
    assert len(data) == w * h * ch


def test_create_texture_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_texture(tmp_path / "missing.png")