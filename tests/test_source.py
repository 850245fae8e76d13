import numpy as np
import pytest
from PIL import Image

from aart.errors import EmptyImage
from aart.source import open_image, pixel_array


def test_grey_array_expands_to_rgb():
    arr = pixel_array(np.array([[0, 128]], dtype=np.uint8))
    assert arr.shape == (1, 2, 3)
    assert arr[0, 1].tolist() == [128, 128, 128]


def test_rgba_array_drops_alpha():
    rgba = np.zeros((2, 2, 4), dtype=np.uint8)
    rgba[..., 3] = 17
    arr = pixel_array(rgba)
    assert arr.shape == (2, 2, 3)
    assert arr.max() == 0


def test_pixel_array_is_read_only():
    arr = pixel_array(np.zeros((2, 3, 3), dtype=np.uint8))
    with pytest.raises(ValueError):
        arr[0, 0, 0] = 1


def test_pixel_array_does_not_freeze_caller_array():
    source = np.zeros((2, 3, 3), dtype=np.uint8)
    pixel_array(source)
    source[0, 0, 0] = 5
    assert source[0, 0, 0] == 5


def test_unsupported_shape():
    with pytest.raises(ValueError, match="Unsupported pixel array shape"):
        pixel_array(np.zeros((2, 2, 2), dtype=np.uint8))


def test_values_out_of_range():
    with pytest.raises(ValueError, match=r"\[0, 255\]"):
        pixel_array(np.full((1, 1, 3), 300, dtype=np.int32))


@pytest.mark.parametrize("shape", [(0, 5, 3), (5, 0, 3), (0, 0)])
def test_empty_array(shape):
    with pytest.raises(EmptyImage):
        pixel_array(np.zeros(shape, dtype=np.uint8))


def test_pil_grey_image_converted():
    arr = pixel_array(Image.new("L", (4, 3), 200))
    assert arr.shape == (3, 4, 3)
    assert (arr == 200).all()


def test_pil_rgba_image_converted():
    arr = pixel_array(Image.new("RGBA", (2, 2), (10, 20, 30, 0)))
    assert arr[0, 0].tolist() == [10, 20, 30]


def test_open_image_from_path(tmp_path):
    path = tmp_path / "test.png"
    Image.new("RGB", (5, 4), (1, 2, 3)).save(path)
    img = open_image(path)
    assert img.mode == "RGB"
    assert img.size == (5, 4)
    assert pixel_array(path).shape == (4, 5, 3)


def test_open_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_image(tmp_path / "missing.png")
