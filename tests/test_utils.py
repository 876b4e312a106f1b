import numpy as np
import pytest

from rgba_bitmap import PixelLayout, bitmap_to_image, decode, encode


@pytest.fixture
def rgba_file():
    pixels = np.arange(2 * 3 * 4, dtype=np.uint8).reshape(2, 3, 4)
    return pixels, encode(pixels.tobytes(), 3, 2)


@pytest.mark.parametrize("layout", list(PixelLayout))
@pytest.mark.parametrize("alignment", [0, 8])
def test_bitmap_to_image(rgba_file, layout, alignment):
    pixels, data = rgba_file
    img = bitmap_to_image(decode(data, None, layout, alignment))

    assert img.size == (3, 2)
    if layout.has_alpha:
        assert img.mode == "RGBA"
        assert np.array_equal(np.array(img), pixels)
    else:
        assert img.mode == "RGB"
        assert np.array_equal(np.array(img), pixels[..., :3])
