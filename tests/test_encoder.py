import numpy as np
import pytest

from rgba_bitmap import InvalidArgumentError, PixelLayout, RGBAEncoder, encode

WIDTH, HEIGHT = 5, 3


@pytest.fixture
def rgba_pixels():
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(HEIGHT, WIDTH, 4), dtype=np.uint8)


def reorder(rgba, layout):
    """Rearrange an (h, w, 4) RGBA array into the given layout."""
    return np.stack([rgba[..., "RGBA".index(c)] for c in layout.channels], axis=-1)


def test_rgb_scenario():
    encoded = encode(bytes([10, 20, 30, 40, 50, 60]), 2, 1, 0, PixelLayout.RGB)
    assert encoded == bytes.fromhex(
        "52474241" "00000002" "00000001" "0A141EFF" "28323CFF"
    )


def test_output_size_and_header(rgba_pixels):
    encoded = encode(rgba_pixels.tobytes(), WIDTH, HEIGHT)
    assert len(encoded) == 12 + WIDTH * HEIGHT * 4
    assert encoded[:4] == b"RGBA"
    assert encoded[4:8] == WIDTH.to_bytes(4, "big")
    assert encoded[8:12] == HEIGHT.to_bytes(4, "big")
    assert encoded[12:] == rgba_pixels.tobytes()


@pytest.mark.parametrize(
    "layout", [PixelLayout.BGRA, PixelLayout.ARGB, PixelLayout.ABGR]
)
def test_layouts_with_alpha_match_rgba(rgba_pixels, layout):
    expected = encode(rgba_pixels.tobytes(), WIDTH, HEIGHT, 0, PixelLayout.RGBA)
    source = reorder(rgba_pixels, layout)
    assert encode(source.tobytes(), WIDTH, HEIGHT, 0, layout) == expected


@pytest.mark.parametrize("layout", [PixelLayout.RGB, PixelLayout.BGR])
def test_layouts_without_alpha_are_opaque(rgba_pixels, layout):
    source = reorder(rgba_pixels, layout)
    encoded = encode(source.tobytes(), WIDTH, HEIGHT, 0, layout)

    pixels = np.frombuffer(encoded[12:], dtype=np.uint8).reshape(HEIGHT, WIDTH, 4)
    assert np.all(pixels[..., 3] == 0xFF)
    assert np.array_equal(pixels[..., :3], rgba_pixels[..., :3])


def test_padded_stride_matches_fast_path(rgba_pixels):
    fast = encode(rgba_pixels.tobytes(), WIDTH, HEIGHT)

    stride = WIDTH * 4 + 7
    padded = np.full((HEIGHT, stride), 0xAB, dtype=np.uint8)
    padded[:, : WIDTH * 4] = rgba_pixels.reshape(HEIGHT, -1)
    slow = encode(padded.tobytes(), WIDTH, HEIGHT, stride, PixelLayout.RGBA)

    assert slow == fast, "Padding bytes leaked into the file"


def test_padded_rgb_rows():
    # 1 pixel wide, stride 4: one pad byte per row
    source = bytes([1, 2, 3, 99, 4, 5, 6])
    encoded = encode(source, 1, 2, 4, PixelLayout.RGB)
    assert encoded[12:] == bytes([1, 2, 3, 255, 4, 5, 6, 255])


def test_accepts_numpy_array_and_layout_name(rgba_pixels):
    expected = encode(rgba_pixels.tobytes(), WIDTH, HEIGHT)
    assert RGBAEncoder.encode(rgba_pixels, WIDTH, HEIGHT, 0, "rgba") == expected


def test_returns_fresh_bytes():
    source = bytearray(4)
    encoded = encode(source, 1, 1)
    source[0] = 7
    assert isinstance(encoded, bytes)
    assert encoded[12] == 0


@pytest.mark.parametrize(
    "source, width, height, stride, layout",
    [
        (None, 1, 1, 0, PixelLayout.RGBA),
        (bytes(4), 0, 1, 0, PixelLayout.RGBA),
        (bytes(4), 1, 0, 0, PixelLayout.RGBA),
        (bytes(8), 2, 1, 7, PixelLayout.RGBA),
        (bytes(6), 2, 1, 5, PixelLayout.RGB),
        (bytes(5), 2, 1, 0, PixelLayout.RGB),
        (bytes(4), 2**32, 1, 0, PixelLayout.RGBA),
    ],
)
def test_rejects_invalid_arguments(source, width, height, stride, layout):
    with pytest.raises(InvalidArgumentError):
        encode(source, width, height, stride, layout)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        encode(bytes(4), 0, 1)


@pytest.mark.parametrize(
    "source, layout",
    [
        (bytes(4), "CMYK"),
        (bytes(4), 9),
        ([256, 0, 0, 0], PixelLayout.RGBA),
        (object(), PixelLayout.RGBA),
    ],
)
def test_bad_source_or_layout_is_codec_error(source, layout):
    with pytest.raises(InvalidArgumentError):
        encode(source, 1, 1, 0, layout)


def test_accepts_list_of_ints():
    assert encode([1, 2, 3, 4], 1, 1)[12:] == bytes([1, 2, 3, 4])
