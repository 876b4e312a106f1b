import logging

import numpy as np

from .errors import InvalidArgumentError
from .formats import (
    FILE_PIXEL_SIZE,
    HEADER_SIZE,
    MAX_DIMENSION,
    PixelLayout,
    allocate,
    file_size,
    min_row_size,
    pack_header,
)

_LOGGER = logging.getLogger(__name__)


def _as_uint8(buffer) -> np.ndarray:
    """Flat uint8 view of a bytes-like object, array or list of ints."""
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return np.frombuffer(buffer, dtype=np.uint8)
    try:
        return np.ascontiguousarray(buffer, dtype=np.uint8).reshape(-1)
    except (OverflowError, ValueError, TypeError) as exc:
        raise InvalidArgumentError(
            f"RGBA.encode: Source is not a byte buffer ({exc})"
        ) from exc


class RGBAEncoder:
    @staticmethod
    def encode(
        source,
        width: int,
        height: int,
        row_stride: int = 0,
        layout: PixelLayout = PixelLayout.RGBA,
    ) -> bytes:
        """
        Encode an in-memory bitmap into a complete RGBA file.

        :param source: Bytes-like object (bytes, bytearray, numpy array) holding the bitmap,
                       top-left pixel first, row by row.
        :param width: Width of the bitmap in pixels.
        :param height: Height of the bitmap in pixels.
        :param row_stride: Size in bytes of one source row including padding. 0 if rows are packed.
        :param layout: Byte order of the source pixels. Default is RGBA.
        :return: bytes object containing the RGBA file content.
        """
        layout = PixelLayout.parse(layout)

        # --- Validation ---
        if source is None:
            raise InvalidArgumentError("RGBA.encode: Missing source buffer")

        if not (0 < width <= MAX_DIMENSION):
            raise InvalidArgumentError("RGBA.encode: Invalid width")

        if not (0 < height <= MAX_DIMENSION):
            raise InvalidArgumentError("RGBA.encode: Invalid height")

        pixel_size = layout.pixel_size
        row_size = min_row_size(width, layout)
        if row_stride == 0:
            row_stride = row_size
        elif row_stride < row_size:
            raise InvalidArgumentError(
                f"RGBA.encode: Row stride {row_stride} is smaller than {row_size} bytes"
            )

        pixels = _as_uint8(source)
        # The last row does not need its padding
        required = row_stride * (height - 1) + row_size
        if pixels.size < required:
            raise InvalidArgumentError(
                f"RGBA.encode: Source holds {pixels.size} bytes, need {required}"
            )

        # --- Header ---
        output = allocate(file_size(width, height))
        output[:HEADER_SIZE] = pack_header(width, height)

        payload_size = width * height * FILE_PIXEL_SIZE

        if layout == PixelLayout.RGBA and row_stride == width * FILE_PIXEL_SIZE:
            # Fast path: source bytes are already in file order
            _LOGGER.debug("Encoding %dx%d RGBA bitmap with a bulk copy", width, height)
            output[HEADER_SIZE:] = pixels[:payload_size].tobytes()
            return bytes(output)

        # --- Pixel Reordering ---
        _LOGGER.debug(
            "Encoding %dx%d %s bitmap (stride %d) pixel by pixel",
            width,
            height,
            layout.name,
            row_stride,
        )

        # (row, pixel, channel) view over the source; rows start every row_stride bytes
        rows = np.lib.stride_tricks.as_strided(
            pixels[:required],
            shape=(height, width, pixel_size),
            strides=(row_stride, pixel_size, 1),
            writeable=False,
        )
        target = np.frombuffer(output, dtype=np.uint8, offset=HEADER_SIZE).reshape(
            height, width, FILE_PIXEL_SIZE
        )

        channels = layout.channels
        for out_index, channel in enumerate("RGB"):
            target[..., out_index] = rows[..., channels.index(channel)]

        # Layouts without alpha are fully opaque
        if layout.has_alpha:
            target[..., 3] = rows[..., channels.index("A")]
        else:
            target[..., 3] = 0xFF

        return bytes(output)


encode = RGBAEncoder.encode
