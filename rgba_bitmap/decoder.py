import logging

import numpy as np

from .errors import (
    BadMagicError,
    InvalidArgumentError,
    TruncatedHeaderError,
    TruncatedPayloadError,
)
from .formats import (
    FILE_PIXEL_SIZE,
    HEADER_SIZE,
    MAGIC,
    PixelLayout,
    aligned_row_size,
    allocate,
    file_size,
    unpack_header,
)

_LOGGER = logging.getLogger(__name__)


class RGBADecoder:
    """
    A class to decode RGBA files into in-memory bitmaps.
    """

    @staticmethod
    def decode(
        file_data,
        byte_length: int = None,
        layout: PixelLayout = PixelLayout.RGBA,
        row_alignment: int = 0,
        byte_offset: int = 0,
    ) -> dict:
        """
        Decode an RGBA file given as a bytes-like object.

        :param file_data: Bytes containing the RGBA file.
        :param byte_length: Length of the RGBA file in bytes. Defaults to the rest of file_data.
        :param layout: Byte order of the decoded pixels. Default is RGBA.
        :param row_alignment: Pad each output row to a multiple of this many bytes.
                              0 (or 1) produces a packed bitmap.
        :param byte_offset: Offset to the start of the RGBA file in file_data.
        :return: Dictionary containing width, height, layout, row_size, size and data (bytes).
        """
        layout = PixelLayout.parse(layout)

        # --- Handle Slicing ---
        if file_data is None:
            raise InvalidArgumentError("RGBA.decode: Missing file data")

        try:
            view = memoryview(file_data).cast("B")
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"RGBA.decode: File data is not a byte buffer ({exc})"
            ) from exc

        available = len(view) - byte_offset
        if byte_offset < 0 or available < 0:
            raise InvalidArgumentError("RGBA.decode: Invalid byte offset")

        if byte_length is None:
            byte_length = available
        elif not (0 <= byte_length <= available):
            raise InvalidArgumentError(
                f"RGBA.decode: Byte length {byte_length} exceeds the {available} bytes given"
            )

        if row_alignment < 0:
            raise InvalidArgumentError("RGBA.decode: Invalid row alignment")

        data = view[byte_offset : byte_offset + byte_length]

        # --- Header Parsing ---
        if len(data) < HEADER_SIZE:
            raise TruncatedHeaderError(
                f"RGBA.decode: File too short for header ({len(data)} bytes)"
            )

        magic, width, height = unpack_header(data)

        if magic != MAGIC:
            raise BadMagicError(
                f"RGBA.decode: The signature of the RGBA file is invalid (0x{magic:08x})"
            )

        # Python ints do not wrap, so huge dimensions simply fail this check
        if len(data) < file_size(width, height):
            raise TruncatedPayloadError(
                f"RGBA.decode: {width}x{height} image needs {file_size(width, height)} bytes, "
                f"got {len(data)}"
            )

        # --- Initialization ---
        input_row_size = width * FILE_PIXEL_SIZE
        row_size = aligned_row_size(width, layout, row_alignment)
        result = allocate(row_size * height)
        payload = data[HEADER_SIZE : HEADER_SIZE + input_row_size * height]

        if layout == PixelLayout.RGBA and row_size == input_row_size:
            # Fast path: file order is the requested order
            _LOGGER.debug("Decoding %dx%d RGBA file with a bulk copy", width, height)
            result[:] = payload
        else:
            _LOGGER.debug(
                "Decoding %dx%d RGBA file to %s (row size %d) pixel by pixel",
                width,
                height,
                layout.name,
                row_size,
            )
            source = np.frombuffer(payload, dtype=np.uint8).reshape(
                height, width, FILE_PIXEL_SIZE
            )
            # Each output row starts at y * row_size; trailing padding stays zero
            target = np.frombuffer(result, dtype=np.uint8).reshape(height, row_size)
            pixel_size = layout.pixel_size
            used = width * pixel_size

            for out_index, channel in enumerate(layout.channels):
                target[:, out_index:used:pixel_size] = source[..., "RGBA".index(channel)]

        return {
            "width": width,
            "height": height,
            "layout": layout,
            "row_size": row_size,
            "size": len(result),
            "data": bytes(result),
        }


decode = RGBADecoder.decode
