"""RGBA file constants, pixel layouts and byte-order helpers."""

from __future__ import annotations

import struct
import sys
from enum import IntEnum
from typing import Final

from .errors import AllocationError, InvalidArgumentError

# 'RGBA' read as a big-endian uint32
MAGIC: Final = 0x52474241

# magic(4), width(4), height(4)
HEADER_SIZE: Final = 12

# Pixels in the file are always R8G8B8A8
FILE_PIXEL_SIZE: Final = 4

# Width and height must fit in an unsigned 32-bit header field
MAX_DIMENSION: Final = 0xFFFFFFFF


class PixelLayout(IntEnum):
    """In-memory pixel byte orders the codec can read and write.

    RGBA is the default and matches the file storage exactly.
    """

    RGBA = 0
    ABGR = 1
    ARGB = 2
    BGRA = 3
    RGB = 4
    BGR = 5

    @property
    def channels(self) -> str:
        """Channel order of one pixel, first byte first."""
        return self.name

    @property
    def pixel_size(self) -> int:
        return len(self.name)

    @property
    def has_alpha(self) -> bool:
        return "A" in self.name

    @classmethod
    def parse(cls, value: PixelLayout | int | str) -> PixelLayout:
        """Coerce a member, its value or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                raise InvalidArgumentError(f"Unknown pixel layout: {value!r}") from None
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise InvalidArgumentError(f"Unknown pixel layout: {value!r}") from None


def read_uint32_be(buffer, offset: int = 0) -> int:
    return struct.unpack_from(">I", buffer, offset)[0]


def write_uint32_be(buffer: bytearray, offset: int, value: int) -> None:
    struct.pack_into(">I", buffer, offset, value)


def pack_header(width: int, height: int) -> bytes:
    """Build the 12-byte file header."""
    header = bytearray(HEADER_SIZE)
    write_uint32_be(header, 0, MAGIC)
    write_uint32_be(header, 4, width)
    write_uint32_be(header, 8, height)
    return bytes(header)


def unpack_header(data) -> tuple[int, int, int]:
    """Split a header into (magic, width, height). Needs at least 12 bytes."""
    return read_uint32_be(data, 0), read_uint32_be(data, 4), read_uint32_be(data, 8)


def min_row_size(width: int, layout: PixelLayout) -> int:
    return width * layout.pixel_size


def aligned_row_size(width: int, layout: PixelLayout, alignment: int = 0) -> int:
    """Row size in bytes, rounded up to a multiple of alignment.

    An alignment of 0 or 1 means packed rows.
    """
    row_size = min_row_size(width, layout)
    if alignment > 1:
        remainder = row_size % alignment
        if remainder:
            row_size += alignment - remainder
    return row_size


def file_size(width: int, height: int) -> int:
    return HEADER_SIZE + width * height * FILE_PIXEL_SIZE


def allocate(size: int) -> bytearray:
    """Allocate a zero-filled output buffer of size bytes."""
    if size > sys.maxsize:
        raise AllocationError(f"Cannot allocate {size} bytes")
    try:
        return bytearray(size)
    except MemoryError as exc:
        raise AllocationError(f"Cannot allocate {size} bytes") from exc
