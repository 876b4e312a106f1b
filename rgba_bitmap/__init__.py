from .decoder import RGBADecoder, decode
from .encoder import RGBAEncoder, encode
from .errors import (
    AllocationError,
    BadMagicError,
    InvalidArgumentError,
    MalformedFileError,
    RGBABitmapError,
    TruncatedHeaderError,
    TruncatedPayloadError,
)
from .formats import HEADER_SIZE, MAGIC, PixelLayout
from .utils import bitmap_to_image, load_image

__version__ = "0.1.0"

__all__ = [
    "RGBAEncoder",
    "RGBADecoder",
    "encode",
    "decode",
    "PixelLayout",
    "MAGIC",
    "HEADER_SIZE",
    "load_image",
    "bitmap_to_image",
    "RGBABitmapError",
    "InvalidArgumentError",
    "MalformedFileError",
    "TruncatedHeaderError",
    "BadMagicError",
    "TruncatedPayloadError",
    "AllocationError",
]
