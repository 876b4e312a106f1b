"""Exceptions raised by the RGBA bitmap codec."""


class RGBABitmapError(Exception):
    """Base exception for all codec errors."""


class InvalidArgumentError(RGBABitmapError, ValueError):
    """Caller passed a missing buffer, zero dimension or undersized stride."""


class MalformedFileError(RGBABitmapError, ValueError):
    """File data failed validation."""


class TruncatedHeaderError(MalformedFileError):
    """Fewer than 12 bytes, so there is no complete header."""


class BadMagicError(MalformedFileError):
    """First four bytes are not 'RGBA'."""


class TruncatedPayloadError(MalformedFileError):
    """Declared width*height*4 pixel bytes are not all present."""


class AllocationError(RGBABitmapError, MemoryError):
    """Output buffer could not be allocated."""
