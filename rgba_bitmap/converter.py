"""Command-line converters between PNG and RGBA files."""

from __future__ import annotations

import argparse
import logging
import sys

from PIL import UnidentifiedImageError

from .decoder import RGBADecoder
from .encoder import RGBAEncoder
from .errors import InvalidArgumentError, RGBABitmapError
from .utils import bitmap_to_image, load_image

_LOGGER = logging.getLogger(__name__)


def png_to_rgba(png_path: str, rgba_path: str) -> int:
    """Convert an image file to an RGBA file. Returns the bytes written."""
    pixel_data, desc = load_image(png_path)

    encoded = RGBAEncoder.encode(
        pixel_data.tobytes(), desc["width"], desc["height"], 0, desc["layout"]
    )

    with open(rgba_path, "wb") as f:
        f.write(encoded)

    _LOGGER.info(
        "Converted %s (%dx%d) to %s", png_path, desc["width"], desc["height"], rgba_path
    )
    return len(encoded)


def rgba_to_png(rgba_path: str, png_path: str) -> int:
    """Convert an RGBA file to a PNG. Returns the bytes read."""
    with open(rgba_path, "rb") as f:
        content = f.read()

    decoded = RGBADecoder.decode(content)
    if decoded["width"] == 0 or decoded["height"] == 0:
        # PNG cannot store an empty image
        raise InvalidArgumentError(
            f"Cannot write a {decoded['width']}x{decoded['height']} image as PNG"
        )
    bitmap_to_image(decoded).save(png_path, format="PNG")

    _LOGGER.info(
        "Converted %s (%dx%d) to %s",
        rgba_path,
        decoded["width"],
        decoded["height"],
        png_path,
    )
    return len(content)


def _run(convert, description: str, argv: list[str] | None) -> int:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", help="path of the file to read")
    parser.add_argument("output", help="path of the file to write")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # Usage errors exit 1 like every other failure
        return 0 if exc.code == 0 else 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        convert(args.input, args.output)
    except (RGBABitmapError, UnidentifiedImageError, OSError) as exc:
        _LOGGER.error("%s: %s", args.input, exc)
        return 1
    return 0


def png2rgba(argv: list[str] | None = None) -> int:
    return _run(png_to_rgba, "Convert a PNG image to an RGBA bitmap file.", argv)


def rgba2png(argv: list[str] | None = None) -> int:
    return _run(rgba_to_png, "Convert an RGBA bitmap file to a PNG image.", argv)


if __name__ == "__main__":
    sys.exit(png2rgba())
