import logging

import numpy as np
from PIL import Image

from .formats import PixelLayout

_LOGGER = logging.getLogger(__name__)

_RAW_EXTENSIONS = ("dng", "cr2", "nef", "arw", "raw")
_SIXTEEN_BIT_MODES = ("I;16", "I;16B", "I;16L")


def load_image(filepath: str) -> tuple[np.ndarray, dict]:
    """Load an image and return packed RGBA pixel data as numpy array + description."""

    ext = filepath.lower().split(".")[-1]

    if ext in _RAW_EXTENSIONS:
        # RAW formats - requires rawpy
        import rawpy

        with rawpy.imread(filepath) as raw:
            rgb = raw.postprocess()
        img = Image.fromarray(rgb)
    else:
        # Standard formats (PNG, JPEG, etc.)
        img = Image.open(filepath)

    if img.mode in _SIXTEEN_BIT_MODES:
        # Keep the high byte of 16-bit grayscale
        img = Image.fromarray(np.clip(np.array(img) >> 8, 0, 255).astype(np.uint8))

    # Palette, grayscale, tRNS and opaque RGB all end up as RGBA
    if img.mode != "RGBA":
        _LOGGER.debug("Converting %s image from %s to RGBA", filepath, img.mode)
        img = img.convert("RGBA")

    return np.array(img), {
        "width": img.size[0],
        "height": img.size[1],
        "layout": PixelLayout.RGBA,
    }


def bitmap_to_image(decoded: dict) -> Image.Image:
    """Build a Pillow image from a decoded bitmap description."""
    layout = PixelLayout.parse(decoded["layout"])
    mode = "RGBA" if layout.has_alpha else "RGB"

    # Pillow's raw decoder understands every layout as a rawmode, plus row stride
    return Image.frombytes(
        mode,
        (decoded["width"], decoded["height"]),
        bytes(decoded["data"]),
        "raw",
        layout.name,
        decoded.get("row_size", 0),
    )
