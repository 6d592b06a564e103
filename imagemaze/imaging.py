"""Pillow helpers at the edges of maze generation.

Decoding uploads, resampling to the maze grid, and encoding the rendered
raster as a paletted PNG / base64 data URI.
"""

from __future__ import annotations

import base64
import io
from typing import BinaryIO

from PIL import Image, ImageOps, UnidentifiedImageError

from imagemaze.maze.cells import Grid
from imagemaze.maze.errors import MazeError
from imagemaze.maze.render import IndexedRaster

DEFAULT_MAX_BYTES = 2 * 1024 * 1024


class ImageDecodeError(MazeError):
    """Upload could not be decoded as an image."""


class ImageTooLarge(MazeError):
    def __init__(self, limit: int):
        super().__init__(f"image exceeds {limit} bytes")
        self.limit = limit


def decode_image(stream: BinaryIO, max_bytes: int = DEFAULT_MAX_BYTES) -> Image.Image:
    """Read at most ``max_bytes`` from ``stream`` and decode them with Pillow.

    Raises:
        ImageTooLarge: the stream holds more than ``max_bytes``.
        ImageDecodeError: Pillow cannot identify or load the data.
    """
    data = stream.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ImageTooLarge(max_bytes)
    if not data:
        raise ImageDecodeError("empty image")
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
        # Pixels come back upright when an EXIF orientation tag is present
        img = ImageOps.exif_transpose(img)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise ImageDecodeError(f"image broken: {e}") from e
    return img


def default_image() -> Image.Image:
    """Source used when no upload is provided: a 256x256 radial gradient."""
    return Image.radial_gradient("L")


def intensity_grid(img: Image.Image, width: int, height: int) -> Grid:
    """Grayscale ``img`` and resample it to exactly ``width`` x ``height``.

    16-bit sources (modes ``I;16``, ``I``) keep their high byte, matching how
    an 8-bit gray copy of them would look.
    """
    if img.mode.startswith("I"):
        img = img.convert("I").point(lambda v: v * (1 / 256))
    gray = img.convert("L")
    if gray.size != (width, height):
        gray = gray.resize((width, height), resample=Image.Resampling.BICUBIC)
    return Grid(width, height, gray.tobytes())


def to_image(raster: IndexedRaster) -> Image.Image:
    image = Image.frombytes("P", (raster.width, raster.height), raster.pixels)
    image.putpalette([c for rgb in raster.palette for c in rgb])
    return image


def encode_png(raster: IndexedRaster) -> bytes:
    buf = io.BytesIO()
    to_image(raster).save(buf, format="PNG")
    return buf.getvalue()


def to_data_uri(png: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")


__all__ = [
    "ImageDecodeError",
    "ImageTooLarge",
    "decode_image",
    "default_image",
    "intensity_grid",
    "to_image",
    "encode_png",
    "to_data_uri",
]
