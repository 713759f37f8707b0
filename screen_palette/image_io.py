# screen_palette/image_io.py
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .core_types import BitmapError, U8Image, U8Pixels, assert_u8_image_rgba

"""
Bitmap abstraction over an RGBA uint8 array, plus Pillow loading and screen capture.

Exports:
- Bitmap(pixels)                       pixel-addressable (H, W, 4) RGBA view
- Bitmap.region_pixels(x, y, w, h)     (w*h, 4) row-major RGBA, out-of-bounds reads transparent
- Bitmap.from_image(im) / Bitmap.open(path) / Bitmap.grab()
- is_image_file(path)
"""


class Bitmap:
    """Read-only RGBA bitmap. Width and height must both be positive."""

    __slots__ = ("_pixels",)

    def __init__(self, pixels: np.ndarray) -> None:
        arr = assert_u8_image_rgba(np.asarray(pixels))
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise BitmapError(f"bitmap has zero area ({arr.shape[1]}x{arr.shape[0]})")
        arr = np.ascontiguousarray(arr)
        arr.setflags(write=False)
        self._pixels: U8Image = arr

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def pixels(self) -> U8Image:
        return self._pixels

    def region(self, x: int, y: int, w: int, h: int) -> U8Image:
        """(h, w, 4) block at (x, y). Parts outside the bitmap are zero (transparent)."""
        if w < 0 or h < 0:
            raise BitmapError(f"negative region size {w}x{h}")
        x0, y0 = max(0, x), max(0, y)
        x1, y1 = min(self.width, x + w), min(self.height, y + h)
        if x == x0 and y == y0 and x1 - x == w and y1 - y == h:
            return self._pixels[y:y1, x:x1]
        out = np.zeros((h, w, 4), dtype=np.uint8)
        if x1 > x0 and y1 > y0:
            out[y0 - y : y1 - y, x0 - x : x1 - x] = self._pixels[y0:y1, x0:x1]
        return out

    def region_pixels(self, x: int, y: int, w: int, h: int) -> U8Pixels:
        """Row-major RGBA rows for the region, shape (w*h, 4)."""
        return self.region(x, y, w, h).reshape(-1, 4)

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.array(self._pixels))

    @classmethod
    def from_image(cls, im: Image.Image) -> "Bitmap":
        """Honour EXIF orientation and convert to RGBA."""
        im = ImageOps.exif_transpose(im)
        return cls(np.array(im.convert("RGBA"), dtype=np.uint8))

    @classmethod
    def open(cls, path: Union[str, Path]) -> "Bitmap":
        try:
            with Image.open(path) as im0:
                im0.load()
                return cls.from_image(im0)
        except (UnidentifiedImageError, OSError) as exc:
            raise BitmapError(f"cannot read image {path}: {exc}") from exc

    @classmethod
    def grab(cls) -> "Bitmap":
        """Capture the screen with Pillow's ImageGrab."""
        try:
            from PIL import ImageGrab

            shot = ImageGrab.grab()
        except (ImportError, OSError) as exc:
            raise BitmapError(f"screen capture unavailable: {exc}") from exc
        return cls.from_image(shot)

    def __repr__(self) -> str:
        return f"Bitmap({self.width}x{self.height})"


def is_image_file(path: Path) -> bool:
    try:
        with Image.open(path) as im:
            im.seek(0)
            im.load()
        return True
    except (UnidentifiedImageError, OSError):
        return False


__all__ = ["Bitmap", "is_image_file"]
