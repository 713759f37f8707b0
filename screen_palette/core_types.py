# screen_palette/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import List, Literal, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 4) RGBA
U8Pixels = NDArray[np.uint8]  # (N, 4) row-major RGBA

Palette = List[RGBTuple]

HueFamily = Literal[
    "red",
    "orange",
    "yellow",
    "green",
    "teal",
    "blue",
    "purple",
    "magenta",
    "neutral",
]
ColourFormat = Literal["hex", "rgb", "hsl"]

# Errors


class BitmapError(ValueError):
    """Bitmap input violates the sampler contract (empty, zero cell, bad dtype)."""


class ConfigError(ValueError):
    """Configuration value or key is not usable."""


# Value objects


@dataclass(frozen=True)
class HSL:
    """Hue in degrees [0, 360), saturation and lightness in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True)
class NamedColourEntry:
    """Reference dictionary row."""

    name: str
    rgb: RGBTuple


@dataclass(frozen=True)
class WcagRating:
    """WCAG 2.1 contrast classification with a badge colour for display."""

    level: str
    passes: bool
    colour: HexStr


# Small helpers


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative inputs (Python round() is banker's)."""
    return int(np.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    """Round and clamp to a valid 0..255 channel."""
    v = round_half_up(value)
    return 0 if v < 0 else 255 if v > 255 else v


def rgb_to_hex(rgb: Sequence[int]) -> HexStr:
    """RGB triple to uppercase hex string '#RRGGBB'."""
    return f"#{int(rgb[0]):02X}{int(rgb[1]):02X}{int(rgb[2]):02X}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive, '#' optional) into an RGB tuple."""
    s = hex_str.strip().lower().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        raise ValueError(f"hex must be '#rrggbb' or '#rgb', got {hex_str!r}")
    return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))


def coerce_to_rgb_tuple(value: Union[Sequence[int], NDArray[np.generic]]) -> RGBTuple:
    """
    Coerce a 3+ length sequence or array to an (int, int, int) RGB tuple.
    Helpful when extracting values from NumPy rows.
    """
    if isinstance(value, np.ndarray):
        if value.size < 3:
            raise ValueError("array too small for RGB")
        flat = value.reshape(-1)
        return (int(flat[0]), int(flat[1]), int(flat[2]))
    if len(value) < 3:
        raise ValueError("sequence too small for RGB")
    return (int(value[0]), int(value[1]), int(value[2]))


def assert_u8_image_rgba(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,3 or 4) image and return it as (H,W,4) RGBA."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] not in (3, 4):
        raise BitmapError("expected uint8 (H,W,3/4) image")
    if image.shape[-1] == 4:
        return image  # type: ignore[return-value]
    height, width, _ = image.shape
    out = np.empty((height, width, 4), dtype=np.uint8)
    out[..., :3] = image
    out[..., 3] = 255
    return out  # type: ignore[return-value]


__all__ = [
    "RGBTuple",
    "RGBATuple",
    "HexStr",
    "U8Image",
    "U8Pixels",
    "Palette",
    "HueFamily",
    "ColourFormat",
    "BitmapError",
    "ConfigError",
    "HSL",
    "NamedColourEntry",
    "WcagRating",
    "round_half_up",
    "rgb_to_hex",
    "hex_to_rgb",
    "clamp_channel",
    "coerce_to_rgb_tuple",
    "assert_u8_image_rgba",
]
