# screen_palette/colour_convert.py
from __future__ import annotations

"""
Colour conversions and metrics.

Exports:
  rgb_to_hsl(r, g, b) -> HSL              (bounded cache, see rgb_to_hsl.cache_clear)
  rgb_to_hsl_uncached(r, g, b) -> HSL
  hsl_arrays(rgb) -> (h, s, l)            vectorised over (..., 3) uint8 rows
  colour_family(hsl, min_saturation) -> HueFamily
  colour_distance(c1, c2) -> float        weighted Euclidean (2, 4, 3)
  nearest_named_colour(rgb, threshold) -> str | None
  relative_luminance(rgb), contrast_ratio(rgb1, rgb2), wcag_level(ratio)
  rgb_to_rgb_string, rgb_to_hsl_string, format_colour
"""

import math
from functools import lru_cache
from typing import Optional, Sequence, Tuple

import numpy as np

from . import constants as C
from .core_types import (
    HSL,
    ColourFormat,
    HueFamily,
    NamedColourEntry,
    WcagRating,
    rgb_to_hex,
    round_half_up,
)
from .palette_data import NAMED_COLOURS


# RGB -> HSL


def rgb_to_hsl_uncached(r: int, g: int, b: int) -> HSL:
    """Standard RGB (0..255) to HSL. Achromatic input gives h=0, s=0."""
    r_n, g_n, b_n = r / 255.0, g / 255.0, b / 255.0
    mx = max(r_n, g_n, b_n)
    mn = min(r_n, g_n, b_n)
    lightness = (mx + mn) / 2.0

    if mx == mn:
        return HSL(0.0, 0.0, lightness)

    d = mx - mn
    sat = d / (2.0 - mx - mn) if lightness > 0.5 else d / (mx + mn)
    if mx == r_n:
        hue = (g_n - b_n) / d + (6.0 if g_n < b_n else 0.0)
    elif mx == g_n:
        hue = (b_n - r_n) / d + 2.0
    else:
        hue = (r_n - g_n) / d + 4.0
    return HSL(hue * 60.0, sat, lightness)


@lru_cache(maxsize=C.HSL_CACHE_SIZE)
def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Cached rgb_to_hsl_uncached; HSL is frozen so sharing results is safe."""
    return rgb_to_hsl_uncached(int(r), int(g), int(b))


def hsl_arrays(rgb: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Vectorised HSL for uint8 rows (..., 3) in integer channel space.
    Returns float64 arrays (hue deg, saturation, lightness) with the input's leading shape.
    """
    rgb_i = rgb[..., :3].astype(np.int32, copy=False)
    r, g, b = rgb_i[..., 0], rgb_i[..., 1], rgb_i[..., 2]
    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    d = (mx - mn).astype(np.float64)
    lightness = (mx + mn) / 2.0 / 255.0

    chromatic = d > 0
    denom = np.where(lightness > 0.5, 510 - mx - mn, mx + mn).astype(np.float64)
    sat = np.zeros_like(d)
    np.divide(d, denom, out=sat, where=chromatic)

    safe_d = np.where(chromatic, d, 1.0)
    hue_r = (g - b) / safe_d + np.where(g < b, 6.0, 0.0)
    hue_g = (b - r) / safe_d + 2.0
    hue_b = (r - g) / safe_d + 4.0
    hue = np.select([mx == r, mx == g], [hue_r, hue_g], default=hue_b) * 60.0
    hue = np.where(chromatic, hue, 0.0)
    return hue, sat, lightness


def colour_family(
    hsl: HSL, min_saturation: float = C.MIN_SATURATION_COLOURFUL
) -> HueFamily:
    """Coarse hue family used by diversity selection."""
    if hsl.s < min_saturation:
        return "neutral"
    h = hsl.h
    if h < 15 or h >= 345:
        return "red"
    if h < 45:
        return "orange"
    if h < 70:
        return "yellow"
    if h < 150:
        return "green"
    if h < 200:
        return "teal"
    if h < 260:
        return "blue"
    if h < 290:
        return "purple"
    return "magenta"


# Distance / lookup


def colour_distance(c1: Sequence[int], c2: Sequence[int]) -> float:
    """Perceptually weighted Euclidean distance, green weighted highest."""
    dr = int(c1[0]) - int(c2[0])
    dg = int(c1[1]) - int(c2[1])
    db = int(c1[2]) - int(c2[2])
    return math.sqrt(2 * dr * dr + 4 * dg * dg + 3 * db * db)


def nearest_named_colour(
    rgb: Sequence[int],
    threshold: float = C.NAMED_MATCH_THRESHOLD,
    entries: Sequence[NamedColourEntry] = NAMED_COLOURS,
) -> Optional[str]:
    """
    Linear scan for the closest dictionary entry.
    Strict '<' keeps the first entry on ties. None when the best is beyond threshold.
    """
    best_dist = math.inf
    best_name: Optional[str] = None
    for entry in entries:
        d = colour_distance(rgb, entry.rgb)
        if d < best_dist:
            best_dist = d
            best_name = entry.name
    if best_dist <= threshold:
        return best_name
    return None


# WCAG 2.1


def relative_luminance(rgb: Sequence[int]) -> float:
    def linear(channel: int) -> float:
        v = channel / 255.0
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    r, g, b = (linear(int(c)) for c in rgb[:3])
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(rgb1: Sequence[int], rgb2: Sequence[int]) -> float:
    lum1 = relative_luminance(rgb1)
    lum2 = relative_luminance(rgb2)
    lighter, darker = max(lum1, lum2), min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_level(ratio: float) -> WcagRating:
    """AAA (>=7), AA (>=4.5), AA-L large text (>=3), else Fail."""
    if ratio >= 7:
        return WcagRating("AAA", True, "#22c55e")
    if ratio >= 4.5:
        return WcagRating("AA", True, "#84cc16")
    if ratio >= 3:
        return WcagRating("AA-L", True, "#facc15")
    return WcagRating("Fail", False, "#ef4444")


# String formats


def rgb_to_rgb_string(rgb: Sequence[int]) -> str:
    return f"rgb({int(rgb[0])}, {int(rgb[1])}, {int(rgb[2])})"


def rgb_to_hsl_string(rgb: Sequence[int]) -> str:
    hsl = rgb_to_hsl(int(rgb[0]), int(rgb[1]), int(rgb[2]))
    return (
        f"hsl({round_half_up(hsl.h)}, {round_half_up(hsl.s * 100)}%, "
        f"{round_half_up(hsl.l * 100)}%)"
    )


def format_colour(rgb: Sequence[int], fmt: ColourFormat = "hex") -> str:
    """Render as '#RRGGBB', 'rgb(r, g, b)' or 'hsl(h, s%, l%)'. Unknown formats render hex."""
    if fmt == "rgb":
        return rgb_to_rgb_string(rgb)
    if fmt == "hsl":
        return rgb_to_hsl_string(rgb)
    return rgb_to_hex(rgb)


__all__ = [
    "rgb_to_hsl",
    "rgb_to_hsl_uncached",
    "hsl_arrays",
    "colour_family",
    "colour_distance",
    "nearest_named_colour",
    "relative_luminance",
    "contrast_ratio",
    "wcag_level",
    "rgb_to_hex",
    "rgb_to_rgb_string",
    "rgb_to_hsl_string",
    "format_colour",
]
