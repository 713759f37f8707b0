# screen_palette/sampler.py
from __future__ import annotations

"""
Candidate sampling from a bitmap.

Exports:
  sample_bitmap(bitmap, config=DEFAULT_CONFIG, debug=False) -> list[RGBTuple]
  grid_pass(bitmap, config) -> list[RGBTuple]
  corner_pass(bitmap) -> list[RGBTuple]
  sky_pass(bitmap, config) -> list[RGBTuple]
  grid_bucket_codes(hue, sat) -> np.ndarray

Each pass draws from small, usually homogeneous regions so a sample is a pure
colour rather than a blend of neighbouring areas. The output is an unordered
multiset; duplicates are resolved by the selector.
"""

from typing import List

import numpy as np

from . import constants as C
from .colour_convert import hsl_arrays
from .config import DEFAULT_CONFIG, PaletteConfig
from .core_types import BitmapError, RGBTuple, U8Pixels, clamp_channel, coerce_to_rgb_tuple
from .image_io import Bitmap
from .utils import debug_log, key_value_pairs_to_string


def _opaque_rgb(pixels: U8Pixels) -> np.ndarray:
    """RGB rows of pixels with alpha >= ALPHA_OPAQUE_MIN."""
    return pixels[pixels[:, 3] >= C.ALPHA_OPAQUE_MIN, :3]


def _brightness(rgb: np.ndarray) -> np.ndarray:
    return rgb.astype(np.float64).sum(axis=1) / 3.0


def grid_bucket_codes(hue: np.ndarray, sat: np.ndarray) -> np.ndarray:
    """
    Index into GRID_BUCKETS per pixel: neutral below GRID_NEUTRAL_SAT, else
    red (<30 or >=330), orange, yellow, green, teal, blue, purple.
    """
    codes = np.searchsorted(np.asarray(C.GRID_HUE_BOUNDS), hue, side="right")
    codes = np.where(hue >= C.GRID_RED_WRAP, 0, codes)
    neutral = len(C.GRID_BUCKETS) - 1
    return np.where(sat < C.GRID_NEUTRAL_SAT, neutral, codes).astype(np.int32)


# Grid pass


def _grid_cell_colours(pixels: U8Pixels, config: PaletteConfig) -> List[RGBTuple]:
    total = pixels.shape[0]
    rgb = _opaque_rgb(pixels)
    bright = _brightness(rgb)

    dark = bright < config.dark_pixel_threshold
    if total == 0 or int(dark.sum()) / total > config.dark_ratio_cutoff:
        return []

    usable = ~dark & (bright <= config.bright_pixel_threshold)
    rgb = rgb[usable]
    if rgb.shape[0] == 0:
        return []

    hue, sat, _ = hsl_arrays(rgb)
    codes = grid_bucket_codes(hue, sat)

    out: List[RGBTuple] = []
    for code in range(len(C.GRID_BUCKETS)):
        members = np.flatnonzero(codes == code)
        if members.size == 0:
            continue
        # argmax keeps the first pixel among equal saturations
        best = members[int(np.argmax(sat[members]))]
        if sat[best] > C.GRID_MIN_SAT:
            out.append(coerce_to_rgb_tuple(rgb[best]))
    return out


def grid_pass(bitmap: Bitmap, config: PaletteConfig) -> List[RGBTuple]:
    """Best pixel per hue bucket per grid cell; letterbox cells are skipped."""
    cell_w = bitmap.width // config.grid_cols
    cell_h = bitmap.height // config.grid_rows
    if cell_w == 0 or cell_h == 0:
        raise BitmapError(
            f"{bitmap.width}x{bitmap.height} bitmap is too small for a "
            f"{config.grid_cols}x{config.grid_rows} grid"
        )
    out: List[RGBTuple] = []
    for row in range(config.grid_rows):
        for col in range(config.grid_cols):
            pixels = bitmap.region_pixels(col * cell_w, row * cell_h, cell_w, cell_h)
            out.extend(_grid_cell_colours(pixels, config))
    return out


# Corner pass


def corner_pass(bitmap: Bitmap) -> List[RGBTuple]:
    """Mean colour of the four corner squares (background / letterbox tone)."""
    size = int(min(bitmap.width, bitmap.height) * C.CORNER_SIZE_RATIO)
    if size <= 0:
        return []
    far_x = bitmap.width - size
    far_y = bitmap.height - size
    out: List[RGBTuple] = []
    for x, y in ((0, 0), (far_x, 0), (0, far_y), (far_x, far_y)):
        rgb = _opaque_rgb(bitmap.region_pixels(x, y, size, size))
        if rgb.shape[0] == 0:
            continue
        mean = rgb.astype(np.float64).mean(axis=0)
        out.append((clamp_channel(mean[0]), clamp_channel(mean[1]), clamp_channel(mean[2])))
    return out


# Sky-band pass


def sky_pass(bitmap: Bitmap, config: PaletteConfig) -> List[RGBTuple]:
    """
    Most saturated pixel per column of the upper band, repeated SKY_WEIGHT times
    so it competes with more numerous but duller samples.
    """
    start_y = int(bitmap.height * config.sky_start_y_ratio)
    end_y = int(bitmap.height * config.sky_end_y_ratio)
    col_w = bitmap.width // C.SKY_COLUMNS
    band_h = end_y - start_y
    if band_h <= 0 or col_w <= 0:
        return []

    out: List[RGBTuple] = []
    for col in range(C.SKY_COLUMNS):
        rgb = _opaque_rgb(bitmap.region_pixels(col * col_w, start_y, col_w, band_h))
        bright = _brightness(rgb)
        rgb = rgb[(bright >= C.SKY_MIN_BRIGHTNESS) & (bright <= C.SKY_MAX_BRIGHTNESS)]
        if rgb.shape[0] == 0:
            continue
        _, sat, _ = hsl_arrays(rgb)
        best = int(np.argmax(sat))
        if sat[best] > C.SKY_MIN_SAT:
            out.extend([coerce_to_rgb_tuple(rgb[best])] * C.SKY_WEIGHT)
    return out


def sample_bitmap(
    bitmap: Bitmap, config: PaletteConfig = DEFAULT_CONFIG, debug: bool = False
) -> List[RGBTuple]:
    """Concatenate grid, corner and sky-band samples."""
    grid = grid_pass(bitmap, config)
    corners = corner_pass(bitmap)
    sky = sky_pass(bitmap, config)
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Bitmap", f"{bitmap.width}x{bitmap.height}"),
                    ("Grid samples", len(grid)),
                    ("Corner samples", len(corners)),
                    ("Sky samples", len(sky)),
                ]
            )
        )
    return grid + corners + sky


__all__ = [
    "sample_bitmap",
    "grid_pass",
    "corner_pass",
    "sky_pass",
    "grid_bucket_codes",
]
