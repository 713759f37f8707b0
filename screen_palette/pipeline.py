# screen_palette/pipeline.py
from __future__ import annotations

"""
End-to-end extraction: bitmap -> candidates -> palette -> names.

Exports:
  PaletteResult
  extract_palette(bitmap, config=DEFAULT_CONFIG, count=None, debug=False) -> PaletteResult
  reselect(result, count, config=DEFAULT_CONFIG, debug=False) -> PaletteResult
  ContrastEntry, contrast_report(palette) -> list[ContrastEntry]

No I/O beyond optional debug logging; the same bitmap and config always
give the same palette.
"""

import time
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from .colour_convert import contrast_ratio, wcag_level
from .colour_select import normalise_candidates, select_diverse_palette
from .config import DEFAULT_CONFIG, PaletteConfig
from .core_types import Palette, RGBTuple, WcagRating, coerce_to_rgb_tuple
from .image_io import Bitmap
from .naming import colour_name
from .sampler import sample_bitmap
from .utils import debug_log, format_seconds_compact

WHITE: RGBTuple = (255, 255, 255)
BLACK: RGBTuple = (0, 0, 0)


@dataclass(frozen=True)
class PaletteResult:
    """
    candidates: normalised pool (deduped, extremes filtered when possible);
                kept so a new count can be applied without resampling.
    colours:    selected palette in selection order.
    """

    candidates: List[RGBTuple]
    colours: Palette
    raw_count: int

    @property
    def names(self) -> List[str]:
        return [colour_name(c) for c in self.colours]


def extract_palette(
    bitmap: Bitmap,
    config: PaletteConfig = DEFAULT_CONFIG,
    count: Optional[int] = None,
    debug: bool = False,
) -> PaletteResult:
    """Sample, normalise and diversity-select count colours (default: config target)."""
    n = config.target_colour_count if count is None else int(count)
    t0 = time.perf_counter()
    raw = sample_bitmap(bitmap, config, debug=debug)
    pool = normalise_candidates(raw, n, config, debug=debug)
    colours = select_diverse_palette(
        pool,
        n,
        min_saturation_colourful=config.min_saturation_colourful,
        min_colour_distance=config.min_colour_distance,
        debug=debug,
    )
    if debug:
        debug_log(
            f"extracted {len(raw)} samples, selected {len(colours)} colours "
            f"in {format_seconds_compact(time.perf_counter() - t0)}"
        )
    return PaletteResult(candidates=pool, colours=colours, raw_count=len(raw))


def reselect(
    result: PaletteResult,
    count: int,
    config: PaletteConfig = DEFAULT_CONFIG,
    debug: bool = False,
) -> PaletteResult:
    """Re-run diversity selection on cached candidates for a different count."""
    colours = select_diverse_palette(
        result.candidates,
        int(count),
        min_saturation_colourful=config.min_saturation_colourful,
        min_colour_distance=config.min_colour_distance,
        debug=debug,
    )
    return replace(result, colours=colours)


@dataclass(frozen=True)
class ContrastEntry:
    rgb: RGBTuple
    on_white: float
    on_black: float
    white_rating: WcagRating
    black_rating: WcagRating

    @property
    def best_text(self) -> RGBTuple:
        """Text colour with the higher contrast on this swatch."""
        return WHITE if self.on_white >= self.on_black else BLACK


def contrast_report(palette: Sequence[Sequence[int]]) -> List[ContrastEntry]:
    out: List[ContrastEntry] = []
    for colour in palette:
        rgb = coerce_to_rgb_tuple(colour)
        on_white = contrast_ratio(rgb, WHITE)
        on_black = contrast_ratio(rgb, BLACK)
        out.append(
            ContrastEntry(
                rgb=rgb,
                on_white=on_white,
                on_black=on_black,
                white_rating=wcag_level(on_white),
                black_rating=wcag_level(on_black),
            )
        )
    return out


__all__ = [
    "PaletteResult",
    "extract_palette",
    "reselect",
    "ContrastEntry",
    "contrast_report",
]
