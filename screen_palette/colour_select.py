from __future__ import annotations

"""
Palette selection helpers.

Exports:
  deduplicate_colours(colours, threshold) -> list[RGBTuple]
  is_near_white(rgb, threshold=240) -> bool
  is_near_black(rgb, threshold=20) -> bool
  filter_extreme_colours(colours, white_threshold=240, black_threshold=20) -> list[RGBTuple]
  normalise_candidates(candidates, count, config) -> list[RGBTuple]
  score_colour(hsl) -> float
  select_diverse_palette(colours, count, *, min_saturation_colourful, min_colour_distance, debug=False)
    -> list[RGBTuple]
  sort_palette_by_hue(palette, min_saturation_colourful) -> list[RGBTuple]
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from . import constants as C
from .colour_convert import colour_distance, colour_family, rgb_to_hsl
from .config import DEFAULT_CONFIG, PaletteConfig
from .core_types import HSL, HueFamily, RGBTuple, coerce_to_rgb_tuple, rgb_to_hex
from .utils import debug_log, key_value_pairs_to_string


@dataclass(frozen=True)
class _Candidate:
    """Candidate colour with precomputed HSL, family and score."""

    index: int
    rgb: RGBTuple
    hsl: HSL
    family: HueFamily
    score: float


# Stage A: normalise


def deduplicate_colours(
    colours: Sequence[Sequence[int]], threshold: float
) -> List[RGBTuple]:
    """First-seen wins; drop colours closer than threshold to a kept one."""
    unique: List[RGBTuple] = []
    for colour in colours:
        rgb = coerce_to_rgb_tuple(colour)
        if all(colour_distance(kept, rgb) >= threshold for kept in unique):
            unique.append(rgb)
    return unique


def is_near_white(rgb: Sequence[int], threshold: int = C.WHITE_THRESHOLD) -> bool:
    return rgb[0] > threshold and rgb[1] > threshold and rgb[2] > threshold


def is_near_black(rgb: Sequence[int], threshold: int = C.BLACK_THRESHOLD) -> bool:
    return rgb[0] < threshold and rgb[1] < threshold and rgb[2] < threshold


def filter_extreme_colours(
    colours: Sequence[Sequence[int]],
    white_threshold: int = C.WHITE_THRESHOLD,
    black_threshold: int = C.BLACK_THRESHOLD,
) -> List[RGBTuple]:
    """Drop near-white and near-black colours, preserving order."""
    return [
        coerce_to_rgb_tuple(c)
        for c in colours
        if not is_near_white(c, white_threshold) and not is_near_black(c, black_threshold)
    ]


def normalise_candidates(
    candidates: Sequence[Sequence[int]],
    count: int,
    config: PaletteConfig = DEFAULT_CONFIG,
    debug: bool = False,
) -> List[RGBTuple]:
    """
    Dedupe then filter extremes. If filtering leaves fewer than count colours,
    the unfiltered dedupe result is used instead.
    """
    deduped = deduplicate_colours(candidates, config.dedupe_threshold)
    filtered = filter_extreme_colours(
        deduped, config.white_threshold, config.black_threshold
    )
    use_filtered = len(filtered) >= count
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Candidates", len(candidates)),
                    ("Deduped", len(deduped)),
                    ("Filtered", len(filtered)),
                    ("Extremes kept", not use_filtered),
                ]
            )
        )
    return filtered if use_filtered else deduped


# Stage B: diverse selection


def score_colour(hsl: HSL) -> float:
    """Favour mid lightness and saturation; halve the extreme bonus near black/white."""
    lightness_score = 1.0 - (abs(hsl.l - C.LIGHTNESS_PEAK) * 2.0) ** 1.5
    saturation_score = min(hsl.s * 1.2, 1.0)
    not_extreme = 1.0 if 0.15 < hsl.l < 0.85 else 0.5
    return (
        lightness_score * C.W_LIGHTNESS
        + saturation_score * C.W_SATURATION
        + not_extreme * C.W_EXTREME
    )


def _annotate(
    colours: Sequence[Sequence[int]], min_saturation_colourful: float
) -> List[_Candidate]:
    out: List[_Candidate] = []
    for i, colour in enumerate(colours):
        rgb = coerce_to_rgb_tuple(colour)
        hsl = rgb_to_hsl(*rgb)
        out.append(
            _Candidate(
                index=i,
                rgb=rgb,
                hsl=hsl,
                family=colour_family(hsl, min_saturation_colourful),
                score=score_colour(hsl),
            )
        )
    return out


def _far_enough(
    candidate: _Candidate, selected: Sequence[_Candidate], min_distance: float
) -> bool:
    return all(colour_distance(s.rgb, candidate.rgb) > min_distance for s in selected)


def select_diverse_palette(
    colours: Sequence[Sequence[int]],
    count: int,
    *,
    min_saturation_colourful: float = C.MIN_SATURATION_COLOURFUL,
    min_colour_distance: float = C.MIN_COLOUR_DISTANCE,
    debug: bool = False,
) -> List[RGBTuple]:
    """
    Pick up to count colours, covering every represented hue family once before
    any family contributes a second colour.

    Coverage pass: walk HUE_FAMILIES in order and take the best-scoring member of
    each bucket that is farther than min_colour_distance from everything chosen.
    Fill pass: remaining candidates by score, same distance rule.

    Returns fewer than count when the pool runs out of sufficiently distinct colours.
    """
    if len(colours) <= count:
        return [coerce_to_rgb_tuple(c) for c in colours]

    annotated = _annotate(colours, min_saturation_colourful)
    buckets: Dict[str, List[_Candidate]] = {family: [] for family in C.HUE_FAMILIES}
    for cand in annotated:
        buckets[cand.family].append(cand)
    for family in C.HUE_FAMILIES:
        buckets[family].sort(key=lambda c: -c.score)

    selected: List[_Candidate] = []
    for family in C.HUE_FAMILIES:
        if len(selected) >= count:
            break
        for cand in buckets[family]:
            if _far_enough(cand, selected, min_colour_distance):
                selected.append(cand)
                break
    covered = len(selected)

    if len(selected) < count:
        chosen = {c.index for c in selected}
        pool = [c for family in C.HUE_FAMILIES for c in buckets[family]]
        pool.sort(key=lambda c: -c.score)
        for cand in pool:
            if len(selected) >= count:
                break
            if cand.index in chosen:
                continue
            if _far_enough(cand, selected, min_colour_distance):
                selected.append(cand)
                chosen.add(cand.index)

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Requested", count),
                    ("Pool", len(annotated)),
                    ("Families", sum(1 for f in C.HUE_FAMILIES if buckets[f])),
                    ("Coverage picks", covered),
                    ("Fill picks", len(selected) - covered),
                ]
            )
        )
        for cand in selected:
            debug_log(
                f"  {rgb_to_hex(cand.rgb)}  {cand.family}: score={cand.score:.3f}"
            )

    return [c.rgb for c in selected]


def sort_palette_by_hue(
    palette: Sequence[Sequence[int]],
    min_saturation_colourful: float = C.MIN_SATURATION_COLOURFUL,
) -> List[RGBTuple]:
    """Display order: chromatic colours by ascending hue, then neutrals dark to light."""

    def key(rgb: RGBTuple):
        hsl = rgb_to_hsl(*rgb)
        neutral = colour_family(hsl, min_saturation_colourful) == "neutral"
        return (neutral, 0.0 if neutral else hsl.h, hsl.l, rgb)

    return sorted((coerce_to_rgb_tuple(c) for c in palette), key=key)


__all__ = [
    "deduplicate_colours",
    "is_near_white",
    "is_near_black",
    "filter_extreme_colours",
    "normalise_candidates",
    "score_colour",
    "select_diverse_palette",
    "sort_palette_by_hue",
]
