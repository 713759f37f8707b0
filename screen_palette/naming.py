# screen_palette/naming.py
from __future__ import annotations

"""
Perceptual colour naming.

Exports:
  colour_name(rgb) -> str
  hue_name(hue_deg) -> str
  procedural_name(hsl) -> str
  colour_name_to_var_name(name) -> str
  css_var_names(palette) -> list[str]

Lookup order: nearest dictionary entry within NAMED_MATCH_THRESHOLD, then
procedural naming from HSL. The procedural overrides are checked in a fixed
order and the first hit wins; bands overlap on purpose.
"""

import re
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from .colour_convert import nearest_named_colour, rgb_to_hsl
from .core_types import HSL

# (exclusive upper bound in degrees, name); hues >= 345 wrap back to Red.
_HUE_NAMES: Tuple[Tuple[float, str], ...] = (
    (15.0, "Red"),
    (30.0, "Vermilion"),
    (45.0, "Orange"),
    (60.0, "Amber"),
    (75.0, "Yellow"),
    (105.0, "Lime"),
    (135.0, "Green"),
    (165.0, "Teal"),
    (195.0, "Cyan"),
    (225.0, "Sky Blue"),
    (255.0, "Blue"),
    (270.0, "Indigo"),
    (315.0, "Purple"),
    (345.0, "Magenta"),
)

_GREY_LADDER: Tuple[Tuple[float, str], ...] = (
    (0.15, "Black"),
    (0.3, "Charcoal"),
    (0.45, "Dark Gray"),
    (0.6, "Gray"),
    (0.75, "Silver"),
    (0.9, "Light Gray"),
)


def hue_name(hue_deg: float) -> str:
    for upper, name in _HUE_NAMES:
        if hue_deg < upper:
            return name
    return "Red"


def _grey_name(lightness: float) -> str:
    for upper, name in _GREY_LADDER:
        if lightness < upper:
            return name
    return "White"


def _override(base: str, h: float, s: float, l: float) -> Optional[str]:  # noqa: E741
    # Earth tones before the general brown family
    if 10 <= h <= 25 and 0.2 < s <= 0.5 and 0.3 < l <= 0.6:
        return "Terracotta"

    if 10 <= h <= 45 and s > 0.15 and l < 0.5:
        if l < 0.3:
            return "Dark Brown"
        # bright, highly saturated mid tones stay orange
        if not (l > 0.35 and s > 0.7):
            return "Brown"

    if base in ("Red", "Magenta", "Vermilion"):
        # Peach before Pink for vermilion hues
        if base == "Vermilion" and l > 0.75 and s > 0.4:
            return "Peach"
        if l > 0.75 and s > 0.4:
            return "Pink"
        if l > 0.88:
            return "Rose"
        # Coral before Salmon
        if 0.55 < l < 0.7 and s > 0.5:
            return "Coral"
        if 0.6 < l <= 0.8 and s > 0.6:
            return "Salmon"
        # red-orange hues only, keeps mauves (h > 300) out
        if (h < 25 or h > 355) and 0.3 < l <= 0.7 and 0.2 < s <= 0.6:
            return "Terracotta"
        if 0.55 < l <= 0.7 and 0.3 < s <= 0.6:
            return "Rosy Brown"

    if base == "Red" and l > 0.65 and s > 0.6:
        return "Salmon"

    if base in ("Vermilion", "Orange"):
        if l > 0.75 and s > 0.4:
            return "Peach"
        if 0.55 < l < 0.7 and s > 0.5:
            return "Coral"
        if 0.5 < l < 0.7 and 0.2 < s <= 0.5:
            return "Tan"

    if base == "Yellow":
        if l > 0.85:
            return "Beige"
        if 45 <= h <= 60 and s > 0.7 and 0.4 <= l <= 0.6:
            return "Gold"
        if l < 0.4:
            return "Olive"

    if base == "Amber" and s > 0.7 and 0.4 <= l <= 0.6:
        return "Gold"

    if base in ("Purple", "Magenta"):
        if l > 0.65 and s > 0.4:
            return "Violet"
        if l > 0.65 and 0.2 < s <= 0.4:
            return "Plum"

    if base == "Blue" and l > 0.85:
        return "Lavender"

    if base in ("Cyan", "Teal", "Green"):
        if l > 0.85 and h > 150:
            return "Mint"
        if l > 0.75 and h > 170:
            return "Powder Blue"
        if 120 <= h <= 170 and s < 0.35 and l > 0.4:
            return "Sage"

    if base == "Sky Blue" and 0.2 < s < 0.6 and 0.35 < l < 0.65:
        return "Steel Blue"

    return None


def _prefix(s: float, l: float) -> str:  # noqa: E741
    prefix = ""
    if l < 0.25:
        prefix = "Deep "
    elif l < 0.4:
        prefix = "Dark "
    elif l > 0.75:
        prefix = "Light "
    elif l > 0.6 and s < 0.4:
        prefix = "Pale "

    if s < 0.3 and 0.25 <= l <= 0.75:
        prefix = "Muted "
    return prefix


def procedural_name(hsl: HSL) -> str:
    """Name from HSL alone: grey ladder, perceptual overrides, or prefixed hue name."""
    h, s, l = hsl.h, hsl.s, hsl.l  # noqa: E741
    if s < 0.1:
        return _grey_name(l)
    base = hue_name(h)
    override = _override(base, h, s, l)
    if override is not None:
        return override
    return _prefix(s, l) + base


def colour_name(rgb: Sequence[int]) -> str:
    """Human-readable name for an RGB colour."""
    named = nearest_named_colour(rgb)
    if named is not None:
        return named
    return procedural_name(rgb_to_hsl(int(rgb[0]), int(rgb[1]), int(rgb[2])))


_WHITESPACE = re.compile(r"\s+")
_NOT_VAR_CHAR = re.compile(r"[^a-z0-9-]")


def colour_name_to_var_name(name: str) -> str:
    """'Sky Blue' -> 'sky-blue'; drops anything outside [a-z0-9-]."""
    return _NOT_VAR_CHAR.sub("", _WHITESPACE.sub("-", name.lower()))


def css_var_names(palette: Sequence[Sequence[int]]) -> List[str]:
    """
    One CSS variable name per colour. Names shared by several colours get
    -1, -2, ... suffixes in palette order.
    """
    bases = [colour_name_to_var_name(colour_name(rgb)) for rgb in palette]
    totals = Counter(bases)
    seen: Dict[str, int] = {}
    out: List[str] = []
    for base in bases:
        seen[base] = seen.get(base, 0) + 1
        out.append(f"{base}-{seen[base]}" if totals[base] > 1 else base)
    return out


__all__ = [
    "colour_name",
    "hue_name",
    "procedural_name",
    "colour_name_to_var_name",
    "css_var_names",
]
