# screen_palette/palette_data.py
from __future__ import annotations

"""
Reference dictionary of named colours.

Exports:
  NAMED_COLOURS_HEX: list[tuple[str, str]]  # [(hex, name), ...] in lookup order
  build_named_colours(hex_name_pairs=NAMED_COLOURS_HEX) -> tuple[NamedColourEntry, ...]
  NAMED_COLOURS: tuple[NamedColourEntry, ...]

Order is significant: lookups scan front to back and keep the first entry on a
distance tie. "Cyan" shadows "Aqua" (same RGB) and "Sage" appears three times
with different RGB values; all three stay in the scan.
"""

from typing import List, Tuple

from .core_types import NamedColourEntry, hex_to_rgb


NAMED_COLOURS_HEX: List[Tuple[str, str]] = [
    # Greyscale / off-whites
    ("#000000", "Black"),
    ("#ffffff", "White"),
    ("#36454f", "Charcoal"),
    ("#708090", "Slate Gray"),
    ("#778899", "Light Slate Gray"),
    ("#c0c0c0", "Silver"),
    ("#fffdd0", "Cream"),
    ("#f5f5dc", "Beige"),
    # Blues / cyans
    ("#000080", "Navy"),
    ("#191970", "Midnight Blue"),
    ("#4169e1", "Royal Blue"),
    ("#6495ed", "Cornflower Blue"),
    ("#87ceeb", "Sky Blue"),
    ("#87cefa", "Light Sky Blue"),
    ("#00bfff", "Deep Sky Blue"),
    ("#f0ffff", "Azure"),
    ("#008080", "Teal"),
    ("#00ffff", "Cyan"),
    ("#00ffff", "Aqua"),
    ("#40e0d0", "Turquoise"),
    ("#4682b4", "Steel Blue"),
    ("#e2fdfd", "Mint"),
    # Greens
    ("#228b22", "Forest Green"),
    ("#008000", "Green"),
    ("#00ff00", "Lime"),
    ("#32cd32", "Lime Green"),
    ("#7fff00", "Chartreuse"),
    ("#50c878", "Emerald"),
    ("#2e8b57", "Sea Green"),
    ("#808000", "Olive"),
    ("#6b8e23", "Olive Drab"),
    ("#8a9a5b", "Sage"),
    ("#bcb88a", "Sage"),
    ("#7ea38a", "Sage"),
    # Reds / pinks
    ("#7c4f60", "Old Mauve"),
    ("#800000", "Maroon"),
    ("#8b0000", "Dark Red"),
    ("#ff0000", "Red"),
    ("#dc143c", "Crimson"),
    ("#b22222", "Fire Brick"),
    ("#cd5c5c", "Indian Red"),
    ("#fa8072", "Salmon"),
    ("#ff7f50", "Coral"),
    ("#ff6347", "Tomato"),
    ("#ff4500", "Orange Red"),
    ("#ffc0cb", "Pink"),
    ("#ff69b4", "Hot Pink"),
    ("#ff1493", "Deep Pink"),
    ("#ff007f", "Rose"),
    ("#ff00ff", "Fuchsia"),
    # Oranges / yellows / browns
    ("#ffa500", "Orange"),
    ("#ff8c00", "Dark Orange"),
    ("#f4a460", "Sandy Brown"),
    ("#ffdab9", "Peach"),
    ("#8b5d4f", "Terracotta"),
    ("#ffd700", "Gold"),
    ("#cd7f32", "Bronze"),
    ("#daa520", "Golden Rod"),
    ("#ffff00", "Yellow"),
    ("#f0e68c", "Khaki"),
    ("#d2691e", "Chocolate"),
    ("#8b4513", "Saddle Brown"),
    ("#a0522d", "Sienna"),
    ("#a52a2a", "Brown"),
    ("#cd853f", "Peru"),
    ("#deb887", "Burly Wood"),
    ("#d2b48c", "Tan"),
    ("#f5deb3", "Wheat"),
    # Purples / violets
    ("#4b0082", "Indigo"),
    ("#800080", "Purple"),
    ("#8b008b", "Dark Magenta"),
    ("#9400d3", "Dark Violet"),
    ("#9932cc", "Dark Orchid"),
    ("#ba55d3", "Medium Orchid"),
    ("#d8bfd8", "Thistle"),
    ("#dda0dd", "Plum"),
    ("#ee82ee", "Violet"),
    ("#e6e6fa", "Lavender"),
]


def build_named_colours(
    hex_name_pairs: List[Tuple[str, str]] = NAMED_COLOURS_HEX,
) -> Tuple[NamedColourEntry, ...]:
    """Convert (hex, name) pairs into immutable entries, preserving order."""
    return tuple(
        NamedColourEntry(name=name, rgb=hex_to_rgb(hx)) for hx, name in hex_name_pairs
    )


NAMED_COLOURS: Tuple[NamedColourEntry, ...] = build_named_colours()


__all__ = ["NAMED_COLOURS_HEX", "NAMED_COLOURS", "build_named_colours"]
