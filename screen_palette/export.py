# screen_palette/export.py
from __future__ import annotations

"""
Palette export encoders.

Exports:
  palette_to_css(palette, named=False) -> str
  palette_to_json(palette, exported_at=None) -> str
  palette_to_text(palette, fmt="hex", sep="\\n") -> str
  share_url(palette) -> str
  render_palette_image(palette, screenshot=None, fmt="hex", show_labels=True) -> PIL.Image
  export_palette(palette, out_path, export_format, ...) -> Path
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from . import constants as C
from .colour_convert import format_colour, rgb_to_hsl
from .core_types import ColourFormat, coerce_to_rgb_tuple, rgb_to_hex
from .naming import colour_name, css_var_names

EXPORT_FORMATS = ("png", "css", "json")
COOLORS_BASE = "https://coolors.co/"
DEFAULT_BLOCK_PX = 160


def palette_to_css(palette: Sequence[Sequence[int]], named: bool = False) -> str:
    """':root { --palette-1: #RRGGBB; ... }', or named variables when named=True."""
    names = css_var_names(palette) if named else None
    lines = [":root {"]
    for i, colour in enumerate(palette):
        var = names[i] if names else f"palette-{i + 1}"
        lines.append(f"  --{var}: {rgb_to_hex(colour)};")
    lines.append("}")
    return "\n".join(lines)


def palette_to_json(
    palette: Sequence[Sequence[int]], exported_at: Optional[datetime] = None
) -> str:
    stamp = exported_at or datetime.now(timezone.utc)
    colours = []
    for i, colour in enumerate(palette):
        r, g, b = coerce_to_rgb_tuple(colour)
        hsl = rgb_to_hsl(r, g, b)
        colours.append(
            {
                "index": i + 1,
                "hex": rgb_to_hex((r, g, b)),
                "name": colour_name((r, g, b)),
                "rgb": {"r": r, "g": g, "b": b},
                "hsl": {"h": hsl.h, "s": hsl.s, "l": hsl.l},
            }
        )
    return json.dumps({"colors": colours, "exportedAt": stamp.isoformat()}, indent=2)


def palette_to_text(
    palette: Sequence[Sequence[int]], fmt: ColourFormat = "hex", sep: str = "\n"
) -> str:
    """Clipboard-style listing of every colour in the chosen format."""
    return sep.join(format_colour(c, fmt) for c in palette)


def share_url(palette: Sequence[Sequence[int]]) -> str:
    """Coolors palette URL, e.g. https://coolors.co/ff0000-0000ff."""
    return COOLORS_BASE + "-".join(rgb_to_hex(c)[1:].lower() for c in palette)


def _text_colour(rgb: Sequence[int]) -> str:
    luminance = (0.299 * rgb[0] + 0.587 * rgb[1] + 0.114 * rgb[2]) / 255.0
    return "#000000" if luminance > 0.5 else "#FFFFFF"


def render_palette_image(
    palette: Sequence[Sequence[int]],
    screenshot: Optional[Image.Image] = None,
    fmt: ColourFormat = "hex",
    show_labels: bool = True,
) -> Image.Image:
    """
    Cinema-style reference sheet: screenshot on top, a white gap, then one tall
    block per colour with its label at the bottom. Without a screenshot only the
    colour strip is drawn.
    """
    if not palette:
        raise ValueError("cannot render an empty palette")
    n = len(palette)
    gap = C.EXPORT_GAP_PX
    img_w = screenshot.width if screenshot is not None else n * DEFAULT_BLOCK_PX + (n - 1) * gap
    img_h = screenshot.height if screenshot is not None else 0

    total_gaps = (n - 1) * gap
    block_w = (img_w - total_gaps) // n
    if block_w <= 0:
        raise ValueError(f"image width {img_w} too small for {n} colours")
    block_h = int(block_w * C.EXPORT_BLOCK_ASPECT)
    x_offset = (img_w - (block_w * n + total_gaps)) // 2
    bar_y = img_h + gap if screenshot is not None else 0

    sheet = Image.new("RGB", (img_w, bar_y + block_h), "#FFFFFF")
    if screenshot is not None:
        sheet.paste(screenshot.convert("RGB"), (0, 0))

    draw = ImageDraw.Draw(sheet)
    base_size = max(10, int(block_w * 0.12))
    font_size = base_size if fmt == "hex" else max(8, int(base_size * 0.75))
    font = ImageFont.load_default(size=font_size)

    for i, colour in enumerate(palette):
        rgb = coerce_to_rgb_tuple(colour)
        x0 = x_offset + i * (block_w + gap)
        draw.rectangle([x0, bar_y, x0 + block_w - 1, bar_y + block_h - 1], fill=rgb)
        if not show_labels:
            continue
        label = format_colour(rgb, fmt)
        left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
        text_x = x0 + (block_w - (right - left)) / 2 - left
        text_y = bar_y + block_h - C.EXPORT_TEXT_PAD_PX - bottom
        draw.text((text_x, text_y), label, fill=_text_colour(rgb), font=font)
    return sheet


def default_export_name(export_format: str, now: Optional[datetime] = None) -> str:
    stamp = int((now or datetime.now(timezone.utc)).timestamp() * 1000)
    return f"palette-{stamp}.{export_format}"


def export_palette(
    palette: Sequence[Sequence[int]],
    out_path: Path,
    export_format: str = "png",
    *,
    screenshot: Optional[Image.Image] = None,
    fmt: ColourFormat = "hex",
    show_labels: bool = True,
    named_vars: bool = False,
) -> Path:
    """
    Write the palette to out_path (a file, or a directory to receive a
    timestamped file). Returns the written path.
    """
    if export_format not in EXPORT_FORMATS:
        raise ValueError(f"unknown export format {export_format!r}")
    if not palette:
        raise ValueError("no palette to export")
    if out_path.is_dir():
        out_path = out_path / default_export_name(export_format)
    elif out_path.suffix.lower() != f".{export_format}":
        out_path = out_path.with_suffix(f".{export_format}")

    if export_format == "css":
        out_path.write_text(palette_to_css(palette, named=named_vars) + "\n", encoding="utf-8")
    elif export_format == "json":
        out_path.write_text(palette_to_json(palette) + "\n", encoding="utf-8")
    else:
        render_palette_image(palette, screenshot, fmt, show_labels).save(out_path)
    return out_path


__all__: List[str] = [
    "EXPORT_FORMATS",
    "palette_to_css",
    "palette_to_json",
    "palette_to_text",
    "share_url",
    "render_palette_image",
    "default_export_name",
    "export_palette",
]
