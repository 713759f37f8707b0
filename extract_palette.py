#!/usr/bin/env python3
"""
extract_palette.py
Extract a hue-diverse, named colour palette from screenshots.

Usage:
  python extract_palette.py SRC [--count N] [--format hex|rgb|hsl] [--export png|css|json]
                                [--outdir DIR] [--sort-hue] [--contrast] [--set KEY=VALUE] --debug
  python extract_palette.py --grab [...]

Input:
  Any Pillow-readable image, a folder of images, or the current screen (--grab).

Output:
  A numbered report of colours and names on stdout, a Coolors share link and,
  with --export, <stem>_palette.<ext> next to the input (or in --outdir).

Notes:
  Count and format default to the saved user settings; --save-settings stores
  the values used for this run. Each palette is added to the history unless
  --no-history is given.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from screen_palette.colour_convert import format_colour
from screen_palette.colour_select import sort_palette_by_hue
from screen_palette.config import DEFAULT_CONFIG, PaletteConfig, normalise_key, parse_override
from screen_palette.core_types import BitmapError, ConfigError
from screen_palette.export import EXPORT_FORMATS, default_export_name, export_palette, share_url
from screen_palette.image_io import Bitmap
from screen_palette.naming import colour_name
from screen_palette.pipeline import contrast_report, extract_palette
from screen_palette.settings import (
    UserSettings,
    load_settings,
    push_history,
    save_settings,
)
from screen_palette.utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    palette_report_lines,
    print_banner,
    print_config_line,
)

IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".webp", ".bmp"}
OUTPUT_SUFFIX = "_palette"


# CLI args


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments for palette extraction.

    Returns:
      argparse.Namespace with:
        src: Path to image or folder (None with --grab)
        grab: capture the screen instead of reading src
        count / format / export: None means "use saved settings"
        outdir: optional Path for exports
        overrides: list of KEY=VALUE config overrides
    """
    parser = argparse.ArgumentParser(
        prog="extract_palette",
        description="Extract a named, hue-diverse colour palette from screenshots.",
    )
    parser.add_argument("src", type=Path, nargs="?", help="Input image or folder")
    parser.add_argument("--grab", action="store_true", help="Capture the screen")
    parser.add_argument("--count", type=int, default=None, help="Colours to extract (1-20)")
    parser.add_argument(
        "--format",
        choices=["hex", "rgb", "hsl"],
        default=None,
        help="Colour label format.",
    )
    parser.add_argument(
        "--export",
        choices=list(EXPORT_FORMATS),
        default=None,
        help="Write the palette as a PNG sheet, CSS variables or JSON.",
    )
    parser.add_argument("--outdir", type=Path, default=None, help="Export directory")
    parser.add_argument("--sort-hue", action="store_true", help="Report colours by hue")
    parser.add_argument("--contrast", action="store_true", help="WCAG contrast vs white/black")
    parser.add_argument("--named-vars", action="store_true", help="CSS variables named by colour")
    parser.add_argument("--no-labels", action="store_true", help="No labels on the PNG sheet")
    parser.add_argument("--no-history", action="store_true", help="Do not record history")
    parser.add_argument(
        "--save-settings", action="store_true", help="Remember count/format/export"
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a tunable, e.g. --set gridCols=12",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose sampling details")
    args = parser.parse_args(argv)
    if args.grab == (args.src is not None):
        parser.error("give exactly one of SRC or --grab")
    return args


def _fail(message: str) -> NoReturn:
    print(f"error: {message}", file=sys.stderr, flush=True)
    sys.exit(2)


def _build_config(overrides: Sequence[str]) -> PaletteConfig:
    if not overrides:
        return DEFAULT_CONFIG
    return DEFAULT_CONFIG.with_overrides(dict(parse_override(o) for o in overrides))


def _count_overridden(overrides: Sequence[str]) -> bool:
    return any(normalise_key(parse_override(o)[0]) == "target_colour_count" for o in overrides)


def _contrast_notes(colours: Sequence[Sequence[int]]) -> List[str]:
    notes: List[str] = []
    for entry in contrast_report(colours):
        notes.append(
            f"white {entry.on_white:5.2f} {entry.white_rating.level:<4}  "
            f"black {entry.on_black:5.2f} {entry.black_rating.level}"
        )
    return notes


# Per-source processing


def _process_bitmap(
    bitmap: Bitmap,
    label: str,
    export_path: Optional[Path],
    args: argparse.Namespace,
    config: PaletteConfig,
    user: UserSettings,
) -> None:
    """extract -> report -> optional export -> history."""
    t_start = time.perf_counter()
    print_banner(label)
    if args.debug:
        debug_log(key_value_pairs_to_string([("Size", f"{bitmap.width}x{bitmap.height}")]))

    result = extract_palette(bitmap, config, count=user.colour_count, debug=args.debug)
    colours = result.colours
    if args.sort_hue:
        colours = sort_palette_by_hue(colours, config.min_saturation_colourful)

    if not colours:
        log("No colours found.")
        return

    labels = [format_colour(c, user.colour_format) for c in colours]
    names = [colour_name(c) for c in colours]
    extras = _contrast_notes(colours) if args.contrast else ()
    log(f"Palette ({len(colours)} of {user.colour_count}):")
    for line in palette_report_lines(labels, names, extras):
        log(line)
    log(f"Share: {share_url(colours)}")

    if export_path is not None:
        written = export_palette(
            colours,
            export_path,
            user.export_format,
            screenshot=bitmap.to_image(),
            fmt=user.colour_format,
            show_labels=user.show_labels_in_export,
            named_vars=args.named_vars,
        )
        log(f"Wrote {written.name}")

    if not args.no_history:
        push_history(colours)

    log(f"Total time {format_seconds_compact(time.perf_counter() - t_start)}")


def _export_target(src: Optional[Path], args: argparse.Namespace, ext: str) -> Optional[Path]:
    if args.export is None:
        return None
    if src is None:
        folder = args.outdir or Path.cwd()
        return folder / default_export_name(ext)
    folder = args.outdir or src.parent
    return folder / f"{src.stem}{OUTPUT_SUFFIX}.{ext}"


def _list_images(folder: Path) -> List[Path]:
    files = [
        p
        for p in folder.iterdir()
        if p.is_file()
        and p.suffix.lower() in IMAGE_EXTS
        and not p.stem.endswith(OUTPUT_SUFFIX)
    ]
    files.sort(key=lambda p: p.name.lower())
    return files


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    CLI entry point.

    Handles a single file, a folder of images, or a screen capture.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    try:
        config = _build_config(args.overrides)
    except ConfigError as e:
        _fail(str(e))

    saved = load_settings()
    # --count, then --set targetColorCount, then the saved count
    if args.count is not None:
        count = args.count
    elif _count_overridden(args.overrides):
        count = config.target_colour_count
    else:
        count = saved.colour_count
    user = UserSettings(
        colour_count=count,
        colour_format=args.format or saved.colour_format,
        export_format=args.export or saved.export_format,
        show_labels_in_export=saved.show_labels_in_export and not args.no_labels,
    )
    if args.debug and count != user.colour_count:
        debug_log(f"count {count} clamped to {user.colour_count}")

    print_config_line(
        "run",
        [
            ("Count", user.colour_count),
            ("Format", user.colour_format),
            ("Export", args.export or "-"),
        ],
        debug=False,
    )
    if args.debug:
        print_config_line("config", config.as_pairs(), debug=True)

    if args.outdir is not None:
        args.outdir.mkdir(parents=True, exist_ok=True)
    if args.save_settings:
        save_settings(user)

    if args.grab:
        try:
            bitmap = Bitmap.grab()
        except BitmapError as e:
            _fail(str(e))
        try:
            _process_bitmap(
                bitmap, "screen", _export_target(None, args, user.export_format), args, config, user
            )
        except BitmapError as e:
            _fail(str(e))
        return

    src = args.src
    if not src.exists():
        _fail(f"not found: {src}")

    if src.is_dir():
        files = _list_images(src)
        if args.debug:
            debug_log(key_value_pairs_to_string([("Images", len(files))]))
        for path in files:
            try:
                bitmap = Bitmap.open(path)
            except BitmapError as e:
                error(str(e))
                continue
            try:
                _process_bitmap(
                    bitmap, path.name, _export_target(path, args, user.export_format), args, config, user
                )
            except BitmapError as e:
                error(f"{path.name}: {e}")
        return

    try:
        bitmap = Bitmap.open(src)
    except BitmapError as e:
        _fail(str(e))
    try:
        _process_bitmap(
            bitmap, src.name, _export_target(src, args, user.export_format), args, config, user
        )
    except BitmapError as e:
        _fail(str(e))


if __name__ == "__main__":
    main()
