# screen_palette/utils.py
from __future__ import annotations

"""
Shared utilities for screen_palette.

Includes time formatting, pretty key/value formatting, palette report lines,
and tidy print-based logging.
"""

import sys
from typing import Any, Iterable, List, Sequence, Tuple


#  Time formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


# Pretty formatting


def format_number_compact(value: Any) -> str:
    """Pretty value: on/off for bools, 1,234 style for ints, compact floats, str otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """
    Format (name, value) pairs as 'Name: value' blocks separated by sep.
    Values go through format_number_compact.
    """
    out: List[str] = []
    for name, value in pairs:
        out.append(f"{name}{eq}{format_number_compact(value)}")
    return sep.join(out)


def palette_report_lines(
    labels: Sequence[str], names: Sequence[str], extras: Sequence[str] = ()
) -> List[str]:
    """
    Aligned '  1. #RRGGBB  Name' lines for a palette. Optional extras are
    appended per row (e.g. contrast notes).
    """
    width = max((len(s) for s in labels), default=0)
    lines: List[str] = []
    for i, (label, name) in enumerate(zip(labels, names)):
        line = f"  {i + 1:>2}. {label:<{width}}  {name}"
        if i < len(extras) and extras[i]:
            line += f"  {extras[i]}"
        lines.append(line)
    return lines


#  CLI / logging


def enable_line_buffered_stdout() -> None:
    """Enable line-buffered stdout when supported."""
    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True, write_through=True)
        except (OSError, ValueError):
            pass


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit a single human-readable config line, e.g.:
      [run] Count: 10  Format: hex  Export: png
    Routes to debug() when debug=True, else to log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def print_banner(title: str) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", flush=True)


def log(message: str) -> None:
    """Plain log line."""
    print(message, flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", flush=True)


def error(message: str) -> None:
    """Error log line to stderr."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "format_seconds_compact",
    "format_number_compact",
    "key_value_pairs_to_string",
    "palette_report_lines",
    "enable_line_buffered_stdout",
    "print_config_line",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
