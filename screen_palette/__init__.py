# screen_palette/__init__.py
"""
screen_palette package.

Purpose:
  Extract a small, hue-diverse, human-named colour palette from a screenshot.
  See extract_palette.py for the CLI.

Public API:
  Bitmap          : RGBA pixel source (open, grab, from_image).
  PaletteConfig   : tunables for sampling and selection (DEFAULT_CONFIG).
  extract_palette : sample -> normalise -> diversity-select, returns PaletteResult.
  reselect        : re-run selection on cached candidates for a new count.
  colour_name     : dictionary lookup, then procedural HSL naming.
  colour_convert  : HSL, distance, luminance, contrast and formatting helpers.
  export          : CSS, JSON, text, share URL and PNG sheet encoders.
  settings        : persisted user settings and palette history.

Quick start:
  from screen_palette import Bitmap, extract_palette
  result = extract_palette(Bitmap.open("shot.png"), count=6)
  print(result.colours, result.names)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import core_types
from . import palette_data
from . import colour_select
from . import export
from . import settings
from . import utils

from .config import DEFAULT_CONFIG, PaletteConfig  # noqa: E402,F401
from .core_types import BitmapError, ConfigError  # noqa: E402,F401
from .image_io import Bitmap  # noqa: E402,F401
from .naming import colour_name  # noqa: E402,F401
from .pipeline import PaletteResult, contrast_report, extract_palette, reselect  # noqa: E402,F401

__all__ = [
    "__version__",
    "colour_convert",
    "core_types",
    "palette_data",
    "colour_select",
    "export",
    "settings",
    "utils",
    "Bitmap",
    "BitmapError",
    "ConfigError",
    "DEFAULT_CONFIG",
    "PaletteConfig",
    "PaletteResult",
    "colour_name",
    "contrast_report",
    "extract_palette",
    "reselect",
]
