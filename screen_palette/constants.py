# screen_palette/constants.py
"""
Tunables used across the project.

- Sampler defaults (grid, corner, sky band)
- Selector defaults (dedupe, extremes, diversity)
- Hue family orders
- Export layout
"""
from __future__ import annotations

from typing import Tuple

# =================
# Sampler (SAMPLER)
# =================
GRID_COLS: int = 10
GRID_ROWS: int = 8
DARK_PIXEL_THRESHOLD: float = 25.0
BRIGHT_PIXEL_THRESHOLD: float = 245.0
DARK_RATIO_CUTOFF: float = 0.7
SKY_START_Y_RATIO: float = 0.15
SKY_END_Y_RATIO: float = 0.35

ALPHA_OPAQUE_MIN: int = 128
GRID_NEUTRAL_SAT: float = 0.1
GRID_MIN_SAT: float = 0.02

CORNER_SIZE_RATIO: float = 0.1

SKY_COLUMNS: int = 8
SKY_MIN_BRIGHTNESS: float = 30.0
SKY_MAX_BRIGHTNESS: float = 240.0
SKY_MIN_SAT: float = 0.05
SKY_WEIGHT: int = 3

# Grid buckets: (name, upper hue bound). Red also wraps at >= 330.
GRID_BUCKETS: Tuple[str, ...] = (
    "red",
    "orange",
    "yellow",
    "green",
    "teal",
    "blue",
    "purple",
    "neutral",
)
GRID_RED_WRAP: float = 330.0
GRID_HUE_BOUNDS: Tuple[float, ...] = (30.0, 60.0, 90.0, 150.0, 200.0, 260.0)

# ===================
# Selector (SELECTOR)
# ===================
WHITE_THRESHOLD: int = 240
BLACK_THRESHOLD: int = 20
DEDUPE_THRESHOLD: float = 20.0
MIN_SATURATION_COLOURFUL: float = 0.08
MIN_COLOUR_DISTANCE: float = 35.0
TARGET_COLOUR_COUNT: int = 10

HUE_FAMILIES: Tuple[str, ...] = (
    "red",
    "orange",
    "yellow",
    "green",
    "teal",
    "blue",
    "purple",
    "magenta",
    "neutral",
)

# Score weights
W_LIGHTNESS: float = 0.4
W_SATURATION: float = 0.4
W_EXTREME: float = 0.2
LIGHTNESS_PEAK: float = 0.45

# ======
# Naming
# ======
NAMED_MATCH_THRESHOLD: float = 28.0
HSL_CACHE_SIZE: int = 500

# ======
# Export
# ======
EXPORT_GAP_PX: int = 4
EXPORT_BLOCK_ASPECT: float = 1.2
EXPORT_TEXT_PAD_PX: int = 8
HISTORY_SIZE: int = 5
HISTORY_PREVIEW_COLOURS: int = 5
MIN_COLOUR_COUNT: int = 1
MAX_COLOUR_COUNT: int = 20
