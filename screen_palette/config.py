# screen_palette/config.py
from __future__ import annotations

"""
Extraction configuration.

Exports:
  PaletteConfig                     : frozen record threaded into sampler/selector calls
  PaletteConfig.from_mapping(m)     : build from snake_case, camelCase or UPPER_CASE keys
  parse_override(text) -> (key, value)
"""

import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Tuple

from . import constants as C
from .core_types import ConfigError


@dataclass(frozen=True)
class PaletteConfig:
    """Flat option record for one extraction run."""

    grid_cols: int = C.GRID_COLS
    grid_rows: int = C.GRID_ROWS
    dark_pixel_threshold: float = C.DARK_PIXEL_THRESHOLD
    bright_pixel_threshold: float = C.BRIGHT_PIXEL_THRESHOLD
    dark_ratio_cutoff: float = C.DARK_RATIO_CUTOFF
    sky_start_y_ratio: float = C.SKY_START_Y_RATIO
    sky_end_y_ratio: float = C.SKY_END_Y_RATIO
    white_threshold: int = C.WHITE_THRESHOLD
    black_threshold: int = C.BLACK_THRESHOLD
    min_saturation_colourful: float = C.MIN_SATURATION_COLOURFUL
    min_colour_distance: float = C.MIN_COLOUR_DISTANCE
    dedupe_threshold: float = C.DEDUPE_THRESHOLD
    target_colour_count: int = C.TARGET_COLOUR_COUNT

    def __post_init__(self) -> None:
        if self.grid_cols < 1 or self.grid_rows < 1:
            raise ConfigError("grid_cols and grid_rows must be >= 1")
        if self.target_colour_count < 1:
            raise ConfigError("target_colour_count must be >= 1")
        if not 0.0 <= self.sky_start_y_ratio <= self.sky_end_y_ratio <= 1.0:
            raise ConfigError("sky ratios must satisfy 0 <= start <= end <= 1")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PaletteConfig":
        """
        Build a config from a flat mapping. Keys may be 'grid_cols', 'gridCols'
        or 'GRID_COLS'; 'color' spellings map onto 'colour'. Unknown keys raise.
        """
        known = {f.name: f for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for raw_key, value in values.items():
            key = normalise_key(raw_key)
            if key not in known:
                raise ConfigError(f"unknown config key: {raw_key!r}")
            kwargs[key] = _coerce(value, known[key].type)
        return cls(**kwargs)

    def with_overrides(self, values: Mapping[str, Any]) -> "PaletteConfig":
        """Return a copy with the given keys replaced (same key rules as from_mapping)."""
        merged = {f.name: getattr(self, f.name) for f in fields(self)}
        merged.update(
            {normalise_key(k): v for k, v in dict(values).items()}
        )
        return PaletteConfig.from_mapping(merged)

    def as_pairs(self) -> Tuple[Tuple[str, Any], ...]:
        return tuple((f.name, getattr(self, f.name)) for f in fields(self))


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def normalise_key(key: str) -> str:
    """'gridCols' / 'GRID_COLS' / 'minColorDistance' -> snake_case field name."""
    snake = _CAMEL_BOUNDARY.sub("_", key.strip()).replace("-", "_").lower()
    return snake.replace("color", "colour")


def _coerce(value: Any, type_name: Any) -> Any:
    # dataclass field types are strings under postponed annotations
    kind = str(type_name)
    if kind == "int" and isinstance(value, float) and not value.is_integer():
        raise ConfigError(f"expected integer, got {value!r}")
    try:
        if kind == "int":
            return int(value)
        if kind == "float":
            return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"bad value {value!r}: {exc}") from exc
    return value


def parse_override(text: str) -> Tuple[str, str]:
    """Split a CLI 'KEY=VALUE' override."""
    if "=" not in text:
        raise ConfigError(f"override must be KEY=VALUE, got {text!r}")
    key, value = text.split("=", 1)
    key = key.strip()
    if not key:
        raise ConfigError(f"override must be KEY=VALUE, got {text!r}")
    return key, value.strip()


DEFAULT_CONFIG = PaletteConfig()


__all__ = [
    "PaletteConfig",
    "DEFAULT_CONFIG",
    "normalise_key",
    "parse_override",
]
