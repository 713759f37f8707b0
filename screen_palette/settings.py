# screen_palette/settings.py
from __future__ import annotations

"""
User settings and palette history, stored as JSON files.

Exports:
  UserSettings
  settings_dir() -> Path
  load_settings(directory=None) -> UserSettings
  save_settings(settings, directory=None) -> Path
  HistoryEntry
  load_history(directory=None) -> list[HistoryEntry]
  push_history(palette, directory=None, now=None) -> list[HistoryEntry]

Read failures fall back to defaults with a [warn] line.
"""

import json
import os
from dataclasses import asdict, dataclass, field, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from . import constants as C
from .core_types import ColourFormat, HexStr, rgb_to_hex
from .export import EXPORT_FORMATS
from .utils import warn

SETTINGS_FILE = "settings.json"
HISTORY_FILE = "history.json"
HOME_ENV = "SCREEN_PALETTE_HOME"

COLOUR_FORMATS = ("hex", "rgb", "hsl")


@dataclass(frozen=True)
class UserSettings:
    colour_count: int = C.TARGET_COLOUR_COUNT
    colour_format: ColourFormat = "hex"
    export_format: str = "png"
    show_labels_in_export: bool = True

    def __post_init__(self) -> None:
        count = max(C.MIN_COLOUR_COUNT, min(C.MAX_COLOUR_COUNT, int(self.colour_count)))
        object.__setattr__(self, "colour_count", count)
        if self.colour_format not in COLOUR_FORMATS:
            object.__setattr__(self, "colour_format", "hex")
        if self.export_format not in EXPORT_FORMATS:
            object.__setattr__(self, "export_format", "png")
        object.__setattr__(self, "show_labels_in_export", bool(self.show_labels_in_export))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "UserSettings":
        """Build from a decoded JSON object; unknown keys and bad values are ignored."""
        base = cls()
        kwargs: Dict[str, Any] = {}
        for name in ("colour_count", "colour_format", "export_format", "show_labels_in_export"):
            if name in values:
                kwargs[name] = values[name]
        try:
            return replace(base, **kwargs)
        except (TypeError, ValueError, OverflowError) as e:
            warn(f"ignoring invalid settings ({e})")
            return base


@dataclass(frozen=True)
class HistoryEntry:
    timestamp: str
    colours: List[HexStr] = field(default_factory=list)


def settings_dir() -> Path:
    env = os.environ.get(HOME_ENV)
    return Path(env) if env else Path.home() / ".screen_palette"


def _read_json(path: Path) -> Optional[Any]:
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        warn(f"could not read {path}: {e}")
        return None


def _write_json(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path


def load_settings(directory: Optional[Path] = None) -> UserSettings:
    data = _read_json((directory or settings_dir()) / SETTINGS_FILE)
    if not isinstance(data, dict):
        return UserSettings()
    return UserSettings.from_mapping(data)


def save_settings(settings: UserSettings, directory: Optional[Path] = None) -> Path:
    return _write_json((directory or settings_dir()) / SETTINGS_FILE, asdict(settings))


def load_history(directory: Optional[Path] = None) -> List[HistoryEntry]:
    """Saved palettes, newest first. Malformed entries are skipped."""
    data = _read_json((directory or settings_dir()) / HISTORY_FILE)
    if not isinstance(data, list):
        return []
    out: List[HistoryEntry] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        colours = item.get("colours")
        if not isinstance(colours, list):
            continue
        out.append(HistoryEntry(str(item.get("timestamp", "")), [str(c) for c in colours]))
    return out[: C.HISTORY_SIZE]


def push_history(
    palette: Sequence[Sequence[int]],
    directory: Optional[Path] = None,
    now: Optional[datetime] = None,
) -> List[HistoryEntry]:
    """
    Prepend a palette (first HISTORY_PREVIEW_COLOURS colours) and keep the
    HISTORY_SIZE most recent. Write failures are logged; the new list is
    returned either way.
    """
    folder = directory or settings_dir()
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    entry = HistoryEntry(stamp, [rgb_to_hex(c) for c in palette[: C.HISTORY_PREVIEW_COLOURS]])
    history = [entry] + load_history(folder)
    history = history[: C.HISTORY_SIZE]
    try:
        _write_json(folder / HISTORY_FILE, [asdict(h) for h in history])
    except OSError as e:
        warn(f"could not save history: {e}")
    return history


__all__ = [
    "UserSettings",
    "HistoryEntry",
    "settings_dir",
    "load_settings",
    "save_settings",
    "load_history",
    "push_history",
]
