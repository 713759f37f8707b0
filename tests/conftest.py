"""Shared fixtures: synthetic screenshots painted with numpy."""

from typing import Sequence, Tuple

import numpy as np
import pytest

from screen_palette.colour_convert import rgb_to_hsl
from screen_palette.image_io import Bitmap

Rect = Tuple[int, int, int, int, Sequence[int]]  # x, y, w, h, rgb

STRIPE_COLOURS = [
    (230, 40, 40),  # red
    (240, 150, 30),  # orange
    (230, 220, 40),  # yellow
    (40, 180, 60),  # green
    (30, 170, 170),  # teal
    (40, 70, 220),  # blue
    (150, 50, 200),  # purple
    (220, 40, 180),  # magenta
]


def paint_pixels(width: int, height: int, background: Sequence[int], rects: Sequence[Rect] = ()):
    """Flat background plus opaque rectangles, later rects painted on top."""
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[..., :3] = background
    arr[..., 3] = 255
    for x, y, w, h, rgb in rects:
        arr[y : y + h, x : x + w, :3] = rgb
    return arr


def paint(width: int, height: int, background: Sequence[int], rects: Sequence[Rect] = ()) -> Bitmap:
    return Bitmap(paint_pixels(width, height, background, rects))


@pytest.fixture
def dashboard() -> Bitmap:
    """1920x1080 dark dashboard: charcoal page, navy header, coral button."""
    return paint(
        1920,
        1080,
        (54, 69, 79),
        [
            (0, 0, 1920, 200, (0, 0, 128)),
            (1000, 400, 400, 300, (255, 127, 80)),
        ],
    )


@pytest.fixture
def stripes() -> Bitmap:
    """200x160 image of eight 25px vertical stripes, one per hue family."""
    rects = [(i * 25, 0, 25, 160, rgb) for i, rgb in enumerate(STRIPE_COLOURS)]
    return paint(200, 160, (0, 0, 0), rects)


@pytest.fixture(autouse=True)
def _fresh_hsl_cache():
    rgb_to_hsl.cache_clear()
    yield


@pytest.fixture
def settings_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    monkeypatch.setenv("SCREEN_PALETTE_HOME", str(home))
    return home
