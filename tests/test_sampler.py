import numpy as np
import pytest

from screen_palette.config import PaletteConfig
from screen_palette.core_types import BitmapError
from screen_palette.image_io import Bitmap
from screen_palette.sampler import (
    corner_pass,
    grid_bucket_codes,
    grid_pass,
    sample_bitmap,
    sky_pass,
)

from conftest import paint, paint_pixels

SINGLE_CELL = PaletteConfig(grid_cols=1, grid_rows=1)


# Bitmap contract


def test_bitmap_rejects_zero_area():
    with pytest.raises(BitmapError):
        Bitmap(np.zeros((0, 10, 4), dtype=np.uint8))


def test_bitmap_rejects_wrong_dtype():
    with pytest.raises(BitmapError):
        Bitmap(np.zeros((4, 4, 4), dtype=np.float32))


def test_bitmap_adds_opaque_alpha_to_rgb():
    bitmap = Bitmap(np.full((2, 3, 3), 7, dtype=np.uint8))
    assert (bitmap.width, bitmap.height) == (3, 2)
    assert bitmap.pixels.shape == (2, 3, 4)
    assert (bitmap.pixels[..., 3] == 255).all()


def test_region_outside_bitmap_reads_transparent():
    bitmap = paint(4, 4, (255, 0, 0))
    pixels = bitmap.region_pixels(2, 2, 4, 4)
    assert pixels.shape == (16, 4)
    assert int((pixels[:, 3] == 255).sum()) == 4
    assert pixels[0].tolist() == [255, 0, 0, 255]
    assert pixels[2].tolist() == [0, 0, 0, 0]


def test_region_rejects_negative_size():
    with pytest.raises(BitmapError):
        paint(4, 4, (0, 0, 0)).region_pixels(0, 0, -1, 2)


def test_grid_too_coarse_for_bitmap():
    with pytest.raises(BitmapError):
        sample_bitmap(paint(5, 5, (200, 50, 50)))


# Grid pass


def test_grid_bucket_codes():
    hue = np.array([0, 29.9, 30, 59, 60, 100, 150, 199, 200, 259, 260, 329, 330, 359, 120])
    sat = np.full(hue.shape, 0.5)
    sat[-1] = 0.05
    assert grid_bucket_codes(hue, sat).tolist() == [0, 0, 1, 1, 2, 3, 4, 4, 5, 5, 6, 6, 0, 0, 7]


def test_flat_image_yields_one_colour():
    samples = sample_bitmap(paint(100, 80, (200, 50, 50)))
    # 80 grid cells, 4 corners, 8 sky columns x3
    assert len(samples) == 80 + 4 + 24
    assert set(samples) == {(200, 50, 50)}


def test_letterbox_cells_are_skipped():
    bitmap = paint(
        100,
        80,
        (0, 0, 0),
        [(0, 20, 100, 40, (0, 120, 200))],
    )
    samples = grid_pass(bitmap, PaletteConfig())
    assert len(samples) == 40
    assert set(samples) == {(0, 120, 200)}


def test_cell_emits_one_colour_per_bucket():
    bitmap = paint(
        100,
        80,
        (128, 128, 128),
        [(0, 0, 5, 10, (220, 30, 30)), (5, 0, 5, 10, (30, 30, 220))],
    )
    assert grid_pass(bitmap, PaletteConfig()) == [(220, 30, 30), (30, 30, 220)]


def test_most_saturated_pixel_wins_in_bucket():
    bitmap = paint(10, 10, (200, 120, 120), [(3, 3, 1, 1, (250, 20, 20))])
    assert grid_pass(bitmap, SINGLE_CELL) == [(250, 20, 20)]


def test_blown_out_pixels_are_ignored():
    assert grid_pass(paint(100, 80, (255, 250, 250)), PaletteConfig()) == []


def test_dark_ratio_cutoff_is_exclusive():
    at_cutoff = paint(10, 10, (0, 0, 200), [(0, 0, 10, 7, (0, 0, 0))])
    over_cutoff = paint(10, 10, (0, 0, 200), [(0, 0, 10, 8, (0, 0, 0))])
    assert grid_pass(at_cutoff, SINGLE_CELL) == [(0, 0, 200)]
    assert grid_pass(over_cutoff, SINGLE_CELL) == []


def test_transparent_pixels_are_not_sampled():
    arr = paint_pixels(10, 10, (0, 0, 200))
    arr[..., 3] = 0
    bitmap = Bitmap(arr)
    assert grid_pass(bitmap, SINGLE_CELL) == []
    assert corner_pass(bitmap) == []


# Corner pass


def test_corners_average_their_squares():
    bitmap = paint(
        100,
        100,
        (0, 0, 255),
        [(0, 0, 5, 10, (10, 0, 0)), (5, 0, 5, 10, (11, 0, 0))],
    )
    # 10.5 rounds half up
    assert corner_pass(bitmap) == [(11, 0, 0), (0, 0, 255), (0, 0, 255), (0, 0, 255)]


# Sky-band pass


def test_sky_pass_weights_saturated_pixel():
    bitmap = paint(80, 100, (128, 128, 128), [(5, 20, 1, 1, (255, 128, 0))])
    assert sky_pass(bitmap, PaletteConfig()) == [(255, 128, 0)] * 3


def test_sky_pass_ignores_pixels_outside_band():
    bitmap = paint(80, 100, (128, 128, 128), [(5, 50, 1, 1, (255, 128, 0))])
    assert sky_pass(bitmap, PaletteConfig()) == []


def test_sky_pass_brightness_window():
    too_dark = paint(80, 100, (128, 128, 128), [(5, 20, 1, 1, (60, 0, 0))])
    too_bright = paint(80, 100, (128, 128, 128), [(5, 20, 1, 1, (255, 250, 250))])
    assert sky_pass(too_dark, PaletteConfig()) == []
    assert sky_pass(too_bright, PaletteConfig()) == []
