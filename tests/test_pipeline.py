from screen_palette.pipeline import (
    BLACK,
    WHITE,
    contrast_report,
    extract_palette,
    reselect,
)

from conftest import STRIPE_COLOURS, paint


def test_dark_dashboard_keeps_placed_colours(dashboard):
    result = extract_palette(dashboard, count=5)
    assert sorted(result.names) == ["Charcoal", "Coral", "Navy"]
    assert set(result.colours) == {(54, 69, 79), (0, 0, 128), (255, 127, 80)}


def test_vibrant_page():
    bitmap = paint(
        1920,
        1080,
        (50, 205, 50),
        [
            (0, 0, 1920, 200, (0, 255, 255)),
            (1000, 400, 400, 300, (255, 20, 147)),
        ],
    )
    result = extract_palette(bitmap, count=5)
    assert sorted(result.names) == ["Cyan", "Deep Pink", "Lime Green"]


def test_selection_walks_families_in_spectrum_order(stripes):
    result = extract_palette(stripes, count=5)
    assert len(result.candidates) == 8
    assert result.colours == STRIPE_COLOURS[:5]


def test_reselect_reuses_candidates(stripes):
    result = extract_palette(stripes, count=5)
    smaller = reselect(result, 2)
    larger = reselect(result, 8)
    assert smaller.candidates == result.candidates
    assert smaller.colours == STRIPE_COLOURS[:2]
    assert sorted(larger.colours) == sorted(STRIPE_COLOURS)


def test_flat_image_gives_single_colour():
    result = extract_palette(paint(320, 240, (70, 130, 180)), count=5)
    assert result.colours == [(70, 130, 180)]
    assert result.names == ["Steel Blue"]


def test_black_screen_keeps_black_rather_than_nothing():
    result = extract_palette(paint(320, 240, (0, 0, 0)), count=5)
    assert result.colours == [(0, 0, 0)]
    assert result.names == ["Black"]


def test_extraction_is_deterministic(dashboard):
    assert extract_palette(dashboard, count=5) == extract_palette(dashboard, count=5)


def test_default_count_comes_from_config(stripes):
    assert len(extract_palette(stripes).colours) == 8


def test_contrast_report():
    white, black = contrast_report([WHITE, BLACK])
    assert white.on_white == 1.0
    assert round(white.on_black, 6) == 21.0
    assert white.black_rating.level == "AAA"
    assert white.white_rating.level == "Fail"
    assert white.best_text == BLACK
    assert black.best_text == WHITE
