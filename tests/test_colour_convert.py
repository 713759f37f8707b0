import numpy as np
import pytest

from screen_palette.colour_convert import (
    colour_distance,
    colour_family,
    contrast_ratio,
    format_colour,
    hsl_arrays,
    nearest_named_colour,
    relative_luminance,
    rgb_to_hsl,
    rgb_to_hsl_uncached,
    wcag_level,
)
from screen_palette.core_types import HSL, hex_to_rgb, rgb_to_hex
from screen_palette.palette_data import build_named_colours


@pytest.mark.parametrize(
    "rgb, expected",
    [
        ((255, 255, 255), "#FFFFFF"),
        ((0, 0, 0), "#000000"),
        ((255, 0, 0), "#FF0000"),
        ((10, 15, 5), "#0A0F05"),
    ],
)
def test_hex_is_uppercase_and_padded(rgb, expected):
    assert rgb_to_hex(rgb) == expected
    assert format_colour(rgb, "hex") == expected


def test_hex_parsing_accepts_short_form():
    assert hex_to_rgb("#fff") == (255, 255, 255)
    assert hex_to_rgb("36454F") == (54, 69, 79)
    with pytest.raises(ValueError):
        hex_to_rgb("#12345")


def test_format_colour_variants():
    rgb = (255, 200, 100)
    assert format_colour(rgb, "hex") == "#FFC864"
    assert format_colour(rgb, "rgb") == "rgb(255, 200, 100)"
    assert format_colour(rgb, "hsl") == "hsl(39, 100%, 70%)"


def test_achromatic_hsl_has_zero_hue_and_saturation():
    hsl = rgb_to_hsl(128, 128, 128)
    assert hsl.h == 0.0
    assert hsl.s == 0.0
    assert hsl.l == pytest.approx(128 / 255)


@pytest.mark.parametrize(
    "rgb, hue",
    [((255, 0, 0), 0.0), ((0, 255, 0), 120.0), ((0, 0, 255), 240.0), ((255, 0, 255), 300.0)],
)
def test_primary_hues(rgb, hue):
    hsl = rgb_to_hsl(*rgb)
    assert hsl.h == pytest.approx(hue)
    assert hsl.s == pytest.approx(1.0)
    assert hsl.l == pytest.approx(0.5)


def test_cache_does_not_change_results():
    samples = [(12, 200, 99), (250, 128, 114), (54, 69, 79), (1, 2, 3)]
    cached = [rgb_to_hsl(*c) for c in samples]
    rgb_to_hsl.cache_clear()
    assert cached == [rgb_to_hsl_uncached(*c) for c in samples]
    assert [rgb_to_hsl(*c) for c in samples] == cached


def test_vectorised_hsl_matches_scalar():
    samples = np.array(
        [(12, 200, 99), (250, 128, 114), (54, 69, 79), (128, 128, 128), (255, 168, 169), (0, 0, 128)],
        dtype=np.uint8,
    )
    hue, sat, light = hsl_arrays(samples)
    for i, (r, g, b) in enumerate(samples.tolist()):
        ref = rgb_to_hsl_uncached(r, g, b)
        assert hue[i] == pytest.approx(ref.h)
        assert sat[i] == pytest.approx(ref.s)
        assert light[i] == pytest.approx(ref.l)


def test_colour_distance():
    assert colour_distance([100, 100, 100], [100, 100, 100]) == 0
    assert colour_distance([0, 0, 0], [255, 255, 255]) > 400
    # green carries the heaviest weight
    assert colour_distance((0, 10, 0), (0, 0, 0)) > colour_distance((0, 0, 10), (0, 0, 0))
    assert colour_distance((0, 0, 10), (0, 0, 0)) > colour_distance((10, 0, 0), (0, 0, 0))


@pytest.mark.parametrize(
    "hsl, family",
    [
        (HSL(0.0, 1.0, 0.5), "red"),
        (HSL(350.0, 1.0, 0.5), "red"),
        (HSL(30.0, 1.0, 0.5), "orange"),
        (HSL(60.0, 1.0, 0.5), "yellow"),
        (HSL(120.0, 1.0, 0.5), "green"),
        (HSL(180.0, 1.0, 0.5), "teal"),
        (HSL(240.0, 1.0, 0.5), "blue"),
        (HSL(275.0, 1.0, 0.5), "purple"),
        (HSL(300.0, 1.0, 0.5), "magenta"),
        (HSL(120.0, 0.05, 0.5), "neutral"),
    ],
)
def test_colour_family(hsl, family):
    assert colour_family(hsl) == family


def test_neutral_threshold_is_configurable():
    hsl = HSL(120.0, 0.06, 0.5)
    assert colour_family(hsl, 0.05) == "green"
    assert colour_family(hsl, 0.08) == "neutral"


def test_nearest_named_colour_within_threshold():
    assert nearest_named_colour((0, 0, 128)) == "Navy"
    assert nearest_named_colour((5, 5, 130)) == "Navy"


def test_nearest_named_colour_first_entry_wins_ties():
    # Cyan and Aqua share an RGB value; Cyan is listed first
    assert nearest_named_colour((0, 255, 255)) == "Cyan"
    entries = build_named_colours([("#0a0a0a", "First"), ("#0a0a0a", "Second")])
    assert nearest_named_colour((10, 10, 10), entries=entries) == "First"


def test_nearest_named_colour_none_beyond_threshold():
    entries = build_named_colours([("#000000", "Black")])
    assert nearest_named_colour((100, 100, 100), entries=entries) is None
    assert nearest_named_colour((10, 0, 0), threshold=14.2, entries=entries) == "Black"
    assert nearest_named_colour((10, 0, 0), threshold=14.1, entries=entries) is None


def test_contrast_and_luminance():
    assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)
    assert relative_luminance((0, 0, 0)) == 0.0
    assert contrast_ratio([255, 255, 255], [0, 0, 0]) == pytest.approx(21.0)
    assert contrast_ratio([0, 0, 0], [255, 255, 255]) == pytest.approx(21.0)
    assert contrast_ratio((120, 40, 200), (120, 40, 200)) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "ratio, level, passes",
    [(21.0, "AAA", True), (7.0, "AAA", True), (4.5, "AA", True), (3.0, "AA-L", True), (2.99, "Fail", False)],
)
def test_wcag_levels(ratio, level, passes):
    rating = wcag_level(ratio)
    assert rating.level == level
    assert rating.passes is passes
