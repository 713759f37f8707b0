import json

import pytest
from PIL import Image

from extract_palette import main, parse_cli_args
from screen_palette.image_io import Bitmap

from conftest import STRIPE_COLOURS, paint


@pytest.fixture
def stripes_png(tmp_path, stripes):
    path = tmp_path / "shot.png"
    stripes.to_image().save(path)
    return path


def test_single_image_report(stripes_png, settings_home, capsys):
    main([str(stripes_png), "--count", "3", "--contrast"])
    out = capsys.readouterr().out
    assert "=== shot.png ===" in out
    assert "Palette (3 of 3):" in out
    assert "#E62828" in out
    assert "Share: https://coolors.co/" in out
    assert "white" in out and "black" in out
    assert (settings_home / "history.json").exists()


def test_export_css_to_outdir(stripes_png, tmp_path, settings_home, capsys):
    outdir = tmp_path / "out"
    main([str(stripes_png), "--count", "2", "--export", "css", "--outdir", str(outdir), "--no-history"])
    css = (outdir / "shot_palette.css").read_text(encoding="utf-8")
    assert "--palette-1: #E62828;" in css
    assert "--palette-2: #F0961E;" in css
    assert not (settings_home / "history.json").exists()


def test_export_png_next_to_input(stripes_png, settings_home, capsys):
    main([str(stripes_png), "--count", "4", "--export", "png", "--no-history"])
    with Image.open(stripes_png.with_name("shot_palette.png")) as im:
        assert im.width == 200
        assert im.height > 160


def test_folder_mode_skips_outputs(tmp_path, settings_home, capsys):
    folder = tmp_path / "shots"
    folder.mkdir()
    paint(100, 80, STRIPE_COLOURS[0]).to_image().save(folder / "a.png")
    paint(100, 80, STRIPE_COLOURS[5]).to_image().save(folder / "b.png")
    paint(100, 80, STRIPE_COLOURS[2]).to_image().save(folder / "b_palette.png")
    (folder / "notes.txt").write_text("not an image", encoding="utf-8")
    main([str(folder), "--format", "rgb"])
    out = capsys.readouterr().out
    assert "=== a.png ===" in out
    assert "=== b.png ===" in out
    assert "b_palette.png" not in out
    assert "rgb(230, 40, 40)" in out
    history = json.loads((settings_home / "history.json").read_text(encoding="utf-8"))
    assert len(history) == 2


def test_saved_settings_are_used(stripes_png, settings_home, capsys):
    main([str(stripes_png), "--count", "2", "--format", "hsl", "--save-settings", "--no-history"])
    capsys.readouterr()
    main([str(stripes_png), "--no-history"])
    out = capsys.readouterr().out
    assert "Palette (2 of 2):" in out
    assert "hsl(" in out


def test_config_override(stripes_png, settings_home, capsys):
    main([str(stripes_png), "--set", "gridCols=5", "--set", "gridRows=4", "--no-history", "--debug"])
    out = capsys.readouterr().out
    assert "grid_cols: 5" in out


def test_missing_input_exits_2(tmp_path, settings_home, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.png")])
    assert exc.value.code == 2
    assert "error: not found" in capsys.readouterr().err


def test_unreadable_image_exits_2(tmp_path, settings_home, capsys):
    bad = tmp_path / "bad.png"
    bad.write_text("definitely not a png", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main([str(bad)])
    assert exc.value.code == 2
    assert "error: cannot read image" in capsys.readouterr().err


def test_bad_override_exits_2(stripes_png, settings_home, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(stripes_png), "--set", "gridColumns=3"])
    assert exc.value.code == 2
    assert "unknown config key" in capsys.readouterr().err


def test_source_or_grab_required():
    with pytest.raises(SystemExit):
        parse_cli_args([])
    assert parse_cli_args(["--grab"]).grab is True


def test_folder_mode_reports_small_image_and_continues(tmp_path, settings_home, capsys):
    folder = tmp_path / "shots"
    folder.mkdir()
    paint(5, 5, STRIPE_COLOURS[0]).to_image().save(folder / "a_small.png")
    paint(100, 80, STRIPE_COLOURS[5]).to_image().save(folder / "b_big.png")
    main([str(folder), "--no-history"])
    captured = capsys.readouterr()
    assert "a_small.png" in captured.err
    assert "too small" in captured.err
    assert "=== b_big.png ===" in captured.out
    assert "Palette (" in captured.out


def test_small_single_image_exits_2(tmp_path, settings_home, capsys):
    small = tmp_path / "tiny.png"
    paint(5, 5, STRIPE_COLOURS[0]).to_image().save(small)
    with pytest.raises(SystemExit) as exc:
        main([str(small)])
    assert exc.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_small_screen_grab_exits_2(monkeypatch, settings_home, capsys):
    tiny = paint(5, 5, STRIPE_COLOURS[0])
    monkeypatch.setattr(Bitmap, "grab", classmethod(lambda cls: tiny))
    with pytest.raises(SystemExit) as exc:
        main(["--grab", "--no-history"])
    assert exc.value.code == 2
    assert "too small" in capsys.readouterr().err


def test_target_colour_count_override_sets_count(stripes_png, settings_home, capsys):
    main([str(stripes_png), "--set", "targetColorCount=3", "--no-history"])
    assert "Palette (3 of 3):" in capsys.readouterr().out


def test_count_flag_beats_target_override(stripes_png, settings_home, capsys):
    main([str(stripes_png), "--count", "2", "--set", "targetColorCount=3", "--no-history"])
    assert "Palette (2 of 2):" in capsys.readouterr().out
