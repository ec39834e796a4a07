import json

import pytest

from skyline_gen import cli, core
from skyline_gen.buildings import catalog


def test_default_run_prints_grid(capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    lines = out.split("\n")
    assert out.endswith("\n")
    assert len(lines) == 101 and lines[-1] == ""
    assert all(len(line) == 200 for line in lines[:-1])
    assert out == core.render().to_text()


def test_seed_flag_is_reproducible(capsys):
    cli.main(["--seed", "99"])
    first = capsys.readouterr().out
    cli.main(["--seed", "99"])
    assert capsys.readouterr().out == first


def test_list_presets(capsys):
    assert cli.main(["--list-presets"]) == 0
    assert capsys.readouterr().out.split() == list(catalog.PRESET_NAMES)


def test_output_and_preview_files(tmp_path, capsys):
    text_path = tmp_path / "sky.txt"
    png_path = tmp_path / "sky.png"
    assert cli.main(["--preset", "needle", "--output", str(text_path), "--preview", str(png_path)]) == 0
    assert capsys.readouterr().out == ""
    assert "^" in text_path.read_text(encoding="utf-8")
    assert png_path.exists()


def test_config_flag(tmp_path, capsys):
    conf_path = tmp_path / "conf.json"
    conf_path.write_text(json.dumps({"canvas": {"height": 30, "width": 50}, "fixed": []}), encoding="utf-8")
    cli.main(["--config", str(conf_path)])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 30
    assert all(len(line) == 50 for line in lines)


def test_unknown_preset_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--preset", "castle"])
    assert exc.value.code == 2
    assert "Unknown building preset" in capsys.readouterr().err


def test_missing_config_exits_with_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--config", str(tmp_path / "nope.json")])
    assert exc.value.code == 2
