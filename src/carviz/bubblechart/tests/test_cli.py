"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/tests/test_cli.py

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import json

import yaml
from typer.testing import CliRunner

from carviz.bubblechart.src.cli import app

runner = CliRunner()


def test_cli_help_lists_commands():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for name in ("render", "inspect", "job", "style"):
        assert name in result.output


def test_cli_render_writes_requested_file(cars_csv, tmp_path):
    out = tmp_path / "charts" / "cars.svg"
    result = runner.invoke(app, ["render", str(cars_csv), "--out", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert "<svg" in out.read_text()


def test_cli_render_default_path_uses_fmt(cars_csv):
    result = runner.invoke(app, ["render", str(cars_csv), "--fmt", "png"])
    assert result.exit_code == 0, result.output
    assert cars_csv.with_name("cars_bubble.png").exists()


def test_cli_render_with_preset(cars_csv, tmp_path):
    out = tmp_path / "cb.pdf"
    result = runner.invoke(app, ["render", str(cars_csv), "-o", str(out), "--preset", "colorblind"])
    assert result.exit_code == 0, result.output
    assert out.read_bytes()[:4] == b"%PDF"


def test_cli_render_missing_columns_exits_2(tmp_path, write_csv, car_rows):
    path = write_csv(tmp_path / "bad.csv", car_rows, header=["Name", "Type"])
    result = runner.invoke(app, ["render", str(path), "--out", str(tmp_path / "x.svg")])
    assert result.exit_code == 2
    assert "missing required columns" in result.output
    assert not (tmp_path / "x.svg").exists()


def test_cli_render_unknown_preset_exits_2(cars_csv, tmp_path):
    result = runner.invoke(app, ["render", str(cars_csv), "--out", str(tmp_path / "x.svg"), "--preset", "nope"])
    assert result.exit_code == 2


def test_cli_inspect_prints_counts_and_types(cars_csv):
    result = runner.invoke(app, ["inspect", str(cars_csv)])
    assert result.exit_code == 0, result.output
    assert "dropped" in result.output
    assert "Sports Car" in result.output
    assert "#1f77b4" in result.output


def test_cli_job_run_and_validate(tmp_path, write_csv, write_yaml, car_rows):
    write_csv(tmp_path / "cars.csv", car_rows)
    job = write_yaml(
        tmp_path / "job.yaml",
        {"job": {"name": "cli", "input": {"path": "cars.csv"}, "output": {"path": "out/cli.svg"}}},
    )
    result = runner.invoke(app, ["job", "validate", str(job)])
    assert result.exit_code == 0, result.output
    assert "OK" in result.output

    result = runner.invoke(app, ["job", "run", str(job)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "cli.svg").exists()


def test_cli_job_validate_rejects_bad_job(tmp_path, write_yaml):
    job = write_yaml(tmp_path / "job.yaml", {"job": {"name": "bad", "input": {"path": "x.csv"}}})
    result = runner.invoke(app, ["job", "validate", str(job)])
    assert result.exit_code == 2


def test_cli_style_list():
    result = runner.invoke(app, ["style", "list"])
    assert result.exit_code == 0
    names = result.output.split()
    assert "default" in names
    assert "colorblind" in names


def test_cli_style_show_json():
    result = runner.invoke(app, ["style", "show", "--preset", "colorblind", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["fill_opacity"] == 0.8
    assert payload["palette"][0] == "#E69F00"


def test_cli_style_show_yaml_default():
    result = runner.invoke(app, ["style", "show"])
    assert result.exit_code == 0, result.output
    payload = yaml.safe_load(result.output)
    assert payload["canvas_width"] == 900


def test_cli_style_diff_lists_changed_keys():
    result = runner.invoke(app, ["style", "diff", "colorblind"])
    assert result.exit_code == 0, result.output
    changed = yaml.safe_load(result.output)
    assert set(changed) == {"palette", "fill_opacity", "stroke_color"}
