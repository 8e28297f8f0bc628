from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from bingo_sim.cli import app
from bingo_sim.version import __version__


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_version(runner: CliRunner):
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_solve_prints_both_scores(runner: CliRunner, example_file: Path):
    result = runner.invoke(app, ["solve", str(example_file)])
    assert result.exit_code == 0
    assert f"Path: {example_file}" in result.stdout
    assert "Task1: 4512" in result.stdout
    assert "Task2: 1924" in result.stdout


def test_solve_writes_report(runner: CliRunner, example_file: Path, tmp_path: Path):
    out = tmp_path / "out" / "report.json"
    result = runner.invoke(app, ["solve", str(example_file), "--out-report", str(out)])
    assert result.exit_code == 0
    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["first_winner"]["score"] == 4512
    assert report["last_winner"]["score"] == 1924
    assert report["checks"]["ok"] is True
    assert report["boards_hash"].startswith("sha256:")
    assert len(report["boards"]) == 3


def test_solve_refuses_to_overwrite_report(runner: CliRunner, example_file: Path, tmp_path: Path):
    out = tmp_path / "report.json"
    out.write_text("{}", encoding="utf-8")
    result = runner.invoke(app, ["solve", str(example_file), "--out-report", str(out)])
    assert result.exit_code == 2
    assert out.read_text(encoding="utf-8") == "{}"

    result = runner.invoke(app, ["solve", str(example_file), "--out-report", str(out), "--force"])
    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8"))["first_winner"]["score"] == 4512


def test_solve_missing_file(runner: CliRunner, tmp_path: Path):
    result = runner.invoke(app, ["solve", str(tmp_path / "missing.txt")])
    assert result.exit_code == 2


def test_solve_malformed_input(runner: CliRunner, tmp_path: Path):
    path = tmp_path / "bad.txt"
    path.write_text("1,2,oops\n\n1 2\n3 4\n", encoding="utf-8")
    result = runner.invoke(app, ["solve", str(path)])
    assert result.exit_code == 2


def test_solve_no_winner(runner: CliRunner, tmp_path: Path):
    path = tmp_path / "diag.txt"
    path.write_text("1,4\n\n1 2\n3 4\n", encoding="utf-8")
    result = runner.invoke(app, ["solve", str(path)])
    assert result.exit_code == 1
    assert "Task1" not in result.stdout


def test_strict_rejects_duplicate_draws(runner: CliRunner, tmp_path: Path):
    path = tmp_path / "dupes.txt"
    path.write_text("1,1,2\n\n1 2\n3 4\n", encoding="utf-8")
    lenient = runner.invoke(app, ["solve", str(path)])
    assert lenient.exit_code == 0
    assert "Task1: 14" in lenient.stdout
    strict = runner.invoke(app, ["solve", str(path), "--strict"])
    assert strict.exit_code == 1


def test_check_reports_preconditions(runner: CliRunner, example_file: Path, tmp_path: Path):
    ok = runner.invoke(app, ["check", str(example_file)])
    assert ok.exit_code == 0
    assert "ok: True" in ok.stdout

    path = tmp_path / "shapes.txt"
    path.write_text("1,2,3\n\n1 2\n3 4\n\n1 2 3\n", encoding="utf-8")
    bad = runner.invoke(app, ["check", str(path)])
    assert bad.exit_code == 1
    assert "ok_consistent_shapes: False" in bad.stdout


def test_input_that_is_not_utf8_is_bad_input(runner: CliRunner, tmp_path: Path):
    path = tmp_path / "latin.txt"
    path.write_bytes(b"1,2\n\n1 \xff\n3 4\n")
    solved = runner.invoke(app, ["solve", str(path)])
    assert solved.exit_code == 2
    assert not isinstance(solved.exception, UnicodeDecodeError)
    checked = runner.invoke(app, ["check", str(path)])
    assert checked.exit_code == 2
    assert not isinstance(checked.exception, UnicodeDecodeError)


def test_missing_config_is_bad_input(runner: CliRunner, example_file: Path, tmp_path: Path):
    result = runner.invoke(app, ["solve", str(example_file), "--config", str(tmp_path / "absent.yaml")])
    assert result.exit_code == 2
    assert "Task1" not in result.stdout


def test_malformed_config_is_bad_input(runner: CliRunner, example_file: Path, tmp_path: Path):
    cfg = tmp_path / "conf.yaml"
    cfg.write_text("strict: [unclosed\n", encoding="utf-8")
    result = runner.invoke(app, ["solve", str(example_file), "--config", str(cfg)])
    assert result.exit_code == 2
