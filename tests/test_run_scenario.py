from pathlib import Path
import os
import runpy
import subprocess
import sys

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "run_scenario.py"


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", [str(SCRIPT), *args])
    runpy.run_path(str(SCRIPT), run_name="__main__")


def test_default_runs_canonical(monkeypatch, capsys):
    _run(monkeypatch)
    assert capsys.readouterr().out == "The dog says: bow wow\n"


def test_runs_yaml_scenario(monkeypatch, capsys, tmp_path):
    f = tmp_path / "pigs.yaml"
    f.write_text("steps: [pig, pig]\n", encoding="utf-8")
    _run(monkeypatch, "--scenario", str(f))
    assert capsys.readouterr().out == "The pig says: wee wee\n" * 2


def test_missing_scenario_exits_2(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "-s", str(tmp_path / "missing.yaml"))
    assert exc.value.code == 2
    assert "scenario file not found" in capsys.readouterr().out


def test_unknown_variant_exits_2(monkeypatch, capsys, tmp_path):
    f = tmp_path / "zoo.yaml"
    f.write_text("steps: [lion]\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "-s", str(f))
    assert exc.value.code == 2
    out = capsys.readouterr().out
    assert "Error loading scenario" in out
    assert "unknown variant 'lion'" in out


def test_malformed_yaml_exits_2(monkeypatch, capsys, tmp_path):
    f = tmp_path / "broken.yaml"
    f.write_text("steps: [dog\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "-s", str(f))
    assert exc.value.code == 2
    assert "Error loading scenario" in capsys.readouterr().out


def test_directory_scenario_exits_2(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "-s", str(tmp_path))
    assert exc.value.code == 2
    assert "scenario file not found" in capsys.readouterr().out


def test_verbose_logs_to_stderr():
    repo_root = SCRIPT.parents[1]
    env = dict(os.environ, PYTHONPATH=str(repo_root))
    result = subprocess.run(
        [sys.executable, str(SCRIPT), "-v"],
        capture_output=True, text=True, cwd=str(repo_root), env=env,
    )
    assert result.returncode == 0
    assert result.stdout == "The dog says: bow wow\n"
    assert "constructed Dog" in result.stderr
