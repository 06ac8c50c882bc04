from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from report_toolkit.cli import main

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def results_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "results"
    directory.mkdir()
    result = {"name": "one", "status": "passed", "labels": [{"name": "suite", "value": "s"}]}
    (directory / "one-result.json").write_text(json.dumps(result), encoding="utf-8")
    return directory


def test_generate_writes_report_data(
    results_dir: Path, tmp_path: Path, fixed_version: str, capsys: pytest.CaptureFixture[str]
) -> None:
    output = tmp_path / "report"

    exit_code = main(["generate", str(results_dir), "-o", str(output), "--name", "Nightly"])

    assert exit_code == 0
    assert (output / "data" / "suites.csv").exists()
    assert (output / "data" / "behaviors.csv").exists()
    summary = json.loads((output / "widgets" / "summary.json").read_text(encoding="utf-8"))
    assert summary["reportName"] == "Nightly"
    assert summary["version"] == fixed_version
    assert summary["statistic"]["passed"] == 1
    assert "data/suites.csv" in capsys.readouterr().out


def test_generate_uses_output_dir_from_environment(
    results_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fixed_version: str
) -> None:
    output = tmp_path / "env-report"
    monkeypatch.setenv("REPORT_TOOLKIT_OUTPUT_DIR", str(output))

    assert main(["generate", str(results_dir), "--workers", "2"]) == 0
    assert (output / "widgets" / "summary.json").exists()


def test_generate_rejects_invalid_workers(results_dir: Path, tmp_path: Path) -> None:
    exit_code = main(["generate", str(results_dir), "-o", str(tmp_path / "out"), "--workers", "0"])

    assert exit_code == 2


def test_generate_reports_invalid_settings(
    results_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("REPORT_TOOLKIT_MAX_WORKERS", "many")

    assert main(["generate", str(results_dir)]) == 2
    assert "REPORT_TOOLKIT_MAX_WORKERS" in capsys.readouterr().out


def test_version_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip()
