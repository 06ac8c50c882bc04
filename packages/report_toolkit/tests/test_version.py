from __future__ import annotations

from typing import TYPE_CHECKING

from report_toolkit.core import version as version_module
from report_toolkit.core.version import UNDEFINED_VERSION, resolve_version

if TYPE_CHECKING:
    from pathlib import Path

    import pytest

MISSING_DISTRIBUTION = "report-toolkit-not-installed"


def _make_resource_package(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, name: str, content: str
) -> str:
    package_dir = tmp_path / name
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text("", encoding="utf-8")
    (package_dir / "version.txt").write_text(content, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return name


def test_undefined_when_resource_and_metadata_are_missing() -> None:
    resolved = resolve_version(
        resource_package="report_toolkit_missing_resources",
        distribution=MISSING_DISTRIBUTION,
    )
    assert resolved == UNDEFINED_VERSION == "Undefined"


def test_resource_version_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    package = _make_resource_package(tmp_path, monkeypatch, "rt_version_ok", " 2.5.0\n")

    assert resolve_version(resource_package=package, distribution=MISSING_DISTRIBUTION) == "2.5.0"


def test_blank_resource_falls_back_to_metadata(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    package = _make_resource_package(tmp_path, monkeypatch, "rt_version_blank", "   \n")
    monkeypatch.setattr(version_module.metadata, "version", lambda _name: "3.1.4")

    assert resolve_version(resource_package=package) == "3.1.4"


def test_placeholder_resource_falls_back_to_metadata(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    package = _make_resource_package(
        tmp_path, monkeypatch, "rt_version_placeholder", "#project.version#"
    )
    monkeypatch.setattr(version_module.metadata, "version", lambda _name: "3.1.4")

    assert resolve_version(resource_package=package) == "3.1.4"


def test_missing_resource_file_falls_back(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    package = _make_resource_package(tmp_path, monkeypatch, "rt_version_other", "1.0")

    resolved = resolve_version(
        resource_package=package,
        resource_name="absent.txt",
        distribution=MISSING_DISTRIBUTION,
    )
    assert resolved == UNDEFINED_VERSION
