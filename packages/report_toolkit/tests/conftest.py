from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clear_toolkit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("REPORT_TOOLKIT_"):
            monkeypatch.delenv(name)


@pytest.fixture
def fixed_version(monkeypatch: pytest.MonkeyPatch) -> str:
    version = "1.2.3"
    monkeypatch.setattr("report_toolkit.core.builder.resolve_version", lambda: version)
    return version
