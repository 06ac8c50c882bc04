"""Report storage contract and path conventions."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

from report_toolkit.errors import StoragePathError

DATA_DIR = "data"
WIDGETS_DIR = "widgets"


def data_path(name: str) -> str:
    """Return the storage path for a generated data file."""
    return f"{DATA_DIR}/{name}"


def widgets_path(name: str) -> str:
    """Return the storage path for a widget data file."""
    return f"{WIDGETS_DIR}/{name}"


def normalize_path(path: str) -> str:
    """Validate a storage path and return it with forward slashes."""
    cleaned = str(path).replace("\\", "/").strip()
    if not cleaned.strip("/"):
        message = "Report storage path must be non-empty"
        raise StoragePathError(message)
    parts = [part for part in cleaned.split("/") if part not in ("", ".")]
    if cleaned.startswith("/") or ".." in parts:
        message = f"Report storage path escapes the report root: {path}"
        raise StoragePathError(message)
    return "/".join(parts)


@runtime_checkable
class ReportStorage(Protocol):
    """Write-once, path-addressed sink for generated artifacts."""

    def add_data_binary(self, path: str, payload: bytes) -> None:
        """Store ``payload`` under ``path``."""
        ...

    def add_data_text(self, path: str, text: str) -> None:
        """Store UTF-8 encoded ``text`` under ``path``."""
        ...

    def add_data_json(self, path: str, data: Any) -> None:
        """Store ``data`` serialized as JSON under ``path``."""
        ...


class BaseReportStorage:
    """Text and JSON writers layered over ``add_data_binary``."""

    def add_data_binary(self, path: str, payload: bytes) -> None:
        raise NotImplementedError

    def add_data_text(self, path: str, text: str) -> None:
        """Store UTF-8 encoded text."""
        self.add_data_binary(path, text.encode("utf-8"))

    def add_data_json(self, path: str, data: Any) -> None:
        """Store JSON with stable formatting and a trailing newline."""
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        self.add_data_text(path, text)
