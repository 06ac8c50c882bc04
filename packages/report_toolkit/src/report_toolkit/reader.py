"""Read result files from a results directory."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from report_toolkit.core.extension import Extension
from report_toolkit.core.launch import LaunchResults

logger = logging.getLogger(__name__)

RESULT_SUFFIX = "-result.json"
ATTACHMENT_MARKER = "-attachment"
EXECUTOR_FILE = "executor.json"
ENVIRONMENT_FILE = "environment.properties"


class JsonResultsReader(Extension):
    """Load ``*-result.json`` files from a directory into one LaunchResults.

    Attachments (``*-attachment*``) are indexed by file name. ``executor.json``
    and ``environment.properties`` are exposed as the ``executor`` and
    ``environment`` extra blocks.
    """

    def read_results(self, directory: Path) -> LaunchResults:
        """Read every result file found in ``directory``."""
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning("Results directory not found: %s", directory)
            return LaunchResults()

        results: list[dict[str, Any]] = []
        attachments: dict[str, Path] = {}
        extra: dict[str, Any] = {}
        for path in sorted(directory.iterdir()):
            if not path.is_file():
                continue
            name = path.name
            if name.endswith(RESULT_SUFFIX):
                result = _load_json(path)
                if isinstance(result, dict):
                    results.append(result)
            elif ATTACHMENT_MARKER in name:
                attachments[name] = path
            elif name == EXECUTOR_FILE:
                executor = _load_json(path)
                if executor is not None:
                    extra["executor"] = executor
            elif name == ENVIRONMENT_FILE:
                text = _read_text(path)
                if text is not None:
                    extra["environment"] = parse_properties(text)

        logger.debug("Read %d result(s) from %s", len(results), directory)
        return LaunchResults(results=tuple(results), attachments=attachments, extra=extra)


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``key=value`` lines, skipping blanks and ``#``/``!`` comments."""
    values: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(("#", "!")):
            continue
        separator = "=" if "=" in line else ":"
        key, _, value = line.partition(separator)
        values[key.strip()] = value.strip()
    return values


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Skipping unreadable file %s: %s", path, exc)
        return None


def _load_json(path: Path) -> Any:
    text = _read_text(path)
    if text is None:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Skipping invalid JSON file %s: %s", path, exc)
        return None
