"""Report storage backed by a report directory."""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from pathlib import Path

from report_toolkit.errors import PathCollisionError, ReportIOError
from report_toolkit.storage.base import BaseReportStorage, normalize_path

logger = logging.getLogger(__name__)


class FileSystemReportStorage(BaseReportStorage):
    """Write each artifact atomically below ``root``.

    Payloads go to a temporary file in the target directory and are moved into
    place with ``os.replace``, so readers never observe a partial file.
    """

    def __init__(self, root: str | Path, *, strict: bool = False) -> None:
        self._root = Path(root)
        self._strict = strict
        self._written: set[str] = set()
        self._lock = threading.Lock()

    @property
    def root(self) -> Path:
        return self._root

    def add_data_binary(self, path: str, payload: bytes) -> None:
        """Write ``payload`` to ``root / path``."""
        key = normalize_path(path)
        with self._lock:
            if key in self._written:
                if self._strict:
                    raise PathCollisionError(key)
                logger.debug("Overwriting report file %s", key)
            self._written.add(key)
        target = self._root / key
        try:
            _write_bytes_atomic(target, bytes(payload))
        except OSError as exc:
            with self._lock:
                self._written.discard(key)
            message = f"Could not write report file {target}"
            raise ReportIOError(message) from exc

    def paths(self) -> list[str]:
        """Return paths written through this storage."""
        with self._lock:
            return sorted(self._written)


def _write_bytes_atomic(path: Path, payload: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f"{path.name}.", suffix=".tmp", dir=str(path.parent))
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
