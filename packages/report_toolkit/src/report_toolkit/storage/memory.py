"""In-memory report storage."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING

from report_toolkit.errors import PathCollisionError, StoragePathError
from report_toolkit.storage.base import BaseReportStorage, normalize_path

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class InMemoryReportStorage(BaseReportStorage):
    """Hold generated artifacts in memory for the duration of one run.

    Writes to distinct paths are safe from multiple threads. Writing a path
    twice replaces the earlier payload unless ``strict`` is set, in which case
    :class:`~report_toolkit.errors.PathCollisionError` is raised.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict
        self._entries: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def add_data_binary(self, path: str, payload: bytes) -> None:
        """Store an immutable copy of ``payload`` under ``path``."""
        key = normalize_path(path)
        data = bytes(payload)
        with self._lock:
            if key in self._entries:
                if self._strict:
                    raise PathCollisionError(key)
                logger.debug("Overwriting report entry %s", key)
            self._entries[key] = data

    @property
    def entries(self) -> Mapping[str, bytes]:
        """Return a read-only view of the stored entries."""
        return MappingProxyType(self._entries)

    def get(self, path: str) -> bytes | None:
        return self._entries.get(normalize_path(path))

    def paths(self) -> list[str]:
        """Return stored paths sorted for stable output."""
        with self._lock:
            return sorted(self._entries)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        try:
            return normalize_path(path) in self._entries
        except StoragePathError:
            return False

    def __len__(self) -> int:
        return len(self._entries)
