"""Launch results passed through to aggregators."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class LaunchResults:
    """One batch of test-run results.

    Result records are plain mappings; the pipeline never inspects them.
    Aggregators decide which keys they read.
    """

    results: tuple[Mapping[str, Any], ...] = ()
    attachments: Mapping[str, Path] = field(default_factory=dict)
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))

    def get_extra(self, name: str, default: Any = None) -> Any:
        """Return an extra block stored by a reader, or ``default``."""
        return self.extra.get(name, default)


def merge_launches(launches: Iterable[LaunchResults]) -> LaunchResults:
    """Combine the output of several readers for one results directory.

    Results are concatenated in reader order. Attachments and extra blocks are
    merged, with later readers overriding earlier ones on the same key.
    """
    results: list[Mapping[str, Any]] = []
    attachments: dict[str, Path] = {}
    extra: dict[str, Any] = {}
    for launch in launches:
        results.extend(launch.results)
        attachments.update(launch.attachments)
        extra.update(launch.extra)
    return LaunchResults(results=tuple(results), attachments=attachments, extra=extra)
