"""Behaviors CSV export: status counts per epic, feature, and story."""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from report_toolkit.aggregation.csv_export import CsvExportAggregator, CsvSchema
from report_toolkit.plugins.results import iter_results, label_value, status_of

if TYPE_CHECKING:
    from collections.abc import Sequence

    from report_toolkit.core.launch import LaunchResults

BEHAVIORS_CSV = "behaviors.csv"


@dataclass(frozen=True)
class BehaviorRow:
    epic: str
    feature: str
    story: str
    failed: int = 0
    broken: int = 0
    passed: int = 0
    skipped: int = 0
    unknown: int = 0


BEHAVIORS_SCHEMA = CsvSchema.of(
    (0, "Epic", "epic"),
    (1, "Feature", "feature"),
    (2, "Story", "story"),
    (3, "FAILED", "failed"),
    (4, "BROKEN", "broken"),
    (5, "PASSED", "passed"),
    (6, "SKIPPED", "skipped"),
    (7, "UNKNOWN", "unknown"),
)


class BehaviorsCsvExportAggregator(CsvExportAggregator[BehaviorRow]):
    """Export ``data/behaviors.csv``, one row per epic/feature/story."""

    def __init__(self) -> None:
        super().__init__(BEHAVIORS_CSV, BEHAVIORS_SCHEMA)

    def get_data(self, launches_results: Sequence[LaunchResults]) -> list[BehaviorRow]:
        counts: defaultdict[tuple[str, str, str], Counter[str]] = defaultdict(Counter)
        for result in iter_results(launches_results):
            key = (
                label_value(result, "epic"),
                label_value(result, "feature"),
                label_value(result, "story"),
            )
            counts[key][status_of(result)] += 1
        return [
            BehaviorRow(
                epic=epic,
                feature=feature,
                story=story,
                failed=counter["failed"],
                broken=counter["broken"],
                passed=counter["passed"],
                skipped=counter["skipped"],
                unknown=counter["unknown"],
            )
            for (epic, feature, story), counter in sorted(counts.items())
        ]
