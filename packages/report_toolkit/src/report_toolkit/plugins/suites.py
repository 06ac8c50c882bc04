"""Suites CSV export."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from report_toolkit.aggregation.csv_export import CsvExportAggregator, CsvSchema
from report_toolkit.plugins.results import (
    duration_ms,
    format_millis,
    iter_results,
    label_value,
    millis,
    status_of,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from report_toolkit.core.launch import LaunchResults

SUITES_CSV = "suites.csv"


@dataclass(frozen=True)
class SuiteRow:
    """One exported test result."""

    status: str
    start_time: str
    stop_time: str
    duration: int | None
    parent_suite: str
    suite: str
    sub_suite: str
    test_class: str
    test_method: str
    name: str
    description: str


SUITES_SCHEMA = CsvSchema.of(
    (0, "Status", "status"),
    (1, "Start Time", "start_time"),
    (2, "Stop Time", "stop_time"),
    (3, "Duration in ms", "duration"),
    (4, "Parent Suite", "parent_suite"),
    (5, "Suite", "suite"),
    (6, "Sub Suite", "sub_suite"),
    (7, "Test Class", "test_class"),
    (8, "Test Method", "test_method"),
    (9, "Name", "name"),
    (10, "Description", "description"),
)


class SuitesCsvExportAggregator(CsvExportAggregator[SuiteRow]):
    """Export every result with its suite labels to ``data/suites.csv``."""

    def __init__(self) -> None:
        super().__init__(SUITES_CSV, SUITES_SCHEMA)

    def get_data(self, launches_results: Sequence[LaunchResults]) -> list[SuiteRow]:
        return [
            SuiteRow(
                status=status_of(result).upper(),
                start_time=format_millis(millis(result, "start")),
                stop_time=format_millis(millis(result, "stop")),
                duration=duration_ms(result),
                parent_suite=label_value(result, "parentSuite"),
                suite=label_value(result, "suite"),
                sub_suite=label_value(result, "subSuite"),
                test_class=label_value(result, "testClass"),
                test_method=label_value(result, "testMethod"),
                name=str(result.get("name") or ""),
                description=str(result.get("description") or ""),
            )
            for result in iter_results(launches_results)
        ]
