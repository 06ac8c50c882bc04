"""Summary widget aggregator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from report_toolkit.core.extension import Extension
from report_toolkit.core.version import UNDEFINED_VERSION
from report_toolkit.plugins.report_info import ReportInfoContext
from report_toolkit.plugins.results import STATUSES, iter_results, millis, status_of
from report_toolkit.storage.base import widgets_path

if TYPE_CHECKING:
    from collections.abc import Sequence

    from report_toolkit.core.configuration import Configuration
    from report_toolkit.core.launch import LaunchResults
    from report_toolkit.storage.base import ReportStorage

SUMMARY_FILE = "summary.json"


class SummaryAggregator(Extension):
    """Write ``widgets/summary.json`` with status counts and run timing."""

    def aggregate(
        self,
        configuration: Configuration,
        launches_results: Sequence[LaunchResults],
        storage: ReportStorage,
    ) -> None:
        storage.add_data_json(
            widgets_path(SUMMARY_FILE),
            build_summary(configuration, launches_results),
        )


def build_summary(
    configuration: Configuration, launches_results: Sequence[LaunchResults]
) -> dict[str, Any]:
    """Compute the summary widget payload."""
    statistic = dict.fromkeys(STATUSES, 0)
    starts: list[int] = []
    stops: list[int] = []
    for result in iter_results(launches_results):
        statistic[status_of(result)] += 1
        start = millis(result, "start")
        stop = millis(result, "stop")
        if start is not None:
            starts.append(start)
        if stop is not None:
            stops.append(stop)
    statistic["total"] = sum(statistic.values())

    context = configuration.get_context(ReportInfoContext)
    version = context.get_value().version if context else UNDEFINED_VERSION

    start = min(starts) if starts else None
    stop = max(stops) if stops else None
    duration = stop - start if start is not None and stop is not None else None
    return {
        "reportName": configuration.display_name,
        "version": version,
        "launchCount": len(launches_results),
        "statistic": statistic,
        "time": {"start": start, "stop": stop, "duration": duration},
    }
