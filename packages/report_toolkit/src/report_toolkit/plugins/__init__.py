"""Built-in plugin catalog.

``DEFAULT_CATALOG`` is an ordered table of factories. Each factory receives
the resolved toolkit version and returns an extension or a
:class:`~report_toolkit.core.plugin.Plugin`. Pass a reduced catalog to
``ConfigurationBuilder.use_default`` to register a subset.
"""

from __future__ import annotations

from collections.abc import Callable

from report_toolkit.core.plugin import Plugin
from report_toolkit.plugins.behaviors import BehaviorsCsvExportAggregator
from report_toolkit.plugins.report_info import ReportInfo, ReportInfoContext
from report_toolkit.plugins.suites import SuitesCsvExportAggregator
from report_toolkit.plugins.summary import SummaryAggregator
from report_toolkit.reader import JsonResultsReader

CatalogFactory = Callable[[str], object]


def results_reader_plugin(version: str) -> Plugin:  # noqa: ARG001 - catalog signature
    return Plugin.from_extensions("results-reader", JsonResultsReader(), name="Results reader")


def summary_plugin(version: str) -> Plugin:  # noqa: ARG001 - catalog signature
    return Plugin.from_extensions("summary", SummaryAggregator(), name="Summary")


def suites_plugin(version: str) -> Plugin:  # noqa: ARG001 - catalog signature
    return Plugin.from_extensions(
        "suites",
        SuitesCsvExportAggregator(),
        name="Suites",
        description="Exports every result with its suite labels",
    )


def behaviors_plugin(version: str) -> Plugin:  # noqa: ARG001 - catalog signature
    return Plugin.from_extensions(
        "behaviors",
        BehaviorsCsvExportAggregator(),
        name="Behaviors",
        description="Exports status counts per epic, feature, and story",
    )


DEFAULT_CATALOG: tuple[CatalogFactory, ...] = (
    ReportInfoContext,
    results_reader_plugin,
    summary_plugin,
    suites_plugin,
    behaviors_plugin,
)

__all__ = [
    "DEFAULT_CATALOG",
    "BehaviorsCsvExportAggregator",
    "CatalogFactory",
    "ReportInfo",
    "ReportInfoContext",
    "SuitesCsvExportAggregator",
    "SummaryAggregator",
    "behaviors_plugin",
    "results_reader_plugin",
    "suites_plugin",
    "summary_plugin",
]
