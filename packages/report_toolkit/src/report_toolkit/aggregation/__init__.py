"""Aggregation: running aggregators and the generic CSV exporter."""

from report_toolkit.aggregation.csv_export import (
    CsvColumn,
    CsvExportAggregator,
    CsvSchema,
    field_names,
)
from report_toolkit.aggregation.generator import (
    AggregationReport,
    AggregatorOutcome,
    ReportGenerator,
)

__all__ = [
    "AggregationReport",
    "AggregatorOutcome",
    "CsvColumn",
    "CsvExportAggregator",
    "CsvSchema",
    "ReportGenerator",
    "field_names",
]
