from report_toolkit.aggregation import (
    AggregationReport,
    AggregatorOutcome,
    CsvColumn,
    CsvExportAggregator,
    CsvSchema,
    ReportGenerator,
)
from report_toolkit.config import Settings, load_settings
from report_toolkit.core import (
    UNDEFINED_VERSION,
    Aggregator,
    Configuration,
    ConfigurationBuilder,
    Context,
    Extension,
    LaunchResults,
    Plugin,
    PluginConfig,
    Reader,
    resolve_version,
)
from report_toolkit.errors import (
    AggregationError,
    ContextNotFoundError,
    CsvExportError,
    PathCollisionError,
    ReportIOError,
    ReportToolkitError,
    StoragePathError,
)
from report_toolkit.reader import JsonResultsReader
from report_toolkit.storage import (
    FileSystemReportStorage,
    InMemoryReportStorage,
    ReportStorage,
    data_path,
    widgets_path,
)

__all__ = [
    "UNDEFINED_VERSION",
    "AggregationError",
    "AggregationReport",
    "Aggregator",
    "AggregatorOutcome",
    "Configuration",
    "ConfigurationBuilder",
    "Context",
    "ContextNotFoundError",
    "CsvColumn",
    "CsvExportAggregator",
    "CsvExportError",
    "CsvSchema",
    "Extension",
    "FileSystemReportStorage",
    "InMemoryReportStorage",
    "JsonResultsReader",
    "LaunchResults",
    "PathCollisionError",
    "Plugin",
    "PluginConfig",
    "Reader",
    "ReportGenerator",
    "ReportIOError",
    "ReportStorage",
    "ReportToolkitError",
    "Settings",
    "StoragePathError",
    "data_path",
    "load_settings",
    "resolve_version",
    "widgets_path",
]
