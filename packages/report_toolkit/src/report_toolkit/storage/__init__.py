"""Report storage sinks."""

from report_toolkit.storage.base import (
    DATA_DIR,
    WIDGETS_DIR,
    BaseReportStorage,
    ReportStorage,
    data_path,
    widgets_path,
)
from report_toolkit.storage.filesystem import FileSystemReportStorage
from report_toolkit.storage.memory import InMemoryReportStorage

__all__ = [
    "DATA_DIR",
    "WIDGETS_DIR",
    "BaseReportStorage",
    "FileSystemReportStorage",
    "InMemoryReportStorage",
    "ReportStorage",
    "data_path",
    "widgets_path",
]
