"""Report info context shared with aggregators."""

from __future__ import annotations

from pydantic import BaseModel

from report_toolkit.core.extension import Extension


class ReportInfo(BaseModel, frozen=True):
    """Information about the toolkit that generated a report."""

    version: str


class ReportInfoContext(Extension):
    """Context providing :class:`ReportInfo` to other extensions."""

    def __init__(self, version: str) -> None:
        self._info = ReportInfo(version=version)

    def get_value(self) -> ReportInfo:
        return self._info
