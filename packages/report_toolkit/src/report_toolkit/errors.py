"""Exception hierarchy for report generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from report_toolkit.aggregation.generator import AggregatorOutcome


class ReportToolkitError(Exception):
    """Base class for report toolkit errors."""


class ReportIOError(ReportToolkitError, OSError):
    """Failure while serializing or writing a report artifact."""


class CsvExportError(ReportIOError):
    """A row could not be mapped to CSV cells."""


class StoragePathError(ReportToolkitError, ValueError):
    """Storage path is empty or escapes the storage root."""


class PathCollisionError(ReportToolkitError):
    """A strict storage received a second write for the same path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Report storage path already written: {path}")
        self.path = path


class ContextNotFoundError(ReportToolkitError, LookupError):
    """No context extension of the requested type is registered."""


class AggregationError(ReportToolkitError):
    """One or more aggregators failed during a report run."""

    def __init__(self, failures: Sequence[AggregatorOutcome]) -> None:
        self.failures = tuple(failures)
        names = ", ".join(failure.name for failure in self.failures)
        super().__init__(f"{len(self.failures)} aggregator(s) failed: {names}")
