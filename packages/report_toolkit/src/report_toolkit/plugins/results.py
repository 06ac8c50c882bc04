"""Accessors for result mappings read by the built-in plugins."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from report_toolkit.core.launch import LaunchResults

STATUSES = ("failed", "broken", "passed", "skipped", "unknown")

# 9999-12-31T23:59:59.999Z, the last instant datetime can represent.
MAX_EPOCH_MILLIS = 253_402_300_799_999


def iter_results(launches_results: Sequence[LaunchResults]) -> Iterator[Mapping[str, Any]]:
    """Yield every result of every launch in order."""
    for launch in launches_results:
        yield from launch.results


def status_of(result: Mapping[str, Any]) -> str:
    status = str(result.get("status") or "unknown").lower()
    return status if status in STATUSES else "unknown"


def label_value(result: Mapping[str, Any], name: str) -> str:
    """Return the first value of label ``name``, or an empty string."""
    for label in result.get("labels") or ():
        if isinstance(label, dict) and label.get("name") == name:
            return str(label.get("value") or "")
    return ""


def millis(result: Mapping[str, Any], key: str) -> int | None:
    """Return epoch milliseconds under ``key``, or None when absent or out of range."""
    value = result.get(key)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    # NaN and infinities fail the range check too.
    if not 0 <= value <= MAX_EPOCH_MILLIS:
        return None
    return int(value)


def duration_ms(result: Mapping[str, Any]) -> int | None:
    start = millis(result, "start")
    stop = millis(result, "stop")
    if start is None or stop is None:
        return None
    return max(0, stop - start)


def format_millis(value: int | None) -> str:
    """Format epoch milliseconds as an ISO UTC timestamp."""
    if value is None:
        return ""
    return datetime.fromtimestamp(value / 1000, UTC).isoformat()
