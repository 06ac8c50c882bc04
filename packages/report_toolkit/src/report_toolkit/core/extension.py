"""Extension base class and capability protocols.

A registered unit is an :class:`Extension` that may also satisfy one or more
capability protocols. The configuration filters its extensions by capability
with :func:`has_capability` instead of relying on a class hierarchy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from report_toolkit.core.configuration import Configuration
    from report_toolkit.core.launch import LaunchResults
    from report_toolkit.storage.base import ReportStorage

T_co = TypeVar("T_co", covariant=True)


class Extension:
    """Base class for units registered with a report configuration."""

    @property
    def extension_name(self) -> str:
        """Name used in logs and aggregation outcomes."""
        return type(self).__name__


@runtime_checkable
class Aggregator(Protocol):
    """Capability: derive artifacts from launch results into report storage."""

    def aggregate(
        self,
        configuration: Configuration,
        launches_results: Sequence[LaunchResults],
        storage: ReportStorage,
    ) -> None:
        """Write zero or more named artifacts into ``storage``."""
        ...


@runtime_checkable
class Context(Protocol[T_co]):
    """Capability: provide a shared value to other extensions."""

    def get_value(self) -> T_co:
        """Return the provided value."""
        ...


@runtime_checkable
class Reader(Protocol):
    """Capability: turn a results directory into launch results."""

    def read_results(self, directory: Path) -> LaunchResults:
        """Read every result file found in ``directory``."""
        ...


def has_capability(extension: object, capability: type) -> bool:
    """Return True when ``extension`` implements ``capability``."""
    return isinstance(extension, capability)


def extension_name(extension: object) -> str:
    """Return a display name for any registered unit."""
    name = getattr(extension, "extension_name", None)
    if isinstance(name, str) and name:
        return name
    return type(extension).__name__
