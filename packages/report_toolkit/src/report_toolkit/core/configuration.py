"""Immutable report configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from report_toolkit.core.extension import Aggregator, Context, Reader, has_capability
from report_toolkit.errors import ContextNotFoundError

if TYPE_CHECKING:
    from report_toolkit.core.plugin import Plugin

UNNAMED_REPORT = "Unnamed report"

C = TypeVar("C")


@dataclass(frozen=True)
class Configuration:
    """Frozen record of every extension and plugin registered for one run.

    ``extensions`` holds directly added extensions and plugin extensions in
    registration order. Build instances with
    :class:`~report_toolkit.core.builder.ConfigurationBuilder`.
    """

    report_name: str | None = None
    extensions: tuple[Any, ...] = ()
    plugins: tuple[Plugin, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "extensions", tuple(self.extensions))
        object.__setattr__(self, "plugins", tuple(self.plugins))

    @property
    def display_name(self) -> str:
        """Return the report name, or a placeholder for unnamed reports."""
        return self.report_name or UNNAMED_REPORT

    def extensions_with(self, capability: type) -> tuple[Any, ...]:
        """Return the extensions implementing ``capability`` in registration order."""
        return tuple(ext for ext in self.extensions if has_capability(ext, capability))

    @property
    def aggregators(self) -> tuple[Aggregator, ...]:
        return self.extensions_with(Aggregator)

    @property
    def readers(self) -> tuple[Reader, ...]:
        return self.extensions_with(Reader)

    def get_context(self, context_type: type[C]) -> C | None:
        """Return the first registered context extension of ``context_type``."""
        for ext in self.extensions:
            if isinstance(ext, context_type) and has_capability(ext, Context):
                return ext
        return None

    def require_context(self, context_type: type[C]) -> C:
        """Return the context extension of ``context_type`` or raise."""
        context = self.get_context(context_type)
        if context is None:
            message = f"Context not registered: {context_type.__name__}"
            raise ContextNotFoundError(message)
        return context
