"""Builder for :class:`~report_toolkit.core.configuration.Configuration`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from report_toolkit.core.configuration import Configuration
from report_toolkit.core.plugin import Plugin
from report_toolkit.core.version import resolve_version

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from report_toolkit.plugins import CatalogFactory

logger = logging.getLogger(__name__)


class ConfigurationBuilder:
    """Accumulate extensions and plugins, then freeze them into a Configuration.

    Registration order is preserved. Adding a plugin immediately appends its
    extensions, so they land in the extension sequence at the point where the
    plugin was registered.
    """

    def __init__(self) -> None:
        self._extensions: list[object] = []
        self._plugins: list[Plugin] = []
        self._report_name: str | None = None

    def use_default(self, catalog: Sequence[CatalogFactory] | None = None) -> ConfigurationBuilder:
        """Register the built-in catalog, resolving the version first.

        Args:
            catalog: Factories to use instead of the default catalog. Each
                factory receives the version string and returns either an
                extension or a :class:`Plugin`.
        """
        if catalog is None:
            from report_toolkit.plugins import DEFAULT_CATALOG  # noqa: PLC0415

            catalog = DEFAULT_CATALOG

        version = resolve_version()
        logger.debug("Registering %d default catalog entries (version %s)", len(catalog), version)
        for factory in catalog:
            unit = factory(version)
            if isinstance(unit, Plugin):
                self.add_plugins([unit])
            else:
                self.add_extensions([unit])
        return self

    def add_extensions(self, extensions: Iterable[object]) -> ConfigurationBuilder:
        """Append extensions in call order. Duplicates are kept."""
        added = list(extensions)
        self._extensions.extend(added)
        if added:
            logger.debug("Added %d extension(s)", len(added))
        return self

    def add_plugins(self, plugins: Iterable[Plugin]) -> ConfigurationBuilder:
        """Append plugins and, plugin by plugin, their extensions."""
        for plugin in plugins:
            self._plugins.append(plugin)
            logger.debug("Added plugin %s", plugin.id)
            self.add_extensions(plugin.get_extensions())
        return self

    def with_report_name(self, report_name: str | None) -> ConfigurationBuilder:
        """Set the report name. The last call wins; None leaves the report unnamed."""
        self._report_name = report_name
        return self

    set_report_name = with_report_name

    def build(self) -> Configuration:
        """Return an immutable snapshot of the current builder state."""
        return Configuration(
            report_name=self._report_name,
            extensions=tuple(self._extensions),
            plugins=tuple(self._plugins),
        )
