"""Plugin bundles of extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Iterable


class PluginConfig(BaseModel, frozen=True):
    """Descriptive metadata for a plugin.

    Attributes:
        id: Stable plugin identifier
        name: Human-readable name
        description: Optional description
    """

    id: str
    name: str
    description: str = ""


class Plugin:
    """A named bundle that owns an ordered sequence of extensions.

    The extensions are frozen at construction so repeated queries within a
    run always return the same sequence.
    """

    def __init__(self, config: PluginConfig, extensions: Iterable[object] = ()) -> None:
        self._config = config
        self._extensions = tuple(extensions)

    @classmethod
    def from_extensions(
        cls,
        plugin_id: str,
        *extensions: object,
        name: str | None = None,
        description: str = "",
    ) -> Plugin:
        """Create a plugin from an id and its extensions."""
        config = PluginConfig(id=plugin_id, name=name or plugin_id, description=description)
        return cls(config, extensions)

    @property
    def config(self) -> PluginConfig:
        """Return the plugin metadata."""
        return self._config

    @property
    def id(self) -> str:
        return self._config.id

    def get_extensions(self) -> tuple[object, ...]:
        """Return the plugin's extensions in declaration order."""
        return self._extensions

    def __repr__(self) -> str:
        return f"Plugin(id={self.id!r}, extensions={len(self._extensions)})"
