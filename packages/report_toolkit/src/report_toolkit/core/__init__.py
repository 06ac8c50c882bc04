"""Core registration contracts: extensions, plugins, and the configuration."""

from report_toolkit.core.builder import ConfigurationBuilder
from report_toolkit.core.configuration import UNNAMED_REPORT, Configuration
from report_toolkit.core.extension import (
    Aggregator,
    Context,
    Extension,
    Reader,
    extension_name,
    has_capability,
)
from report_toolkit.core.launch import LaunchResults, merge_launches
from report_toolkit.core.plugin import Plugin, PluginConfig
from report_toolkit.core.version import UNDEFINED_VERSION, resolve_version

__all__ = [
    "UNDEFINED_VERSION",
    "UNNAMED_REPORT",
    "Aggregator",
    "Configuration",
    "ConfigurationBuilder",
    "Context",
    "Extension",
    "LaunchResults",
    "Plugin",
    "PluginConfig",
    "Reader",
    "extension_name",
    "has_capability",
    "merge_launches",
    "resolve_version",
]
