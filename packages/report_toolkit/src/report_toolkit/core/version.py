"""Report toolkit version lookup."""

from __future__ import annotations

import logging
from importlib import metadata, resources

logger = logging.getLogger(__name__)

UNDEFINED_VERSION = "Undefined"
VERSION_PLACEHOLDER = "#project.version#"

DISTRIBUTION_NAME = "report-toolkit"
VERSION_RESOURCE_PACKAGE = "report_toolkit.resources"
VERSION_RESOURCE_NAME = "version.txt"


def resolve_version(
    resource_package: str = VERSION_RESOURCE_PACKAGE,
    resource_name: str = VERSION_RESOURCE_NAME,
    distribution: str = DISTRIBUTION_NAME,
) -> str:
    """Resolve the version string used in generated reports.

    Priority:
    1. Packaged ``version.txt`` resource (ignored when blank or a placeholder)
    2. Installed distribution metadata
    3. ``"Undefined"``
    """
    return (
        version_from_resource(resource_package, resource_name)
        or version_from_metadata(distribution)
        or UNDEFINED_VERSION
    )


def version_from_resource(package: str, name: str) -> str | None:
    """Read a version from a packaged text resource."""
    try:
        text = resources.files(package).joinpath(name).read_text(encoding="utf-8")
    except (OSError, ModuleNotFoundError) as exc:
        logger.debug("Could not read %s resource from %s", name, package, exc_info=exc)
        return None
    value = text.strip()
    if not value or value == VERSION_PLACEHOLDER:
        return None
    return value


def version_from_metadata(distribution: str) -> str | None:
    """Read a version from installed package metadata."""
    try:
        return metadata.version(distribution) or None
    except metadata.PackageNotFoundError:
        logger.debug("Distribution %s is not installed", distribution)
        return None
