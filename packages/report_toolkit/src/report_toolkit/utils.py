"""Shared utilities for report toolkit."""

from __future__ import annotations

import secrets
from datetime import UTC, datetime


def utc_timestamp() -> str:
    """Return current UTC timestamp in ISO format."""
    return datetime.now(UTC).isoformat()


def new_run_id() -> str:
    """Create a run id from the current UTC time and a random suffix."""
    return f"{datetime.now(UTC).strftime('%Y%m%dT%H%M%S%fZ')}-{secrets.token_hex(4)}"
