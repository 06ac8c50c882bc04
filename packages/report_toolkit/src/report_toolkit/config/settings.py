"""Pydantic models for report toolkit settings."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel

ENV_PREFIX = "REPORT_TOOLKIT_"


class Settings(BaseModel, frozen=True):
    """Runtime configuration loaded from environment variables."""

    report_name: str | None = None
    output_dir: str = "report"
    max_workers: int = 1
    continue_on_error: bool = True
    strict_storage: bool = False
    log_level: str = "INFO"


def _env(name: str, default: str = "") -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_positive_int(name: str, value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        msg = f"{ENV_PREFIX}{name} must be an integer, got {value!r}"
        raise ValueError(msg) from None
    if parsed < 1:
        msg = f"{ENV_PREFIX}{name} must be at least 1, got {parsed}"
        raise ValueError(msg)
    return parsed


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in logging.getLevelNamesMapping():
        msg = f"{ENV_PREFIX}LOG_LEVEL is not a logging level: {value!r}"
        raise ValueError(msg)
    return level


def load_settings() -> Settings:
    """Load settings from environment variables with defaults."""
    load_dotenv()

    return Settings(
        report_name=_env("REPORT_NAME") or None,
        output_dir=_env("OUTPUT_DIR", "report"),
        max_workers=_parse_positive_int("MAX_WORKERS", _env("MAX_WORKERS", "1")),
        continue_on_error=_parse_bool(_env("CONTINUE_ON_ERROR", "true")),
        strict_storage=_parse_bool(_env("STRICT_STORAGE", "false")),
        log_level=_parse_log_level(_env("LOG_LEVEL", "INFO")),
    )
