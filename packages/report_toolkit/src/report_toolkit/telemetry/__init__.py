"""Logging helpers for report runs."""

from report_toolkit.telemetry.logging_utils import (
    LOG_FORMAT,
    RunContextFilter,
    configure_logging,
    install_run_log_filter,
)

__all__ = ["LOG_FORMAT", "RunContextFilter", "configure_logging", "install_run_log_filter"]
