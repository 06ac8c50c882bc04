"""Logging helpers for run correlation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(run_id)s] %(name)s: %(message)s"


class RunContextFilter(logging.Filter):
    """Attach the report run id to log records."""

    def __init__(self, run_id: str) -> None:
        super().__init__()
        self.run_id = run_id

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject run_id into the log record."""
        record.run_id = self.run_id
        return True


def install_run_log_filter(
    run_id: str, loggers: Iterable[logging.Filterer] | None = None
) -> None:
    """Install run context filters for structured logging.

    An existing filter on a logger is updated rather than duplicated.

    Args:
        run_id: Identifier of the current report run.
        loggers: Optional loggers or handlers to attach the filter to. Defaults to root logger.
    """
    targets = list(loggers) if loggers is not None else [logging.getLogger()]
    for logger in targets:
        existing = [flt for flt in logger.filters if isinstance(flt, RunContextFilter)]
        if existing:
            for flt in existing:
                flt.run_id = run_id
            continue
        logger.addFilter(RunContextFilter(run_id))


def configure_logging(level: str, run_id: str) -> None:
    """Configure root logging for command line runs."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    install_run_log_filter(run_id, logging.getLogger().handlers)
