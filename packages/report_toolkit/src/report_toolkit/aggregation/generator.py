"""Run every registered aggregator against a list of launch results."""

from __future__ import annotations

import logging
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from report_toolkit.core.extension import extension_name
from report_toolkit.core.launch import merge_launches
from report_toolkit.errors import AggregationError
from report_toolkit.reader import JsonResultsReader
from report_toolkit.utils import utc_timestamp

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from report_toolkit.core.configuration import Configuration
    from report_toolkit.core.extension import Aggregator
    from report_toolkit.core.launch import LaunchResults
    from report_toolkit.storage.base import ReportStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregatorOutcome:
    """Execution record for one aggregator."""

    name: str
    ok: bool
    started_at: str
    finished_at: str
    error: str | None = None
    exception: BaseException | None = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class AggregationReport:
    """Outcomes of one aggregation run, in registration order."""

    outcomes: tuple[AggregatorOutcome, ...] = ()

    @property
    def ok(self) -> bool:
        return all(outcome.ok for outcome in self.outcomes)

    @property
    def errors(self) -> tuple[AggregatorOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.ok)

    def raise_for_errors(self) -> None:
        """Raise :class:`AggregationError` listing every failed aggregator."""
        if self.errors:
            raise AggregationError(self.errors)


class ReportGenerator:
    """Invoke the aggregators of a configuration once per run.

    Aggregators run in registration order. With ``max_workers`` above one they
    run on a thread pool; outcomes are still reported in registration order.
    A failing aggregator is recorded and, unless ``continue_on_error`` is
    False, the remaining aggregators still run.
    """

    def __init__(
        self,
        configuration: Configuration,
        *,
        max_workers: int = 1,
        continue_on_error: bool = True,
    ) -> None:
        if max_workers < 1:
            message = "max_workers must be at least 1"
            raise ValueError(message)
        self._configuration = configuration
        self._max_workers = max_workers
        self._continue_on_error = continue_on_error

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    def read_results(self, results_dirs: Iterable[str | Path]) -> list[LaunchResults]:
        """Read one LaunchResults per directory, merging every registered reader."""
        readers = self._configuration.readers or (JsonResultsReader(),)
        return [
            merge_launches(reader.read_results(Path(directory)) for reader in readers)
            for directory in results_dirs
        ]

    def generate(
        self, results_dirs: Iterable[str | Path], storage: ReportStorage
    ) -> AggregationReport:
        """Read the results directories and aggregate them into ``storage``."""
        return self.aggregate(self.read_results(results_dirs), storage)

    def aggregate(
        self, launches_results: Sequence[LaunchResults], storage: ReportStorage
    ) -> AggregationReport:
        """Run every aggregator once against ``launches_results``."""
        aggregators = self._configuration.aggregators
        launches = tuple(launches_results)
        logger.info(
            "Aggregating %d launch(es) with %d aggregator(s) for %s",
            len(launches),
            len(aggregators),
            self._configuration.display_name,
        )
        if self._max_workers > 1 and len(aggregators) > 1:
            outcomes = self._run_parallel(aggregators, launches, storage)
        else:
            outcomes = self._run_sequential(aggregators, launches, storage)
        report = AggregationReport(outcomes=tuple(outcomes))
        if report.errors:
            logger.warning("%d aggregator(s) failed", len(report.errors))
        return report

    def _run_sequential(
        self,
        aggregators: Sequence[Aggregator],
        launches: tuple[LaunchResults, ...],
        storage: ReportStorage,
    ) -> list[AggregatorOutcome]:
        outcomes: list[AggregatorOutcome] = []
        for aggregator in aggregators:
            outcome = self._run_single(aggregator, launches, storage)
            outcomes.append(outcome)
            if not outcome.ok and not self._continue_on_error:
                break
        return outcomes

    def _run_parallel(
        self,
        aggregators: Sequence[Aggregator],
        launches: tuple[LaunchResults, ...],
        storage: ReportStorage,
    ) -> list[AggregatorOutcome]:
        workers = min(len(aggregators), self._max_workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self._run_single, aggregator, launches, storage)
                for aggregator in aggregators
            ]
            if not self._continue_on_error:
                pending = set(futures)
                while pending:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    if any(not future.result().ok for future in done):
                        for future in pending:
                            future.cancel()
                        break
        return [
            future.result() for future in futures if future.done() and not future.cancelled()
        ]

    def _run_single(
        self,
        aggregator: Aggregator,
        launches: tuple[LaunchResults, ...],
        storage: ReportStorage,
    ) -> AggregatorOutcome:
        name = extension_name(aggregator)
        started = utc_timestamp()
        try:
            aggregator.aggregate(self._configuration, launches, storage)
        except Exception as exc:
            logger.exception("Aggregator '%s' failed", name)
            return AggregatorOutcome(
                name=name,
                ok=False,
                started_at=started,
                finished_at=utc_timestamp(),
                error=str(exc) or type(exc).__name__,
                exception=exc,
            )
        logger.debug("Aggregator '%s' finished", name)
        return AggregatorOutcome(
            name=name, ok=True, started_at=started, finished_at=utc_timestamp()
        )
