"""Command line entry point.

Usage:
    report-toolkit generate <results-dir>... [-o <output-dir>] [--name <report-name>]
    report-toolkit version
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from report_toolkit.aggregation import AggregationReport, ReportGenerator
from report_toolkit.config import load_settings
from report_toolkit.core import ConfigurationBuilder, resolve_version
from report_toolkit.storage import FileSystemReportStorage
from report_toolkit.telemetry import configure_logging
from report_toolkit.utils import new_run_id

logger = logging.getLogger(__name__)


def _write_line(message: str) -> None:
    sys.stdout.write(f"{message}\n")
    sys.stdout.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="report-toolkit",
        description="Aggregate test results into report data files",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate report data from results")
    generate.add_argument("results_dirs", nargs="+", type=Path, help="Results directories")
    generate.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Report output directory (overrides REPORT_TOOLKIT_OUTPUT_DIR)",
    )
    generate.add_argument("--name", help="Report name (overrides REPORT_TOOLKIT_REPORT_NAME)")
    generate.add_argument(
        "--workers",
        type=int,
        help="Number of aggregators to run in parallel (overrides REPORT_TOOLKIT_MAX_WORKERS)",
    )
    generate.add_argument(
        "--strict",
        action="store_true",
        help="Fail when two aggregators write the same report path",
    )
    generate.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first failing aggregator",
    )

    subparsers.add_parser("version", help="Print the toolkit version")
    return parser


def run_generate(args: argparse.Namespace) -> int:
    settings = load_settings()
    configure_logging(settings.log_level, new_run_id())

    workers = args.workers if args.workers is not None else settings.max_workers
    if workers < 1:
        _write_line("--workers must be at least 1")
        return 2

    configuration = (
        ConfigurationBuilder()
        .use_default()
        .with_report_name(args.name or settings.report_name)
        .build()
    )
    output_dir = args.output or Path(settings.output_dir)
    storage = FileSystemReportStorage(output_dir, strict=args.strict or settings.strict_storage)
    generator = ReportGenerator(
        configuration,
        max_workers=workers,
        continue_on_error=settings.continue_on_error and not args.fail_fast,
    )

    logger.info("Generating %s into %s", configuration.display_name, output_dir)
    report = generator.generate(args.results_dirs, storage)
    _print_report(report, storage)
    return 0 if report.ok else 1


def _print_report(report: AggregationReport, storage: FileSystemReportStorage) -> None:
    _write_line(f"Report data written to {storage.root}")
    for path in storage.paths():
        _write_line(f"  {path}")
    for failure in report.errors:
        _write_line(f"FAILED {failure.name}: {failure.error}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        _write_line(resolve_version())
        return 0

    try:
        return run_generate(args)
    except ValueError as exc:
        _write_line(f"Error: {exc}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
