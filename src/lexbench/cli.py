"""Command-line entry point.

Usage::

    lexbench [REPEAT_COUNT] [--source PATH] [--category NAME]
             [--containers K1,K2] [--policy KIND=skip|allow ...] [--seed N]
             [--charts DIR | --no-charts] [--json]
             [--log-level LEVEL] [--log-file PATH]
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from lexbench.app import load_source, run_timing_analysis
from lexbench.benchmark import BenchmarkConfig
from lexbench.containers import ContainerKind, DuplicatePolicy
from lexbench.errors import LexbenchError
from lexbench.lexeme import LexemeCategory
from lexbench.logging import (
    BaseLogHandler,
    FileLogHandler,
    JsonFileLogHandler,
    Logger,
    LoggerConfig,
    LogLevel,
    get_system_info,
)
from lexbench.reporting import ChartReportSink, JsonReportSink, ReportSink, TextReportSink

DEFAULT_REPEAT_COUNT = 10


def _parse_policy(raw: str) -> tuple[str, DuplicatePolicy]:
    kind, sep, policy = raw.partition("=")
    if not sep or not kind:
        raise argparse.ArgumentTypeError(
            f"Invalid policy; expected KIND=skip|allow but got {raw!r}"
        )
    try:
        return kind.strip().upper(), DuplicatePolicy(policy.strip().lower())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid policy for {kind}; expected skip or allow but got {policy!r}"
        ) from None


def _parse_category(raw: str) -> LexemeCategory:
    try:
        return LexemeCategory.parse(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _parse_level(raw: str) -> LogLevel:
    try:
        return LogLevel[raw.strip().upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(
            f"Invalid log level; expected one of {[lvl.name for lvl in LogLevel]} but got {raw!r}"
        ) from None


def _parse_repeat(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid repeat count; expected an integer but got {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"Invalid repeat count; expected >=0 but got {value}")
    return value


class BenchmarkCLI:
    """Builder for the lexbench command line.

    Positional repeat count and the logging options are always present; the
    rest is added with the chainable `add_*` methods.

    Args:
        description: Text shown by --help.
    """

    def __init__(self, description: str) -> None:
        self.parser = argparse.ArgumentParser(prog="lexbench", description=description)
        self._add_common_args()

    def _add_common_args(self) -> None:
        self.parser.add_argument(
            "repeat_count",
            nargs="?",
            type=_parse_repeat,
            default=None,
            help=f"Number of add/search/remove cycles (default: {DEFAULT_REPEAT_COUNT})",
        )
        self.parser.add_argument(
            "--log-level",
            type=_parse_level,
            default=LogLevel.INFO,
            help="Minimum log level: TRACE, DEBUG, INFO, WARNING or ERROR (default: INFO)",
        )
        self.parser.add_argument(
            "--log-file",
            default=None,
            help="Also append log lines to this file (.txt, or .jsonl for JSON lines)",
        )

    def add_source_arg(self) -> BenchmarkCLI:
        """Add --source/-s for the file to classify."""
        self.parser.add_argument(
            "--source",
            "-s",
            default=None,
            help="Source file to classify (default: bundled sample code)",
        )
        return self

    def add_category_arg(self) -> BenchmarkCLI:
        """Add --category/-c to seed from one lexeme category only."""
        self.parser.add_argument(
            "--category",
            "-c",
            type=_parse_category,
            default=None,
            help=f"Only seed from one category: {', '.join(c.value for c in LexemeCategory)}",
        )
        return self

    def add_container_args(self) -> BenchmarkCLI:
        """Add --containers and the repeatable --policy override."""
        self.parser.add_argument(
            "--containers",
            default=None,
            help=f"Comma separated container kinds (default: {','.join(k.value for k in ContainerKind)})",
        )
        self.parser.add_argument(
            "--policy",
            type=_parse_policy,
            action="append",
            default=[],
            metavar="KIND=skip|allow",
            help="Duplicate policy override for one container kind; repeatable",
        )
        return self

    def add_seed_arg(self) -> BenchmarkCLI:
        """Add --seed for reproducible runs."""
        self.parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Random seed (default: unseeded)",
        )
        return self

    def add_output_args(self) -> BenchmarkCLI:
        """Add --charts DIR / --no-charts and --json."""
        charts = self.parser.add_mutually_exclusive_group()
        charts.add_argument(
            "--charts",
            default="charts",
            metavar="DIR",
            help="Directory for PNG charts (default: charts)",
        )
        charts.add_argument(
            "--no-charts",
            action="store_true",
            help="Do not render charts",
        )
        self.parser.add_argument(
            "--json",
            action="store_true",
            help="Print the results table as JSON instead of text",
        )
        return self

    def parse(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        return self.parser.parse_args(argv)


def build_cli() -> BenchmarkCLI:
    return (
        BenchmarkCLI("Classify source lexemes and time container add/search/remove operations.")
        .add_source_arg()
        .add_category_arg()
        .add_container_args()
        .add_seed_arg()
        .add_output_args()
    )


def build_logger(level: LogLevel, log_file: str | None = None) -> Logger:
    """Logger writing to stdout and, optionally, to a text or JSON-lines file."""
    handlers: list[BaseLogHandler] = []
    if log_file is not None:
        if log_file.endswith(".jsonl"):
            handlers.append(JsonFileLogHandler(log_file, create=True))
        else:
            handlers.append(FileLogHandler(log_file, create=True))
    return Logger(
        name="lexbench",
        config=LoggerConfig(base_level=level, do_stdout=True),
        handlers=handlers,
    )


def build_config(args: argparse.Namespace) -> BenchmarkConfig:
    """Translate parsed arguments into a validated BenchmarkConfig."""
    kwargs = {
        "repeat_count": args.repeat_count if args.repeat_count is not None else DEFAULT_REPEAT_COUNT,
        "seed": args.seed,
        "category": args.category,
        "duplicate_policies": dict(args.policy),
    }
    if args.containers:
        kwargs["containers"] = [k.strip().upper() for k in args.containers.split(",") if k.strip()]
    return BenchmarkConfig(**kwargs)


def build_sinks(args: argparse.Namespace, logger: Logger) -> list[ReportSink]:
    sinks: list[ReportSink] = [JsonReportSink() if args.json else TextReportSink()]
    if not args.no_charts:
        sinks.append(ChartReportSink(output_dir=args.charts, logger=logger))
    return sinks


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark from the command line.

    Returns:
        0 on success, 1 if the run failed.
    """
    cli = build_cli()
    args = cli.parse(argv)
    try:
        logger = build_logger(args.log_level, args.log_file)
    except ValueError as e:
        cli.parser.error(str(e))

    try:
        logger.info(f"Hardware info: {get_system_info()}")
        if args.repeat_count is None:
            logger.info("No argument provided. Running default timing analysis...")

        config = build_config(args)
        run_timing_analysis(
            source=load_source(args.source),
            config=config,
            sinks=build_sinks(args, logger),
            logger=logger,
        )
    except (LexbenchError, KeyError, ValueError) as e:
        logger.error(f"Benchmark failed: {e}")
        return 1
    finally:
        logger.shutdown()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
