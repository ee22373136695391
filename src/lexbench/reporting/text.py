"""Plain-text results table."""

from __future__ import annotations

import sys
from typing import TextIO

from lexbench.benchmark.stats import BenchmarkResults
from lexbench.logging import Logger
from lexbench.reporting.base import ReportSink


class TextReportSink(ReportSink):
    """Writes an ASCII table of every container and operation.

    Args:
        logger: If given, each row is also logged at INFO.
        stream: Output stream. Defaults to stdout at emit time.
        title: Heading printed above the table.
    """

    def __init__(
        self,
        logger: Logger | None = None,
        stream: TextIO | None = None,
        title: str = "Lexeme Container Benchmark",
    ) -> None:
        self.logger = logger
        self.stream = stream
        self.title = title

    def _write(self, line: str = "") -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(line + "\n")

    def write_header(self, results: BenchmarkResults) -> None:
        """Write the title and session summary."""
        self._write("=" * 100)
        self._write(self.title)
        self._write("=" * 100)
        self._write(f"Containers: {', '.join(results.containers)}")
        self._write(f"Seeded lexemes: {results.seed_count:,}")
        self._write(f"Operations: {results.total_operations:,}")
        if results.total_time_ns > 0:
            total_time_s = results.total_time_ns / 1e9
            self._write(
                f"Total time: {total_time_s:.3f}s | Throughput: {results.throughput:.0f} ops/sec"
            )
        self._write()

    def write_table(self, results: BenchmarkResults) -> None:
        """Write one line per container and operation, empty buckets included."""
        self._write("Operation Performance")
        self._write("-" * 100)
        self._write(
            f"{'Container':<14} {'Operation':<10} {'Count':>8} {'Mean ns':>12} "
            f"{'CI low ns':>12} {'CI high ns':>12} {'P95':>10} {'Misses':>8}"
        )
        for row in results:
            self._write(
                f"{row.container:<14} {row.operation.value:<10} {row.count:>8} "
                f"{row.mean_ns:>12.2f} {row.ci_lower_ns:>12.2f} {row.ci_upper_ns:>12.2f} "
                f"{row.p95_ns:>10.1f} {row.misses:>8}"
            )
        self._write("=" * 100)

    def emit(self, results: BenchmarkResults) -> None:
        self.write_header(results)
        self.write_table(results)

        if self.logger is not None:
            for row in results:
                self.logger.info(
                    f"{row.container} {row.operation.value}: count={row.count} "
                    f"mean={row.mean_ns:.2f}ns ci=[{row.ci_lower_ns:.2f}, {row.ci_upper_ns:.2f}] "
                    f"misses={row.misses}"
                )
