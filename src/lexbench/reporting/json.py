"""Machine-readable results output."""

from __future__ import annotations

import sys
from typing import TextIO

import msgspec

from lexbench.benchmark.stats import BenchmarkResults, OperationSummary
from lexbench.reporting.base import ReportSink


class JsonReport(msgspec.Struct):
    """Encoded shape of a results table."""

    seed_count: int
    total_time_ns: int
    z: float
    rows: list[OperationSummary]


class JsonReportSink(ReportSink):
    """Writes the results table as a single JSON document.

    Args:
        stream: Output stream. Defaults to stdout at emit time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream
        self._encoder = msgspec.json.Encoder()

    def encode(self, results: BenchmarkResults) -> bytes:
        """Encode the results without writing them."""
        return self._encoder.encode(
            JsonReport(
                seed_count=results.seed_count,
                total_time_ns=results.total_time_ns,
                z=results.z,
                rows=list(results),
            )
        )

    def emit(self, results: BenchmarkResults) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(self.encode(results).decode() + "\n")
