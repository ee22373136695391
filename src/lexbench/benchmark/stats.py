"""Per-container, per-operation latency bookkeeping and the results table."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from msgspec import Struct

from lexbench import statistics
from lexbench.statistics import Z_95, ConfidenceInterval


class OperationKind(StrEnum):
    """Primitive operations timed by the engine."""

    ADD = "ADD"
    SEARCH = "SEARCH"
    REMOVE = "REMOVE"


@dataclass
class OperationStats:
    """Timing samples for one operation on one container.

    Args:
        operation: Operation the samples belong to.
        total_ns: Sum of all recorded durations in nanoseconds.
        count: Number of recorded operations.
        durations_ns: Every recorded duration, in recording order.
        misses: Operations that did not change or find anything (duplicate
            insert under SKIP, remove of an absent token, failed search).
    """

    operation: OperationKind
    total_ns: int = 0
    count: int = 0
    durations_ns: list[int] = field(default_factory=list)
    misses: int = 0

    def record(self, duration_ns: int, hit: bool = True) -> None:
        """Record one timed operation.

        Args:
            duration_ns: Elapsed time of the single operation.
            hit: False if the operation was a miss.

        Raises:
            ValueError: If the duration is negative.
        """
        if duration_ns < 0:
            raise ValueError(f"Invalid duration; expected >=0 but got {duration_ns}")
        self.durations_ns.append(duration_ns)
        self.total_ns += duration_ns
        self.count += 1
        if not hit:
            self.misses += 1

    @property
    def mean(self) -> float:
        """Average duration, 0.0 when nothing was recorded."""
        return self.total_ns / self.count if self.count else 0.0

    def confidence_interval(self, z: float = Z_95) -> ConfidenceInterval:
        """Confidence interval of the mean duration."""
        ci = statistics.interval(self.durations_ns, z)
        return ConfidenceInterval(
            mean=self.mean,
            lower=self.mean - ci.half_width,
            upper=self.mean + ci.half_width,
            half_width=ci.half_width,
        )

    def summary(self, container: str, z: float = Z_95) -> OperationSummary:
        """Results-table row for this bucket."""
        return OperationSummary.from_stats(container, self, z)

    def reset(self) -> None:
        """Drop every recorded sample."""
        self.total_ns = 0
        self.count = 0
        self.durations_ns.clear()
        self.misses = 0


class ContainerStats:
    """All operation buckets for one container, created up front.

    Args:
        container: Container kind name.
    """

    def __init__(self, container: str) -> None:
        self.container = container
        self.operations: dict[OperationKind, OperationStats] = {
            op: OperationStats(op) for op in OperationKind
        }

    def __getitem__(self, operation: OperationKind) -> OperationStats:
        return self.operations[OperationKind(operation)]

    def __iter__(self) -> Iterator[OperationStats]:
        return iter(self.operations.values())

    @property
    def total_operations(self) -> int:
        """Operations recorded across all buckets."""
        return sum(op.count for op in self.operations.values())

    def reset(self) -> None:
        for op in self.operations.values():
            op.reset()


class OperationSummary(Struct, frozen=True):
    """One row of the results table.

    Attributes:
        container: Container kind name.
        operation: Operation kind.
        count: Number of timed operations.
        mean_ns: Mean latency, 0 when count is 0.
        ci_lower_ns: Lower bound of the confidence interval.
        ci_upper_ns: Upper bound of the confidence interval.
        ci_half_width_ns: Half width of the confidence interval.
        misses: Operations that were misses.
        p50_ns: Median latency.
        p95_ns: 95th percentile latency.
        p99_ns: 99th percentile latency.
    """

    container: str
    operation: OperationKind
    count: int
    mean_ns: float
    ci_lower_ns: float
    ci_upper_ns: float
    ci_half_width_ns: float
    misses: int = 0
    p50_ns: float = 0.0
    p95_ns: float = 0.0
    p99_ns: float = 0.0

    @classmethod
    def from_stats(cls, container: str, stats: OperationStats, z: float = Z_95) -> OperationSummary:
        """Summarise a bucket."""
        ci = stats.confidence_interval(z)
        pcts = statistics.percentiles(stats.durations_ns)
        return cls(
            container=container,
            operation=stats.operation,
            count=stats.count,
            mean_ns=ci.mean,
            ci_lower_ns=ci.lower,
            ci_upper_ns=ci.upper,
            ci_half_width_ns=ci.half_width,
            misses=stats.misses,
            p50_ns=pcts["p50"],
            p95_ns=pcts["p95"],
            p99_ns=pcts["p99"],
        )

    def as_tuple(self) -> tuple[int, float, float, float]:
        """(count, mean_ns, ci_lower_ns, ci_upper_ns)."""
        return (self.count, self.mean_ns, self.ci_lower_ns, self.ci_upper_ns)


class BenchmarkResults:
    """Results table of one benchmark session.

    Rows are ordered by container (as configured), then ADD, SEARCH, REMOVE.

    Args:
        rows: Summaries, one per container and operation.
        seed_count: Number of tokens the containers were seeded with.
        total_time_ns: Wall time of the whole session (seeding and workload).
        z: Critical value the intervals were computed with.
    """

    def __init__(
        self,
        rows: list[OperationSummary],
        seed_count: int = 0,
        total_time_ns: int = 0,
        z: float = Z_95,
    ) -> None:
        self.rows = list(rows)
        self.seed_count = seed_count
        self.total_time_ns = total_time_ns
        self.z = z
        self._index = {(row.container, row.operation): row for row in self.rows}

    @classmethod
    def from_container_stats(
        cls,
        stats: list[ContainerStats],
        seed_count: int = 0,
        total_time_ns: int = 0,
        z: float = Z_95,
    ) -> BenchmarkResults:
        """Build the table from the engine's buckets."""
        rows = [
            bucket.summary(container.container, z)
            for container in stats
            for bucket in container
        ]
        return cls(rows, seed_count=seed_count, total_time_ns=total_time_ns, z=z)

    def __iter__(self) -> Iterator[OperationSummary]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def get(self, container: str, operation: OperationKind) -> OperationSummary:
        """Row for a container and operation.

        Raises:
            KeyError: If the container was not part of the session.
        """
        return self._index[(str(container), OperationKind(operation))]

    @property
    def containers(self) -> list[str]:
        """Container kinds in configured order."""
        return list(dict.fromkeys(row.container for row in self.rows))

    @property
    def total_operations(self) -> int:
        """Operations recorded across all rows."""
        return sum(row.count for row in self.rows)

    @property
    def throughput(self) -> float:
        """Overall throughput in ops/sec."""
        total_time_s = self.total_time_ns / 1e9
        return self.total_operations / total_time_s if total_time_s > 0 else 0.0

    def to_rows(self) -> dict[tuple[str, OperationKind], tuple[int, float, float, float]]:
        """Structured table handed to report sinks.

        Returns:
            Mapping of (container, operation) to (count, mean_ns, ci_lower_ns, ci_upper_ns).
        """
        return {key: row.as_tuple() for key, row in self._index.items()}
