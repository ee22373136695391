"""Tests for per-operation stats and the results table."""

import math

import pytest

from lexbench.benchmark import (
    BenchmarkResults,
    ContainerStats,
    OperationKind,
    OperationStats,
    OperationSummary,
)


class TestOperationStats:
    """Test OperationStats."""

    def test_record(self):
        """Test recording accumulates total, count and samples."""
        stats = OperationStats(OperationKind.ADD)
        for duration in (100, 200, 300):
            stats.record(duration)
        assert stats.count == 3
        assert stats.total_ns == 600
        assert stats.durations_ns == [100, 200, 300]
        assert stats.mean == 200.0
        assert stats.misses == 0

    def test_record_miss(self):
        """Test a miss is still counted as a timed operation."""
        stats = OperationStats(OperationKind.REMOVE)
        stats.record(50, hit=False)
        assert stats.count == 1
        assert stats.misses == 1

    def test_record_negative(self):
        """Test negative durations are rejected."""
        with pytest.raises(ValueError):
            OperationStats(OperationKind.ADD).record(-1)

    def test_mean_empty(self):
        """Test the mean of an empty bucket is zero."""
        assert OperationStats(OperationKind.SEARCH).mean == 0.0

    def test_confidence_interval(self):
        """Test the bucket interval matches the statistics module."""
        stats = OperationStats(OperationKind.ADD)
        for duration in (100, 200, 300):
            stats.record(duration)
        ci = stats.confidence_interval()
        assert ci.half_width == pytest.approx(1.96 * 100 / math.sqrt(3))
        assert ci.lower == pytest.approx(200 - ci.half_width)

    def test_reset(self):
        """Test reset drops every sample."""
        stats = OperationStats(OperationKind.ADD)
        stats.record(10, hit=False)
        stats.reset()
        assert (stats.count, stats.total_ns, stats.durations_ns, stats.misses) == (0, 0, [], 0)

    def test_summary(self):
        """Test a bucket summarises into a results row."""
        stats = OperationStats(OperationKind.SEARCH)
        stats.record(10)
        stats.record(30, hit=False)
        row = stats.summary("DEQUE")
        assert isinstance(row, OperationSummary)
        assert row.container == "DEQUE"
        assert row.operation is OperationKind.SEARCH
        assert row.count == 2
        assert row.mean_ns == 20.0
        assert row.misses == 1
        assert row.as_tuple() == (2, 20.0, row.ci_lower_ns, row.ci_upper_ns)


class TestContainerStats:
    """Test ContainerStats."""

    def test_all_buckets_exist_up_front(self):
        """Test every operation bucket exists before anything is recorded."""
        stats = ContainerStats("STACK")
        assert [bucket.operation for bucket in stats] == list(OperationKind)
        for op in OperationKind:
            assert stats[op].count == 0
        assert stats.total_operations == 0

    def test_lookup_by_value(self):
        """Test buckets are reachable by operation value."""
        stats = ContainerStats("STACK")
        assert stats["ADD"] is stats[OperationKind.ADD]

    def test_reset(self):
        """Test reset clears every bucket."""
        stats = ContainerStats("STACK")
        stats[OperationKind.ADD].record(5)
        stats[OperationKind.REMOVE].record(5)
        assert stats.total_operations == 2
        stats.reset()
        assert stats.total_operations == 0


class TestBenchmarkResults:
    """Test BenchmarkResults."""

    def _results(self) -> BenchmarkResults:
        first, second = ContainerStats("DEQUE"), ContainerStats("HASH_SET")
        first[OperationKind.ADD].record(100)
        first[OperationKind.ADD].record(300)
        second[OperationKind.SEARCH].record(40)
        return BenchmarkResults.from_container_stats(
            [first, second], seed_count=2, total_time_ns=2_000
        )

    def test_row_order(self):
        """Test rows go by container, then ADD, SEARCH, REMOVE."""
        results = self._results()
        assert len(results) == 6
        assert [(row.container, row.operation) for row in results] == [
            ("DEQUE", OperationKind.ADD),
            ("DEQUE", OperationKind.SEARCH),
            ("DEQUE", OperationKind.REMOVE),
            ("HASH_SET", OperationKind.ADD),
            ("HASH_SET", OperationKind.SEARCH),
            ("HASH_SET", OperationKind.REMOVE),
        ]
        assert results.containers == ["DEQUE", "HASH_SET"]

    def test_get(self):
        """Test lookup by container and operation."""
        results = self._results()
        row = results.get("DEQUE", OperationKind.ADD)
        assert row.count == 2
        assert row.mean_ns == 200.0
        assert results.get("HASH_SET", "SEARCH").count == 1
        with pytest.raises(KeyError):
            results.get("STACK", OperationKind.ADD)

    def test_empty_buckets_reported(self):
        """Test empty buckets appear with zero count and mean."""
        row = self._results().get("DEQUE", OperationKind.REMOVE)
        assert row.as_tuple() == (0, 0.0, 0.0, 0.0)

    def test_totals(self):
        """Test aggregate counters."""
        results = self._results()
        assert results.seed_count == 2
        assert results.total_operations == 3
        assert results.throughput == pytest.approx(3 / 2e-6)

    def test_throughput_without_time(self):
        """Test throughput is zero when no time was recorded."""
        assert BenchmarkResults([]).throughput == 0.0

    def test_to_rows(self):
        """Test the structured table handed to sinks."""
        rows = self._results().to_rows()
        assert len(rows) == 6
        count, mean, lower, upper = rows[("DEQUE", OperationKind.ADD)]
        assert (count, mean) == (2, 200.0)
        assert lower <= mean <= upper
