"""Benchmark engine driving identical workloads against every container.

Every primitive call (insert, contains, remove) is timed on its own with the
monotonic performance counter. Nothing is batched and everything runs on
the calling thread.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from lexbench.benchmark.config import BenchmarkConfig
from lexbench.benchmark.selection import RandomPrefixSelection, SelectionPolicy
from lexbench.benchmark.stats import (
    BenchmarkResults,
    ContainerStats,
    OperationKind,
    OperationStats,
)
from lexbench.containers.base import ContainerAdapter
from lexbench.containers.registry import ContainerRegistry, registry as builtin_registry
from lexbench.errors import UnknownOperationKind
from lexbench.lexeme.classifier import TokenSet
from lexbench.logging import Logger, LogLevel
from lexbench.time import perf_ns

Workload = Callable[["BenchmarkEngine"], None]


class BenchmarkEngine:
    """Runs a workload against every configured container and times each operation.

    A session is: seed the containers from a token set, run the workload
    once, summarise the samples. `add_lexeme`, `search_lexeme` and
    `remove_lexeme` always apply to every container, in configured order,
    so the containers stay comparable on identical inputs.

    Duplicate rule: every insert call is timed and recorded as ADD whatever
    the container's duplicate policy. An insert refused under SKIP is also
    counted as a miss. Removes of absent tokens and failed searches are timed
    and counted as misses the same way.

    Args:
        config: Session configuration. Defaults to `BenchmarkConfig.default()`.
        rng: Random source for token selection and workload helpers.
            Defaults to `numpy.random.default_rng(config.seed)`.
        logger: Logger for progress and results. Optional.
        registry: Registry the configured kinds are resolved against.

    Raises:
        KeyError: If a configured container kind is not registered.
        ValueError: If a configured duplicate policy is not supported by its kind.
    """

    def __init__(
        self,
        config: BenchmarkConfig | None = None,
        rng: np.random.Generator | None = None,
        logger: Logger | None = None,
        registry: ContainerRegistry | None = None,
    ) -> None:
        self.config = config if config is not None else BenchmarkConfig.default()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.logger = logger
        self.registry = registry if registry is not None else builtin_registry

        self.containers: dict[str, ContainerAdapter] = {
            kind: self.registry.create(kind, self.config.policy_for(kind))
            for kind in self.config.containers
        }
        self.stats: dict[str, ContainerStats] = {
            kind: ContainerStats(kind) for kind in self.containers
        }
        self._seed_count = 0

    # ------------------------------------------------------------------ #
    # Session
    # ------------------------------------------------------------------ #

    def run(
        self,
        token_source: TokenSet,
        workload: Workload,
        selection: SelectionPolicy | None = None,
    ) -> BenchmarkResults:
        """Start a fresh session: seed the containers, run the workload once and summarise.

        Containers and samples left over from a previous run are cleared first.

        Args:
            token_source: Classified tokens to seed from.
            workload: Closure called once with this engine.
            selection: Seed selection policy, defaults to a shuffled random prefix.

        Returns:
            Results table covering every container and operation.

        Raises:
            NoLexemesAvailable: If the token source is empty; raised before
                anything is timed.
        """
        self.reset()
        policy = selection if selection is not None else RandomPrefixSelection()
        seed_tokens = policy.select(token_source, self.rng)

        start = perf_ns()
        self.seed(seed_tokens)
        seed_ns = perf_ns() - start

        self._log_contents()

        start = perf_ns()
        workload(self)
        workload_ns = perf_ns() - start

        results = BenchmarkResults.from_container_stats(
            list(self.stats.values()),
            seed_count=self._seed_count,
            total_time_ns=seed_ns + workload_ns,
            z=self.config.z,
        )
        self._log_results(results)
        return results

    def seed(self, tokens: list[str]) -> None:
        """Insert each token into every container, timing each insert as ADD."""
        for token in tokens:
            self.add_lexeme(token)
        self._seed_count += len(tokens)

    def reset(self) -> None:
        """Empty every container and drop all samples."""
        for container in self.containers.values():
            container.clear()
        for stats in self.stats.values():
            stats.reset()
        self._seed_count = 0

    # ------------------------------------------------------------------ #
    # Operations applied to every container
    # ------------------------------------------------------------------ #

    def add_lexeme(self, lexeme: str) -> None:
        """Insert a lexeme into every container."""
        self._apply(OperationKind.ADD, lexeme)

    def search_lexeme(self, lexeme: str) -> None:
        """Search for a lexeme in every container."""
        self._apply(OperationKind.SEARCH, lexeme)

    def remove_lexeme(self, lexeme: str) -> None:
        """Remove a lexeme from every container."""
        self._apply(OperationKind.REMOVE, lexeme)

    def _apply(self, operation: OperationKind, lexeme: str) -> None:
        for kind, container in self.containers.items():
            self._record(kind, container, operation, lexeme)

    def _dispatch(
        self, container: ContainerAdapter, operation: OperationKind
    ) -> Callable[[str], bool]:
        """Bound container method for an operation.

        Raises:
            UnknownOperationKind: If `operation` is not an `OperationKind`.
        """
        if not isinstance(operation, OperationKind):
            raise UnknownOperationKind(f"Unknown operation type: {operation!r}")
        if operation is OperationKind.ADD:
            return container.insert
        if operation is OperationKind.SEARCH:
            return container.contains
        if operation is OperationKind.REMOVE:
            return container.remove
        raise UnknownOperationKind(f"Unknown operation type: {operation!r}")

    def _record(
        self,
        kind: str,
        container: ContainerAdapter,
        operation: OperationKind,
        lexeme: str,
    ) -> None:
        call = self._dispatch(container, operation)
        bucket = self.stats[kind][operation]
        start = perf_ns()
        hit = call(lexeme)
        elapsed = perf_ns() - start
        bucket.record(elapsed, hit=hit)

        if self.logger is not None and self.logger.is_enabled_for(LogLevel.TRACE):
            self.logger.trace(
                f"{operation.value} time for lexeme ({lexeme}) in structure ({container.kind}): {elapsed} ns"
            )

    # ------------------------------------------------------------------ #
    # Workload helpers
    # ------------------------------------------------------------------ #

    @property
    def reference(self) -> ContainerAdapter:
        """First configured container; workload helpers read from it."""
        return next(iter(self.containers.values()))

    def random_lexeme_count(self) -> int:
        """Random count in [1, size of the reference container], 1 when it is empty."""
        size = len(self.reference)
        if size == 0:
            return 1
        return int(self.rng.integers(1, size, endpoint=True))

    def lexeme_at(self, index: int) -> str | None:
        """Lexeme at `index` in the reference container's storage order.

        Returns:
            The lexeme, or None when the index is out of range.
        """
        if index < 0:
            return None
        for position, lexeme in enumerate(self.reference):
            if position == index:
                return lexeme
        return None

    def snapshot(self) -> dict[str, list[str]]:
        """Contents of every container in storage order."""
        return {kind: list(container) for kind, container in self.containers.items()}

    def stats_for(self, container: str, operation: OperationKind) -> OperationStats:
        """Live bucket for a container and operation.

        Raises:
            KeyError: If the container is not configured.
        """
        return self.stats[str(container)][operation]

    # ------------------------------------------------------------------ #
    # Logging
    # ------------------------------------------------------------------ #

    def _log_contents(self) -> None:
        if self.logger is None or not self.logger.is_enabled_for(LogLevel.DEBUG):
            return
        self.logger.debug("Extracted lexemes in each data structure:")
        for kind, contents in self.snapshot().items():
            self.logger.debug(f"{kind}: {contents}")

    def _log_results(self, results: BenchmarkResults) -> None:
        if self.logger is None:
            return
        self.logger.info("Timing analysis of each function:")
        for row in results:
            self.logger.info(
                f"{row.container} -> {row.operation.value}: {row.count} operations, "
                f"Average time: {row.mean_ns:.2f} ns"
            )
            self.logger.info(
                f"{row.container} -> {row.operation.value} 95% Confidence interval: "
                f"[{row.ci_lower_ns:.2f} ns, {row.ci_upper_ns:.2f} ns] (mean: {row.mean_ns:.2f} ns)"
            )
