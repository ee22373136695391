"""Tests for the default mixed workload."""

import numpy as np
import pytest

from lexbench.benchmark import (
    AllTokensSelection,
    BenchmarkConfig,
    BenchmarkEngine,
    OperationKind,
    default_workload,
)
from lexbench.lexeme import KEYWORDS, LexemeGenerator, classify


def _engine(seed: int = 3, **kwargs) -> BenchmarkEngine:
    return BenchmarkEngine(
        config=BenchmarkConfig(seed=seed, **kwargs),
        rng=np.random.default_rng(seed),
    )


class TestDefaultWorkload:
    """Test default_workload."""

    def test_one_add_per_cycle(self, sample_code):
        """Test each cycle adds exactly one generated lexeme to every container."""
        engine = _engine()
        tokens = classify(sample_code)
        results = engine.run(tokens, default_workload(25), AllTokensSelection())
        for kind in engine.containers:
            assert results.get(kind, OperationKind.ADD).count == tokens.total + 25

    def test_at_most_one_search_and_remove_per_cycle(self, sample_code):
        """Test searches and removes never exceed the cycle count."""
        engine = _engine()
        results = engine.run(classify(sample_code), default_workload(40), AllTokensSelection())
        for kind in engine.containers:
            assert results.get(kind, OperationKind.SEARCH).count <= 40
            assert results.get(kind, OperationKind.REMOVE).count <= 40

    def test_searches_hit_on_reference(self, sample_code):
        """Test searched lexemes come from the reference container."""
        engine = _engine(containers=["DEQUE", "LINKED_LIST"])
        results = engine.run(classify(sample_code), default_workload(30), AllTokensSelection())
        assert results.get("DEQUE", OperationKind.SEARCH).misses == 0

    def test_zero_cycles(self, sample_code):
        """Test a zero repeat count only seeds."""
        engine = _engine()
        results = engine.run(classify(sample_code), default_workload(0), AllTokensSelection())
        for kind in engine.containers:
            assert results.get(kind, OperationKind.SEARCH).count == 0
            assert results.get(kind, OperationKind.REMOVE).count == 0

    def test_negative_cycles(self):
        """Test a negative repeat count is rejected up front."""
        with pytest.raises(ValueError):
            default_workload(-1)

    def test_injected_generator(self, sample_code):
        """Test an injected generator supplies the added lexemes."""

        class KeywordOnly(LexemeGenerator):
            def generate_one(self) -> str:
                return "volatile"

        engine = _engine(containers=["DEQUE"])
        engine.run(
            classify(sample_code, None),
            default_workload(5, generator=KeywordOnly(), rng=np.random.default_rng(1)),
            AllTokensSelection(),
        )
        assert "volatile" in KEYWORDS
        assert "volatile" in engine.snapshot()["DEQUE"]

    def test_reproducible(self, sample_code):
        """Test the same seed yields the same final contents."""
        tokens = classify(sample_code)
        a, b = _engine(seed=11), _engine(seed=11)
        a.run(tokens, default_workload(20))
        b.run(tokens, default_workload(20))
        assert a.snapshot() == b.snapshot()

    def test_logs_each_token(self, sample_code, memory_logger, memory_handler):
        """Test the workload names each token at DEBUG."""
        engine = BenchmarkEngine(
            config=BenchmarkConfig(containers=["DEQUE"]),
            rng=np.random.default_rng(5),
            logger=memory_logger,
        )
        engine.run(classify(sample_code), default_workload(3), AllTokensSelection())
        adds = [m for m in memory_handler.messages if m.startswith("DEBUG Adding lexeme: ")]
        assert len(adds) == 3
