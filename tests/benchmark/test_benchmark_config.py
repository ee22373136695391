"""Tests for BenchmarkConfig and seed selection policies."""

import msgspec
import pytest

from lexbench.benchmark import (
    AllTokensSelection,
    BenchmarkConfig,
    RandomPrefixSelection,
)
from lexbench.containers import ContainerKind, DuplicatePolicy
from lexbench.errors import NoLexemesAvailable
from lexbench.lexeme import LexemeCategory, TokenSet


class TestBenchmarkConfig:
    """Test BenchmarkConfig validation."""

    def test_default(self):
        """Test the default configuration."""
        config = BenchmarkConfig.default()
        assert config.containers == [kind.value for kind in ContainerKind]
        assert config.duplicate_policies == {}
        assert config.repeat_count == 10
        assert config.seed is None
        assert config.z == 1.96
        assert config.category is None

    def test_defaults_are_not_shared(self):
        """Test mutable defaults are per instance."""
        a, b = BenchmarkConfig(), BenchmarkConfig()
        a.containers.append("X")
        assert "X" not in b.containers

    def test_policy_for(self):
        """Test per-kind policy overrides."""
        config = BenchmarkConfig(
            containers=["DEQUE", "STACK"],
            duplicate_policies={"DEQUE": DuplicatePolicy.SKIP},
        )
        assert config.policy_for("DEQUE") is DuplicatePolicy.SKIP
        assert config.policy_for("STACK") is None

    def test_empty_containers(self):
        """Test at least one container is required."""
        with pytest.raises(ValueError, match="Invalid containers"):
            BenchmarkConfig(containers=[])

    def test_duplicate_containers(self):
        """Test container kinds must be unique."""
        with pytest.raises(ValueError, match="unique"):
            BenchmarkConfig(containers=["DEQUE", "DEQUE"])

    def test_policy_for_unselected_kind(self):
        """Test overrides must name a selected container."""
        with pytest.raises(ValueError, match="Invalid duplicate_policies"):
            BenchmarkConfig(
                containers=["DEQUE"],
                duplicate_policies={"STACK": DuplicatePolicy.ALLOW},
            )

    def test_negative_repeat_count(self):
        """Test the repeat count cannot be negative."""
        with pytest.raises(ValueError, match="Invalid repeat_count"):
            BenchmarkConfig(repeat_count=-1)

    @pytest.mark.parametrize("z", [0.0, -1.96])
    def test_invalid_z(self, z):
        """Test z must be positive."""
        with pytest.raises(ValueError, match="Invalid z"):
            BenchmarkConfig(z=z)

    def test_decode_from_json(self):
        """Test a config decodes and validates from JSON."""
        config = msgspec.json.decode(
            b'{"containers": ["QUEUE"], "duplicate_policies": {"QUEUE": "allow"},'
            b' "repeat_count": 3, "category": "keyword"}',
            type=BenchmarkConfig,
        )
        assert config.policy_for("QUEUE") is DuplicatePolicy.ALLOW
        assert config.category is LexemeCategory.KEYWORD
        assert config.repeat_count == 3


class TestSelectionPolicies:
    """Test token selection for seeding."""

    TOKENS = TokenSet(
        {
            LexemeCategory.KEYWORD: ["if", "return"],
            LexemeCategory.IDENTIFIER: ["if", "x"],
            LexemeCategory.DELIMITER: [";"],
        }
    )

    def test_all_tokens(self, rng):
        """Test every token is kept in classification order."""
        assert AllTokensSelection().select(self.TOKENS, rng) == ["if", "return", "if", "x", ";"]

    def test_random_prefix(self, rng):
        """Test the prefix is a non-empty subset of the flattened tokens."""
        flattened = self.TOKENS.flatten()
        for _ in range(50):
            selected = RandomPrefixSelection().select(self.TOKENS, rng)
            assert 1 <= len(selected) <= len(flattened)
            remaining = list(flattened)
            for token in selected:
                remaining.remove(token)

    def test_random_prefix_covers_full_range(self, rng):
        """Test both extreme sizes are reachable."""
        sizes = {len(RandomPrefixSelection().select(self.TOKENS, rng)) for _ in range(500)}
        assert sizes == {1, 2, 3, 4, 5}

    def test_random_prefix_single_token(self, rng):
        """Test a single token is always selected."""
        tokens = TokenSet({LexemeCategory.LITERAL: ["7"]})
        assert RandomPrefixSelection().select(tokens, rng) == ["7"]

    @pytest.mark.parametrize("policy", [RandomPrefixSelection(), AllTokensSelection()])
    @pytest.mark.parametrize(
        "tokens",
        [TokenSet(), TokenSet({LexemeCategory.COMMENT: []})],
    )
    def test_empty(self, policy, tokens, rng):
        """Test nothing to seed is an error."""
        with pytest.raises(NoLexemesAvailable, match="No lexemes available"):
            policy.select(tokens, rng)
