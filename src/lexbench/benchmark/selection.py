"""Policies choosing which classified tokens seed the containers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from lexbench.errors import NoLexemesAvailable
from lexbench.lexeme.classifier import TokenSet


class SelectionPolicy(ABC):
    """Chooses the initial working set from a TokenSet."""

    @abstractmethod
    def select(self, tokens: TokenSet, rng: np.random.Generator) -> list[str]:
        """Return the tokens to seed with, in seeding order.

        Raises:
            NoLexemesAvailable: If the token set holds no tokens.
        """


def _flatten_or_raise(tokens: TokenSet) -> list[str]:
    flattened = tokens.flatten()
    if not flattened:
        raise NoLexemesAvailable("No lexemes available for performance analysis")
    return flattened


class RandomPrefixSelection(SelectionPolicy):
    """Shuffle all tokens and keep a prefix of uniformly random length in [1, n]."""

    def select(self, tokens: TokenSet, rng: np.random.Generator) -> list[str]:
        flattened = _flatten_or_raise(tokens)
        rng.shuffle(flattened)
        size = int(rng.integers(1, len(flattened), endpoint=True))
        return flattened[:size]


class AllTokensSelection(SelectionPolicy):
    """Keep every token in classification order."""

    def select(self, tokens: TokenSet, rng: np.random.Generator) -> list[str]:
        return _flatten_or_raise(tokens)
