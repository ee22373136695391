"""Random synthetic lexemes used to drive benchmark workloads."""

from __future__ import annotations

import numpy as np

from lexbench.lexeme.category import KEYWORDS

OPERATORS: tuple[str, ...] = (
    "+", "-", "*", "/", "%", "++", "--", "==", "!=", "<", ">", "<=", ">=",
    "&&", "||", "!", "&", "|", "^", "~", "<<", ">>", ">>>", "=", "+=", "-=",
    "*=", "/=", "%=", "&=", "|=", "^=", "<<=", ">>=", ">>>=",
)

DELIMITERS: tuple[str, ...] = (";", ",", "(", ")", "{", "}", "[", "]")


class LexemeGenerator:
    """Generates random keywords, operators and delimiters.

    A pool is chosen uniformly first, then a lexeme uniformly within it, so
    each pool is drawn a third of the time regardless of its size.

    Args:
        rng: Random source. Defaults to a fresh unseeded generator.
    """

    POOLS: tuple[tuple[str, ...], ...] = (KEYWORDS, OPERATORS, DELIMITERS)

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()

    def generate_one(self) -> str:
        """Generate a single random lexeme."""
        pool = self.POOLS[int(self._rng.integers(len(self.POOLS)))]
        return pool[int(self._rng.integers(len(pool)))]

    def generate_many(self, count: int) -> list[str]:
        """Generate `count` random lexemes.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError(f"Invalid count; expected >=0 but got {count}")
        return [self.generate_one() for _ in range(count)]


_default_generator = LexemeGenerator()


def generate_random_lexeme() -> str:
    """Generate a single random lexeme from the process-wide generator."""
    return _default_generator.generate_one()


def generate_lexemes(count: int) -> list[str]:
    """Generate `count` random lexemes from the process-wide generator."""
    return _default_generator.generate_many(count)
