"""Pattern-based classification of source text into lexical categories."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from lexbench.errors import InvalidInput
from lexbench.lexeme.category import LexemeCategory


class TokenSet(Mapping[LexemeCategory, tuple[str, ...]]):
    """Distinct tokens per lexical category, in first-seen order.

    Tokens are unique within a category. The same text may appear under
    more than one category (e.g. a keyword is also an identifier).

    Args:
        tokens: Mapping of category to its tokens. Duplicates within a
            category are dropped, keeping the first occurrence.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Mapping[LexemeCategory, list[str] | tuple[str, ...]] | None = None) -> None:
        self._tokens: dict[LexemeCategory, tuple[str, ...]] = {}
        for category, values in (tokens or {}).items():
            self._tokens[LexemeCategory(category)] = tuple(dict.fromkeys(values))

    def __getitem__(self, category: LexemeCategory) -> tuple[str, ...]:
        return self._tokens[category]

    def __iter__(self) -> Iterator[LexemeCategory]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenSet):
            return self._tokens == other._tokens
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._tokens.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{c.name}={list(v)}" for c, v in self._tokens.items())
        return f"TokenSet({inner})"

    @property
    def total(self) -> int:
        """Number of tokens summed over all categories."""
        return sum(len(values) for values in self._tokens.values())

    def flatten(self) -> list[str]:
        """All tokens as one sequence, category by category.

        A token present in two categories appears twice.
        """
        return [token for values in self._tokens.values() for token in values]


def _extract(source: str, category: LexemeCategory) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for match in category.pattern.finditer(source):
        seen.setdefault(match.group(), None)
    return tuple(seen)


def classify(source: str, category: LexemeCategory | None = None) -> TokenSet:
    """Classify source text into lexical categories.

    Args:
        source: Source text to scan.
        category: A single category to extract, or None for all categories.

    Returns:
        TokenSet keyed by every requested category (empty categories included).

    Raises:
        InvalidInput: If `source` is None or empty.
    """
    if not source:
        raise InvalidInput("Source text cannot be None or empty")

    categories = list(LexemeCategory) if category is None else [LexemeCategory(category)]
    return TokenSet({c: _extract(source, c) for c in categories})


def classify_all(source: str) -> TokenSet:
    """Classify source text into every lexical category."""
    return classify(source, None)
