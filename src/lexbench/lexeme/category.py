"""Lexical categories and the pattern each one is matched with."""

from __future__ import annotations

import re
from enum import StrEnum

KEYWORDS: tuple[str, ...] = (
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while",
)


class LexemeCategory(StrEnum):
    """Lexical category of a token.

    Iteration order is the order categories are reported in. Each member
    carries exactly one compiled pattern, see `pattern`.
    """

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"
    DELIMITER = "delimiter"
    LITERAL = "literal"
    COMMENT = "comment"

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled pattern matching tokens of this category."""
        return _PATTERNS[self]

    @classmethod
    def parse(cls, name: str) -> LexemeCategory:
        """Resolve a category from its value or member name, case-insensitively.

        Raises:
            ValueError: If no category matches.
        """
        key = name.strip().lower()
        for category in cls:
            if key in (category.value, category.name.lower()):
                return category
        raise ValueError(
            f"Invalid lexeme category; expected one of {[c.value for c in cls]} but got {name!r}"
        )


# Identifier overlaps keyword: a reserved word lands in both sets.
_PATTERNS: dict[LexemeCategory, re.Pattern[str]] = {
    LexemeCategory.KEYWORD: re.compile(r"\b(?:" + "|".join(KEYWORDS) + r")\b"),
    LexemeCategory.IDENTIFIER: re.compile(r"\b[a-zA-Z_][a-zA-Z0-9_]*\b"),
    LexemeCategory.OPERATOR: re.compile(r"[+\-*/%=<>!&|]+"),
    LexemeCategory.DELIMITER: re.compile(r"[{}();,]"),
    LexemeCategory.LITERAL: re.compile(r'".*?"|\d+'),
    LexemeCategory.COMMENT: re.compile(r"//.*|/\*.*?\*/"),
}
