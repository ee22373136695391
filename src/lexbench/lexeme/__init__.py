"""Lexeme classification and generation."""

from .category import (
    KEYWORDS as KEYWORDS,
)
from .category import (
    LexemeCategory as LexemeCategory,
)
from .classifier import (
    TokenSet as TokenSet,
)
from .classifier import (
    classify as classify,
)
from .classifier import (
    classify_all as classify_all,
)
from .generator import (
    DELIMITERS as DELIMITERS,
)
from .generator import (
    OPERATORS as OPERATORS,
)
from .generator import (
    LexemeGenerator as LexemeGenerator,
)
from .generator import (
    generate_lexemes as generate_lexemes,
)
from .generator import (
    generate_random_lexeme as generate_random_lexeme,
)
