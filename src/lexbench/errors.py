"""Exception taxonomy for lexbench.

Every error raised by the harness derives from ``LexbenchError`` so callers
can catch the whole family at once. The concrete classes also derive from the
builtin exception a caller would otherwise expect (``ValueError`` for bad
inputs, ``RuntimeError`` for rendering failures).
"""

from __future__ import annotations


class LexbenchError(Exception):
    """Base class for all lexbench errors."""


class InvalidInput(LexbenchError, ValueError):
    """Source text handed to the classifier was empty or absent."""


class NoLexemesAvailable(LexbenchError, ValueError):
    """The token selection produced nothing to seed the containers with."""


class UnknownOperationKind(LexbenchError, ValueError):
    """The engine was asked to dispatch an operation it does not know."""


class ReportError(LexbenchError, RuntimeError):
    """A report sink failed to render the results."""
