#!/usr/bin/env python3

"""Error types raised while compiling a glob pattern.

Every error carries the ``(start, end)`` span of the offending text in the
original pattern so callers can point a caret at it.
"""

from enum import Enum
from typing import Optional, Tuple

__all__ = [
    "ErrorKind",
    "GlobError",
    "LexError",
    "ParseError",
    "CompileError",
]


class ErrorKind(Enum):
    UNTERMINATED_ESCAPE = "unterminated escape"
    UNCLOSED_CLASS = "unclosed character class"
    INVALID_RANGE = "invalid character range"
    UNCLOSED_ALTERNATION = "unclosed alternation"
    ENGINE_REJECTED = "regex engine rejected generated pattern"


class GlobError(ValueError):
    """Base class for all pattern errors.

    Attributes:
        kind: The error category
        message: Human readable description
        span: ``(start, end)`` character offsets into the pattern
        pattern: The pattern being compiled, when known
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        span: Tuple[int, int],
        pattern: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.span = span
        self.pattern = pattern
        super().__init__(
            f"Pattern syntax error near position {span[0]}: {message}"
        )

    @property
    def pos(self) -> int:
        return self.span[0]

    @property
    def byte_offset(self) -> int:
        """Offset of the error in the UTF-8 encoding of the pattern."""
        if self.pattern is None:
            return self.pos
        return len(self.pattern[: self.pos].encode("utf-8", "surrogateescape"))

    def caret(self) -> str:
        """Render the pattern with a marker under the offending text.

        Returns:
            Two lines: the pattern and a ``^`` marker aligned below it
        """
        if self.pattern is None:
            return self.message
        start, end = self.span
        width = max(1, end - start)
        return f"{self.pattern}\n{' ' * start}{'^' * width}"


class LexError(GlobError):
    """Raised by the lexer, e.g. for a trailing backslash."""


class ParseError(GlobError):
    """Raised by the parser for unbalanced or invalid syntax."""


class CompileError(GlobError):
    """Raised when ``re`` refuses the generated source.

    This always indicates a bug in the translator rather than a problem with
    the user's pattern.
    """
