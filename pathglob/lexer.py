#!/usr/bin/env python3

"""Turns a raw glob pattern into a flat list of positioned tokens."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

from .errors import ErrorKind, LexError

__all__ = [
    "TokenType",
    "Token",
    "Lexer",
    "scan",
]

SEPARATOR = "/"
ESCAPE = "\\"
NEGATE_CHARS = "!^"


class TokenType(Enum):
    LITERAL = auto()  # run of plain characters
    STAR = auto()  # *
    DOUBLE_STAR = auto()  # **
    QUESTION = auto()  # ?
    CLASS_OPEN = auto()  # [
    CLASS_CLOSE = auto()  # ]
    CLASS_NEGATE = auto()  # ! or ^ right after [
    CLASS_RANGE = auto()  # a-z inside a class
    BRACE_OPEN = auto()  # {
    BRACE_COMMA = auto()  # , inside braces
    BRACE_CLOSE = auto()  # }
    PATH_SEPARATOR = auto()  # /
    ESCAPED_CHAR = auto()  # \x
    END = auto()  # end of pattern


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    start: int
    end: int

    @property
    def span(self) -> Tuple[int, int]:
        return (self.start, self.end)

    @property
    def lo(self) -> str:
        return self.text[0]

    @property
    def hi(self) -> str:
        return self.text[-1]

    def __repr__(self) -> str:
        if self.type in (TokenType.LITERAL, TokenType.ESCAPED_CHAR):
            return f"{self.type.name}({self.text!r})@{self.start}"
        if self.type == TokenType.CLASS_RANGE:
            return f"CLASS_RANGE({self.lo!r}, {self.hi!r})@{self.start}"
        return f"{self.type.name}@{self.start}"


class Lexer:
    """Single-use scanner over one pattern.

    Class and brace delimiters are recognised from context (a ``,`` is only a
    branch separator inside braces, a ``-`` only forms a range inside a
    class) but nothing here checks that they balance.
    """

    def lex(self, pattern: str) -> List[Token]:
        if pattern is None:
            raise ValueError("pattern == None")

        self.pattern = pattern
        self.tokens: List[Token] = []
        self.brace_depth = 0
        self._literal_start: Optional[int] = None

        n = len(pattern)
        i = 0
        while i < n:
            c = pattern[i]

            if c == ESCAPE:
                self._flush(i)
                char, end = self._read_escape(i)
                self._emit(TokenType.ESCAPED_CHAR, char, i, end)
                i = end
            elif c == "*":
                self._flush(i)
                if i + 1 < n and pattern[i + 1] == "*":
                    self._emit(TokenType.DOUBLE_STAR, "**", i, i + 2)
                    i += 2
                else:
                    self._emit(TokenType.STAR, c, i, i + 1)
                    i += 1
            elif c == "?":
                self._flush(i)
                self._emit(TokenType.QUESTION, c, i, i + 1)
                i += 1
            elif c == "[":
                self._flush(i)
                self._emit(TokenType.CLASS_OPEN, c, i, i + 1)
                i = self._lex_class(i + 1)
            elif c == "{":
                self._flush(i)
                self._emit(TokenType.BRACE_OPEN, c, i, i + 1)
                self.brace_depth += 1
                i += 1
            elif c == "," and self.brace_depth > 0:
                self._flush(i)
                self._emit(TokenType.BRACE_COMMA, c, i, i + 1)
                i += 1
            elif c == "}" and self.brace_depth > 0:
                self._flush(i)
                self._emit(TokenType.BRACE_CLOSE, c, i, i + 1)
                self.brace_depth -= 1
                i += 1
            elif c == SEPARATOR:
                self._flush(i)
                self._emit(TokenType.PATH_SEPARATOR, c, i, i + 1)
                i += 1
            else:
                if self._literal_start is None:
                    self._literal_start = i
                i += 1

        self._flush(n)
        self._emit(TokenType.END, "", n, n)
        return self.tokens

    def _lex_class(self, i: int) -> int:
        """Scan the members of a class whose ``[`` ends just before ``i``.

        Returns the index to resume from. Scanning stops without a
        CLASS_CLOSE token at a separator or the end of input; the parser
        reports that as an unclosed class.
        """
        pattern = self.pattern
        n = len(pattern)

        if i < n and pattern[i] in NEGATE_CHARS:
            self._emit(TokenType.CLASS_NEGATE, pattern[i], i, i + 1)
            i += 1

        first = True
        while i < n:
            c = pattern[i]
            if c == SEPARATOR:
                return i
            # a ']' right after the opener is a member, not the close
            if c == "]" and not first:
                self._emit(TokenType.CLASS_CLOSE, c, i, i + 1)
                return i + 1
            first = False

            lo, lo_escaped, lo_end = self._read_class_char(i)
            if (
                lo_end + 1 < n
                and pattern[lo_end] == "-"
                and pattern[lo_end + 1] not in "]" + SEPARATOR
            ):
                hi, _, hi_end = self._read_class_char(lo_end + 1)
                self._emit(TokenType.CLASS_RANGE, lo + hi, i, hi_end)
                i = hi_end
            else:
                token_type = TokenType.ESCAPED_CHAR if lo_escaped else TokenType.LITERAL
                self._emit(token_type, lo, i, lo_end)
                i = lo_end

        return i

    def _read_class_char(self, i: int) -> Tuple[str, bool, int]:
        if self.pattern[i] == ESCAPE:
            char, end = self._read_escape(i)
            return char, True, end
        return self.pattern[i], False, i + 1

    def _read_escape(self, i: int) -> Tuple[str, int]:
        if i + 1 >= len(self.pattern):
            raise LexError(
                ErrorKind.UNTERMINATED_ESCAPE,
                "pattern ends with an unterminated escape '\\'",
                (i, i),
                self.pattern,
            )
        return self.pattern[i + 1], i + 2

    def _flush(self, end: int) -> None:
        if self._literal_start is not None:
            start = self._literal_start
            self._literal_start = None
            self._emit(TokenType.LITERAL, self.pattern[start:end], start, end)

    def _emit(self, token_type: TokenType, text: str, start: int, end: int) -> None:
        self.tokens.append(Token(token_type, text, start, end))


def scan(pattern: str) -> List[Token]:
    """Tokenize a glob pattern.

    Args:
        pattern: The glob pattern to scan

    Returns:
        The tokens of the pattern, terminated by an END token

    Raises:
        LexError: If the pattern ends with a lone backslash
    """
    return Lexer().lex(pattern)
