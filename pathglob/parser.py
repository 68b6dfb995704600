#!/usr/bin/env python3

"""Recursive descent parser from tokens to a :class:`~pathglob.ast.Pattern`.

Grammar::

    pattern     := segment { '/' segment }
    segment     := item*
    item        := LITERAL | ESCAPED_CHAR | '*' | '**' | '?' | class | alternation
    class       := '[' [ '!' | '^' ] member+ ']'
    member      := LITERAL | ESCAPED_CHAR | RANGE
    alternation := '{' branch { ',' branch } '}'
    branch      := ( item | '/' )*
"""

from typing import List, Sequence, Union

from .ast import (
    AnyChar,
    AnyMultiSegment,
    AnySingleSegment,
    Alternation,
    CharClass,
    Literal,
    Node,
    Pattern,
    Segment,
)
from .errors import ErrorKind, ParseError
from .lexer import Lexer, Token, TokenType

__all__ = [
    "GlobParser",
    "parse",
]


class GlobParser:
    def __init__(self) -> None:
        self.tokens: List[Token] = []
        self.pos = 0
        self.source = ""

    # ========= PUBLIC ==============
    def parse(self, pattern: str) -> Pattern:
        return self.parse_tokens(Lexer().lex(pattern), pattern)

    def parse_tokens(self, tokens: Sequence[Token], source: str = "") -> Pattern:
        self.tokens = list(tokens)
        self.pos = 0
        self.source = source

        segments = self.parse_segments()
        self.expect(TokenType.END)
        return Pattern(source, tuple(segments))

    # ========= Grammar ==========
    def parse_segments(self) -> List[Segment]:
        segments: List[Segment] = []
        while True:
            start = self.peek().start
            nodes = self.parse_sequence(in_brace=False)
            segment = Segment(tuple(demote_double_stars(nodes)), (start, self.peek().start))

            # a/**/**/b is the same as a/**/b
            if not (segment.is_recursive and segments and segments[-1].is_recursive):
                segments.append(segment)

            if not self.match(TokenType.PATH_SEPARATOR):
                return segments

    def parse_sequence(self, in_brace: bool) -> List[Node]:
        nodes: List[Node] = []
        while True:
            t = self.peek()
            if t.type in (TokenType.LITERAL, TokenType.ESCAPED_CHAR):
                self.next()
                append_literal(nodes, t.text, t.start, t.end)
            elif t.type == TokenType.STAR:
                self.next()
                nodes.append(AnySingleSegment(t.span))
            elif t.type == TokenType.DOUBLE_STAR:
                self.next()
                if in_brace:
                    nodes.extend(split_double_star(t.start))
                else:
                    nodes.append(AnyMultiSegment(t.span))
            elif t.type == TokenType.QUESTION:
                self.next()
                nodes.append(AnyChar(t.span))
            elif t.type == TokenType.CLASS_OPEN:
                nodes.append(self.parse_class())
            elif t.type == TokenType.BRACE_OPEN:
                nodes.append(self.parse_alternation())
            elif t.type == TokenType.PATH_SEPARATOR and in_brace:
                self.next()
                append_literal(nodes, t.text, t.start, t.end)
            elif t.type in (TokenType.BRACE_COMMA, TokenType.BRACE_CLOSE) and not in_brace:
                self.next()
                append_literal(nodes, t.text, t.start, t.end)
            else:
                return nodes

    def parse_class(self) -> CharClass:
        opener = self.expect(TokenType.CLASS_OPEN)
        negated = self.match(TokenType.CLASS_NEGATE)
        items = []

        while True:
            t = self.peek()
            if t.type == TokenType.CLASS_CLOSE:
                self.next()
                return CharClass(negated, tuple(items), (opener.start, t.end))
            elif t.type in (TokenType.LITERAL, TokenType.ESCAPED_CHAR):
                self.next()
                items.extend((c, c) for c in t.text)
            elif t.type == TokenType.CLASS_RANGE:
                self.next()
                if ord(t.lo) > ord(t.hi):
                    raise ParseError(
                        ErrorKind.INVALID_RANGE,
                        f"invalid character range '{t.lo}-{t.hi}'",
                        t.span,
                        self.source,
                    )
                items.append((t.lo, t.hi))
            else:
                raise ParseError(
                    ErrorKind.UNCLOSED_CLASS,
                    "unclosed character class '['",
                    opener.span,
                    self.source,
                )

    def parse_alternation(self) -> Alternation:
        opener = self.expect(TokenType.BRACE_OPEN)
        branches = []

        while True:
            branches.append(tuple(self.parse_sequence(in_brace=True)))
            t = self.peek()
            if t.type == TokenType.BRACE_COMMA:
                self.next()
            elif t.type == TokenType.BRACE_CLOSE:
                self.next()
                return Alternation(tuple(branches), (opener.start, t.end))
            else:
                raise ParseError(
                    ErrorKind.UNCLOSED_ALTERNATION,
                    "unclosed alternation '{'",
                    opener.span,
                    self.source,
                )

    # ========= Helpers ==========
    def peek(self) -> Token:
        return self.tokens[self.pos]

    def next(self) -> Token:
        t = self.tokens[self.pos]
        self.pos = min(self.pos + 1, len(self.tokens) - 1)
        return t

    def match(self, token_type: TokenType) -> bool:
        if self.peek().type == token_type:
            self.next()
            return True
        return False

    def expect(self, token_type: TokenType) -> Token:
        t = self.peek()
        if t.type != token_type:
            raise AssertionError(f"Expected {token_type} but found {t!r}")
        return self.next()


def append_literal(nodes: List[Node], text: str, start: int, end: int) -> None:
    """Append text, merging it into a directly preceding literal."""
    if nodes and isinstance(nodes[-1], Literal):
        prev = nodes[-1]
        nodes[-1] = Literal(prev.text + text, (prev.span[0], end))
    else:
        nodes.append(Literal(text, (start, end)))


def split_double_star(start: int) -> List[Node]:
    return [AnySingleSegment((start, start + 1)), AnySingleSegment((start + 1, start + 2))]


def demote_double_stars(nodes: List[Node]) -> List[Node]:
    """Turn ``**`` into two ``*`` unless it is the whole segment.

    ``a**b`` is accepted and means the same as ``a*b``.
    """
    if len(nodes) <= 1:
        return nodes
    result: List[Node] = []
    for node in nodes:
        if isinstance(node, AnyMultiSegment):
            result.extend(split_double_star(node.span[0]))
        else:
            result.append(node)
    return result


def parse(pattern: Union[str, Sequence[Token]], source: str = "") -> Pattern:
    """Parse a glob pattern, or an already scanned token list.

    Args:
        pattern: The pattern text, or the tokens returned by ``scan``
        source: The pattern text when tokens are passed, used in errors

    Returns:
        The parsed pattern

    Raises:
        LexError: If the pattern text cannot be scanned
        ParseError: If the pattern is malformed
    """
    if isinstance(pattern, str):
        return GlobParser().parse(pattern)
    return GlobParser().parse_tokens(pattern, source)
