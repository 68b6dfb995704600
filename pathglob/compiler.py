#!/usr/bin/env python3

"""Translate a parsed glob into Python regular expression source."""

import logging
import re
from typing import List, Optional, Sequence

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
from .errors import CompileError, ErrorKind
from .options import Options
from .parser import parse

__all__ = [
    "compile_ast",
    "compile_regex",
    "regex_flags",
    "translate",
]

SEP = "/"

_ANY_CHAR = r"."
_ANY_CHAR_NO_SEP = r"[^/]"
_STAR = r".*"
_STAR_NO_SEP = r"[^/]*"
# zero or more whole segments, each followed by a separator
_SEGMENTS = r"(?:%s/)*"
_NO_DOT = r"(?!\.)"
# only refuses a dot that sits right after a separator or at the start
_NO_DOT_AFTER_SEP = r"(?!(?<![^/])\.)"
_NO_SEP = r"(?!/)"
_OPTIONAL = r"(?:%s)?"
_GROUP = r"(?:%s)"
_BOS = r"^"
_EOS = r"\Z"

# where a node sits in its path segment
_AT_START = 0
_MAYBE_AT_START = 1
_INSIDE = 2

# characters with a meaning inside a regex character set
_CLASS_SPECIAL = frozenset("\\]^-[")


class _Translator:
    def __init__(self, options: Options) -> None:
        self.options = options
        self.star = _STAR_NO_SEP if options.require_literal_separator else _STAR
        self.any_char = _ANY_CHAR_NO_SEP if options.require_literal_separator else _ANY_CHAR

    def translate(self, pattern: Pattern) -> str:
        out: List[str] = []
        segments = pattern.segments
        last = len(segments) - 1
        need_sep = False

        for i, segment in enumerate(segments):
            if not segment.is_recursive:
                if need_sep:
                    out.append(SEP)
                out.append(self.segment(segment))
                need_sep = True
            elif last == 0:
                # the whole pattern is **
                out.append(self.any_path())
            elif i == last:
                if i == 1 and not segments[0].nodes:
                    # /** under the root
                    out.append(SEP + self.any_path())
                else:
                    out.append(_OPTIONAL % (SEP + self.any_path()))
            else:
                if need_sep:
                    out.append(SEP)
                out.append(_SEGMENTS % self.any_segment())
                need_sep = False

        return _BOS + "".join(out) + _EOS

    def any_segment(self) -> str:
        if self.options.require_literal_leading_dot:
            return _NO_DOT + _STAR_NO_SEP
        return _STAR_NO_SEP

    def any_path(self) -> str:
        if self.options.require_literal_leading_dot:
            seg = self.any_segment()
            return _OPTIONAL % f"{seg}(?:/{seg})*"
        return _STAR

    def segment(self, segment: Segment) -> str:
        return self.sequence(segment.nodes, _AT_START)

    def sequence(self, nodes: Sequence[Node], position: int) -> str:
        out: List[str] = []
        for node in nodes:
            out.append(self.node(node, position))
            position = _position_after(node, position)
        return "".join(out)

    def node(self, node: Node, position: int) -> str:
        guard = ""
        if self.options.require_literal_leading_dot:
            if position == _AT_START:
                guard = _NO_DOT
            elif position == _MAYBE_AT_START:
                guard = _NO_DOT_AFTER_SEP

        if isinstance(node, Literal):
            return re.escape(node.text)
        elif isinstance(node, AnyChar):
            return guard + self.any_char
        elif isinstance(node, AnySingleSegment):
            return guard + self.star
        elif isinstance(node, CharClass):
            return guard + self.char_class(node)
        elif isinstance(node, Alternation):
            branches = [self.sequence(b, position) for b in node.branches]
            return _GROUP % "|".join(branches)
        elif isinstance(node, AnyMultiSegment):
            # only reachable for hand built trees; the parser never leaves **
            # next to anything else
            return self.star + self.star
        raise TypeError(f"unknown glob node {node!r}")

    def char_class(self, node: CharClass) -> str:
        body = "".join(
            _escape_class_char(lo) if lo == hi
            else f"{_escape_class_char(lo)}-{_escape_class_char(hi)}"
            for lo, hi in node.items
        )
        if node.negated:
            if self.options.require_literal_separator:
                body += SEP
            return f"[^{body}]"
        if self.options.require_literal_separator and _class_contains(node, SEP):
            return f"{_NO_SEP}[{body}]"
        return f"[{body}]"


def _escape_class_char(c: str) -> str:
    if c in _CLASS_SPECIAL:
        return "\\" + c
    return c


def _position_after(node: Node, position: int) -> int:
    """Where the text following ``node`` sits relative to a segment start.

    A segment can begin inside a brace branch after a literal ending in ``/``,
    and an alternation with an empty branch leaves the position unchanged.
    """
    if isinstance(node, Literal):
        if node.text.endswith(SEP):
            return _AT_START
        return position if not node.text else _INSIDE
    if isinstance(node, Alternation):
        ends = {_branch_position_after(b, position) for b in node.branches}
        if ends == {_AT_START}:
            return _AT_START
        if ends & {_AT_START, _MAYBE_AT_START}:
            return _MAYBE_AT_START
    return _INSIDE


def _branch_position_after(nodes: Sequence[Node], position: int) -> int:
    for node in nodes:
        position = _position_after(node, position)
    return position


def _class_contains(node: CharClass, c: str) -> bool:
    return any(lo <= c <= hi for lo, hi in node.items)


def compile_ast(pattern: Pattern, options: Optional[Options] = None) -> str:
    """Emit anchored regex source equivalent to a parsed glob.

    Args:
        pattern: The parsed pattern
        options: Matching options; defaults to ``Options()``

    Returns:
        Regular expression source matching exactly the candidates the glob
        matches
    """
    return _Translator(options or Options()).translate(pattern)


def translate(pattern: str, options: Optional[Options] = None) -> str:
    """Translate glob text straight to regex source.

    Raises:
        LexError: If the pattern ends with a lone backslash
        ParseError: If the pattern is malformed
    """
    return compile_ast(parse(pattern), options)


def regex_flags(options: Options) -> int:
    flags = re.DOTALL
    if not options.case_sensitive:
        flags |= re.IGNORECASE
    return flags


def compile_regex(
    source: str, options: Options, pattern: str = ""
) -> "re.Pattern[str]":
    """Hand generated source to ``re``.

    Raises:
        CompileError: If ``re`` rejects the source, which means the
            translator produced invalid syntax
    """
    try:
        return re.compile(source, regex_flags(options))
    except re.error as e:
        logging.error(f"Generated regex {source!r} for glob {pattern!r} was rejected: {e}")
        raise CompileError(
            ErrorKind.ENGINE_REJECTED,
            f"regex engine rejected generated pattern: {e}",
            (0, len(pattern)),
            pattern,
        ) from e
