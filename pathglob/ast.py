#!/usr/bin/env python3

"""Syntax tree produced by the parser.

Each variant is its own frozen dataclass and owns only its direct children.
Every node records the ``(start, end)`` span of the pattern text it came
from.
"""

from dataclasses import dataclass
from typing import Tuple, Union

__all__ = [
    "Span",
    "Literal",
    "AnyChar",
    "AnySingleSegment",
    "AnyMultiSegment",
    "CharClass",
    "Alternation",
    "Node",
    "Segment",
    "Pattern",
]

Span = Tuple[int, int]


@dataclass(frozen=True)
class Literal:
    """Text that must match exactly."""

    text: str
    span: Span

    def __repr__(self) -> str:
        return repr(self.text)


@dataclass(frozen=True)
class AnyChar:
    """``?``"""

    span: Span

    def __repr__(self) -> str:
        return "?"


@dataclass(frozen=True)
class AnySingleSegment:
    """``*``"""

    span: Span

    def __repr__(self) -> str:
        return "*"


@dataclass(frozen=True)
class AnyMultiSegment:
    """``**`` standing alone as a whole path segment."""

    span: Span

    def __repr__(self) -> str:
        return "**"


@dataclass(frozen=True)
class CharClass:
    """``[...]``; single characters are stored as ``(c, c)``."""

    negated: bool
    items: Tuple[Tuple[str, str], ...]
    span: Span

    def __repr__(self) -> str:
        members = "".join(lo if lo == hi else f"{lo}-{hi}" for lo, hi in self.items)
        return f"[{'!' if self.negated else ''}{members}]"


@dataclass(frozen=True)
class Alternation:
    """``{a,b,...}``; an empty branch matches the empty string."""

    branches: Tuple[Tuple["Node", ...], ...]
    span: Span

    def __repr__(self) -> str:
        inner = ",".join("".join(repr(n) for n in b) for b in self.branches)
        return "{" + inner + "}"


Node = Union[Literal, AnyChar, AnySingleSegment, AnyMultiSegment, CharClass, Alternation]


@dataclass(frozen=True)
class Segment:
    """The nodes between two path separators."""

    nodes: Tuple[Node, ...]
    span: Span

    @property
    def is_recursive(self) -> bool:
        return len(self.nodes) == 1 and isinstance(self.nodes[0], AnyMultiSegment)

    @property
    def is_literal(self) -> bool:
        return all(isinstance(node, Literal) for node in self.nodes)

    @property
    def literal_text(self) -> str:
        return "".join(node.text for node in self.nodes if isinstance(node, Literal))

    def __repr__(self) -> str:
        return "".join(repr(n) for n in self.nodes)


@dataclass(frozen=True)
class Pattern:
    """A parsed glob: its segments in order, plus the original text."""

    source: str
    segments: Tuple[Segment, ...]

    @property
    def is_literal(self) -> bool:
        """True if the pattern contains no wildcard, class or brace syntax."""
        return all(segment.is_literal for segment in self.segments)

    @property
    def literal_text(self) -> str:
        """The unescaped text of a literal pattern."""
        return "/".join(segment.literal_text for segment in self.segments)

    def __repr__(self) -> str:
        return f"Pattern({'/'.join(repr(s) for s in self.segments)})"
