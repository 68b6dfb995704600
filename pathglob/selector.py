#!/usr/bin/env python3

"""Split a pattern into per-segment steps for a directory walker.

Nothing here touches the filesystem. A walker can use the plan to descend
one path component at a time: ``PRECISE`` steps name a single entry,
``WILDCARD`` steps filter the entries of a directory, and ``RECURSIVE``
steps descend into any number of directories.

A brace branch may contain ``/`` (``{a/b,c}/x``), and then no single
component can be tested on its own. From that segment on, the plan ends
with one ``TAIL`` step: the walker descends freely and tests each path,
relative to where the step starts, against the step's matcher.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence

from .ast import Alternation, Literal, Node
from .matcher import Matcher, compile
from .options import Options
from .parser import parse

__all__ = [
    "SelectorKind",
    "Selector",
    "plan",
]


class SelectorKind(Enum):
    PRECISE = auto()
    WILDCARD = auto()
    RECURSIVE = auto()
    TAIL = auto()


@dataclass(frozen=True)
class Selector:
    kind: SelectorKind
    text: str
    matcher: Optional[Matcher] = None
    options: Options = Options()

    def __post_init__(self) -> None:
        if self.kind in (SelectorKind.WILDCARD, SelectorKind.TAIL) and self.matcher is None:
            raise ValueError(f"{self.kind.name} selector {self.text!r} needs a matcher")

    def matches(self, name: str) -> bool:
        """Test a path component against this step.

        For ``TAIL`` steps ``name`` is the remaining relative path instead.
        """
        if self.kind == SelectorKind.RECURSIVE:
            return not (self.options.require_literal_leading_dot and name.startswith("."))
        if self.matcher is not None:
            return self.matcher.matches(name)
        if self.options.case_sensitive:
            return name == self.text
        return name.casefold() == self.text.casefold()


def _crosses_separator(nodes: Sequence[Node]) -> bool:
    for node in nodes:
        if isinstance(node, Literal) and "/" in node.text:
            return True
        if isinstance(node, Alternation) and any(
            _crosses_separator(branch) for branch in node.branches
        ):
            return True
    return False


def plan(pattern: str, options: Optional[Options] = None) -> List[Selector]:
    """Build the walking plan for a pattern.

    A trailing separator is dropped. A leading separator gives a ``PRECISE``
    step with empty text, standing for the root.

    Args:
        pattern: The glob pattern
        options: Matching options; defaults to ``Options()``

    Returns:
        One selector per path segment, or fewer if the plan ends in a
        ``TAIL`` step

    Raises:
        LexError: If the pattern ends with a lone backslash
        ParseError: If the pattern is malformed
    """
    options = options or Options()
    segments = list(parse(pattern).segments)
    if len(segments) > 1 and not segments[-1].nodes:
        segments.pop()

    selectors: List[Selector] = []
    for segment in segments:
        if segment.is_recursive:
            selectors.append(Selector(SelectorKind.RECURSIVE, "**", options=options))
        elif segment.is_literal:
            selectors.append(
                Selector(SelectorKind.PRECISE, segment.literal_text, options=options)
            )
        elif _crosses_separator(segment.nodes):
            text = pattern[segment.span[0] : segments[-1].span[1]]
            selectors.append(
                Selector(SelectorKind.TAIL, text, compile(text, options), options)
            )
            break
        else:
            text = pattern[segment.span[0] : segment.span[1]]
            selectors.append(
                Selector(SelectorKind.WILDCARD, text, compile(text, options), options)
            )
    return selectors
