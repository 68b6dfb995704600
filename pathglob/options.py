#!/usr/bin/env python3

from dataclasses import dataclass

__all__ = ["Options"]


@dataclass(frozen=True)
class Options:
    """Settings that change how a pattern is compiled.

    Attributes:
        case_sensitive: If False, letters match regardless of case
        require_literal_separator: If True, ``*``, ``?`` and classes never
            match ``/``; only a literal ``/`` or ``**`` can
        require_literal_leading_dot: If True, a ``.`` at the start of a path
            segment is only matched by a literal ``.`` in the pattern
    """

    case_sensitive: bool = True
    require_literal_separator: bool = True
    require_literal_leading_dot: bool = False
