#!/usr/bin/env python3

"""Compiled glob patterns and the cached ``compile`` entry point."""

import functools
import logging
import os
import re
from typing import Any, Optional, Union

from .compiler import compile_ast, compile_regex
from .options import Options
from .parser import parse

__all__ = [
    "Matcher",
    "compile",
    "purge",
]

PathLike = Union[str, bytes, "os.PathLike[Any]"]


class Matcher:
    """A compiled glob pattern.

    Instances are immutable and can be shared between threads. Candidates are
    matched as given: no ``\\`` to ``/`` conversion or other normalisation is
    done.
    """

    def __init__(self, pattern: str, options: Optional[Options] = None) -> None:
        self.pattern = pattern
        self.options = options or Options()

        ast = parse(pattern)
        self.regex = compile_ast(ast, self.options)
        self.re_pattern: "re.Pattern[str]" = compile_regex(
            self.regex, self.options, pattern
        )
        self.is_literal = ast.is_literal

        # literal, case sensitive patterns skip the regex engine
        self._literal: Optional[str] = (
            ast.literal_text if self.is_literal and self.options.case_sensitive else None
        )

    def matches(self, candidate: PathLike) -> bool:
        """Test whether the whole candidate string matches the pattern."""
        path = _to_str(candidate)
        if self._literal is not None:
            return path == self._literal
        return self.re_pattern.match(path) is not None

    __call__ = matches

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matcher):
            return NotImplemented
        return (self.pattern, self.options) == (other.pattern, other.options)

    def __hash__(self) -> int:
        return hash((self.pattern, self.options))

    def __str__(self) -> str:
        return self.pattern

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(pattern={self.pattern!r}, options={self.options!r})"


def _to_str(value: PathLike) -> str:
    if isinstance(value, str):
        return value
    return os.fsdecode(value)


@functools.lru_cache(maxsize=256)
def _compile_cached(pattern: str, options: Options) -> Matcher:
    logging.debug(f"Compiling glob {pattern!r} with {options}")
    matcher = Matcher(pattern, options)
    logging.debug(f"Glob {pattern!r} compiled to {matcher.regex!r}")
    return matcher


def compile(pattern: PathLike, options: Optional[Options] = None) -> Matcher:
    """Compile a glob pattern into a reusable matcher.

    Matchers are cached per ``(pattern, options)`` pair.

    Args:
        pattern: The glob pattern; bytes and path-like objects are decoded
            with ``os.fsdecode``
        options: Matching options; defaults to ``Options()``

    Returns:
        A Matcher for the pattern

    Raises:
        LexError: If the pattern ends with a lone backslash
        ParseError: If a class or alternation is malformed
        CompileError: If the generated regex is rejected by ``re``
    """
    return _compile_cached(_to_str(pattern), options or Options())


def purge() -> None:
    """Clear the compiled pattern cache."""
    _compile_cached.cache_clear()
