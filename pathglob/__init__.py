#!/usr/bin/env python3

from .compiler import compile_ast, translate
from .errors import CompileError, ErrorKind, GlobError, LexError, ParseError
from .lexer import Token, TokenType, scan
from .matcher import Matcher, compile, purge
from .options import Options
from .parser import parse
from .selector import Selector, SelectorKind, plan

__all__ = [
    "compile",
    "compile_ast",
    "translate",
    "purge",
    "scan",
    "parse",
    "plan",
    "Matcher",
    "Options",
    "Selector",
    "SelectorKind",
    "Token",
    "TokenType",
    "ErrorKind",
    "GlobError",
    "LexError",
    "ParseError",
    "CompileError",
]
