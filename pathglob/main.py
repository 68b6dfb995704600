#!/usr/bin/env python3

import logging
import os
import sys
from typing import Tuple

import click
from click.core import ParameterSource

from .config import get_default_options
from .errors import GlobError
from .matcher import Matcher, compile
from .options import Options


def configure_logging(log_file: str = "pathglob.log", console: bool = False) -> None:
    """Configure logging to write to a file and, optionally, the console.

    The log level is determined from the configuration file.
    It can be overridden by setting the PATHGLOB_DEBUG_LEVEL environment variable,
    and PATHGLOB_DEBUG forces DEBUG.

    The log directory is read from the configuration file's logger.path setting.
    By default, logs are written to $HOME/.pathglob.
    """
    from .config import get_logger_path, get_logger_verbosity

    log_dir = get_logger_path()
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_file)

    log_level_str = os.environ.get("PATHGLOB_DEBUG_LEVEL") or get_logger_verbosity()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    # Convert string to logging level, default to INFO if invalid
    log_level = log_level_map.get(log_level_str.upper(), logging.INFO)

    if os.environ.get("PATHGLOB_DEBUG"):
        log_level = logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear any existing handlers
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    file_handler = logging.FileHandler(log_path)
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logging.info(f"Logging configured. Log file: {log_path}")
    logging.info(f"Log level set to: {logging.getLevelName(log_level)}")


def _compile_or_exit(ctx: click.Context, pattern: str) -> Matcher:
    """Compile a pattern, printing a caret diagnostic and exiting with 2 on error."""
    options: Options = ctx.obj
    try:
        return compile(pattern, options)
    except GlobError as e:
        logging.debug(f"Rejected pattern {pattern!r}: {e}")
        click.echo(e.caret(), err=True)
        click.echo(f"error: {e}", err=True)
        ctx.exit(2)


@click.group()
@click.option(
    "--case-sensitive/--ignore-case",
    "-s/-i",
    default=True,
    help="Match letters exactly or regardless of case.",
)
@click.option(
    "--literal-separator/--no-literal-separator",
    default=True,
    help="Whether '*', '?' and classes refuse to match '/'.",
)
@click.option(
    "--literal-leading-dot/--no-literal-leading-dot",
    default=False,
    help="Whether a leading '.' in a segment needs a literal '.' in the pattern.",
)
@click.option("--debug", is_flag=True, help="Log to the console as well as the log file.")
@click.pass_context
def cli(
    ctx: click.Context,
    case_sensitive: bool,
    literal_separator: bool,
    literal_leading_dot: bool,
    debug: bool,
) -> None:
    """pathglob: compile glob patterns and test paths against them."""
    configure_logging(console=debug)

    # flags left at their defaults take the value from the config file
    defaults = get_default_options()

    def resolve(name: str, value: bool, fallback: bool) -> bool:
        if ctx.get_parameter_source(name) == ParameterSource.DEFAULT:
            return fallback
        return value

    ctx.obj = Options(
        case_sensitive=resolve(
            "case_sensitive", case_sensitive, defaults.case_sensitive
        ),
        require_literal_separator=resolve(
            "literal_separator", literal_separator, defaults.require_literal_separator
        ),
        require_literal_leading_dot=resolve(
            "literal_leading_dot", literal_leading_dot, defaults.require_literal_leading_dot
        ),
    )
    logging.debug(f"Matching with {ctx.obj}")


@cli.command()
@click.argument("pattern")
@click.pass_context
def translate(ctx: click.Context, pattern: str) -> None:
    """Print the regular expression a PATTERN compiles to."""
    click.echo(_compile_or_exit(ctx, pattern).regex)


@cli.command()
@click.argument("pattern")
@click.pass_context
def check(ctx: click.Context, pattern: str) -> None:
    """Validate PATTERN, pointing at the first error if there is one."""
    _compile_or_exit(ctx, pattern)
    click.echo("ok")


@cli.command(name="match")
@click.argument("pattern")
@click.argument("paths", nargs=-1)
@click.pass_context
def match_command(ctx: click.Context, pattern: str, paths: Tuple[str, ...]) -> None:
    """Print each PATH that matches PATTERN.

    Paths are read one per line from stdin when none are given. Exits with 0
    if any path matched and 1 otherwise.

    Examples:
        pathglob match 'src/**/*.py' src/a.py docs/b.md
        git ls-files | pathglob match '*.{c,h}'
    """
    matcher = _compile_or_exit(ctx, pattern)

    candidates = paths
    if not candidates:
        candidates = tuple(line.rstrip("\r\n") for line in sys.stdin)

    matched = 0
    for path in candidates:
        if matcher.matches(path):
            click.echo(path)
            matched += 1

    logging.debug(f"{matched} of {len(candidates)} paths matched {pattern!r}")
    ctx.exit(0 if matched else 1)

