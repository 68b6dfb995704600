"""
Function-style helpers over the compiled matcher, for callers that just need a yes/no answer.
"""

from typing import Any, Callable, List, Sequence

from .compiler import translate
from .matcher import compile
from .options import Options


def _options(
    case_sensitive: bool = True,
    require_literal_separator: bool = True,
    require_literal_leading_dot: bool = False,
) -> Options:
    return Options(
        case_sensitive=case_sensitive,
        require_literal_separator=require_literal_separator,
        require_literal_leading_dot=require_literal_leading_dot,
    )


def translate_pattern(pattern: str, **kwargs: Any) -> str:
    """
    Translate a glob pattern to a regular expression pattern.

    Args:
        pattern: The glob pattern to translate
        **kwargs: Option fields (case_sensitive, require_literal_separator,
                  require_literal_leading_dot)

    Returns:
        Regular expression pattern string
    """
    return translate(pattern, _options(**kwargs))


def make_matcher(pattern: str, **kwargs: Any) -> Callable[[str], bool]:
    """
    Create a matcher function that matches paths against the given pattern.

    Args:
        pattern: The glob pattern to match against
        **kwargs: Option fields, see translate_pattern

    Returns:
        A function that takes a path string and returns True if it matches
    """
    return compile(pattern, _options(**kwargs)).matches


def match(pattern: str, path: str, **kwargs: Any) -> bool:
    """
    Test whether a path matches the given pattern.

    Args:
        pattern: The glob pattern to match against
        path: The path to test
        **kwargs: Option fields, see translate_pattern

    Returns:
        True if the path matches the pattern, False otherwise
    """
    return make_matcher(pattern, **kwargs)(path)


def filter(patterns: Sequence[str], paths: Sequence[str], **kwargs: Any) -> List[str]:
    """
    Filter a list of paths to those that match any of the given patterns.

    Args:
        patterns: List of glob patterns
        paths: List of paths to filter
        **kwargs: Option fields, see translate_pattern

    Returns:
        List of paths that match any of the patterns, in their original order
    """
    matchers = [make_matcher(pattern, **kwargs) for pattern in patterns]
    return [path for path in paths if any(matcher(path) for matcher in matchers)]
