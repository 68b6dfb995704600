"""
Test for the glob_pattern module's pattern matching functionality.
"""

import pytest

from pathglob import ParseError
from pathglob import glob_pattern as glob


def test_simple_asterisk():
    """Test simple * pattern."""
    # * should match anything except slash
    assert glob.match("*.txt", "file1.txt")
    assert glob.match("*.txt", "a.txt")
    assert glob.match("*.txt", ".txt")
    assert not glob.match("*.txt", "dir/file.txt")
    assert not glob.match("*.txt", "file.py")


def test_question_mark():
    """Test ? pattern."""
    # ? should match any single character except slash
    assert glob.match("file?.txt", "file1.txt")
    assert glob.match("file?.txt", "fileA.txt")
    assert not glob.match("file?.txt", "file12.txt")
    assert not glob.match("file?.txt", "file.txt")
    assert not glob.match("file?.txt", "file/.txt")


def test_character_class():
    """Test character class patterns."""
    # [abc] should match any character in the brackets
    assert glob.match("file[123].txt", "file1.txt")
    assert glob.match("file[123].txt", "file2.txt")
    assert not glob.match("file[123].txt", "file4.txt")

    # [!abc] and [^abc] should match any character not in the brackets
    assert glob.match("file[!123].txt", "file4.txt")
    assert glob.match("file[!123].txt", "fileA.txt")
    assert not glob.match("file[!123].txt", "file1.txt")
    assert glob.match("file[^123].txt", "file4.txt")
    assert not glob.match("file[^123].txt", "file1.txt")

    # [a-z] should match any character in the range
    assert glob.match("file[a-z].txt", "filea.txt")
    assert glob.match("file[a-z].txt", "filez.txt")
    assert not glob.match("file[a-z].txt", "file1.txt")
    assert not glob.match("file[a-z].txt", "fileA.txt")


def test_class_members_that_look_like_syntax():
    """Test ], - and other metacharacters as class members."""
    assert glob.match("cache/[][!]/files", "cache/[/files")
    assert glob.match("cache/[][!]/files", "cache/]/files")
    assert glob.match("cache/[][!]/files", "cache/!/files")
    assert not glob.match("cache/[][!]/files", "cache/a/files")

    assert glob.match("cache/[[?*]/files", "cache/[/files")
    assert glob.match("cache/[[?*]/files", "cache/?/files")
    assert glob.match("cache/[[?*]/files", "cache/*/files")

    assert glob.match("cache/[]-]/files", "cache/]/files")
    assert glob.match("cache/[]-]/files", "cache/-/files")
    assert not glob.match("cache/[]-]/files", "cache/0/files")

    assert glob.match("[A-Fa-f0-9]", "B")
    assert glob.match("[A-Fa-f0-9]", "7")
    assert not glob.match("[!A-Fa-f0-9]", "b")


def test_leading_double_asterisk():
    """Test leading **/ pattern."""
    # **/ should match in all directories
    assert glob.match("**/file.txt", "file.txt")
    assert glob.match("**/file.txt", "a/file.txt")
    assert glob.match("**/file.txt", "a/b/file.txt")
    assert not glob.match("**/file.txt", "file1.txt")
    assert not glob.match("**/file.txt", "a/file1.txt")

    # **/foo/bar should match bar anywhere directly under foo
    assert glob.match("**/a/file.txt", "a/file.txt")
    assert glob.match("**/a/file.txt", "x/a/file.txt")
    assert not glob.match("**/a/file.txt", "a/b/file.txt")


def test_trailing_double_asterisk():
    """Test trailing /** pattern."""
    # /** should match everything inside, and the directory itself
    assert glob.match("a/**", "a")
    assert glob.match("a/**", "a/file.txt")
    assert glob.match("a/**", "a/b/file.txt")
    assert glob.match("a/**", "a/b/c/deep.txt")
    assert not glob.match("a/**", "file.txt")
    assert not glob.match("a/**", "x/file.txt")
    assert not glob.match("a/**", "ab/file.txt")


def test_middle_double_asterisk():
    """Test /**/pattern."""
    # /**/ should match zero or more directories
    assert glob.match("a/**/file.txt", "a/file.txt")
    assert glob.match("a/**/file.txt", "a/b/file.txt")
    assert glob.match("a/**/file.txt", "a/b/c/file.txt")
    assert not glob.match("a/**/file.txt", "file.txt")
    assert not glob.match("a/**/file.txt", "a/file.py")
    assert not glob.match("a/**/file.txt", "ab/file.txt")


def test_double_asterisk_inside_segment():
    """Test ** glued to other text, which behaves like a single *."""
    assert glob.match("a**b", "axyzb")
    assert glob.match("a**b", "ab")
    assert not glob.match("a**b", "ax/yb")
    assert glob.match("**.py", "setup.py")
    assert not glob.match("**.py", "pkg/setup.py")


def test_braces():
    """Test brace alternation."""
    # {s1,s2,s3} should match any of the strings
    assert glob.match("file.{txt,py}", "file.txt")
    assert glob.match("file.{txt,py}", "file.py")
    assert not glob.match("file.{txt,py}", "file.md")

    # Braces can be nested
    assert glob.match("file{a,{b,c}}.txt", "filea.txt")
    assert glob.match("file{a,{b,c}}.txt", "fileb.txt")
    assert glob.match("file{a,{b,c}}.txt", "filec.txt")
    assert not glob.match("file{a,{b,c}}.txt", "filed.txt")

    # Empty branches match the empty string
    assert glob.match("file{,.bak}", "file")
    assert glob.match("file{,.bak}", "file.bak")
    assert glob.match("x{a,}", "x")
    assert glob.match("x{,}", "x")

    # Branches may contain wildcards and separators
    assert glob.match("{src/*,docs}.md", "src/readme.md")
    assert glob.match("{src/*,docs}.md", "docs.md")
    assert not glob.match("{src/*,docs}.md", "src/a/readme.md")


def test_stray_brace_punctuation_is_literal():
    """Test , and } outside braces."""
    assert glob.match("a,b", "a,b")
    assert glob.match("a}b", "a}b")
    assert glob.match("{a,b}}", "a}")


def test_literal_separator_option():
    """Test * and ? crossing separators when allowed."""
    assert glob.match("*.txt", "dir/file.txt", require_literal_separator=False)
    assert glob.match("a?c", "a/c", require_literal_separator=False)
    assert glob.match("[!x]", "/", require_literal_separator=False)
    assert not glob.match("[!x]", "/")


def test_escaped_characters():
    """Test escaped special characters in patterns."""
    # Escaped special characters should be treated as literals
    assert glob.match(r"\*.txt", "*.txt")
    assert not glob.match(r"\*.txt", "a.txt")

    assert glob.match(r"\?.txt", "?.txt")
    assert not glob.match(r"\?.txt", "a.txt")

    assert glob.match(r"\[abc\].txt", "[abc].txt")
    assert not glob.match(r"\[abc\].txt", "a.txt")

    assert glob.match(r"\{a,b\}", "{a,b}")
    assert glob.match(r"\*\*/x", "**/x")
    assert not glob.match(r"\*\*/x", "a/x")


def test_combined_features():
    """Test combining different pattern features."""
    assert glob.match("**/[a-z]/{file,test}.{txt,py}", "a/file.txt")
    assert glob.match("**/[a-z]/{file,test}.{txt,py}", "x/y/z/test.py")
    assert not glob.match("**/[a-z]/{file,test}.{txt,py}", "1/file.txt")
    assert not glob.match("**/[a-z]/{file,test}.{txt,py}", "a/other.txt")


def test_filter_function():
    """Test the filter function."""
    paths = [
        "file1.txt",
        "file2.py",
        "dir/file.txt",
        "dir/file.py",
        "dir/subdir/file.txt",
    ]

    # Filter with a single pattern
    result = glob.filter(["*.txt"], paths)
    assert result == ["file1.txt"]

    # Filter with multiple patterns
    result = glob.filter(["*.txt", "*.py"], paths)
    assert result == ["file1.txt", "file2.py"]

    # Filter with a recursive pattern
    result = glob.filter(["**/file.txt"], paths)
    assert result == ["dir/file.txt", "dir/subdir/file.txt"]

    # Options are passed through
    result = glob.filter(["*.TXT"], paths, case_sensitive=False)
    assert result == ["file1.txt"]


def test_make_matcher_function():
    """Test the make_matcher function."""
    matcher = glob.make_matcher("*.txt")

    assert matcher("file.txt")
    assert not matcher("file.py")
    assert not matcher("dir/file.txt")

    matcher = glob.make_matcher("**/file.txt")

    assert matcher("file.txt")
    assert matcher("dir/file.txt")
    assert matcher("dir/subdir/file.txt")
    assert not matcher("file.py")


def test_translate_pattern_function():
    """Test that translate_pattern returns anchored regex source."""
    assert glob.translate_pattern("*.txt") == r"^[^/]*\.txt\Z"
    assert glob.translate_pattern("*.txt", require_literal_separator=False) == r"^.*\.txt\Z"


def test_complex_patterns():
    """Test more complex pattern combinations."""
    # Mix of ** and character classes
    assert glob.match("**/*[0-9].txt", "file1.txt")
    assert glob.match("**/*[0-9].txt", "dir/file2.txt")
    assert glob.match("**/*[0-9].txt", "a/b/c/file3.txt")
    assert not glob.match("**/*[0-9].txt", "file.txt")

    # Multiple ** patterns
    assert glob.match("**/a/**/b/**/c.txt", "a/b/c.txt")
    assert glob.match("**/a/**/b/**/c.txt", "x/a/y/b/z/c.txt")
    assert glob.match("**/a/**/b/**/c.txt", "a/1/2/b/c.txt")
    assert not glob.match("**/a/**/b/**/c.txt", "a/b/d.txt")

    assert glob.match("**/{a,b}/**/*.{txt,md}", "a/x/y/file.txt")
    assert glob.match("**/{a,b}/**/*.{txt,md}", "b/file.md")
    assert not glob.match("**/{a,b}/**/*.{txt,md}", "c/file.txt")
    assert not glob.match("**/{a,b}/**/*.{txt,md}", "a/file.py")


def test_edge_cases():
    """Test edge cases and corner cases."""
    # Empty pattern
    assert glob.match("", "")
    assert not glob.match("", "file.txt")

    # Empty path
    assert not glob.match("*.txt", "")

    # Just asterisks
    assert glob.match("*", "file.txt")
    assert glob.match("*", "")
    assert not glob.match("*", "nested/file.txt")

    # Just double asterisks
    assert glob.match("**", "")
    assert glob.match("**", "file.txt")
    assert glob.match("**", "nested/file.txt")

    # Pattern with just a slash
    assert glob.match("/", "/")
    assert not glob.match("/", "file.txt")

    # Pattern with trailing slash
    assert glob.match("dir/", "dir/")
    assert not glob.match("dir/", "dir")
    assert not glob.match("dir/", "dir/file.txt")

    # Consecutive separators need an empty component
    assert glob.match("a//b", "a//b")
    assert not glob.match("a//b", "a/b")

    # Candidates ending in a newline are not matched by a pattern without one
    assert not glob.match("file", "file\n")
    assert glob.match("*", "line\nbreak")

    # Escaping backslashes
    assert glob.match(r"file\\.txt", "file\\.txt")
    assert not glob.match(r"file\\.txt", "file.txt")

    # Unclosed character classes are errors
    with pytest.raises(ParseError):
        glob.match("file[abc.txt", "fileabc.txt")
