"""
pattern_splinter.py - Turns user strings into matchers.

Content pattern: raw regex, optionally case-folded with an inline (?i).
Filename filters: shell-style globs ('*.go', 'test_?.py') translated to
anchored regexes and matched against the base filename only.
"""

import re
from typing import Callable

from .errors import InvalidFilterError, InvalidPatternError

CASE_FOLD = "(?i)"


def compile_content_pattern(pattern: str, ignore_case: bool = False) -> re.Pattern:
    """
    Compile the search pattern.

    ignore_case prepends an inline (?i); the user pattern, inline flags
    included, follows it unchanged.
    """
    if ignore_case:
        pattern = CASE_FOLD + pattern

    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def glob_to_regex(glob: str) -> str:
    """
    '*.go' -> '^.*\\.go$'

    Only '.', '*' and '?' are translated. Anything else reaches the regex
    engine untouched, so '[ab].txt' is a character class and '[ab.txt' fails.
    """
    pattern = glob.replace(".", "\\.")
    pattern = pattern.replace("*", ".*")
    pattern = pattern.replace("?", ".")
    return "^" + pattern + "$"


def compile_filename_filter(glob: str) -> Callable[[str], bool] | None:
    """Compile a glob into a filename predicate. Empty glob means no filter."""
    if not glob:
        return None

    try:
        regex = re.compile(glob_to_regex(glob))
    except re.error as e:
        raise InvalidFilterError(glob, str(e)) from e

    def matches(name: str) -> bool:
        return regex.fullmatch(name) is not None

    return matches


def accepts_name(
    name: str,
    include: Callable[[str], bool] | None,
    exclude: Callable[[str], bool] | None,
) -> bool:
    """Exclude wins over include. No include filter means everything not excluded."""
    if exclude is not None and exclude(name):
        return False
    if include is not None and not include(name):
        return False
    return True
