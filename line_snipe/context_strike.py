"""
context_strike.py - Cuts a readable excerpt out of a matched line.

Strikes a fixed radius of context around the match, then, if the result is
still too long, trims again around the match itself. Every cut is marked
with an ellipsis. The ellipses are decoration and do not count toward
max_chars, so the returned string can be up to two characters longer.

Offsets are str indices (code points), so a cut never lands inside a
multi-byte character.
"""

ELLIPSIS = "…"


def window(line: str, match_start: int, match_end: int, context_chars: int) -> tuple[str, int]:
    """
    Stage 1: keep context_chars on each side of the match.

    Returns the windowed text and where the match now starts inside it.
    """
    context_start = max(0, match_start - context_chars)
    context_end = min(len(line), match_end + context_chars)

    prefix = ELLIPSIS if context_start > 0 else ""
    suffix = ELLIPSIS if context_end < len(line) else ""

    windowed = prefix + line[context_start:context_end] + suffix
    return windowed, match_start - context_start + len(prefix)


def cap(text: str, keyword_start: int, keyword_end: int, max_chars: int) -> str:
    """
    Stage 2: trim *text* to max_chars around [keyword_start, keyword_end).

    The budget left after the keyword is split evenly, extra char to the
    right. A keyword longer than max_chars gets cut too.
    """
    if len(text) <= max_chars:
        return text

    available = max_chars - (keyword_end - keyword_start)
    before = int(available / 2)  # toward zero, also when available < 0
    after = available - before

    trim_start = max(0, keyword_start - before)
    trim_end = min(len(text), keyword_end + after)

    trimmed = text[trim_start:trim_end]
    if trim_start > 0:
        trimmed = ELLIPSIS + trimmed
    if trim_end < len(text):
        trimmed += ELLIPSIS
    return trimmed


def extract(
    line: str,
    match_start: int,
    match_end: int,
    max_chars: int,
    context_chars: int,
) -> str:
    """Excerpt for the match at line[match_start:match_end]. Pure."""
    windowed, keyword_start = window(line, match_start, match_end, context_chars)
    keyword_end = keyword_start + (match_end - match_start)
    return cap(windowed, keyword_start, keyword_end, max_chars)
