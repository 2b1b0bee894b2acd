"""
text_sniff.py - Text vs binary heuristic.

Samples the head of a file and counts bytes that have no business in text:
NUL and other control characters (tab, LF and CR excepted), and UTF-8
continuation bytes (0x80-0xBF). 10% or more of those and the file is
treated as binary. Every continuation byte counts, including the ones
inside a well-formed multi-byte character, so text dominated by
multi-byte characters classifies as binary.
"""

import logging
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 1024
BINARY_RATIO = 0.1

_ALLOWED_CONTROL = frozenset(b"\t\n\r")


def count_non_text(sample: bytes) -> int:
    """Count bytes in *sample* that look like binary content."""
    return sum(
        1
        for b in sample
        if b == 0 or (b & 0xC0) == 0x80 or (b < 0x20 and b not in _ALLOWED_CONTROL)
    )


def looks_like_text(fh: BinaryIO) -> bool:
    """
    Classify an open binary file by its first SAMPLE_SIZE bytes.

    Rewinds to offset 0 afterwards so the caller reads from the start.
    An empty file is text.
    """
    sample = fh.read(SAMPLE_SIZE)
    fh.seek(0)

    if not sample:
        return True
    return count_non_text(sample) / len(sample) < BINARY_RATIO


def classify_path(path: Path | str) -> bool:
    """looks_like_text() for a path. OSError propagates."""
    with open(path, "rb") as fh:
        is_text = looks_like_text(fh)
    logger.debug(f"{path}: {'text' if is_text else 'binary'}")
    return is_text
