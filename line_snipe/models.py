"""line-snipe data models. Every struct that flows through the search pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable

from .errors import InvalidOptionError
from .pattern_splinter import compile_content_pattern, compile_filename_filter

FilenameMatcher = Callable[[str], bool]

# Hardcoded defaults, overridable per run through SearchConfig.build()
DEFAULT_MAX_CHARS = 200
DEFAULT_CONTEXT_CHARS = 20
READ_SIZE = 1024 * 1024  # readline() fragment limit, one logical line may span many


@dataclass(frozen=True)
class SearchConfig:
    """Everything a run needs, compiled once. Read-only from here on."""

    pattern: re.Pattern
    recursive: bool = True
    include: FilenameMatcher | None = None
    exclude: FilenameMatcher | None = None
    max_chars: int = DEFAULT_MAX_CHARS
    context_chars: int = DEFAULT_CONTEXT_CHARS
    text_only: bool = True
    read_size: int = READ_SIZE
    term: str = ""  # pattern as the user typed it, before case folding

    @classmethod
    def build(
        cls,
        pattern: str,
        *,
        ignore_case: bool = False,
        include: str = "",
        exclude: str = "",
        recursive: bool = True,
        max_chars: int = DEFAULT_MAX_CHARS,
        context_chars: int = DEFAULT_CONTEXT_CHARS,
        text_only: bool = True,
        read_size: int = READ_SIZE,
    ) -> SearchConfig:
        """
        Compile pattern and filters and validate the numeric options.

        Raises InvalidPatternError, InvalidFilterError or InvalidOptionError.
        """
        if max_chars < 0:
            raise InvalidOptionError(f"max_chars must be >= 0, got {max_chars}")
        if context_chars < 0:
            raise InvalidOptionError(f"context_chars must be >= 0, got {context_chars}")
        if read_size <= 0:
            raise InvalidOptionError(f"read_size must be > 0, got {read_size}")

        return cls(
            pattern=compile_content_pattern(pattern, ignore_case),
            recursive=recursive,
            include=compile_filename_filter(include),
            exclude=compile_filename_filter(exclude),
            max_chars=max_chars,
            context_chars=context_chars,
            text_only=text_only,
            read_size=read_size,
            term=pattern,
        )


@dataclass(frozen=True)
class FileCandidate:
    """A file the collector decided to scan."""

    path: Path
    size: int = 0


@dataclass(frozen=True)
class MatchRecord:
    """One match: where it is and the excerpt to show for it."""

    path: Path
    line_number: int
    excerpt: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "line_number": self.line_number,
            "excerpt": self.excerpt,
        }


@dataclass(frozen=True)
class SearchWarning:
    """A per-path failure that was logged and skipped."""

    path: Path
    message: str


@dataclass
class CollectResult:
    """Collector output: candidates in walk order plus what went wrong on the way."""

    candidates: list[FileCandidate] = field(default_factory=list)
    warnings: list[SearchWarning] = field(default_factory=list)


class ScanState(Enum):
    """Terminal state of a single file scan."""

    DONE = "done"  # EOF reached
    SKIPPED = "skipped"  # classified binary in text-only mode
    ERROR = "error"  # open or read failure


@dataclass
class FileScan:
    """Outcome of scanning one candidate. Records found before an error stand."""

    candidate: FileCandidate
    state: ScanState
    records: list[MatchRecord] = field(default_factory=list)
    warning: SearchWarning | None = None


@dataclass(frozen=True)
class RecordLayout:
    """Which prefixes the presentation layer should print."""

    show_filename: bool = False
    show_line_number: bool = False


@dataclass
class SnipeResult:
    """Complete search result."""

    term: str
    files_searched: int
    files_matched: int
    total_matches: int
    files_skipped: int
    records: list[MatchRecord]
    warnings: list[SearchWarning]
    layout: RecordLayout
    search_time_ms: float

    def to_lines(self) -> list[str]:
        """Grep-style output lines."""
        from .formatters import to_lines
        return to_lines(self)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable dict."""
        from .formatters import to_json
        return to_json(self)
