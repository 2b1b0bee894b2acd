"""
line-snipe - grep with trimmed excerpts

Finds regex matches line by line across files and directory trees and shows
each one as a short, ellipsis-marked excerpt centered on the match.

Usage:
    from line_snipe import SearchConfig, Sniper

    config = SearchConfig.build("def \\w+", include="*.py", context_chars=30)
    result = Sniper(config).hunt(["core/"])
    for line in result.to_lines():
        print(line)

CLI:
    line-snipe 'pattern' src/            # Recursive search
    line-snipe -n --include='*.go' main  # Line numbers, Go files only
    line-snipe --no-text-only 'x' blob/  # Binary files too
"""

from .blitz_hunt import Sniper, decide_layout
from .context_strike import ELLIPSIS, extract
from .errors import (
    InvalidFilterError,
    InvalidOptionError,
    InvalidPatternError,
    SnipeError,
)
from .line_stream import LineAssembler, iter_lines, match_line, scan_file
from .models import (
    CollectResult,
    FileCandidate,
    FileScan,
    MatchRecord,
    RecordLayout,
    ScanState,
    SearchConfig,
    SearchWarning,
    SnipeResult,
)
from .pattern_splinter import (
    accepts_name,
    compile_content_pattern,
    compile_filename_filter,
    glob_to_regex,
)
from .scanner import collect, iter_candidates
from .text_sniff import classify_path, looks_like_text

__version__ = "0.1.0"

__all__ = [
    "Sniper",
    "decide_layout",
    "ELLIPSIS",
    "extract",
    "SnipeError",
    "InvalidPatternError",
    "InvalidFilterError",
    "InvalidOptionError",
    "LineAssembler",
    "iter_lines",
    "match_line",
    "scan_file",
    "CollectResult",
    "FileCandidate",
    "FileScan",
    "MatchRecord",
    "RecordLayout",
    "ScanState",
    "SearchConfig",
    "SearchWarning",
    "SnipeResult",
    "accepts_name",
    "compile_content_pattern",
    "compile_filename_filter",
    "glob_to_regex",
    "collect",
    "iter_candidates",
    "classify_path",
    "looks_like_text",
]
