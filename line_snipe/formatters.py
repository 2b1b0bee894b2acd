"""
formatters.py - grep-style lines + JSON output for line-snipe results.
"""

from typing import Any

from .models import MatchRecord, RecordLayout


def format_record(record: MatchRecord, layout: RecordLayout) -> str:
    """[path:][lineNum:]excerpt"""
    parts = []
    if layout.show_filename:
        parts.append(f"{record.path}:")
    if layout.show_line_number:
        parts.append(f"{record.line_number}:")
    parts.append(record.excerpt)
    return "".join(parts)


def to_lines(result) -> list[str]:
    """Every record of a SnipeResult, formatted with its layout."""
    return [format_record(r, result.layout) for r in result.records]


def to_json(result) -> dict[str, Any]:
    """JSON-serializable dict."""
    return {
        "term": result.term,
        "files_searched": result.files_searched,
        "files_matched": result.files_matched,
        "files_skipped": result.files_skipped,
        "total_matches": result.total_matches,
        "search_time_ms": result.search_time_ms,
        "matches": [r.to_dict() for r in result.records],
        "warnings": [
            {"path": str(w.path), "message": w.message}
            for w in result.warnings
        ],
    }
