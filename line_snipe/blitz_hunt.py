"""
blitz_hunt.py - The core. Fast in, fast out.

Sniper class with collect(), iter_scans(), hunt().
Pass 1 walks the roots for candidate files, pass 2 streams each candidate
line by line, one file at a time, in collection order.
"""

import logging
import time
from pathlib import Path
from typing import Iterable, Iterator

from .line_stream import scan_file
from .models import (
    CollectResult,
    FileCandidate,
    FileScan,
    RecordLayout,
    ScanState,
    SearchConfig,
    SnipeResult,
)
from .scanner import collect

logger = logging.getLogger(__name__)

DEFAULT_ROOTS = (".",)


def decide_layout(
    file_count: int,
    hide_filename: bool = False,
    show_line_number: bool = False,
) -> RecordLayout:
    """File names are worth showing once more than one file is searched, unless suppressed."""
    return RecordLayout(
        show_filename=file_count > 1 and not hide_filename,
        show_line_number=show_line_number,
    )


class Sniper:
    """
    Line search over files and directory trees.

        config = SearchConfig.build("TODO", include="*.py")
        result = Sniper(config).hunt(["src/"])
        print("\\n".join(result.to_lines()))
    """

    def __init__(self, config: SearchConfig):
        self.config = config

    def collect(self, roots: Iterable[str | Path] | None = None) -> CollectResult:
        """Pass 1: candidate files under *roots* (default: current directory)."""
        return collect(
            roots or DEFAULT_ROOTS,
            recursive=self.config.recursive,
            include=self.config.include,
            exclude=self.config.exclude,
        )

    def iter_scans(self, candidates: Iterable[FileCandidate]) -> Iterator[FileScan]:
        """Pass 2: scan candidates one after another. A failing file never stops the rest."""
        for candidate in candidates:
            yield scan_file(candidate, self.config)

    def hunt(
        self,
        roots: Iterable[str | Path] | None = None,
        *,
        hide_filename: bool = False,
        show_line_number: bool = False,
    ) -> SnipeResult:
        """
        Collect, scan everything, and aggregate.

        Args:
            roots: Files or directories to search (default: ".")
            hide_filename: Suppress the file name prefix in multi-file searches
            show_line_number: Ask for the line number prefix
        """
        start = time.perf_counter()

        collected = self.collect(roots)
        pass1_ms = (time.perf_counter() - start) * 1000
        logger.info(f"Pass 1: {len(collected.candidates)} files in {pass1_ms:.0f}ms")

        records = []
        warnings = list(collected.warnings)
        files_matched = 0
        files_skipped = 0

        for scan in self.iter_scans(collected.candidates):
            if scan.state is ScanState.SKIPPED:
                files_skipped += 1
            if scan.warning:
                warnings.append(scan.warning)
            if scan.records:
                files_matched += 1
                records.extend(scan.records)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Pass 2: {len(records)} matches in {files_matched} files "
            f"({files_skipped} binary skipped) in {elapsed_ms:.0f}ms"
        )

        return SnipeResult(
            term=self.config.term or self.config.pattern.pattern,
            files_searched=len(collected.candidates),
            files_matched=files_matched,
            total_matches=len(records),
            files_skipped=files_skipped,
            records=records,
            warnings=warnings,
            layout=decide_layout(len(collected.candidates), hide_filename, show_line_number),
            search_time_ms=elapsed_ms,
        )
