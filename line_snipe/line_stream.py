"""
line_stream.py - Streams one file line by line and strikes every match.

Per file: open -> (classify, text-only mode) -> stream lines -> done.
Lines are read as readline(read_size) fragments, so a line longer than the
limit arrives in pieces; LineAssembler glues them back together and matching
only runs on the whole logical line.
"""

import logging
from typing import BinaryIO, Iterator

from .context_strike import extract
from .models import (
    READ_SIZE,
    FileCandidate,
    FileScan,
    MatchRecord,
    ScanState,
    SearchConfig,
    SearchWarning,
)
from .text_sniff import looks_like_text

logger = logging.getLogger(__name__)


class LineAssembler:
    """
    Reassembles fragments into logical lines.

    A fragment ending in a newline completes the line; anything else is a
    prefix and is held until the rest arrives (or EOF, see flush()). The
    held fragments are joined once, when the line completes.
    """

    def __init__(self):
        self._fragments: list[bytes] = []
        self.complete = True  # False while holding a partial line

    def feed(self, fragment: bytes) -> bytes | None:
        """Add a fragment. Returns the finished line, or None if more is coming."""
        self._fragments.append(fragment)
        if not fragment.endswith(b"\n"):
            self.complete = False
            return None
        return self._take()

    def flush(self) -> bytes | None:
        """At EOF: the held partial line, if any, is the last line."""
        if not self._fragments:
            return None
        return self._take()

    def _take(self) -> bytes:
        line = b"".join(self._fragments)
        self._fragments.clear()
        self.complete = True
        if line.endswith(b"\r\n"):
            return line[:-2]
        if line.endswith(b"\n"):
            return line[:-1]
        return line


def iter_lines(fh: BinaryIO, read_size: int = READ_SIZE) -> Iterator[tuple[int, str]]:
    """
    Yield (line_number, text) for each logical line, 1-based.

    The counter moves once per completed line, however many fragments the
    line took. Text is decoded as UTF-8, undecodable bytes replaced.
    """
    assembler = LineAssembler()
    line_number = 0

    while True:
        fragment = fh.readline(read_size)
        line = assembler.feed(fragment) if fragment else assembler.flush()
        if line is not None:
            line_number += 1
            yield line_number, line.decode("utf-8", errors="replace")
        if not fragment:
            return


def match_line(path, line_number: int, line: str, config: SearchConfig) -> list[MatchRecord]:
    """One record per non-overlapping match in *line*."""
    return [
        MatchRecord(
            path=path,
            line_number=line_number,
            excerpt=extract(line, m.start(), m.end(), config.max_chars, config.context_chars),
        )
        for m in config.pattern.finditer(line)
    ]


def scan_file(candidate: FileCandidate, config: SearchConfig) -> FileScan:
    """
    Scan a single candidate. Never raises for I/O problems.

    Open failure -> ERROR with no records. Read failure part way through ->
    ERROR, records found before the failure are kept. Binary file in
    text-only mode -> SKIPPED without reading past the sample.
    """
    path = candidate.path
    scan = FileScan(candidate=candidate, state=ScanState.DONE)

    try:
        fh = open(path, "rb")
    except OSError as e:
        return _failed(scan, f"cannot open file: {e}")

    with fh:
        try:
            if config.text_only and not looks_like_text(fh):
                logger.debug(f"Skipping binary file {path}")
                scan.state = ScanState.SKIPPED
                return scan

            for line_number, line in iter_lines(fh, config.read_size):
                scan.records.extend(match_line(path, line_number, line, config))
        except OSError as e:
            return _failed(scan, f"read error: {e}")

    return scan


def _failed(scan: FileScan, message: str) -> FileScan:
    logger.warning(f"{scan.candidate.path}: {message}")
    scan.state = ScanState.ERROR
    scan.warning = SearchWarning(path=scan.candidate.path, message=message)
    return scan
