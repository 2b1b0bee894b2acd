"""
scanner.py - Candidate file discovery.

Given one or more roots, walks them (whole subtree or direct children only),
applies the include/exclude filename filters, and returns the files to scan
in a stable order: entries sorted by name, subdirectories descended into
where they sort, roots concatenated in the order given.

Nothing in here raises for a bad path. Unreachable roots and unreadable
directories are logged, recorded as SearchWarning, and skipped.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Iterable, Iterator

from .models import CollectResult, FileCandidate, FilenameMatcher, SearchWarning
from .pattern_splinter import accepts_name

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _warn(warnings: list[SearchWarning] | None, path: Path, message: str) -> None:
    logger.warning(f"{path}: {message}")
    if warnings is not None:
        warnings.append(SearchWarning(path=path, message=message))


def _sorted_entries(directory: Path) -> list[os.DirEntry]:
    """List a directory, sorted by name. OSError propagates."""
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def _walk_directory(
    root: Path,
    recursive: bool,
    include: FilenameMatcher | None,
    exclude: FilenameMatcher | None,
    warnings: list[SearchWarning] | None,
) -> Iterator[FileCandidate]:
    """
    Depth-first walk of *root*.

    Uses an explicit stack of (directory, entry iterator) so deep trees don't
    hit the recursion limit. Symlinked directories are listed as entries but
    never descended into.
    """
    try:
        entries = _sorted_entries(root)
    except OSError as e:
        _warn(warnings, root, f"cannot read directory: {e}")
        return

    stack = [(root, iter(entries))]
    while stack:
        directory, pending = stack[-1]
        entry = next(pending, None)
        if entry is None:
            stack.pop()
            continue

        path = directory / entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file()
        except OSError as e:
            _warn(warnings, path, f"cannot stat: {e}")
            continue

        if is_dir:
            if not recursive:
                continue
            try:
                children = _sorted_entries(path)
            except OSError as e:
                _warn(warnings, path, f"cannot read directory: {e}")
                continue
            stack.append((path, iter(children)))
            continue

        if not is_file:
            logger.debug(f"Skipping non-regular entry {path}")
            continue

        if not accepts_name(entry.name, include, exclude):
            continue

        try:
            size = entry.stat().st_size
        except OSError as e:
            _warn(warnings, path, f"cannot stat: {e}")
            continue

        yield FileCandidate(path=path, size=size)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def iter_candidates(
    roots: Iterable[str | Path],
    recursive: bool = True,
    include: FilenameMatcher | None = None,
    exclude: FilenameMatcher | None = None,
    warnings: list[SearchWarning] | None = None,
) -> Iterator[FileCandidate]:
    """
    Lazily yield candidate files under *roots*.

    Args:
        roots:     Files or directories, searched in the order given.
        recursive: Descend into subdirectories (False: direct children only).
        include:   Optional filename predicate a file must satisfy.
        exclude:   Optional filename predicate that rejects a file outright.
        warnings:  If given, per-path failures are appended here.
    """
    for root in roots:
        root_path = Path(root)
        try:
            info = root_path.stat()
        except OSError as e:
            _warn(warnings, root_path, f"cannot access path: {e}")
            continue

        if stat.S_ISDIR(info.st_mode):
            yield from _walk_directory(root_path, recursive, include, exclude, warnings)
        elif accepts_name(root_path.name, include, exclude):
            yield FileCandidate(path=root_path, size=info.st_size)


def collect(
    roots: Iterable[str | Path],
    recursive: bool = True,
    include: FilenameMatcher | None = None,
    exclude: FilenameMatcher | None = None,
) -> CollectResult:
    """Materialize iter_candidates() together with the warnings it produced."""
    result = CollectResult()
    result.candidates = list(
        iter_candidates(roots, recursive, include, exclude, warnings=result.warnings)
    )
    logger.debug(
        f"Collected {len(result.candidates)} files ({len(result.warnings)} warnings)"
    )
    return result
