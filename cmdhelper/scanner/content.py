"""Recursive content search — literal substring matches across a directory tree."""

from pathlib import Path

import structlog

from ..models import FileMatches

log = structlog.get_logger(__name__)


def _scan_file(path: Path, needle: str) -> list[tuple[int, str]]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        # Binary or unreadable: best effort
        return []
    return [(n, line) for n, line in enumerate(text.splitlines(), start=1) if needle in line]


def _walk(needle: str, current: Path, remaining: int, results: list[FileMatches]) -> None:
    try:
        entries = list(current.iterdir())
    except OSError:
        return
    for entry in entries:
        if entry.is_file():
            lines = _scan_file(entry, needle)
            if lines:
                results.append(FileMatches(path=entry, lines=lines))
        elif entry.is_dir() and remaining > 0:
            _walk(needle, entry, remaining - 1, results)


def search_content(needle: str, root: str | Path, depth: int = 3, limit: int = 0) -> list[FileMatches]:
    """
    Find every line containing needle in files under root.

    Directories are entered while depth > 0, so depth=0 scans only the files
    directly in root. limit > 0 keeps at most that many lines per file; it
    does not cap the number of files. Order follows the filesystem's listing.
    """
    results: list[FileMatches] = []
    _walk(needle, Path(root), depth, results)
    if limit > 0:
        for fm in results:
            fm.lines = fm.lines[:limit]
    log.debug("content search done", needle=needle, root=str(root), files=len(results))
    return results
