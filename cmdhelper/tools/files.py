"""File search, copy and move."""

import shutil
from pathlib import Path
from typing import Optional

import structlog

log = structlog.get_logger(__name__)


def find_files(pattern: str, root: str | Path, limit: int = 0) -> list[Path]:
    """
    Paths under root whose name matches the glob pattern.

    limit > 0 bounds both the directory depth and the number of results,
    so `find '*.py' -l 2` looks two levels deep and returns at most two hits.
    """
    root = Path(root)
    found: list[Path] = []
    for p in root.rglob(pattern):
        if limit > 0:
            if len(p.relative_to(root).parts) > limit:
                continue
            if len(found) >= limit:
                break
        log.debug("found file", path=str(p))
        found.append(p)
    return found


def _destination(src: Path, dest_dir: Path, name: Optional[str]) -> Path:
    return Path(dest_dir) / (name or Path(src).name)


def copy_file(src: str | Path, dest_dir: str | Path, name: Optional[str] = None) -> Path:
    """Copy src into dest_dir (optionally renamed). Returns the new path."""
    dest = _destination(Path(src), Path(dest_dir), name)
    shutil.copy2(src, dest)
    log.info("copied", src=str(src), dest=str(dest))
    return dest


def move_file(src: str | Path, dest_dir: str | Path, name: Optional[str] = None) -> Path:
    """Move src into dest_dir (optionally renamed). Returns the new path."""
    dest = _destination(Path(src), Path(dest_dir), name)
    shutil.move(str(src), str(dest))
    log.info("moved", src=str(src), dest=str(dest))
    return dest
