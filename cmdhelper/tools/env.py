"""Environment variables: list, get, set, load from and export to files."""

import os
from pathlib import Path
from typing import Optional

import structlog

log = structlog.get_logger(__name__)


def list_env() -> list[tuple[str, str]]:
    return sorted(os.environ.items())


def get_env(key: str) -> str:
    """Value of key; KeyError if unset."""
    return os.environ[key]


def set_env(key: str, value: str) -> None:
    """Set key for this process and its children only."""
    os.environ[key] = value
    log.info("env set", key=key)


def parse_env_assignment(text: str) -> tuple[str, str]:
    """'KEY=VALUE' -> ('KEY', 'VALUE'). ValueError without '=' or with an empty key."""
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise ValueError(f"Expected KEY=VALUE, got: {text!r}")
    return key.strip(), value


def _unquote(value: str) -> str:
    return value.strip('"').strip("'")


def parse_env_lines(content: str) -> list[tuple[str, str]]:
    """KEY=VALUE pairs from .env text. Blank lines and # comments are skipped."""
    pairs = []
    for raw in content.splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        pairs.append((key.strip(), _unquote(value.strip())))
    return pairs


def load_env_file(path: str | Path) -> list[tuple[str, str]]:
    """Set every variable from a .env file into this process. Returns the loaded pairs."""
    pairs = parse_env_lines(Path(path).read_text(encoding="utf-8"))
    for key, value in pairs:
        os.environ[key] = value
    log.info("env file loaded", path=str(path), count=len(pairs))
    return pairs


def export_env(path: str | Path, name_filter: Optional[str] = None) -> int:
    """Write KEY="value" lines, sorted by key. name_filter is a case-insensitive substring."""
    needle = name_filter.lower() if name_filter else None
    lines = []
    for key, value in list_env():
        if needle and needle not in key.lower():
            continue
        escaped = value.replace('"', '\\"')
        lines.append(f'{key}="{escaped}"\n')
    Path(path).write_text("".join(lines), encoding="utf-8")
    log.info("env exported", path=str(path), count=len(lines))
    return len(lines)
