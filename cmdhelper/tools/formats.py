"""JSON / YAML formatting, validation, conversion and dotted-path queries."""

import json
import re
from typing import Any

import yaml

from ..errors import FormatError

_INDEX = re.compile(r"-?[0-9]+")


def _load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON: {e}") from e


def _load_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise FormatError(f"Invalid YAML: {e}") from e


def _dump_yaml(data: Any) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def format_json(text: str) -> str:
    return json.dumps(_load_json(text), indent=2, ensure_ascii=False)


def minify_json(text: str) -> str:
    return json.dumps(_load_json(text), separators=(",", ":"), ensure_ascii=False)


def validate_json(text: str) -> None:
    """Raise FormatError if text is not JSON."""
    _load_json(text)


def format_yaml(text: str) -> str:
    return _dump_yaml(_load_yaml(text))


def validate_yaml(text: str) -> None:
    _load_yaml(text)


def json_to_yaml(text: str) -> str:
    return _dump_yaml(_load_json(text))


def yaml_to_json(text: str) -> str:
    return json.dumps(_load_yaml(text), indent=2, ensure_ascii=False, default=str)


def json_query(text: str, path: str) -> str:
    """
    Pretty JSON of the value at a dotted path, e.g. 'server.ports.0'.

    Numeric segments index into lists. A missing segment raises FormatError
    naming that segment.
    """
    current = _load_json(text)
    for part in path.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        elif isinstance(current, list) and _INDEX.fullmatch(part) and -len(current) <= int(part) < len(current):
            current = current[int(part)]
        else:
            raise FormatError(f"Path not found: {part}")
    return json.dumps(current, indent=2, ensure_ascii=False)
