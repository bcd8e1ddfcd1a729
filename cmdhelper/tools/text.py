"""Text transforms: base64, URL encoding, case conversion, stats."""

import base64
import binascii
import re
from urllib.parse import quote_plus, unquote_plus

_WORD_SPLIT = re.compile(r"[\W_]+")

CASE_TYPES = ("upper", "lower", "title", "camel", "snake", "kebab")


def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_decode(text: str) -> str:
    """Decode standard base64 to UTF-8 text. ValueError on bad input or non-UTF-8 bytes."""
    try:
        raw = base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Failed to decode: {e}") from e
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError("Decoded data is not valid UTF-8") from e


def url_encode(text: str) -> str:
    """Form encoding: spaces become '+'."""
    return quote_plus(text)


def url_decode(text: str) -> str:
    return unquote_plus(text)


def _words(text: str) -> list[str]:
    return [w for w in _WORD_SPLIT.split(text) if w]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_title(text: str) -> str:
    return " ".join(_capitalize(w) for w in text.split())


def to_camel(text: str) -> str:
    words = _words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(w) for w in words[1:])


def to_snake(text: str) -> str:
    return "_".join(w.lower() for w in _words(text))


def to_kebab(text: str) -> str:
    return "-".join(w.lower() for w in _words(text))


def convert_case(text: str, case_type: str) -> str:
    """Convert text to one of CASE_TYPES. ValueError for an unknown case type."""
    converters = {
        "upper": str.upper,
        "lower": str.lower,
        "title": to_title,
        "camel": to_camel,
        "snake": to_snake,
        "kebab": to_kebab,
    }
    fn = converters.get(case_type.strip().lower())
    if fn is None:
        raise ValueError(f"Invalid case type. Use: {', '.join(CASE_TYPES)}")
    return fn(text)


def text_stats(text: str) -> dict[str, int]:
    return {
        "lines": len(text.splitlines()),
        "words": len(text.split()),
        "characters": len(text),
        "bytes": len(text.encode("utf-8")),
    }


def find_replace(text: str, find: str, replace: str) -> tuple[str, int]:
    """Replace every occurrence; return (result, occurrences)."""
    if not find:
        return text, 0
    return text.replace(find, replace), text.count(find)
