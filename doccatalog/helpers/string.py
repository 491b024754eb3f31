"""String helpers."""

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


def purify(value: object) -> str:
    """Remove accents (combining marks) from a string; non-strings give ''."""
    if not isinstance(value, str):
        return ""
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def capitalize(value: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    return value[:1].upper() + value[1:]


def truncate(value: str, length: int, suffix: str = "...") -> str:
    """Cut ``value`` to ``length`` characters, appending ``suffix`` if cut."""
    if len(value) <= length:
        return value
    return value[:length] + suffix


def collapse_whitespace(value: str) -> str:
    """Replace runs of whitespace (including newlines) with one space."""
    return _WHITESPACE_RE.sub(" ", value).strip()
