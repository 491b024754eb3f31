"""Selection of the declaration scanning strategy."""

from typing import Protocol

from doccatalog.declaration import Declaration
from doccatalog.lexer_scanner import LexerScanner
from doccatalog.regex_scanner import RegexScanner

SCANNERS = {"lexer": LexerScanner, "regex": RegexScanner}


class SourceScanner(Protocol):
    """Turns TypeScript source text into exported declarations."""

    name: str

    def scan(self, source: str) -> list[Declaration]: ...


def get_scanner(name: str, max_blank_lines: int = 1) -> SourceScanner:
    """Build the scanner registered under ``name``."""
    try:
        cls = SCANNERS[name]
    except KeyError:
        msg = f"Unknown scanner {name!r}; expected one of {sorted(SCANNERS)}"
        raise ValueError(msg) from None
    return cls(max_blank_lines=max_blank_lines)
