"""A small TypeScript tokenizer.

It only recognizes what the declaration scanner needs: comments (doc comments
separately), string, template and regex literals, identifiers, numbers and
punctuation. Comment-like or brace-like text inside literals is never emitted
as structure.
"""

import re
from dataclasses import dataclass

IDENT_RE = re.compile(r"[A-Za-z_$][\w$]*")
NUMBER_RE = re.compile(r"\d[\w.]*|\.\d[\w]*")

# After these punctuators a "/" starts a regex literal rather than a division.
REGEX_PRECEDERS = set("(,=:[!&|?{};+-*%<>~^")
REGEX_KEYWORDS = {
    "return",
    "typeof",
    "case",
    "do",
    "else",
    "in",
    "of",
    "new",
    "delete",
    "void",
    "throw",
    "instanceof",
    "yield",
    "await",
}
MULTI_PUNCT = ("...", "=>", "?.")


@dataclass(frozen=True)
class Token:
    """A lexical token with its source span."""

    kind: str  # doc/comment/string/template/regex/ident/number/punct
    text: str
    start: int
    end: int
    line: int


class TsLexer:
    """Tokenizes TypeScript source text."""

    def __init__(self, source: str) -> None:
        """Initialize the lexer over a source string."""
        self.source = source
        self.pos = 0
        self.line = 1
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Return every token in the source, in order."""
        src = self.source
        n = len(src)
        while self.pos < n:
            ch = src[self.pos]
            if ch.isspace():
                if ch == "\n":
                    self.line += 1
                self.pos += 1
                continue
            if src.startswith("//", self.pos):
                end = src.find("\n", self.pos)
                end = n if end == -1 else end
                self._emit("comment", end)
                continue
            if src.startswith("/*", self.pos):
                close = src.find("*/", self.pos + 2)
                end = n if close == -1 else close + 2
                text = src[self.pos : end]
                is_doc = text.startswith("/**") and not text.startswith("/**/")
                self._emit("doc" if is_doc else "comment", end)
                continue
            if ch in "'\"":
                self._emit("string", self._skip_string(self.pos))
                continue
            if ch == "`":
                self._emit("template", self._skip_template(self.pos))
                continue
            if ch == "/" and self._regex_allowed():
                end = self._skip_regex(self.pos)
                if end is not None:
                    self._emit("regex", end)
                    continue
            m = IDENT_RE.match(src, self.pos)
            if m:
                self._emit("ident", m.end())
                continue
            m = NUMBER_RE.match(src, self.pos)
            if m:
                self._emit("number", m.end())
                continue
            for punct in MULTI_PUNCT:
                if src.startswith(punct, self.pos):
                    self._emit("punct", self.pos + len(punct))
                    break
            else:
                self._emit("punct", self.pos + 1)
        return self.tokens

    def _emit(self, kind: str, end: int) -> None:
        text = self.source[self.pos : end]
        self.tokens.append(Token(kind, text, self.pos, end, self.line))
        self.line += text.count("\n")
        self.pos = end

    def _regex_allowed(self) -> bool:
        prev = self._last_significant()
        if prev is None:
            return True
        if prev.kind == "punct":
            return prev.text in REGEX_PRECEDERS or prev.text == "=>"
        if prev.kind == "ident":
            return prev.text in REGEX_KEYWORDS
        return False

    def _last_significant(self) -> Token | None:
        for tok in reversed(self.tokens):
            if tok.kind not in {"comment", "doc"}:
                return tok
        return None

    def _skip_string(self, start: int) -> int:
        src = self.source
        quote = src[start]
        i = start + 1
        while i < len(src):
            c = src[i]
            if c == "\\":
                i += 2
                continue
            if c == quote or c == "\n":
                return i + 1
            i += 1
        return len(src)

    def _skip_template(self, start: int) -> int:
        src = self.source
        i = start + 1
        while i < len(src):
            c = src[i]
            if c == "\\":
                i += 2
                continue
            if c == "`":
                return i + 1
            if src.startswith("${", i):
                i = self._skip_code_block(i + 2)
                continue
            i += 1
        return len(src)

    def _skip_code_block(self, start: int) -> int:
        """Skip a ``${ ... }`` substitution and return the index after ``}``."""
        src = self.source
        depth = 1
        i = start
        while i < len(src):
            c = src[i]
            if c in "'\"":
                i = self._skip_string(i)
                continue
            if c == "`":
                i = self._skip_template(i)
                continue
            if src.startswith("/*", i):
                close = src.find("*/", i + 2)
                i = len(src) if close == -1 else close + 2
                continue
            if c == "{":
                depth += 1
            elif c == "}":
                depth -= 1
                if depth == 0:
                    return i + 1
            i += 1
        return len(src)

    def _skip_regex(self, start: int) -> int | None:
        """Return the end of a regex literal, or None if this is not one."""
        src = self.source
        i = start + 1
        in_class = False
        while i < len(src):
            c = src[i]
            if c == "\n":
                return None
            if c == "\\":
                i += 2
                continue
            if c == "[":
                in_class = True
            elif c == "]":
                in_class = False
            elif c == "/" and not in_class:
                i += 1
                while i < len(src) and (src[i].isalnum() or src[i] == "_"):
                    i += 1
                return i
            i += 1
        return None


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` with a fresh lexer."""
    return TsLexer(source).tokenize()


def blank_lines_between(source: str, start: int, end: int) -> int:
    """Count empty lines in the whitespace gap ``source[start:end]``."""
    gap = source[start:end]
    return max(0, gap.count("\n") - 1)
