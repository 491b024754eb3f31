"""Line-oriented regex scanner for exported TypeScript declarations.

Kept for sources the lexer scanner cannot handle and for comparison. It does
not understand string or regex literals, so brackets inside them can throw its
balance counting off.
"""

import re

from doccatalog.declaration import Declaration
from doccatalog.signature import split_top_level

DECL_RE = re.compile(
    r"^export\s+(?:declare\s+)?(?:default\s+)?(?:async\s+)?"
    r"(function\*?|const|let|var|interface|type)\s+([A-Za-z_$][\w$]*)"
)
FUNC_HEAD_RE = re.compile(
    r"^export\s+(?:declare\s+)?(?:default\s+)?(?:async\s+)?function\*?\s+[\w$]+\s*"
)
CONST_HEAD_RE = re.compile(
    r"^export\s+(?:declare\s+)?(?:const|let|var)\s+[\w$]+\s*(?::[^=]+?)?=\s*"
)
RETURN_RE = re.compile(r"^\s*:\s*(?P<ret>[^{;]+?)\s*(?:[{;]|$)")
ARROW_RETURN_RE = re.compile(r"^\s*(?::\s*(?P<ret>.+?))?\s*=>", re.DOTALL)
SINGLE_ARROW_RE = re.compile(r"^(?:async\s+)?(?P<param>[A-Za-z_$][\w$]*)\s*=>")
FUNC_EXPR_RE = re.compile(r"^(?:async\s+)?function\*?\s*(?:[\w$]+\s*)?")
DECLARATOR_RE = re.compile(
    r"^([A-Za-z_$][\w$]*)\s*(?::[^=]+?)?=(?![=>])\s*(.*)$", re.DOTALL
)

OPENERS = "([{"
CLOSERS = ")]}"


def _balance(text: str) -> int:
    return sum(text.count(c) for c in OPENERS) - sum(text.count(c) for c in CLOSERS)


def _balanced_end(text: str, start: int, opener: str, closer: str) -> int:
    """Index just past the ``closer`` matching ``text[start] == opener``."""
    depth = 0
    i = start
    while i < len(text):
        if text.startswith("=>", i):
            i += 2
            continue
        if text[i] == opener:
            depth += 1
        elif text[i] == closer:
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return len(text)


def _starts_statement(line: str) -> bool:
    s = line.strip()
    return not s or s.startswith(("export", "/**", "import"))


def _declarators(name: str, value: str) -> list[tuple[str, str]]:
    """Split ``1, B = 2`` into one ``(name, value)`` pair per declarator."""
    parts = split_top_level(value)
    pairs = [(name, parts[0] if parts else value)]
    for part in parts[1:]:
        m = DECLARATOR_RE.match(part)
        if not m:
            return [(name, value)]
        pairs.append((m.group(1), m.group(2).strip()))
    return pairs


class RegexScanner:
    """Finds ``export`` lines and walks upward to their doc comments."""

    name = "regex"

    def __init__(self, max_blank_lines: int = 1) -> None:
        """Initialize with the largest blank-line gap a doc comment may leave."""
        self.max_blank_lines = max_blank_lines

    def scan(self, source: str) -> list[Declaration]:
        """Return every top-level exported declaration in ``source``."""
        lines = source.split("\n")
        decls: list[Declaration] = []
        for i, line in enumerate(lines):
            if line[:1].isspace():
                continue
            m = DECL_RE.match(line)
            if not m:
                continue
            word, name = m.group(1), m.group(2)
            doc = self._doc_above(lines, i)
            rest = "\n".join(lines[i:])
            if word.startswith("function"):
                decl = self._function(rest, name, i + 1, doc)
            elif word == "interface":
                decl = self._interface(lines, i, m.start(1), name, doc)
            elif word == "type":
                decl = self._type_alias(lines, i, m.start(1), name, doc)
            else:
                decls.extend(self._variable(lines, i, rest, name, doc))
                continue
            if decl is not None:
                decls.append(decl)
        return decls

    def _doc_above(self, lines: list[str], i: int) -> str | None:
        j = i - 1
        blanks = 0
        while j >= 0 and not lines[j].strip():
            blanks += 1
            j -= 1
        if j < 0 or blanks > self.max_blank_lines:
            return None
        if not lines[j].rstrip().endswith("*/"):
            return None

        k = j
        while k >= 0 and "/*" not in lines[k]:
            k -= 1
        if k < 0:
            return None
        opener = lines[k].strip()
        if not opener.startswith("/**") or opener.startswith("/**/"):
            return None
        block = [lines[k].strip()] + lines[k + 1 : j + 1]
        return "\n".join(block).rstrip()

    def _callable(self, text: str) -> tuple[str | None, str | None, str]:
        """Split ``<T>(params): Ret`` off the front of ``text``."""
        type_params = None
        if text.startswith("<"):
            end = _balanced_end(text, 0, "<", ">")
            type_params = text[:end]
            text = text[end:].lstrip()
        if not text.startswith("("):
            return type_params, None, text
        end = _balanced_end(text, 0, "(", ")")
        params_text = text[1 : end - 1]
        return type_params, params_text, text[end:]

    def _function(
        self, rest: str, name: str, line: int, doc: str | None
    ) -> Declaration:
        head = FUNC_HEAD_RE.match(rest)
        after = rest[head.end() :] if head else ""
        type_params, params_text, tail = self._callable(after)
        return_type = None
        rm = RETURN_RE.match(tail)
        if params_text is not None and rm:
            return_type = rm.group("ret").strip()
        return Declaration(
            kind="function",
            name=name,
            line=line,
            doc=doc,
            type_params=type_params,
            params_text=params_text,
            return_type=return_type,
        )

    def _variable(
        self, lines: list[str], i: int, rest: str, name: str, doc: str | None
    ) -> list[Declaration]:
        head = CONST_HEAD_RE.match(rest)
        if not head:
            return []
        first = lines[i][head.end() :] if head.end() <= len(lines[i]) else ""
        collected = [first]
        j = i
        while True:
            value = "\n".join(collected)
            done = _balance(value) <= 0 and (
                value.rstrip().endswith(";")
                or j + 1 >= len(lines)
                or _starts_statement(lines[j + 1])
            )
            if done:
                break
            j += 1
            collected.append(lines[j])
        value = "\n".join(collected).strip()
        if value.endswith(";"):
            value = value[:-1].rstrip()
        if not value:
            return []
        return [
            self._declarator(decl_name, decl_value, i + 1, doc)
            for decl_name, decl_value in _declarators(name, value)
        ]

    def _declarator(
        self, name: str, value: str, line: int, doc: str | None
    ) -> Declaration:
        fn = self._function_value(value)
        if fn is not None:
            type_params, params_text, return_type = fn
            return Declaration(
                kind="function",
                name=name,
                line=line,
                doc=doc,
                type_params=type_params,
                params_text=params_text,
                return_type=return_type,
            )
        return Declaration(kind="const", name=name, line=line, doc=doc, value=value)

    def _function_value(
        self, value: str
    ) -> tuple[str | None, str | None, str | None] | None:
        single = SINGLE_ARROW_RE.match(value)
        if single:
            return None, single.group("param"), None

        fexpr = FUNC_EXPR_RE.match(value)
        if fexpr:
            type_params, params_text, tail = self._callable(value[fexpr.end() :])
            rm = RETURN_RE.match(tail)
            return_type = None
            if rm and params_text is not None:
                return_type = rm.group("ret").strip()
            return type_params, params_text, return_type

        body = value[6:].lstrip() if value.startswith("async ") else value
        if body.startswith(("(", "<")):
            type_params, params_text, tail = self._callable(body)
            am = ARROW_RETURN_RE.match(tail)
            if params_text is not None and am:
                ret = am.group("ret")
                return type_params, params_text, ret.strip() if ret else None
        return None

    def _interface(
        self, lines: list[str], i: int, col: int, name: str, doc: str | None
    ) -> Declaration:
        collected: list[str] = []
        seen_open = False
        depth = 0
        for j in range(i, len(lines)):
            chunk = lines[j][col:] if j == i else lines[j]
            collected.append(chunk)
            depth += chunk.count("{") - chunk.count("}")
            seen_open = seen_open or "{" in chunk
            if seen_open and depth <= 0:
                break
        text = "\n".join(collected)
        close = text.rfind("}")
        definition = text[: close + 1] if close >= 0 else text.rstrip()
        open_idx = definition.find("{")
        body = definition[open_idx + 1 : close] if open_idx >= 0 and close >= 0 else ""
        return Declaration(
            kind="interface",
            name=name,
            line=i + 1,
            doc=doc,
            definition=definition,
            body=body,
        )

    def _type_alias(
        self, lines: list[str], i: int, col: int, name: str, doc: str | None
    ) -> Declaration:
        collected: list[str] = []
        for j in range(i, len(lines)):
            chunk = lines[j][col:] if j == i else lines[j]
            collected.append(chunk)
            text = "\n".join(collected)
            if _balance(text) <= 0 and (
                chunk.rstrip().endswith(";")
                or j + 1 >= len(lines)
                or _starts_statement(lines[j + 1])
            ):
                break
        definition = "\n".join(collected).rstrip()
        if definition.endswith(";"):
            definition = definition[:-1].rstrip()
        return Declaration(
            kind="type", name=name, line=i + 1, doc=doc, definition=definition
        )
