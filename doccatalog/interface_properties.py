"""Extraction of interface members for type records."""

from doccatalog.helpers.string import collapse_whitespace
from doccatalog.jsdoc import parse_jsdoc
from doccatalog.models import DocTypeProperty
from doccatalog.ts_lexer import Token, tokenize

OPENERS = {"(", "[", "{", "<"}
CLOSERS = {")", "]", "}", ">"}
# A member's type continues onto the next line after these.
CONTINUERS = {"|", "&", "=>", ":", "(", "[", "{", "<", ",", "?"}


def _member_end(tokens: list[Token], i: int) -> int:
    """Index just past the last token of the member starting at ``i``."""
    depth = 0
    k = i
    while k < len(tokens):
        tok = tokens[k]
        if depth == 0 and k > i:
            if tok.kind == "doc" or tok.text in (";", ","):
                return k
            prev = tokens[k - 1]
            if (
                tok.line > prev.line
                and prev.text not in CONTINUERS
                and tok.text not in ("|", "&")
            ):
                return k
        if tok.kind == "punct":
            if tok.text in OPENERS:
                depth += 1
            elif tok.text in CLOSERS:
                depth = max(0, depth - 1)
        k += 1
    return k


def _code_tokens(tokens: list[Token]) -> list[Token]:
    return [t for t in tokens if t.kind not in ("comment", "doc")]


def _span(body: str, tokens: list[Token]) -> str:
    if not tokens:
        return ""
    return collapse_whitespace(body[tokens[0].start : tokens[-1].end])


def _closing(tokens: list[Token], i: int) -> int:
    depth = 0
    for k in range(i, len(tokens)):
        if tokens[k].text in OPENERS:
            depth += 1
        elif tokens[k].text in CLOSERS:
            depth -= 1
            if depth == 0:
                return k
    return len(tokens) - 1


def _member(body: str, tokens: list[Token], doc: str | None) -> DocTypeProperty | None:
    toks = _code_tokens(tokens)
    if toks and toks[0].text == "readonly" and len(toks) > 1 and toks[1].text not in (
        ":",
        "?",
    ):
        toks = toks[1:]
    if not toks:
        return None

    if toks[0].text == "[":
        close = _closing(toks, 0)
        name = _span(body, toks[: close + 1])
        rest = toks[close + 1 :]
    elif toks[0].kind in ("ident", "string", "number"):
        name = toks[0].text.strip("'\"")
        rest = toks[1:]
    else:
        return None

    optional = bool(rest) and rest[0].text == "?"
    if optional:
        rest = rest[1:]

    if rest and rest[0].text in ("(", "<"):
        # Method signature: render it as a function type.
        start = 0
        if rest[0].text == "<":
            start = _closing(rest, 0) + 1
        close = _closing(rest, start) if start < len(rest) else len(rest) - 1
        params = _span(body, rest[: close + 1])
        tail = rest[close + 1 :]
        returns = _span(body, tail[1:]) if tail and tail[0].text == ":" else "void"
        ptype = f"{params} => {returns}"
    elif rest and rest[0].text == ":":
        ptype = _span(body, rest[1:]) or "any"
    else:
        ptype = "any"

    description = parse_jsdoc(doc).description if doc else ""
    return DocTypeProperty(
        name=name, type=ptype, description=description, optional=optional
    )


def interface_properties(body: str | None) -> tuple[DocTypeProperty, ...]:
    """Parse the members between an interface's braces, in source order."""
    if not body:
        return ()
    tokens = tokenize(body)
    props: list[DocTypeProperty] = []
    doc: str | None = None
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok.kind == "doc":
            doc = tok.text
            i += 1
            continue
        if tok.kind == "comment" or tok.text in (";", ","):
            i += 1
            continue
        end = _member_end(tokens, i)
        prop = _member(body, tokens[i:end], doc)
        if prop is not None:
            props.append(prop)
        doc = None
        i = end
    return tuple(props)
