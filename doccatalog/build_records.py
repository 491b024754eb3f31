"""Assembly of catalog records from declarations and their doc comments."""

import re

from doccatalog.declaration import Declaration
from doccatalog.helpers.string import collapse_whitespace, truncate
from doccatalog.interface_properties import interface_properties
from doccatalog.jsdoc import ParsedDoc
from doccatalog.models import DocConstant, DocFunction, DocParam, DocReturn, DocType
from doccatalog.signature import (
    format_param,
    format_syntax,
    parse_params,
    split_top_level,
)
from doccatalog.ts_lexer import Token, tokenize

AS_CONST_RE = re.compile(r"\s+as\s+const\s*$")
PREVIEW_KEYS = 5
PREVIEW_ITEMS = 3


def merge_params(decl: Declaration, doc: ParsedDoc) -> list[DocParam]:
    """Combine the declared parameter list with the ``@param`` tags.

    The declaration decides names, order and types. Tags add descriptions and
    fill in missing types. Without a parseable declaration the tags are used
    as they are.
    """
    if decl.params_text is None:
        return [
            DocParam(
                name=tag.name,
                type=tag.type or "any",
                description=tag.description,
                optional=tag.optional,
            )
            for tag in doc.params
        ]

    params: list[DocParam] = []
    for idx, sig in enumerate(parse_params(decl.params_text)):
        tag = doc.param(sig.name)
        name = sig.name
        if tag is None and sig.destructured and idx < len(doc.params):
            # A destructured pattern is documented under a plain name.
            tag = doc.params[idx]
            name = tag.name
        ptype = sig.type or (tag.type if tag and tag.type else None) or "any"
        params.append(
            DocParam(
                name=name,
                type=collapse_whitespace(ptype),
                description=tag.description if tag else "",
                optional=sig.optional or bool(tag and tag.optional),
            )
        )
    return params


def resolve_return(decl: Declaration, doc: ParsedDoc) -> DocReturn:
    if doc.returns_type:
        rtype = doc.returns_type
    elif decl.return_type:
        rtype = collapse_whitespace(decl.return_type)
    elif not doc.has_returns:
        rtype = "void"
    else:
        rtype = "any"
    return DocReturn(type=rtype, description=doc.returns_description)


def build_function(
    decl: Declaration, doc: ParsedDoc, category: str, source_file: str, since: str
) -> DocFunction:
    """Build the function record for a documented declaration."""
    params = merge_params(decl, doc)
    returns = resolve_return(decl, doc)
    rest_names = set()
    if decl.params_text is not None:
        rest_names = {p.name for p in parse_params(decl.params_text) if p.rest}
    syntax = format_syntax(
        decl.name,
        decl.type_params,
        [
            format_param(
                p.name, p.type, optional=p.optional, rest=p.name in rest_names
            )
            for p in params
        ],
        returns.type,
    )
    return DocFunction(
        name=decl.name,
        category=category,
        description=doc.description,
        syntax=syntax,
        params=tuple(params),
        returns=returns,
        example=doc.example,
        since=since,
        source_file=source_file,
    )


# -----------------------------
# Constants
# -----------------------------


def clean_value(value: str) -> str:
    """Strip a trailing ``as const`` assertion from an initializer."""
    return AS_CONST_RE.sub("", value.strip())


def _code(tokens: list[Token]) -> list[Token]:
    return [t for t in tokens if t.kind not in ("comment", "doc")]


def _closes_at_end(tokens: list[Token], closer: str) -> bool:
    depth = 0
    for k, tok in enumerate(tokens):
        if tok.kind != "punct":
            continue
        if tok.text in "([{":
            depth += 1
        elif tok.text in ")]}":
            depth -= 1
            if depth == 0:
                return k == len(tokens) - 1 and tok.text == closer
    return False


def constant_kind(value: str) -> str:
    """Classify an initializer as a literal kind, or ``expression``."""
    tokens = _code(tokenize(value))
    if not tokens:
        return "expression"
    first = tokens[0]
    if len(tokens) == 1:
        if first.kind in ("string", "template"):
            return "string"
        if first.kind == "number":
            return "number"
        if first.kind == "regex":
            return "regexp"
        if first.text in ("true", "false"):
            return "boolean"
    if len(tokens) == 2 and first.text == "-" and tokens[1].kind == "number":
        return "number"
    if first.text == "{" and _closes_at_end(tokens, "}"):
        return "object"
    if first.text == "[" and _closes_at_end(tokens, "]"):
        return "array"
    return "expression"


def object_keys(value: str) -> list[str]:
    """Top-level keys of an object literal, in source order."""
    tokens = _code(tokenize(value))
    keys: list[str] = []
    depth = 0
    for k, tok in enumerate(tokens):
        if tok.kind == "punct":
            if tok.text in "([{":
                depth += 1
            elif tok.text in ")]}":
                depth -= 1
            continue
        if depth != 1 or tokens[k - 1].text not in ("{", ","):
            continue
        nxt = tokens[k + 1].text if k + 1 < len(tokens) else ""
        if tok.kind in ("ident", "string", "number") and nxt in (":", ",", "}", "("):
            keys.append(tok.text.strip("'\""))
    return keys


def constant_preview(value: str, kind: str, length: int = 50) -> str:
    """Short display form for a constant's value."""
    if kind == "object":
        keys = object_keys(value)
        if not keys:
            return "{}"
        more = ", ..." if len(keys) > PREVIEW_KEYS else ""
        return "{ " + ", ".join(keys[:PREVIEW_KEYS]) + more + " }"
    if kind == "array":
        items = split_top_level(value.strip()[1:-1])
        shown = [collapse_whitespace(item) for item in items[:PREVIEW_ITEMS]]
        more = ", ..." if len(items) > PREVIEW_ITEMS else ""
        return "[" + ", ".join(shown) + more + "]"
    return truncate(collapse_whitespace(value), length)


def build_constant(
    decl: Declaration,
    doc: ParsedDoc,
    source_file: str,
    since: str,
    preview_length: int = 50,
) -> DocConstant:
    """Build the constant record for a documented declaration."""
    value = clean_value(decl.value or "")
    kind = constant_kind(value)
    return DocConstant(
        name=decl.name,
        category="constants",
        description=doc.description,
        type=kind,
        value=value,
        preview=constant_preview(value, kind, preview_length),
        since=since,
        source_file=source_file,
    )


# -----------------------------
# Types
# -----------------------------


def build_type(
    decl: Declaration, doc: ParsedDoc, category: str, source_file: str, since: str
) -> DocType:
    """Build the type record for an interface or type alias."""
    properties = interface_properties(decl.body) if decl.kind == "interface" else ()
    return DocType(
        name=decl.name,
        category=category,
        kind=decl.kind,
        description=doc.description,
        definition=(decl.definition or "").strip(),
        properties=properties,
        since=since,
        source_file=source_file,
    )
