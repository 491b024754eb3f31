"""Parsing of TypeScript parameter lists and signature formatting."""

from dataclasses import dataclass

from doccatalog.helpers.string import collapse_whitespace

OPENERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
CLOSERS = {v: k for k, v in OPENERS.items()}


@dataclass(frozen=True)
class SignatureParam:
    """A parameter as written in the declaration."""

    name: str
    type: str | None
    optional: bool = False
    default: str | None = None
    rest: bool = False
    destructured: bool = False


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split ``text`` on ``sep`` outside of brackets, generics and strings."""
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    current: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if quote:
            current.append(ch)
            if ch == "\\" and i + 1 < len(text):
                current.append(text[i + 1])
                i += 2
                continue
            if ch == quote:
                quote = None
            i += 1
            continue
        if ch in "'\"`":
            quote = ch
        elif ch == "=" and i + 1 < len(text) and text[i + 1] == ">":
            # Arrow: the ">" must not close a generic.
            current.append("=>")
            i += 2
            continue
        elif ch in OPENERS:
            depth += 1
        elif ch in CLOSERS:
            depth = max(0, depth - 1)
        elif depth == 0 and text.startswith(sep, i):
            parts.append("".join(current))
            current = []
            i += len(sep)
            continue
        current.append(ch)
        i += 1
    parts.append("".join(current))
    return [p.strip() for p in parts if p.strip()]


def _split_default(text: str) -> tuple[str, str | None]:
    """Split ``x: T = value`` at the first top-level ``=`` that is not ``=>``."""
    depth = 0
    quote: str | None = None
    i = 0
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in "'\"`":
            quote = ch
        elif text.startswith("=>", i):
            i += 2
            continue
        elif ch in OPENERS:
            depth += 1
        elif ch in CLOSERS:
            depth = max(0, depth - 1)
        elif ch == "=" and depth == 0:
            nxt = text[i + 1] if i + 1 < len(text) else ""
            prev = text[i - 1] if i > 0 else ""
            if nxt != "=" and prev not in "=!<>":
                return text[:i].strip(), text[i + 1 :].strip()
        i += 1
    return text.strip(), None


def _top_level_index(text: str, ch: str) -> int:
    depth = 0
    for i, c in enumerate(text):
        if c == ">" and i > 0 and text[i - 1] == "=":
            continue
        if c in OPENERS:
            depth += 1
        elif c in CLOSERS:
            depth = max(0, depth - 1)
        elif c == ch and depth == 0:
            return i
    return -1


def parse_param(text: str) -> SignatureParam | None:
    """Parse one parameter such as ``b?: number`` or ``{ a, b }: Opts = {}``."""
    text = collapse_whitespace(text)
    if not text:
        return None
    text, default = _split_default(text)

    rest = text.startswith("...")
    if rest:
        text = text[3:].lstrip()

    colon = _top_level_index(text, ":")
    if colon >= 0:
        name, ptype = text[:colon].strip(), text[colon + 1 :].strip() or None
    else:
        name, ptype = text.strip(), None

    optional = default is not None
    if name.endswith("?"):
        optional = True
        name = name[:-1].rstrip()

    return SignatureParam(
        name=name,
        type=ptype,
        optional=optional,
        default=default,
        rest=rest,
        destructured=name[:1] in "{[",
    )


def parse_params(params_text: str) -> list[SignatureParam]:
    """Parse the text between a declaration's parentheses."""
    params = []
    for piece in split_top_level(params_text):
        p = parse_param(piece)
        # ``this`` parameters are type annotations only.
        if p and p.name != "this":
            params.append(p)
    return params


def format_param(name: str, ptype: str, *, optional: bool, rest: bool) -> str:
    """Render a parameter for the displayed syntax line."""
    prefix = "..." if rest else ""
    mark = "?" if optional and not rest else ""
    return f"{prefix}{name}{mark}: {ptype}"


def format_syntax(
    name: str,
    type_params: str | None,
    params: list[str],
    return_type: str | None,
) -> str:
    """Build ``name<T>(a: T, b?: number): R`` from its parts."""
    generics = collapse_whitespace(type_params) if type_params else ""
    syntax = f"{name}{generics}({', '.join(params)})"
    if return_type:
        syntax += f": {collapse_whitespace(return_type)}"
    return syntax
